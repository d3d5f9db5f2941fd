"""Pytest fixtures for combogen tests."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from combogen.db.connection import DatabaseConnection, set_db
from combogen.menu.models import Category, DailyMenu, MenuItem, Taste


def make_item(
    name: str,
    category: Category,
    calories: int,
    taste: Taste,
    popularity: int = 80,
) -> MenuItem:
    return MenuItem(name, category, calories, taste, popularity)


@pytest.fixture
def temp_db():
    """Create a temporary database with schema."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    db = DatabaseConnection(db_path)
    db.initialize_schema()

    yield db

    # Cleanup
    db_path.unlink(missing_ok=True)


@pytest.fixture
def global_db(temp_db):
    """Install the temporary database as the global instance."""
    set_db(temp_db)
    yield temp_db
    set_db(None)


@pytest.fixture
def thursday_menu():
    """Menu where three disjoint spicy/savory combos of 700 kcal exist.

    Every item has popularity 80, so every combo scores 240.
    """
    return DailyMenu(
        mains=[
            make_item(f"Curry {i}", Category.MAIN, 400, Taste.SPICY) for i in (1, 2, 3)
        ],
        sides=[
            make_item(f"Rice {i}", Category.SIDE, 200, Taste.SAVORY) for i in (1, 2, 3)
        ],
        drinks=[
            make_item(f"Soda {i}", Category.DRINK, 100, Taste.SAVORY) for i in (1, 2, 3)
        ],
    )


@pytest.fixture
def tiny_catalog():
    """Catalog with two mains and plenty of sides and drinks."""
    return [
        make_item("Dal", Category.MAIN, 400, Taste.SAVORY, 70),
        make_item("Biryani", Category.MAIN, 600, Taste.SPICY, 100),
        *[make_item(f"Side {i}", Category.SIDE, 150, Taste.SWEET, 50) for i in range(5)],
        *[make_item(f"Drink {i}", Category.DRINK, 90, Taste.SWEET, 0) for i in range(5)],
    ]
