"""Daily menu sampling.

Draws a bounded random subset of the catalog per category. Categories with
fewer catalog items than requested are topped up with jittered copies of
existing items so every non-empty category reaches its target count.
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Optional

from combogen.menu.catalog import MENU_ITEMS, get_items_by_category
from combogen.menu.models import Category, DailyMenu, MenuItem

logger = logging.getLogger(__name__)

DEFAULT_TARGET_COUNTS: dict[Category, int] = {
    Category.MAIN: 5,
    Category.SIDE: 4,
    Category.DRINK: 4,
}

# Max absolute calorie change applied to a backfilled copy
CALORIE_JITTER: dict[Category, int] = {
    Category.MAIN: 50,
    Category.SIDE: 30,
    Category.DRINK: 20,
}

POPULARITY_JITTER = 5


def take_random(
    items: list[MenuItem], count: int, rng: random.Random
) -> list[MenuItem]:
    """Shuffle a copy of items and return the first `count` of them."""
    shuffled = list(items)
    rng.shuffle(shuffled)
    return shuffled[:count]


def _unique_name(base: str, taken: set[str]) -> str:
    n = 2
    while f"{base} #{n}" in taken:
        n += 1
    return f"{base} #{n}"


def jitter_item(
    source: MenuItem, taken_names: set[str], rng: random.Random
) -> MenuItem:
    """Make a perturbed copy of a menu item.

    Args:
        source: Item to copy
        taken_names: Names already on the menu (a fresh name is picked)
        rng: Random number generator

    Returns:
        New MenuItem with calories within the category jitter bound of the
        source (never below 1) and popularity clamped to [0, 100].
    """
    calorie_bound = CALORIE_JITTER[source.category]
    calories = max(1, source.calories + rng.randint(-calorie_bound, calorie_bound))
    popularity = source.popularity + rng.randint(-POPULARITY_JITTER, POPULARITY_JITTER)
    popularity = min(100, max(0, popularity))

    return replace(
        source,
        name=_unique_name(source.name, taken_names),
        calories=calories,
        popularity=popularity,
    )


def sample_category(
    items: list[MenuItem], target: int, rng: random.Random
) -> list[MenuItem]:
    """Draw `target` items from one category, backfilling if it is too small."""
    selected = take_random(items, min(target, len(items)), rng)
    if not items or len(selected) >= target:
        return selected

    shortfall = target - len(selected)
    logger.debug(
        "Backfilling %d %s item(s) from %d original(s)",
        shortfall,
        items[0].category.value,
        len(items),
    )
    taken = {item.name for item in selected}
    for _ in range(shortfall):
        copy = jitter_item(rng.choice(items), taken, rng)
        taken.add(copy.name)
        selected.append(copy)

    return selected


def sample_daily_menu(
    catalog: Optional[list[MenuItem]] = None,
    target_counts: Optional[dict[Category, int]] = None,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> DailyMenu:
    """Draw today's menu from the catalog.

    Args:
        catalog: Items to draw from (defaults to the built-in catalog)
        target_counts: Items wanted per category (defaults to 5/4/4)
        rng: Random number generator; created from `seed` when omitted
        seed: Random seed for reproducibility

    Returns:
        DailyMenu with one list per category.
    """
    catalog = MENU_ITEMS if catalog is None else catalog
    counts = {**DEFAULT_TARGET_COUNTS, **(target_counts or {})}
    rng = rng or random.Random(seed)

    menu = DailyMenu(
        mains=sample_category(
            get_items_by_category(Category.MAIN, catalog), counts[Category.MAIN], rng
        ),
        sides=sample_category(
            get_items_by_category(Category.SIDE, catalog), counts[Category.SIDE], rng
        ),
        drinks=sample_category(
            get_items_by_category(Category.DRINK, catalog), counts[Category.DRINK], rng
        ),
    )
    logger.debug(
        "Sampled menu: %d mains, %d sides, %d drinks",
        len(menu.mains),
        len(menu.sides),
        len(menu.drinks),
    )
    return menu
