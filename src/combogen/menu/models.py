"""Data models for menu items, daily menus and combos.

A generation cycle draws a DailyMenu from the catalog, builds up to three
Combos from it and wraps everything in a DayOutput, which is the unit that
gets persisted and displayed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Category(Enum):
    """Menu categories a combo is built from."""

    MAIN = "main"
    SIDE = "side"
    DRINK = "drink"


class Taste(Enum):
    """Taste labels carried by each menu item."""

    SWEET = "sweet"
    SAVORY = "savory"
    SPICY = "spicy"


MIXED_PROFILE = "mixed"
ANY_TASTE = "any"


@dataclass(frozen=True)
class MenuItem:
    """A single dish or drink.

    Attributes:
        name: Display name, unique within a daily menu
        category: Which slot of a combo this item can fill
        calories: Energy per serving (kcal)
        taste: Dominant taste
        popularity: Popularity rating in [0, 100]
    """

    name: str
    category: Category
    calories: int
    taste: Taste
    popularity: int


@dataclass
class DailyMenu:
    """Items drawn for a single day, one ordered list per category."""

    mains: list[MenuItem] = field(default_factory=list)
    sides: list[MenuItem] = field(default_factory=list)
    drinks: list[MenuItem] = field(default_factory=list)

    @property
    def all_items(self) -> list[MenuItem]:
        return [*self.mains, *self.sides, *self.drinks]


@dataclass
class Combo:
    """One main, one side and one drink served together.

    Attributes:
        main: Main course (shared with the DailyMenu)
        side: Side dish
        drink: Drink
        taste_profile: Majority taste of the three items, or "mixed"
        fallback: True when the combo bypassed the constraint filters
    """

    main: MenuItem
    side: MenuItem
    drink: MenuItem
    taste_profile: str
    fallback: bool = False

    @property
    def items(self) -> tuple[MenuItem, MenuItem, MenuItem]:
        return (self.main, self.side, self.drink)

    @property
    def total_calories(self) -> int:
        return self.main.calories + self.side.calories + self.drink.calories

    @property
    def popularity_score(self) -> int:
        return self.main.popularity + self.side.popularity + self.drink.popularity

    @property
    def signature(self) -> str:
        return combo_signature(self.main, self.side, self.drink)


def combo_signature(main: MenuItem, side: MenuItem, drink: MenuItem) -> str:
    """Identity key used to compare combos across days."""
    return f"{main.name}|{side.name}|{drink.name}"


@dataclass
class UserPreferences:
    """User-level filters applied on top of the system rules.

    Attributes:
        dietary_restrictions: Stored but not used for filtering yet
        preferred_tastes: Allowed taste profiles; empty or containing
            "any" disables the filter
        calorie_range: (min, max) kcal per combo; can only narrow the
            system window
        avoid_ingredients: Stored but not used for filtering yet
    """

    dietary_restrictions: list[str] = field(default_factory=list)
    preferred_tastes: list[str] = field(default_factory=lambda: [ANY_TASTE])
    calorie_range: tuple[int, int] = (550, 800)
    avoid_ingredients: list[str] = field(default_factory=list)


@dataclass
class DayOutput:
    """Everything produced by one generation cycle, keyed by date."""

    day: str
    date: str
    combos: list[Combo]
    menu: DailyMenu


# Date key -> signatures generated that day, in generation order
ComboHistory = dict[str, list[str]]
