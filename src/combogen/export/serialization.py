"""Serialization utilities for day outputs and user preferences.

These functions convert DayOutput and UserPreferences to JSON-ready dicts
and back. Round-tripping a DayOutput reproduces the same combos, and the
restored combos point at the restored menu's items rather than copies.
"""

from __future__ import annotations

from typing import Any

from combogen.menu.models import (
    ANY_TASTE,
    MIXED_PROFILE,
    Category,
    Combo,
    DailyMenu,
    DayOutput,
    MenuItem,
    Taste,
    UserPreferences,
)

KNOWN_TASTES = {t.value for t in Taste} | {ANY_TASTE, MIXED_PROFILE}


def serialize_item(item: MenuItem) -> dict[str, Any]:
    return {
        "name": item.name,
        "category": item.category.value,
        "calories": item.calories,
        "taste": item.taste.value,
        "popularity": item.popularity,
    }


def deserialize_item(data: dict[str, Any]) -> MenuItem:
    return MenuItem(
        name=data["name"],
        category=Category(data["category"]),
        calories=int(data["calories"]),
        taste=Taste(data["taste"]),
        popularity=int(data["popularity"]),
    )


def serialize_combo(combo: Combo) -> dict[str, Any]:
    return {
        "main": serialize_item(combo.main),
        "side": serialize_item(combo.side),
        "drink": serialize_item(combo.drink),
        "total_calories": combo.total_calories,
        "taste_profile": combo.taste_profile,
        "popularity_score": combo.popularity_score,
        "fallback": combo.fallback,
    }


def serialize_menu(menu: DailyMenu) -> dict[str, Any]:
    return {
        "mains": [serialize_item(i) for i in menu.mains],
        "sides": [serialize_item(i) for i in menu.sides],
        "drinks": [serialize_item(i) for i in menu.drinks],
    }


def deserialize_menu(data: dict[str, Any]) -> DailyMenu:
    return DailyMenu(
        mains=[deserialize_item(i) for i in data.get("mains", [])],
        sides=[deserialize_item(i) for i in data.get("sides", [])],
        drinks=[deserialize_item(i) for i in data.get("drinks", [])],
    )


def serialize_day_output(output: DayOutput) -> dict[str, Any]:
    """Convert a DayOutput to a JSON-serializable dict.

    Derived combo values (total calories, popularity score) are included for
    readers of the JSON; they are recomputed from the items on load.
    """
    return {
        "day": output.day,
        "date": output.date,
        "combos": [serialize_combo(c) for c in output.combos],
        "menu": serialize_menu(output.menu),
    }


def deserialize_day_output(data: dict[str, Any]) -> DayOutput:
    """Rebuild a DayOutput from serialize_day_output() data.

    Combo items are resolved against the restored menu by category and
    name so the combos share the menu's MenuItem instances.
    """
    menu = deserialize_menu(data.get("menu", {}))
    by_key = {(item.category, item.name): item for item in menu.all_items}

    def resolve(item_data: dict[str, Any]) -> MenuItem:
        item = deserialize_item(item_data)
        return by_key.get((item.category, item.name), item)

    combos = [
        Combo(
            main=resolve(c["main"]),
            side=resolve(c["side"]),
            drink=resolve(c["drink"]),
            taste_profile=c["taste_profile"],
            fallback=bool(c.get("fallback", False)),
        )
        for c in data.get("combos", [])
    ]

    return DayOutput(
        day=data["day"],
        date=data["date"],
        combos=combos,
        menu=menu,
    )


def serialize_preferences(prefs: UserPreferences) -> dict[str, Any]:
    """Convert UserPreferences to a JSON-serializable dict."""
    return {
        "dietary_restrictions": list(prefs.dietary_restrictions),
        "preferred_tastes": list(prefs.preferred_tastes),
        "calorie_range": {
            "min": prefs.calorie_range[0],
            "max": prefs.calorie_range[1],
        },
        "avoid_ingredients": list(prefs.avoid_ingredients),
    }


def deserialize_preferences(data: dict[str, Any]) -> UserPreferences:
    """Rebuild UserPreferences, filling missing fields with defaults."""
    defaults = UserPreferences()
    calorie_data = data.get("calorie_range", {})

    return UserPreferences(
        dietary_restrictions=list(
            data.get("dietary_restrictions", defaults.dietary_restrictions)
        ),
        preferred_tastes=list(data.get("preferred_tastes", defaults.preferred_tastes)),
        calorie_range=(
            int(calorie_data.get("min", defaults.calorie_range[0])),
            int(calorie_data.get("max", defaults.calorie_range[1])),
        ),
        avoid_ingredients=list(
            data.get("avoid_ingredients", defaults.avoid_ingredients)
        ),
    )


def validate_preferences(prefs: UserPreferences) -> list[str]:
    """Check preferences for values the generator cannot use sensibly.

    Args:
        prefs: Preferences to check

    Returns:
        List of problems (empty if valid).
    """
    problems: list[str] = []

    cal_min, cal_max = prefs.calorie_range
    if cal_min <= 0 or cal_max <= 0:
        problems.append("Calorie bounds must be positive")
    if cal_min > cal_max:
        problems.append(f"Minimum calories ({cal_min}) exceed maximum ({cal_max})")

    unknown = [t for t in prefs.preferred_tastes if t not in KNOWN_TASTES]
    if unknown:
        problems.append(f"Unknown tastes: {', '.join(unknown)}")

    return problems
