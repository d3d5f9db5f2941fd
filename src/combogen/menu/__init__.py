"""Menu catalog, data models and daily sampling."""

from __future__ import annotations

from combogen.menu.models import (
    Category,
    Combo,
    ComboHistory,
    DailyMenu,
    DayOutput,
    MenuItem,
    Taste,
    UserPreferences,
    combo_signature,
)
from combogen.menu.sampler import sample_daily_menu

__all__ = [
    "Category",
    "Combo",
    "ComboHistory",
    "DailyMenu",
    "DayOutput",
    "MenuItem",
    "Taste",
    "UserPreferences",
    "combo_signature",
    "sample_daily_menu",
]
