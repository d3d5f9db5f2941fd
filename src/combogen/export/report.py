"""Shareable JSON report of a day's combos.

Item names lose any trailing ``_<digits>`` suffix, popularity is shown on a
0-3 scale, and each combo gets a short reasoning line.
"""

from __future__ import annotations

import re
from typing import Any

from combogen.menu.models import Combo, DayOutput

_SUFFIX_RE = re.compile(r"_\d+$")

SPICY_DAYS = {"Thursday", "Friday"}


def clean_name(name: str) -> str:
    return _SUFFIX_RE.sub("", name)


def combo_reasoning(combo: Combo, day: str) -> str:
    """Explain a combo in terms of taste, popularity and calories."""
    reasons: list[str] = []

    profile = combo.taste_profile
    if profile == "spicy":
        if day in SPICY_DAYS:
            reasons.append(f"Spicy profile fits {day} trends")
        else:
            reasons.append(f"Spicy profile allowed on {day}")
    elif profile == "sweet":
        reasons.append("Sweet profile balances daily variety")
    elif profile == "savory":
        reasons.append("Savory profile meets daily requirements")
    else:
        reasons.append("Mixed taste profile adds variety")

    if combo.popularity_score > 240:
        reasons.append("highly popular choices")
    elif combo.popularity_score > 210:
        reasons.append("popular choices")
    else:
        reasons.append("balanced popularity")

    if combo.total_calories >= 700:
        reasons.append("high-energy target met")
    elif combo.total_calories >= 650:
        reasons.append("calorie target met")
    else:
        reasons.append("light calorie target achieved")

    return ", ".join(reasons)


def build_combo_report(output: DayOutput) -> list[dict[str, Any]]:
    """Build the per-combo report for a day's output."""
    return [
        {
            "combo_id": index,
            "main": clean_name(combo.main.name),
            "side": clean_name(combo.side.name),
            "drink": clean_name(combo.drink.name),
            "total_calories": combo.total_calories,
            "popularity_score": round(combo.popularity_score / 100, 1),
            "reasoning": combo_reasoning(combo, output.day),
        }
        for index, combo in enumerate(output.combos, start=1)
    ]


def report_filename(output: DayOutput) -> str:
    return f"combo-output-{output.day.lower()}-{output.date}.json"
