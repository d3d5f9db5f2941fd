"""Constrained combo generation."""

from combogen.generator.combos import (
    GenerationLimits,
    generate_daily_combos,
    get_taste_profile,
    is_combo_unique,
)

__all__ = [
    "GenerationLimits",
    "generate_daily_combos",
    "get_taste_profile",
    "is_combo_unique",
]
