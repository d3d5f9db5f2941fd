"""Combo generation for a single day.

Builds up to three combos from a daily menu. Each slot walks the
mains x sides x drinks product in menu order and takes the first triple
that passes every rule:

1. Calorie window (system bounds narrowed by user preferences)
2. Day-specific taste coverage
3. User taste preference
4. No repeat of a combo served on the two previous history dates
5. Popularity within a tolerance of the combos already picked today

When no triple passes, the slot falls back to the first unused item of
each category. Items are never reused across slots of the same day.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterator, Optional

from combogen.menu.models import (
    ANY_TASTE,
    MIXED_PROFILE,
    Combo,
    ComboHistory,
    DailyMenu,
    MenuItem,
    Taste,
    UserPreferences,
    combo_signature,
)

logger = logging.getLogger(__name__)

WEEKEND_TASTES = frozenset(Taste)

# Tastes a combo must cover on each weekday
ALLOWED_TASTES: dict[str, frozenset[Taste]] = {
    "Monday": frozenset({Taste.SWEET, Taste.SAVORY}),
    "Tuesday": frozenset({Taste.SWEET, Taste.SAVORY}),
    "Wednesday": frozenset({Taste.SWEET, Taste.SAVORY}),
    "Thursday": frozenset({Taste.SPICY, Taste.SAVORY}),
    "Friday": frozenset({Taste.SPICY, Taste.SAVORY}),
    "Saturday": WEEKEND_TASTES,
    "Sunday": WEEKEND_TASTES,
}


@dataclass
class GenerationLimits:
    """Tunable bounds for combo generation.

    Attributes:
        combos_per_day: Number of combo slots to fill
        max_attempts: Search passes per slot before falling back
        calorie_floor: Lowest total kcal ever accepted
        calorie_ceiling: Highest total kcal ever accepted
        popularity_tolerance: Max distance from the running popularity mean
        lookback_days: History dates before today checked for repeats
    """

    combos_per_day: int = 3
    max_attempts: int = 1000
    calorie_floor: int = 550
    calorie_ceiling: int = 800
    popularity_tolerance: float = 10
    lookback_days: int = 2


def get_taste_profile(main: MenuItem, side: MenuItem, drink: MenuItem) -> str:
    """Return the taste shared by at least two items, or "mixed"."""
    counts = Counter(item.taste for item in (main, side, drink))
    taste, count = counts.most_common(1)[0]
    if count >= 2:
        return taste.value
    return MIXED_PROFILE


def is_valid_taste_for_day(
    day_name: str, main: MenuItem, side: MenuItem, drink: MenuItem
) -> bool:
    """Check that the combo covers every taste required on this day.

    Coverage means at least one item per required taste, not that every
    item matches. Days that allow all tastes (and unknown day names)
    always pass.
    """
    required = ALLOWED_TASTES.get(day_name, WEEKEND_TASTES)
    if required == WEEKEND_TASTES:
        return True

    tastes = {main.taste, side.taste, drink.taste}
    return required <= tastes


def matches_preferred_tastes(taste_profile: str, preferences: UserPreferences) -> bool:
    preferred = preferences.preferred_tastes
    if not preferred or ANY_TASTE in preferred:
        return True
    return taste_profile in preferred


def get_calorie_window(
    preferences: UserPreferences, limits: GenerationLimits
) -> tuple[int, int]:
    """Combine system bounds with the user's range (user can only narrow)."""
    pref_min, pref_max = preferences.calorie_range
    return (
        max(limits.calorie_floor, pref_min),
        min(limits.calorie_ceiling, pref_max),
    )


def recent_signatures(
    history: ComboHistory, date_key: str, lookback_days: int = 2
) -> set[str]:
    """Collect signatures from the history dates just before `date_key`.

    The window is positional over the sorted history keys, so gaps in the
    calendar are skipped. Empty when `date_key` has no history entry.
    """
    dates = sorted(history)
    if date_key not in dates:
        return set()

    current_index = dates.index(date_key)
    recent: set[str] = set()
    for prior in dates[max(0, current_index - lookback_days):current_index]:
        recent.update(history[prior])
    return recent


def is_combo_unique(
    signature: str,
    history: ComboHistory,
    date_key: str,
    lookback_days: int = 2,
) -> bool:
    """Check that a signature was not served in the lookback window."""
    return signature not in recent_signatures(history, date_key, lookback_days)


def is_popularity_balanced(
    popularity_score: float, combos: list[Combo], tolerance: float = 10
) -> bool:
    """Check the score against the mean of combos picked so far.

    Always passes for the first combo of a run.
    """
    if not combos:
        return True
    average = sum(c.popularity_score for c in combos) / len(combos)
    return abs(popularity_score - average) <= tolerance


def _available(items: list[MenuItem], used_names: set[str]) -> Iterator[MenuItem]:
    return (item for item in items if item.name not in used_names)


def find_valid_combo(
    menu: DailyMenu,
    day_name: str,
    date_key: str,
    preferences: UserPreferences,
    history: ComboHistory,
    combos: list[Combo],
    used_names: set[str],
    limits: GenerationLimits,
) -> Optional[Combo]:
    """Return the first triple in menu order that passes every rule."""
    cal_min, cal_max = get_calorie_window(preferences, limits)
    recent = recent_signatures(history, date_key, limits.lookback_days)

    for main in _available(menu.mains, used_names):
        for side in _available(menu.sides, used_names):
            for drink in _available(menu.drinks, used_names):
                total_calories = main.calories + side.calories + drink.calories
                if total_calories < cal_min or total_calories > cal_max:
                    continue

                if not is_valid_taste_for_day(day_name, main, side, drink):
                    continue

                taste_profile = get_taste_profile(main, side, drink)
                if not matches_preferred_tastes(taste_profile, preferences):
                    continue

                if combo_signature(main, side, drink) in recent:
                    continue

                popularity_score = main.popularity + side.popularity + drink.popularity
                if not is_popularity_balanced(
                    popularity_score, combos, limits.popularity_tolerance
                ):
                    continue

                return Combo(main, side, drink, taste_profile=taste_profile)

    return None


def build_fallback_combo(menu: DailyMenu, used_names: set[str]) -> Optional[Combo]:
    """Pair the first unused item of each category, ignoring all rules.

    Returns None when any category has nothing left.
    """
    main = next(_available(menu.mains, used_names), None)
    side = next(_available(menu.sides, used_names), None)
    drink = next(_available(menu.drinks, used_names), None)
    if main is None or side is None or drink is None:
        return None

    return Combo(
        main,
        side,
        drink,
        taste_profile=get_taste_profile(main, side, drink),
        fallback=True,
    )


def generate_daily_combos(
    menu: DailyMenu,
    day_name: str,
    date_key: str,
    preferences: UserPreferences,
    history: ComboHistory,
    limits: Optional[GenerationLimits] = None,
) -> list[Combo]:
    """Generate the day's combos.

    Args:
        menu: Today's menu
        day_name: Weekday name, e.g. "Thursday"
        date_key: ISO date (YYYY-MM-DD) the combos are generated for
        preferences: User preferences
        history: Signatures per date (modified in place: this run's
            signatures are appended under `date_key`)
        limits: Generation bounds (defaults apply when omitted)

    Returns:
        Up to `limits.combos_per_day` combos. Fewer are returned only when
        some category runs out of unused items.
    """
    limits = limits or GenerationLimits()
    combos: list[Combo] = []
    used_names: set[str] = set()

    # Register today so the lookback window applies from the first slot on
    todays_signatures = history.setdefault(date_key, [])

    for slot in range(limits.combos_per_day):
        combo: Optional[Combo] = None
        attempts = 0

        while attempts < limits.max_attempts and combo is None:
            attempts += 1
            combo = find_valid_combo(
                menu,
                day_name,
                date_key,
                preferences,
                history,
                combos,
                used_names,
                limits,
            )

        if combo is None:
            combo = build_fallback_combo(menu, used_names)
            if combo is None:
                logger.warning(
                    "Slot %d skipped on %s: menu has no unused items left",
                    slot + 1,
                    date_key,
                )
                continue
            logger.info(
                "Slot %d on %s fell back after %d attempt(s): %s",
                slot + 1,
                date_key,
                attempts,
                combo.signature,
            )

        combos.append(combo)
        used_names.update(item.name for item in combo.items)
        todays_signatures.append(combo.signature)

    if len(combos) < limits.combos_per_day:
        logger.warning(
            "Only %d of %d combos generated for %s",
            len(combos),
            limits.combos_per_day,
            date_key,
        )

    return combos
