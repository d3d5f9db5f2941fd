"""One full generation cycle against the local store.

Loads preferences and history, reuses an already stored output for the
date unless regeneration is requested, otherwise samples a menu, generates
combos and saves both the output and the appended history.
"""

from __future__ import annotations

import logging
import random
from datetime import date
from typing import Optional

from combogen.config.settings import Settings
from combogen.dates import resolve_day
from combogen.db.connection import DatabaseConnection
from combogen.db.queries import DayOutputQueries, HistoryQueries, PreferenceQueries
from combogen.generator.combos import generate_daily_combos
from combogen.menu.models import DayOutput
from combogen.menu.sampler import sample_daily_menu

logger = logging.getLogger(__name__)


def run_generation_cycle(
    db: DatabaseConnection,
    settings: Settings,
    on: Optional[date] = None,
    seed: Optional[int] = None,
    regenerate: bool = False,
) -> tuple[DayOutput, bool]:
    """Produce the combos for a date.

    The whole cycle runs inside one connection, so history is loaded,
    extended and saved as a single transaction.

    Args:
        db: Database holding preferences, history and outputs
        settings: Application settings (menu sizes, generation bounds)
        on: Date to generate for (defaults to today)
        seed: Random seed for the menu draw
        regenerate: Ignore a stored output for this date

    Returns:
        Tuple of (day output, True if it was loaded instead of generated)
    """
    day_name, date_key = resolve_day(on)

    with db.get_connection() as conn:
        if not regenerate:
            stored = DayOutputQueries.get(conn, date_key)
            if stored is not None:
                logger.info("Reusing stored combos for %s", date_key)
                return stored, True

        preferences = PreferenceQueries.load(conn)
        history = HistoryQueries.load_history(conn)

        menu = sample_daily_menu(
            target_counts=settings.menu.target_counts(),
            rng=random.Random(seed),
        )
        combos = generate_daily_combos(
            menu,
            day_name,
            date_key,
            preferences,
            history,
            limits=settings.generator.limits(),
        )

        output = DayOutput(day=day_name, date=date_key, combos=combos, menu=menu)
        DayOutputQueries.save(conn, date_key, output)
        inserted = HistoryQueries.save_history(conn, history)
        logger.info(
            "Generated %d combo(s) for %s %s, %d history entries added",
            len(combos),
            day_name,
            date_key,
            inserted,
        )

    return output, False
