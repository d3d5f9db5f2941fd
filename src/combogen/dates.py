"""Resolve the weekday name and date key a generation cycle runs for."""

from __future__ import annotations

from datetime import date
from typing import Optional

DAYS_OF_WEEK = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]


def parse_date_key(value: str) -> date:
    """Parse a YYYY-MM-DD string.

    Raises:
        ValueError: If the string is not a valid ISO date
    """
    try:
        if len(value) != 10:
            raise ValueError(value)
        return date.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD") from e


def resolve_day(on: Optional[date] = None) -> tuple[str, str]:
    """Return (weekday name, ISO date key) for `on`, defaulting to today."""
    on = on or date.today()
    return DAYS_OF_WEEK[on.weekday()], on.isoformat()
