"""Common database query functions."""

from __future__ import annotations

import json
import sqlite3
from typing import Optional

from combogen.export.serialization import (
    deserialize_day_output,
    deserialize_preferences,
    serialize_day_output,
    serialize_preferences,
)
from combogen.menu.models import ComboHistory, DayOutput, UserPreferences


class PreferenceQueries:
    """Query functions for the preferences table."""

    @staticmethod
    def load(conn: sqlite3.Connection) -> UserPreferences:
        """Load saved preferences, or defaults if none were saved.

        Args:
            conn: Database connection

        Returns:
            UserPreferences instance
        """
        row = conn.execute(
            "SELECT preferences_json FROM preferences WHERE id = 1"
        ).fetchone()
        if row is None:
            return UserPreferences()
        return deserialize_preferences(json.loads(row["preferences_json"]))

    @staticmethod
    def save(conn: sqlite3.Connection, prefs: UserPreferences) -> None:
        """Save preferences, replacing any previous ones.

        Args:
            conn: Database connection
            prefs: Preferences to store
        """
        conn.execute(
            """
            INSERT OR REPLACE INTO preferences (id, preferences_json, updated_at)
            VALUES (1, ?, CURRENT_TIMESTAMP)
            """,
            (json.dumps(serialize_preferences(prefs)),),
        )

    @staticmethod
    def reset(conn: sqlite3.Connection) -> None:
        """Delete saved preferences so defaults apply again."""
        conn.execute("DELETE FROM preferences")


class HistoryQueries:
    """Query functions for the combo_history table."""

    @staticmethod
    def load_history(conn: sqlite3.Connection) -> ComboHistory:
        """Load the full combo history.

        Args:
            conn: Database connection

        Returns:
            Dict mapping date key to signatures in generation order
        """
        history: ComboHistory = {}
        rows = conn.execute(
            "SELECT date_key, signature FROM combo_history ORDER BY date_key, position"
        ).fetchall()
        for row in rows:
            history.setdefault(row["date_key"], []).append(row["signature"])
        return history

    @staticmethod
    def save_history(conn: sqlite3.Connection, history: ComboHistory) -> int:
        """Persist signatures appended since the history was loaded.

        Stored rows are never rewritten: for each date only entries beyond
        the number already stored are inserted.

        Args:
            conn: Database connection
            history: In-memory history (typically after a generation run)

        Returns:
            Number of signatures inserted
        """
        stored = {
            row["date_key"]: row["n"]
            for row in conn.execute(
                "SELECT date_key, COUNT(*) AS n FROM combo_history GROUP BY date_key"
            ).fetchall()
        }

        new_rows: list[tuple[str, int, str]] = []
        for date_key, signatures in history.items():
            start = stored.get(date_key, 0)
            for position in range(start, len(signatures)):
                new_rows.append((date_key, position, signatures[position]))

        conn.executemany(
            "INSERT INTO combo_history (date_key, position, signature) VALUES (?, ?, ?)",
            new_rows,
        )
        return len(new_rows)

    @staticmethod
    def list_dates(conn: sqlite3.Connection, limit: int = 10) -> list[sqlite3.Row]:
        """List the most recent history dates with their signature counts.

        Args:
            conn: Database connection
            limit: Maximum dates to return

        Returns:
            Rows with date_key and combo_count, newest first
        """
        query = """
            SELECT date_key, COUNT(*) AS combo_count
            FROM combo_history
            GROUP BY date_key
            ORDER BY date_key DESC
            LIMIT ?
        """
        return conn.execute(query, (limit,)).fetchall()


class DayOutputQueries:
    """Query functions for the day_outputs table."""

    @staticmethod
    def save(conn: sqlite3.Connection, date_key: str, output: DayOutput) -> None:
        """Store a day's output, replacing an earlier one for the same date.

        Args:
            conn: Database connection
            date_key: ISO date the output belongs to
            output: Output to store
        """
        conn.execute(
            """
            INSERT OR REPLACE INTO day_outputs
                (date_key, day_name, payload_json, generated_at)
            VALUES (?, ?, ?, CURRENT_TIMESTAMP)
            """,
            (date_key, output.day, json.dumps(serialize_day_output(output))),
        )

    @staticmethod
    def get(conn: sqlite3.Connection, date_key: str) -> Optional[DayOutput]:
        """Load the stored output for a date.

        Args:
            conn: Database connection
            date_key: ISO date

        Returns:
            DayOutput or None if nothing was generated for that date
        """
        row = conn.execute(
            "SELECT payload_json FROM day_outputs WHERE date_key = ?",
            (date_key,),
        ).fetchone()
        if row is None:
            return None
        return deserialize_day_output(json.loads(row["payload_json"]))
