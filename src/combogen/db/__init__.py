"""SQLite persistence for preferences, combo history and day outputs."""

from combogen.db.connection import DatabaseConnection, get_db, set_db

__all__ = ["DatabaseConnection", "get_db", "set_db"]
