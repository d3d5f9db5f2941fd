"""SQLite database schema definitions."""

SCHEMA_SQL = """
-- Single-row user preferences
CREATE TABLE IF NOT EXISTS preferences (
    id INTEGER PRIMARY KEY CHECK (id = 1),
    preferences_json TEXT NOT NULL,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

-- Combo signatures served per date, in generation order (append-only)
CREATE TABLE IF NOT EXISTS combo_history (
    date_key TEXT NOT NULL,
    position INTEGER NOT NULL,
    signature TEXT NOT NULL,
    PRIMARY KEY (date_key, position)
);

CREATE INDEX IF NOT EXISTS idx_combo_history_signature ON combo_history(signature);

-- Full output of a generation cycle, one per date
CREATE TABLE IF NOT EXISTS day_outputs (
    date_key TEXT PRIMARY KEY,
    day_name TEXT NOT NULL,
    payload_json TEXT NOT NULL,
    generated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


def get_schema_sql() -> str:
    """Return the complete schema SQL."""
    return SCHEMA_SQL
