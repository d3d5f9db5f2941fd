"""Tests for CLI commands."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from combogen.cli import app
from combogen.db.queries import PreferenceQueries

runner = CliRunner()


class TestMainCommands:
    """Tests for main CLI commands."""

    def test_help(self):
        """Test that --help works."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "combo" in result.output.lower()

    def test_menu_lists_catalog(self, global_db):
        result = runner.invoke(app, ["menu"])
        assert result.exit_code == 0
        assert "Masala Dosa" in result.output

    def test_generate_json(self, global_db):
        result = runner.invoke(app, ["generate", "--date", "2024-01-04", "--seed", "3", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["reused"] is False
        assert data["output"]["day"] == "Thursday"
        assert len(data["output"]["combos"]) == 3
        assert len(data["report"]) == 3

    def test_generate_twice_reuses(self, global_db):
        runner.invoke(app, ["generate", "--date", "2024-01-04", "--seed", "3"])
        result = runner.invoke(app, ["generate", "--date", "2024-01-04", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["reused"] is True

    def test_generate_rejects_bad_date(self, global_db):
        result = runner.invoke(app, ["generate", "--date", "not-a-date"])
        assert result.exit_code == 1

    def test_show_without_output(self, global_db):
        result = runner.invoke(app, ["show", "--date", "2024-01-04"])
        assert result.exit_code == 1

    def test_show_table(self, global_db):
        runner.invoke(app, ["generate", "--date", "2024-01-06", "--seed", "1"])
        result = runner.invoke(app, ["show", "--date", "2024-01-06"])
        assert result.exit_code == 0
        assert "Saturday" in result.output

    def test_export_writes_report(self, global_db, tmp_path):
        runner.invoke(app, ["generate", "--date", "2024-01-04", "--seed", "5"])
        path = tmp_path / "report.json"
        result = runner.invoke(app, ["export", "--date", "2024-01-04", "--output", str(path)])

        assert result.exit_code == 0
        report = json.loads(path.read_text())
        assert [r["combo_id"] for r in report] == [1, 2, 3]

    def test_history_json(self, global_db):
        runner.invoke(app, ["generate", "--date", "2024-01-04", "--seed", "5"])
        result = runner.invoke(app, ["history", "--json"])

        assert result.exit_code == 0
        dates = json.loads(result.stdout)["data"]["dates"]
        assert dates[0]["date"] == "2024-01-04"
        assert len(dates[0]["signatures"]) == 3

    def test_history_empty(self, global_db):
        result = runner.invoke(app, ["history"])
        assert result.exit_code == 0
        assert "No combos" in result.output


class TestPrefsCommands:
    """Tests for prefs subcommands."""

    def test_prefs_help(self):
        result = runner.invoke(app, ["prefs", "--help"])
        assert result.exit_code == 0

    def test_set_and_show(self, global_db):
        result = runner.invoke(
            app, ["prefs", "set", "--taste", "spicy", "--taste", "mixed", "--min-calories", "600"]
        )
        assert result.exit_code == 0

        with global_db.get_connection() as conn:
            prefs = PreferenceQueries.load(conn)
        assert prefs.preferred_tastes == ["spicy", "mixed"]
        assert prefs.calorie_range == (600, 800)

        result = runner.invoke(app, ["prefs", "show", "--json"])
        assert json.loads(result.stdout)["calorie_range"] == {"min": 600, "max": 800}

    def test_set_rejects_inverted_range(self, global_db):
        result = runner.invoke(
            app, ["prefs", "set", "--min-calories", "900", "--max-calories", "600"]
        )
        assert result.exit_code == 1
        with global_db.get_connection() as conn:
            assert PreferenceQueries.load(conn).calorie_range == (550, 800)

    def test_reset(self, global_db):
        runner.invoke(app, ["prefs", "set", "--taste", "sweet"])
        result = runner.invoke(app, ["prefs", "reset"])
        assert result.exit_code == 0
        with global_db.get_connection() as conn:
            assert PreferenceQueries.load(conn).preferred_tastes == ["any"]
