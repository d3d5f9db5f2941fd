"""Tests for settings loading and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from rich.logging import RichHandler

from combogen.config.settings import Settings
from combogen.log import LOGGER_NAME, configure_logging
from combogen.menu.models import Category


class TestSettings:
    """Tests for Settings load/save."""

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = Settings.load(tmp_path / "nope.yaml")
        assert settings.menu.mains == 5
        assert settings.generator.max_attempts == 1000
        assert settings.generator.popularity_tolerance == 10.0
        assert settings.logging.level == "WARNING"

    def test_partial_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({
            "menu": {"sides": 6},
            "generator": {"lookback_days": 3, "popularity_tolerance": 15},
            "logging": {"level": "debug"},
        }))

        settings = Settings.load(path)
        assert settings.menu.sides == 6
        assert settings.menu.mains == 5
        assert settings.generator.lookback_days == 3
        assert settings.generator.popularity_tolerance == 15.0
        assert settings.logging.level == "DEBUG"

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "sub" / "config.yaml"
        settings = Settings()
        settings.database.path = Path("/tmp/combos.db")
        settings.generator.calorie_ceiling = 900
        settings.defaults.output_format = "json"
        settings.save(path)

        loaded = Settings.load(path)
        assert loaded.database.path == Path("/tmp/combos.db")
        assert loaded.generator.calorie_ceiling == 900
        assert loaded.defaults.output_format == "json"

    def test_limits_and_counts(self):
        settings = Settings()
        settings.generator.max_attempts = 7
        assert settings.generator.limits().max_attempts == 7
        assert settings.menu.target_counts() == {
            Category.MAIN: 5,
            Category.SIDE: 4,
            Category.DRINK: 4,
        }


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_single_rich_handler(self):
        configure_logging("INFO")
        logger = configure_logging("DEBUG")

        rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger is logging.getLogger(LOGGER_NAME)
