"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from combogen.generator.combos import GenerationLimits
from combogen.menu.models import Category


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".combogen"


def _default_db_path() -> Path:
    """Return the default database path."""
    return _default_config_dir() / "combogen.db"


@dataclass
class DatabaseConfig:
    """Database configuration."""

    path: Path = field(default_factory=_default_db_path)


@dataclass
class MenuConfig:
    """Items drawn per category for the daily menu."""

    mains: int = 5
    sides: int = 4
    drinks: int = 4

    def target_counts(self) -> dict[Category, int]:
        return {
            Category.MAIN: self.mains,
            Category.SIDE: self.sides,
            Category.DRINK: self.drinks,
        }


@dataclass
class GeneratorConfig:
    """Combo generation bounds."""

    combos_per_day: int = 3
    max_attempts: int = 1000
    calorie_floor: int = 550
    calorie_ceiling: int = 800
    popularity_tolerance: float = 10.0
    lookback_days: int = 2

    def limits(self) -> GenerationLimits:
        return GenerationLimits(
            combos_per_day=self.combos_per_day,
            max_attempts=self.max_attempts,
            calorie_floor=self.calorie_floor,
            calorie_ceiling=self.calorie_ceiling,
            popularity_tolerance=self.popularity_tolerance,
            lookback_days=self.lookback_days,
        )


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    output_format: str = "table"  # "table" or "json"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class Settings:
    """Main application settings."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    menu: MenuConfig = field(default_factory=MenuConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.combogen/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        # Parse database config
        if "database" in data:
            db_data = data["database"]
            if "path" in db_data:
                settings.database.path = Path(db_data["path"]).expanduser()

        # Parse menu sizes
        if "menu" in data:
            menu_data = data["menu"]
            for key in ("mains", "sides", "drinks"):
                if key in menu_data:
                    setattr(settings.menu, key, int(menu_data[key]))

        # Parse generator bounds
        if "generator" in data:
            gen_data = data["generator"]
            for key in (
                "combos_per_day",
                "max_attempts",
                "calorie_floor",
                "calorie_ceiling",
                "lookback_days",
            ):
                if key in gen_data:
                    setattr(settings.generator, key, int(gen_data[key]))
            if "popularity_tolerance" in gen_data:
                settings.generator.popularity_tolerance = float(
                    gen_data["popularity_tolerance"]
                )

        # Parse defaults
        if "defaults" in data:
            def_data = data["defaults"]
            if "output_format" in def_data:
                settings.defaults.output_format = def_data["output_format"]

        if "logging" in data:
            log_data = data["logging"]
            if "level" in log_data:
                settings.logging.level = str(log_data["level"]).upper()

        return settings

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.combogen/config.yaml
        """
        if config_path is None:
            config_path = _default_config_dir() / "config.yaml"

        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "database": {
                "path": str(self.database.path),
            },
            "menu": {
                "mains": self.menu.mains,
                "sides": self.menu.sides,
                "drinks": self.menu.drinks,
            },
            "generator": {
                "combos_per_day": self.generator.combos_per_day,
                "max_attempts": self.generator.max_attempts,
                "calorie_floor": self.generator.calorie_floor,
                "calorie_ceiling": self.generator.calorie_ceiling,
                "popularity_tolerance": self.generator.popularity_tolerance,
                "lookback_days": self.generator.lookback_days,
            },
            "defaults": {
                "output_format": self.defaults.output_format,
            },
            "logging": {
                "level": self.logging.level,
            },
        }

        with open(config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings() -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load()
    return _settings
