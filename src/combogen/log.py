"""Logging setup for the command line."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "combogen"


def configure_logging(level: str = "WARNING", console: Optional[Console] = None) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    Module loggers (``logging.getLogger(__name__)``) propagate here. Calling
    this again replaces the handler instead of stacking a second one.

    Args:
        level: Level name such as "INFO" or "DEBUG"
        console: Console to log to; defaults to stderr

    Returns:
        The package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
