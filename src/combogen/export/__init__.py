"""Output formatters, JSON serialization and combo reports."""

from combogen.export.formatters import JSONFormatter, TableFormatter
from combogen.export.report import build_combo_report

__all__ = ["TableFormatter", "JSONFormatter", "build_combo_report"]
