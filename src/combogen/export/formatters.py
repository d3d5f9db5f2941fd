"""Output formatters for generated combos."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from combogen.export.report import build_combo_report
from combogen.export.serialization import serialize_day_output
from combogen.menu.models import DailyMenu, DayOutput

TASTE_STYLES = {
    "sweet": "magenta",
    "savory": "green",
    "spicy": "red",
    "mixed": "blue",
}


class TableFormatter:
    """Format a day's combos as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()

    def format(self, output: DayOutput, reused: bool = False) -> None:
        """Print formatted tables to console.

        Args:
            output: Day output to display
            reused: True if the output was loaded instead of generated
        """
        header_lines = [
            f"[bold]{output.day}[/bold] - {output.date}",
            f"Combos: {len(output.combos)}",
        ]
        if reused:
            header_lines.append("[dim]Loaded from saved output[/dim]")

        self.console.print(Panel("\n".join(header_lines), title="Today's Combos"))

        if not output.combos:
            self.console.print("[red]No combos could be generated from this menu[/red]")
        else:
            combo_table = Table(title="Combos")
            combo_table.add_column("#", justify="right", style="dim")
            combo_table.add_column("Main", style="cyan")
            combo_table.add_column("Side", style="cyan")
            combo_table.add_column("Drink", style="cyan")
            combo_table.add_column("Calories", justify="right")
            combo_table.add_column("Taste", justify="center")
            combo_table.add_column("Popularity", justify="right")

            for index, combo in enumerate(output.combos, start=1):
                style = TASTE_STYLES.get(combo.taste_profile, "white")
                marker = " [yellow]*[/yellow]" if combo.fallback else ""
                combo_table.add_row(
                    f"{index}{marker}",
                    combo.main.name,
                    combo.side.name,
                    combo.drink.name,
                    f"{combo.total_calories} kcal",
                    f"[{style}]{combo.taste_profile}[/{style}]",
                    str(combo.popularity_score),
                )

            self.console.print(combo_table)
            if any(c.fallback for c in output.combos):
                self.console.print(
                    "[dim][yellow]*[/yellow] fallback combo, constraints relaxed[/dim]"
                )

        self.format_menu(output.menu)

    def format_menu(self, menu: DailyMenu) -> None:
        """Print the daily menu, one row per item."""
        menu_table = Table(title="Daily Menu")
        menu_table.add_column("Category")
        menu_table.add_column("Item", style="cyan")
        menu_table.add_column("Calories", justify="right")
        menu_table.add_column("Taste")
        menu_table.add_column("Popularity", justify="right")

        for item in menu.all_items:
            style = TASTE_STYLES.get(item.taste.value, "white")
            menu_table.add_row(
                item.category.value,
                item.name,
                f"{item.calories} kcal",
                f"[{style}]{item.taste.value}[/{style}]",
                str(item.popularity),
            )

        self.console.print(menu_table)


class JSONFormatter:
    """Format a day's combos as JSON for programmatic use."""

    def format(self, output: DayOutput, reused: bool = False) -> str:
        """Return JSON string.

        Args:
            output: Day output to format
            reused: True if the output was loaded instead of generated

        Returns:
            JSON string
        """
        data = {
            "timestamp": datetime.now().isoformat(),
            "reused": reused,
            "output": serialize_day_output(output),
            "report": build_combo_report(output),
        }
        return json.dumps(data, indent=2)
