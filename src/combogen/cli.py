"""CLI interface using Typer."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from combogen.config import get_settings
from combogen.db import get_db
from combogen.db.queries import DayOutputQueries, HistoryQueries, PreferenceQueries
from combogen.log import configure_logging

app = typer.Typer(
    help="Daily meal combo generator with calorie, taste and variety rules",
    no_args_is_help=True,
)
console = Console()

prefs_app = typer.Typer(help="Manage user preferences")
app.add_typer(prefs_app, name="prefs")


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict, file=None) -> None:
    """Output JSON response to stdout or file."""
    json_str = json.dumps(response, indent=2)
    if file:
        file.write(json_str)
    else:
        print(json_str)


def parse_date_option(value: Optional[str]):
    """Convert a --date option to a date, exiting on bad input."""
    from combogen.dates import parse_date_key

    if value is None:
        return None
    try:
        return parse_date_key(value)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def load_output_or_exit(date_value: Optional[str]):
    """Load the stored output for a date, exiting if there is none."""
    from combogen.dates import resolve_day

    _, date_key = resolve_day(parse_date_option(date_value))
    with get_db().get_connection() as conn:
        output = DayOutputQueries.get(conn, date_key)

    if output is None:
        console.print(f"[yellow]No combos generated for {date_key}[/yellow]")
        console.print("Run: [cyan]combogen generate[/cyan]")
        raise typer.Exit(1)
    return output


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show generation details"
    ),
) -> None:
    """Configure logging before any command runs."""
    level = "DEBUG" if verbose else get_settings().logging.level
    configure_logging(level)


# ============================================================================
# Main Commands
# ============================================================================


@app.command()
def generate(
    date_value: Optional[str] = typer.Option(
        None, "--date", "-d", help="Date to generate for (YYYY-MM-DD, default today)"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Random seed for the menu draw"
    ),
    regenerate: bool = typer.Option(
        False, "--regenerate", "-r", help="Discard combos already generated for the date"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Generate today's menu and combos."""
    from combogen.export.formatters import JSONFormatter, TableFormatter
    from combogen.generator.cycle import run_generation_cycle

    settings = get_settings()
    on = parse_date_option(date_value)

    output, reused = run_generation_cycle(
        get_db(), settings, on=on, seed=seed, regenerate=regenerate
    )

    if json_output or settings.defaults.output_format == "json":
        print(JSONFormatter().format(output, reused=reused))
        return

    TableFormatter(console).format(output, reused=reused)
    if reused:
        console.print("[dim]Use --regenerate for a fresh menu[/dim]")


@app.command()
def show(
    date_value: Optional[str] = typer.Option(
        None, "--date", "-d", help="Date to show (YYYY-MM-DD, default today)"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show combos already generated for a date."""
    from combogen.export.formatters import JSONFormatter, TableFormatter

    output = load_output_or_exit(date_value)
    if json_output:
        print(JSONFormatter().format(output, reused=True))
        return
    TableFormatter(console).format(output, reused=True)


@app.command()
def export(
    date_value: Optional[str] = typer.Option(
        None, "--date", "-d", help="Date to export (YYYY-MM-DD, default today)"
    ),
    output_path: Optional[Path] = typer.Option(
        None, "--output", "-o", help="File to write (default: combo-output-<day>-<date>.json)"
    ),
) -> None:
    """Export a day's combos as a JSON report."""
    from combogen.export.report import build_combo_report, report_filename

    output = load_output_or_exit(date_value)
    path = output_path or Path(report_filename(output))

    with open(path, "w") as f:
        output_json(build_combo_report(output), file=f)

    console.print(f"[green]Wrote {len(output.combos)} combo(s) to {path}[/green]")


@app.command()
def history(
    limit: int = typer.Option(10, "--limit", "-n", help="Number of dates to show"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show combo history by date."""
    with get_db().get_connection() as conn:
        dates = HistoryQueries.list_dates(conn, limit)
        full = HistoryQueries.load_history(conn)

    if json_output:
        output_json({
            "success": True,
            "command": "history",
            "data": {
                "dates": [
                    {"date": row["date_key"], "signatures": full[row["date_key"]]}
                    for row in dates
                ],
            },
            "human_summary": f"{len(dates)} dates with combos",
        })
        return

    if not dates:
        console.print("[yellow]No combos generated yet[/yellow]")
        return

    table = Table(title="Combo History")
    table.add_column("Date", style="cyan")
    table.add_column("Combos", justify="right")
    table.add_column("Signatures")

    for row in dates:
        table.add_row(
            row["date_key"],
            str(row["combo_count"]),
            "\n".join(full[row["date_key"]]),
        )

    console.print(table)


@app.command()
def menu() -> None:
    """List the menu catalog."""
    from combogen.menu.catalog import MENU_ITEMS

    table = Table(title="Menu Catalog")
    table.add_column("Category")
    table.add_column("Item", style="cyan")
    table.add_column("Calories", justify="right")
    table.add_column("Taste")
    table.add_column("Popularity", justify="right")

    for item in MENU_ITEMS:
        table.add_row(
            item.category.value,
            item.name,
            f"{item.calories} kcal",
            item.taste.value,
            str(item.popularity),
        )

    console.print(table)


# ============================================================================
# Preferences Subcommands
# ============================================================================


def print_preferences(prefs) -> None:
    cal_min, cal_max = prefs.calorie_range
    console.print(f"Preferred tastes: [cyan]{', '.join(prefs.preferred_tastes) or '-'}[/cyan]")
    console.print(f"Calorie range: [cyan]{cal_min}-{cal_max} kcal[/cyan]")
    console.print(
        f"Dietary restrictions: {', '.join(prefs.dietary_restrictions) or '-'}"
    )
    console.print(f"Avoid ingredients: {', '.join(prefs.avoid_ingredients) or '-'}")


@prefs_app.command("show")
def prefs_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show current preferences."""
    from combogen.export.serialization import serialize_preferences

    with get_db().get_connection() as conn:
        prefs = PreferenceQueries.load(conn)

    if json_output:
        output_json(serialize_preferences(prefs))
        return
    print_preferences(prefs)


@prefs_app.command("set")
def prefs_set(
    tastes: Optional[list[str]] = typer.Option(
        None, "--taste", "-t", help="Preferred taste profile (repeatable): sweet, savory, spicy, mixed, any"
    ),
    min_calories: Optional[int] = typer.Option(
        None, "--min-calories", help="Minimum calories per combo"
    ),
    max_calories: Optional[int] = typer.Option(
        None, "--max-calories", help="Maximum calories per combo"
    ),
    restrictions: Optional[list[str]] = typer.Option(
        None, "--restriction", help="Dietary restriction (repeatable)"
    ),
    avoid: Optional[list[str]] = typer.Option(
        None, "--avoid", help="Ingredient to avoid (repeatable)"
    ),
) -> None:
    """Update preferences. Options not given keep their current value."""
    from combogen.export.serialization import validate_preferences

    with get_db().get_connection() as conn:
        prefs = PreferenceQueries.load(conn)

        if tastes:
            prefs.preferred_tastes = [t.lower() for t in tastes]
        if min_calories is not None or max_calories is not None:
            cal_min, cal_max = prefs.calorie_range
            prefs.calorie_range = (
                min_calories if min_calories is not None else cal_min,
                max_calories if max_calories is not None else cal_max,
            )
        if restrictions:
            prefs.dietary_restrictions = list(restrictions)
        if avoid:
            prefs.avoid_ingredients = list(avoid)

        problems = validate_preferences(prefs)
        if problems:
            for problem in problems:
                console.print(f"[red]{problem}[/red]")
            raise typer.Exit(1)

        PreferenceQueries.save(conn, prefs)

    console.print("[green]Preferences saved[/green]")
    print_preferences(prefs)


@prefs_app.command("reset")
def prefs_reset() -> None:
    """Restore default preferences."""
    with get_db().get_connection() as conn:
        PreferenceQueries.reset(conn)
    console.print("[green]Preferences reset to defaults[/green]")


if __name__ == "__main__":
    app()
