"""Data commands for the candlechart CLI.

Summarizes a series and reports OHLC inconsistencies.
"""

from pathlib import Path
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from candlechart.cli.common import console, format_price, load_series_or_exit


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path), required=False)
def summary(file: Optional[Path]) -> None:
    """Show period statistics for a series.

    FILE is a CSV or JSON file of candles. Without it the built-in
    sample data is used.
    """
    from candlechart.engine import SAMPLE_MARKET_DATA, normalize
    from candlechart.summary import summarize

    series = normalize(load_series_or_exit(file))
    stats = summarize(series)

    trend_style = {"up": "green", "down": "red", "flat": "dim"}[stats.trend]
    title = "Summary"
    if file is None:
        title = f"{SAMPLE_MARKET_DATA.item_name} - {SAMPLE_MARKET_DATA.time_period}"

    console.print(Panel(
        f"Current price: [bold]{format_price(stats.current_price)}[/bold]\n"
        f"Change:        [{trend_style}]{stats.price_change:+.2f}% ({stats.trend})[/{trend_style}]\n"
        f"Period high:   {format_price(stats.period_high)}\n"
        f"Period low:    {format_price(stats.period_low)}\n"
        f"Total volume:  {stats.total_volume:,g}\n"
        f"[dim]{len(series)} candles[/dim]",
        title=f"[bold]{title}[/bold]",
        border_style="cyan",
    ))


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check(file: Path) -> None:
    """Report candles whose prices break low <= open, close <= high.

    Inconsistent candles are still drawn by the chart; this command only
    lists them. Exits with status 1 when problems are found.
    """
    from candlechart.validation import check_ohlc

    series = load_series_or_exit(file)
    issues = check_ohlc(series)

    if not issues:
        console.print(f"[green]All {len(series)} candles are consistent.[/green]")
        return

    table = Table(
        title=f"{len(issues)} OHLC issues",
        show_header=True,
        header_style="bold red",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Time")
    table.add_column("Problem")

    for issue in issues:
        table.add_row(str(issue.index), issue.time, issue.message)

    console.print(table)
    raise SystemExit(1)
