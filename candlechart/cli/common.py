"""Helpers shared by CLI commands."""

from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from candlechart.models import CandlestickPoint

console = Console()


def _get_config():
    """Lazily load chart configuration."""
    from candlechart.config import load_config

    return load_config()


def load_series_or_exit(path: Optional[Path]) -> Optional[list[CandlestickPoint]]:
    """Load a series from ``path``, printing an error panel on failure.

    Returns None when no path is given so callers fall back to the sample.
    """
    if path is None:
        return None

    from candlechart.loader import load_series

    try:
        return load_series(path)
    except (ValueError, ValidationError) as e:
        console.print(Panel(
            f"[red]Could not load {path}:[/red]\n\n{str(e)}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)


def format_price(value: float) -> str:
    return f"{value:,.2f}"
