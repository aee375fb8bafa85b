"""Chart layout commands for the candlechart CLI.

Acts as a text presentation layer: lays out a series with the layout
controller and prints the resulting scale, geometry and hovered data.
"""

from pathlib import Path
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from candlechart.cli.common import _get_config, console, format_price, load_series_or_exit


FILE_ARGUMENT = click.Path(exists=True, dir_okay=False, path_type=Path)


def _build_controller(
    path: Optional[Path],
    width: Optional[float],
    height: Optional[float],
    candle_width: Optional[float],
):
    """Create a controller for the file's series and the requested dimensions."""
    from candlechart.controller import LayoutController

    config = _get_config()
    viewport = config.viewport()
    if candle_width is not None:
        if candle_width <= 0:
            raise click.BadParameter("must be positive", param_hint="--candle-width")
        viewport.candle_width = candle_width

    controller = LayoutController(viewport)
    controller.set_series(load_series_or_exit(path))
    if width is not None:
        controller.set_viewport_width(width)
    if height is not None:
        controller.set_viewport_height(height)
    return controller


def dimension_options(func):
    """Attach --width/--height/--candle-width options to a command."""
    func = click.option(
        "-c", "--candle-width",
        type=float,
        default=None,
        help="Candle body width in pixels (default: from config, 20)",
    )(func)
    func = click.option(
        "-H", "--height",
        type=float,
        default=None,
        help="Plot height in pixels (default: from config, 360)",
    )(func)
    func = click.option(
        "-w", "--width",
        type=float,
        default=None,
        help="Content width in pixels (default: from config, 1040)",
    )(func)
    return func


@click.command()
@click.argument("file", type=FILE_ARGUMENT, required=False)
@dimension_options
def layout(
    file: Optional[Path],
    width: Optional[float],
    height: Optional[float],
    candle_width: Optional[float],
) -> None:
    """Print the candle geometry for a series.

    FILE is a CSV or JSON file of candles. Without it the built-in
    sample data is used.

    \b
    Examples:
      candlechart layout                 # Sample data at 1040x360
      candlechart layout prices.csv      # Your data
      candlechart layout -w 500 -H 240   # Custom dimensions
    """
    controller = _build_controller(file, width, height, candle_width)
    scale = controller.get_scale()
    viewport = controller.viewport

    table = Table(
        title=(
            f"Layout - {len(controller.get_geometry())} candles "
            f"at {viewport.width:g}x{viewport.height:g}"
        ),
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("#", justify="right", style="dim")
    table.add_column("Time", style="dim")
    table.add_column("X", justify="right")
    table.add_column("Wick Top", justify="right")
    table.add_column("Wick H", justify="right")
    table.add_column("Body Top", justify="right")
    table.add_column("Body H", justify="right")
    table.add_column("Volume H", justify="right", style="dim")

    for index, shape in enumerate(controller.get_geometry()):
        style = "green" if shape.is_bullish else "red"
        table.add_row(
            str(index),
            shape.source_point.time,
            f"{shape.x:.2f}",
            f"{shape.wick_top:.2f}",
            f"{shape.wick_height:.2f}",
            f"[{style}]{shape.body_top:.2f}[/{style}]",
            f"[{style}]{shape.body_height:.2f}[/{style}]",
            f"{shape.volume_bar_height:.2f}",
        )

    console.print(table)
    console.print(
        f"[dim]Price range {format_price(scale.min_price)} - "
        f"{format_price(scale.max_price)}[/dim]"
    )


@click.command()
@click.argument("file", type=FILE_ARGUMENT, required=False)
def scale(file: Optional[Path]) -> None:
    """Print the price scale and axis labels for a series.

    FILE is a CSV or JSON file of candles. Without it the built-in
    sample data is used.
    """
    controller = _build_controller(file, None, None, None)
    price_scale = controller.get_scale()
    labels = controller.get_axis_labels()

    table = Table(title="Y Axis", show_header=True, header_style="bold cyan")
    table.add_column("Label", justify="right")
    for label in labels.y_axis:
        table.add_row(label)

    console.print(Panel(
        f"Min price: [bold]{format_price(price_scale.min_price)}[/bold]\n"
        f"Max price: [bold]{format_price(price_scale.max_price)}[/bold]\n"
        f"Range:     [bold]{format_price(price_scale.price_range)}[/bold]",
        title="[bold]Price Scale[/bold]",
        border_style="cyan",
    ))
    console.print(table)
    console.print(f"[dim]X axis: {', '.join(labels.x_axis)}[/dim]")


@click.command()
@click.argument("index", type=int)
@click.argument("file", type=FILE_ARGUMENT, required=False)
@dimension_options
def hover(
    index: int,
    file: Optional[Path],
    width: Optional[float],
    height: Optional[float],
    candle_width: Optional[float],
) -> None:
    """Show the data point behind the candle at INDEX.

    INDEX is the zero-based position of the candle, oldest first.
    """
    from candlechart.interaction import InteractionAdapter

    controller = _build_controller(file, width, height, candle_width)
    adapter = InteractionAdapter(controller)
    point = adapter.pointer_entered(index)

    if point is None:
        console.print(Panel(
            f"[yellow]No candle at index {index}[/yellow]\n\n"
            f"[dim]The chart has {len(controller.get_geometry())} candles "
            "(indices start at 0).[/dim]",
            title="[bold yellow]Not Found[/bold yellow]",
            border_style="yellow",
        ))
        raise SystemExit(1)

    shape = controller.get_geometry()[index]
    color = "green" if shape.is_bullish else "red"

    console.print(Panel(
        f"Open:   {format_price(point.open)}\n"
        f"High:   {format_price(point.high)}\n"
        f"Low:    {format_price(point.low)}\n"
        f"Close:  [{color}]{format_price(point.close)}[/{color}]\n"
        f"Volume: {point.volume:,g}\n\n"
        f"[dim]Candle at x={shape.x:.2f}, body {shape.body_top:.2f}"
        f"+{shape.body_height:.2f}[/dim]",
        title=f"[bold]{point.time}[/bold]",
        border_style=color,
    ))
