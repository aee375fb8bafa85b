"""Command-line interface for candlechart.

Prints the computed scale, candle geometry and market statistics for
OHLCV files.
"""

from candlechart.cli.main import cli, main

__all__ = ["cli", "main"]
