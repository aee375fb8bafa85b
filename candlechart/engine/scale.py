"""Price scale calculation.

Derives the visible price range from a series: the raw range is padded by
10% on each side and then snapped outward to whole hundreds so the y-axis
labels stay round.
"""

import math
from typing import Sequence

from candlechart.models import CandlestickPoint, PriceScale


PADDING_RATIO = 0.10
SNAP_STEP = 100
LABEL_COUNT = 7


def format_price_label(value: float) -> str:
    """Format a price with thousands separators and up to 3 decimals.

    Examples:
        1400.0 -> "1,400"
        1383.3333 -> "1,383.333"
    """
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def axis_labels(min_price: float, max_price: float, count: int = LABEL_COUNT) -> tuple[str, ...]:
    """Evenly spaced labels from max_price down to min_price inclusive."""
    step = (max_price - min_price) / (count - 1)
    return tuple(format_price_label(max_price - i * step) for i in range(count))


def compute_scale(series: Sequence[CandlestickPoint]) -> PriceScale:
    """Calculate the padded, snapped price scale for a series.

    Args:
        series: Non-empty sequence of candles.

    Returns:
        PriceScale with min/max snapped to hundreds and 7 labels ordered
        from the top of the axis to the bottom.
    """
    prices: list[float] = []
    for point in series:
        prices.extend((point.high, point.low, point.open, point.close))

    raw_min = min(prices)
    raw_max = max(prices)
    padding = (raw_max - raw_min) * PADDING_RATIO

    min_price = math.floor((raw_min - padding) / SNAP_STEP) * SNAP_STEP
    max_price = math.ceil((raw_max + padding) / SNAP_STEP) * SNAP_STEP

    return PriceScale(
        min_price=min_price,
        max_price=max_price,
        labels=axis_labels(min_price, max_price),
    )
