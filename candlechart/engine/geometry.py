"""Candle geometry: maps prices and volumes into pixel space.

Y grows downward, so higher prices map to smaller y values. Every function
here is pure; the layout controller calls :func:`layout` on each pass and
replaces its previous output wholesale.
"""

from typing import Sequence

from candlechart.models import (
    CandleGeometry,
    CandlestickPoint,
    PriceScale,
    ViewportDimensions,
)


LEFT_MARGIN = 20
TOP_INSET = 20
MIN_BODY_HEIGHT = 2

# Fixed reference: 250 units of volume draw a 60px bar.
VOLUME_REFERENCE = 250
VOLUME_BAR_REFERENCE_HEIGHT = 60


def price_to_y(price: float, scale: PriceScale, viewport: ViewportDimensions) -> float:
    """Map a price to a y coordinate.

    A zero-width price range maps every price to the vertical midpoint.
    """
    price_range = scale.price_range
    if price_range == 0:
        return viewport.height / 2 + TOP_INSET
    return (
        viewport.height
        - ((price - scale.min_price) / price_range * viewport.height)
        + TOP_INSET
    )


def volume_bar_height(volume: float) -> float:
    """Height in pixels of the volume bar for a given volume."""
    return volume / VOLUME_REFERENCE * VOLUME_BAR_REFERENCE_HEIGHT


def candle_x(index: int, count: int, viewport: ViewportDimensions) -> float:
    """Left edge of the candle at ``index``, centered within its slot."""
    spacing = viewport.width / count
    return LEFT_MARGIN + index * spacing + (spacing - viewport.candle_width) / 2


def layout(
    series: Sequence[CandlestickPoint],
    scale: PriceScale,
    viewport: ViewportDimensions,
) -> tuple[CandleGeometry, ...]:
    """Compute the geometry of every candle in the series.

    Args:
        series: Non-empty sequence of candles, oldest first.
        scale: Price scale computed for the same series.
        viewport: Current chart dimensions.

    Returns:
        One CandleGeometry per point, in series order.
    """
    count = len(series)
    shapes = []

    for index, point in enumerate(series):
        open_y = price_to_y(point.open, scale, viewport)
        close_y = price_to_y(point.close, scale, viewport)
        high_y = price_to_y(point.high, scale, viewport)
        low_y = price_to_y(point.low, scale, viewport)

        shapes.append(CandleGeometry(
            x=candle_x(index, count, viewport),
            wick_top=high_y,
            wick_height=low_y - high_y,
            body_top=min(open_y, close_y),
            body_height=max(abs(close_y - open_y), MIN_BODY_HEIGHT),
            is_bullish=point.close > point.open,
            volume_bar_height=volume_bar_height(point.volume),
            source_point=point,
        ))

    return tuple(shapes)
