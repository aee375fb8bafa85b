"""Chart layout engine: normalization, price scale and candle geometry."""

from candlechart.engine.geometry import (
    LEFT_MARGIN,
    MIN_BODY_HEIGHT,
    TOP_INSET,
    candle_x,
    layout,
    price_to_y,
    volume_bar_height,
)
from candlechart.engine.normalizer import SAMPLE_MARKET_DATA, SAMPLE_SERIES, normalize
from candlechart.engine.scale import axis_labels, compute_scale, format_price_label

__all__ = [
    "LEFT_MARGIN",
    "MIN_BODY_HEIGHT",
    "TOP_INSET",
    "SAMPLE_MARKET_DATA",
    "SAMPLE_SERIES",
    "axis_labels",
    "candle_x",
    "compute_scale",
    "format_price_label",
    "layout",
    "normalize",
    "price_to_y",
    "volume_bar_height",
]
