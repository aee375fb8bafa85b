"""candlechart - candlestick chart layout engine.

Turns an OHLCV series into pixel-space candle geometry and keeps it in
sync with data and viewport changes. Painting the shapes is left to the
caller; any renderer can consume the same geometry.

Quick start::

    from candlechart import LayoutController

    controller = LayoutController()
    controller.set_series(None)          # built-in sample data
    controller.set_viewport_width(500)
    for shape in controller.get_geometry():
        print(shape.x, shape.body_top, shape.body_height)
"""

from candlechart.controller import LayoutController, LayoutState
from candlechart.engine import (
    SAMPLE_MARKET_DATA,
    SAMPLE_SERIES,
    compute_scale,
    layout,
    normalize,
    price_to_y,
    volume_bar_height,
)
from candlechart.interaction import InteractionAdapter
from candlechart.models import (
    AxisLabels,
    CandleGeometry,
    CandlestickPoint,
    MarketData,
    MarketSummary,
    PriceScale,
    ViewportDimensions,
)
from candlechart.resize import ResizeSignal, content_width
from candlechart.summary import summarize
from candlechart.validation import OhlcIssue, check_ohlc

__version__ = "0.1.0"

__all__ = [
    # Controller
    "LayoutController",
    "LayoutState",
    "InteractionAdapter",
    # Engine
    "normalize",
    "compute_scale",
    "layout",
    "price_to_y",
    "volume_bar_height",
    "SAMPLE_SERIES",
    "SAMPLE_MARKET_DATA",
    # Resize
    "ResizeSignal",
    "content_width",
    # Data
    "summarize",
    "check_ohlc",
    "OhlcIssue",
    # Models
    "CandlestickPoint",
    "MarketData",
    "MarketSummary",
    "ViewportDimensions",
    "PriceScale",
    "CandleGeometry",
    "AxisLabels",
]
