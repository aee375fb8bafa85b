"""Data models for candlechart."""

from candlechart.models.candle import CandlestickPoint
from candlechart.models.geometry import (
    AxisLabels,
    CandleGeometry,
    PriceScale,
    ViewportDimensions,
)
from candlechart.models.market import MarketData, MarketSummary, Trend

__all__ = [
    "CandlestickPoint",
    "MarketData",
    "MarketSummary",
    "Trend",
    "ViewportDimensions",
    "PriceScale",
    "CandleGeometry",
    "AxisLabels",
]
