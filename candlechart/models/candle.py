"""Candlestick (OHLCV) data model."""

from pydantic import BaseModel, Field


class CandlestickPoint(BaseModel):
    """Represents a single OHLCV bucket on the chart.

    The ``low <= open, close <= high`` relationship is not enforced here;
    inconsistent points are rendered as-is and reported by
    :func:`candlechart.validation.check_ohlc`.
    """

    time: str = Field(..., description="Time label for the bucket (e.g., '6h ago', 'Now')")
    open: float = Field(..., description="Opening price")
    high: float = Field(..., description="Highest price")
    low: float = Field(..., description="Lowest price")
    close: float = Field(..., description="Closing price")
    volume: float = Field(..., ge=0, description="Traded volume")

    model_config = {"frozen": True, "allow_inf_nan": False}
