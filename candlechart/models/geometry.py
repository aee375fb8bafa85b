"""Layout models: viewport, price scale and per-candle geometry."""

from pydantic import BaseModel, Field

from candlechart.models.candle import CandlestickPoint


class ViewportDimensions(BaseModel):
    """Drawable area of the chart in pixels.

    Mutable; the layout controller owns the instance and updates it on resize.
    """

    width: float = Field(default=1040, gt=0, description="Content width in pixels")
    height: float = Field(default=360, gt=0, description="Plot height in pixels")
    candle_width: float = Field(default=20, gt=0, description="Width of each candle body")

    model_config = {"validate_assignment": True}


class PriceScale(BaseModel):
    """Visible price range and y-axis labels, top to bottom."""

    min_price: float = Field(..., description="Price at the bottom of the plot")
    max_price: float = Field(..., description="Price at the top of the plot")
    labels: tuple[str, ...] = Field(..., description="Y-axis labels, descending")

    model_config = {"frozen": True}

    @property
    def price_range(self) -> float:
        return self.max_price - self.min_price


class CandleGeometry(BaseModel):
    """Pixel-space shapes for one candle and its volume bar."""

    x: float = Field(..., description="Left edge of the candle")
    wick_top: float = Field(..., description="Y of the high")
    wick_height: float = Field(..., description="Distance from high to low")
    body_top: float = Field(..., description="Y of the upper body edge")
    body_height: float = Field(..., ge=0, description="Body height, at least 2px")
    is_bullish: bool = Field(..., description="True when close > open")
    volume_bar_height: float = Field(..., ge=0, description="Volume bar height")
    source_point: CandlestickPoint = Field(..., description="Originating data point")

    model_config = {"frozen": True}


class AxisLabels(BaseModel):
    """Labels for both chart axes."""

    y_axis: tuple[str, ...] = Field(default=(), description="Price labels, top to bottom")
    x_axis: tuple[str, ...] = Field(default=(), description="Time labels, left to right")

    model_config = {"frozen": True}
