"""Market data and summary models."""

from typing import Literal

from pydantic import BaseModel, Field

from candlechart.models.candle import CandlestickPoint


Trend = Literal["up", "down", "flat"]


class MarketData(BaseModel):
    """Price history for a traded item plus its headline statistics."""

    data_points: tuple[CandlestickPoint, ...] = Field(
        ..., description="Candles in chronological order"
    )
    current_price: float = Field(..., description="Current price of the item")
    price_change: float = Field(..., description="Price change percentage")
    trend: Trend = Field(..., description="Direction of price change")
    total_volume: float = Field(..., ge=0, description="Total volume over the period")
    period_high: float = Field(..., description="Highest price over the period")
    period_low: float = Field(..., description="Lowest price over the period")
    active_listings: int = Field(default=0, ge=0, description="Number of active listings")
    item_name: str = Field(default="", description="Name of the item")
    time_period: str = Field(default="", description="Period covered (e.g., 'Last 24 hours')")

    model_config = {"frozen": True}


class MarketSummary(BaseModel):
    """Statistics derived from a series."""

    current_price: float = Field(..., description="Close of the latest candle")
    price_change: float = Field(
        ..., description="Percent change from the first open to the latest close"
    )
    trend: Trend = Field(..., description="Direction of price change")
    total_volume: float = Field(..., ge=0, description="Sum of candle volumes")
    period_high: float = Field(..., description="Highest high in the series")
    period_low: float = Field(..., description="Lowest low in the series")

    model_config = {"frozen": True}
