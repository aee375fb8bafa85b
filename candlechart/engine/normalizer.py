"""Series normalization and the built-in sample dataset."""

from typing import Optional, Sequence

from candlechart.models import CandlestickPoint, MarketData


SAMPLE_SERIES: tuple[CandlestickPoint, ...] = (
    CandlestickPoint(time="6h ago", open=1180, high=1220, low=1150, close=1200, volume=45),
    CandlestickPoint(time="5h ago", open=1200, high=1250, low=1180, close=1230, volume=67),
    CandlestickPoint(time="4h ago", open=1230, high=1280, low=1200, close=1210, volume=89),
    CandlestickPoint(time="3h ago", open=1210, high=1240, low=950, close=980, volume=156),
    CandlestickPoint(time="2h ago", open=980, high=1100, low=891, close=1050, volume=234),
    CandlestickPoint(time="1h ago", open=1050, high=1200, low=1040, close=1180, volume=178),
    CandlestickPoint(time="Now", open=1180, high=1389, low=1160, close=1247, volume=98),
)

# Headline figures are shipped as-is with the sample; they are not derived
# from SAMPLE_SERIES (see candlechart.summary for derived statistics).
SAMPLE_MARKET_DATA = MarketData(
    data_points=SAMPLE_SERIES,
    current_price=1247,
    price_change=2.4,
    trend="up",
    total_volume=1423,
    period_high=1389,
    period_low=891,
    active_listings=47,
    item_name="Dragon Sword",
    time_period="Last 24 hours",
)


def normalize(series: Optional[Sequence[CandlestickPoint]]) -> tuple[CandlestickPoint, ...]:
    """Return a non-empty, ordered series.

    Args:
        series: Candles in chronological order, or None.

    Returns:
        The candles as a tuple, or SAMPLE_SERIES when the input is None
        or empty.
    """
    if not series:
        return SAMPLE_SERIES
    return tuple(series)
