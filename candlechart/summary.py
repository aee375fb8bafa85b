"""Period statistics for a candle series."""

from typing import Sequence

from candlechart.models import CandlestickPoint, MarketSummary, Trend


def _trend(change: float) -> Trend:
    if change > 0:
        return "up"
    if change < 0:
        return "down"
    return "flat"


def summarize(series: Sequence[CandlestickPoint]) -> MarketSummary:
    """Derive headline statistics from a non-empty series.

    Price change is measured from the open of the first candle to the close
    of the last one, as a percentage of that opening price.

    Raises:
        ValueError: If the series is empty.
    """
    if not series:
        raise ValueError("Cannot summarize an empty series")

    first_open = series[0].open
    current_price = series[-1].close
    change = current_price - first_open
    change_pct = (change / first_open * 100) if first_open else 0.0

    return MarketSummary(
        current_price=current_price,
        price_change=round(change_pct, 2),
        trend=_trend(change),
        total_volume=sum(point.volume for point in series),
        period_high=max(point.high for point in series),
        period_low=min(point.low for point in series),
    )
