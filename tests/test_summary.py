"""Tests for market summaries and OHLC checks."""

import pytest

from candlechart.engine import SAMPLE_MARKET_DATA, SAMPLE_SERIES
from candlechart.models import CandlestickPoint
from candlechart.summary import summarize
from candlechart.validation import check_ohlc


def _point(open_: float, high: float, low: float, close: float, volume: float = 10) -> CandlestickPoint:
    return CandlestickPoint(time="t", open=open_, high=high, low=low, close=close, volume=volume)


class TestSummarize:
    def test_sample_series(self):
        stats = summarize(SAMPLE_SERIES)

        assert stats.current_price == 1247
        assert stats.price_change == pytest.approx(5.68)
        assert stats.trend == "up"
        assert stats.total_volume == 867
        assert stats.period_high == 1389
        assert stats.period_low == 891

    def test_downtrend(self):
        stats = summarize([_point(200, 210, 150, 160), _point(160, 170, 90, 100)])

        assert stats.trend == "down"
        assert stats.price_change == -50.0

    def test_flat(self):
        stats = summarize([_point(100, 110, 90, 105), _point(105, 106, 95, 100)])

        assert stats.trend == "flat"
        assert stats.price_change == 0.0

    def test_empty_series(self):
        with pytest.raises(ValueError):
            summarize([])

    def test_sample_market_record(self):
        assert SAMPLE_MARKET_DATA.data_points == SAMPLE_SERIES
        assert SAMPLE_MARKET_DATA.item_name == "Dragon Sword"
        assert SAMPLE_MARKET_DATA.trend == "up"


class TestCheckOhlc:
    def test_consistent_series(self):
        assert check_ohlc(SAMPLE_SERIES) == []

    def test_close_above_high(self):
        issues = check_ohlc([_point(100, 105, 95, 100), _point(100, 105, 95, 110)])

        assert len(issues) == 1
        assert issues[0].index == 1
        assert "high 105.0 is below open/close" in issues[0].message

    def test_inverted_candle_reports_every_problem(self):
        issues = check_ohlc([_point(100, 90, 110, 100)])

        assert [issue.message.split()[0] for issue in issues] == ["high", "high", "low"]

    def test_open_below_low(self):
        issues = check_ohlc([_point(90, 105, 95, 100)])

        assert len(issues) == 1
        assert "low 95.0 is above open/close" in issues[0].message
