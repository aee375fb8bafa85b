"""Property-based tests for candle geometry.

**Feature: candlestick-chart**
"""

import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from candlechart.engine import (
    SAMPLE_SERIES,
    compute_scale,
    layout,
    price_to_y,
    volume_bar_height,
)
from candlechart.models import CandlestickPoint, PriceScale, ViewportDimensions


@st.composite
def candle(draw):
    """Generate an OHLC-consistent candle."""
    low = draw(st.floats(min_value=1.0, max_value=100000.0))
    span = draw(st.floats(min_value=0.0, max_value=5000.0))
    high = low + span
    open_frac = draw(st.floats(min_value=0.0, max_value=1.0))
    close_frac = draw(st.floats(min_value=0.0, max_value=1.0))
    return CandlestickPoint(
        time="t",
        open=min(high, low + open_frac * span),
        high=high,
        low=low,
        close=min(high, low + close_frac * span),
        volume=draw(st.floats(min_value=0.0, max_value=1e6)),
    )


viewports = st.builds(
    ViewportDimensions,
    width=st.floats(min_value=50.0, max_value=4000.0),
    height=st.floats(min_value=50.0, max_value=2000.0),
    candle_width=st.floats(min_value=1.0, max_value=40.0),
)


class TestShapeBounds:
    """
    **Feature: candlestick-chart, Property 3: Shape Bounds**

    *For any* consistent series and viewport, wicks never have negative
    height and bodies are at least 2px tall.
    """

    @given(series=st.lists(candle(), min_size=1, max_size=40), viewport=viewports)
    @settings(max_examples=100, deadline=None)
    def test_wick_and_body_heights(self, series, viewport):
        scale = compute_scale(series)
        shapes = layout(series, scale, viewport)

        assert len(shapes) == len(series)
        for shape, point in zip(shapes, series):
            assert shape.wick_height >= 0
            assert shape.body_height >= 2
            assert shape.source_point == point

    @given(series=st.lists(candle(), min_size=1, max_size=40), viewport=viewports)
    @settings(max_examples=50, deadline=None)
    def test_layout_is_idempotent(self, series, viewport):
        scale = compute_scale(series)
        assert layout(series, scale, viewport) == layout(series, scale, viewport)


class TestSampleGeometry:
    """Known values for the sample series at the default 1040x360 viewport."""

    def test_first_candle(self):
        viewport = ViewportDimensions()
        shapes = layout(SAMPLE_SERIES, compute_scale(SAMPLE_SERIES), viewport)
        first = shapes[0]

        spacing = 1040 / 7
        assert first.x == pytest.approx(20 + (spacing - 20) / 2)
        # high 1220 and low 1150 on an 800-1500 scale
        assert first.wick_top == pytest.approx(164)
        assert first.wick_height == pytest.approx(36)
        assert first.body_top == pytest.approx(360 - 400 / 700 * 360 + 20)
        assert first.body_height == pytest.approx(20 / 700 * 360)
        assert first.is_bullish is True
        assert first.volume_bar_height == pytest.approx(45 / 250 * 60)

    def test_bearish_candle(self):
        shapes = layout(SAMPLE_SERIES, compute_scale(SAMPLE_SERIES), ViewportDimensions())
        # 3h ago: 1210 -> 980
        assert shapes[3].is_bullish is False
        assert shapes[3].body_top == pytest.approx(360 - 410 / 700 * 360 + 20)

    def test_candles_are_centered_in_slots(self):
        viewport = ViewportDimensions()
        shapes = layout(SAMPLE_SERIES, compute_scale(SAMPLE_SERIES), viewport)
        spacing = viewport.width / len(SAMPLE_SERIES)

        for left, right in zip(shapes, shapes[1:]):
            assert right.x - left.x == pytest.approx(spacing)


class TestPriceMapping:
    def test_higher_price_is_higher_on_screen(self):
        scale = PriceScale(min_price=800, max_price=1500, labels=())
        viewport = ViewportDimensions()

        assert price_to_y(1500, scale, viewport) == pytest.approx(20)
        assert price_to_y(800, scale, viewport) == pytest.approx(380)
        assert price_to_y(1200, scale, viewport) < price_to_y(1000, scale, viewport)

    def test_degenerate_range_maps_to_midpoint(self):
        flat = [CandlestickPoint(time="a", open=100, high=100, low=100, close=100, volume=0)]
        scale = compute_scale(flat)
        viewport = ViewportDimensions()

        assert scale.min_price == scale.max_price
        for price in (0, 100, 250):
            y = price_to_y(price, scale, viewport)
            assert math.isfinite(y)
            assert y == 200

        shape = layout(flat, scale, viewport)[0]
        assert shape.wick_top == 200
        assert shape.wick_height == 0
        assert shape.body_height == 2


class TestBullishTieBreak:
    """
    **Feature: candlestick-chart, Property 4: Bullish Tie-Break**

    A candle that closes exactly at its open is not bullish.
    """

    @given(price=st.floats(min_value=1.0, max_value=100000.0))
    @settings(max_examples=50, deadline=None)
    def test_equal_open_close_is_not_bullish(self, price: float):
        point = CandlestickPoint(
            time="t", open=price, high=price + 10, low=price - 0.5, close=price, volume=1,
        )
        shape = layout([point], compute_scale([point]), ViewportDimensions())[0]
        assert shape.is_bullish is False
        assert shape.body_height == 2


class TestVolumeBars:
    def test_reference_volume(self):
        assert volume_bar_height(250) == 60
        assert volume_bar_height(0) == 0
        assert volume_bar_height(125) == 30

    def test_volume_is_not_rescaled_to_dataset(self):
        heavy = [
            CandlestickPoint(time="a", open=10, high=12, low=9, close=11, volume=1000),
        ]
        shape = layout(heavy, compute_scale(heavy), ViewportDimensions())[0]
        assert shape.volume_bar_height == 240
