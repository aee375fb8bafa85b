"""Layout controller.

Owns the viewport and the published layout. Every trigger (new series, new
width, new height) re-runs normalize -> compute_scale -> layout and swaps
the published scale, geometry and axis labels in one assignment, so readers
never see a mix of old and new values.
"""

import logging
import math
from enum import Enum
from typing import NamedTuple, Optional, Sequence

from candlechart.engine import compute_scale, layout, normalize
from candlechart.models import (
    AxisLabels,
    CandleGeometry,
    CandlestickPoint,
    PriceScale,
    ViewportDimensions,
)
from candlechart.resize import ResizeSignal
from candlechart.validation import check_ohlc

logger = logging.getLogger(__name__)


class LayoutState(str, Enum):
    """Lifecycle of a layout controller."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"


class _Published(NamedTuple):
    scale: PriceScale
    geometry: tuple[CandleGeometry, ...]
    axis_labels: AxisLabels


class LayoutController:
    """Keeps chart geometry in sync with its data and viewport.

    Usage::

        controller = LayoutController()
        controller.set_series(points)
        controller.set_viewport_width(500)
        shapes = controller.get_geometry()
    """

    def __init__(self, viewport: Optional[ViewportDimensions] = None):
        self.viewport = viewport.model_copy() if viewport else ViewportDimensions()
        self._series: Optional[Sequence[CandlestickPoint]] = None
        self._published: Optional[_Published] = None
        self._signal: Optional[ResizeSignal] = None

    @property
    def state(self) -> LayoutState:
        if self._published is None:
            return LayoutState.UNINITIALIZED
        return LayoutState.READY

    @property
    def series(self) -> tuple[CandlestickPoint, ...]:
        """Source points of the published geometry, empty before the first layout."""
        return tuple(shape.source_point for shape in self.get_geometry())

    # ---- triggers ----

    def set_series(self, series: Optional[Sequence[CandlestickPoint]]) -> None:
        """Replace the data and re-layout. None or empty uses the sample series."""
        self._series = series
        issues = check_ohlc(series) if series else []
        if issues:
            logger.warning(
                "Series has %d OHLC inconsistencies, rendering as-is (first: %s at %s)",
                len(issues),
                issues[0].message,
                issues[0].time,
            )
        self._relayout()

    def set_viewport_width(self, width: float) -> None:
        """Apply a new content width. Non-positive or non-finite widths are ignored."""
        if not math.isfinite(width) or width <= 0:
            logger.debug("Ignoring invalid viewport width %s", width)
            return
        self.viewport.width = width
        self._relayout()

    def set_viewport_height(self, height: float) -> None:
        """Apply a new plot height. Non-positive or non-finite heights are ignored."""
        if not math.isfinite(height) or height <= 0:
            logger.debug("Ignoring invalid viewport height %s", height)
            return
        self.viewport.height = height
        self._relayout()

    def _relayout(self) -> None:
        series = normalize(self._series)
        scale = compute_scale(series)
        geometry = layout(series, scale, self.viewport)
        self._published = _Published(
            scale=scale,
            geometry=geometry,
            axis_labels=AxisLabels(
                y_axis=scale.labels,
                x_axis=tuple(point.time for point in series),
            ),
        )
        logger.debug(
            "Laid out %d candles at %sx%s (price range %s-%s)",
            len(geometry),
            self.viewport.width,
            self.viewport.height,
            scale.min_price,
            scale.max_price,
        )

    # ---- outputs ----

    def get_geometry(self) -> tuple[CandleGeometry, ...]:
        """Published candle shapes, empty before the first layout."""
        if self._published is None:
            return ()
        return self._published.geometry

    def get_axis_labels(self) -> AxisLabels:
        """Published axis labels, empty before the first layout."""
        if self._published is None:
            return AxisLabels()
        return self._published.axis_labels

    def get_scale(self) -> Optional[PriceScale]:
        """Published price scale, None before the first layout."""
        if self._published is None:
            return None
        return self._published.scale

    # ---- resize source ----

    def attach(self, signal: ResizeSignal) -> None:
        """Follow width changes from a resize signal."""
        if self._signal is not None:
            self.detach()
        signal.connect(self.set_viewport_width)
        self._signal = signal

    def detach(self) -> None:
        """Stop following the attached resize signal."""
        if self._signal is not None:
            self._signal.disconnect(self.set_viewport_width)
            self._signal = None

    def dispose(self) -> None:
        """Detach from the resize signal and drop the published layout."""
        self.detach()
        self._published = None
