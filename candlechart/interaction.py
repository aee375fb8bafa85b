"""Pointer interaction: resolves hovered shapes back to their data points."""

import logging
from typing import Optional

from candlechart.controller import LayoutController
from candlechart.models import CandlestickPoint

logger = logging.getLogger(__name__)


class InteractionAdapter:
    """Tracks the hovered candle for a layout controller.

    Indices refer to the controller's currently published geometry. The
    hovered index is resolved on every read, so a re-layout never yields a
    point from a previous dataset.
    """

    def __init__(self, controller: LayoutController):
        self.controller = controller
        self.active_index: Optional[int] = None

    def data_at(self, index: int) -> Optional[CandlestickPoint]:
        """Data point behind the shape at ``index``, or None if out of range."""
        geometry = self.controller.get_geometry()
        if not 0 <= index < len(geometry):
            return None
        return geometry[index].source_point

    def pointer_entered(self, index: int) -> Optional[CandlestickPoint]:
        """Record the hovered shape and return its data point."""
        point = self.data_at(index)
        if point is None:
            logger.debug("Pointer entered unknown shape %s", index)
            self.active_index = None
            return None
        self.active_index = index
        return point

    def pointer_left(self) -> None:
        """Clear the hovered shape."""
        self.active_index = None

    @property
    def active_point(self) -> Optional[CandlestickPoint]:
        if self.active_index is None:
            return None
        return self.data_at(self.active_index)
