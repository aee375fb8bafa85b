"""Resize notifications.

Stands in for whatever the host uses to observe container size changes.
Listeners receive the content width, i.e. the container width with the
padding and y-axis gutter already removed.
"""

import logging
from typing import Callable

logger = logging.getLogger(__name__)

DEFAULT_CHROME_WIDTH = 80

ResizeListener = Callable[[float], None]


def content_width(container_width: float, chrome_width: float = DEFAULT_CHROME_WIDTH) -> float:
    """Width left for candles once the container chrome is removed."""
    return container_width - chrome_width


class ResizeSignal:
    """Synchronous registry of width-change listeners."""

    def __init__(self, chrome_width: float = DEFAULT_CHROME_WIDTH):
        self.chrome_width = chrome_width
        self._listeners: list[ResizeListener] = []

    def connect(self, listener: ResizeListener) -> None:
        """Register a listener. Registering twice has no effect."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def disconnect(self, listener: ResizeListener) -> None:
        """Unregister a listener if present."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def emit(self, width: float) -> None:
        """Notify every listener of a new content width."""
        for listener in list(self._listeners):
            listener(width)

    def emit_container(self, container_width: float) -> None:
        """Notify listeners of a new container width.

        Container widths that leave no room for content are dropped.
        """
        width = content_width(container_width, self.chrome_width)
        if width <= 0:
            logger.debug("Ignoring container width %s with no room for content", container_width)
            return
        self.emit(width)
