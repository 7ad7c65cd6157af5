"""
TrajectoryAccumulator — bounded history of recent cursor positions for
the stroke in progress.

The host must clear() it at every stroke boundary (stroke start, mode
toggle, explicit cancel) so stale points never leak into a new fit.
"""
from __future__ import annotations
import time
from collections import deque
from typing import Callable, Optional, Tuple

from domain.models import TrackPoint
from utils.constants import TRACK_CAPACITY
from utils.geometry import Point2D


class TrajectoryAccumulator:
    """
    Parameters
    ----------
    capacity : int
        Maximum number of points kept; older points are evicted FIFO.
    clock : callable
        Monotonic time source used to stamp points (injectable for tests).
    """

    def __init__(
        self,
        capacity: int = TRACK_CAPACITY,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._points: deque[TrackPoint] = deque(maxlen=capacity)
        self._clock = clock

    def add_point(self, point: Point2D, timestamp: Optional[float] = None) -> None:
        ts = self._clock() if timestamp is None else timestamp
        self._points.append(TrackPoint(float(point[0]), float(point[1]), ts))

    def clear(self) -> None:
        self._points.clear()

    def snapshot(self) -> Tuple[TrackPoint, ...]:
        """Ordered, read-only copy of the current points (oldest first)."""
        return tuple(self._points)

    @property
    def capacity(self) -> int:
        return self._points.maxlen

    def __len__(self) -> int:
        return len(self._points)
