"""
Synthetic hands and trajectories shared by the test-suite.

Hand layout (image coordinates, y grows downwards): wrist at (0.5, 0.9),
PIP joints at y=0.6, an extended fingertip at y=0.4 (farther from the
wrist than the PIP) and a curled one at y=0.68 (closer).
"""
from __future__ import annotations
import math
from typing import Iterable, List, Optional, Tuple

import pytest

from domain.models import Landmark, TrackPoint

_FINGER_X = {"index": 0.45, "middle": 0.50, "ring": 0.55, "pinky": 0.60}
_FINGER_BASE = {"index": 5, "middle": 9, "ring": 13, "pinky": 17}


def make_hand(
    extended: Iterable[str] = (),
    thumb_raised: bool = False,
    thumb_tip: Optional[Tuple[float, float]] = None,
) -> List[Landmark]:
    """Build 21 landmarks with the named fingers extended."""
    extended = set(extended)
    points = [Landmark(0.5, 0.9)] + [Landmark(0.0, 0.0)] * 20

    # thumb: CMC, MCP, IP, TIP
    points[1] = Landmark(0.42, 0.85)
    points[2] = Landmark(0.38, 0.80)
    points[3] = Landmark(0.35, 0.75)
    points[4] = Landmark(0.33, 0.70) if thumb_raised else Landmark(0.37, 0.78)
    if thumb_tip is not None:
        points[4] = Landmark(*thumb_tip)

    for name, base in _FINGER_BASE.items():
        x = _FINGER_X[name]
        points[base] = Landmark(x, 0.70)        # MCP
        points[base + 1] = Landmark(x, 0.60)    # PIP
        if name in extended:
            points[base + 2] = Landmark(x, 0.50)
            points[base + 3] = Landmark(x, 0.40)
        else:
            points[base + 2] = Landmark(x, 0.64)
            points[base + 3] = Landmark(x, 0.68)
    return points


def track(points: Iterable[Tuple[float, float]]) -> List[TrackPoint]:
    return [TrackPoint(x, y, float(i)) for i, (x, y) in enumerate(points)]


def segment_points(start, end, n: int) -> List[TrackPoint]:
    return track(
        (start[0] + (end[0] - start[0]) * i / (n - 1),
         start[1] + (end[1] - start[1]) * i / (n - 1))
        for i in range(n)
    )


def circle_points(center, radius: float, n: int) -> List[TrackPoint]:
    return track(
        (center[0] + radius * math.cos(2 * math.pi * i / n),
         center[1] + radius * math.sin(2 * math.pi * i / n))
        for i in range(n)
    )


def rectangle_points(top_left, bottom_right, per_edge: int) -> List[TrackPoint]:
    """Walk the perimeter clockwise from the top-left corner."""
    (x0, y0), (x1, y1) = top_left, bottom_right
    corners = [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]
    pts = []
    for k in range(4):
        (ax, ay), (bx, by) = corners[k], corners[(k + 1) % 4]
        for i in range(per_edge):
            t = i / per_edge
            pts.append((ax + (bx - ax) * t, ay + (by - ay) * t))
    return track(pts)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
