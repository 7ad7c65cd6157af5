"""
Pure geometric utility functions.
No imports from the rest of the project.
"""
from __future__ import annotations
import math
from typing import Sequence, Tuple

import numpy as np

Point2D = Tuple[float, float]


def dist(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two points (x/y only)."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def is_extended(tip: Sequence[float], pip: Sequence[float], wrist: Sequence[float]) -> bool:
    """
    Finger extension proxy: the tip is farther from the wrist than the
    proximal-interphalangeal joint.

    Directionally correct for upright hands; misfires when the hand is
    rotated close to perpendicular to the camera.
    """
    return dist(tip, wrist) > dist(pip, wrist)


def mirror_x(point: Sequence[float]) -> Point2D:
    """Map a detector-frame point to the user's frame (horizontal flip)."""
    return (1.0 - float(point[0]), float(point[1]))


def centroid(points: np.ndarray) -> Point2D:
    """Mean of an (n, 2) array."""
    cx, cy = points.mean(axis=0)
    return (float(cx), float(cy))


def point_segment_distances(
    points: np.ndarray,
    start: Sequence[float],
    end: Sequence[float],
    eps: float = 1e-12,
) -> np.ndarray:
    """
    Distance from every row of ``points`` (n, 2) to the segment start→end.

    The projection parameter is clamped to [0, 1]; a segment shorter than
    ``eps`` degenerates to the distance from ``start``.
    """
    a = np.asarray(start, dtype=float)
    d = np.asarray(end, dtype=float) - a
    rel = points - a
    len_sq = float(d @ d)
    if len_sq < eps:
        return np.hypot(rel[:, 0], rel[:, 1])
    t = np.clip((rel @ d) / len_sq, 0.0, 1.0)
    closest = a + t[:, None] * d
    diff = points - closest
    return np.hypot(diff[:, 0], diff[:, 1])


def bounding_box(points: np.ndarray) -> Tuple[Point2D, Point2D]:
    """Axis-aligned bounding box as (min corner, max corner)."""
    lo = points.min(axis=0)
    hi = points.max(axis=0)
    return (float(lo[0]), float(lo[1])), (float(hi[0]), float(hi[1]))
