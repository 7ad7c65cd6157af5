"""
ShapeFitter — scores a trajectory against line, circle and rectangle
hypotheses.

Every fit is a single O(n) pass over the window; there is no iterative
refinement. Candidates are tried in a fixed order and the first one whose
confidence exceeds its threshold wins.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from domain.enums import ShapeType
from domain.models import CircleShape, LineShape, RectangleShape, ShapeFit, TrackPoint
from utils.constants import (
    CIRCLE_DEVIATION_GAIN,
    CIRCLE_MIN_RADIUS,
    CIRCLE_THRESHOLD,
    LINE_DEVIATION_GAIN,
    LINE_MIN_LENGTH,
    LINE_THRESHOLD,
    MIN_FIT_POINTS,
    RECTANGLE_EDGE_TOLERANCE,
    RECTANGLE_MIN_SIDE,
    RECTANGLE_THRESHOLD,
    SEGMENT_EPSILON,
)
from utils.geometry import bounding_box, centroid, dist, point_segment_distances
from utils.logger import get_logger

logger = get_logger("ShapeFitter")


def _as_array(points: Sequence[TrackPoint]) -> np.ndarray:
    return np.array([(p.x, p.y) for p in points], dtype=float)


def fit_line(xy: np.ndarray) -> ShapeFit:
    """First → last point, scored by mean deviation of the interior points."""
    start = (float(xy[0, 0]), float(xy[0, 1]))
    end = (float(xy[-1, 0]), float(xy[-1, 1]))

    interior = xy[1:-1]
    if len(interior) == 0:
        mean_dev = 0.0
    else:
        mean_dev = float(point_segment_distances(interior, start, end, SEGMENT_EPSILON).mean())

    confidence = max(0.0, 1.0 - LINE_DEVIATION_GAIN * mean_dev)
    if dist(start, end) <= LINE_MIN_LENGTH:
        confidence = 0.0
    return ShapeFit(ShapeType.LINE, confidence, LineShape(start, end))


def fit_circle(xy: np.ndarray) -> ShapeFit:
    """Centroid as center, mean centroid distance as radius."""
    center = centroid(xy)
    radii = np.hypot(xy[:, 0] - center[0], xy[:, 1] - center[1])
    radius = float(radii.mean())
    mean_dev = float(np.abs(radii - radius).mean())

    confidence = max(0.0, 1.0 - CIRCLE_DEVIATION_GAIN * mean_dev)
    if radius <= CIRCLE_MIN_RADIUS:
        confidence = 0.0
    return ShapeFit(ShapeType.CIRCLE, confidence, CircleShape(center, radius))


def fit_rectangle(xy: np.ndarray) -> ShapeFit:
    """Axis-aligned bounding box, scored by edge hugging × squareness."""
    (min_x, min_y), (max_x, max_y) = bounding_box(xy)
    width = max_x - min_x
    height = max_y - min_y

    tol = RECTANGLE_EDGE_TOLERANCE
    xs, ys = xy[:, 0], xy[:, 1]
    on_edge = (
        (np.abs(xs - min_x) < tol)
        | (np.abs(xs - max_x) < tol)
        | (np.abs(ys - min_y) < tol)
        | (np.abs(ys - max_y) < tol)
    )
    edge_ratio = float(on_edge.sum()) / len(xy)

    confidence = 0.0
    if width > RECTANGLE_MIN_SIDE and height > RECTANGLE_MIN_SIDE:
        confidence = edge_ratio * (min(width, height) / max(width, height))
    return ShapeFit(
        ShapeType.RECTANGLE,
        confidence,
        RectangleShape((min_x, min_y), (max_x, max_y)),
    )


class ShapeFitter:
    """
    Parameters
    ----------
    min_points : int
        Below this many points the answer is always NONE.
    line_threshold, circle_threshold, rectangle_threshold : float
        A candidate wins only if its confidence is strictly above these.
    """

    def __init__(
        self,
        min_points: int = MIN_FIT_POINTS,
        line_threshold: float = LINE_THRESHOLD,
        circle_threshold: float = CIRCLE_THRESHOLD,
        rectangle_threshold: float = RECTANGLE_THRESHOLD,
    ) -> None:
        self._min_points = min_points
        self._candidates = (
            (fit_line, line_threshold),
            (fit_circle, circle_threshold),
            (fit_rectangle, rectangle_threshold),
        )

    def fit(self, points: Sequence[TrackPoint]) -> ShapeFit:
        if len(points) < self._min_points:
            return ShapeFit.none()

        xy = _as_array(points)
        for fitter, threshold in self._candidates:
            result = fitter(xy)
            logger.debug("%s fit: %.3f (threshold %.2f)",
                         result.shape.value, result.confidence, threshold)
            if result.confidence > threshold:
                return result

        return ShapeFit.none()
