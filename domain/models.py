from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Sequence, Tuple, Union
import time

import numpy as np

from domain.enums import (
    CanvasAction,
    Finger,
    FINGER_JOINTS,
    GestureKind,
    HandLandmark,
    ShapeType,
)
from utils.constants import HAND_LANDMARK_COUNT
from utils.geometry import Point2D, dist, is_extended, mirror_x

# Type aliases
Color = Tuple[int, int, int]          # BGR, as OpenCV draws it
LandmarkLike = Any                    # Landmark, detector landmark or (x, y[, z])


@dataclass(frozen=True)
class Landmark:
    """One normalised detector keypoint."""
    x: float
    y: float
    z: float = 0.0


@dataclass(frozen=True)
class GestureResult:
    """
    One frame's classification.
    ``position`` is always the mirrored index fingertip, even for NONE.
    """
    kind: GestureKind
    position: Point2D
    confidence: float

    @classmethod
    def none(cls, position: Point2D = (0.0, 0.0)) -> "GestureResult":
        return cls(GestureKind.NONE, position, 0.0)


@dataclass(frozen=True)
class TrackPoint:
    x: float
    y: float
    timestamp: float = field(default_factory=time.monotonic)


# ---- vector shapes (tagged variant) ---------------------------------------
@dataclass(frozen=True)
class LineShape:
    type: ClassVar[ShapeType] = ShapeType.LINE
    start: Point2D
    end: Point2D


@dataclass(frozen=True)
class CircleShape:
    type: ClassVar[ShapeType] = ShapeType.CIRCLE
    center: Point2D
    radius: float


@dataclass(frozen=True)
class RectangleShape:
    type: ClassVar[ShapeType] = ShapeType.RECTANGLE
    top_left: Point2D
    bottom_right: Point2D


VectorShape = Union[LineShape, CircleShape, RectangleShape]


@dataclass(frozen=True)
class ShapeFit:
    """Result of scoring a trajectory against the candidate primitives."""
    shape: ShapeType
    confidence: float
    payload: Optional[VectorShape] = None

    @classmethod
    def none(cls) -> "ShapeFit":
        return cls(ShapeType.NONE, 0.0)


@dataclass(frozen=True)
class StyledShape:
    """A finished (or preview) shape with host-assigned identity and style."""
    id: str
    geometry: VectorShape
    color: Color
    stroke_width: int

    @property
    def type(self) -> ShapeType:
        return self.geometry.type


@dataclass(frozen=True)
class CanvasEvent:
    """
    A single instruction for the rendering layer.
    ``point`` is set for DRAW / ERASE, ``shape`` for PREVIEW / SHAPE_COMPLETED.
    """
    action: CanvasAction
    point: Optional[Point2D] = None
    shape: Optional[StyledShape] = None


@dataclass
class BrushSettings:
    """Drawing state owned by the host, not by the classifier."""
    color: Color = (0, 0, 0)
    brush_size: int = 5
    eraser_size: int = 20
    vector_mode: bool = False


# ---- hand pose ------------------------------------------------------------
def _coords(landmark: LandmarkLike) -> Tuple[float, float, float]:
    if hasattr(landmark, "x") and hasattr(landmark, "y"):
        return landmark.x, landmark.y, getattr(landmark, "z", 0.0)
    return landmark[0], landmark[1], (landmark[2] if len(landmark) > 2 else 0.0)


@dataclass(frozen=True, eq=False)
class HandPose:
    """
    A validated 21-landmark hand, stored as a (21, 3) float array.

    Build it with ``HandPose.from_landmarks``; anything that is not exactly
    21 finite keypoints yields None instead of a partial pose.
    """
    points: np.ndarray

    @classmethod
    def from_landmarks(cls, landmarks: Optional[Sequence[LandmarkLike]]) -> Optional["HandPose"]:
        if landmarks is None:
            return None
        try:
            if len(landmarks) != HAND_LANDMARK_COUNT:
                return None
            points = np.asarray([_coords(lm) for lm in landmarks], dtype=float)
        except (TypeError, ValueError, IndexError, KeyError):
            return None
        if points.shape != (HAND_LANDMARK_COUNT, 3) or not np.isfinite(points).all():
            return None
        return cls(points)

    # ---- convenience accessors ----------------------------------------
    def point(self, landmark: HandLandmark) -> np.ndarray:
        return self.points[int(landmark)]

    @property
    def wrist(self) -> np.ndarray:
        return self.point(HandLandmark.WRIST)

    @property
    def cursor(self) -> Point2D:
        """Index fingertip in the user's (mirrored) frame."""
        return mirror_x(self.point(HandLandmark.INDEX_FINGER_TIP))

    def is_extended(self, finger: Finger) -> bool:
        tip, pip = FINGER_JOINTS[finger]
        return is_extended(self.point(tip), self.point(pip), self.wrist)

    @property
    def thumb_raised(self) -> bool:
        """Thumb tip above its IP joint (image y grows downwards)."""
        return bool(self.point(HandLandmark.THUMB_TIP)[1] < self.point(HandLandmark.THUMB_IP)[1])

    @property
    def pinch_distance(self) -> float:
        return dist(self.point(HandLandmark.THUMB_TIP), self.point(HandLandmark.INDEX_FINGER_TIP))
