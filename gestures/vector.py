"""
Vector poses: LINE, CIRCLE, RECTANGLE.

These are checked before the free-hand poses; under the extension
heuristic the two groups overlap.
"""
from __future__ import annotations

from domain.enums import Finger, GestureKind
from domain.models import HandPose
from gestures.base import PosePredicate
from utils.constants import (
    CIRCLE_CONFIDENCE,
    LINE_CONFIDENCE,
    PINCH_DISTANCE,
    RECTANGLE_CONFIDENCE,
)


class LinePose(PosePredicate):
    """Index + middle up, ring + pinky curled."""
    KIND = GestureKind.LINE
    CONFIDENCE = LINE_CONFIDENCE

    def matches(self, hand: HandPose) -> bool:
        return (
            hand.is_extended(Finger.INDEX)
            and hand.is_extended(Finger.MIDDLE)
            and not hand.is_extended(Finger.RING)
            and not hand.is_extended(Finger.PINKY)
        )


class CirclePose(PosePredicate):
    """OK sign: thumb tip touching index tip, middle up."""
    KIND = GestureKind.CIRCLE
    CONFIDENCE = CIRCLE_CONFIDENCE

    def __init__(self, pinch_distance: float = PINCH_DISTANCE) -> None:
        self._pinch_distance = pinch_distance

    def matches(self, hand: HandPose) -> bool:
        return hand.pinch_distance < self._pinch_distance and hand.is_extended(Finger.MIDDLE)


class RectanglePose(PosePredicate):
    """Thumbs up: thumb raised, index / middle / ring curled."""
    KIND = GestureKind.RECTANGLE
    CONFIDENCE = RECTANGLE_CONFIDENCE

    def matches(self, hand: HandPose) -> bool:
        return (
            hand.thumb_raised
            and not hand.is_extended(Finger.INDEX)
            and not hand.is_extended(Finger.MIDDLE)
            and not hand.is_extended(Finger.RING)
        )
