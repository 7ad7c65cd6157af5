"""
Free-hand poses: DRAW, ERASE, MENU.
"""
from __future__ import annotations

from domain.enums import Finger, GestureKind
from domain.models import HandPose
from gestures.base import PosePredicate
from utils.constants import DRAW_CONFIDENCE, ERASE_CONFIDENCE, MENU_CONFIDENCE

_FOUR_FINGERS = (Finger.INDEX, Finger.MIDDLE, Finger.RING, Finger.PINKY)


class DrawPose(PosePredicate):
    """Index finger pointing, middle and ring curled."""
    KIND = GestureKind.DRAW
    CONFIDENCE = DRAW_CONFIDENCE

    def matches(self, hand: HandPose) -> bool:
        return (
            hand.is_extended(Finger.INDEX)
            and not hand.is_extended(Finger.MIDDLE)
            and not hand.is_extended(Finger.RING)
        )


class ErasePose(PosePredicate):
    """Closed fist."""
    KIND = GestureKind.ERASE
    CONFIDENCE = ERASE_CONFIDENCE

    def matches(self, hand: HandPose) -> bool:
        return not any(hand.is_extended(f) for f in _FOUR_FINGERS)


class MenuPose(PosePredicate):
    """Open palm."""
    KIND = GestureKind.MENU
    CONFIDENCE = MENU_CONFIDENCE

    def matches(self, hand: HandPose) -> bool:
        return all(hand.is_extended(f) for f in _FOUR_FINGERS)
