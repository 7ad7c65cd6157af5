"""
PoseClassifier — maps one frame's 21 landmarks to a GestureResult.
No buffer and no consensus; see GestureStabilizer for that.
"""
from __future__ import annotations
from typing import List, Optional, Sequence

from domain.models import GestureResult, HandPose, LandmarkLike
from gestures.base import PosePredicate
from gestures.drawing import DrawPose, ErasePose, MenuPose
from gestures.vector import CirclePose, LinePose, RectanglePose
from utils.constants import PINCH_DISTANCE


def default_predicates(pinch_distance: float = PINCH_DISTANCE) -> List[PosePredicate]:
    """Predicates in priority order; first match wins."""
    return [
        LinePose(),
        CirclePose(pinch_distance),
        RectanglePose(),
        DrawPose(),
        ErasePose(),
        MenuPose(),
    ]


class PoseClassifier:
    """
    Rule-based static classifier.

    Parameters
    ----------
    predicates : list[PosePredicate], optional
        Ordered predicates; defaults to ``default_predicates()``.
    """

    def __init__(self, predicates: Optional[Sequence[PosePredicate]] = None) -> None:
        self._predicates = list(predicates) if predicates is not None else default_predicates()

    def classify(self, landmarks: Optional[Sequence[LandmarkLike]]) -> GestureResult:
        """
        Parameters
        ----------
        landmarks : sequence
            Exactly 21 keypoints for one hand. Anything else is treated as
            "no hand" and yields NONE at (0, 0) with zero confidence.

        Returns
        -------
        GestureResult
        """
        hand = HandPose.from_landmarks(landmarks)
        if hand is None:
            return GestureResult.none()

        for predicate in self._predicates:
            if predicate.matches(hand):
                return predicate.result(hand)

        return GestureResult.none(hand.cursor)


_default_classifier = PoseClassifier()


def classify(landmarks: Optional[Sequence[LandmarkLike]]) -> GestureResult:
    """Module-level shortcut using the default predicate order."""
    return _default_classifier.classify(landmarks)
