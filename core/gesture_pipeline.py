"""
GesturePipeline — the single per-frame entry point of the core.

    landmarks of the first hand → PoseClassifier → GestureStabilizer

Design decisions:
  - Only the first detected hand is consumed; the rest are ignored.
  - A frame with no hand returns NONE at (0, 0) without feeding the
    stabilizer, so a lost hand never drags the voted cursor to the corner.
  - Classifier and stabilizer are injected (allows testing in isolation).
"""
from __future__ import annotations
from typing import Optional, Sequence, Tuple

from core.gesture_stabilizer import GestureStabilizer
from core.pose_classifier import PoseClassifier
from domain.models import GestureResult, LandmarkLike
from utils.logger import get_logger

logger = get_logger("GesturePipeline")


class GesturePipeline:
    """
    Usage
    -----
    pipeline = GesturePipeline()
    gesture  = pipeline.process_frame(multi_hand_landmarks)

    Parameters
    ----------
    classifier : PoseClassifier, optional
    stabilizer : GestureStabilizer, optional
    """

    def __init__(
        self,
        classifier: Optional[PoseClassifier] = None,
        stabilizer: Optional[GestureStabilizer] = None,
    ) -> None:
        self._classifier = classifier or PoseClassifier()
        self._stabilizer = stabilizer or GestureStabilizer()
        self._last_raw: GestureResult = GestureResult.none()
        self._last_stable: GestureResult = GestureResult.none()

    # ------------------------------------------------------------------
    def process_frame(
        self,
        hands: Optional[Sequence[Sequence[LandmarkLike]]],
    ) -> GestureResult:
        """
        Parameters
        ----------
        hands : sequence of landmark sequences, or None
            Per-hand landmarks as delivered by the detector this frame.

        Returns
        -------
        GestureResult
            The stabilized classification the rest of the system treats
            as ground truth for this frame.
        """
        if hands is None or len(hands) == 0:
            self._last_raw = GestureResult.none()
            stable = GestureResult.none()
        else:
            self._last_raw = self._classifier.classify(hands[0])
            stable = self._stabilizer.observe(self._last_raw)

        if stable.kind != self._last_stable.kind:
            logger.debug("[GESTURE] %s → %s", self._last_stable.kind.value, stable.kind.value)
        self._last_stable = stable
        return stable

    @property
    def last_raw(self) -> GestureResult:
        """The unstabilized classification of the most recent frame."""
        return self._last_raw

    @property
    def window(self) -> Tuple[GestureResult, ...]:
        return self._stabilizer.window

    def reset(self) -> None:
        """Forget all history (call when tracking is stopped / restarted)."""
        self._stabilizer.reset()
        self._last_raw = GestureResult.none()
        self._last_stable = GestureResult.none()
