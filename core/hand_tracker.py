"""
HandTracker — encapsulates all MediaPipe logic.
The rest of the application never imports mediapipe directly.
"""
from __future__ import annotations
from typing import Any, List

import cv2
import mediapipe as mp

from domain.models import Landmark


class HandTracker:
    """
    Processes a BGR frame and returns the detector's normalised landmarks,
    one 21-entry list per detected hand, in detection order.

    Parameters
    ----------
    max_num_hands : int
    min_detection_confidence : float
    min_tracking_confidence : float
    draw_landmarks : bool
        Draw the hand skeleton onto the frame passed to process().
    """

    def __init__(
        self,
        max_num_hands: int = 1,
        min_detection_confidence: float = 0.5,
        min_tracking_confidence: float = 0.5,
        draw_landmarks: bool = True,
    ) -> None:
        self._mp_hands = mp.solutions.hands
        self._mp_draw  = mp.solutions.drawing_utils
        self._draw     = draw_landmarks
        self._hands    = self._mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            model_complexity=1,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )

    # ------------------------------------------------------------------
    def process(self, frame: Any) -> List[List[Landmark]]:
        """
        Parameters
        ----------
        frame : np.ndarray
            BGR frame from OpenCV (not mirrored).

        Returns
        -------
        list of hands, each a list of 21 ``Landmark`` in [0, 1] image
        coordinates. Empty when no hand is visible.
        """
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        results = self._hands.process(rgb)

        hands: List[List[Landmark]] = []
        if results.multi_hand_landmarks:
            for hand_landmarks in results.multi_hand_landmarks:
                if self._draw:
                    self._mp_draw.draw_landmarks(
                        frame, hand_landmarks, self._mp_hands.HAND_CONNECTIONS
                    )
                hands.append([Landmark(lm.x, lm.y, lm.z) for lm in hand_landmarks.landmark])
        return hands

    def release(self) -> None:
        self._hands.close()
