from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from domain.models import BrushSettings, Color
from utils import constants as C


@dataclass
class AppConfig:
    """
    Central configuration injected into all components.
    Defaults mirror utils/constants.py.
    """
    # ---- camera --------------------------------------------------------
    camera_device: int = 0
    fps_limit: int = 30
    camera_resolution: Tuple[int, int] = (640, 480)

    # ---- hand detector -------------------------------------------------
    max_num_hands: int = 2
    min_detection_confidence: float = 0.5
    min_tracking_confidence: float = 0.5

    # ---- classifier / stabilizer ---------------------------------------
    pinch_distance: float = C.PINCH_DISTANCE
    stabilizer_window: int = C.STABILIZER_WINDOW
    stabilizer_consensus_ratio: float = C.STABILIZER_CONSENSUS_RATIO

    # ---- trajectory / shape fitter -------------------------------------
    trajectory_capacity: int = C.TRACK_CAPACITY
    min_fit_points: int = C.MIN_FIT_POINTS
    line_threshold: float = C.LINE_THRESHOLD
    circle_threshold: float = C.CIRCLE_THRESHOLD
    rectangle_threshold: float = C.RECTANGLE_THRESHOLD

    # ---- host policy ---------------------------------------------------
    recognition_delay: float = C.RECOGNITION_DELAY
    auto_accept_confidence: float = C.AUTO_ACCEPT_CONFIDENCE
    active_confidence: float = C.ACTIVE_CONFIDENCE
    cursor_confidence: float = C.CURSOR_CONFIDENCE

    # ---- canvas / brush ------------------------------------------------
    canvas_size: Tuple[int, int] = (800, 600)
    brush_color: Color = (0, 0, 0)
    brush_size: int = 5
    eraser_size: int = 20
    vector_mode: bool = False

    # ---- logging -------------------------------------------------------
    debug: bool = False
    log_to_file: bool = True

    def brush_settings(self) -> BrushSettings:
        return BrushSettings(
            color=self.brush_color,
            brush_size=self.brush_size,
            eraser_size=self.eraser_size,
            vector_mode=self.vector_mode,
        )


# Default instance: import and use directly, or override in tests.
default_config = AppConfig()
