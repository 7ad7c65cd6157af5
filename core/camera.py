"""
Camera — thin wrapper around OpenCV VideoCapture with FPS limiting.
No detection, no gestures.
"""
from __future__ import annotations
import time
from typing import Optional, Tuple

import cv2
import numpy as np

from utils.logger import get_logger

logger = get_logger("Camera")


class Camera:
    """
    Parameters
    ----------
    device : int
        Camera index (0 = default webcam).
    fps_limit : int
        Maximum frames per second to process.
    resolution : (int, int)
        Requested capture size; the driver may pick the closest it supports.
    """

    def __init__(
        self,
        device: int = 0,
        fps_limit: int = 30,
        resolution: Tuple[int, int] = (640, 480),
    ) -> None:
        self._cap = cv2.VideoCapture(device)
        self._frame_time = 1.0 / fps_limit
        self._prev_time: float = 0.0

        if not self._cap.isOpened():
            raise RuntimeError(f"Cannot open camera device {device}")

        width, height = resolution
        self._cap.set(cv2.CAP_PROP_FRAME_WIDTH, width)
        self._cap.set(cv2.CAP_PROP_FRAME_HEIGHT, height)
        logger.info("Camera %d opened (%dx%d @ %d fps max)", device, width, height, fps_limit)

    # ------------------------------------------------------------------
    def read(self) -> Optional[np.ndarray]:
        """
        Sleep until the next frame is due (FPS limiter), then return it.
        Returns None on read failure.
        """
        wait = self._frame_time - (time.monotonic() - self._prev_time)
        if wait > 0:
            time.sleep(wait)
        self._prev_time = time.monotonic()

        ret, frame = self._cap.read()
        if not ret:
            logger.warning("Camera read failed")
            return None
        return frame

    def release(self) -> None:
        self._cap.release()

    def __enter__(self) -> "Camera":
        return self

    def __exit__(self, *_) -> None:
        self.release()
