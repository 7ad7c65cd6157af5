"""
OpenCVUI — all rendering logic isolated from detection and stroke policy.

The pipeline never calls cv2 directly; it delegates to this class.
Free-hand ink lives on a raster canvas; vector shapes are kept as a
display list and redrawn every frame on top of it.
"""
from __future__ import annotations
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import cv2
import numpy as np

from app.config import AppConfig
from domain.enums import CanvasAction, GestureKind
from domain.models import (
    BrushSettings,
    CanvasEvent,
    CircleShape,
    GestureResult,
    LineShape,
    RectangleShape,
    StyledShape,
)
from utils.geometry import Point2D

_KIND_COLORS = {
    GestureKind.DRAW:      (0,   160,   0),
    GestureKind.ERASE:     (0,   0,   255),
    GestureKind.MENU:      (255, 165,   0),
    GestureKind.LINE:      (255, 0,   255),
    GestureKind.RECTANGLE: (255, 255,   0),
    GestureKind.CIRCLE:    (0,   200, 255),
    GestureKind.NONE:      (128, 128, 128),
}
_WHITE = (255, 255, 255)
_TEXT  = (60, 60, 60)
_THUMB_SIZE = (192, 144)

KEY_ESC = 27


class OpenCVUI:
    """Composites canvas, shapes and overlays and shows them in a window."""

    def __init__(self, config: AppConfig, window_name: str = "Air Canvas") -> None:
        self._cfg  = config
        self._name = window_name
        width, height = config.canvas_size
        self._size = (width, height)
        self._canvas = np.full((height, width, 3), 255, dtype=np.uint8)
        self._shapes: List[StyledShape] = []
        self._preview: Optional[StyledShape] = None
        self._last_px: Optional[Tuple[int, int]] = None

    # ---- state --------------------------------------------------------
    def apply(self, events: Iterable[CanvasEvent], settings: BrushSettings) -> None:
        """Apply the controller's events to the canvas and display list."""
        for event in events:
            if event.action is CanvasAction.DRAW:
                px = self._to_px(event.point)
                if self._last_px is not None:
                    cv2.line(self._canvas, self._last_px, px, settings.color,
                             settings.brush_size, cv2.LINE_AA)
                self._last_px = px
            elif event.action is CanvasAction.ERASE:
                cv2.circle(self._canvas, self._to_px(event.point),
                           settings.eraser_size, _WHITE, -1)
                self._last_px = None
            elif event.action is CanvasAction.PEN_UP:
                self._last_px = None
            elif event.action is CanvasAction.PREVIEW:
                self._preview = event.shape
            elif event.action is CanvasAction.PREVIEW_CLEARED:
                self._preview = None
            elif event.action is CanvasAction.SHAPE_COMPLETED:
                self._preview = None
                self._shapes.append(event.shape)

    def clear(self) -> None:
        self._canvas[:] = 255
        self._shapes.clear()
        self._preview = None
        self._last_px = None

    @property
    def shapes(self) -> Sequence[StyledShape]:
        return tuple(self._shapes)

    # ---- rendering ----------------------------------------------------
    def render(
        self,
        frame: Any,
        gesture: GestureResult,
        raw: GestureResult,
        window: Sequence[GestureResult],
        cursor: Optional[Point2D],
        settings: BrushSettings,
        tracking: bool,
    ) -> None:
        """Draw everything onto a copy of the canvas and show it."""
        out = self._canvas.copy()
        w, h = self._size

        for shape in self._shapes:
            self._draw_shape(out, shape, shape.stroke_width)
        if self._preview is not None:
            self._draw_shape(out, self._preview, 1)

        if cursor is not None:
            px = self._to_px(cursor)
            if gesture.kind is GestureKind.ERASE:
                cv2.circle(out, px, settings.eraser_size, _KIND_COLORS[GestureKind.ERASE], 1)
            else:
                cv2.circle(out, px, max(3, settings.brush_size), _KIND_COLORS[gesture.kind], -1)

        if frame is not None:
            thumb = cv2.resize(cv2.flip(frame, 1), _THUMB_SIZE)
            tw, th = _THUMB_SIZE
            out[h - th - 10:h - 10, 10:10 + tw] = thumb

        color = _KIND_COLORS.get(gesture.kind, _TEXT)
        cv2.putText(out, f"Gesture: {gesture.kind.value} ({gesture.confidence*100:.0f}%)",
                    (20, 40), cv2.FONT_HERSHEY_SIMPLEX, 0.9, color, 2)
        cv2.putText(out, f"Raw: {raw.kind.value} ({raw.confidence*100:.0f}%)",
                    (20, 70), cv2.FONT_HERSHEY_SIMPLEX, 0.55, _TEXT, 1)
        if window:
            buf_str = " ".join(r.kind.value[:3] for r in window)
            cv2.putText(out, f"Window: [{buf_str}]",
                        (20, 95), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (150, 150, 150), 1)

        mode = "VECTOR" if settings.vector_mode else "FREEHAND"
        if not tracking:
            mode += " | TRACKING OFF"
        cv2.putText(out, mode, (w - 260, 40), cv2.FONT_HERSHEY_SIMPLEX, 0.6, _TEXT, 1)
        cv2.putText(out, "v vector  c clear  t tracking  ESC quit",
                    (w - 390, h - 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, _TEXT, 1)

        cv2.imshow(self._name, out)

    def poll_key(self) -> int:
        return cv2.waitKey(1) & 0xFF

    def close(self) -> None:
        cv2.destroyAllWindows()

    # ------------------------------------------------------------------
    def _to_px(self, point: Point2D) -> Tuple[int, int]:
        w, h = self._size
        return int(round(point[0] * w)), int(round(point[1] * h))

    def _draw_shape(self, img: np.ndarray, shape: StyledShape, thickness: int) -> None:
        geometry = shape.geometry
        if isinstance(geometry, LineShape):
            cv2.line(img, self._to_px(geometry.start), self._to_px(geometry.end),
                     shape.color, thickness, cv2.LINE_AA)
        elif isinstance(geometry, CircleShape):
            radius = int(round(geometry.radius * self._size[0]))
            cv2.circle(img, self._to_px(geometry.center), radius,
                       shape.color, thickness, cv2.LINE_AA)
        elif isinstance(geometry, RectangleShape):
            cv2.rectangle(img, self._to_px(geometry.top_left), self._to_px(geometry.bottom_right),
                          shape.color, thickness, cv2.LINE_AA)
        else:
            raise TypeError(f"Unknown shape geometry: {type(geometry).__name__}")
