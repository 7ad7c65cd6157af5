"""
CanvasController — host-side stroke policy on top of the gesture core.

Turns the stabilized gesture of each frame into canvas events:

  - DRAW / PEN_UP for free-hand strokes, ERASE for the fist;
  - in vector mode, LINE / RECTANGLE / CIRCLE gestures drag a live
    PREVIEW from the first point, completed when the gesture ends;
  - in vector mode, a free-hand stroke is fed to the trajectory and,
    once the recognition delay has passed without a new stroke, fitted
    to a primitive and emitted as a completed shape.

No rendering here: the UI applies the returned events.
"""
from __future__ import annotations
import time
import uuid
from dataclasses import replace
from typing import List, Optional

from core.deferred_call import DeferredCall
from core.shape_fitter import ShapeFitter
from core.trajectory import TrajectoryAccumulator
from domain.enums import CanvasAction, GestureKind
from domain.models import (
    BrushSettings,
    CanvasEvent,
    CircleShape,
    GestureResult,
    LineShape,
    RectangleShape,
    StyledShape,
    VectorShape,
)
from utils.constants import (
    ACTIVE_CONFIDENCE,
    AUTO_ACCEPT_CONFIDENCE,
    CURSOR_CONFIDENCE,
    RECOGNITION_DELAY,
)
from utils.geometry import Point2D, dist
from utils.logger import get_logger

logger = get_logger("CanvasController")

PREVIEW_ID = "preview"


def _new_id(prefix: str) -> str:
    return f"{prefix}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


def drag_geometry(kind: GestureKind, start: Point2D, point: Point2D) -> VectorShape:
    """Geometry spanned by a vector drag from ``start`` to ``point``."""
    if kind is GestureKind.LINE:
        return LineShape(start, point)
    if kind is GestureKind.RECTANGLE:
        return RectangleShape(
            (min(start[0], point[0]), min(start[1], point[1])),
            (max(start[0], point[0]), max(start[1], point[1])),
        )
    if kind is GestureKind.CIRCLE:
        return CircleShape(start, dist(start, point))
    raise ValueError(f"{kind.value!r} is not a vector gesture")


def is_degenerate(geometry: VectorShape) -> bool:
    """True for a zero-length line, zero-radius circle or flat rectangle."""
    if isinstance(geometry, LineShape):
        return dist(geometry.start, geometry.end) == 0.0
    if isinstance(geometry, CircleShape):
        return geometry.radius == 0.0
    return (geometry.top_left[0] == geometry.bottom_right[0]
            or geometry.top_left[1] == geometry.bottom_right[1])


class CanvasController:
    """
    Parameters
    ----------
    settings : BrushSettings
        Colour / sizes / vector-mode flag; mutated by the host UI.
    trajectory : TrajectoryAccumulator
    fitter : ShapeFitter
    recognizer : DeferredCall
        Debounce between the end of a free-hand stroke and the fit attempt.
    active_confidence : float
        Draw / erase / drag only above this stabilized confidence.
    cursor_confidence : float
        The cursor is tracked only above this confidence.
    auto_accept_confidence : float
        Recognised shapes below this confidence are discarded.
    """

    def __init__(
        self,
        settings: Optional[BrushSettings] = None,
        trajectory: Optional[TrajectoryAccumulator] = None,
        fitter: Optional[ShapeFitter] = None,
        recognizer: Optional[DeferredCall] = None,
        active_confidence: float = ACTIVE_CONFIDENCE,
        cursor_confidence: float = CURSOR_CONFIDENCE,
        auto_accept_confidence: float = AUTO_ACCEPT_CONFIDENCE,
    ) -> None:
        self.settings = settings or BrushSettings()
        self._trajectory = trajectory or TrajectoryAccumulator()
        self._fitter = fitter or ShapeFitter()
        self._recognizer = recognizer or DeferredCall(RECOGNITION_DELAY)
        self._active_confidence = active_confidence
        self._cursor_confidence = cursor_confidence
        self._auto_accept = auto_accept_confidence

        self._cursor: Optional[Point2D] = None
        self._drawing = False
        self._drag_kind: Optional[GestureKind] = None
        self._drag_start: Optional[Point2D] = None
        self._preview: Optional[StyledShape] = None

    # ------------------------------------------------------------------
    def update(self, gesture: GestureResult, now: float) -> List[CanvasEvent]:
        """
        Process one frame's stabilized gesture.

        Parameters
        ----------
        gesture : GestureResult
        now : float
            Frame timestamp from a monotonic clock.
        """
        events: List[CanvasEvent] = []
        vector_mode = self.settings.vector_mode

        point = gesture.position if gesture.confidence > self._cursor_confidence else None
        active = point is not None and gesture.confidence > self._active_confidence
        self._cursor = point

        dragging = active and vector_mode and gesture.kind.is_vector
        drawing = active and gesture.kind is GestureKind.DRAW
        erasing = active and gesture.kind is GestureKind.ERASE

        # 1. End of a vector drag
        if self._drag_kind is not None and not (dragging and gesture.kind is self._drag_kind):
            events.extend(self._complete_drag())

        # 2. Free-hand stroke
        if drawing:
            if not self._drawing:
                self._recognizer.cancel()
                self._trajectory.clear()
            events.append(CanvasEvent(CanvasAction.DRAW, point=point))
            if vector_mode:
                self._trajectory.add_point(point, now)
        elif self._drawing:
            events.append(CanvasEvent(CanvasAction.PEN_UP))
            if vector_mode:
                self._recognizer.schedule(now)
        self._drawing = drawing

        # 3. Vector drag; starting one cancels a recognition scheduled above
        if dragging:
            if self._drag_kind is None:
                self._start_drag(gesture.kind, point, now)
            else:
                self._trajectory.add_point(point, now)
                events.append(self._update_preview(point))

        # 4. Eraser
        if erasing:
            events.append(CanvasEvent(CanvasAction.ERASE, point=point))

        # 5. Deferred shape recognition
        if self._recognizer.fire_if_due(now):
            events.extend(self._recognize())

        return events

    # ------------------------------------------------------------------
    def set_vector_mode(self, enabled: bool) -> List[CanvasEvent]:
        """Toggle vector mode; any pending stroke or drag is dropped."""
        if enabled == self.settings.vector_mode:
            return []
        self.settings.vector_mode = enabled
        logger.info("Vector mode %s", "on" if enabled else "off")
        return self.cancel()

    def cancel(self) -> List[CanvasEvent]:
        """
        Drop the trajectory, any pending recognition and any drag in
        progress. Returns PREVIEW_CLEARED if a preview was on screen.
        """
        events: List[CanvasEvent] = []
        if self._preview is not None:
            events.append(CanvasEvent(CanvasAction.PREVIEW_CLEARED))
        if self._drawing:
            events.append(CanvasEvent(CanvasAction.PEN_UP))
        self._trajectory.clear()
        self._recognizer.cancel()
        self._drawing = False
        self._reset_drag()
        return events

    @property
    def cursor(self) -> Optional[Point2D]:
        return self._cursor

    @property
    def preview(self) -> Optional[StyledShape]:
        return self._preview

    @property
    def recognition_pending(self) -> bool:
        return self._recognizer.pending

    # ------------------------------------------------------------------
    def _start_drag(self, kind: GestureKind, point: Point2D, now: float) -> None:
        self._recognizer.cancel()
        self._trajectory.clear()
        self._trajectory.add_point(point, now)
        self._drag_kind = kind
        self._drag_start = point

    def _update_preview(self, point: Point2D) -> CanvasEvent:
        geometry = drag_geometry(self._drag_kind, self._drag_start, point)
        self._preview = self._style(PREVIEW_ID, geometry)
        return CanvasEvent(CanvasAction.PREVIEW, shape=self._preview)

    def _complete_drag(self) -> List[CanvasEvent]:
        preview = self._preview
        self._trajectory.clear()
        self._reset_drag()
        if preview is None:
            return []
        if is_degenerate(preview.geometry):
            logger.debug("Dropped zero-size %s drag", preview.type.value)
            return [CanvasEvent(CanvasAction.PREVIEW_CLEARED)]
        shape = replace(preview, id=_new_id("shape"))
        logger.info("Shape completed: %s %s", shape.type.value, shape.id)
        return [CanvasEvent(CanvasAction.SHAPE_COMPLETED, shape=shape)]

    def _recognize(self) -> List[CanvasEvent]:
        fit = self._fitter.fit(self._trajectory.snapshot())
        if fit.payload is None or fit.confidence <= self._auto_accept:
            logger.debug("No shape recognised (%s, %.2f)", fit.shape.value, fit.confidence)
            return []
        shape = self._style(_new_id(f"auto_{fit.shape.value}"), fit.payload)
        self._trajectory.clear()
        logger.info("Shape recognised: %s (%.2f)", fit.shape.value, fit.confidence)
        return [CanvasEvent(CanvasAction.SHAPE_COMPLETED, shape=shape)]

    def _style(self, shape_id: str, geometry: VectorShape) -> StyledShape:
        return StyledShape(shape_id, geometry, self.settings.color, self.settings.brush_size)

    def _reset_drag(self) -> None:
        self._drag_kind = None
        self._drag_start = None
        self._preview = None
