import pytest

from core.canvas_controller import CanvasController, drag_geometry, is_degenerate
from core.deferred_call import DeferredCall
from domain.enums import CanvasAction, GestureKind, ShapeType
from domain.models import (
    BrushSettings,
    CircleShape,
    GestureResult,
    LineShape,
    RectangleShape,
)

from conftest import circle_points

NONE = GestureResult.none()


def gesture(kind, point, confidence=0.8):
    return GestureResult(kind, point, confidence)


def actions(events):
    return [e.action for e in events]


@pytest.fixture
def controller():
    return CanvasController(BrushSettings(color=(10, 20, 30), brush_size=4))


@pytest.fixture
def vector_controller():
    return CanvasController(BrushSettings(vector_mode=True))


def draw_stroke(ctrl, points, t0=0.0, dt=0.03):
    t = t0
    for p in points:
        ctrl.update(gesture(GestureKind.DRAW, p), t)
        t += dt
    return t


# ---- free-hand ---------------------------------------------------------
def test_draw_then_lift(controller):
    events = controller.update(gesture(GestureKind.DRAW, (0.1, 0.2)), 0.0)
    assert actions(events) == [CanvasAction.DRAW]
    assert events[0].point == (0.1, 0.2)

    assert actions(controller.update(NONE, 0.1)) == [CanvasAction.PEN_UP]
    assert controller.update(NONE, 0.2) == []


def test_low_confidence_moves_cursor_only(controller):
    assert controller.update(gesture(GestureKind.DRAW, (0.4, 0.4), 0.5), 0.0) == []
    assert controller.cursor == (0.4, 0.4)

    controller.update(gesture(GestureKind.DRAW, (0.4, 0.4), 0.2), 0.1)
    assert controller.cursor is None


def test_erase(controller):
    events = controller.update(gesture(GestureKind.ERASE, (0.5, 0.5), 0.7), 0.0)
    assert actions(events) == [CanvasAction.ERASE]


def test_drawing_into_erasing_lifts_the_pen(controller):
    controller.update(gesture(GestureKind.DRAW, (0.1, 0.1)), 0.0)
    events = controller.update(gesture(GestureKind.ERASE, (0.1, 0.1), 0.7), 0.1)
    assert actions(events) == [CanvasAction.PEN_UP, CanvasAction.ERASE]


def test_no_recognition_outside_vector_mode(controller):
    t = draw_stroke(controller, [(0.1 + 0.05 * i, 0.1) for i in range(15)])
    controller.update(NONE, t)
    assert not controller.recognition_pending


def test_vector_gestures_ignored_outside_vector_mode(controller):
    assert controller.update(gesture(GestureKind.LINE, (0.2, 0.2), 1.0), 0.0) == []
    assert controller.update(gesture(GestureKind.LINE, (0.5, 0.2), 1.0), 0.1) == []
    assert controller.preview is None


# ---- auto recognition ---------------------------------------------------
def test_stroke_is_recognised_after_delay(vector_controller):
    t = draw_stroke(vector_controller, [(0.1 + 0.05 * i, 0.1) for i in range(15)])
    assert actions(vector_controller.update(NONE, t)) == [CanvasAction.PEN_UP]
    assert vector_controller.recognition_pending

    assert vector_controller.update(NONE, t + 0.4) == []
    events = vector_controller.update(NONE, t + 0.5)
    assert actions(events) == [CanvasAction.SHAPE_COMPLETED]
    shape = events[0].shape
    assert shape.type is ShapeType.LINE
    assert shape.id.startswith("auto_line_")
    assert isinstance(shape.geometry, LineShape)
    assert shape.geometry.start == pytest.approx((0.1, 0.1))
    assert shape.geometry.end == pytest.approx((0.8, 0.1))


def test_new_stroke_within_delay_preempts_recognition(vector_controller):
    t = draw_stroke(vector_controller, [(0.1 + 0.05 * i, 0.1) for i in range(15)])
    vector_controller.update(NONE, t)
    vector_controller.update(gesture(GestureKind.DRAW, (0.5, 0.5)), t + 0.2)
    assert not vector_controller.recognition_pending

    events = vector_controller.update(gesture(GestureKind.DRAW, (0.5, 0.6)), t + 0.6)
    assert actions(events) == [CanvasAction.DRAW]


def test_unrecognisable_stroke_is_dropped(vector_controller):
    scribble = [(p.x, p.y) for p in circle_points((0.5, 0.5), 0.03, 15)]
    t = draw_stroke(vector_controller, scribble)
    vector_controller.update(NONE, t)
    assert vector_controller.update(NONE, t + 1.0) == []
    assert not vector_controller.recognition_pending


def test_custom_delay():
    ctrl = CanvasController(BrushSettings(vector_mode=True), recognizer=DeferredCall(0.1))
    t = draw_stroke(ctrl, [(0.1 + 0.05 * i, 0.1) for i in range(15)])
    ctrl.update(NONE, t)
    assert actions(ctrl.update(NONE, t + 0.1)) == [CanvasAction.SHAPE_COMPLETED]


# ---- vector drag -------------------------------------------------------
def test_line_drag_previews_then_completes(vector_controller):
    assert vector_controller.update(gesture(GestureKind.LINE, (0.2, 0.2), 1.0), 0.0) == []

    events = vector_controller.update(gesture(GestureKind.LINE, (0.5, 0.2), 1.0), 0.1)
    assert actions(events) == [CanvasAction.PREVIEW]
    assert events[0].shape.id == "preview"
    assert events[0].shape.geometry == LineShape((0.2, 0.2), (0.5, 0.2))

    events = vector_controller.update(NONE, 0.2)
    assert actions(events) == [CanvasAction.SHAPE_COMPLETED]
    assert events[0].shape.id.startswith("shape_")
    assert events[0].shape.geometry == LineShape((0.2, 0.2), (0.5, 0.2))
    assert vector_controller.preview is None


def test_drag_without_movement_completes_nothing(vector_controller):
    vector_controller.update(gesture(GestureKind.CIRCLE, (0.2, 0.2), 1.0), 0.0)
    assert vector_controller.update(NONE, 0.1) == []


def test_changing_vector_kind_restarts_drag(vector_controller):
    vector_controller.update(gesture(GestureKind.LINE, (0.2, 0.2), 1.0), 0.0)
    vector_controller.update(gesture(GestureKind.LINE, (0.4, 0.2), 1.0), 0.1)
    events = vector_controller.update(gesture(GestureKind.CIRCLE, (0.4, 0.4), 1.0), 0.2)
    assert actions(events) == [CanvasAction.SHAPE_COMPLETED]

    events = vector_controller.update(gesture(GestureKind.CIRCLE, (0.4, 0.5), 1.0), 0.3)
    circle = events[0].shape.geometry
    assert isinstance(circle, CircleShape)
    assert circle.center == (0.4, 0.4)
    assert circle.radius == pytest.approx(0.1)


def test_toggling_vector_mode_drops_drag(vector_controller):
    vector_controller.update(gesture(GestureKind.RECTANGLE, (0.2, 0.2), 1.0), 0.0)
    vector_controller.update(gesture(GestureKind.RECTANGLE, (0.4, 0.4), 1.0), 0.1)

    events = vector_controller.set_vector_mode(False)
    assert actions(events) == [CanvasAction.PREVIEW_CLEARED]
    assert vector_controller.update(NONE, 0.2) == []
    assert vector_controller.set_vector_mode(False) == []


def test_shapes_use_brush_style():
    ctrl = CanvasController(BrushSettings(color=(1, 2, 3), brush_size=9, vector_mode=True))
    ctrl.update(gesture(GestureKind.LINE, (0.2, 0.2), 1.0), 0.0)
    shape = ctrl.update(gesture(GestureKind.LINE, (0.3, 0.3), 1.0), 0.1)[0].shape
    assert shape.color == (1, 2, 3)
    assert shape.stroke_width == 9


# ---- geometry ----------------------------------------------------------
def test_drag_geometry():
    assert drag_geometry(GestureKind.RECTANGLE, (0.6, 0.5), (0.2, 0.2)) == \
        RectangleShape((0.2, 0.2), (0.6, 0.5))
    circle = drag_geometry(GestureKind.CIRCLE, (0.5, 0.5), (0.8, 0.9))
    assert circle.center == (0.5, 0.5)
    assert circle.radius == pytest.approx(0.5)
    with pytest.raises(ValueError):
        drag_geometry(GestureKind.DRAW, (0.0, 0.0), (1.0, 1.0))


def test_drag_straight_after_stroke_cancels_recognition(vector_controller):
    t = draw_stroke(vector_controller, [(0.1 + 0.05 * i, 0.1) for i in range(15)])
    events = vector_controller.update(gesture(GestureKind.LINE, (0.2, 0.5), 1.0), t)
    assert actions(events) == [CanvasAction.PEN_UP]
    assert not vector_controller.recognition_pending

    completed = []
    for i in range(1, 30):
        events = vector_controller.update(
            gesture(GestureKind.LINE, (0.2 + 0.02 * i, 0.5), 1.0), t + 0.03 * i)
        completed += [e.shape.id for e in events if e.action is CanvasAction.SHAPE_COMPLETED]
    assert completed == []
    preview = vector_controller.preview.geometry
    assert preview.start == (0.2, 0.5)
    assert preview.end == pytest.approx((0.78, 0.5))


def test_zero_size_drag_is_dropped(vector_controller):
    vector_controller.update(gesture(GestureKind.LINE, (0.3, 0.3), 1.0), 0.0)
    events = vector_controller.update(gesture(GestureKind.LINE, (0.3, 0.3), 1.0), 0.1)
    assert actions(events) == [CanvasAction.PREVIEW]

    assert actions(vector_controller.update(NONE, 0.2)) == [CanvasAction.PREVIEW_CLEARED]
    assert vector_controller.preview is None


@pytest.mark.parametrize("geometry, expected", [
    (LineShape((0.1, 0.1), (0.1, 0.1)), True),
    (LineShape((0.1, 0.1), (0.2, 0.1)), False),
    (CircleShape((0.5, 0.5), 0.0), True),
    (RectangleShape((0.2, 0.2), (0.2, 0.6)), True),
    (RectangleShape((0.2, 0.2), (0.4, 0.6)), False),
])
def test_is_degenerate(geometry, expected):
    assert is_degenerate(geometry) is expected
