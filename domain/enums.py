from enum import Enum, IntEnum


class GestureKind(str, Enum):
    """Possible per-frame gesture classifications."""
    DRAW      = "draw"
    ERASE     = "erase"
    MENU      = "menu"
    LINE      = "line"
    RECTANGLE = "rectangle"
    CIRCLE    = "circle"
    NONE      = "none"

    @property
    def is_vector(self) -> bool:
        return self in (GestureKind.LINE, GestureKind.RECTANGLE, GestureKind.CIRCLE)


class ShapeType(str, Enum):
    """Geometric primitives the shape fitter can produce."""
    LINE      = "line"
    CIRCLE    = "circle"
    RECTANGLE = "rectangle"
    NONE      = "none"


class CanvasAction(str, Enum):
    """Events emitted by the canvas controller for the rendering layer."""
    DRAW            = "DRAW"
    ERASE           = "ERASE"
    PEN_UP          = "PEN_UP"
    PREVIEW         = "PREVIEW"
    PREVIEW_CLEARED = "PREVIEW_CLEARED"
    SHAPE_COMPLETED = "SHAPE_COMPLETED"


class Finger(str, Enum):
    INDEX  = "INDEX"
    MIDDLE = "MIDDLE"
    RING   = "RING"
    PINKY  = "PINKY"


class HandLandmark(IntEnum):
    """Index of each of the 21 hand keypoints emitted by the detector."""
    WRIST             = 0
    THUMB_CMC         = 1
    THUMB_MCP         = 2
    THUMB_IP          = 3
    THUMB_TIP         = 4
    INDEX_FINGER_MCP  = 5
    INDEX_FINGER_PIP  = 6
    INDEX_FINGER_DIP  = 7
    INDEX_FINGER_TIP  = 8
    MIDDLE_FINGER_MCP = 9
    MIDDLE_FINGER_PIP = 10
    MIDDLE_FINGER_DIP = 11
    MIDDLE_FINGER_TIP = 12
    RING_FINGER_MCP   = 13
    RING_FINGER_PIP   = 14
    RING_FINGER_DIP   = 15
    RING_FINGER_TIP   = 16
    PINKY_MCP         = 17
    PINKY_PIP         = 18
    PINKY_DIP         = 19
    PINKY_TIP         = 20


# (tip, pip) used by the extension test
FINGER_JOINTS = {
    Finger.INDEX:  (HandLandmark.INDEX_FINGER_TIP,  HandLandmark.INDEX_FINGER_PIP),
    Finger.MIDDLE: (HandLandmark.MIDDLE_FINGER_TIP, HandLandmark.MIDDLE_FINGER_PIP),
    Finger.RING:   (HandLandmark.RING_FINGER_TIP,   HandLandmark.RING_FINGER_PIP),
    Finger.PINKY:  (HandLandmark.PINKY_TIP,         HandLandmark.PINKY_PIP),
}
