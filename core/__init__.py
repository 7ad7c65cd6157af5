from core.pose_classifier import PoseClassifier, classify
from core.gesture_stabilizer import GestureStabilizer
from core.trajectory import TrajectoryAccumulator
from core.shape_fitter import ShapeFitter
from core.gesture_pipeline import GesturePipeline
from core.deferred_call import DeferredCall
from core.canvas_controller import CanvasController

# Camera and HandTracker pull in OpenCV / MediaPipe; import them from
# their modules directly.

__all__ = [
    "PoseClassifier",
    "classify",
    "GestureStabilizer",
    "TrajectoryAccumulator",
    "ShapeFitter",
    "GesturePipeline",
    "DeferredCall",
    "CanvasController",
]
