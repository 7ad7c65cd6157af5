"""
Builders that wire the gesture core from an AppConfig.
Kept apart from main.py so they can be used without a camera.
"""
from __future__ import annotations

from app.config import AppConfig
from core.canvas_controller import CanvasController
from core.deferred_call import DeferredCall
from core.gesture_pipeline import GesturePipeline
from core.gesture_stabilizer import GestureStabilizer
from core.pose_classifier import PoseClassifier, default_predicates
from core.shape_fitter import ShapeFitter
from core.trajectory import TrajectoryAccumulator


def build_pipeline(config: AppConfig) -> GesturePipeline:
    return GesturePipeline(
        classifier=PoseClassifier(default_predicates(config.pinch_distance)),
        stabilizer=GestureStabilizer(
            window=config.stabilizer_window,
            consensus_ratio=config.stabilizer_consensus_ratio,
        ),
    )


def build_controller(config: AppConfig) -> CanvasController:
    return CanvasController(
        settings=config.brush_settings(),
        trajectory=TrajectoryAccumulator(config.trajectory_capacity),
        fitter=ShapeFitter(
            min_points=config.min_fit_points,
            line_threshold=config.line_threshold,
            circle_threshold=config.circle_threshold,
            rectangle_threshold=config.rectangle_threshold,
        ),
        recognizer=DeferredCall(config.recognition_delay),
        active_confidence=config.active_confidence,
        cursor_confidence=config.cursor_confidence,
        auto_accept_confidence=config.auto_accept_confidence,
    )
