"""
main.py — Application entry point.

Clean pipeline, no globals, no mixed concerns:

    Camera → HandTracker → GesturePipeline (PoseClassifier → GestureStabilizer)
          → CanvasController → canvas events → OpenCVUI

Each component is independently testable and replaceable.
"""
from __future__ import annotations
import argparse
import sys
import time
from dataclasses import replace
from typing import List, Optional

from app.config import AppConfig, default_config
from app.factory import build_controller, build_pipeline
from app.ui import KEY_ESC, OpenCVUI
from core.camera import Camera
from core.hand_tracker import HandTracker
from utils.logger import get_logger, setup_logging

logger = get_logger("main")


def run(config: AppConfig = default_config) -> int:
    setup_logging(debug=config.debug, log_to_file=config.log_to_file)
    logger.info("=" * 55)
    logger.info("  AIR CANVAS — gesture drawing")
    logger.info("  Camera  : %d (%d fps max)", config.camera_device, config.fps_limit)
    logger.info("  Window  : %d frames, consensus %.0f%%",
                config.stabilizer_window, config.stabilizer_consensus_ratio * 100)
    logger.info("  Vector  : %s", "on" if config.vector_mode else "off")
    logger.info("=" * 55)

    try:
        camera = Camera(config.camera_device, config.fps_limit, config.camera_resolution)
    except RuntimeError as exc:
        logger.error("%s", exc)
        return 1

    tracker = HandTracker(
        max_num_hands=config.max_num_hands,
        min_detection_confidence=config.min_detection_confidence,
        min_tracking_confidence=config.min_tracking_confidence,
    )
    pipeline   = build_pipeline(config)
    controller = build_controller(config)
    ui         = OpenCVUI(config)
    tracking   = True

    try:
        while True:
            # 1. Capture
            frame = camera.read()
            if frame is None:
                break
            now = time.monotonic()

            # 2. Detect hands (skipped while tracking is paused)
            hands = tracker.process(frame) if tracking else []

            # 3. Classify + stabilise
            gesture = pipeline.process_frame(hands)

            # 4. Stroke policy → canvas events
            ui.apply(controller.update(gesture, now), controller.settings)

            # 5. Render
            ui.render(
                frame=frame,
                gesture=gesture,
                raw=pipeline.last_raw,
                window=pipeline.window,
                cursor=controller.cursor,
                settings=controller.settings,
                tracking=tracking,
            )

            # 6. Keys
            key = ui.poll_key()
            if key == KEY_ESC:
                break
            if key == ord("v"):
                events = controller.set_vector_mode(not controller.settings.vector_mode)
                ui.apply(events, controller.settings)
            elif key == ord("c"):
                controller.cancel()
                ui.clear()
                logger.info("Canvas cleared")
            elif key == ord("t"):
                tracking = not tracking
                pipeline.reset()
                ui.apply(controller.cancel(), controller.settings)
                logger.info("Tracking %s", "resumed" if tracking else "paused")

    finally:
        camera.release()
        tracker.release()
        ui.close()
        logger.info("Application closed cleanly")
    return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Draw in the air with hand gestures.")
    parser.add_argument("--camera", type=int, default=default_config.camera_device,
                        help="camera device index")
    parser.add_argument("--fps", type=int, default=default_config.fps_limit,
                        help="maximum frames per second")
    parser.add_argument("--vector-mode", action="store_true",
                        help="start with vector shapes / auto recognition enabled")
    parser.add_argument("--debug", action="store_true", help="debug logging")
    parser.add_argument("--no-log-file", action="store_true", help="log to console only")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = replace(
        default_config,
        camera_device=args.camera,
        fps_limit=args.fps,
        vector_mode=args.vector_mode,
        debug=args.debug,
        log_to_file=not args.no_log_file,
    )
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
