"""
Geometry helpers, tuning constants and logging setup.
"""

from .constants import *
from .geometry import dist, is_extended, mirror_x, point_segment_distances
from .logger import get_logger, setup_logging

__all__ = [
    'dist',
    'is_extended',
    'mirror_x',
    'point_segment_distances',
    'get_logger',
    'setup_logging',
    'HAND_LANDMARK_COUNT',
    'STABILIZER_WINDOW',
    'STABILIZER_CONSENSUS_RATIO',
    'TRACK_CAPACITY',
    'MIN_FIT_POINTS',
    'RECOGNITION_DELAY',
]
