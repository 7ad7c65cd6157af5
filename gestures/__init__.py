"""
Static pose predicates, one class per gesture kind.
"""

from .base import PosePredicate
from .vector import LinePose, CirclePose, RectanglePose
from .drawing import DrawPose, ErasePose, MenuPose

__all__ = [
    'PosePredicate',
    'LinePose',
    'CirclePose',
    'RectanglePose',
    'DrawPose',
    'ErasePose',
    'MenuPose',
]
