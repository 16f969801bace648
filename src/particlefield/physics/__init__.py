"""物理エンジン モジュール"""

from .geometry import Point, angle_to, distance, reflect_angle, uniform_random
from .motion import MotionModel

__all__ = [
    "Point",
    "angle_to",
    "distance",
    "reflect_angle",
    "uniform_random",
    "MotionModel",
]
