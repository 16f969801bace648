"""粒子"""

from dataclasses import dataclass


@dataclass
class Particle:
    """
    フィールド上を移動する点

    Attributes:
        x, y: スクリーン座標 (px、y下向き)
        speed: 速さ (px/s、常に >= 0)
        angle: 進行方向（度、(-180, 180]、正はスクリーン上方向）
    """
    x: float
    y: float
    speed: float
    angle: float
