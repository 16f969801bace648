"""運動モデル (ポインタ誘引 + 壁での反射)"""

import math
from typing import Optional

import numpy as np

from particlefield import config
from particlefield.entities.particle import Particle
from particlefield.physics.geometry import angle_to, distance, reflect_angle


class MotionModel:
    """
    粒子1個を経過時間分だけ進める

    - ポインタが誘引半径内にあれば、向きをポインタ方向に、速さを距離に応じて再計算
    - ポインタ不在時は速さを基準速度に戻す（向きはそのまま惰性で進む）
    - 壁では位置をクランプ/鏡映し、向きを反射（ラップではなくバウンド）
    """

    def __init__(
        self,
        base_speed: float = config.BASE_SPEED,
        attraction_radius: float = config.ATTRACTION_RADIUS,
        speed_scale: float = config.SPEED_SCALE,
    ):
        self.base_speed = base_speed
        self.attraction_radius = attraction_radius
        self.speed_scale = speed_scale

    def steer(self, particle: Particle, pointer) -> None:
        """ポインタ状態に応じて向き・速さを更新"""
        if pointer is None:
            particle.speed = self.base_speed
            return

        d = distance(particle, pointer)
        if d >= self.attraction_radius:
            return

        angle = angle_to(particle, pointer)
        if angle is None:
            # 変位ゼロ: 方向性の力なし
            return

        particle.angle = angle
        particle.speed = d * self.speed_scale + self.base_speed

    def update(
        self,
        particle: Particle,
        elapsed_ms: float,
        pointer: Optional[object],
        width: float,
        height: float,
    ) -> Particle:
        """
        粒子を更新（インプレース）

        Args:
            particle: 対象の粒子
            elapsed_ms: 前フレームからの経過時間 (ms)
            pointer: ポインタ位置（.x/.y）または None
            width: 描画面の幅
            height: 描画面の高さ

        Returns:
            更新後の粒子（引数と同一オブジェクト）
        """
        if not math.isfinite(elapsed_ms) or elapsed_ms < 0:
            elapsed_ms = 0.0

        self.steer(particle, pointer)

        # 変位 r = speed * 経過秒
        r = particle.speed * elapsed_ms * 0.001
        alpha = np.radians(particle.angle)
        particle.x += r * float(np.cos(alpha))
        particle.y -= r * float(np.sin(alpha))  # y下向き

        self._bounce(particle, width, height)
        return particle

    @staticmethod
    def _bounce(particle: Particle, width: float, height: float) -> None:
        """軸ごとに壁で反射（左右の壁は "y" 軸反射、上下の壁は "x" 軸反射）"""
        if particle.x > width:
            particle.x = width
            particle.angle = reflect_angle(particle.angle, "y")
        elif particle.x < 0:
            # 大きく飛び出した場合も範囲内に収める
            particle.x = min(-particle.x, width)
            particle.angle = reflect_angle(particle.angle, "y")

        if particle.y > height:
            particle.y = height
            particle.angle = reflect_angle(particle.angle, "x")
        elif particle.y < 0:
            particle.y = min(-particle.y, height)
            particle.angle = reflect_angle(particle.angle, "x")
