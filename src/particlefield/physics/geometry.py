"""幾何計算の共通ユーティリティ"""

from typing import NamedTuple, Optional

import numpy as np

from particlefield.errors import InvalidRange


class Point(NamedTuple):
    """スクリーン座標の点（y は下向き）"""
    x: float
    y: float


def uniform_random(lo: float, hi: float, rng: Optional[np.random.Generator] = None) -> float:
    """
    [lo, hi] の一様乱数

    Args:
        lo: 下限
        hi: 上限（lo より大きいこと）
        rng: 乱数生成器（省略時は numpy のグローバル乱数）

    Raises:
        InvalidRange: lo/hi が非有限値、または lo >= hi
    """
    if not (np.isfinite(lo) and np.isfinite(hi)):
        raise InvalidRange(f"lo and hi must be finite: lo={lo}, hi={hi}")
    if lo >= hi:
        raise InvalidRange(f"lo must be less than hi: lo={lo}, hi={hi}")

    if rng is None:
        return float(np.random.uniform(lo, hi))
    return float(rng.uniform(lo, hi))


def distance(a, b) -> float:
    """2点間のユークリッド距離（.x/.y を持つ任意のオブジェクト）"""
    return float(np.hypot(b.x - a.x, b.y - a.y))


def angle_to(origin, target) -> Optional[float]:
    """
    origin → target ベクトルの向き（度）

    0° = +x、正の角度はスクリーン上方向（-y）。範囲は (-180, 180]。
    変位がゼロの場合は向きが定まらないため None を返す。

    Args:
        origin: 始点
        target: 終点

    Returns:
        角度（度）または None
    """
    dx = target.x - origin.x
    dy = origin.y - target.y  # y下向き → 数学座標系

    if dx == 0:
        if dy == 0:
            return None
        return 90.0 if dy > 0 else -90.0

    angle = float(np.degrees(np.arctan(dy / dx)))
    if dx < 0:
        # 左半平面: atan は ±90° に折り返されるので180°補正（符号は dy に従う）
        angle += 180.0 if dy >= 0 else -180.0
    return angle


def reflect_angle(angle: float, axis: str) -> float:
    """
    向きを軸で反射

    - "x": 水平軸で反射（上下の壁）→ 符号反転
    - "y": 垂直軸で反射（左右の壁）→ [0, 180) は 180 - a、[-180, 0) は -180 - a

    範囲外の値（180° など）は "y" 反射では変化しない。

    Raises:
        ValueError: axis が "x" / "y" 以外
    """
    if axis == "x":
        return -angle
    if axis == "y":
        if 0 <= angle < 180:
            return 180.0 - angle
        if -180 <= angle < 0:
            return -180.0 - angle
        return angle
    raise ValueError(f"axis must be 'x' or 'y': {axis!r}")
