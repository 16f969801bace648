"""ポインタ入力処理"""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointerState:
    """描画面ローカル座標のポインタ位置"""
    x: float
    y: float


@dataclass(frozen=True)
class PointerEvent:
    """
    描画面に届くポインタイベント

    Attributes:
        type: "pointermove" または "pointerleave"
        pos: 描画面ローカル座標（leave では None）
    """
    type: str
    pos: Optional[tuple] = None


class PointerTracker:
    """
    ポインタ状態の保持

    描画面の pointermove / pointerleave を受け取り、現在の PointerState を更新する。
    書き込みはこのクラスのみ、運動モデルからは読み取り専用。
    """

    def __init__(self):
        self.state: Optional[PointerState] = None

    def on_move(self, event: PointerEvent):
        """ポインタ移動: ローカル座標を記録"""
        x, y = event.pos
        self.state = PointerState(float(x), float(y))
        logger.debug("pointer move: (%.1f, %.1f)", self.state.x, self.state.y)

    def on_leave(self, event: PointerEvent = None):
        """ポインタ離脱: 状態をクリア"""
        self.state = None
        logger.debug("pointer leave")

    def reset(self):
        """状態リセット"""
        self.state = None
