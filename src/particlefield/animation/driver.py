"""アニメーション駆動（フレームスケジューラ + 経過時間クロック）"""

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


def monotonic_ms() -> float:
    """単調増加の壁時計 (ms)"""
    return time.monotonic() * 1000.0


class FrameScheduler:
    """
    次フレーム実行キュー（requestAnimationFrame 相当）

    pygame のメインループが毎フレーム run_pending() を呼ぶ。
    実行中に登録されたコールバックは次のフレームに回る。
    """

    def __init__(self):
        self._queue: list[Callable] = []

    def request(self, callback: Callable):
        """次フレームで実行するコールバックを登録"""
        self._queue.append(callback)

    def cancel(self, callback: Callable):
        """登録済みのコールバックを取り消す"""
        self._queue = [cb for cb in self._queue if cb != callback]

    @property
    def pending(self) -> int:
        return len(self._queue)

    def run_pending(self) -> int:
        """
        登録済みのコールバックを実行

        Returns:
            実行したコールバック数
        """
        queue, self._queue = self._queue, []
        for callback in queue:
            callback()
        return len(queue)


class AnimationDriver:
    """
    フレームごとの更新サイクル

    経過時間計算 → 全粒子更新 → 描画 → 次フレーム予約。
    固定タイムステップではなく実経過時間で積分する。
    """

    def __init__(
        self,
        step: Callable[[float], None],
        render: Callable[[], None],
        scheduler: FrameScheduler,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Args:
            step: 経過時間 (ms) を受け取り全粒子を進める関数
            render: 1フレーム描画する関数
            scheduler: 次フレームの予約先
            clock: 現在時刻 (ms) を返す関数
        """
        self.step = step
        self.render = render
        self.scheduler = scheduler
        self.clock = clock or monotonic_ms

        self.alive = False
        self.last_timestamp = 0.0
        self.frame_count = 0

    def start(self):
        """ループ開始（時刻を記録して最初のフレームを予約）"""
        if self.alive:
            return
        self.alive = True
        self.last_timestamp = self.clock()
        self.scheduler.request(self.tick)

    def stop(self):
        """ループ停止（以降のフレームは予約されない）"""
        if not self.alive:
            return
        self.alive = False
        self.scheduler.cancel(self.tick)
        logger.debug("animation driver stopped after %d frames", self.frame_count)

    def tick(self):
        """1フレーム分の処理"""
        if not self.alive:
            return

        now = self.clock()
        elapsed = now - self.last_timestamp
        self.last_timestamp = now

        self.step(elapsed)
        self.render()
        self.frame_count += 1

        self.scheduler.request(self.tick)
