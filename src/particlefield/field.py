"""ParticleField（公開ファサード）"""

import logging
from typing import Callable, Optional

import numpy as np

from particlefield import config
from particlefield.animation.driver import AnimationDriver, FrameScheduler
from particlefield.config import FieldConfig
from particlefield.entities.particle import Particle
from particlefield.errors import InvalidHost
from particlefield.input.pointer import PointerState, PointerTracker
from particlefield.physics.geometry import uniform_random
from particlefield.physics.motion import MotionModel
from particlefield.rendering.canvas import Canvas, Host
from particlefield.rendering.proximity_view import ProximityRenderer

logger = logging.getLogger(__name__)


class ParticleField:
    """
    粒子ネットワーク描画のライフサイクル管理

    生成時に粒子を配置して1回描画し、ポインタ監視とアニメーションを開始する。
    粒子数はインスタンスの寿命中固定。
    """

    def __init__(
        self,
        field_config: FieldConfig,
        host: Optional[Host] = None,
        *,
        scheduler: Optional[FrameScheduler] = None,
        clock: Optional[Callable[[], float]] = None,
        rng: Optional[np.random.Generator] = None,
        canvas_factory: Callable = Canvas,
        motion: Optional[MotionModel] = None,
    ):
        """
        Args:
            field_config: フィールド構成
            host: マウント先（省略時は後で mount()）
            scheduler: フレームスケジューラ（省略時は専用のものを生成）
            clock: 現在時刻 (ms) を返す関数
            rng: 粒子配置用の乱数生成器
            canvas_factory: (width, height) -> 描画面
            motion: 運動モデル

        Raises:
            InvalidConfig: 構成値が不正
            InvalidHost: host が Host ではない
        """
        self._config = field_config.validate()
        if host is not None and not isinstance(host, Host):
            raise InvalidHost(f"host must be a Host, got {type(host).__name__}")

        self._host: Optional[Host] = None
        self._destroyed = False

        self._canvas = canvas_factory(self._config.width, self._config.height)
        if host is not None:
            self._attach(host)

        self._rng = rng
        self._motion = motion or MotionModel()
        self._renderer = ProximityRenderer(
            self._config.color, self._config.size, self._config.max_line, self._config.line_width
        )
        self._pointer = PointerTracker()
        self._particles = self._seed_particles()
        self.render()

        self._canvas.add_event_listener("pointermove", self._pointer.on_move)
        self._canvas.add_event_listener("pointerleave", self._pointer.on_leave)

        self.scheduler = scheduler or FrameScheduler()
        self._driver = AnimationDriver(self.step, self.render, self.scheduler, clock)
        self._driver.start()

        logger.info(
            "particle field created: %dx%d, %d particles",
            self._config.width, self._config.height, self._config.count,
        )

    # --- プロパティ ---

    @property
    def config(self) -> FieldConfig:
        return self._config

    @property
    def canvas(self):
        return self._canvas

    @property
    def particles(self) -> list[Particle]:
        return self._particles

    @property
    def pointer(self) -> Optional[PointerState]:
        return self._pointer.state

    @property
    def is_mounted(self) -> bool:
        return self._host is not None

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    @property
    def is_running(self) -> bool:
        return self._driver.alive

    # --- ライフサイクル ---

    def mount(self, host: Host):
        """
        描画面をホストに追加

        既にマウント済み、または破棄済みなら何もしない。

        Raises:
            InvalidHost: host が Host ではない
        """
        if self._destroyed or self._host is not None:
            return
        if not isinstance(host, Host):
            raise InvalidHost(f"host must be a Host, got {type(host).__name__}")
        self._attach(host)

    def destroy(self):
        """ポインタ監視を解除し、アニメーションを止めて無効化（冪等）"""
        if self._destroyed:
            return

        self._canvas.remove_event_listener("pointermove", self._pointer.on_move)
        self._canvas.remove_event_listener("pointerleave", self._pointer.on_leave)
        self._pointer.reset()
        self._driver.stop()

        if self._host is not None:
            self._host.remove_child(self._canvas)
            self._host = None

        self._destroyed = True
        logger.info("particle field destroyed")

    # --- フレーム処理 ---

    def step(self, elapsed_ms: float):
        """全粒子を共通の経過時間で進める"""
        pointer = self._pointer.state
        width, height = self._config.width, self._config.height
        for particle in self._particles:
            self._motion.update(particle, elapsed_ms, pointer, width, height)

    def render(self):
        """1フレーム描画"""
        self._renderer.render(self._canvas, self._particles)

    # --- 内部 ---

    def _attach(self, host: Host):
        host.append_child(self._canvas)
        self._host = host
        logger.debug("particle field mounted")

    def _seed_particles(self) -> list[Particle]:
        """一様乱数の位置・向き、基準速度で粒子を生成"""
        width, height = self._config.width, self._config.height
        return [
            Particle(
                x=uniform_random(0, width, self._rng),
                y=uniform_random(0, height, self._rng),
                speed=self._motion.base_speed,
                angle=uniform_random(-180, 180, self._rng),
            )
            for _ in range(self._config.count)
        ]
