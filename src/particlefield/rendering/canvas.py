"""描画面（Canvas）とホストコンテナ（Host）"""

import logging
from typing import Callable

import pygame

from particlefield import config
from particlefield.input.pointer import PointerEvent

logger = logging.getLogger(__name__)


class Canvas:
    """
    2Dラスタ描画面

    pygame の SRCALPHA サーフェスを持ち、半透明の線をアルファブレンドで描く。
    DOMの要素のようにイベントリスナーを登録でき、Host からポインタイベントが届く。
    """

    def __init__(self, width: float, height: float):
        self.width = int(width)
        self.height = int(height)
        self.surface = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        self.parent = None  # 追加先の Host

        self._listeners: dict[str, list[Callable]] = {}

    # --- 描画 ---

    def clear(self):
        """全面を透明にクリア"""
        self.surface.fill((0, 0, 0, 0))

    def draw_line(self, color, start, end, width: int = 1):
        """
        線分を描画

        Args:
            color: "#rrggbb" / "#rrggbbaa" または pygame.Color
            start: 始点 (x, y)
            end: 終点 (x, y)
            width: 線幅 (px)
        """
        color = pygame.Color(color)
        if color.a == 0:
            return
        if color.a == 255:
            pygame.draw.line(self.surface, color, start, end, width)
            return

        # pygame.draw は直接書き込むため、線の外接矩形分の一時サーフェスに描いて合成
        pad = int(width) + 1
        left = int(min(start[0], end[0])) - pad
        top = int(min(start[1], end[1])) - pad
        layer_w = int(abs(end[0] - start[0])) + 2 * pad + 1
        layer_h = int(abs(end[1] - start[1])) + 2 * pad + 1

        layer = pygame.Surface((layer_w, layer_h), pygame.SRCALPHA)
        pygame.draw.line(layer, color,
                         (start[0] - left, start[1] - top),
                         (end[0] - left, end[1] - top), width)
        self.surface.blit(layer, (left, top))

    def fill_circle(self, color, center, radius: float):
        """塗りつぶし円を描画"""
        pygame.draw.circle(self.surface, pygame.Color(color), center, radius)

    # --- イベント ---

    def add_event_listener(self, event_type: str, listener: Callable):
        """リスナー登録（同一リスナーの重複登録は無視）"""
        listeners = self._listeners.setdefault(event_type, [])
        if listener not in listeners:
            listeners.append(listener)

    def remove_event_listener(self, event_type: str, listener: Callable):
        """リスナー解除（未登録なら何もしない）"""
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, []))

    def dispatch_event(self, event: PointerEvent):
        """登録済みリスナーへイベントを配送"""
        for listener in list(self._listeners.get(event.type, [])):
            listener(event)


class Host:
    """
    ホストコンテナ（ウィンドウのサーフェス）

    子 Canvas をオフセット付きで保持し、毎フレーム合成する。
    pygame のマウスイベントを子のローカル座標に変換して配送する。
    """

    def __init__(self, surface: pygame.Surface, background: tuple = config.BACKGROUND_COLOR):
        self.surface = surface
        self.background = background

        self._children: list[Canvas] = []
        self._offsets: dict[int, tuple[int, int]] = {}
        self._hovered: set[int] = set()

    @property
    def children(self) -> list[Canvas]:
        return list(self._children)

    def append_child(self, canvas: Canvas, offset: tuple = (0, 0)):
        """
        Canvas を子として追加

        Raises:
            RuntimeError: 既に別の Host に追加されている場合
        """
        if canvas.parent is self:
            return
        if canvas.parent is not None:
            raise RuntimeError("canvas is already attached to another host")

        canvas.parent = self
        self._children.append(canvas)
        self._offsets[id(canvas)] = (int(offset[0]), int(offset[1]))
        logger.debug("canvas %dx%d attached at %s", canvas.width, canvas.height, offset)

    def remove_child(self, canvas: Canvas):
        """子の Canvas を取り外す（子でなければ何もしない）"""
        if canvas.parent is not self:
            return
        self._children.remove(canvas)
        self._offsets.pop(id(canvas), None)
        self._hovered.discard(id(canvas))
        canvas.parent = None

    def child_rect(self, canvas: Canvas) -> pygame.Rect:
        """子の Canvas のホスト座標上の矩形"""
        left, top = self._offsets[id(canvas)]
        return pygame.Rect(left, top, canvas.width, canvas.height)

    def dispatch(self, event: pygame.event.Event):
        """pygame イベントを子の pointermove / pointerleave に変換して配送"""
        if event.type == pygame.MOUSEMOTION:
            for canvas in list(self._children):
                rect = self.child_rect(canvas)
                if rect.collidepoint(event.pos):
                    self._hovered.add(id(canvas))
                    local = (event.pos[0] - rect.left, event.pos[1] - rect.top)
                    canvas.dispatch_event(PointerEvent("pointermove", local))
                elif id(canvas) in self._hovered:
                    self._hovered.discard(id(canvas))
                    canvas.dispatch_event(PointerEvent("pointerleave"))
        elif event.type == pygame.WINDOWLEAVE:
            for canvas in list(self._children):
                if id(canvas) in self._hovered:
                    self._hovered.discard(id(canvas))
                    canvas.dispatch_event(PointerEvent("pointerleave"))

    def render(self):
        """背景を塗り、子の Canvas を合成"""
        self.surface.fill(self.background)
        for canvas in self._children:
            self.surface.blit(canvas.surface, self._offsets[id(canvas)])
