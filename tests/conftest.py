"""テスト共通フィクスチャ"""

import pygame
import pytest

from particlefield.rendering.canvas import Canvas

pygame.init()


class RecordingCanvas(Canvas):
    """描画呼び出しを記録する Canvas（ピクセルには描かない）"""

    def __init__(self, width, height):
        super().__init__(width, height)
        self.clears = 0
        self.lines = []
        self.circles = []

    def clear(self):
        self.clears += 1
        self.lines = []
        self.circles = []

    def draw_line(self, color, start, end, width=1):
        self.lines.append((color, start, end, width))

    def fill_circle(self, color, center, radius):
        self.circles.append((color, center, radius))


@pytest.fixture
def recording_canvas():
    """RecordingCanvas クラス（canvas_factory として渡す）"""
    return RecordingCanvas
