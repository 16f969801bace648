"""ProximityRenderer のテスト"""

import pytest

from particlefield.entities.particle import Particle
from particlefield.rendering.proximity_view import ProximityRenderer


def _particle(x, y):
    return Particle(x=float(x), y=float(y), speed=0.0, angle=0.0)


class TestProximityRenderer:
    """ProximityRenderer クラスのテスト"""

    def test_pair_within_band_draws_one_line(self, recording_canvas):
        """(0,0)-(10,0)、size=1、max_line=20: 線1本・マーカー2個"""
        canvas = recording_canvas(100, 100)
        renderer = ProximityRenderer("#efefef", size=1, max_line=20, line_width=1)
        renderer.render(canvas, [_particle(0, 0), _particle(10, 0)])

        assert canvas.clears == 1
        assert len(canvas.lines) == 1
        assert len(canvas.circles) == 2

        color, start, end, width = canvas.lines[0]
        assert color == "#efefef80"
        assert (start, end) == ((0.0, 0.0), (10.0, 0.0))
        assert width == 1

    def test_markers_use_opaque_base_color(self, recording_canvas):
        canvas = recording_canvas(100, 100)
        renderer = ProximityRenderer("#123456", size=3, max_line=20)
        renderer.render(canvas, [_particle(5, 5)])
        assert canvas.circles == [("#123456", (5.0, 5.0), 3)]
        assert canvas.lines == []

    def test_distance_equal_size_no_line(self, recording_canvas):
        """距離 == size は線なし（下限は開区間）"""
        canvas = recording_canvas(100, 100)
        renderer = ProximityRenderer("#efefef", size=5, max_line=20)
        renderer.render(canvas, [_particle(0, 0), _particle(5, 0)])
        assert canvas.lines == []
        assert len(canvas.circles) == 2

    def test_distance_equal_max_line_no_line(self, recording_canvas):
        """距離 == max_line は線なし（上限は開区間）"""
        canvas = recording_canvas(100, 100)
        renderer = ProximityRenderer("#efefef", size=1, max_line=20)
        renderer.render(canvas, [_particle(0, 0), _particle(20, 0)])
        assert canvas.lines == []

    def test_coincident_particles_no_line(self, recording_canvas):
        canvas = recording_canvas(100, 100)
        renderer = ProximityRenderer("#efefef", size=1, max_line=20)
        renderer.render(canvas, [_particle(3, 3), _particle(3, 3)])
        assert canvas.lines == []

    def test_three_particles_line_count(self, recording_canvas):
        """範囲内の全ペアを1本ずつ結ぶ"""
        canvas = recording_canvas(100, 100)
        renderer = ProximityRenderer("#efefef", size=1, max_line=50)
        renderer.render(canvas, [_particle(0, 0), _particle(10, 0), _particle(0, 10)])
        assert len(canvas.lines) == 3
        assert len(canvas.circles) == 3

    def test_render_clears_previous_frame(self, recording_canvas):
        canvas = recording_canvas(100, 100)
        renderer = ProximityRenderer("#efefef", size=1, max_line=20)
        particles = [_particle(0, 0), _particle(10, 0)]
        renderer.render(canvas, particles)
        renderer.render(canvas, particles)
        assert canvas.clears == 2
        assert len(canvas.lines) == 1


class TestLineAlpha:
    """線のアルファ値"""

    def test_half_distance(self):
        """max_line/2 で約 0x7f〜0x80"""
        renderer = ProximityRenderer("#efefef", size=1, max_line=200)
        assert renderer.line_alpha(100) in (0x7F, 0x80)

    def test_near_size_is_almost_opaque(self):
        renderer = ProximityRenderer("#efefef", size=1, max_line=200)
        assert renderer.line_alpha(1.0001) >= 0xFE

    def test_near_max_line_is_almost_transparent(self):
        renderer = ProximityRenderer("#efefef", size=1, max_line=200)
        assert renderer.line_alpha(199.9) == 0

    def test_line_color_zero_padded(self):
        """アルファは2桁ゼロ埋め"""
        renderer = ProximityRenderer("#abcdef", size=1, max_line=255)
        assert renderer.line_color(250) == "#abcdef05"

    @pytest.mark.parametrize("d, expected", [(1, False), (1.5, True), (19.9, True), (20, False)])
    def test_is_connected(self, d, expected):
        renderer = ProximityRenderer("#efefef", size=1, max_line=20)
        assert renderer.is_connected(d) is expected
