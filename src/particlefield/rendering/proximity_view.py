"""近接ライン レンダラー"""

from particlefield.entities.particle import Particle
from particlefield.physics.geometry import distance


class ProximityRenderer:
    """
    粒子と近接ラインのレンダラー

    毎フレーム全面をクリアして描き直す（差分描画なし）。
    距離が (size, max_line) の粒子ペアを線で結び、遠いほど透明にする。
    ペア判定は O(n²) で、1フレームの主コスト。
    """

    def __init__(self, color: str, size: float, max_line: float, line_width: int = 1):
        """
        Args:
            color: 基本色 "#rrggbb"
            size: 粒子マーカーの半径 (px)
            max_line: 線を結ぶ最大距離 (px)
            line_width: 線幅 (px)
        """
        self.color = color
        self.size = size
        self.max_line = max_line
        self.line_width = line_width

    def is_connected(self, d: float) -> bool:
        """距離 d で線を引くか（両端とも開区間）"""
        return self.size < d < self.max_line

    def line_alpha(self, d: float) -> int:
        """距離に応じたアルファ値 (0-255)"""
        return round((1 - d / self.max_line) * 255)

    def line_color(self, d: float) -> str:
        """基本色に2桁16進のアルファを付加"""
        return f"{self.color}{self.line_alpha(d):02x}"

    def render(self, canvas, particles: list[Particle]):
        """
        1フレーム描画

        Args:
            canvas: 描画面（clear / draw_line / fill_circle）
            particles: 粒子リスト
        """
        canvas.clear()

        count = len(particles)
        for i, p in enumerate(particles):
            # 各ペアは1回だけ描く
            for j in range(i + 1, count):
                q = particles[j]
                d = distance(p, q)
                if not self.is_connected(d):
                    continue
                canvas.draw_line(self.line_color(d), (p.x, p.y), (q.x, q.y), self.line_width)

            canvas.fill_circle(self.color, (p.x, p.y), self.size)
