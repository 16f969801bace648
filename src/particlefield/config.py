"""ParticleField 設定・定数"""

import math
import re
from dataclasses import dataclass

from particlefield.errors import InvalidConfig

# 画面設定
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 800
FPS = 60
FRAME_BUDGET_MS = 1000.0 / FPS  # 1フレームあたりの描画予算 (ms)

# 運動パラメータ
BASE_SPEED = 50.0          # px/s (初期速度、ポインタ不在時の巡航速度)
ATTRACTION_RADIUS = 200.0  # px (この距離以内でポインタが向き・速度を上書き)
SPEED_SCALE = 0.5          # 1/s (ポインタ距離 → 速度の係数 k)

# カラー定義
BACKGROUND_COLOR = (16, 18, 24)

# デフォルトのフィールド設定
DEFAULT_COUNT = 100
DEFAULT_SIZE = 2.0
DEFAULT_COLOR = "#efefef"
DEFAULT_MAX_LINE = 200.0
DEFAULT_LINE_WIDTH = 1

# ログ設定
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = None  # 例: "logs/particlefield.log"

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def _is_positive_number(value) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value) and value > 0


@dataclass(frozen=True)
class FieldConfig:
    """
    フィールドの構成（生成後は不変）

    color は "#rrggbb" 形式。線の色はこの後ろに2桁のアルファを付加する。
    """
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT
    count: int = DEFAULT_COUNT
    size: float = DEFAULT_SIZE
    color: str = DEFAULT_COLOR
    max_line: float = DEFAULT_MAX_LINE
    line_width: int = DEFAULT_LINE_WIDTH

    def validate(self) -> "FieldConfig":
        """
        値を検証する

        Raises:
            InvalidConfig: いずれかの値が不正な場合
        """
        if not _is_positive_number(self.width) or not _is_positive_number(self.height):
            raise InvalidConfig(f"width/height must be positive: {self.width}x{self.height}")
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 0:
            raise InvalidConfig(f"count must be a non-negative int: {self.count!r}")
        if not isinstance(self.size, (int, float)) or not math.isfinite(self.size) or self.size < 0:
            raise InvalidConfig(f"size must be >= 0: {self.size!r}")
        if not _is_positive_number(self.max_line):
            raise InvalidConfig(f"max_line must be > 0: {self.max_line!r}")
        if not isinstance(self.line_width, (int, float)) or self.line_width < 1:
            raise InvalidConfig(f"line_width must be >= 1: {self.line_width!r}")
        if not isinstance(self.color, str) or not _HEX_COLOR.match(self.color):
            raise InvalidConfig(f"color must be '#rrggbb': {self.color!r}")
        return self


# 名前付きプリセット（デモの PARTICLEFIELD_PRESET で選択）
FIELD_PRESETS = {
    "default": FieldConfig(),
    "dense": FieldConfig(count=180, size=1.5, max_line=120.0),
    "sparse": FieldConfig(count=40, size=3.0, color="#8fd3ff", max_line=260.0, line_width=2),
}
