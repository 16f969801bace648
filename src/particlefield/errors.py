"""ParticleField 例外"""


class InvalidRange(ValueError):
    """乱数の範囲指定が不正（非有限値、または lo >= hi）"""


class InvalidHost(TypeError):
    """マウント先が Host ではない"""


class InvalidConfig(ValueError):
    """FieldConfig の値が不正"""
