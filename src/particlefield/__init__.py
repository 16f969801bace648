"""ParticleField: 粒子ネットワークのアニメーション"""

from .config import FieldConfig
from .errors import InvalidConfig, InvalidHost, InvalidRange
from .field import ParticleField

__all__ = [
    "FieldConfig",
    "InvalidConfig",
    "InvalidHost",
    "InvalidRange",
    "ParticleField",
]
