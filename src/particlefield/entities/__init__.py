"""エンティティ モジュール"""

from .particle import Particle

__all__ = ["Particle"]
