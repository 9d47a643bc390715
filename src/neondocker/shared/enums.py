"""Domain enumerations used across all modules."""

from __future__ import annotations

from enum import Enum, unique


@unique
class Edition(str, Enum):
    """Published KDE neon editions, used as image tags."""

    USER_LTS = "user-lts"
    USER = "user"
    DEV_STABLE = "dev-stable"
    DEV_UNSTABLE = "dev-unstable"

    @classmethod
    def values(cls) -> list[str]:
        return [e.value for e in cls]


@unique
class ImageVariant(str, Enum):
    """Image flavours: bare Plasma or Plasma plus all KDE apps."""

    PLASMA = "plasma"
    ALL = "all"
