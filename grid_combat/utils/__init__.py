"""Utility constants for grid combat."""

from .constants import (
    DEFAULT_ATTACK_POWER,
    INITIAL_HIT_POINTS,
    OPEN_SYMBOL,
    WALL_SYMBOL,
)

__all__ = [
    "DEFAULT_ATTACK_POWER",
    "INITIAL_HIT_POINTS",
    "OPEN_SYMBOL",
    "WALL_SYMBOL",
]
