"""Data models for grid combat."""

from .battle import Battle, BattleOutcome
from .cell import Cell, reading_order
from .grid import Grid, Terrain
from .registry import UnitRegistry
from .unit import Faction, Unit

__all__ = [
    "Battle",
    "BattleOutcome",
    "Cell",
    "Faction",
    "Grid",
    "Terrain",
    "Unit",
    "UnitRegistry",
    "reading_order",
]
