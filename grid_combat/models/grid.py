"""Static battle terrain."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from ..utils.constants import OPEN_SYMBOL, WALL_SYMBOL
from .cell import Cell


class Terrain(Enum):
    """Per-cell terrain classification."""

    OPEN = OPEN_SYMBOL
    WALL = WALL_SYMBOL


@dataclass(frozen=True)
class Grid:
    """Immutable rectangular terrain map.

    The grid knows nothing about units: occupancy is the UnitRegistry's
    business. Callers are expected to pass a well-formed rectangle; the map
    loader is responsible for validating raw input.
    """

    rows: tuple[tuple[Terrain, ...], ...]

    def __post_init__(self):
        """Validate grid shape after initialization."""
        if not self.rows:
            raise ValueError("Grid must have at least one row")
        width = len(self.rows[0])
        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(
                    f"Grid row {index} has width {len(row)} (expected {width})"
                )

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell.row < self.height and 0 <= cell.col < self.width

    def terrain_at(self, cell: Cell) -> Terrain:
        return self.rows[cell.row][cell.col]

    def is_open(self, cell: Cell) -> bool:
        """Return True if terrain allows occupancy (ignores units)."""
        return self.in_bounds(cell) and self.terrain_at(cell) is Terrain.OPEN

    def neighbors(self, cell: Cell) -> list[Cell]:
        """Return in-bounds neighbors in reading order: up, left, right, down.

        This order seeds the order in which equally short paths are
        discovered, so it must not change.
        """
        candidates = (cell.up(), cell.left(), cell.right(), cell.down())
        return [c for c in candidates if self.in_bounds(c)]

    def open_cells(self) -> Iterator[Cell]:
        """Yield every open cell in reading order."""
        for row_index, row in enumerate(self.rows):
            for col_index, terrain in enumerate(row):
                if terrain is Terrain.OPEN:
                    yield Cell(row_index, col_index)
