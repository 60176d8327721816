"""Unit registry: the single source of truth for who stands where."""

from typing import Iterable, Iterator, Optional

from ..errors import InvariantViolation
from .cell import Cell, reading_order
from .grid import Grid
from .unit import Faction, Unit


class UnitRegistry:
    """Mapping from cell to living unit.

    Invariants:
    - every key is an open terrain cell of the grid
    - every key equals the stored unit's position
    - per-faction counts match the units present

    Violations raise InvariantViolation; they indicate a bug in the caller,
    not a recoverable condition.
    """

    def __init__(self, grid: Grid, units: Iterable[Unit] = ()):
        """Initialize registry and register the starting units.

        Args:
            grid: Static terrain the units stand on
            units: Initial units (positions must be open and distinct)
        """
        self.grid = grid
        self._by_cell: dict[Cell, Unit] = {}
        self._counts: dict[Faction, int] = {faction: 0 for faction in Faction}
        for unit in units:
            self.add(unit)

    def __len__(self) -> int:
        return len(self._by_cell)

    def __contains__(self, cell: object) -> bool:
        return cell in self._by_cell

    def __iter__(self) -> Iterator[Unit]:
        return iter(self.units())

    def at(self, cell: Cell) -> Optional[Unit]:
        """Return the unit at a cell, or None if the cell is vacant."""
        return self._by_cell.get(cell)

    def is_vacant(self, cell: Cell) -> bool:
        """Return True if the cell is open terrain with no unit on it."""
        return self.grid.is_open(cell) and cell not in self._by_cell

    def add(self, unit: Unit) -> None:
        """Register a unit at its current position."""
        if not self.grid.is_open(unit.position):
            raise InvariantViolation(f"Cannot place unit on non-open cell {unit.position}")
        if unit.position in self._by_cell:
            raise InvariantViolation(f"Cell {unit.position} is already occupied")
        self._by_cell[unit.position] = unit
        self._counts[unit.faction] += 1

    def move(self, origin: Cell, dest: Cell) -> Unit:
        """Relocate the unit at origin to dest.

        Updates the mapping and the unit's stored position together.

        Returns:
            The moved unit
        """
        unit = self._by_cell.get(origin)
        if unit is None:
            raise InvariantViolation(f"No unit at {origin} to move")
        if not self.is_vacant(dest):
            raise InvariantViolation(f"Cannot move unit from {origin} to {dest}: cell not vacant")
        del self._by_cell[origin]
        unit.position = dest
        self._by_cell[dest] = unit
        return unit

    def remove(self, cell: Cell) -> Unit:
        """Delete the unit at a cell, freeing the cell immediately.

        Returns:
            The removed unit
        """
        unit = self._by_cell.pop(cell, None)
        if unit is None:
            raise InvariantViolation(f"No unit at {cell} to remove")
        self._counts[unit.faction] -= 1
        return unit

    def living_by_faction(self, faction: Faction) -> int:
        """Number of living units of a faction (O(1))."""
        return self._counts[faction]

    def cells(self) -> list[Cell]:
        """Occupied cells in reading order."""
        return reading_order(self._by_cell)

    def units(self) -> list[Unit]:
        """Living units in reading order of their cells."""
        return [self._by_cell[cell] for cell in self.cells()]

    def total_hit_points(self, faction: Optional[Faction] = None) -> int:
        """Sum of hit points of living units, optionally for one faction."""
        return sum(
            unit.hit_points
            for unit in self._by_cell.values()
            if faction is None or unit.faction is faction
        )
