"""Battle map loading from the puzzle's text format.

Map characters:
- '#' wall
- '.' open floor
- 'E' / 'G' an elf / goblin standing on open floor

Every row must have the same width. Trailing blank lines are ignored.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from ..models.battle import Battle
from ..models.cell import Cell
from ..models.grid import Grid, Terrain
from ..models.registry import UnitRegistry
from ..models.unit import Faction, Unit
from ..schemas.config import BattleConfig


class ErrorType(Enum):
    """Classification of map input errors."""

    EMPTY_MAP = "empty_map"
    RAGGED_ROWS = "ragged_rows"
    UNKNOWN_SYMBOL = "unknown_symbol"


class MapParseError(ValueError):
    """Raised when map text is not a well-formed battle map."""

    def __init__(
        self,
        error_type: ErrorType,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        """Initialize parse error.

        Args:
            error_type: Classification of the error
            message: Human-readable error message
            line: 1-based line number of the offending row, if known
            column: 1-based column of the offending character, if known
        """
        self.error_type = error_type
        self.message = message
        self.line = line
        self.column = column
        super().__init__(message)


def load_battle(text: str, config: Optional[BattleConfig] = None) -> Battle:
    """Build a fresh Battle from map text.

    Args:
        text: Map rows separated by newlines
        config: Combat constants (defaults to BattleConfig())

    Returns:
        Battle with no rounds played

    Raises:
        MapParseError: If the map is empty, ragged, or has unknown characters
    """
    config = config or BattleConfig()
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise MapParseError(ErrorType.EMPTY_MAP, "Map is empty")

    width = len(lines[0])
    terrain_rows = []
    units = []

    for row, line in enumerate(lines):
        if len(line) != width:
            raise MapParseError(
                ErrorType.RAGGED_ROWS,
                f"Line {row + 1} has width {len(line)} (expected {width})",
                line=row + 1,
            )
        terrain_row = []
        for col, symbol in enumerate(line):
            if symbol == Terrain.WALL.value:
                terrain_row.append(Terrain.WALL)
                continue
            terrain_row.append(Terrain.OPEN)
            if symbol == Terrain.OPEN.value:
                continue
            try:
                faction = Faction.from_symbol(symbol)
            except ValueError:
                raise MapParseError(
                    ErrorType.UNKNOWN_SYMBOL,
                    f"Unexpected character {symbol!r} at line {row + 1}, column {col + 1}",
                    line=row + 1,
                    column=col + 1,
                ) from None
            units.append(
                Unit(
                    position=Cell(row, col),
                    faction=faction,
                    hit_points=config.initial_hit_points,
                    attack_power=config.attack_power(faction),
                )
            )
        terrain_rows.append(tuple(terrain_row))

    grid = Grid(rows=tuple(terrain_rows))
    return Battle(grid=grid, units=UnitRegistry(grid, units))


def load_battle_file(filepath: str, config: Optional[BattleConfig] = None) -> Battle:
    """Load a Battle from a map file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        MapParseError: If the file is not a well-formed map
    """
    return load_battle(Path(filepath).read_text(), config)
