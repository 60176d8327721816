"""ASCII battle map rendering.

This module renders the battle grid in the puzzle's own text format, so a
rendered map can be loaded back with load_battle.
"""

from ..models.battle import Battle
from ..models.cell import Cell


class MapRenderer:
    """Renders the grid and living units as ASCII art."""

    def render(self, battle: Battle, show_hit_points: bool = True) -> str:
        """Render the battle map.

        Output format (one line per grid row):
        #######
        #.G...#   G(200)
        #...EG#   E(197), G(200)
        #######

        Legend:
        - '#' = wall
        - '.' = open floor
        - 'E' / 'G' = elf / goblin
        - 'X(n)' = hit points of the units on that row, left to right

        Args:
            battle: Battle to render
            show_hit_points: Append per-row unit hit points

        Returns:
            Multi-line string, no trailing newline
        """
        lines = []
        for row_index, row in enumerate(battle.grid.rows):
            cells = []
            row_units = []
            for col_index, terrain in enumerate(row):
                unit = battle.units.at(Cell(row_index, col_index))
                if unit is None:
                    cells.append(terrain.value)
                else:
                    cells.append(unit.faction.symbol)
                    row_units.append(f"{unit.faction.symbol}({unit.hit_points})")

            line = "".join(cells)
            if show_hit_points and row_units:
                line += "   " + ", ".join(row_units)
            lines.append(line)

        return "\n".join(lines)
