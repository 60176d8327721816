"""Grid coordinates and reading order."""

from typing import Iterable, NamedTuple


class Cell(NamedTuple):
    """A (row, col) position on the battle map.

    Tuple comparison orders cells by row first, then column, which is
    exactly reading order.
    """

    row: int
    col: int

    def up(self) -> "Cell":
        return Cell(self.row - 1, self.col)

    def left(self) -> "Cell":
        return Cell(self.row, self.col - 1)

    def right(self) -> "Cell":
        return Cell(self.row, self.col + 1)

    def down(self) -> "Cell":
        return Cell(self.row + 1, self.col)

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.col})"


def reading_order(cells: Iterable[Cell]) -> list[Cell]:
    """Return cells as a new list sorted top-to-bottom, left-to-right.

    Args:
        cells: Any iterable of cells (set, dict keys, generator)

    Returns:
        List of cells in reading order
    """
    return sorted(cells, key=lambda c: (c.row, c.col))
