"""
Grid coordinate value type.
"""

from typing import NamedTuple, Optional

from .constants import Direction, UP, DOWN, LEFT


class Coord(NamedTuple):
    """A (row, col) cell on the board. Row 0 is the top edge."""

    row: int
    col: int

    def direction_to(self, other: "Coord") -> Direction:
        """
        Direction from this cell towards `other`.

        Rows are compared first; columns only break ties, so two equal cells
        report RIGHT.
        """
        if self.row > other.row:
            return Direction.UP
        if self.row < other.row:
            return Direction.DOWN
        if self.col > other.col:
            return Direction.LEFT
        return Direction.RIGHT

    def neighbor(self, direction: Direction, size: Optional[int] = None) -> Optional["Coord"]:
        """
        The adjacent cell in `direction`, or None if it falls off the grid.

        Without a `size` only the top and left edges are enforced.
        """
        row, col = self.row, self.col
        if direction == UP:
            if row == 0:
                return None
            return Coord(row - 1, col)
        if direction == DOWN:
            row += 1
        elif direction == LEFT:
            if col == 0:
                return None
            return Coord(row, col - 1)
        else:
            col += 1

        if size is not None and (row >= size or col >= size):
            return None
        return Coord(row, col)

    def is_adjacent(self, other: "Coord") -> bool:
        return abs(self.row - other.row) + abs(self.col - other.col) == 1
