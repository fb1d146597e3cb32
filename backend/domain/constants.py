"""
Game constants for the grid snake engine.
"""

from enum import Enum


class Direction(str, Enum):
    """Movement directions. String-valued so they serialize as-is."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}


class CellState(str, Enum):
    """Per-cell render tag, recomputed every tick."""

    HEAD = "HEAD"
    BODY = "BODY"
    FOOD = "FOOD"
    VOID = "VOID"


# Game settings
DEFAULT_BOARD_SIZE = 20
MIN_BOARD_SIZE = 5

# Tick period in milliseconds
INITIAL_SPEED_MS = 300
SPEED_STEP_MS = 20
MIN_SPEED_MS = 40
