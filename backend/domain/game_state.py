"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple, Dict, Any, Optional

from .constants import CellState

CELL_SYMBOLS = {
    CellState.HEAD: 'H',
    CellState.BODY: 'o',
    CellState.FOOD: '*',
    CellState.VOID: '.',
}


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick: how many steps have been played
        size: board edge length
        snake_positions: list of (row, col), head first
        food: (row, col) of the food
        speed: current tick period in ms
        game_over: whether the session has ended
        death_reason: 'wall' or 'self' once game_over is set
        grid: size x size rows of CellState
    """

    def __init__(
        self,
        tick: int,
        size: int,
        snake_positions: List[Tuple[int, int]],
        food: Tuple[int, int],
        speed: int,
        game_over: bool,
        grid: List[List[CellState]],
        death_reason: Optional[str] = None
    ):
        self.tick = tick
        self.size = size
        self.snake_positions = snake_positions
        self.food = food
        self.speed = speed
        self.game_over = game_over
        self.grid = grid
        self.death_reason = death_reason

    @property
    def length(self) -> int:
        return len(self.snake_positions)

    def count(self, state: CellState) -> int:
        return sum(row.count(state) for row in self.grid)

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty cell
        * = food
        o = snake body
        H = snake head
        Row 0 is printed first (top of the board).
        """
        result = []
        for r, row in enumerate(self.grid):
            result.append(f"{r:2d} {' '.join(CELL_SYMBOLS[cell] for cell in row)}")

        # Column labels, last digit only so the grid stays aligned
        result.append("   " + " ".join(str(c % 10) for c in range(self.size)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tick": self.tick,
            "size": self.size,
            "snake": [list(p) for p in self.snake_positions],
            "food": list(self.food),
            "speed": self.speed,
            "game_over": self.game_over,
            "death_reason": self.death_reason,
            "grid": [[cell.value for cell in row] for row in self.grid],
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, food={self.food}, "
            f"length={self.length}, speed={self.speed}, game_over={self.game_over}>"
        )
