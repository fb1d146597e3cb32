"""
The game: owns the board, the snake and the food, and advances one step
per tick.
"""

import logging
import random
from typing import List, Optional

from domain.constants import (
    CellState,
    Direction,
    DEFAULT_BOARD_SIZE,
    MIN_BOARD_SIZE,
    INITIAL_SPEED_MS,
    SPEED_STEP_MS,
    MIN_SPEED_MS,
)
from domain.coord import Coord
from domain.errors import CollisionError
from domain.game_state import GameState
from domain.outcome import StepOutcome
from domain.snake import Snake

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Board (size x size grid of CellState, repainted every step)
      - Snake
      - Food
      - Speed (tick period in ms)
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE, rng: Optional[random.Random] = None):
        if size < MIN_BOARD_SIZE:
            raise ValueError(f"Board size must be at least {MIN_BOARD_SIZE}, got {size}")

        self.size = size
        self.rng = rng or random.Random()
        self.board: List[List[CellState]] = [
            [CellState.VOID for _ in range(size)] for _ in range(size)
        ]
        self.snake = Snake.new(size // 2, size // 2, size=size)
        self.food = Coord(0, 0)
        self.speed = INITIAL_SPEED_MS
        self.tick = 0
        self.game_over = False
        self.death_reason: Optional[str] = None

        self.spawn_food()
        self.draw()
        logger.info(f"New {size}x{size} game, snake at {list(self.snake.positions)}, food at {self.food}")

    def step(self, direction: Direction) -> StepOutcome:
        """
        Advance the snake one cell.

        A collision ends the game and comes back as a GAME_OVER outcome.
        Eating the food respawns it and shortens the tick period.
        """
        if self.game_over:
            raise RuntimeError("Game is already over")

        self.tick += 1
        try:
            ate = self.snake.advance(direction, self.food)
        except CollisionError as e:
            self.game_over = True
            self.death_reason = e.reason
            logger.info(f"Game over on tick {self.tick}: {e}")
            self.draw()
            return StepOutcome.game_over(self.speed, e.reason)

        if ate:
            self.speed = max(MIN_SPEED_MS, self.speed - SPEED_STEP_MS)
            self.spawn_food()
            logger.debug(f"Food eaten on tick {self.tick}, length {self.snake.length}, speed {self.speed}ms")

        self.draw()
        if ate:
            return StepOutcome.ate(self.speed)
        return StepOutcome.moved(self.speed)

    def spawn_food(self) -> Coord:
        """
        Place the food on a uniformly random cell.

        Cells under the snake are not excluded, so food can appear beneath
        the body.
        """
        self.food = Coord(self.rng.randrange(self.size), self.rng.randrange(self.size))
        return self.food

    def draw(self):
        """Repaint the board: food first, then the head, then the body."""
        self.clear()

        self.board[self.food.row][self.food.col] = CellState.FOOD

        head, *body = self.snake.positions
        self.board[head.row][head.col] = CellState.HEAD
        for cell in body:
            self.board[cell.row][cell.col] = CellState.BODY

    def clear(self):
        for row in self.board:
            for c in range(len(row)):
                row[c] = CellState.VOID

    def render(self) -> List[List[CellState]]:
        """A copy of the current grid for the render collaborator."""
        return [list(row) for row in self.board]

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=self.tick,
            size=self.size,
            snake_positions=[tuple(p) for p in self.snake.positions],
            food=tuple(self.food),
            speed=self.speed,
            game_over=self.game_over,
            grid=self.render(),
            death_reason=self.death_reason
        )

    def restart(self) -> "SnakeGame":
        """A fresh game of the same size, sharing the random generator."""
        return SnakeGame(self.size, rng=self.rng)

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.get_current_state().print_board() + "\n")

    def __repr__(self):
        return (
            f"<SnakeGame size={self.size} tick={self.tick} "
            f"length={self.snake.length} speed={self.speed} game_over={self.game_over}>"
        )
