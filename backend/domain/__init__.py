"""
Domain entities for the grid snake engine.

This module contains the core game entities that are independent of
the adapters around them (HTTP, rendering, scheduling).
"""

from .constants import (
    Direction, CellState,
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    DEFAULT_BOARD_SIZE, INITIAL_SPEED_MS, SPEED_STEP_MS, MIN_SPEED_MS,
)
from .coord import Coord
from .errors import CollisionError, BoundaryViolation, SelfCollision
from .snake import Snake
from .outcome import StepOutcome, OutcomeKind
from .game_state import GameState

__all__ = [
    'Direction', 'CellState',
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'DEFAULT_BOARD_SIZE', 'INITIAL_SPEED_MS', 'SPEED_STEP_MS', 'MIN_SPEED_MS',
    'Coord',
    'CollisionError', 'BoundaryViolation', 'SelfCollision',
    'Snake',
    'StepOutcome', 'OutcomeKind',
    'GameState',
]
