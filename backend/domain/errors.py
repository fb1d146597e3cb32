"""
Collision errors raised by the snake when a move is fatal.

Both kinds end the session. They never leave the engine: SnakeGame.step
turns them into a GAME_OVER outcome.
"""

from typing import Optional

from .coord import Coord


class CollisionError(Exception):
    """Base class for fatal moves."""

    reason = "collision"

    def __init__(self, message: str, position: Optional[Coord] = None):
        super().__init__(message)
        self.position = position


class BoundaryViolation(CollisionError):
    """The move would leave the grid."""

    reason = "wall"


class SelfCollision(CollisionError):
    """The new head lands on the snake's own body."""

    reason = "self"
