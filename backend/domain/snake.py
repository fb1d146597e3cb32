"""
Snake entity for the game engine.
"""

import logging
from collections import deque
from typing import Iterable, List, Optional

from .constants import Direction
from .coord import Coord
from .errors import BoundaryViolation, SelfCollision, CollisionError

logger = logging.getLogger(__name__)

START_LENGTH = 3


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of Coord from head at index 0 to tail at the end
        size: board edge length, used for the bottom/right walls (optional)
        alive: whether this snake is still alive
        death_reason: 'wall' or 'self' once the snake has died
    """

    def __init__(self, positions: Iterable[Coord], size: Optional[int] = None):
        body = [Coord(*p) for p in positions]
        if len(body) < 2:
            raise ValueError("A snake needs at least two segments")
        for cell in body:
            if cell.row < 0 or cell.col < 0:
                raise ValueError(f"Segment {cell} has a negative coordinate")
            if size is not None and (cell.row >= size or cell.col >= size):
                raise ValueError(f"Segment {cell} is outside a {size}x{size} board")
        for a, b in zip(body, body[1:]):
            if not a.is_adjacent(b):
                raise ValueError(f"Segments {a} and {b} are not neighbours")

        self.positions = deque(body)
        self.size = size
        self.alive = True
        self.death_reason: Optional[str] = None

    @classmethod
    def new(cls, start_row: int, start_col: int, size: Optional[int] = None) -> "Snake":
        """Three segments laid out vertically, head at the start cell and the body below it."""
        return cls(
            [Coord(start_row + i, start_col) for i in range(START_LENGTH)],
            size=size,
        )

    @property
    def head(self) -> Coord:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def length(self) -> int:
        return len(self.positions)

    @property
    def body(self) -> List[Coord]:
        """Every segment except the head."""
        return list(self.positions)[1:]

    def neck_direction(self) -> Direction:
        """The direction from the head to the second segment, i.e. backwards."""
        return self.head.direction_to(self.positions[1])

    def resolve_direction(self, direction: Direction) -> Direction:
        """
        The direction the snake will actually move in.

        A request to reverse straight into the neck is flipped to its
        opposite, which keeps the snake moving forward.
        """
        neck = self.neck_direction()
        if direction == neck:
            return neck.opposite()
        return direction

    def advance(self, direction: Direction, food: Coord) -> bool:
        """
        Move the head one cell and report whether the food was eaten.

        The tail is dropped unless the new head lands on the food. The new
        head is then checked against every other segment.

        Raises:
            BoundaryViolation: the move leaves the grid
            SelfCollision: the new head overlaps the body
        """
        if not self.alive:
            raise RuntimeError("Cannot move a dead snake")

        effective = self.resolve_direction(Direction(direction))
        food = Coord(*food)

        try:
            new_head = self.head.neighbor(effective, self.size)
            if new_head is None:
                raise BoundaryViolation(
                    f"Moving {effective.value} from {self.head} leaves the board",
                    position=self.head,
                )

            ate = new_head == food
            moved = [new_head] + list(self.positions)
            if not ate:
                moved.pop()

            if new_head in moved[1:]:
                raise SelfCollision(
                    f"Head ran into the body at {new_head}",
                    position=new_head,
                )
        except CollisionError as e:
            self.alive = False
            self.death_reason = e.reason
            logger.debug(f"Snake died ({e.reason}): {e}")
            raise

        self.positions = deque(moved)
        return ate

    def __contains__(self, cell) -> bool:
        return Coord(*cell) in self.positions

    def __repr__(self):
        return f"<Snake length={self.length} head={self.head} alive={self.alive}>"
