"""
GameLoop - the single owner of a SnakeGame.

Input and tick events arrive as commands (steer/tick). The loop keeps
only the latest direction between ticks and runs at most one step at a time.
"""

import logging
import threading
import time
from typing import Callable, Optional

from domain.constants import Direction, UP
from domain.game_state import GameState
from domain.outcome import StepOutcome
from game import SnakeGame
from players.base import Player

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Drives one game session.

    Attributes:
        game: the SnakeGame being played (replaced on restart)
        direction: the direction used on the next tick
        player: optional Player asked for a move before every tick
    """

    def __init__(self, game: SnakeGame, player: Optional[Player] = None, initial_direction: Direction = UP):
        self.game = game
        self.player = player
        self.direction = initial_direction
        self.initial_direction = initial_direction
        self.last_outcome: Optional[StepOutcome] = None
        self._lock = threading.Lock()

    @property
    def game_over(self) -> bool:
        return self.game.game_over

    @property
    def speed(self) -> int:
        return self.game.speed

    def steer(self, direction: Direction):
        """Set the direction for the next tick. Last write wins."""
        with self._lock:
            self.direction = Direction(direction)

    def tick(self) -> Optional[StepOutcome]:
        """
        Run exactly one step with the current direction.

        Returns None when the game is already over.
        """
        with self._lock:
            if self.game.game_over:
                return None

            if self.player is not None:
                move = self.player.get_move(self.game.get_current_state())
                if move is not None:
                    self.direction = move

            outcome = self.game.step(self.direction)
            self.last_outcome = outcome
            return outcome

    def snapshot(self) -> GameState:
        with self._lock:
            return self.game.get_current_state()

    def restart(self):
        """Start a fresh game of the same size after a game over."""
        with self._lock:
            self.game = self.game.restart()
            self.direction = self.initial_direction
            self.last_outcome = None
        logger.info("Game restarted")

    def run(
        self,
        ticks: Optional[int] = None,
        on_frame: Optional[Callable[[GameState, StepOutcome], None]] = None,
        sleep: Callable[[float], None] = time.sleep
    ) -> Optional[StepOutcome]:
        """
        Tick until the game ends (or `ticks` steps have run), sleeping for the
        current speed between ticks. The speed is re-read after every step.

        Returns the last outcome.
        """
        played = 0
        outcome = self.last_outcome
        while ticks is None or played < ticks:
            result = self.tick()
            if result is None:
                break
            outcome = result
            played += 1

            if on_frame is not None:
                on_frame(self.snapshot(), outcome)

            if outcome.is_game_over:
                break

            sleep(outcome.speed / 1000)

        return outcome
