"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.constants import Direction
from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player is asked for a move once per tick. Returning None keeps the
    current direction.
    """

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of the Direction members, or None for no change
        """
        raise NotImplementedError
