"""
Keyboard input - maps key names to directions.
"""

from typing import Dict, Optional

from domain.constants import Direction, UP, DOWN, LEFT, RIGHT
from domain.game_state import GameState
from .base import Player

# Key names as reported by browser KeyboardEvent.key; letters are matched
# case-insensitively.
KEY_MAP: Dict[str, Direction] = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
}


def map_key(key: Optional[str]) -> Optional[Direction]:
    """Direction for a key name, or None if the key is not bound."""
    if not key:
        return None
    if key in KEY_MAP:
        return KEY_MAP[key]
    if len(key) == 1:
        return KEY_MAP.get(key.lower())
    return None


class KeyboardPlayer(Player):
    """
    Remembers the last bound key pressed since the previous tick.

    Unbound keys are ignored, so they never change the direction.
    """

    def __init__(self):
        self.pending: Optional[Direction] = None

    def press(self, key: str) -> Optional[Direction]:
        direction = map_key(key)
        if direction is not None:
            self.pending = direction
        return direction

    def clear(self):
        self.pending = None

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        move, self.pending = self.pending, None
        return move
