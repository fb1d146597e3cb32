"""
Player implementations for the grid snake game.

Players are the input side of the game: they turn key presses or a
strategy into directions for the game loop.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer, KEY_MAP, map_key
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'KeyboardPlayer',
    'KEY_MAP',
    'map_key',
    'RandomPlayer',
]
