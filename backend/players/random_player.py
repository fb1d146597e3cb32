"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import Direction, VALID_MOVES
from domain.coord import Coord
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Direction:
        snake_positions = [Coord(*p) for p in game_state.snake_positions]
        head = snake_positions[0]
        backwards = head.direction_to(snake_positions[1])

        # Filter out moves that:
        # 1. Reverse into the neck (the engine would flip them anyway)
        # 2. Hit walls
        # 3. Hit own body (except tail, which will move)
        valid_moves: List[Direction] = []
        for move in sorted(VALID_MOVES, key=lambda d: d.value):
            if move == backwards:
                continue

            target = head.neighbor(move, game_state.size)
            if target is None:
                continue

            if target in snake_positions[:-1]:
                continue

            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES, key=lambda d: d.value))

        return self.rng.choice(valid_moves)
