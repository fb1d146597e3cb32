"""
Tests for game_loop.py - command handling and tick scheduling.
"""

import os
import random
import sys
from unittest.mock import Mock

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Coord, OutcomeKind, UP, DOWN, LEFT, RIGHT, INITIAL_SPEED_MS
from game import SnakeGame
from game_loop import GameLoop
from players.base import Player
from players.keyboard_player import KeyboardPlayer


def make_loop(size=20, food=(0, 0), player=None):
    game = SnakeGame(size, rng=random.Random(0))
    game.food = Coord(*food)
    game.draw()
    return GameLoop(game, player=player)


class TestCommands:
    """Tests for steering commands."""

    def test_initial_direction_is_up(self):
        loop = make_loop()
        assert loop.direction == UP

    def test_last_write_wins_between_ticks(self):
        loop = make_loop()
        loop.steer(LEFT)
        loop.steer(RIGHT)
        loop.tick()
        assert loop.game.snake.head == Coord(10, 11)

    def test_key_presses_steer_through_keyboard_player(self):
        keyboard = KeyboardPlayer()
        loop = make_loop(player=keyboard)
        keyboard.press("ArrowLeft")
        loop.tick()
        assert loop.direction == LEFT
        assert loop.game.snake.head == Coord(10, 9)

    def test_unbound_keys_do_not_change_direction(self):
        keyboard = KeyboardPlayer()
        loop = make_loop(player=keyboard)
        keyboard.press("ArrowLeft")
        keyboard.press("Enter")
        keyboard.press("x")
        loop.tick()
        assert loop.direction == LEFT

    def test_no_key_keeps_the_last_direction(self):
        keyboard = KeyboardPlayer()
        loop = make_loop(player=keyboard)
        keyboard.press("ArrowLeft")
        loop.tick()
        loop.tick()
        assert loop.game.snake.head == Coord(10, 8)

    def test_steer_accepts_direction_names(self):
        loop = make_loop()
        loop.steer("RIGHT")
        assert loop.direction == RIGHT

    def test_steer_rejects_unknown_names(self):
        loop = make_loop()
        with pytest.raises(ValueError):
            loop.steer("SIDEWAYS")


class TestTick:
    """Tests for GameLoop.tick."""

    def test_tick_runs_one_step(self):
        loop = make_loop()
        outcome = loop.tick()
        assert outcome.kind == OutcomeKind.MOVED
        assert loop.game.tick == 1
        assert loop.last_outcome is outcome

    def test_tick_returns_none_after_game_over(self):
        loop = make_loop(size=5, food=(4, 4))
        outcomes = [loop.tick() for _ in range(3)]
        assert outcomes[-1].is_game_over
        assert loop.game_over is True
        assert loop.tick() is None
        assert loop.game.tick == 3

    def test_player_move_is_used(self):
        player = Mock(spec=Player)
        player.get_move.return_value = LEFT
        loop = make_loop(player=player)
        loop.tick()
        assert loop.game.snake.head == Coord(10, 9)
        assert loop.direction == LEFT
        player.get_move.assert_called_once()

    def test_player_none_keeps_direction(self):
        player = Mock(spec=Player)
        player.get_move.return_value = None
        loop = make_loop(player=player)
        loop.steer(RIGHT)
        loop.tick()
        assert loop.game.snake.head == Coord(10, 11)

    def test_snapshot_reflects_latest_step(self):
        loop = make_loop()
        loop.tick()
        assert loop.snapshot().snake_positions[0] == (9, 10)


class TestRun:
    """Tests for the scheduler."""

    def test_run_stops_on_game_over(self):
        loop = make_loop(size=5, food=(4, 4))
        sleeps = []
        outcome = loop.run(sleep=sleeps.append)
        assert outcome.is_game_over
        assert outcome.reason == "wall"
        # No sleep after the fatal tick
        assert sleeps == [INITIAL_SPEED_MS / 1000] * 2

    def test_run_respects_tick_limit(self):
        loop = make_loop()
        sleeps = []
        outcome = loop.run(ticks=4, sleep=sleeps.append)
        assert outcome.kind == OutcomeKind.MOVED
        assert loop.game.tick == 4
        assert len(sleeps) == 4

    def test_run_rereads_speed_after_eating(self):
        loop = make_loop(food=(9, 10))
        sleeps = []
        loop.run(ticks=2, sleep=sleeps.append)
        assert sleeps[0] == pytest.approx(0.28)
        assert sleeps[1] == pytest.approx(loop.speed / 1000)

    def test_run_calls_on_frame(self):
        loop = make_loop()
        frames = []
        loop.run(ticks=3, on_frame=lambda state, outcome: frames.append((state.tick, outcome.kind)), sleep=lambda s: None)
        assert frames == [(1, OutcomeKind.MOVED), (2, OutcomeKind.MOVED), (3, OutcomeKind.MOVED)]

    def test_run_on_finished_game_does_nothing(self):
        loop = make_loop(size=5, food=(4, 4))
        final = loop.run(sleep=lambda s: None)
        sleep = Mock()
        outcome = loop.run(sleep=sleep)
        assert outcome is final
        assert outcome.is_game_over
        assert outcome.reason == "wall"
        sleep.assert_not_called()


class TestRestart:
    """Tests for GameLoop.restart."""

    def test_restart_after_game_over(self):
        loop = make_loop(size=5, food=(4, 4))
        loop.steer(RIGHT)
        loop.run(sleep=lambda s: None)
        assert loop.game_over

        loop.restart()
        assert loop.game_over is False
        assert loop.direction == UP
        assert loop.last_outcome is None
        assert loop.speed == INITIAL_SPEED_MS
