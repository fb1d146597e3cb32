#!/usr/bin/env python3
"""
Play a headless game of snake driven by the random player.

Usage:
    python cli/play.py
    python cli/play.py --size 12 --seed 7 --max-ticks 200 --no-sleep

The board is printed after every tick. The run stops on game over or when
--max-ticks is reached.
"""

import os
import sys
import time
import random
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import configure_logging, get_board_size
from game import SnakeGame
from game_loop import GameLoop
from players.random_player import RandomPlayer

configure_logging()
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Play a headless game of snake with a random player',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        '--size',
        type=int,
        default=None,
        help='Board edge length (default: SNAKE_BOARD_SIZE or 20)'
    )
    parser.add_argument(
        '--max-ticks',
        type=int,
        default=None,
        help='Stop after this many ticks (default: play until game over)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for food placement and the player'
    )
    parser.add_argument(
        '--no-sleep',
        action='store_true',
        help='Do not wait between ticks'
    )
    return parser


def print_frame(state, outcome):
    print(f"\nTick {state.tick} - {outcome.kind.value} - length {state.length} - speed {state.speed}ms")
    print(state.print_board())


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    size = args.size if args.size is not None else get_board_size()
    rng = random.Random(args.seed)

    try:
        game = SnakeGame(size, rng=rng)
    except ValueError as e:
        logger.error(f"Error: {e}")
        return 2

    loop = GameLoop(game, player=RandomPlayer(rng))
    sleep = (lambda _seconds: None) if args.no_sleep else time.sleep

    try:
        outcome = loop.run(ticks=args.max_ticks, on_frame=print_frame, sleep=sleep)
    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        return 1

    state = loop.snapshot()
    if outcome is not None and outcome.is_game_over:
        print(f"\nGame over ({outcome.reason}) after {state.tick} ticks, length {state.length}")
    else:
        print(f"\nStopped after {state.tick} ticks, length {state.length}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
