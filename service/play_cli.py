"""Play 2048 in the terminal (hjkl to move, q or x to quit)."""

import argparse
import logging
import os
import sys
from typing import Optional, Sequence, TextIO

import numpy as np

from board_rules import Direction
from game_session import Game, MoveResult

KEY_MAPPING = {
    "j": Direction.DOWN,
    "k": Direction.UP,
    "l": Direction.RIGHT,
    "h": Direction.LEFT,
}
QUIT_KEYS = ("q", "x")


def play(game: Game, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> None:
    print("(use hjkl to move tiles and q to quit)", file=stdout)
    while True:
        print(game.board, file=stdout)
        print("> ", end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            break
        key = line.strip()
        if key in QUIT_KEYS:
            break
        direction = KEY_MAPPING.get(key)
        if direction is None:
            print(f'invalid input: "{key}"', file=stdout)
            continue

        result = game.move(direction)
        if result == MoveResult.REJECTED:
            print(f"unable to move grid {direction.value.lower()}, try again", file=stdout)
        elif result == MoveResult.GAME_OVER:
            print(
                f"grid has been filled, your highest tile was {game.highest_tile()}",
                file=stdout,
            )
            break


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="seed for tile placement")
    parser.add_argument(
        "--log-level",
        default=os.environ.get("GAME_LOG_LEVEL", "WARNING"),
        help="logging level (default: $GAME_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    play(Game(np.random.default_rng(args.seed)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
