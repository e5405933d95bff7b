"""A single game of 2048: the board, its random source and the move state machine."""

import logging
from enum import Enum
from typing import List, Optional

import numpy as np

from board_rules import BOARD_SIZE, Direction, apply_move, insert_random_tile, new_board

logger = logging.getLogger(__name__)

SPAWN_VALUE = 2
OPENING_TILES = (2, 4)


class GameState(Enum):
    PLAYING = "PLAYING"
    GAME_OVER = "GAME_OVER"


class MoveResult(Enum):
    """What a single ``Game.move`` call did."""

    REJECTED = "REJECTED"  # nothing slid or merged
    ACCEPTED = "ACCEPTED"
    GAME_OVER = "GAME_OVER"  # board changed but no empty cell was left for the spawn


class GameOverError(RuntimeError):
    pass


class Game:
    """Owns one board for the lifetime of a game.

    ``rng`` may be any ``numpy.random.Generator``; pass a seeded one for a
    reproducible game.
    """

    board: np.ndarray

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.board = new_board(BOARD_SIZE)
        self.state = GameState.PLAYING
        self.moves = 0
        for value in OPENING_TILES:
            self.insert_random_tile(value)
        logger.info("New game started: %s", self.snapshot())

    def apply_move(self, direction: Direction) -> bool:
        return apply_move(self.board, Direction.parse(direction))

    def insert_random_tile(self, value: int = SPAWN_VALUE) -> bool:
        return insert_random_tile(self.board, value, self.rng)

    def move(self, direction: Direction) -> MoveResult:
        if self.state == GameState.GAME_OVER:
            raise GameOverError("The game is over; start a new one")

        direction = Direction.parse(direction)
        if not self.apply_move(direction):
            logger.debug("Move %s rejected", direction.value)
            return MoveResult.REJECTED

        self.moves += 1
        if not self.insert_random_tile(SPAWN_VALUE):
            self.state = GameState.GAME_OVER
            logger.info(
                "Game over after %d moves, highest tile %d",
                self.moves,
                self.highest_tile(),
            )
            return MoveResult.GAME_OVER

        logger.debug("Move %s accepted", direction.value)
        return MoveResult.ACCEPTED

    def highest_tile(self) -> int:
        return int(self.board.max())

    def snapshot(self) -> List[List[int]]:
        return self.board.tolist()


__all__ = [
    "Game",
    "GameOverError",
    "GameState",
    "MoveResult",
    "OPENING_TILES",
    "SPAWN_VALUE",
]
