"""Core 2048 board mechanics shared by the game session, the CLI and the server."""

from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from line_collapse import collapse

BOARD_SIZE = 4


class Direction(str, Enum):
    UP = "UP"
    RIGHT = "RIGHT"
    DOWN = "DOWN"
    LEFT = "LEFT"

    @classmethod
    def parse(cls, text: Union[str, "Direction"]) -> "Direction":
        if isinstance(text, cls):
            return text
        try:
            return cls(str(text).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown direction: {text}") from None


DIRECTION_NAMES: Sequence[str] = tuple(d.value for d in Direction)

_default_rng = np.random.default_rng()


def new_board(size: int = BOARD_SIZE) -> np.ndarray:
    return np.zeros((size, size), dtype=np.int64)


def line_views(board: np.ndarray, direction: Direction) -> List[np.ndarray]:
    """Writeable views of every line, each ordered from its leading edge.

    Down and Right are Up and Left on reversed views, so one collapse
    routine covers all four directions.
    """
    if direction == Direction.UP:
        return [board[:, col] for col in range(board.shape[1])]
    elif direction == Direction.DOWN:
        return [board[::-1, col] for col in range(board.shape[1])]
    elif direction == Direction.LEFT:
        return [board[row] for row in range(board.shape[0])]
    elif direction == Direction.RIGHT:
        return [board[row, ::-1] for row in range(board.shape[0])]
    raise ValueError(f"Unknown direction: {direction}")


def apply_move(board: np.ndarray, direction: Direction) -> bool:
    """Slide ``board`` in place. Returns True if any cell changed.

    Lines are collapsed on a scratch copy, so a ``TileOverflowError`` leaves
    ``board`` exactly as it was.
    """
    scratch = board.copy()
    changed = False
    for line in line_views(scratch, direction):
        # every line must collapse, so no short-circuit
        changed |= collapse(line)
    if changed:
        board[...] = scratch
    return changed


def open_slots(board: np.ndarray) -> List[Tuple[int, int]]:
    return [(int(r), int(c)) for r, c in np.argwhere(board == 0)]


def insert_random_tile(
    board: np.ndarray, value: int, rng: Optional[np.random.Generator] = None
) -> bool:
    """Place ``value`` in a uniformly chosen empty cell.

    Returns False, leaving the board untouched, when there is no empty cell.
    """
    slots = open_slots(board)
    if not slots:
        return False
    rng = rng if rng is not None else _default_rng
    row, col = slots[int(rng.integers(len(slots)))]
    board[row, col] = value
    return True


def simulate_move(
    grid: Sequence[Sequence[int]], direction: Union[str, Direction]
) -> Tuple[np.ndarray, bool]:
    next_board = np.array(grid, dtype=np.int64)
    changed = apply_move(next_board, Direction.parse(direction))
    return next_board, changed


def valid_moves(grid: Sequence[Sequence[int]]) -> List[str]:
    allowed: List[str] = []
    for direction in Direction:
        _, changed = simulate_move(grid, direction)
        if changed:
            allowed.append(direction.value)
    return allowed


__all__ = [
    "BOARD_SIZE",
    "DIRECTION_NAMES",
    "Direction",
    "apply_move",
    "insert_random_tile",
    "line_views",
    "new_board",
    "open_slots",
    "simulate_move",
    "valid_moves",
]
