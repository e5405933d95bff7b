"""Single-line slide and merge used by every board move."""

from typing import MutableSequence, Optional

import numpy as np


class TileOverflowError(OverflowError):
    """Raised when a merge would not fit in the board's integer type."""


def _merge_ceiling(line: MutableSequence[int]) -> Optional[int]:
    dtype = getattr(line, "dtype", None)
    if dtype is not None and np.issubdtype(dtype, np.integer):
        return int(np.iinfo(dtype).max)
    return None


def collapse(line: MutableSequence[int]) -> bool:
    """Slide ``line`` toward index 0 in place, merging each tile at most once.

    ``cursor`` marks the last position that may still take a value. A tile
    moved into an empty cursor is not locked yet, so a later equal tile can
    still merge into it; a merged tile is locked by advancing past it.

    Returns True if any cell changed.
    """
    ceiling = _merge_ceiling(line)
    changed = False
    cursor = 0
    for i in range(1, len(line)):
        value = line[i]
        if value == 0:
            continue
        if line[cursor] == value:
            if ceiling is not None and value > ceiling // 2:
                raise TileOverflowError(
                    f"Merging two {value} tiles exceeds the tile ceiling {ceiling}"
                )
            line[cursor] = value * 2
            line[i] = 0
            cursor += 1
            changed = True
        elif line[cursor] == 0:
            line[cursor] = value
            line[i] = 0
            changed = True
        elif cursor + 1 == i:
            cursor = i
        else:
            cursor += 1
            line[cursor] = value
            line[i] = 0
            changed = True
    return changed


__all__ = ["TileOverflowError", "collapse"]
