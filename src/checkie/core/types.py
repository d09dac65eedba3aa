"""Index type alias and coordinate helpers.

Board layout (row-major, row 0 at the top):
    (0, 0)=0,  (0, 1)=1,  ..., (0, 7)=7
    (1, 0)=8,  (1, 1)=9,  ..., (1, 7)=15
    ...
    (7, 0)=56, (7, 1)=57, ..., (7, 7)=63

Only dark squares, where ``row + col`` is odd, are ever occupied.
"""

from __future__ import annotations

from typing import TypeAlias

Index: TypeAlias = int  # 0–63

BOARD_SIZE = 8
BOARD_CELLS = BOARD_SIZE * BOARD_SIZE


def row_of(index: Index) -> int:
    """Row 0–7, top to bottom."""
    return index >> 3


def col_of(index: Index) -> int:
    """Column 0–7, left to right."""
    return index & 7


def row_col(index: Index) -> tuple[int, int]:
    return index >> 3, index & 7


def index_of(row: int, col: int) -> Index:
    """Create index from row (0–7) and column (0–7)."""
    return row * BOARD_SIZE + col


def is_on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_dark_square(row: int, col: int) -> bool:
    return (row + col) % 2 == 1


def is_valid_index(index: int) -> bool:
    """Check whether integer is a valid cell index."""
    return 0 <= index < BOARD_CELLS


DARK_SQUARES: tuple[Index, ...] = tuple(
    index_of(r, c)
    for r in range(BOARD_SIZE)
    for c in range(BOARD_SIZE)
    if is_dark_square(r, c)
)
