"""Board serialisation: the wire cell list and a compact text layout.

Wire form: 64 row-major entries, each ``"r" | "R" | "b" | "B" | None``.

Text form: eight ``/``-separated rows from row 0 to row 7, one character
per cell, ``.`` for an empty cell, e.g. the initial layout::

    .b.b.b.b/b.b.b.b./.b.b.b.b/......../......../r.r.r.r./.r.r.r.r/r.r.r.r.
"""

from __future__ import annotations

from collections.abc import Iterable

from checkie.core.board import Board
from checkie.core.piece import Cell, Piece
from checkie.core.types import BOARD_SIZE

INITIAL_LAYOUT = (
    ".b.b.b.b/b.b.b.b./.b.b.b.b/......../"
    "......../r.r.r.r./.r.r.r.r/r.r.r.r."
)

_EMPTY = "."


def board_to_cells(board: Board) -> list[str | None]:
    """Wire representation of *board*."""
    return [str(cell) if cell is not None else None for cell in board]


def board_from_cells(cells: Iterable[str | None]) -> Board:
    """Parse the wire representation. Raises ``ValueError`` on bad input."""
    parsed: list[Cell] = []
    for entry in cells:
        parsed.append(None if entry is None else Piece.from_char(entry))
    return Board.from_cells(parsed)


def board_from_text(text: str) -> Board:
    """Parse the compact text layout into a :class:`Board`."""
    rows = text.strip().split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid board text (must contain 8 rows): {text!r}")

    cells: list[Cell] = []
    for row_text in rows:
        if len(row_text) != BOARD_SIZE:
            raise ValueError(f"Invalid board text row width: {row_text!r}")
        for ch in row_text:
            cells.append(None if ch == _EMPTY else Piece.from_char(ch))
    return Board.from_cells(cells)


def board_to_text(board: Board) -> str:
    """Serialise a :class:`Board` to the compact text layout."""
    chars = [str(cell) if cell is not None else _EMPTY for cell in board]
    return "/".join(
        "".join(chars[row * BOARD_SIZE : (row + 1) * BOARD_SIZE])
        for row in range(BOARD_SIZE)
    )
