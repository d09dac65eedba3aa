"""Board - piece placement on the 64 cells of an 8x8 checkers board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from checkie.core.enums import Color
from checkie.core.piece import BLACK_MAN, RED_MAN, Cell, Piece
from checkie.core.types import (
    BOARD_CELLS,
    BOARD_SIZE,
    DARK_SQUARES,
    Index,
    is_dark_square,
    row_col,
    row_of,
)


class Board:
    """Immutable 64-cell board value.

    Moves never mutate a board; :meth:`replace` returns a new one.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: tuple[Cell, ...] = (None,) * BOARD_CELLS

    # -- Element access -----------------------------------------------------

    def __getitem__(self, index: Index) -> Cell:
        return self._cells[index]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return BOARD_CELLS

    def is_empty(self, index: Index) -> bool:
        return self._cells[index] is None

    @property
    def cells(self) -> tuple[Cell, ...]:
        return self._cells

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Index]:
        """Indices occupied by *color*, in ascending order."""
        cells = self._cells
        squares: list[Index] = []
        for sq in DARK_SQUARES:
            piece = cells[sq]
            if piece is not None and piece.color == color:
                squares.append(sq)
        return squares

    def count(self, color: Color) -> int:
        return len(self.pieces(color))

    def total_pieces(self) -> int:
        return sum(1 for cell in self._cells if cell is not None)

    # -- Copy-on-write ------------------------------------------------------

    def replace(self, changes: Mapping[Index, Cell]) -> Board:
        """Return a new board with *changes* applied."""
        cells = list(self._cells)
        for sq, cell in changes.items():
            cells[sq] = cell
        return Board._from_trusted(tuple(cells))

    # -- Factory ------------------------------------------------------------

    @classmethod
    def _from_trusted(cls, cells: tuple[Cell, ...]) -> Board:
        b = cls.__new__(cls)
        b._cells = cells
        return b

    @classmethod
    def from_cells(cls, cells: Iterable[Cell]) -> Board:
        """Build a board from 64 row-major cells.

        Raises ``ValueError`` for a wrong length or a piece on a light square.
        """
        cell_tuple = tuple(cells)
        if len(cell_tuple) != BOARD_CELLS:
            raise ValueError(
                f"Board needs {BOARD_CELLS} cells, got {len(cell_tuple)}"
            )
        for sq, cell in enumerate(cell_tuple):
            if cell is None:
                continue
            if not isinstance(cell, Piece):
                raise ValueError(f"Invalid cell at {sq}: {cell!r}")
            if not is_dark_square(*row_col(sq)):
                raise ValueError(f"Piece on light square {sq}")
        return cls._from_trusted(cell_tuple)

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout: Black on rows 0–2, Red on rows 5–7."""
        cells: list[Cell] = [None] * BOARD_CELLS
        for sq in DARK_SQUARES:
            row = row_of(sq)
            if row < 3:
                cells[sq] = BLACK_MAN
            elif row >= BOARD_SIZE - 3:
                cells[sq] = RED_MAN
        return cls._from_trusted(tuple(cells))

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            line = []
            for col in range(BOARD_SIZE):
                p = self._cells[row * BOARD_SIZE + col]
                line.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(line)}")
        rows.append("  0 1 2 3 4 5 6 7")
        return "\n".join(rows)
