"""Validation of a single proposed move against the rules."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.board import Board
from checkie.core.enums import Color, MoveError
from checkie.core.move_generator import MoveGenerator
from checkie.core.types import Index, index_of, is_valid_index, row_col


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of :func:`validate_move`.

    ``error`` is ``None`` for a legal move; ``captures`` then holds the cell
    emptied by a jump (zero or one entries).
    """

    error: MoveError | None = None
    captures: tuple[Index, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def is_capture(self) -> bool:
        return bool(self.captures)

    @classmethod
    def reject(cls, error: MoveError) -> ValidationResult:
        return cls(error=error)


def _path(from_sq: Index, to_sq: Index) -> list[Index]:
    """Cells strictly between two squares on the same diagonal."""
    fr, fc = row_col(from_sq)
    tr, tc = row_col(to_sq)
    step_r = 1 if tr > fr else -1
    step_c = 1 if tc > fc else -1
    return [index_of(fr + k * step_r, fc + k * step_c) for k in range(1, abs(tr - fr))]


def validate_move(
    board: Board,
    from_sq: int,
    to_sq: int,
    turn: Color,
    must_continue_from: Index | None = None,
) -> ValidationResult:
    """Check ``from_sq -> to_sq`` for the side *turn*.

    Checks run in a fixed order and the first failure is reported.
    Rule violations are returned, never raised.
    """
    if not (is_valid_index(from_sq) and is_valid_index(to_sq)):
        return ValidationResult.reject(MoveError.INVALID_POSITION)

    piece = board[from_sq]
    if piece is None or piece.color != turn:
        return ValidationResult.reject(MoveError.NOT_YOUR_PIECE)

    if must_continue_from is not None and from_sq != must_continue_from:
        return ValidationResult.reject(MoveError.WRONG_CONTINUATION)

    if board[to_sq] is not None:
        return ValidationResult.reject(MoveError.OCCUPIED_DESTINATION)

    fr, fc = row_col(from_sq)
    tr, tc = row_col(to_sq)
    d_row = tr - fr
    if abs(d_row) != abs(tc - fc):
        return ValidationResult.reject(MoveError.NON_DIAGONAL_MOVE)

    path = _path(from_sq, to_sq)
    if piece.is_king:
        occupied = [sq for sq in path if board[sq] is not None]
        if occupied:
            first = board[occupied[0]]
            # The ray stops at the first piece; only the cell right behind
            # an opponent is reachable.
            if first is None or first.color == turn or occupied[0] != path[-1]:
                return ValidationResult.reject(MoveError.PATH_BLOCKED)
        is_capture = bool(occupied)
    else:
        distance = abs(d_row)
        if distance > 2 or d_row != distance * turn.forward:
            return ValidationResult.reject(MoveError.INVALID_DISTANCE)
        is_capture = distance == 2

    if not is_capture:
        if must_continue_from is not None:
            return ValidationResult.reject(MoveError.MANDATORY_CAPTURE_VIOLATION)
        if MoveGenerator(board).has_any_capture(turn):
            return ValidationResult.reject(MoveError.MANDATORY_CAPTURE_VIOLATION)
        return ValidationResult()

    captured: list[Index] = []
    for sq in path:
        target = board[sq]
        if target is not None and target.color != turn:
            captured.append(sq)
    if not captured:
        return ValidationResult.reject(MoveError.NO_CAPTURE_TARGET)
    if len(captured) > 1:
        return ValidationResult.reject(MoveError.AMBIGUOUS_CAPTURE)
    return ValidationResult(captures=(captured[0],))
