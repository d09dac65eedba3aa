"""High-level rules: applying moves, jump continuation, game-over detection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move_generator import MoveGenerator
from checkie.core.piece import Cell
from checkie.core.types import Index, row_of


@dataclass(frozen=True, slots=True)
class AppliedMove:
    """Board produced by :func:`apply_move`."""

    board: Board
    promoted: bool


@dataclass(frozen=True, slots=True)
class GameOutcome:
    game_over: bool
    winner: Color | None = None


_IN_PROGRESS = GameOutcome(game_over=False)


def apply_move(
    board: Board,
    from_sq: Index,
    to_sq: Index,
    captures: Iterable[Index] = (),
) -> AppliedMove:
    """Relocate the piece, clear captured cells and crown if needed.

    Caller is responsible for validation; *board* is left untouched.
    """
    piece = board[from_sq]
    if piece is None:
        raise ValueError(f"No piece at {from_sq}")

    promoted = not piece.is_king and row_of(to_sq) == piece.color.promotion_row
    changes: dict[Index, Cell] = {sq: None for sq in captures}
    changes[from_sq] = None
    changes[to_sq] = piece.crowned() if promoted else piece
    return AppliedMove(board.replace(changes), promoted)


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def can_continue_jump(board: Board, position: Index) -> bool:
        """Whether the piece on *position* has another capture available."""
        if board[position] is None:
            return False
        return bool(MoveGenerator(board).captures_from(position))

    @staticmethod
    def game_outcome(board: Board, to_move: Color) -> GameOutcome:
        """Decide whether the side about to move has lost.

        A side with no pieces, or with pieces none of which can move, loses.
        Stalemate is a win for the side that caused it, never a draw.
        """
        if MoveGenerator(board).has_any_legal_move(to_move):
            return _IN_PROGRESS
        return GameOutcome(game_over=True, winner=to_move.opposite)

    @staticmethod
    def is_game_over(board: Board, to_move: Color) -> bool:
        return Rules.game_outcome(board, to_move).game_over
