"""Core domain layer — pure checkers rules with zero external dependencies.

Quick start::

    from checkie.core import Board, Color, MoveGenerator, validate_move

    board = Board.initial()
    gen = MoveGenerator(board)
    print(gen.legal_moves(40, Color.RED))
    print(validate_move(board, 40, 33, Color.RED))
"""

from checkie.core.board import Board
from checkie.core.enums import Color, GamePhase, MoveError, Rank
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.notation import (
    INITIAL_LAYOUT,
    board_from_cells,
    board_from_text,
    board_to_cells,
    board_to_text,
)
from checkie.core.piece import Cell, Piece
from checkie.core.rules import AppliedMove, GameOutcome, Rules, apply_move
from checkie.core.types import (
    BOARD_CELLS,
    BOARD_SIZE,
    Index,
    col_of,
    index_of,
    is_dark_square,
    is_valid_index,
    row_col,
    row_of,
)
from checkie.core.validation import ValidationResult, validate_move

__all__ = [
    # Enums
    "Color",
    "GamePhase",
    "MoveError",
    "Rank",
    # Types / helpers
    "BOARD_CELLS",
    "BOARD_SIZE",
    "Cell",
    "Index",
    "col_of",
    "index_of",
    "is_dark_square",
    "is_valid_index",
    "row_col",
    "row_of",
    # Domain objects
    "AppliedMove",
    "Board",
    "GameOutcome",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "ValidationResult",
    "apply_move",
    "validate_move",
    # Notation
    "INITIAL_LAYOUT",
    "board_from_cells",
    "board_from_text",
    "board_to_cells",
    "board_to_text",
]
