"""Tests for Board, Piece and coordinate helpers."""

import pytest

from checkie.core.board import Board
from checkie.core.enums import Color, Rank
from checkie.core.piece import BLACK_MAN, RED_KING, RED_MAN, Piece
from checkie.core.types import (
    DARK_SQUARES,
    col_of,
    index_of,
    is_dark_square,
    is_valid_index,
    row_col,
    row_of,
)


class TestCoordinates:
    def test_index_round_trip_corners(self) -> None:
        assert index_of(0, 0) == 0
        assert index_of(7, 7) == 63
        assert index_of(5, 0) == 40
        assert row_col(40) == (5, 0)
        assert row_of(35) == 4
        assert col_of(35) == 3

    def test_dark_squares(self) -> None:
        assert is_dark_square(0, 1)
        assert is_dark_square(5, 0)
        assert not is_dark_square(0, 0)
        assert not is_dark_square(4, 4)
        assert len(DARK_SQUARES) == 32

    def test_valid_index(self) -> None:
        assert is_valid_index(0)
        assert is_valid_index(63)
        assert not is_valid_index(-1)
        assert not is_valid_index(64)


class TestPiece:
    def test_chars(self) -> None:
        assert str(RED_MAN) == "r"
        assert str(RED_KING) == "R"
        assert str(BLACK_MAN) == "b"
        assert str(Piece(Color.BLACK, Rank.KING)) == "B"

    def test_from_char(self) -> None:
        assert Piece.from_char("R") == RED_KING
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_crowned(self) -> None:
        assert RED_MAN.crowned() == RED_KING
        assert RED_KING.crowned() == RED_KING
        assert not BLACK_MAN.is_king


class TestBoardInitial:
    def test_twelve_men_each(self) -> None:
        board = Board.initial()
        assert board.count(Color.RED) == 12
        assert board.count(Color.BLACK) == 12
        assert board.total_pieces() == 24

    def test_red_on_rows_five_to_seven(self) -> None:
        board = Board.initial()
        for sq in board.pieces(Color.RED):
            row, col = row_col(sq)
            assert 5 <= row <= 7
            assert is_dark_square(row, col)
            assert board[sq] == RED_MAN

    def test_black_on_rows_zero_to_two(self) -> None:
        board = Board.initial()
        for sq in board.pieces(Color.BLACK):
            row, col = row_col(sq)
            assert 0 <= row <= 2
            assert is_dark_square(row, col)
            assert board[sq] == BLACK_MAN

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in range(24, 40):
            assert board[sq] is None

    def test_no_kings(self) -> None:
        board = Board.initial()
        assert not any(cell is not None and cell.is_king for cell in board)

    def test_light_squares_empty(self) -> None:
        board = Board.initial()
        for sq in range(64):
            if not is_dark_square(*row_col(sq)):
                assert board.is_empty(sq)

    def test_known_cells(self) -> None:
        board = Board.initial()
        assert board[1] == BLACK_MAN
        assert board[17] == BLACK_MAN
        assert board[40] == RED_MAN
        assert board[62] == RED_MAN
        assert board[0] is None


class TestBoardOperations:
    def test_replace_is_copy_on_write(self) -> None:
        board = Board.initial()
        moved = board.replace({40: None, 33: RED_MAN})
        assert board[40] == RED_MAN
        assert board[33] is None
        assert moved[40] is None
        assert moved[33] == RED_MAN
        assert board != moved

    def test_equality_and_hash(self) -> None:
        assert Board.initial() == Board.initial()
        assert hash(Board.initial()) == hash(Board.initial())
        assert Board() != Board.initial()

    def test_from_cells_wrong_length(self) -> None:
        with pytest.raises(ValueError, match="64 cells"):
            Board.from_cells([None] * 10)

    def test_from_cells_rejects_light_square(self) -> None:
        cells = [None] * 64
        cells[0] = RED_MAN
        with pytest.raises(ValueError, match="light square"):
            Board.from_cells(cells)

    def test_len_and_iter(self) -> None:
        board = Board.initial()
        assert len(board) == 64
        assert list(board) == list(board.cells)

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert "r" in text
        assert "0 1 2 3 4 5 6 7" in text
