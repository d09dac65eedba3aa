"""Tests for MoveGenerator."""

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.notation import board_from_text


def _board(*rows: str) -> Board:
    return board_from_text("/".join(rows))


EMPTY = "........"


class TestInitialPosition:
    def test_red_moves(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.legal_moves(40, Color.RED) == {33}
        assert gen.legal_moves(42, Color.RED) == {33, 35}
        assert gen.legal_moves(46, Color.RED) == {37, 39}
        assert gen.legal_moves(49, Color.RED) == set()  # blocked

    def test_black_moves(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.legal_moves(17, Color.BLACK) == {24, 26}
        assert gen.legal_moves(23, Color.BLACK) == {30}

    def test_wrong_color_or_empty(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert gen.legal_moves(17, Color.RED) == set()
        assert gen.legal_moves(32, Color.RED) == set()

    def test_generate_moves_count(self) -> None:
        gen = MoveGenerator(Board.initial())
        assert len(gen.generate_moves(Color.RED)) == 7
        assert len(gen.generate_moves(Color.BLACK)) == 7
        assert not gen.has_any_capture(Color.RED)


class TestManCaptures:
    def test_forward_capture_only(self) -> None:
        # Black man (2,1), red man (3,2), (4,3) empty.
        board = _board(EMPTY, EMPTY, ".b......", "..r.....", EMPTY, EMPTY, EMPTY, EMPTY)
        gen = MoveGenerator(board)
        assert gen.legal_moves(17, Color.BLACK) == {35}
        assert gen.captures_from(17) == {35}
        assert gen.has_any_capture(Color.BLACK)
        assert gen.capturing_pieces(Color.BLACK) == {17}

    def test_capture_overrides_regular_moves(self) -> None:
        board = _board(EMPTY, EMPTY, ".b......", "..r.....", EMPTY, EMPTY, EMPTY, EMPTY)
        assert 24 not in MoveGenerator(board).legal_moves(17, Color.BLACK)

    def test_men_never_capture_backward(self) -> None:
        # Red man (4,3) with a black man behind it at (5,4), (6,5) empty.
        board = _board(EMPTY, EMPTY, EMPTY, EMPTY, "...r....", "....b...", EMPTY, EMPTY)
        gen = MoveGenerator(board)
        assert gen.legal_moves(35, Color.RED) == {26, 28}
        assert not gen.has_any_capture(Color.RED)

    def test_landing_must_be_empty(self) -> None:
        board = _board(EMPTY, EMPTY, ".b......", "..r.....", "...r....", EMPTY, EMPTY, EMPTY)
        gen = MoveGenerator(board)
        assert gen.captures_from(17) == set()
        assert gen.legal_moves(17, Color.BLACK) == {24}

    def test_no_capture_off_board(self) -> None:
        # Black man (2,1), red man (3,0): jump would land at (4,-1).
        board = _board(EMPTY, EMPTY, ".b......", "r.......", EMPTY, EMPTY, EMPTY, EMPTY)
        gen = MoveGenerator(board)
        assert gen.captures_from(17) == set()
        assert gen.legal_moves(17, Color.BLACK) == {26}

    def test_own_piece_not_capturable(self) -> None:
        board = _board(EMPTY, EMPTY, ".b......", "..b.....", EMPTY, EMPTY, EMPTY, EMPTY)
        assert MoveGenerator(board).captures_from(17) == set()


class TestKingMoves:
    def test_king_slides_until_blocked(self) -> None:
        # Red king (4,3), black man far away at (0,7).
        board = _board(".......b", EMPTY, EMPTY, EMPTY, "...R....", EMPTY, EMPTY, EMPTY)
        moves = MoveGenerator(board).legal_moves(35, Color.RED)
        assert moves == {26, 17, 8, 28, 21, 14, 42, 49, 56, 44, 53, 62}

    def test_king_long_range_capture(self) -> None:
        # Red king (7,0), black man (4,3), landing (3,4).
        board = _board(EMPTY, EMPTY, EMPTY, EMPTY, "...b....", EMPTY, EMPTY, "R.......")
        gen = MoveGenerator(board)
        assert gen.legal_moves(56, Color.RED) == {28}
        assert gen.capturing_pieces(Color.RED) == {56}

    def test_king_ray_stops_at_first_piece(self) -> None:
        # Two black men back to back: no capture along that ray.
        board = _board(EMPTY, EMPTY, EMPTY, EMPTY, "...b....", "..b.....", EMPTY, "R.......")
        gen = MoveGenerator(board)
        assert gen.captures_from(56) == set()
        assert gen.legal_moves(56, Color.RED) == {49}

    def test_king_blocked_by_own_piece(self) -> None:
        board = _board(EMPTY, EMPTY, EMPTY, EMPTY, "...b....", "..r.....", EMPTY, "R.......")
        gen = MoveGenerator(board)
        assert gen.captures_from(56) == set()
        assert gen.legal_moves(56, Color.RED) == {49}

    def test_king_captures_backward(self) -> None:
        # Black king (2,3), red man (3,4) ahead and red man (1,2) behind.
        board = _board(EMPTY, "..r.....", "...B....", "....r...", EMPTY, EMPTY, EMPTY, EMPTY)
        assert MoveGenerator(board).legal_moves(19, Color.BLACK) == {1, 37}


class TestGenerateMoves:
    def test_mandatory_capture_filters_other_pieces(self) -> None:
        board = _board(
            EMPTY, "......b.", ".b......", "..r.....", EMPTY, EMPTY, EMPTY, "r......."
        )
        moves = MoveGenerator(board).generate_moves(Color.BLACK)
        assert moves == [Move(17, 35, (26,))]

    def test_continuation_restricts_to_piece(self) -> None:
        # Black man (4,3) mid-jump; another black man (2,1) also has a jump.
        board = _board(
            EMPTY, EMPTY, ".b......", "..r.....", "...b....", "....r...", EMPTY, EMPTY
        )
        moves = MoveGenerator(board).generate_moves(Color.BLACK, must_continue_from=35)
        assert moves == [Move(35, 53, (44,))]

    def test_has_any_legal_move_when_blocked(self) -> None:
        board = _board(EMPTY, EMPTY, ".b......", "r.r.....", "...r....", EMPTY, EMPTY, EMPTY)
        gen = MoveGenerator(board)
        assert not gen.has_any_legal_move(Color.BLACK)
        assert gen.has_any_legal_move(Color.RED)
