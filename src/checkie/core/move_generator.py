"""Per-piece move generation and mandatory-capture detection."""

from __future__ import annotations

from checkie.core.board import Board
from checkie.core.enums import Color
from checkie.core.move import Move
from checkie.core.types import BOARD_CELLS, Index, index_of, is_on_board, row_col

# (row delta, col delta); men use only the two whose row delta is forward.
DIAGONALS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


# -- Precomputed lookup tables ---------------------------------------------


def _build_rays() -> tuple[tuple[tuple[Index, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Index, ...], ...]] = []
    for sq in range(BOARD_CELLS):
        row, col = row_col(sq)
        square_rays: list[tuple[Index, ...]] = []
        for dr, dc in DIAGONALS:
            r = row + dr
            c = col + dc
            ray: list[Index] = []
            while is_on_board(r, c):
                ray.append(index_of(r, c))
                r += dr
                c += dc
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_RAYS = _build_rays()

# Indices into DIAGONALS of each color's forward directions.
_FORWARD_DIRS: dict[Color, tuple[int, ...]] = {
    color: tuple(i for i, (dr, _) in enumerate(DIAGONALS) if dr == color.forward)
    for color in Color
}


class MoveGenerator:
    """Generates moves for pieces on a :class:`Board`.

    Nothing is cached: every query rescans the board, which holds at most
    24 pieces.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    @property
    def board(self) -> Board:
        return self._board

    # -- Per-piece queries --------------------------------------------------

    def legal_moves(self, position: Index, turn: Color) -> set[Index]:
        """Destinations for the piece on *position* if it belongs to *turn*.

        Captures take priority: when the piece can jump, only jump landings
        are returned.
        """
        piece = self._board[position]
        if piece is None or piece.color != turn:
            return set()
        captures = self.captures_from(position)
        if captures:
            return captures
        return self._steps_from(position)

    def captures_from(self, position: Index) -> set[Index]:
        """Jump landings available to the piece on *position*."""
        return {landing for landing, _ in self._capture_pairs(position)}

    # -- Whole-side queries -------------------------------------------------

    def capturing_pieces(self, color: Color) -> set[Index]:
        """Positions of *color*'s pieces that have a capture available."""
        return {sq for sq in self._board.pieces(color) if self._capture_pairs(sq)}

    def has_any_capture(self, color: Color) -> bool:
        return any(self._capture_pairs(sq) for sq in self._board.pieces(color))

    def has_any_legal_move(self, color: Color) -> bool:
        return any(self.legal_moves(sq, color) for sq in self._board.pieces(color))

    def generate_moves(
        self, color: Color, must_continue_from: Index | None = None
    ) -> list[Move]:
        """Every move the validator accepts for *color* in this position.

        Applies the continuation constraint and the mandatory-capture rule
        across the whole board.
        """
        if must_continue_from is not None:
            return [
                Move(must_continue_from, landing, (jumped,))
                for landing, jumped in self._capture_pairs(must_continue_from)
            ]

        moves: list[Move] = []
        pieces = self._board.pieces(color)
        for sq in pieces:
            for landing, jumped in self._capture_pairs(sq):
                moves.append(Move(sq, landing, (jumped,)))
        if moves:
            return moves

        for sq in pieces:
            for to_sq in sorted(self._steps_from(sq)):
                moves.append(Move(sq, to_sq))
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _capture_pairs(self, sq: Index) -> list[tuple[Index, Index]]:
        """(landing, jumped) pairs for the piece on *sq*."""
        board = self._board
        piece = board[sq]
        if piece is None:
            return []

        pairs: list[tuple[Index, Index]] = []
        rays = _RAYS[sq]
        if piece.is_king:
            for ray in rays:
                for i, target_sq in enumerate(ray):
                    target = board[target_sq]
                    if target is None:
                        continue
                    if target.color != piece.color and i + 1 < len(ray):
                        landing = ray[i + 1]
                        if board[landing] is None:
                            pairs.append((landing, target_sq))
                    break
        else:
            for d in _FORWARD_DIRS[piece.color]:
                ray = rays[d]
                if len(ray) < 2:
                    continue
                target = board[ray[0]]
                if (
                    target is not None
                    and target.color != piece.color
                    and board[ray[1]] is None
                ):
                    pairs.append((ray[1], ray[0]))
        return pairs

    def _steps_from(self, sq: Index) -> set[Index]:
        """Non-capturing destinations for the piece on *sq*."""
        board = self._board
        piece = board[sq]
        if piece is None:
            return set()

        steps: set[Index] = set()
        rays = _RAYS[sq]
        if piece.is_king:
            for ray in rays:
                for to_sq in ray:
                    if board[to_sq] is not None:
                        break
                    steps.add(to_sq)
        else:
            for d in _FORWARD_DIRS[piece.color]:
                ray = rays[d]
                if ray and board[ray[0]] is None:
                    steps.add(ray[0])
        return steps
