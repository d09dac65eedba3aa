"""Game state machine — turn passing, jump continuation and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import Color, GamePhase, MoveError
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.core.rules import Rules, apply_move
from checkie.core.types import Index
from checkie.core.validation import validate_move
from checkie.game.outcome import MoveAccepted, MoveOutcome, MoveRejected


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    color: Color
    move: Move
    promoted: bool = False
    continues: bool = False


@dataclass
class GameState:
    """Owns one match: board, side to move, continuation and result.

    This is a pure data/logic class — no threading, no I/O. Callers must
    serialise access per match.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    current_turn: Color = field(default=Color.RED, init=False)
    winner: Color | None = field(default=None, init=False)
    must_continue_from: Index | None = field(default=None, init=False)
    phase: GamePhase = field(default=GamePhase.AWAITING_MOVE, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, turn: Color = Color.RED) -> None:
        """Initialise (or reset) the match, optionally from a custom board."""
        self.board = board if board is not None else Board.initial()
        self.current_turn = turn
        self.winner = None
        self.must_continue_from = None
        self.phase = GamePhase.AWAITING_MOVE
        self.move_history.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def play(self, from_sq: int, to_sq: int) -> MoveOutcome:
        """Validate and, if legal, apply a move for the side to move.

        On rejection nothing changes.
        """
        if self.is_game_over:
            return MoveRejected(MoveError.MATCH_ALREADY_OVER)

        mover = self.current_turn
        result = validate_move(
            self.board, from_sq, to_sq, mover, self.must_continue_from
        )
        if result.error is not None:
            return MoveRejected(result.error)

        applied = apply_move(self.board, from_sq, to_sq, result.captures)
        self.board = applied.board

        continues = result.is_capture and Rules.can_continue_jump(self.board, to_sq)
        if continues:
            self.must_continue_from = to_sq
        else:
            self.must_continue_from = None
            self.current_turn = mover.opposite
            self._check_game_over()

        self.move_history.append(
            MoveRecord(
                color=mover,
                move=Move(from_sq, to_sq, result.captures),
                promoted=applied.promoted,
                continues=continues,
            )
        )
        return MoveAccepted(
            board=self.board,
            next_turn=self.current_turn,
            must_continue_from=self.must_continue_from,
            game_over=self.is_game_over,
            winner=self.winner,
            captures=result.captures,
            promoted=applied.promoted,
        )

    # ── Resignation ──────────────────────────────────────────────────────

    def forfeit(self, color: Color) -> None:
        """Player of *color* abandons the match; the opponent wins."""
        if self.is_game_over:
            return
        self._finish(color.opposite)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def move_count(self) -> int:
        """Number of accepted moves; each jump of a multi-jump counts."""
        return len(self.move_history)

    @property
    def last_move(self) -> Move | None:
        if not self.move_history:
            return None
        return self.move_history[-1].move

    def captures_by(self, color: Color) -> int:
        """Number of opponent pieces *color* has taken so far."""
        return sum(
            len(record.move.captures)
            for record in self.move_history
            if record.color == color
        )

    def legal_moves(self, position: Index) -> set[Index]:
        """Destinations for the piece on *position*, for UI highlighting."""
        if self.is_game_over:
            return set()
        if self.must_continue_from is not None and position != self.must_continue_from:
            return set()
        return MoveGenerator(self.board).legal_moves(position, self.current_turn)

    def generate_moves(self) -> list[Move]:
        """Every move currently accepted for the side to move."""
        if self.is_game_over:
            return []
        gen = MoveGenerator(self.board)
        return gen.generate_moves(self.current_turn, self.must_continue_from)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        outcome = Rules.game_outcome(self.board, self.current_turn)
        if outcome.game_over and outcome.winner is not None:
            self._finish(outcome.winner)

    def _finish(self, winner: Color) -> None:
        self.winner = winner
        self.must_continue_from = None
        self.phase = GamePhase.GAME_OVER
