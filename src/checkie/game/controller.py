"""GameController — the central orchestrator of a checkers match.

Coordinates: Players, GameState, MoveGenerator.
Emits events via simple callbacks so the session layer / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import Color, GamePhase
from checkie.core.types import Index
from checkie.game.interfaces import IGameController, IPlayer
from checkie.game.outcome import MoveAccepted, MoveOutcome, MoveRejected
from checkie.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, MoveAccepted, "GameState"], None]
RejectedCallback = Callable[[MoveRejected], None]
GameOverCallback = Callable[[Color], None]  # winner
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full match: validates moves, keeps the turn on a
    pending multi-jump, detects the end of the game, notifies listeners.

    Thread-safety: not thread-safe.  All calls for one match must be
    serialised by the owner (see ``MatchRegistry``).
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        if self._state.is_game_over:
            return None
        return self._players.get(self._state.current_turn)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        red: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        turn: Color = Color.RED,
    ) -> None:
        self._players = {Color.RED: red, Color.BLACK: black}
        self._state = GameState()
        self._state.setup(board, turn)

        if self._state.is_game_over:
            self._emit_game_over()
            return
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()

    def submit_move(self, from_sq: int, to_sq: int) -> MoveOutcome:
        mover = self._state.current_turn
        outcome = self._state.play(from_sq, to_sq)

        if isinstance(outcome, MoveRejected):
            _LOGGER.info(
                "Rejected %s move %s->%s: %s", mover, from_sq, to_sq, outcome.reason
            )
            for cb in self.events.on_rejected:
                cb(outcome)
            return outcome

        record = self._state.move_history[-1]
        _LOGGER.debug("Accepted %s move %s", mover, record.move)
        for cb in self.events.on_move:
            cb(record, outcome, self._state)

        if outcome.game_over:
            self._emit_game_over()
            return outcome

        self._prompt_current_player()
        return outcome

    def forfeit(self, color: Color) -> None:
        if self._state.is_game_over:
            return
        cp = self.current_player
        if cp is not None and not cp.is_human:
            cp.cancel()
        self._state.forfeit(color)
        _LOGGER.info("%s forfeited", color)
        self._emit_game_over()

    def legal_moves(self, position: Index) -> set[Index]:
        """Destinations for the piece on *position* (for UI highlighting)."""
        return self._state.legal_moves(position)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None or cp.is_human:
            return
        cp.request_move(self._state)

    def _emit_game_over(self) -> None:
        winner = self._state.winner
        if winner is None:
            return
        _LOGGER.info("Game over: %s wins", winner)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(winner)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
