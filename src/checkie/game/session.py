"""MatchRegistry — entry point for the transport layer.

Maps match ids to controllers and serialises every submission for a given
match behind that match's lock, so two messages for the same match never
reach the engine concurrently.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from checkie.core.board import Board
from checkie.core.enums import Color, MoveError
from checkie.core.types import Index
from checkie.engine.random_engine import RandomMoveEngine
from checkie.engine.search import PracticeSettings
from checkie.game.controller import GameController
from checkie.game.interfaces import IPlayer
from checkie.game.outcome import MoveOutcome, MoveRejected
from checkie.game.player import HumanPlayer, PracticePlayer

_LOGGER = logging.getLogger(__name__)


@dataclass
class _Match:
    controller: GameController
    lock: threading.Lock = field(default_factory=threading.Lock)


class MatchRegistry:
    """Thread-safe registry of running matches."""

    __slots__ = ("_matches", "_lock")

    def __init__(self) -> None:
        self._matches: dict[str, _Match] = {}
        self._lock = threading.Lock()

    # ── Lifecycle ────────────────────────────────────────────────────────

    def create_match(
        self,
        match_id: str,
        red: IPlayer | None = None,
        black: IPlayer | None = None,
        board: Board | None = None,
        turn: Color = Color.RED,
        *,
        practice: Color | None = None,
        seed: int | None = None,
    ) -> GameController:
        """Start a match. Raises ``ValueError`` if *match_id* is taken.

        *practice* seats a random practice opponent (seeded with *seed*) on
        that color instead of *red* / *black*.  The match becomes visible to
        other callers only once setup, including any opening reply from the
        practice opponent, has completed.
        """
        with self._lock:
            self._ensure_free(match_id)

        controller = GameController()
        players: dict[Color, IPlayer] = {
            Color.RED: red or HumanPlayer(Color.RED),
            Color.BLACK: black or HumanPlayer(Color.BLACK),
        }
        if practice is not None:
            players[practice] = PracticePlayer(
                practice,
                controller.submit_move,
                RandomMoveEngine(PracticeSettings(seed=seed)),
            )
        controller.new_game(
            players[Color.RED], players[Color.BLACK], board=board, turn=turn
        )

        with self._lock:
            self._ensure_free(match_id)
            self._matches[match_id] = _Match(controller)
        _LOGGER.info("Created match %s", match_id)
        return controller

    def remove(self, match_id: str) -> bool:
        """Drop a match (finished or abandoned). Returns True if it existed."""
        with self._lock:
            removed = self._matches.pop(match_id, None) is not None
        if removed:
            _LOGGER.info("Removed match %s", match_id)
        return removed

    def get(self, match_id: str) -> GameController | None:
        entry = self._lookup(match_id)
        return entry.controller if entry is not None else None

    def match_ids(self) -> list[str]:
        with self._lock:
            return list(self._matches)

    def __len__(self) -> int:
        with self._lock:
            return len(self._matches)

    def __contains__(self, match_id: object) -> bool:
        with self._lock:
            return match_id in self._matches

    # ── Per-match operations ─────────────────────────────────────────────

    def make_move(self, match_id: str, from_sq: int, to_sq: int) -> MoveOutcome:
        """Submit a move for the side to move in *match_id*."""
        entry = self._lookup(match_id)
        if entry is None:
            _LOGGER.info("Move for unknown match %s", match_id)
            return MoveRejected(MoveError.MATCH_NOT_FOUND)
        with entry.lock:
            return entry.controller.submit_move(from_sq, to_sq)

    def forfeit(self, match_id: str, color: Color) -> bool:
        """Player of *color* abandons *match_id*. Returns False if unknown."""
        entry = self._lookup(match_id)
        if entry is None:
            return False
        with entry.lock:
            entry.controller.forfeit(color)
        return True

    def legal_moves(self, match_id: str, position: Index) -> set[Index]:
        entry = self._lookup(match_id)
        if entry is None:
            return set()
        with entry.lock:
            return entry.controller.legal_moves(position)

    # ── Internal ─────────────────────────────────────────────────────────

    def _ensure_free(self, match_id: str) -> None:
        """Caller holds the registry lock."""
        if match_id in self._matches:
            raise ValueError(f"Match already exists: {match_id!r}")

    def _lookup(self, match_id: str) -> _Match | None:
        with self._lock:
            return self._matches.get(match_id)
