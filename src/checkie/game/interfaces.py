"""Abstract interfaces for the game layer.

Follows Dependency Inversion: high-level GameController depends on
these ABCs, not on concrete Player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from checkie.core.enums import Color

if TYPE_CHECKING:
    from checkie.core.board import Board
    from checkie.game.outcome import MoveOutcome
    from checkie.game.state import GameState


class IPlayer(ABC):
    """Interface for a match participant (human or practice engine)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, state: GameState) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (moves arrive from the transport).
        For the practice engine this kicks off move selection.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an ongoing move computation (engine only, no-op for human)."""


class IGameController(ABC):
    """Interface for the match orchestrator."""

    @abstractmethod
    def new_game(
        self,
        red: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        turn: Color = Color.RED,
    ) -> None:
        """Set up a new match."""

    @abstractmethod
    def submit_move(self, from_sq: int, to_sq: int) -> MoveOutcome:
        """Submit a move for the side to move."""

    @abstractmethod
    def forfeit(self, color: Color) -> None:
        """Player of *color* abandons the match."""
