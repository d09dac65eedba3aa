"""Shared engine models and protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from checkie.core.move import Move
    from checkie.game.state import GameState

CancelCheck = Callable[[], bool]


@dataclass(slots=True, frozen=True)
class PracticeSettings:
    """Configuration of the offline practice opponent."""

    seed: int | None = None


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by an engine."""

    best_move: Move | None
    candidates: int


class IEngine(Protocol):
    """Protocol for move pickers used by the game layer."""

    def search(
        self,
        state: GameState,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult: ...
