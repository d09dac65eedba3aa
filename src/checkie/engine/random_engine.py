"""Uniformly random legal-move picker for offline practice."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from checkie.engine.search import CancelCheck, IEngine, PracticeSettings, SearchResult

if TYPE_CHECKING:
    from checkie.game.state import GameState


class RandomMoveEngine(IEngine):
    """Picks one of the currently accepted moves with equal probability.

    Honours the mandatory-capture rule and a pending multi-jump, because it
    draws from the same move list the validator accepts.
    """

    __slots__ = ("_rng", "_settings")

    def __init__(self, settings: PracticeSettings | None = None) -> None:
        self._settings = settings or PracticeSettings()
        self._rng = random.Random(self._settings.seed)

    @property
    def settings(self) -> PracticeSettings:
        return self._settings

    def search(
        self,
        state: GameState,
        is_cancelled: CancelCheck | None = None,
    ) -> SearchResult:
        moves = state.generate_moves()
        if not moves or (is_cancelled is not None and is_cancelled()):
            return SearchResult(best_move=None, candidates=len(moves))
        return SearchResult(best_move=self._rng.choice(moves), candidates=len(moves))
