"""Qt bridge to run the practice engine in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from checkie.engine.random_engine import RandomMoveEngine
from checkie.engine.search import IEngine, PracticeSettings
from checkie.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that picks practice moves on demand."""

    move_ready = pyqtSignal(int, object)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine")

    def __init__(self, *, seed: int | None = None) -> None:
        super().__init__()
        self._engine: IEngine = RandomMoveEngine(PracticeSettings(seed=seed))
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int)
    def request_move(self, state_obj: object, request_id: int) -> None:
        """Pick a move for the side to move in *state_obj* and emit it."""
        if not isinstance(state_obj, GameState):
            self.search_error.emit(request_id, "Engine received invalid game state")
            return

        self._cancel_event.clear()
        try:
            result = self._engine.search(
                state_obj,
                is_cancelled=self._cancel_event.is_set,
            )
        except Exception as exc:
            _LOGGER.exception("Practice engine failed for request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id)
            return

        self.move_ready.emit(request_id, result.best_move)

    @pyqtSlot()
    def cancel(self) -> None:
        """Request cancellation of the current pick."""
        self._cancel_event.set()
