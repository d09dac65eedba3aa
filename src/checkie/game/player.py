"""Match participants: a remote human and the offline practice opponent."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from checkie.core.enums import Color
from checkie.core.types import Index
from checkie.engine.random_engine import RandomMoveEngine
from checkie.game.interfaces import IPlayer

if TYPE_CHECKING:
    from checkie.engine.search import IEngine
    from checkie.game.outcome import MoveOutcome
    from checkie.game.state import GameState

_LOGGER = logging.getLogger(__name__)

SubmitMove = Callable[[Index, Index], "MoveOutcome"]


class HumanPlayer(IPlayer):
    """A client connected through the transport; it submits its own moves."""

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, state: GameState) -> None:
        pass

    def cancel(self) -> None:
        pass


class PracticePlayer(IPlayer):
    """Offline opponent that answers each prompt with an engine pick.

    When prompted, the player runs its engine on the current state and hands
    the chosen squares to *submit*.  A pending multi-jump is finished the same
    way: the controller prompts the player again after every jump that keeps
    the turn.

    *submit* runs while the caller that triggered the prompt is still inside
    the controller, so it must be ``GameController.submit_move`` itself and
    never ``MatchRegistry.make_move``, whose per-match lock is already held.

    To pick moves elsewhere (for example on an ``EngineWorker`` in a
    ``QThread``), pass *on_request_move* instead; the engine is then
    bypassed and the bridge submits the reply when it arrives.

    Args:
        color: Side the practice opponent plays.
        submit: ``(from_sq, to_sq) -> MoveOutcome`` used for synchronous play.
        engine: Move picker; a fresh ``RandomMoveEngine`` by default.
        name: Display name.
        on_request_move: ``(GameState) -> None`` bridge for asynchronous play.
        on_cancel: ``() -> None`` called to abort a pending bridge request.
    """

    __slots__ = (
        "_color",
        "_name",
        "_engine",
        "_submit",
        "_on_request_move",
        "_on_cancel",
        "_cancel_event",
    )

    def __init__(
        self,
        color: Color,
        submit: SubmitMove | None = None,
        engine: IEngine | None = None,
        *,
        name: str = "Practice bot",
        on_request_move: Callable[[GameState], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._engine: IEngine = engine if engine is not None else RandomMoveEngine()
        self._submit = submit
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel
        self._cancel_event = threading.Event()

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def engine(self) -> IEngine:
        return self._engine

    def bind(self, submit: SubmitMove) -> None:
        """Attach the submit callable once the controller exists."""
        self._submit = submit

    def request_move(self, state: GameState) -> None:
        if self._on_request_move is not None:
            self._on_request_move(state)
            return
        if self._submit is None:
            _LOGGER.warning("%s prompted before being bound to a match", self._name)
            return

        self._cancel_event.clear()
        result = self._engine.search(state, is_cancelled=self._cancel_event.is_set)
        if result.best_move is None:
            return
        move = result.best_move
        _LOGGER.debug("%s plays %s (%d candidates)", self._name, move, result.candidates)
        self._submit(move.from_sq, move.to_sq)

    def cancel(self) -> None:
        self._cancel_event.set()
        if self._on_cancel is not None:
            self._on_cancel()
