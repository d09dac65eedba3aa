"""Results of a move submission, as relayed to clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

from checkie.core.board import Board
from checkie.core.enums import Color, MoveError
from checkie.core.notation import board_to_cells
from checkie.core.types import Index


@dataclass(frozen=True, slots=True)
class MoveAccepted:
    """A move was applied.

    ``next_turn`` equals the mover's color while a multi-jump is pending
    (``must_continue_from`` is then set).
    """

    board: Board
    next_turn: Color
    must_continue_from: Index | None
    game_over: bool
    winner: Color | None
    captures: tuple[Index, ...] = ()
    promoted: bool = False

    @property
    def accepted(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "MOVE_ACCEPTED",
            "board": board_to_cells(self.board),
            "nextTurn": str(self.next_turn),
            "mustContinueFrom": self.must_continue_from,
            "gameOver": self.game_over,
            "winner": str(self.winner) if self.winner is not None else None,
            "captures": list(self.captures),
            "promoted": self.promoted,
        }


@dataclass(frozen=True, slots=True)
class MoveRejected:
    """A move was refused; the match state is unchanged."""

    reason: MoveError

    @property
    def accepted(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "MOVE_REJECTED",
            "reason": str(self.reason),
            "message": self.reason.message,
        }


MoveOutcome: TypeAlias = MoveAccepted | MoveRejected
