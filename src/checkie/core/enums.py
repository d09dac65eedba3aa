"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color. Red moves first and advances toward row 0."""

    RED = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Row delta of a forward step for this side's men."""
        return -1 if self is Color.RED else 1

    @property
    def promotion_row(self) -> int:
        """Opponent back rank, where this side's men are crowned."""
        return 0 if self is Color.RED else 7

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    """Piece rank."""

    MAN = 1
    KING = 2


class GamePhase(IntEnum):
    """Finite-state-machine states for a match."""

    AWAITING_MOVE = 1
    GAME_OVER = 2


class MoveError(StrEnum):
    """Why a proposed move was rejected.

    Every member is an expected rule violation reported back to the
    player, never an exception.
    """

    INVALID_POSITION = "InvalidPosition"
    NOT_YOUR_PIECE = "NotYourPiece"
    WRONG_CONTINUATION = "WrongContinuation"
    OCCUPIED_DESTINATION = "OccupiedDestination"
    NON_DIAGONAL_MOVE = "NonDiagonalMove"
    INVALID_DISTANCE = "InvalidDistance"
    PATH_BLOCKED = "PathBlocked"
    MANDATORY_CAPTURE_VIOLATION = "MandatoryCaptureViolation"
    NO_CAPTURE_TARGET = "NoCaptureTarget"
    AMBIGUOUS_CAPTURE = "AmbiguousCapture"
    MATCH_ALREADY_OVER = "MatchAlreadyOver"
    MATCH_NOT_FOUND = "MatchNotFound"

    @property
    def message(self) -> str:
        """Human-readable reason relayed to the offending client."""
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES: dict[MoveError, str] = {
    MoveError.INVALID_POSITION: "Invalid position",
    MoveError.NOT_YOUR_PIECE: "Not your piece",
    MoveError.WRONG_CONTINUATION: "Must continue jump from previous position",
    MoveError.OCCUPIED_DESTINATION: "Destination is not empty",
    MoveError.NON_DIAGONAL_MOVE: "Move must be diagonal",
    MoveError.INVALID_DISTANCE: "Invalid move distance",
    MoveError.PATH_BLOCKED: "Path is blocked",
    MoveError.MANDATORY_CAPTURE_VIOLATION: "Capture is mandatory",
    MoveError.NO_CAPTURE_TARGET: "No piece to capture",
    MoveError.AMBIGUOUS_CAPTURE: "Move would capture more than one piece",
    MoveError.MATCH_ALREADY_OVER: "Match is already over",
    MoveError.MATCH_NOT_FOUND: "Game not found",
}
