"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from checkie.core.enums import Color, Rank

# Wire character ↔ (Color, Rank)
_CHAR_MAP: dict[str, tuple[Color, Rank]] = {
    "r": (Color.RED, Rank.MAN),
    "R": (Color.RED, Rank.KING),
    "b": (Color.BLACK, Rank.MAN),
    "B": (Color.BLACK, Rank.KING),
}

_WIRE_CHARS: dict[tuple[Color, Rank], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a checkers piece."""

    color: Color
    rank: Rank = Rank.MAN

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    def crowned(self) -> Piece:
        """The king of the same color."""
        return Piece(self.color, Rank.KING)

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Wire character (lowercase = man, uppercase = king)."""
        return _WIRE_CHARS[(self.color, self.rank)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from wire character, e.g. 'R' → red king."""
        try:
            color, rank = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, rank)


RED_MAN = Piece(Color.RED, Rank.MAN)
RED_KING = Piece(Color.RED, Rank.KING)
BLACK_MAN = Piece(Color.BLACK, Rank.MAN)
BLACK_KING = Piece(Color.BLACK, Rank.KING)

# A board cell is either empty (None) or holds a piece.
Cell: TypeAlias = Piece | None
