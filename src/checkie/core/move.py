"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.types import Index


@dataclass(frozen=True, slots=True)
class Move:
    """A single step or jump from one cell to another.

    ``captures`` lists the cell emptied by a jump (at most one).
    """

    from_sq: Index
    to_sq: Index
    captures: tuple[Index, ...] = ()

    @property
    def is_capture(self) -> bool:
        return bool(self.captures)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        sep = "x" if self.captures else "-"
        return f"{self.from_sq}{sep}{self.to_sq}"
