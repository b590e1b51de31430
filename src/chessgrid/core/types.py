"""Coordinate value type and algebraic helpers.

Board layout (row-major, top rank first)::

    row 0 -> rank 8   (a8 = (0, 0), h8 = (0, 7))
    ...
    row 7 -> rank 1   (a1 = (7, 0), h1 = (7, 7))
"""

from __future__ import annotations

from dataclasses import dataclass

FILES = "abcdefgh"
BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable ``(row, col)`` pair.

    Off-board values are allowed so that move generation can produce raw
    candidates first and filter them afterwards.
    """

    row: int
    col: int

    @property
    def is_on_board(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    def offset(self, d_row: int, d_col: int) -> Coordinate:
        return Coordinate(self.row + d_row, self.col + d_col)

    # ── Algebraic notation ───────────────────────────────────────────────

    def __str__(self) -> str:
        """Algebraic name, e.g. ``Coordinate(6, 4)`` → ``'e2'``."""
        return f"{FILES[self.col]}{BOARD_SIZE - self.row}"

    @classmethod
    def parse(cls, name: str) -> Coordinate:
        """Parse an algebraic square name, e.g. ``'e4'`` → ``Coordinate(4, 4)``."""
        if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(BOARD_SIZE - int(name[1]), FILES.index(name[0]))
