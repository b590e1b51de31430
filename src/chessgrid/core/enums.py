"""Colours, occupant kinds and castling flags."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class Color(IntEnum):
    """Side color. Also indexes the board's per-colour piece maps."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def pawn_step(self) -> int:
        """Row delta of a pawn advance; row 0 is rank 8, so white moves up."""
        return -1 if self is Color.WHITE else 1

    @property
    def pawn_home_row(self) -> int:
        """Row from which a double push is allowed."""
        return 6 if self is Color.WHITE else 1

    @property
    def fen_char(self) -> str:
        return "w" if self is Color.WHITE else "b"

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Occupant of a square; ``EMPTY`` is a vacant square, not a missing value."""

    EMPTY = 0
    KING = 1
    QUEEN = 2
    ROOK = 3
    BISHOP = 4
    KNIGHT = 5
    PAWN = 6


class CastlingRights(IntFlag):
    """Four independent castling flags, in FEN order (``KQkq``).

    Tracked and serialised only; nothing in move generation consumes them.
    """

    NONE = 0
    WHITE_KINGSIDE = 1
    WHITE_QUEENSIDE = 2
    BLACK_KINGSIDE = 4
    BLACK_QUEENSIDE = 8
    ALL = 15

    def to_fen(self) -> str:
        """Letters for the set flags; empty when none are set."""
        return "".join(
            ch for flag, ch in zip(_SINGLE_RIGHTS, "KQkq") if self & flag
        )


_SINGLE_RIGHTS: tuple[CastlingRights, ...] = (
    CastlingRights.WHITE_KINGSIDE,
    CastlingRights.WHITE_QUEENSIDE,
    CastlingRights.BLACK_KINGSIDE,
    CastlingRights.BLACK_QUEENSIDE,
)
