"""Pseudo-legal and legal destination generation + check detection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.types import Coordinate

if TYPE_CHECKING:
    from chessgrid.core.board import Board

_LOGGER = logging.getLogger(__name__)

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDING_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}


class MoveGenerator:
    """Generates destination squares for pieces on a :class:`Board`.

    :meth:`pseudo_legal_moves` ignores king safety and is what attack
    detection is built on; :meth:`legal_moves` runs the same result through
    :meth:`filter_check_moves`.
    The board is never modified; legality is simulated on a scratch copy.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, coord: Coordinate) -> list[Coordinate]:
        """Destinations for the piece on *coord* that keep its king safe."""
        return self.filter_check_moves(coord, self.pseudo_legal_moves(coord))

    def pseudo_legal_moves(self, coord: Coordinate) -> list[Coordinate]:
        """Destinations for the piece on *coord*, ignoring own-king safety."""
        board = self._board
        piece = board[coord]
        ptype = piece.piece_type

        if ptype == PieceType.EMPTY:
            return []
        if ptype in _SLIDING_DIRS:
            candidates = self._gen_sliding(coord, piece.color, _SLIDING_DIRS[ptype])
        elif ptype == PieceType.KNIGHT:
            candidates = self._gen_offsets(coord, KNIGHT_OFFSETS)
        elif ptype == PieceType.KING:
            candidates = self._gen_offsets(coord, KING_OFFSETS)
        else:
            candidates = self._gen_pawn(coord, piece.color)

        moves: list[Coordinate] = []
        seen: set[Coordinate] = set()
        for to_coord in candidates:
            if not to_coord.is_on_board or to_coord in seen:
                continue
            target = board[to_coord]
            if not target.is_empty and target.color == piece.color:
                continue
            seen.add(to_coord)
            moves.append(to_coord)
        return moves

    def filter_check_moves(
        self, coord: Coordinate, candidates: list[Coordinate]
    ) -> list[Coordinate]:
        """Keep the *candidates* after which the mover's king is not attacked."""
        color = self._board[coord].color
        scratch = self._board.copy()
        scratch_gen = MoveGenerator(scratch)
        legal: list[Coordinate] = []

        for to_coord in candidates:
            en_passant = scratch.en_passant
            captured = scratch.apply_move(coord, to_coord)
            if not scratch_gen.is_in_check(color):
                legal.append(to_coord)

            scratch.apply_move(to_coord, coord)
            if captured is not None:
                scratch.place_piece(captured, to_coord.row, to_coord.col)
            scratch.en_passant = en_passant
        return legal

    # -- Attack detection ---------------------------------------------------

    def attacked_squares(self, color: Color) -> set[Coordinate]:
        """Union of *color*'s pseudo-legal destinations."""
        attacked: set[Coordinate] = set()
        for coord in self._board.pieces(color):
            attacked.update(self.pseudo_legal_moves(coord))
        return attacked

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent? ``False`` without a king."""
        king = self._board.king_coord(color)
        if king is None:
            _LOGGER.debug("No %s king on board; not in check", color)
            return False
        return king in self.attacked_squares(color.opposite)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_sliding(
        self,
        coord: Coordinate,
        color: Color,
        directions: tuple[tuple[int, int], ...],
    ) -> list[Coordinate]:
        board = self._board
        moves: list[Coordinate] = []
        for d_row, d_col in directions:
            to_coord = coord.offset(d_row, d_col)
            while to_coord.is_on_board:
                target = board[to_coord]
                if target.is_empty:
                    moves.append(to_coord)
                    to_coord = to_coord.offset(d_row, d_col)
                    continue
                if target.color != color:
                    moves.append(to_coord)
                break
        return moves

    @staticmethod
    def _gen_offsets(
        coord: Coordinate, offsets: tuple[tuple[int, int], ...]
    ) -> list[Coordinate]:
        return [coord.offset(d_row, d_col) for d_row, d_col in offsets]

    def _gen_pawn(self, coord: Coordinate, color: Color) -> list[Coordinate]:
        board = self._board
        step = color.pawn_step
        moves: list[Coordinate] = []

        one_step = coord.offset(step, 0)
        if one_step.is_on_board and board.is_empty(one_step):
            moves.append(one_step)
            if coord.row == color.pawn_home_row:
                two_step = coord.offset(2 * step, 0)
                if board.is_empty(two_step):
                    moves.append(two_step)

        for d_col in (-1, 1):
            cap = coord.offset(step, d_col)
            if not cap.is_on_board:
                continue
            target = board[cap]
            if not target.is_empty and target.color != color:
                moves.append(cap)

        ep = board.en_passant
        if ep is not None and ep.row == coord.row and abs(ep.col - coord.col) == 1:
            victim = board[ep]
            if victim.piece_type == PieceType.PAWN and victim.color != color:
                moves.append(ep.offset(step, 0))

        return moves
