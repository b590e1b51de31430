"""High-level rule queries: king lookup, check and checkmate."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessgrid.core.enums import Color
from chessgrid.core.move_generator import MoveGenerator
from chessgrid.core.types import Coordinate

if TYPE_CHECKING:
    from chessgrid.core.board import Board

_LOGGER = logging.getLogger(__name__)


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def king_coord(board: Board, color: Color) -> Coordinate | None:
        return board.king_coord(color)

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_in_checkmate(board: Board, color: Color) -> bool:
        """Whether *color* has a king and no piece with a legal move.

        The king is not required to be under attack, so a stalemated side is
        reported as checkmated too.
        """
        if board.king_coord(color) is None:
            _LOGGER.debug("No %s king on board; not checkmate", color)
            return False
        gen = MoveGenerator(board)
        return all(not gen.legal_moves(coord) for coord in board.pieces(color))
