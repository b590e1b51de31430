"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessgrid.core import Board, Coordinate, MoveGenerator

    board = Board.initial()
    gen = MoveGenerator(board)
    print(gen.legal_moves(Coordinate.parse("e2")))
"""

from chessgrid.core.board import Board
from chessgrid.core.enums import CastlingRights, Color, PieceType
from chessgrid.core.move_generator import MoveGenerator
from chessgrid.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    load_fen,
)
from chessgrid.core.piece import EMPTY, Piece
from chessgrid.core.rules import Rules
from chessgrid.core.types import Coordinate

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Types
    "Coordinate",
    # Domain objects
    "Board",
    "EMPTY",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "load_fen",
]
