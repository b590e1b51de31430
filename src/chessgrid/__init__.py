"""chessgrid - chess position engine: board state, move legality and FEN."""

from chessgrid.core import (
    EMPTY,
    STARTING_FEN,
    Board,
    CastlingRights,
    Color,
    Coordinate,
    MoveGenerator,
    Piece,
    PieceType,
    Rules,
    board_from_fen,
    board_to_fen,
    load_fen,
)

__all__ = [
    "EMPTY",
    "STARTING_FEN",
    "Board",
    "CastlingRights",
    "Color",
    "Coordinate",
    "MoveGenerator",
    "Piece",
    "PieceType",
    "Rules",
    "board_from_fen",
    "board_to_fen",
    "load_fen",
]
