"""FEN parsing and serialization."""

from __future__ import annotations

import logging

from chessgrid.core.board import Board
from chessgrid.core.enums import Color
from chessgrid.core.piece import EMPTY, Piece
from chessgrid.core.types import BOARD_SIZE, Coordinate

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_SIDES: dict[str, Color] = {color.fen_char: color for color in Color}


def load_fen(board: Board, fen: str) -> None:
    """Replace the contents of *board* with the position in *fen*.

    Only piece placement and side to move are read; castling, en passant and
    the clocks keep the values :meth:`Board.clear` gives them.  Unknown
    placement characters become empty squares instead of being rejected.
    """
    parts = fen.split(" ")
    placement = parts[0]
    side_part = parts[1] if len(parts) > 1 else ""

    board.clear()

    # 1. Side to move
    try:
        board.side_to_move = _SIDES[side_part]
    except KeyError:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}") from None

    # 2. Piece placement
    row = 0
    col = 0
    for ch in placement:
        if ch == "/":
            row += 1
            col = 0
        elif ch in "12345678":
            col += int(ch)
        else:
            try:
                piece = Piece.from_char(ch)
            except ValueError:
                _LOGGER.debug("Unrecognised FEN character %r at %d,%d", ch, row, col)
                piece = EMPTY
            board.place_piece(piece, row, col)
            col += 1


def board_from_fen(fen: str) -> Board:
    """Build a new :class:`Board` from *fen*."""
    board = Board()
    load_fen(board, fen)
    return board


def board_to_fen(board: Board) -> str:
    """Serialise *board* to FEN."""
    # 1. Board
    rows: list[str] = []
    for row in range(BOARD_SIZE):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            piece = board[Coordinate(row, col)]
            if piece.is_empty:
                empty += 1
            else:
                if empty:
                    text += str(empty)
                    empty = 0
                text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    # 2. Side
    side_str = board.side_to_move.fen_char

    # 3. Castling (no placeholder when no rights remain)
    castling_str = board.castling.to_fen()

    # 4. En passant
    ep_str = str(board.en_passant) if board.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{board.halfmove_clock} {board.fullmove_number}"
    )
