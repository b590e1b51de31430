"""Board - 8x8 grid with side to move, castling flags and colour indexes."""

from __future__ import annotations

from chessgrid.core.enums import CastlingRights, Color, PieceType
from chessgrid.core.piece import EMPTY, Piece
from chessgrid.core.types import BOARD_SIZE, Coordinate

_COLOR_COUNT = 2


class Board:
    """Mutable 8x8 board with incremental per-colour piece indexes.

    Every write goes through :meth:`_set_cell`, which keeps the grid and the
    two ``Coordinate -> Piece`` maps in lockstep: a non-empty cell is present
    in exactly the map of its own colour, and nowhere else.
    """

    __slots__ = (
        "_grid",
        "_pieces",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(self) -> None:
        self._grid: list[list[Piece]] = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        # [color] -> occupied coordinate -> piece
        self._pieces: list[dict[Coordinate, Piece]] = [{} for _ in range(_COLOR_COUNT)]
        self.side_to_move = Color.WHITE
        self.castling = CastlingRights.ALL
        # Square of the most recent double-pushed pawn.
        self.en_passant: Coordinate | None = None
        self.halfmove_clock = 0
        self.fullmove_number = 1

    # -- Element access -----------------------------------------------------

    @staticmethod
    def _check_on_board(coord: Coordinate) -> None:
        # Negative indexes would otherwise wrap around the grid lists.
        if not coord.is_on_board:
            raise ValueError(f"Invalid coordinates: {coord.row} {coord.col}")

    def __getitem__(self, coord: Coordinate) -> Piece:
        self._check_on_board(coord)
        return self._grid[coord.row][coord.col]

    def is_empty(self, coord: Coordinate) -> bool:
        return self[coord].is_empty

    def _set_cell(self, coord: Coordinate, piece: Piece) -> None:
        self._check_on_board(coord)
        old_piece = self._grid[coord.row][coord.col]
        if not old_piece.is_empty:
            self._pieces[int(old_piece.color)].pop(coord, None)

        self._grid[coord.row][coord.col] = piece

        if not piece.is_empty:
            self._pieces[int(piece.color)][coord] = piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> dict[Coordinate, Piece]:
        """Snapshot of every square occupied by *color*."""
        return dict(self._pieces[int(color)])

    def king_coord(self, color: Color) -> Coordinate | None:
        """Where *color*'s king stands, or ``None`` if it has none."""
        for coord, piece in self._pieces[int(color)].items():
            if piece.piece_type == PieceType.KING:
                return coord
        return None

    # -- Mutation -----------------------------------------------------------

    def place_piece(self, piece: Piece, row: int, col: int) -> None:
        """Put *piece* on ``(row, col)``, replacing whatever was there."""
        self._set_cell(Coordinate(row, col), piece)

    def apply_move(self, from_coord: Coordinate, to_coord: Coordinate) -> Piece | None:
        """Relocate the occupant of *from_coord* without any legality check.

        Returns the captured piece, or ``None`` if *to_coord* was empty.
        Castling rights, promotion and the move clocks are left untouched.
        """
        piece = self[from_coord]
        captured = self[to_coord]

        self._set_cell(from_coord, EMPTY)
        self._set_cell(to_coord, piece)

        if piece.piece_type == PieceType.PAWN and abs(to_coord.row - from_coord.row) == 2:
            self.en_passant = to_coord

        self.side_to_move = self.side_to_move.opposite
        return None if captured.is_empty else captured

    def clear(self) -> None:
        """Empty the board. Unlike a fresh ``Board()``, no castling rights remain."""
        self._grid = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._pieces = [{} for _ in range(_COLOR_COUNT)]
        self.side_to_move = Color.WHITE
        self.castling = CastlingRights.NONE
        self.en_passant = None
        self.halfmove_clock = 0
        self.fullmove_number = 1

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        b._pieces = [index.copy() for index in self._pieces]
        b.side_to_move = self.side_to_move
        b.castling = self.castling
        b.en_passant = self.en_passant
        b.halfmove_clock = self.halfmove_clock
        b.fullmove_number = self.fullmove_number
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, loaded from :data:`STARTING_FEN`."""
        from chessgrid.core.notation.fen import STARTING_FEN, load_fen

        b = cls()
        load_fen(b, STARTING_FEN)
        # Loading never ingests castling; a fresh game has every right.
        b.castling = CastlingRights.ALL
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid
