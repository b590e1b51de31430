"""Tests for FEN notation."""

import logging

import pytest

from chessgrid.core.board import Board
from chessgrid.core.enums import CastlingRights, Color, PieceType
from chessgrid.core.notation import STARTING_FEN, board_from_fen, board_to_fen, load_fen
from chessgrid.core.piece import Piece
from chessgrid.core.types import Coordinate

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


class TestFenParsing:
    def test_starting_kings(self) -> None:
        board = board_from_fen(STARTING_FEN)
        assert board[Coordinate(7, 4)] == Piece(Color.WHITE, PieceType.KING)
        assert board[Coordinate(0, 4)] == Piece(Color.BLACK, PieceType.KING)

    def test_side_to_move(self) -> None:
        assert board_from_fen("8/8/8/8/8/8/8/8 w - - 0 1").side_to_move == Color.WHITE
        assert board_from_fen("8/8/8/8/8/8/8/8 b - - 0 1").side_to_move == Color.BLACK

    def test_castling_en_passant_and_clocks_are_not_ingested(self) -> None:
        board = board_from_fen(
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 5 9"
        )
        assert board.castling == CastlingRights.NONE
        assert board.en_passant is None
        assert board.halfmove_clock == 0
        assert board.fullmove_number == 1

    def test_load_replaces_existing_position(self, initial_board: Board) -> None:
        load_fen(initial_board, "4k3/8/8/8/8/8/8/4K3 b - - 0 1")
        assert len(initial_board.pieces(Color.WHITE)) == 1
        assert len(initial_board.pieces(Color.BLACK)) == 1
        assert initial_board.side_to_move == Color.BLACK

    def test_indexes_follow_placement(self) -> None:
        board = board_from_fen(KIWIPETE)
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16
        assert board.pieces(Color.BLACK)[Coordinate.parse("h3")] == Piece(
            Color.BLACK, PieceType.PAWN
        )

    def test_invalid_side_to_move_raises(self) -> None:
        with pytest.raises(ValueError, match="side-to-move"):
            board_from_fen("8/8/8/8/8/8/8/8 x - - 0 1")

    def test_missing_side_to_move_raises(self) -> None:
        with pytest.raises(ValueError, match="side-to-move"):
            board_from_fen("8/8/8/8/8/8/8/8")

    def test_trailing_fields_are_optional(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4K3 b")
        assert board.side_to_move == Color.BLACK

    def test_unknown_character_becomes_empty_square(self) -> None:
        board = board_from_fen("xk6/8/8/8/8/8/8/K7 w - - 0 1")
        assert board.is_empty(Coordinate(0, 0))
        assert board[Coordinate(0, 1)] == Piece(Color.BLACK, PieceType.KING)
        assert board_to_fen(board).split(" ")[0] == "1k6/8/8/8/8/8/8/K7"

    def test_unknown_character_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="chessgrid.core.notation.fen"):
            board_from_fen("4?3/8/8/8/8/8/8/8 w - - 0 1")
        assert "'?'" in caplog.text

    def test_zero_and_nine_are_placeholders(self) -> None:
        board = board_from_fen("0k6/8/8/8/8/8/8/7K w - - 0 1")
        assert board[Coordinate(0, 1)] == Piece(Color.BLACK, PieceType.KING)

    def test_rank_overflow_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid coordinates"):
            board_from_fen("8K/8/8/8/8/8/8/8 w - - 0 1")


class TestFenSerialisation:
    def test_initial_board_matches_starting_fen(self) -> None:
        assert board_to_fen(Board.initial()) == STARTING_FEN

    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            KIWIPETE,
            "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1",
            "r3k2r/Pppp1ppp/1b3nbN/nP6/BBP1P3/q4N2/Pp1P2PP/R2Q1RK1 w kq - 0 1",
            "8/8/8/8/8/8/8/8 b - - 0 1",
        ],
    )
    def test_board_field_roundtrip(self, fen: str) -> None:
        out = board_to_fen(board_from_fen(fen))
        assert out.split(" ")[:2] == fen.split(" ")[:2]

    def test_no_castling_rights_emit_nothing(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        assert board_to_fen(board) == "4k3/8/8/8/8/8/8/4K3 w  - 0 1"

    def test_partial_castling_order(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        board.castling = CastlingRights.BLACK_QUEENSIDE | CastlingRights.WHITE_KINGSIDE
        assert board_to_fen(board).split(" ")[2] == "Kq"

    def test_en_passant_marker_is_the_pushed_pawn(self, initial_board: Board) -> None:
        initial_board.apply_move(Coordinate.parse("e2"), Coordinate.parse("e4"))
        assert (
            board_to_fen(initial_board)
            == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e4 0 1"
        )

    def test_clocks_are_serialised_as_stored(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4K3 b - - 0 1")
        board.halfmove_clock = 12
        board.fullmove_number = 40
        assert board_to_fen(board).endswith(" 12 40")
