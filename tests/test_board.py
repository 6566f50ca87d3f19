"""
Unit Tests for Board Representation

Tests for the board model and its value types:
    - Square naming and parsing
    - Piece symbols
    - Board grid access, copying and rendering
    - Castling rights updates
    - Tensor conversion and python-chess square mapping
"""

import chess
import numpy as np
import pytest

from arcade_chess.board import (
    Board,
    CastlingRights,
    Color,
    Move,
    MoveFlag,
    Piece,
    PieceType,
    board_to_tensor,
    on_board,
    parse_square,
    square_name,
)
from arcade_chess.board.representation import coordinates_to_square, square_to_coordinates


class TestSquares:
    """Tests for square helpers."""

    def test_square_name(self):
        assert square_name((6, 4)) == "e2"
        assert square_name((0, 0)) == "a8"
        assert square_name((7, 7)) == "h1"

    def test_parse_square(self):
        assert parse_square("e2") == (6, 4)
        assert parse_square("a8") == (0, 0)
        assert parse_square("h1") == (7, 7)

    @pytest.mark.parametrize("name", ["i1", "a9", "e", "e22", ""])
    def test_parse_square_rejects_garbage(self, name):
        with pytest.raises(ValueError):
            parse_square(name)

    def test_on_board(self):
        assert on_board((0, 0))
        assert on_board((7, 7))
        assert not on_board((-1, 3))
        assert not on_board((3, 8))


class TestPieces:
    """Tests for piece and move values."""

    def test_symbols(self):
        assert Piece(Color.WHITE, PieceType.KING).symbol == "K"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "n"

    def test_from_symbol(self):
        assert Piece.from_symbol("q") == Piece(Color.BLACK, PieceType.QUEEN)
        assert Piece.from_symbol("P") == Piece(Color.WHITE, PieceType.PAWN)

    def test_from_symbol_invalid(self):
        with pytest.raises(ValueError):
            Piece.from_symbol("x")

    def test_pieces_are_values(self):
        """Two pieces of the same color and kind are interchangeable."""
        assert Piece(Color.WHITE, PieceType.ROOK) == Piece(Color.WHITE, PieceType.ROOK)
        assert Piece(Color.WHITE, PieceType.ROOK) != Piece(Color.BLACK, PieceType.ROOK)

    def test_color_helpers(self):
        assert Color.WHITE.opponent is Color.BLACK
        assert Color.WHITE.forward == -1
        assert Color.BLACK.forward == 1
        assert Color.BLACK.home_row == 0

    def test_move_properties(self):
        move = Move((1, 1), (0, 0), MoveFlag.PROMOTION_CAPTURE)
        assert move.is_capture
        assert move.is_promotion
        assert not move.is_castle
        assert str(move) == "b7a8"

    def test_move_default_flag(self):
        assert Move((6, 4), (5, 4)).flag is MoveFlag.NONE


class TestBoard:
    """Tests for the Board grid."""

    @pytest.fixture
    def board(self):
        return Board.starting_position()

    def test_starting_position(self, board):
        assert board.piece_at((7, 4)) == Piece(Color.WHITE, PieceType.KING)
        assert board.piece_at((0, 3)) == Piece(Color.BLACK, PieceType.QUEEN)
        assert board.count(Piece(Color.WHITE, PieceType.PAWN)) == 8
        assert board.count(Piece(Color.BLACK, PieceType.PAWN)) == 8
        assert len(list(board.pieces())) == 32, "Should have 32 pieces"

    def test_find_king(self, board):
        assert board.find_king(Color.WHITE) == (7, 4)
        assert board.find_king(Color.BLACK) == (0, 4)
        assert Board().find_king(Color.WHITE) is None

    def test_off_board_access(self, board):
        """Off-board coordinates read as empty and writes are ignored."""
        assert board.piece_at((-1, 0)) is None
        assert board.piece_at((8, 8)) is None

        board.set_piece((8, 8), Piece(Color.WHITE, PieceType.QUEEN))
        assert len(list(board.pieces())) == 32

    def test_remove_piece(self, board):
        removed = board.remove_piece((6, 0))
        assert removed == Piece(Color.WHITE, PieceType.PAWN)
        assert board.piece_at((6, 0)) is None

    def test_copy_is_independent(self, board):
        clone = board.copy()
        clone.remove_piece((7, 4))

        assert board.piece_at((7, 4)) is not None, "Original should be untouched"
        assert clone != board

    def test_pieces_by_color(self, board):
        white = list(board.pieces(Color.WHITE))
        assert len(white) == 16
        assert all(piece.color is Color.WHITE for _, piece in white)

    def test_from_placement(self):
        board = Board.from_placement({"e1": "K", "e8": "k", "a7": "P"})

        assert board.piece_at((7, 4)) == Piece(Color.WHITE, PieceType.KING)
        assert board.piece_at((0, 4)) == Piece(Color.BLACK, PieceType.KING)
        assert board.piece_at((1, 0)) == Piece(Color.WHITE, PieceType.PAWN)
        assert len(list(board.pieces())) == 3

    def test_from_placement_invalid(self):
        with pytest.raises(ValueError):
            Board.from_placement({"z9": "K"})

    def test_ascii_rendering(self, board):
        lines = str(board).splitlines()

        assert lines[0] == "8 r n b q k b n r"
        assert lines[4] == "4 . . . . . . . ."
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"


class TestCastlingRights:
    """Tests for CastlingRights."""

    def test_defaults(self):
        rights = CastlingRights()
        assert str(rights) == "KQkq"
        assert rights.kingside(Color.WHITE)
        assert rights.queenside(Color.BLACK)

    def test_none(self):
        assert str(CastlingRights.none()) == "-"

    def test_without_color(self):
        rights = CastlingRights().without_color(Color.WHITE)
        assert str(rights) == "kq"

    def test_without_rook_square(self):
        rights = CastlingRights()
        assert str(rights.without_rook_square((0, 0))) == "KQk"
        assert str(rights.without_rook_square((7, 7))) == "Qkq"

    def test_other_square_keeps_rights(self):
        rights = CastlingRights()
        assert rights.without_rook_square((4, 4)) is rights

    def test_immutable(self):
        rights = CastlingRights()
        rights.without_color(Color.BLACK)
        assert str(rights) == "KQkq", "Updates should return a new value"


class TestTensorConversion:
    """Tests for board_to_tensor and square mapping."""

    def test_tensor_shape(self):
        tensor = board_to_tensor(Board.starting_position())

        assert tensor.shape == (12, 8, 8)
        assert tensor.dtype == np.float32
        assert tensor.sum() == 32, "One plane entry per piece"

    def test_tensor_channels(self):
        tensor = board_to_tensor(Board.starting_position())

        assert tensor[5, 7, 4] == 1.0, "White king on e1"
        assert tensor[11, 0, 4] == 1.0, "Black king on e8"
        assert tensor[0, 6, :].sum() == 8, "White pawns on rank 2"
        assert tensor[6, 1, :].sum() == 8, "Black pawns on rank 7"

    def test_empty_board_tensor(self):
        assert board_to_tensor(Board()).sum() == 0

    def test_square_mapping(self):
        assert square_to_coordinates(chess.E2) == (6, 4)
        assert square_to_coordinates(chess.A8) == (0, 0)
        assert coordinates_to_square(7, 7) == chess.H1
        assert coordinates_to_square(0, 7) == chess.H8

    def test_square_mapping_roundtrip(self):
        for square in chess.SQUARES:
            assert coordinates_to_square(*square_to_coordinates(square)) == square
