"""Tests for Piece state and character conversions."""

import pytest

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import E2, E4


class TestPiece:
    def test_defaults(self) -> None:
        piece = Piece(Color.WHITE, PieceType.KNIGHT)
        assert piece.position is None
        assert not piece.has_moved
        assert piece.legal_moves == []

    def test_copy_is_independent(self) -> None:
        piece = Piece(Color.BLACK, PieceType.PAWN, E2, has_moved=True)
        piece.legal_moves.append(Move(E2, E4))
        clone = piece.copy()
        assert clone == piece
        assert clone is not piece
        assert clone.legal_moves == []
        clone.has_moved = False
        assert piece.has_moved

    def test_equality_ignores_legal_moves(self) -> None:
        a = Piece(Color.WHITE, PieceType.ROOK, E2)
        b = Piece(Color.WHITE, PieceType.ROOK, E2)
        a.legal_moves.append(Move(E2, E4))
        assert a == b

    def test_is_a(self) -> None:
        piece = Piece(Color.BLACK, PieceType.QUEEN)
        assert piece.is_a(Color.BLACK, PieceType.QUEEN)
        assert not piece.is_a(Color.WHITE, PieceType.QUEEN)
        assert not piece.is_a(Color.BLACK, PieceType.KING)


class TestPieceChars:
    @pytest.mark.parametrize(
        "char, color, piece_type",
        [
            ("K", Color.WHITE, PieceType.KING),
            ("q", Color.BLACK, PieceType.QUEEN),
            ("N", Color.WHITE, PieceType.KNIGHT),
            ("p", Color.BLACK, PieceType.PAWN),
        ],
    )
    def test_from_char(self, char: str, color: Color, piece_type: PieceType) -> None:
        piece = Piece.from_char(char)
        assert piece.is_a(color, piece_type)
        assert str(piece) == char

    @pytest.mark.parametrize("char", ["x", "", "KK", "1"])
    def test_invalid_char(self, char: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char(char)

    def test_symbol(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"
