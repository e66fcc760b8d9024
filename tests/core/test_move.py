"""Tests for Move values and special-move side effects."""

from collections.abc import Callable, Sequence

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import CastlingMove, EnPassantMove, Move, PromotionMove
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, C1, D1, D5, D6, D8, E1, E2, E4, E5, E7, E8, F1, G1, H1,
)

BoardFactory = Callable[[Sequence[str]], Board]


class TestMoveValues:
    def test_uci_string(self) -> None:
        assert str(Move(E2, E4)) == "e2e4"
        assert Move(E2, E4).uci == "e2e4"
        assert str(PromotionMove(E7, E8, PieceType.KNIGHT)) == "e7e8n"

    def test_variants_are_distinct(self) -> None:
        assert Move(E1, G1) != CastlingMove(E1, G1, H1, F1)
        assert CastlingMove(E1, G1, H1, F1) == CastlingMove(E1, G1, H1, F1)

    def test_invalid_promotion(self) -> None:
        with pytest.raises(ValueError, match="Cannot promote to KING"):
            PromotionMove(E7, E8, PieceType.KING)

    def test_en_passant_captured_square(self) -> None:
        assert EnPassantMove(E5, D6).captured_square == D5

    def test_castling_wing(self) -> None:
        assert CastlingMove(E1, G1, H1, F1).is_kingside
        assert not CastlingMove(E1, C1, A1, D1).is_kingside


class TestCastling:
    def test_kingside(self) -> None:
        board = Board.initial()
        for sq in (F1, G1):
            board[sq] = None
        board.move_piece(CastlingMove(E1, G1, H1, F1))
        assert board[G1] == Piece(Color.WHITE, PieceType.KING, G1, has_moved=True)
        assert board[F1] == Piece(Color.WHITE, PieceType.ROOK, F1, has_moved=True)
        assert board[E1] is None
        assert board[H1] is None
        assert board.king_square(Color.WHITE) == G1

    def test_queenside(self, make_board: BoardFactory) -> None:
        board = make_board([
            "r...k..r",
            "........",
            "........",
            "........",
            "........",
            "........",
            "........",
            "R...K..R",
        ])
        board.move_piece(CastlingMove(E1, C1, A1, D1))
        assert board[C1] == Piece(Color.WHITE, PieceType.KING, C1, has_moved=True)
        assert board[D1] == Piece(Color.WHITE, PieceType.ROOK, D1, has_moved=True)
        assert board[A1] is None

    def test_missing_rook_leaves_board_untouched(self) -> None:
        board = Board([
            (E1, Piece(Color.WHITE, PieceType.KING)),
            (E8, Piece(Color.BLACK, PieceType.KING)),
        ])
        before = board.copy()
        with pytest.raises(ValueError, match="No rook"):
            board.move_piece(CastlingMove(E1, G1, H1, F1))
        assert board == before
        assert board.king_square(Color.WHITE) == E1
        king = board[E1]
        assert king is not None and not king.has_moved


class TestEnPassant:
    def test_captured_pawn_removed(self, make_board: BoardFactory) -> None:
        board = make_board([
            "....k...",
            "........",
            "........",
            "...pP...",
            "........",
            "........",
            "........",
            "....K...",
        ])
        board.move_piece(EnPassantMove(E5, D6))
        assert board[D6] == Piece(Color.WHITE, PieceType.PAWN, D6, has_moved=True)
        assert board[D5] is None
        assert board[E5] is None


class TestPromotion:
    @pytest.mark.parametrize(
        "promotion",
        [PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT],
    )
    def test_pawn_replaced_in_place(
        self, make_board: BoardFactory, promotion: PieceType
    ) -> None:
        board = make_board([
            "........",
            "....P...",
            "........",
            "........",
            "........",
            "........",
            "....k...",
            "....K...",
        ])
        pawn = board[E7]
        board.move_piece(PromotionMove(E7, E8, promotion))
        promoted = board[E8]
        assert promoted == Piece(Color.WHITE, promotion, E8, has_moved=True)
        assert promoted is not pawn
        assert board[E7] is None

    def test_promotion_with_capture(self, make_board: BoardFactory) -> None:
        board = make_board([
            "...r....",
            "....P...",
            "........",
            "........",
            "........",
            "........",
            "....k...",
            "....K...",
        ])
        board.move_piece(PromotionMove(E7, D8, PieceType.QUEEN))
        assert board[D8] == Piece(
            Color.WHITE, PieceType.QUEEN, D8, has_moved=True
        )
