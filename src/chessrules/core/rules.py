"""Chess rules: move legality (king safety) plus checkmate, stalemate, draws."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.move import CastlingMove, Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.conditions import GameConditions
    from chessrules.core.piece import Piece


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # ── Legality ─────────────────────────────────────────────────────────

    @staticmethod
    def move_obeys_rules(board: Board, move: Move, color: Color) -> bool:
        """Whether *move* keeps *color*'s king out of check.

        The move is played on a copy of *board*; the board passed in is
        never modified. Castling is also refused out of check and across an
        attacked square.
        """
        if isinstance(move, CastlingMove):
            gen = MoveGenerator(board)
            if gen.is_in_check(color):
                return False
            crossed = Square((move.start.file + move.end.file) // 2, move.start.rank)
            if gen.is_square_attacked(crossed, color.opposite):
                return False

        simulated = board.copy()
        simulated.move_piece(move)
        return not MoveGenerator(simulated).is_in_check(color)

    @staticmethod
    def legal_moves(
        board: Board, piece: Piece, conditions: GameConditions | None = None
    ) -> list[Move]:
        """Candidate moves of *piece* that are legal to play."""
        enemy_king_sq = board.king_square(piece.color.opposite)
        return [
            move
            for move in MoveGenerator(board, conditions).candidate_moves(piece)
            if move.end != enemy_king_sq
            and Rules.move_obeys_rules(board, move, piece.color)
        ]

    @staticmethod
    def update_legal_moves(
        board: Board, piece: Piece, conditions: GameConditions | None = None
    ) -> list[Move]:
        """Recompute and store ``piece.legal_moves``."""
        piece.legal_moves = Rules.legal_moves(board, piece, conditions)
        return piece.legal_moves

    @staticmethod
    def generate_legal_moves(
        board: Board, color: Color, conditions: GameConditions | None = None
    ) -> list[Move]:
        """All legal moves for *color*."""
        legal: list[Move] = []
        for _, piece in list(board.pieces(color)):
            legal.extend(Rules.update_legal_moves(board, piece, conditions))
        return legal

    # ── Game end ─────────────────────────────────────────────────────────

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(board: Board, conditions: GameConditions) -> bool:
        color = conditions.side_to_move
        if not Rules.is_in_check(board, color):
            return False
        return len(Rules.generate_legal_moves(board, color, conditions)) == 0

    @staticmethod
    def is_stalemate(board: Board, conditions: GameConditions) -> bool:
        color = conditions.side_to_move
        if Rules.is_in_check(board, color):
            return False
        return len(Rules.generate_legal_moves(board, color, conditions)) == 0

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-color bishops)."""
        others = [
            (square, piece)
            for square, piece in board.pieces()
            if piece.piece_type != PieceType.KING
        ]

        # K vs K
        if not others:
            return True

        # K+minor vs K
        if len(others) == 1:
            return others[0][1].piece_type in (PieceType.KNIGHT, PieceType.BISHOP)

        # K+B vs K+B with same-colour bishops
        if len(others) == 2:
            (sq_a, a), (sq_b, b) = others
            return (
                a.piece_type == PieceType.BISHOP
                and b.piece_type == PieceType.BISHOP
                and a.color != b.color
                and sq_a.is_light == sq_b.is_light
            )

        return False

    @staticmethod
    def is_fifty_move_rule(conditions: GameConditions) -> bool:
        return conditions.half_move_clock >= 100  # 100 half-moves = 50 full moves

    @staticmethod
    def game_result(board: Board, conditions: GameConditions) -> GameResult:
        """Determine the current game result."""
        color = conditions.side_to_move
        if not Rules.generate_legal_moves(board, color, conditions):
            if Rules.is_in_check(board, color):
                return (
                    GameResult.BLACK_WINS
                    if color == Color.WHITE
                    else GameResult.WHITE_WINS
                )
            return GameResult.DRAW  # stalemate

        if Rules.is_insufficient_material(board) or Rules.is_fifty_move_rule(conditions):
            return GameResult.DRAW

        return GameResult.IN_PROGRESS
