"""Candidate (pseudo-legal) move generation + attack detection.

Each piece variant has one generator function; :class:`MoveGenerator`
dispatches on ``piece.piece_type``. King safety is not considered here, that
is :class:`~chessrules.core.rules.Rules`' job.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import (
    PROMOTION_TYPES,
    CastlingMove,
    EnPassantMove,
    Move,
    PromotionMove,
)
from chessrules.core.piece import Piece
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.conditions import GameConditions


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

KING_HOME_FILE = 5
# wing -> (rook corner file, king destination file, rook destination file)
_CASTLING_FILES: dict[bool, tuple[int, int, int]] = {
    True: (8, 7, 6),
    False: (1, 3, 4),
}


class MoveGenerator:
    """Generates candidate moves for pieces on a :class:`Board`.

    *conditions* supplies castling rights and the en passant target. Without
    it only attack geometry is produced: no castling, no en passant.
    """

    __slots__ = ("_board", "_conditions")

    def __init__(
        self, board: Board, conditions: GameConditions | None = None
    ) -> None:
        self._board = board
        self._conditions = conditions

    # -- Public API ---------------------------------------------------------

    def candidate_moves(self, piece: Piece) -> list[Move]:
        """Geometrically possible moves for *piece*, recomputed on each call."""
        if piece.position is None:
            raise ValueError(f"{piece.color} {piece.piece_type.name} is not on the board")
        return _GENERATORS[piece.piece_type](self, piece, piece.position)

    def is_square_attacked(self, square: Square, by_color: Color) -> bool:
        """Is *square* reached by any candidate move of *by_color*?

        Pawns only attack diagonally, whether or not the square is occupied.
        """
        attacks = MoveGenerator(self._board)
        for origin, piece in self._board.pieces(by_color):
            if piece.piece_type == PieceType.PAWN:
                if (
                    square.rank - origin.rank == by_color.pawn_direction
                    and abs(square.file - origin.file) == 1
                ):
                    return True
                continue
            if any(move.end == square for move in attacks.candidate_moves(piece)):
                return True
        return False

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, piece: Piece, sq: Square) -> list[Move]:
        board = self._board
        color = piece.color
        step = color.pawn_direction
        last_rank = color.opposite.back_rank
        moves: list[Move] = []

        def add(to_sq: Square) -> None:
            if to_sq.rank == last_rank:
                moves.extend(PromotionMove(sq, to_sq, pt) for pt in PROMOTION_TYPES)
            else:
                moves.append(Move(sq, to_sq))

        one_step = sq.offset(0, step)
        if one_step.is_valid and not board.is_occupied(one_step):
            add(one_step)
            two_step = sq.offset(0, 2 * step)
            if (
                sq.rank == color.pawn_rank
                and not piece.has_moved
                and not board.is_occupied(two_step)
            ):
                moves.append(Move(sq, two_step))

        conditions = self._conditions
        en_passant = conditions.en_passant_square if conditions is not None else None
        for df in (-1, 1):
            cap_sq = sq.offset(df, step)
            if not cap_sq.is_valid:
                continue
            target = board[cap_sq]
            if target is not None and target.color != color:
                add(cap_sq)
            elif cap_sq == en_passant and sq.rank == color.opposite.double_step_rank:
                victim = board[cap_sq.file, sq.rank]
                if victim is not None and victim.is_a(color.opposite, PieceType.PAWN):
                    moves.append(EnPassantMove(sq, cap_sq))
        return moves

    def _gen_leaper(
        self, piece: Piece, sq: Square, offsets: tuple[tuple[int, int], ...]
    ) -> list[Move]:
        board = self._board
        moves: list[Move] = []
        for df, dr in offsets:
            to_sq = sq.offset(df, dr)
            if to_sq.is_valid and not board.is_occupied_by(to_sq, piece.color):
                moves.append(Move(sq, to_sq))
        return moves

    def _gen_knight(self, piece: Piece, sq: Square) -> list[Move]:
        return self._gen_leaper(piece, sq, KNIGHT_OFFSETS)

    def _gen_sliding(
        self, piece: Piece, sq: Square, directions: tuple[tuple[int, int], ...]
    ) -> list[Move]:
        board = self._board
        moves: list[Move] = []
        for df, dr in directions:
            to_sq = sq.offset(df, dr)
            while to_sq.is_valid:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    to_sq = to_sq.offset(df, dr)
                    continue
                if target.color != piece.color:
                    moves.append(Move(sq, to_sq))
                break
        return moves

    def _gen_bishop(self, piece: Piece, sq: Square) -> list[Move]:
        return self._gen_sliding(piece, sq, BISHOP_DIRS)

    def _gen_rook(self, piece: Piece, sq: Square) -> list[Move]:
        return self._gen_sliding(piece, sq, ROOK_DIRS)

    def _gen_queen(self, piece: Piece, sq: Square) -> list[Move]:
        return self._gen_sliding(piece, sq, QUEEN_DIRS)

    def _gen_king(self, piece: Piece, sq: Square) -> list[Move]:
        moves = self._gen_leaper(piece, sq, KING_OFFSETS)
        if self._conditions is not None:
            moves.extend(self._gen_castling(piece, sq))
        return moves

    def _gen_castling(self, king: Piece, king_sq: Square) -> list[Move]:
        assert self._conditions is not None
        board = self._board
        color = king.color
        rank = color.back_rank
        if king.has_moved or king_sq != Square(KING_HOME_FILE, rank):
            return []

        moves: list[Move] = []
        for kingside, (rook_file, king_to, rook_to) in _CASTLING_FILES.items():
            if not self._conditions.can_castle(color, kingside):
                continue
            rook = board[rook_file, rank]
            if rook is None or not rook.is_a(color, PieceType.ROOK) or rook.has_moved:
                continue
            low, high = sorted((KING_HOME_FILE, rook_file))
            if any(board.is_occupied((f, rank)) for f in range(low + 1, high)):
                continue
            moves.append(
                CastlingMove(
                    king_sq,
                    Square(king_to, rank),
                    Square(rook_file, rank),
                    Square(rook_to, rank),
                )
            )
        return moves


_GENERATORS: dict[PieceType, Callable[[MoveGenerator, Piece, Square], list[Move]]] = {
    PieceType.PAWN: MoveGenerator._gen_pawn,
    PieceType.KNIGHT: MoveGenerator._gen_knight,
    PieceType.BISHOP: MoveGenerator._gen_bishop,
    PieceType.ROOK: MoveGenerator._gen_rook,
    PieceType.QUEEN: MoveGenerator._gen_queen,
    PieceType.KING: MoveGenerator._gen_king,
}
