"""Move value objects: plain relocations and special moves with side effects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.board import Board

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single relocation."""

    start: Square
    end: Square

    def __str__(self) -> str:
        return f"{self.start}{self.end}"

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)


@dataclass(frozen=True, slots=True)
class SpecialMove(Move, ABC):
    """A move whose relocation drags an auxiliary board edit along.

    :meth:`Board.move_piece` calls :meth:`check` before touching the board,
    performs the base relocation and then calls :meth:`apply_side_effect` on
    the same board.
    """

    def check(self, board: Board) -> None:
        """Raise ``ValueError`` if *board* cannot take the side effect."""

    @abstractmethod
    def apply_side_effect(self, board: Board) -> None:
        """Edit *board* after the moving piece has reached ``end``."""


@dataclass(frozen=True, slots=True)
class CastlingMove(SpecialMove):
    """King move that also carries the wing's rook across the king."""

    rook_start: Square
    rook_end: Square

    @property
    def is_kingside(self) -> bool:
        return self.end.file > self.start.file

    def check(self, board: Board) -> None:
        if board[self.rook_start] is None:
            raise ValueError(f"No rook was found at the given square: {self.rook_start}")

    def apply_side_effect(self, board: Board) -> None:
        board.move_piece(Move(self.rook_start, self.rook_end))


@dataclass(frozen=True, slots=True)
class EnPassantMove(SpecialMove):
    """Pawn capture onto the square the enemy pawn skipped over."""

    @property
    def captured_square(self) -> Square:
        """Square of the captured pawn: the end file on the start rank."""
        return Square(self.end.file, self.start.rank)

    def apply_side_effect(self, board: Board) -> None:
        board[self.captured_square] = None


@dataclass(frozen=True, slots=True)
class PromotionMove(SpecialMove):
    """Pawn advance to the last rank, replaced in place by *promotion*."""

    promotion: PieceType = PieceType.QUEEN

    def __post_init__(self) -> None:
        if self.promotion not in PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {self.promotion.name}")

    def __str__(self) -> str:
        return f"{self.start}{self.end}{_PROMO_CHARS[self.promotion]}"

    def apply_side_effect(self, board: Board) -> None:
        pawn = board[self.end]
        assert pawn is not None
        board[self.end] = Piece(pawn.color, self.promotion, has_moved=True)
