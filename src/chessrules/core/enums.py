"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def back_rank(self) -> int:
        return 1 if self is Color.WHITE else 8

    @property
    def pawn_rank(self) -> int:
        """Rank the side's pawns start on."""
        return 2 if self is Color.WHITE else 7

    @property
    def pawn_direction(self) -> int:
        return 1 if self is Color.WHITE else -1

    @property
    def double_step_rank(self) -> int:
        """Rank a pawn lands on after its two-square opening advance."""
        return self.pawn_rank + 2 * self.pawn_direction

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
