"""GameConditions — non-board, non-history game state and its transitions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.half_move import HalfMove
from chessrules.core.move_generator import KING_HOME_FILE
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.board import Board

# wing (kingside?) -> file of the rook corner
_ROOK_CORNER_FILES: dict[bool, int] = {True: 8, False: 1}


def _flag_name(color: Color, kingside: bool) -> str:
    return f"{color}_can_castle_{'kingside' if kingside else 'queenside'}"


@dataclass(frozen=True, slots=True)
class GameConditions:
    """Immutable snapshot of side to move, castling rights, en passant and clocks.

    New snapshots are derived with :meth:`calculate_ending_conditions`; a
    value is never modified in place.
    """

    white_to_move: bool
    white_can_castle_kingside: bool
    white_can_castle_queenside: bool
    black_can_castle_kingside: bool
    black_can_castle_queenside: bool
    en_passant_square: Square | None
    half_move_clock: int
    turn_number: int

    def __post_init__(self) -> None:
        if self.half_move_clock < 0:
            raise ValueError(f"Half-move clock must be >= 0, got {self.half_move_clock}")
        if self.turn_number < 1:
            raise ValueError(f"Turn number must be >= 1, got {self.turn_number}")

    @classmethod
    def normal_starting(cls) -> GameConditions:
        """Conditions at the start of a standard game."""
        return NORMAL_STARTING_CONDITIONS

    @property
    def side_to_move(self) -> Color:
        return Color.WHITE if self.white_to_move else Color.BLACK

    def can_castle(self, color: Color, kingside: bool) -> bool:
        return bool(getattr(self, _flag_name(color, kingside)))

    # ── Transitions ──────────────────────────────────────────────────────

    def calculate_ending_conditions(
        self, ending_board: Board, half_moves: HalfMove | Sequence[HalfMove]
    ) -> GameConditions:
        """Conditions after *half_moves* were played, starting from ``self``.

        Args:
            ending_board: The board once every half-move has been applied.
            half_moves: A single half-move, or every half-move played since
                the position these conditions describe (oldest first).
        """
        if isinstance(half_moves, HalfMove):
            return self._after_half_move(ending_board, half_moves)
        return self._after_half_moves(ending_board, half_moves)

    def _after_half_move(self, ending_board: Board, half_move: HalfMove) -> GameConditions:
        return GameConditions(
            white_to_move=not self.white_to_move,
            **self._ending_castling_rights(ending_board),
            en_passant_square=_ending_en_passant_square(half_move),
            half_move_clock=_next_half_move_clock(half_move, self.half_move_clock),
            turn_number=self.turn_number + (0 if self.white_to_move else 1),
        )

    def _after_half_moves(
        self, ending_board: Board, half_moves: Sequence[HalfMove]
    ) -> GameConditions:
        if not half_moves:
            return self

        count = len(half_moves)
        clock = self.half_move_clock
        for half_move in half_moves:
            clock = _next_half_move_clock(half_move, clock)

        return GameConditions(
            white_to_move=self.white_to_move if count % 2 == 0 else not self.white_to_move,
            **self._ending_castling_rights(ending_board),
            en_passant_square=_ending_en_passant_square(half_moves[-1]),
            half_move_clock=clock,
            # Black completes a turn; count how many black moves the plies contain.
            turn_number=self.turn_number
            + (count // 2 if self.white_to_move else (count + 1) // 2),
        )

    def _ending_castling_rights(self, ending_board: Board) -> dict[str, bool]:
        """Rights still held: unmoved king and rook on their home squares.

        A right already lost stays lost whatever the board shows.
        """
        rights: dict[str, bool] = {}
        for color in Color:
            rank = color.back_rank
            king = ending_board[KING_HOME_FILE, rank]
            king_eligible = (
                king is not None
                and king.is_a(color, PieceType.KING)
                and not king.has_moved
            )
            for kingside, rook_file in _ROOK_CORNER_FILES.items():
                rook = ending_board[rook_file, rank]
                rights[_flag_name(color, kingside)] = (
                    self.can_castle(color, kingside)
                    and king_eligible
                    and rook is not None
                    and rook.is_a(color, PieceType.ROOK)
                    and not rook.has_moved
                )
        return rights


def _next_half_move_clock(half_move: HalfMove, clock: int) -> int:
    if half_move.piece.piece_type == PieceType.PAWN or half_move.captured_piece:
        return 0
    return clock + 1


# The en passant square depends on the last half-move alone.
def _ending_en_passant_square(last_half_move: HalfMove) -> Square | None:
    piece = last_half_move.piece
    move = last_half_move.move
    color = piece.color
    if (
        piece.piece_type == PieceType.PAWN
        and move.start.rank == color.pawn_rank
        and move.end.rank == color.double_step_rank
    ):
        return move.end.offset(0, -color.pawn_direction)
    return None


NORMAL_STARTING_CONDITIONS = GameConditions(
    white_to_move=True,
    white_can_castle_kingside=True,
    white_can_castle_queenside=True,
    black_can_castle_kingside=True,
    black_can_castle_queenside=True,
    en_passant_square=None,
    half_move_clock=0,
    turn_number=1,
)
