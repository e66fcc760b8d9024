"""HalfMove — the record of one ply, as needed to advance game conditions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.move import EnPassantMove, Move
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules

if TYPE_CHECKING:
    from chessrules.core.board import Board


@dataclass(frozen=True, slots=True)
class HalfMove:
    """One side's move: who moved, from where to where, and what it did.

    ``piece`` is a snapshot of the mover taken before the move, so a promoted
    pawn is still recorded as a pawn standing on its start square.
    """

    piece: Piece
    move: Move
    captured_piece: bool = False
    caused_check: bool = False

    def __str__(self) -> str:
        suffix = "+" if self.caused_check else ""
        sep = "x" if self.captured_piece else "-"
        return f"{self.piece}{self.move.start}{sep}{self.move.end}{suffix}"


def make_half_move(board: Board, move: Move) -> HalfMove:
    """Apply *move* to *board* and return its record.

    The move is trusted to be legal, as with :meth:`Board.move_piece`.
    """
    piece = board[move.start]
    if piece is None:
        raise ValueError(f"No piece was found at the given square: {move.start}")

    snapshot = piece.copy()
    captured = board.is_occupied(move.end) or isinstance(move, EnPassantMove)
    board.move_piece(move)
    return HalfMove(
        piece=snapshot,
        move=move,
        captured_piece=captured,
        caused_check=Rules.is_in_check(board, snapshot.color.opposite),
    )
