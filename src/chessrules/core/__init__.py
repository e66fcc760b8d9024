"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, GameConditions, Rules, make_half_move

    board = Board.initial()
    conditions = GameConditions.normal_starting()
    move = Rules.generate_legal_moves(board, conditions.side_to_move, conditions)[0]
    conditions = conditions.calculate_ending_conditions(board, make_half_move(board, move))
"""

from chessrules.core.board import Board
from chessrules.core.conditions import NORMAL_STARTING_CONDITIONS, GameConditions
from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.half_move import HalfMove, make_half_move
from chessrules.core.layout import (
    STANDARD_BACK_RANK,
    generate_960_layout,
    starting_layout,
    validate_960_layout,
)
from chessrules.core.move import (
    CastlingMove,
    EnPassantMove,
    Move,
    PromotionMove,
    SpecialMove,
)
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square, all_squares, parse_square

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "all_squares",
    "parse_square",
    # Domain objects
    "Board",
    "CastlingMove",
    "EnPassantMove",
    "HalfMove",
    "Move",
    "MoveGenerator",
    "Piece",
    "PromotionMove",
    "Rules",
    "SpecialMove",
    # Game conditions
    "GameConditions",
    "NORMAL_STARTING_CONDITIONS",
    "make_half_move",
    # Layouts
    "STANDARD_BACK_RANK",
    "generate_960_layout",
    "starting_layout",
    "validate_960_layout",
]
