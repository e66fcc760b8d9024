"""Starting layouts: the standard setup and Chess960 (Fischer Random).

A layout is a list of ``(Square, Piece)`` pairs ready to be handed to
:class:`~chessrules.core.board.Board`. Every call builds fresh pieces, so two
boards never share piece instances.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import TypeAlias

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square

_LOGGER = logging.getLogger(__name__)

Layout: TypeAlias = "list[tuple[Square, Piece]]"

STANDARD_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_FILES = range(1, BOARD_SIZE + 1)


def _mirrored_layout(back_rank: Sequence[PieceType]) -> Layout:
    """Place *back_rank* (a-file first) for both sides plus full pawn ranks."""
    layout: Layout = []
    for color in Color:
        for file, piece_type in zip(_FILES, back_rank):
            layout.append((Square(file, color.back_rank), Piece(color, piece_type)))
        for file in _FILES:
            layout.append((Square(file, color.pawn_rank), Piece(color, PieceType.PAWN)))
    return layout


def starting_layout() -> Layout:
    """The 32 pieces of the standard starting position."""
    return _mirrored_layout(STANDARD_BACK_RANK)


def generate_960_layout(rng: random.Random | None = None) -> Layout:
    """Random Chess960 starting layout.

    Bishops go first (one on an even file index, one on an odd one, so they
    stand on opposite colours). The king is then drawn only from positions
    that leave room for a rook on both sides, and the second rook is drawn
    from the side the first one is not on. Knights and queen fill the rest.
    The same back rank is used for both sides.

    Args:
        rng: Source of randomness; a fresh unseeded ``random.Random`` when
            omitted. Pass a seeded instance for reproducible layouts.
    """
    rng = rng if rng is not None else random.Random()
    back_rank: dict[int, PieceType] = {}
    free = list(_FILES)

    # 0 1 2 3 4 5 6 7
    first_bishop = free[rng.randrange(4) * 2]
    second_bishop = free[rng.randrange(4) * 2 + 1]
    free.remove(first_bishop)
    free.remove(second_bishop)
    back_rank[first_bishop] = PieceType.BISHOP
    back_rank[second_bishop] = PieceType.BISHOP

    # 0 1 2 3 4 5
    rook_idx = rng.randrange(len(free))
    if rook_idx <= 1:
        # Not enough room on the left: the king goes right of the rook.
        king_choices: Sequence[int] = range(rook_idx + 1, len(free) - 1)
    elif rook_idx >= len(free) - 2:
        # Not enough room on the right: the king goes left of the rook.
        king_choices = range(1, rook_idx)
    else:
        king_choices = [i for i in range(1, len(free) - 1) if i != rook_idx]
    king_idx = rng.choice(king_choices)

    if king_idx < rook_idx:
        second_rook_idx = rng.randrange(0, king_idx)
    else:
        second_rook_idx = rng.randrange(king_idx + 1, len(free))

    back_rank[free[rook_idx]] = PieceType.ROOK
    back_rank[free[king_idx]] = PieceType.KING
    back_rank[free[second_rook_idx]] = PieceType.ROOK
    free = [f for f in free if f not in back_rank]

    # 0 1 2
    for knight_file in rng.sample(free, 2):
        back_rank[knight_file] = PieceType.KNIGHT
        free.remove(knight_file)

    # 0
    back_rank[free[0]] = PieceType.QUEEN

    ordered = [back_rank[f] for f in _FILES]
    _LOGGER.debug(
        "Generated Chess960 back rank: %s",
        "".join(str(Piece(Color.WHITE, pt)) for pt in ordered),
    )
    return _mirrored_layout(ordered)


def validate_960_layout(layout: Sequence[tuple[Square, Piece]]) -> None:
    """Raise ``ValueError`` if *layout* is not a legal Chess960 setup."""
    if len(layout) != 4 * BOARD_SIZE:
        raise ValueError(f"Expected 32 pieces, got {len(layout)}")

    back_ranks: dict[Color, dict[int, PieceType]] = {c: {} for c in Color}
    pawn_files: dict[Color, set[int]] = {c: set() for c in Color}
    for square, piece in layout:
        if piece.piece_type == PieceType.PAWN and square.rank == piece.color.pawn_rank:
            pawn_files[piece.color].add(square.file)
        elif piece.piece_type != PieceType.PAWN and square.rank == piece.color.back_rank:
            back_ranks[piece.color][square.file] = piece.piece_type
        else:
            raise ValueError(f"Misplaced {piece.color} {piece.piece_type.name} on {square}")

    for color in Color:
        if pawn_files[color] != set(_FILES):
            raise ValueError(f"{color} pawns do not fill rank {color.pawn_rank}")

        rank = back_ranks[color]
        if len(rank) != BOARD_SIZE or sorted(rank.values()) != sorted(STANDARD_BACK_RANK):
            raise ValueError(f"{color} back rank is not a full set of pieces")

        bishops = [f for f, pt in rank.items() if pt == PieceType.BISHOP]
        if bishops[0] % 2 == bishops[1] % 2:
            raise ValueError(f"{color} bishops share a square colour")

        rooks = sorted(f for f, pt in rank.items() if pt == PieceType.ROOK)
        king = next(f for f, pt in rank.items() if pt == PieceType.KING)
        if not rooks[0] < king < rooks[1]:
            raise ValueError(f"{color} king is not between its rooks")

    if back_ranks[Color.WHITE] != back_ranks[Color.BLACK]:
        raise ValueError("White and black back ranks differ")
