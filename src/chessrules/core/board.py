"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Iterator
from typing import TypeAlias

from chessrules.core.enums import Color, PieceType
from chessrules.core.layout import generate_960_layout, starting_layout
from chessrules.core.move import Move, SpecialMove
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square

_LOGGER = logging.getLogger(__name__)

BoardKey: TypeAlias = "Square | tuple[int, int]"


class Board:
    """Mutable 8x8 grid of pieces with a per-side king square cache.

    The board owns every piece it holds. Writing a piece into a cell sets the
    piece's ``position``; writing a king refreshes that side's cache entry,
    and overwriting the cached king square invalidates it so the next
    :meth:`king_square` call rescans.
    """

    __slots__ = ("_squares", "_king_squares")

    def __init__(self, placements: Iterable[tuple[Square, Piece]] = ()) -> None:
        # [file-1][rank-1] -> piece or None.
        self._squares: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        # [color] -> king square cache (None if unknown or king missing).
        self._king_squares: dict[Color, Square | None] = {
            Color.WHITE: None,
            Color.BLACK: None,
        }
        for square, piece in placements:
            self[square] = piece

    @staticmethod
    def _resolve(key: BoardKey) -> Square:
        square = Square(*key) if isinstance(key, tuple) else key
        if not square.is_valid:
            raise IndexError(f"Square out of range: {square}")
        return square

    # -- Element access -----------------------------------------------------

    def __getitem__(self, key: BoardKey) -> Piece | None:
        square = self._resolve(key)
        return self._squares[square.file - 1][square.rank - 1]

    def __setitem__(self, key: BoardKey, piece: Piece | None) -> None:
        square = self._resolve(key)
        old_piece = self._squares[square.file - 1][square.rank - 1]
        if (
            old_piece is not None
            and old_piece is not piece
            and old_piece.piece_type == PieceType.KING
            and self._king_squares[old_piece.color] == square
        ):
            self._king_squares[old_piece.color] = None

        self._squares[square.file - 1][square.rank - 1] = piece

        if piece is None:
            return

        piece.position = square
        if piece.piece_type == PieceType.KING:
            self._king_squares[piece.color] = square

    def is_occupied(self, key: BoardKey) -> bool:
        return self[key] is not None

    def is_occupied_by(self, key: BoardKey, color: Color) -> bool:
        piece = self[key]
        return piece is not None and piece.color == color

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, optionally for one side only."""
        for file_idx, column in enumerate(self._squares):
            for rank_idx, piece in enumerate(column):
                if piece is None:
                    continue
                if color is None or piece.color == color:
                    yield Square(file_idx + 1, rank_idx + 1), piece

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or None when it has no king."""
        if self._king_squares[color] is None:
            _LOGGER.debug("Rebuilding king square cache for %s", color)
            for square, piece in self.pieces():
                if piece.piece_type == PieceType.KING:
                    self._king_squares[piece.color] = square
        return self._king_squares[color]

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, move: Move) -> None:
        """Relocate the piece on ``move.start`` and apply any special effect.

        Legality is the caller's business; whatever stood on ``move.end`` is
        discarded.
        """
        piece = self[move.start]
        if piece is None:
            raise ValueError(f"No piece was found at the given square: {move.start}")
        if isinstance(move, SpecialMove):
            move.check(self)

        self[move.start] = None
        self[move.end] = piece
        piece.has_moved = True

        if isinstance(move, SpecialMove):
            move.apply_side_effect(self)

    def copy(self) -> Board:
        """Deep copy: the new board owns independent piece instances."""
        b = Board()
        b._squares = [
            [piece.copy() if piece is not None else None for piece in column]
            for column in self._squares
        ]
        b._king_squares = self._king_squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._king_squares = {Color.WHITE: None, Color.BLACK: None}

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        return cls(starting_layout())

    @classmethod
    def chess960(cls, rng: random.Random | None = None) -> Board:
        """Random Fischer Random starting position."""
        return cls(generate_960_layout(rng))

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def to_text(self) -> str:
        """Diagnostic rendering: rank 8 on top, pipe-separated cells."""
        rows: list[str] = []
        for rank in range(BOARD_SIZE, 0, -1):
            cells = []
            for file in range(1, BOARD_SIZE + 1):
                p = self[file, rank]
                cells.append(str(p) if p is not None else " ")
            rows.append(f"{'|'.join(cells)}\t {rank}")
        rows.append("a b c d e f g h")
        return "\n".join(rows)

    __str__ = to_text

    def __repr__(self) -> str:
        return f"Board(\n{self.to_text()}\n)"
