"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

from chessrules.core.board import Board
from chessrules.core.piece import Piece
from chessrules.core.types import Square


def _board_from_rows(rows: Sequence[str]) -> Board:
    """Build a board from eight rank strings, rank 8 first; '.' is empty."""
    assert len(rows) == 8
    placements: list[tuple[Square, Piece]] = []
    for rank, row in zip(range(8, 0, -1), rows):
        assert len(row) == 8, row
        for file, char in enumerate(row, start=1):
            if char != ".":
                placements.append((Square(file, rank), Piece.from_char(char)))
    return Board(placements)


@pytest.fixture
def make_board() -> Callable[[Sequence[str]], Board]:
    """Factory turning a diagram into a board of unmoved pieces."""
    return _board_from_rows
