"""Tests for Square and coordinate helpers."""

import pytest

from chessrules.core.types import A1, E4, H8, Square, all_squares, parse_square


class TestSquare:
    def test_validity_bounds(self) -> None:
        assert Square(1, 1).is_valid
        assert Square(8, 8).is_valid
        assert not Square(0, 4).is_valid
        assert not Square(4, 9).is_valid

    def test_value_equality_and_hash(self) -> None:
        assert Square(5, 4) == E4
        assert len({Square(5, 4), E4, parse_square("e4")}) == 1

    def test_offset_may_leave_board(self) -> None:
        assert E4.offset(1, 2) == Square(6, 6)
        assert not H8.offset(1, 0).is_valid

    def test_name(self) -> None:
        assert A1.name == "a1"
        assert str(H8) == "h8"

    def test_square_colour(self) -> None:
        assert not A1.is_light
        assert H8.is_light is False
        assert Square(2, 1).is_light


class TestParseSquare:
    def test_round_trip_names(self) -> None:
        for sq in all_squares():
            assert parse_square(sq.name) == sq

    def test_all_squares_count(self) -> None:
        squares = all_squares()
        assert len(squares) == 64
        assert squares[0] == A1
        assert squares[-1] == H8

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "e44", "E4"])
    def test_invalid_names(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)
