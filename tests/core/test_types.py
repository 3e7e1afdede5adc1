"""Tests for Square and coordinate conversion."""

import pytest

from trekk.core.errors import OutOfBoardError
from trekk.core.types import (
    A1,
    ALL_SQUARES,
    E4,
    F5,
    H8,
    Square,
    column_to_letter,
    letter_to_column,
    parse_square,
    rank_text,
    square_name,
)


class TestColumnLetters:
    def test_roundtrip_every_column(self) -> None:
        for column in range(8):
            assert letter_to_column(column_to_letter(column)) == column

    def test_known_letters(self) -> None:
        assert column_to_letter(0) == "a"
        assert column_to_letter(7) == "h"

    @pytest.mark.parametrize("column", [-1, 8, 100])
    def test_out_of_board_column_fails(self, column: int) -> None:
        with pytest.raises(OutOfBoardError):
            column_to_letter(column)

    def test_out_of_board_is_a_value_error(self) -> None:
        with pytest.raises(ValueError, match="Out of board"):
            column_to_letter(8)

    def test_unknown_letter_fails(self) -> None:
        with pytest.raises(OutOfBoardError):
            letter_to_column("i")


class TestRankText:
    def test_row_zero_is_rank_one(self) -> None:
        assert rank_text(0) == "1"
        assert rank_text(7) == "8"

    def test_out_of_board_row_fails(self) -> None:
        with pytest.raises(OutOfBoardError):
            rank_text(8)


class TestSquare:
    def test_constructor_rejects_out_of_range(self) -> None:
        with pytest.raises(OutOfBoardError):
            Square(8, 0)
        with pytest.raises(OutOfBoardError):
            Square(0, -1)

    def test_name(self) -> None:
        assert square_name(A1) == "a1"
        assert E4.name == "e4"
        assert str(H8) == "h8"

    def test_parse(self) -> None:
        assert parse_square("e4") == Square(3, 4) == E4

    @pytest.mark.parametrize("text", ["i1", "a9", "e", "e44", ""])
    def test_parse_rejects_malformed(self, text: str) -> None:
        with pytest.raises(OutOfBoardError):
            parse_square(text)

    def test_offset(self) -> None:
        assert E4.offset(1, 1) == F5
        assert H8.offset(1, 0) is None
        assert A1.offset(0, -1) is None

    def test_all_squares_row_major(self) -> None:
        assert len(ALL_SQUARES) == 64
        assert [sq.index for sq in ALL_SQUARES] == list(range(64))
        assert ALL_SQUARES[0] == A1
        assert ALL_SQUARES[-1] == H8
