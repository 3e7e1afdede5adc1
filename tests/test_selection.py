"""Tests for the move selection interface."""

import pytest

from trekk.core.move_generator import legal_moves
from trekk.core.notation import position_from_fen
from trekk.core.state import BoardState
from trekk.selection import FirstMoveSelector, MoveSelector


class TestFirstMoveSelector:
    def test_picks_first_legal_move(self) -> None:
        state = BoardState.initial()
        moves = legal_moves(state)
        assert FirstMoveSelector().select(state, moves) == moves[0]

    def test_no_moves_gives_none(self) -> None:
        state = position_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert FirstMoveSelector().select(state, legal_moves(state)) is None

    def test_is_a_move_selector(self) -> None:
        assert isinstance(FirstMoveSelector(), MoveSelector)


class TestMoveSelectorInterface:
    def test_cannot_instantiate_abstract(self) -> None:
        with pytest.raises(TypeError):
            MoveSelector()  # type: ignore[abstract]

    def test_custom_selector(self) -> None:
        class LastMoveSelector(MoveSelector):
            def select(self, state, moves):
                return moves[-1] if moves else None

        state = BoardState.initial()
        moves = legal_moves(state)
        assert LastMoveSelector().select(state, moves) == moves[-1]
