"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from trekk.core.enums import Color, GameResult
from trekk.core.move_generator import MoveGenerator
from trekk.core.state import BoardState


class Rules:
    """Static rule-checker that operates on a :class:`BoardState`.

    Repetition and move-count draws are not tracked; the only draw reported
    is stalemate.
    """

    @staticmethod
    def is_in_check(state: BoardState) -> bool:
        return MoveGenerator(state).is_in_check(state.side_to_move)

    @staticmethod
    def is_checkmate(state: BoardState) -> bool:
        gen = MoveGenerator(state)
        return gen.is_in_check() and not gen.generate_legal_moves()

    @staticmethod
    def is_stalemate(state: BoardState) -> bool:
        gen = MoveGenerator(state)
        return not gen.is_in_check() and not gen.generate_legal_moves()

    @staticmethod
    def game_result(state: BoardState) -> GameResult:
        """Determine the result of *state* for the side to move."""
        gen = MoveGenerator(state)
        if gen.generate_legal_moves():
            return GameResult.IN_PROGRESS

        if gen.is_in_check(state.side_to_move):
            return (
                GameResult.BLACK_WINS
                if state.side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
