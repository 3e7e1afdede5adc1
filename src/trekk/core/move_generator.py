"""Position-wide move aggregation: pseudo-legal and legal move lists."""

from __future__ import annotations

import logging

from trekk.core.attacks import is_square_attacked
from trekk.core.enums import Color
from trekk.core.legality import filter_legal, is_in_check
from trekk.core.move import Move
from trekk.core.piece_rules import moves_for_piece
from trekk.core.state import BoardState
from trekk.core.types import Square

_LOGGER = logging.getLogger(__name__)


class MoveGenerator:
    """Generates moves for one :class:`BoardState` snapshot.

    Pieces are visited row by row (rank 1 first), a to h within a row, and
    each piece's moves keep the order its rule produced them in.
    """

    __slots__ = ("_state",)

    def __init__(self, state: BoardState) -> None:
        self._state = state

    @property
    def state(self) -> BoardState:
        return self._state

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, color: Color | None = None) -> list[Move]:
        """All strictly legal moves for *color* (default: side to move)."""
        state = self._state
        color = state.side_to_move if color is None else color
        legal: list[Move] = []
        for sq, piece in state.board.occupied(color):
            legal.extend(filter_legal(state, moves_for_piece(state, piece, sq)))
        _LOGGER.debug("%d legal moves for %s", len(legal), color)
        return legal

    def generate_pseudo_legal_moves(self, color: Color | None = None) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        state = self._state
        color = state.side_to_move if color is None else color
        moves: list[Move] = []
        for sq, piece in state.board.occupied(color):
            moves.extend(moves_for_piece(state, piece, sq))
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_in_check(self, color: Color | None = None) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return is_in_check(self._state, color)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return is_square_attacked(self._state.board, sq, by_color)


def legal_moves(state: BoardState, color: Color | None = None) -> list[Move]:
    """Ordered legal moves of *color* (default: side to move) in *state*."""
    return MoveGenerator(state).generate_legal_moves(color)
