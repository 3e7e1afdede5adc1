"""Legality filter: drop candidates that leave the mover's king attacked."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from trekk.core.attacks import is_king_attacked
from trekk.core.enums import Color
from trekk.core.errors import IllegalMoveError
from trekk.core.move import Move
from trekk.core.state import BoardState

_LOGGER = logging.getLogger(__name__)


def is_in_check(state: BoardState, color: Color | None = None) -> bool:
    """Is *color*'s king (default: side to move) attacked right now?"""
    if color is None:
        color = state.side_to_move
    return is_king_attacked(state.board, color)


def is_legal(state: BoardState, move: Move) -> bool:
    """Would the mover's king be safe after *move*?

    *move* must be pseudo-legal in *state*; the successor position is built
    and thrown away.
    """
    piece = state.board[move.from_sq]
    if piece is None:
        raise IllegalMoveError(f"No piece on {move.from_sq.name}")
    successor = state.apply(move)
    return not is_king_attacked(successor.board, piece.color)


def filter_legal(state: BoardState, moves: Iterable[Move]) -> list[Move]:
    """Keep the legal moves of *moves*, preserving order."""
    legal: list[Move] = []
    for move in moves:
        if is_legal(state, move):
            legal.append(move)
        else:
            _LOGGER.debug("Rejected %s: leaves king attacked", move.uci)
    return legal
