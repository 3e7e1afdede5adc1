"""Perft: leaf-node counts of the legal move tree.

Reference values: https://www.chessprogramming.org/Perft_Results
"""

from __future__ import annotations

from trekk.core.move_generator import legal_moves
from trekk.core.state import BoardState


def perft(state: BoardState, depth: int) -> int:
    """Count leaf nodes at *depth*."""
    if depth < 0:
        raise ValueError(f"Perft depth must be >= 0, got {depth}")
    if depth == 0:
        return 1
    moves = legal_moves(state)
    if depth == 1:
        return len(moves)
    return sum(perft(state.apply(move), depth - 1) for move in moves)


def perft_divide(state: BoardState, depth: int) -> dict[str, int]:
    """Per-root-move node counts keyed by UCI text."""
    if depth < 1:
        raise ValueError(f"Perft divide depth must be >= 1, got {depth}")
    return {move.uci: perft(state.apply(move), depth - 1) for move in legal_moves(state)}
