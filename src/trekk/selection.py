"""Move selection: who picks one move out of the legal list.

The command line depends on :class:`MoveSelector`, not on a concrete
strategy, so a search engine can replace :class:`FirstMoveSelector`
without touching the generator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from trekk.core.move import Move
    from trekk.core.state import BoardState


class MoveSelector(ABC):
    """Interface for anything that chooses the move to play."""

    @abstractmethod
    def select(self, state: BoardState, moves: Sequence[Move]) -> Move | None:
        """Return one of *moves*, or ``None`` when *moves* is empty."""


class FirstMoveSelector(MoveSelector):
    """Placeholder strategy: the first legal move in generation order."""

    __slots__ = ()

    def select(self, state: BoardState, moves: Sequence[Move]) -> Move | None:
        return moves[0] if moves else None
