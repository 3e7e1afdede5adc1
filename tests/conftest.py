"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from trekk.core.board import Board
from trekk.core.enums import CastlingRights, Color
from trekk.core.piece import Piece
from trekk.core.state import BoardState
from trekk.core.types import Square


@pytest.fixture
def initial_state() -> BoardState:
    return BoardState.initial()


@pytest.fixture
def lone_state() -> Callable[..., BoardState]:
    """Build a rights-free position from ``(square, piece)`` pairs."""
    def build(*placements: tuple[Square, Piece], side: Color = Color.WHITE) -> BoardState:
        return BoardState(Board.from_pieces(placements), side, CastlingRights.NONE)

    return build


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment settings out of the tests."""
    monkeypatch.delenv("TREKK_LANGUAGE", raising=False)
    monkeypatch.delenv("TREKK_LOG_LEVEL", raising=False)
