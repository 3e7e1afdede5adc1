"""Exception hierarchy for the move-generation core."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for every error raised by :mod:`trekk.core`."""


class OutOfBoardError(ChessError, ValueError):
    """A row, column or square name outside the 8x8 board."""

    def __init__(self, value: object, what: str = "coordinate") -> None:
        super().__init__(f"Out of board {what}: {value!r}")
        self.value = value


class AmbiguousNotationError(ChessError, ValueError):
    """Two different moves would be rendered to the same text."""

    def __init__(self, text: str, moves: tuple[object, ...]) -> None:
        super().__init__(f"Ambiguous notation {text!r} for moves {list(moves)}")
        self.text = text
        self.moves = moves


class IllegalMoveError(ChessError, ValueError):
    """A move cannot be applied to (or described in) the given position."""


class BoardInvariantError(ChessError, RuntimeError):
    """Board construction produced an impossible position.

    This signals a bug in whoever built the board, not a bad user input.
    """
