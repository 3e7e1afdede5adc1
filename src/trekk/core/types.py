"""Square value type and coordinate helpers.

Board layout (row-major, White's point of view):
    row 0 = rank 1, row 7 = rank 8
    column 0 = file 'a', column 7 = file 'h'
"""

from __future__ import annotations

from dataclasses import dataclass

from trekk.core.errors import OutOfBoardError

BOARD_SIZE = 8
FILES = "abcdefgh"


def _on_board(value: int) -> bool:
    return isinstance(value, int) and 0 <= value < BOARD_SIZE


def column_to_letter(column: int) -> str:
    """File letter for *column*, e.g. 0 → 'a'."""
    if not _on_board(column):
        raise OutOfBoardError(column, "column")
    return FILES[column]


def letter_to_column(letter: str) -> int:
    """Column index for a file letter, e.g. 'h' → 7."""
    if len(letter) != 1 or letter not in FILES:
        raise OutOfBoardError(letter, "file")
    return FILES.index(letter)


def rank_text(row: int) -> str:
    """Rank number as text, e.g. 0 → '1'."""
    if not _on_board(row):
        raise OutOfBoardError(row, "row")
    return str(row + 1)


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable board coordinate."""

    row: int
    column: int

    def __post_init__(self) -> None:
        if not _on_board(self.row):
            raise OutOfBoardError(self.row, "row")
        if not _on_board(self.column):
            raise OutOfBoardError(self.column, "column")

    @property
    def index(self) -> int:
        """Row-major index 0–63 (a1=0, h8=63)."""
        return self.row * BOARD_SIZE + self.column

    @property
    def name(self) -> str:
        return FILES[self.column] + str(self.row + 1)

    def offset(self, d_row: int, d_column: int) -> Square | None:
        """Neighbouring square, or ``None`` when it falls off the board."""
        row = self.row + d_row
        column = self.column + d_column
        if 0 <= row < BOARD_SIZE and 0 <= column < BOARD_SIZE:
            return Square(row, column)
        return None

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Square({self.name})"


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. Square(0, 0) → 'a1'."""
    return sq.name


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(3, 4)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
        raise OutOfBoardError(name, "square name")
    return Square(int(name[1]) - 1, FILES.index(name[0]))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, column) for row in range(BOARD_SIZE) for column in range(BOARD_SIZE)
)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
