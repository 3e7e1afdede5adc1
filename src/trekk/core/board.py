"""Board - immutable piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence

from trekk.core.enums import Color, PieceKind
from trekk.core.errors import BoardInvariantError
from trekk.core.piece import Piece
from trekk.core.types import ALL_SQUARES, BOARD_SIZE, Square

_CELL_COUNT = BOARD_SIZE * BOARD_SIZE

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Immutable 64-square board.

    Every "mutation" returns a new :class:`Board`; the cells are stored in a
    tuple indexed row-major (a1=0 … h8=63), so a snapshot can be shared
    freely between move-generation stages.
    """

    __slots__ = ("_squares",)

    def __init__(self, cells: Iterable[Piece | None] | None = None) -> None:
        squares = tuple(cells) if cells is not None else (None,) * _CELL_COUNT
        if len(squares) != _CELL_COUNT:
            raise BoardInvariantError(f"Board needs {_CELL_COUNT} cells, got {len(squares)}")
        self._squares: tuple[Piece | None, ...] = squares

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` pairs in row-major order."""
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece is not None and (color is None or piece.color == color):
                yield sq, piece

    def pieces(self, color: Color, kind: PieceKind) -> list[Square]:
        """Squares occupied by *color*'s *kind*, row-major."""
        return [sq for sq, piece in self.occupied(color) if piece.kind == kind]

    def find_king(self, color: Color) -> Square | None:
        """The king square for *color*, or ``None`` when the king is absent."""
        kings = self.pieces(color, PieceKind.KING)
        if len(kings) > 1:
            raise BoardInvariantError(f"{color.name} has {len(kings)} kings")
        return kings[0] if kings else None

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        sq = self.find_king(color)
        if sq is None:
            raise BoardInvariantError(f"No {color.name} king on board")
        return sq

    # -- Derivation ---------------------------------------------------------

    def replace(self, changes: Mapping[Square, Piece | None]) -> Board:
        """New board with *changes* applied; ``None`` empties a square."""
        cells = list(self._squares)
        for sq, piece in changes.items():
            cells[sq.index] = piece
        return Board(cells)

    def rows(self) -> tuple[tuple[Piece | None, ...], ...]:
        """The grid as eight rows, row 0 (rank 1) first."""
        return tuple(
            self._squares[r * BOARD_SIZE : (r + 1) * BOARD_SIZE] for r in range(BOARD_SIZE)
        )

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        placements: list[tuple[Square, Piece]] = []
        for column, kind in enumerate(_BACK_RANK):
            placements.append((Square(0, column), Piece(Color.WHITE, kind)))
            placements.append((Square(1, column), Piece(Color.WHITE, PieceKind.PAWN)))
            placements.append((Square(6, column), Piece(Color.BLACK, PieceKind.PAWN)))
            placements.append((Square(7, column), Piece(Color.BLACK, kind)))
        return cls.from_pieces(placements)

    @classmethod
    def from_pieces(cls, placements: Iterable[tuple[Square, Piece]]) -> Board:
        """Build a board from ``(square, piece)`` pairs.

        Placing two pieces on one square is a construction bug and raises
        :class:`BoardInvariantError`.
        """
        cells: list[Piece | None] = [None] * _CELL_COUNT
        for sq, piece in placements:
            if cells[sq.index] is not None:
                raise BoardInvariantError(f"Two pieces placed on {sq.name}")
            cells[sq.index] = piece
        return cls(cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Piece | None]]) -> Board:
        """Build a board from an 8x8 grid, row 0 being rank 1."""
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise BoardInvariantError("Board grid must be 8 rows of 8 cells")
        return cls(cell for row in rows for cell in row)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                p = self._squares[rank * BOARD_SIZE + file]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
