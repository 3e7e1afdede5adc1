"""BoardState: board plus side to move, castling rights and en passant."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from trekk.core.board import Board
from trekk.core.enums import CastlingRights, Color, MoveFlag, PieceKind
from trekk.core.errors import IllegalMoveError
from trekk.core.move import Move
from trekk.core.piece import Piece
from trekk.core.types import Square

_ROOK_CORNERS: dict[Square, CastlingRights] = {
    Square(0, 0): CastlingRights.WHITE_QUEENSIDE,
    Square(0, 7): CastlingRights.WHITE_KINGSIDE,
    Square(7, 0): CastlingRights.BLACK_QUEENSIDE,
    Square(7, 7): CastlingRights.BLACK_KINGSIDE,
}


def castling_rook_squares(color: Color, flag: MoveFlag) -> tuple[Square, Square]:
    """``(rook_from, rook_to)`` for a castling move of *color*."""
    row = color.home_row
    if flag == MoveFlag.CASTLE_KINGSIDE:
        return Square(row, 7), Square(row, 5)
    return Square(row, 0), Square(row, 3)


@dataclass(frozen=True, slots=True)
class BoardState:
    """Full chess position, immutable.

    :meth:`apply` returns the successor position and leaves ``self`` alone,
    so the legality filter can try a move on a throwaway copy.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    @classmethod
    def initial(cls) -> BoardState:
        return cls(Board.initial())

    def with_side_to_move(self, color: Color) -> BoardState:
        if color == self.side_to_move:
            return self
        return replace(self, side_to_move=color, en_passant=None)

    # ── Move application ─────────────────────────────────────────────────

    def apply(self, move: Move) -> BoardState:
        """Successor position after *move* (assumed pseudo-legal)."""
        piece = self.board[move.from_sq]
        if piece is None:
            raise IllegalMoveError(f"No piece on {move.from_sq.name}")
        if piece.kind != move.kind:
            raise IllegalMoveError(
                f"{move.from_sq.name} holds a {piece.kind.name.lower()}, "
                f"not a {move.kind.name.lower()}"
            )

        changes: dict[Square, Piece | None] = {move.from_sq: None}
        captured = self.board[move.to_sq]

        # En passant: the captured pawn sits beside the origin
        if move.flag == MoveFlag.EN_PASSANT:
            ep_capture_sq = Square(move.from_sq.row, move.to_sq.column)
            captured = self.board[ep_capture_sq]
            changes[ep_capture_sq] = None

        placed = piece if move.promotion is None else Piece(piece.color, move.promotion)
        changes[move.to_sq] = placed

        # Slide the rook for castling
        if move.flag.is_castle:
            rook_from, rook_to = castling_rook_squares(piece.color, move.flag)
            changes[rook_from] = None
            changes[rook_to] = self.board[rook_from]

        next_en_passant: Square | None = None
        if move.flag == MoveFlag.DOUBLE_PAWN:
            next_en_passant = Square(
                (move.from_sq.row + move.to_sq.row) // 2, move.from_sq.column
            )

        if piece.kind == PieceKind.PAWN or captured is not None:
            halfmove_clock = 0
        else:
            halfmove_clock = self.halfmove_clock + 1

        fullmove_number = self.fullmove_number
        if piece.color == Color.BLACK:
            fullmove_number += 1

        return BoardState(
            board=self.board.replace(changes),
            side_to_move=piece.color.opposite,
            castling=self._next_castling(move, piece),
            en_passant=next_en_passant,
            halfmove_clock=halfmove_clock,
            fullmove_number=fullmove_number,
        )

    def _next_castling(self, move: Move, piece: Piece) -> CastlingRights:
        next_castling = self.castling
        if piece.kind == PieceKind.KING:
            next_castling &= ~CastlingRights.both(piece.color)

        for sq in (move.from_sq, move.to_sq):
            if sq in _ROOK_CORNERS:
                next_castling &= ~_ROOK_CORNERS[sq]
        return next_castling
