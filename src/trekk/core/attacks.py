"""Attack detection and shared geometry tables."""

from __future__ import annotations

from trekk.core.board import Board
from trekk.core.enums import Color, PieceKind
from trekk.core.types import ALL_SQUARES, Square

Offsets = tuple[tuple[int, int], ...]

# (d_row, d_column)
KNIGHT_OFFSETS: Offsets = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: Offsets = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: Offsets = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: Offsets = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: Offsets = BISHOP_DIRS + ROOK_DIRS

Rays = tuple[tuple[Square, ...], ...]


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(offsets: Offsets) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in ALL_SQUARES:
        moves = (sq.offset(d_row, d_col) for d_row, d_col in offsets)
        targets[sq] = tuple(to_sq for to_sq in moves if to_sq is not None)
    return targets


def _build_rays(directions: Offsets) -> dict[Square, Rays]:
    rays_per_square: dict[Square, Rays] = {}
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for d_row, d_col in directions:
            ray: list[Square] = []
            to_sq = sq.offset(d_row, d_col)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = to_sq.offset(d_row, d_col)
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
KING_TARGETS = _build_targets(KING_OFFSETS)

BISHOP_RAYS = _build_rays(BISHOP_DIRS)
ROOK_RAYS = _build_rays(ROOK_DIRS)
QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_DIAGONAL_SLIDERS = (PieceKind.BISHOP, PieceKind.QUEEN)
_ORTHOGONAL_SLIDERS = (PieceKind.ROOK, PieceKind.QUEEN)


def pawn_attack_targets(sq: Square, color: Color) -> tuple[Square, ...]:
    """Squares a *color* pawn on *sq* attacks (diagonally forward)."""
    targets = (sq.offset(color.forward, -1), sq.offset(color.forward, 1))
    return tuple(to_sq for to_sq in targets if to_sq is not None)


# -- Attack detection (public) -----------------------------------------------


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?

    Looks outward from *sq* for each kind of attacker, so the answer holds
    for empty squares too (castling transit squares). Castling itself never
    attacks anything.
    """
    # A by_color pawn attacks sq from one row behind it.
    for from_sq in pawn_attack_targets(sq, by_color.opposite):
        piece = board[from_sq]
        if piece is not None and piece.color == by_color and piece.kind == PieceKind.PAWN:
            return True

    for from_sq in KNIGHT_TARGETS[sq]:
        piece = board[from_sq]
        if piece is not None and piece.color == by_color and piece.kind == PieceKind.KNIGHT:
            return True

    for from_sq in KING_TARGETS[sq]:
        piece = board[from_sq]
        if piece is not None and piece.color == by_color and piece.kind == PieceKind.KING:
            return True

    return _ray_attacked(board, BISHOP_RAYS[sq], by_color, _DIAGONAL_SLIDERS) or _ray_attacked(
        board, ROOK_RAYS[sq], by_color, _ORTHOGONAL_SLIDERS
    )


def _ray_attacked(
    board: Board,
    rays: Rays,
    by_color: Color,
    sliders: tuple[PieceKind, ...],
) -> bool:
    for ray in rays:
        for to_sq in ray:
            piece = board[to_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.kind in sliders:
                return True
            break
    return False


def is_king_attacked(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?"""
    king_sq = board.king_square(color)
    return is_square_attacked(board, king_sq, color.opposite)
