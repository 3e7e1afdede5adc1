"""Per-kind movement rules producing pseudo-legal moves.

Each rule is a plain function ``(state, color, origin) -> list[Move]``. Rules
read the :class:`~trekk.core.state.BoardState` snapshot and never change it;
king safety is left to :mod:`trekk.core.legality`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from trekk.core.attacks import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    QUEEN_RAYS,
    ROOK_RAYS,
    Rays,
    is_square_attacked,
    pawn_attack_targets,
)
from trekk.core.enums import CastlingRights, Color, MoveFlag, PieceKind
from trekk.core.errors import BoardInvariantError
from trekk.core.move import Move
from trekk.core.piece import Piece
from trekk.core.state import BoardState
from trekk.core.types import Square

PieceRule = Callable[[BoardState, Color, Square], list[Move]]

PROMOTION_KINDS: tuple[PieceKind, ...] = (
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.ROOK,
    PieceKind.QUEEN,
)


def _is_opponent(piece: Piece | None, color: Color) -> bool:
    return piece is not None and piece.color != color


# -- Pawn --------------------------------------------------------------------


def _pawn_append(
    moves: list[Move],
    origin: Square,
    to_sq: Square,
    color: Color,
    capture: bool,
    flag: MoveFlag = MoveFlag.NORMAL,
) -> None:
    if to_sq.row == color.opposite.home_row:
        for kind in PROMOTION_KINDS:
            moves.append(Move(PieceKind.PAWN, origin, to_sq, capture, kind))
    else:
        moves.append(Move(PieceKind.PAWN, origin, to_sq, capture, flag=flag))


def _can_capture_en_passant(
    state: BoardState, color: Color, origin: Square, cap_sq: Square
) -> bool:
    """Only the side to move may capture, onto an empty target beside the pushed pawn."""
    board = state.board
    return (
        cap_sq == state.en_passant
        and color == state.side_to_move
        and board.is_empty(cap_sq)
        and board[Square(origin.row, cap_sq.column)] == Piece(color.opposite, PieceKind.PAWN)
    )


def pawn_moves(state: BoardState, color: Color, origin: Square) -> list[Move]:
    board = state.board
    moves: list[Move] = []
    start_row = color.home_row + color.forward

    one_step = origin.offset(color.forward, 0)
    if one_step is not None and board.is_empty(one_step):
        _pawn_append(moves, origin, one_step, color, capture=False)
        if origin.row == start_row:
            two_step = one_step.offset(color.forward, 0)
            if two_step is not None and board.is_empty(two_step):
                _pawn_append(
                    moves, origin, two_step, color, capture=False, flag=MoveFlag.DOUBLE_PAWN
                )

    for cap_sq in pawn_attack_targets(origin, color):
        if _is_opponent(board[cap_sq], color):
            _pawn_append(moves, origin, cap_sq, color, capture=True)
        elif _can_capture_en_passant(state, color, origin, cap_sq):
            _pawn_append(moves, origin, cap_sq, color, capture=True, flag=MoveFlag.EN_PASSANT)
    return moves


# -- Leapers -----------------------------------------------------------------


def _leaper_moves(
    state: BoardState,
    color: Color,
    origin: Square,
    kind: PieceKind,
    targets: tuple[Square, ...],
) -> list[Move]:
    board = state.board
    moves: list[Move] = []
    for to_sq in targets:
        target = board[to_sq]
        if target is None or target.color != color:
            moves.append(Move(kind, origin, to_sq, target is not None))
    return moves


def knight_moves(state: BoardState, color: Color, origin: Square) -> list[Move]:
    return _leaper_moves(state, color, origin, PieceKind.KNIGHT, KNIGHT_TARGETS[origin])


# -- Sliders -----------------------------------------------------------------


def _sliding_moves(
    state: BoardState,
    color: Color,
    origin: Square,
    kind: PieceKind,
    rays: Rays,
) -> list[Move]:
    board = state.board
    moves: list[Move] = []
    for ray in rays:
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                moves.append(Move(kind, origin, to_sq))
                continue
            if target.color != color:
                moves.append(Move(kind, origin, to_sq, capture=True))
            break
    return moves


def bishop_moves(state: BoardState, color: Color, origin: Square) -> list[Move]:
    return _sliding_moves(state, color, origin, PieceKind.BISHOP, BISHOP_RAYS[origin])


def rook_moves(state: BoardState, color: Color, origin: Square) -> list[Move]:
    return _sliding_moves(state, color, origin, PieceKind.ROOK, ROOK_RAYS[origin])


def queen_moves(state: BoardState, color: Color, origin: Square) -> list[Move]:
    return _sliding_moves(state, color, origin, PieceKind.QUEEN, QUEEN_RAYS[origin])


# -- King --------------------------------------------------------------------


def king_moves(state: BoardState, color: Color, origin: Square) -> list[Move]:
    moves = _leaper_moves(state, color, origin, PieceKind.KING, KING_TARGETS[origin])
    moves.extend(castling_moves(state, color, origin))
    return moves


def castling_moves(state: BoardState, color: Color, origin: Square) -> list[Move]:
    """Castling candidates for a king of *color* standing on *origin*.

    Requires the right, the rook on its corner, empty squares in between,
    and no attack on the king's origin, transit or destination square.
    """
    row = color.home_row
    if origin != Square(row, 4) or not state.castling & CastlingRights.both(color):
        return []

    board = state.board
    opponent = color.opposite
    if is_square_attacked(board, origin, opponent):
        return []

    rook = Piece(color, PieceKind.ROOK)
    moves: list[Move] = []

    if state.castling & CastlingRights.kingside(color):
        f_sq, g_sq = Square(row, 5), Square(row, 6)
        if (
            board[Square(row, 7)] == rook
            and board.is_empty(f_sq)
            and board.is_empty(g_sq)
            and not is_square_attacked(board, f_sq, opponent)
            and not is_square_attacked(board, g_sq, opponent)
        ):
            moves.append(Move(PieceKind.KING, origin, g_sq, flag=MoveFlag.CASTLE_KINGSIDE))

    if state.castling & CastlingRights.queenside(color):
        b_sq, c_sq, d_sq = Square(row, 1), Square(row, 2), Square(row, 3)
        if (
            board[Square(row, 0)] == rook
            and board.is_empty(b_sq)
            and board.is_empty(c_sq)
            and board.is_empty(d_sq)
            and not is_square_attacked(board, c_sq, opponent)
            and not is_square_attacked(board, d_sq, opponent)
        ):
            moves.append(Move(PieceKind.KING, origin, c_sq, flag=MoveFlag.CASTLE_QUEENSIDE))

    return moves


# -- Dispatch ----------------------------------------------------------------

RULES: Mapping[PieceKind, PieceRule] = MappingProxyType(
    {
        PieceKind.PAWN: pawn_moves,
        PieceKind.KNIGHT: knight_moves,
        PieceKind.BISHOP: bishop_moves,
        PieceKind.ROOK: rook_moves,
        PieceKind.QUEEN: queen_moves,
        PieceKind.KING: king_moves,
    }
)


def _check_rules(rules: Mapping[PieceKind, PieceRule]) -> None:
    missing = [kind.name for kind in PieceKind if kind not in rules]
    if missing:
        raise BoardInvariantError(f"No move rule for {missing}")


_check_rules(RULES)


def moves_for_piece(state: BoardState, piece: Piece, origin: Square) -> list[Move]:
    """Pseudo-legal moves of *piece* standing on *origin*."""
    return RULES[piece.kind](state, piece.color, origin)
