"""FEN parsing and serialization."""

from __future__ import annotations

from trekk.core.board import Board
from trekk.core.enums import CastlingRights, Color, PieceKind
from trekk.core.piece import Piece
from trekk.core.state import BoardState
from trekk.core.types import BOARD_SIZE, Square, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_CHARS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}

_PIECES_BY_CHAR: dict[str, Piece] = {
    str(piece): piece for piece in (Piece(color, kind) for color in Color for kind in PieceKind)
}


def position_from_fen(fen: str) -> BoardState:
    """Parse a FEN string into a :class:`BoardState`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    placements: list[tuple[Square, Piece]] = []
    for rank_idx, row_text in enumerate(ranks):
        row = BOARD_SIZE - 1 - rank_idx
        column = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                column += step
            else:
                if column >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                piece = _PIECES_BY_CHAR.get(ch)
                if piece is None:
                    raise ValueError(f"Invalid FEN piece character {ch!r}: {fen!r}")
                placements.append((Square(row, column), piece))
                column += 1
            if column > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if column != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    castling = CastlingRights.NONE
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            right = _CASTLING_CHARS.get(ch)
            if right is None or ch in seen:
                raise ValueError(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            castling |= right

    # 4. En passant
    ep: Square | None = None
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_ep_row = 5 if side == Color.WHITE else 2
        if ep.row != expected_ep_row:
            raise ValueError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )

    # 5–6. Clocks (optional)
    halfmove = _parse_counter(parts, 4, default=0, minimum=0, label="halfmove clock")
    fullmove = _parse_counter(parts, 5, default=1, minimum=1, label="fullmove number")

    _check_kings(placements, fen)

    return BoardState(Board.from_pieces(placements), side, castling, ep, halfmove, fullmove)


def _check_kings(placements: list[tuple[Square, Piece]], fen: str) -> None:
    for color in Color:
        count = sum(1 for _, piece in placements if piece == Piece(color, PieceKind.KING))
        if count != 1:
            raise ValueError(
                f"Invalid FEN board ({color} needs exactly one king, found {count}): {fen!r}"
            )


def _parse_counter(parts: list[str], index: int, *, default: int, minimum: int, label: str) -> int:
    if len(parts) <= index:
        return default
    try:
        value = int(parts[index])
    except ValueError:
        raise ValueError(f"Invalid FEN {label}: {parts[index]!r}") from None
    if value < minimum:
        raise ValueError(f"Invalid FEN {label}: {parts[index]!r}")
    return value


def position_to_fen(state: BoardState) -> str:
    """Serialise a :class:`BoardState` to FEN."""
    # 1. Board
    rows: list[str] = []
    for cells in reversed(state.board.rows()):
        empty = 0
        row = ""
        for piece in cells:
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if state.side_to_move == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(ch for ch, right in _CASTLING_CHARS.items() if state.castling & right)
    if not castling_str:
        castling_str = "-"

    # 4. En passant
    ep_str = state.en_passant.name if state.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{state.halfmove_clock} {state.fullmove_number}"
    )
