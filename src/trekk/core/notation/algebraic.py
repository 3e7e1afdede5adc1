"""Algebraic move text: piece letter, disambiguation, destination."""

from __future__ import annotations

from collections.abc import Sequence

from trekk.core.enums import Color, MoveFlag
from trekk.core.errors import AmbiguousNotationError, IllegalMoveError
from trekk.core.locale import DEFAULT_LOCALE, NotationLocale
from trekk.core.move import Move
from trekk.core.move_generator import legal_moves
from trekk.core.state import BoardState
from trekk.core.types import column_to_letter, rank_text


def move_to_text(
    state: BoardState,
    move: Move,
    locale: NotationLocale = DEFAULT_LOCALE,
    *,
    legal: Sequence[Move] | None = None,
) -> str:
    """Render *move* as text given the *state* before the move.

    Format is ``<letter><origin hint><file><rank>[=<letter>]``; the origin
    hint appears only when another legal move of the same kind lands on the
    same square. *legal* may carry the mover's precomputed legal moves.
    """
    piece = state.board[move.from_sq]
    if piece is None or piece.kind != move.kind:
        raise IllegalMoveError(f"No {move.kind.name.lower()} on {move.from_sq.name}")

    if move.flag == MoveFlag.CASTLE_KINGSIDE:
        return "O-O"
    if move.flag == MoveFlag.CASTLE_QUEENSIDE:
        return "O-O-O"

    if legal is None:
        legal = legal_moves(state, piece.color)
    rivals = [
        m.from_sq
        for m in legal
        if m.kind == move.kind and m.to_sq == move.to_sq and m.from_sq != move.from_sq
    ]

    text = locale.letter(move.kind)
    if rivals:
        if all(sq.column != move.from_sq.column for sq in rivals):
            text += column_to_letter(move.from_sq.column)
        elif all(sq.row != move.from_sq.row for sq in rivals):
            text += rank_text(move.from_sq.row)
        else:
            text += move.from_sq.name

    text += column_to_letter(move.to_sq.column) + rank_text(move.to_sq.row)

    if move.promotion is not None:
        text += "=" + locale.letter(move.promotion)
    return text


def moves_to_text(
    state: BoardState,
    moves: Sequence[Move],
    locale: NotationLocale = DEFAULT_LOCALE,
) -> list[str]:
    """Render every move of *moves*; two moves of one side never share a text."""
    legal_by_color: dict[Color, list[Move]] = {}
    seen: dict[tuple[Color, str], Move] = {}
    texts: list[str] = []
    for move in moves:
        piece = state.board[move.from_sq]
        if piece is None:
            raise IllegalMoveError(f"No piece on {move.from_sq.name}")
        if piece.color not in legal_by_color:
            legal_by_color[piece.color] = legal_moves(state, piece.color)
        text = move_to_text(state, move, locale, legal=legal_by_color[piece.color])
        other = seen.setdefault((piece.color, text), move)
        if other != move:
            raise AmbiguousNotationError(text, (other, move))
        texts.append(text)
    return texts
