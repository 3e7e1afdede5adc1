"""Notation package: move text, piece letters and FEN."""

from trekk.core.locale import (
    DEFAULT_LOCALE,
    ENGLISH,
    LANGUAGES,
    NORWEGIAN,
    NotationLocale,
    get_locale,
)
from trekk.core.notation.algebraic import move_to_text, moves_to_text
from trekk.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from trekk.core.types import column_to_letter, letter_to_column, parse_square, rank_text

__all__ = [
    "DEFAULT_LOCALE",
    "ENGLISH",
    "LANGUAGES",
    "NORWEGIAN",
    "NotationLocale",
    "STARTING_FEN",
    "column_to_letter",
    "get_locale",
    "letter_to_column",
    "move_to_text",
    "moves_to_text",
    "parse_square",
    "position_from_fen",
    "position_to_fen",
    "rank_text",
]
