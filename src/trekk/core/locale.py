"""Piece letters used when rendering moves as text.

Usage::

    from trekk.core.locale import get_locale

    get_locale("English").letter(PieceKind.KNIGHT)   # "N"
    get_locale("Norwegian").letter(PieceKind.KNIGHT) # "S"
"""

from __future__ import annotations

from dataclasses import dataclass

from trekk.core.enums import PieceKind


@dataclass(frozen=True)
class NotationLocale:
    """One letter per piece kind; the pawn has none."""

    name: str
    knight: str
    bishop: str
    rook: str
    queen: str
    king: str

    def __post_init__(self) -> None:
        letters = [self.knight, self.bishop, self.rook, self.queen, self.king]
        if any(len(letter) != 1 for letter in letters):
            raise ValueError(f"Locale {self.name!r} needs one letter per piece")
        if len(set(letters)) != len(letters):
            raise ValueError(f"Locale {self.name!r} reuses a piece letter")

    def letter(self, kind: PieceKind) -> str:
        if kind == PieceKind.PAWN:
            return ""
        return {
            PieceKind.KNIGHT: self.knight,
            PieceKind.BISHOP: self.bishop,
            PieceKind.ROOK: self.rook,
            PieceKind.QUEEN: self.queen,
            PieceKind.KING: self.king,
        }[kind]

    def kind_for_letter(self, letter: str) -> PieceKind:
        """Inverse of :meth:`letter`; the empty string is a pawn."""
        for kind in PieceKind:
            if self.letter(kind) == letter:
                return kind
        raise ValueError(f"Unknown piece letter {letter!r} in {self.name} notation")


NORWEGIAN = NotationLocale("Norwegian", knight="S", bishop="L", rook="T", queen="D", king="K")
ENGLISH = NotationLocale("English", knight="N", bishop="B", rook="R", queen="Q", king="K")

DEFAULT_LOCALE = NORWEGIAN

_LOCALES: dict[str, NotationLocale] = {
    NORWEGIAN.name: NORWEGIAN,
    ENGLISH.name: ENGLISH,
}

LANGUAGES: list[str] = list(_LOCALES)


def get_locale(language: str) -> NotationLocale:
    """Look up a locale by its language name (case-insensitive)."""
    for name, locale in _LOCALES.items():
        if name.lower() == language.lower():
            return locale
    raise ValueError(f"Unknown notation language {language!r}; choose from {LANGUAGES}")
