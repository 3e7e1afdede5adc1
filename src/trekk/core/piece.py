"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from trekk.core.enums import Color, PieceKind

# Indexed by PieceKind - 1
_KIND_CHARS = "pnbrqk"


@dataclass(frozen=True, slots=True)
class Piece:
    """A coloured piece; equal pieces are interchangeable."""

    color: Color
    kind: PieceKind

    def __str__(self) -> str:
        """One letter, uppercase for White: 'N' is a white knight."""
        char = _KIND_CHARS[self.kind - 1]
        return char.upper() if self.color == Color.WHITE else char
