"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from trekk.core.enums import MoveFlag, PieceKind
from trekk.core.locale import DEFAULT_LOCALE
from trekk.core.types import Square

_PROMO_CHARS: dict[PieceKind, str] = {
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move."""

    kind: PieceKind
    from_sq: Square
    to_sq: Square
    capture: bool = False
    promotion: PieceKind | None = None
    flag: MoveFlag = MoveFlag.NORMAL

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Minimal text: piece letter plus destination, e.g. 'Se5'.

        Not unique when two pieces of one kind reach the same square; use
        :func:`trekk.core.notation.move_to_text` for disambiguated output.
        """
        return f"{DEFAULT_LOCALE.letter(self.kind)}{self.to_sq.name}"

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        base = f"{self.from_sq.name}{self.to_sq.name}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base
