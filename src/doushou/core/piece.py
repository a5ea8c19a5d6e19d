"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from doushou.core.enums import PieceKind, Side

# Diagram letter (uppercase) <-> kind. Leopard is 'P' (panther), Wolf is 'W'.
_KIND_LETTERS: dict[PieceKind, str] = {
    PieceKind.RAT: "R",
    PieceKind.CAT: "C",
    PieceKind.DOG: "D",
    PieceKind.WOLF: "W",
    PieceKind.LEOPARD: "P",
    PieceKind.TIGER: "T",
    PieceKind.LION: "L",
    PieceKind.ELEPHANT: "E",
}
_LETTER_KINDS: dict[str, PieceKind] = {v: k for k, v in _KIND_LETTERS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable occupant of a cell: a kind owned by a side."""

    side: Side
    kind: PieceKind

    def __str__(self) -> str:
        """Diagram letter (uppercase = red, lowercase = black)."""
        letter = _KIND_LETTERS[self.kind]
        return letter if self.side == Side.RED else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from diagram letter, e.g. 'L' -> red lion."""
        try:
            kind = _LETTER_KINDS[char.upper()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        side = Side.RED if char.isupper() else Side.BLACK
        return cls(side, kind)

    @property
    def rank(self) -> int:
        return self.kind.rank

    @property
    def name(self) -> str:
        """Display name, e.g. 'red Lion'."""
        return f"{self.side} {self.kind.display_name}"
