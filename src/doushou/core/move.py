"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from doushou.core.types import Cell, cell_name, parse_cell


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable ordered pair of cells."""

    from_cell: Cell
    to_cell: Cell

    def __str__(self) -> str:
        return f"{cell_name(self.from_cell)}{cell_name(self.to_cell)}"

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse long notation, e.g. 'a3a4'."""
        if len(text) != 4:
            raise ValueError(f"Invalid move text: {text!r}")
        return cls(parse_cell(text[:2]), parse_cell(text[2:]))

    @property
    def distance(self) -> int:
        """Manhattan distance between the two cells."""
        return abs(self.from_cell[0] - self.to_cell[0]) + abs(
            self.from_cell[1] - self.to_cell[1]
        )

    @property
    def is_jump(self) -> bool:
        return self.distance > 1
