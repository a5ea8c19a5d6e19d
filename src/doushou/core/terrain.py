"""Terrain map - the immutable static layer of the board."""

from __future__ import annotations

from doushou.core.enums import Side, Terrain
from doushou.core.types import BOARD_COLS, BOARD_ROWS, Cell, in_bounds

WATER_ROWS: tuple[int, ...] = (3, 4, 5)
WATER_COLS: tuple[int, ...] = (1, 2, 4, 5)

DEN_CELLS: dict[Side, Cell] = {
    Side.RED: (0, 3),
    Side.BLACK: (8, 3),
}
TRAP_CELLS: dict[Side, tuple[Cell, ...]] = {
    Side.RED: ((0, 2), (0, 4), (1, 3)),
    Side.BLACK: ((8, 2), (8, 4), (7, 3)),
}

_TRAP_TERRAIN = {Side.RED: Terrain.RED_TRAP, Side.BLACK: Terrain.BLACK_TRAP}
_DEN_TERRAIN = {Side.RED: Terrain.RED_DEN, Side.BLACK: Terrain.BLACK_DEN}


class TerrainMap:
    """Read-only 9x7 grid of :class:`Terrain`, computed once."""

    __slots__ = ("_rows",)

    def __init__(self, rows: tuple[tuple[Terrain, ...], ...]) -> None:
        if len(rows) != BOARD_ROWS or any(len(r) != BOARD_COLS for r in rows):
            raise ValueError("Terrain map must be 9 rows of 7 cells")
        self._rows = rows

    @classmethod
    def standard(cls) -> TerrainMap:
        """The fixed Jungle layout: two rivers, three traps and a den per side."""
        grid = [[Terrain.GROUND] * BOARD_COLS for _ in range(BOARD_ROWS)]
        for r in WATER_ROWS:
            for c in WATER_COLS:
                grid[r][c] = Terrain.WATER
        for side, cells in TRAP_CELLS.items():
            for r, c in cells:
                grid[r][c] = _TRAP_TERRAIN[side]
        for side, (r, c) in DEN_CELLS.items():
            grid[r][c] = _DEN_TERRAIN[side]
        return cls(tuple(tuple(row) for row in grid))

    def terrain_at(self, row: int, col: int) -> Terrain | None:
        """Terrain of ``(row, col)``, or ``None`` when off the grid."""
        if not in_bounds(row, col):
            return None
        return self._rows[row][col]

    def __getitem__(self, cell: Cell) -> Terrain | None:
        return self.terrain_at(*cell)

    def is_water(self, cell: Cell) -> bool:
        return self.terrain_at(*cell) == Terrain.WATER

    def __repr__(self) -> str:
        glyphs = {
            Terrain.GROUND: ".",
            Terrain.WATER: "~",
            Terrain.RED_TRAP: "t",
            Terrain.BLACK_TRAP: "t",
            Terrain.RED_DEN: "@",
            Terrain.BLACK_DEN: "@",
        }
        lines = [
            "".join(glyphs[t] for t in self._rows[r])
            for r in range(BOARD_ROWS - 1, -1, -1)
        ]
        return "\n".join(lines)


STANDARD_TERRAIN = TerrainMap.standard()


def terrain_at(row: int, col: int) -> Terrain | None:
    """Lookup on the standard map; ``None`` is the out-of-bounds sentinel."""
    return STANDARD_TERRAIN.terrain_at(row, col)


def is_own_den(terrain: Terrain | None, side: Side) -> bool:
    return terrain is not None and terrain.is_den and terrain.owner == side


def is_enemy_den(terrain: Terrain | None, side: Side) -> bool:
    return terrain is not None and terrain.is_den and terrain.owner == side.opposite


def is_enemy_trap(terrain: Terrain | None, side: Side) -> bool:
    """Whether *terrain* is a trap owned by *side*'s opponent."""
    return terrain is not None and terrain.is_trap and terrain.owner == side.opposite
