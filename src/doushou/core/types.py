"""Cell type alias and coordinate helpers.

Board layout: 9 rows x 7 columns, ``(row, col)`` with row 0 on RED's
home edge. Cell names use column letters and 1-based row numbers::

    a9 ... g9   <- row 8 (BLACK home)
    ...
    a1 ... g1   <- row 0 (RED home)
"""

from __future__ import annotations

from typing import TypeAlias

BOARD_ROWS = 9
BOARD_COLS = 7

Cell: TypeAlias = tuple[int, int]  # (row, col)

_COL_LETTERS = "abcdefg"


def in_bounds(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the 9x7 grid."""
    return 0 <= row < BOARD_ROWS and 0 <= col < BOARD_COLS


def index_of(cell: Cell) -> int:
    """Flat row-major index, raising for off-grid cells."""
    row, col = cell
    if not in_bounds(row, col):
        raise ValueError(f"Cell out of bounds: {cell!r}")
    return row * BOARD_COLS + col


def cell_name(cell: Cell) -> str:
    """Human-readable name, e.g. (0, 0) -> 'a1', (8, 3) -> 'd9'."""
    row, col = cell
    return _COL_LETTERS[col] + str(row + 1)


def parse_cell(name: str) -> Cell:
    """Parse a cell name, e.g. 'd9' -> (8, 3)."""
    if len(name) != 2 or name[0] not in _COL_LETTERS or name[1] not in "123456789":
        raise ValueError(f"Invalid cell name: {name!r}")
    return (int(name[1]) - 1, _COL_LETTERS.index(name[0]))


def all_cells() -> list[Cell]:
    """Every cell in row-major order starting from (0, 0)."""
    return [(r, c) for r in range(BOARD_ROWS) for c in range(BOARD_COLS)]
