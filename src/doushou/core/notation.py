"""Plain-text board diagrams.

A diagram is nine lines, the first line being row 8 (BLACK's home edge)
and the last row 0. Each line holds seven symbols: ``.`` for an empty
cell or a piece letter (uppercase RED, lowercase BLACK). Whitespace
between symbols is ignored, so both ``"L.....T"`` and ``"L . . . . . T"``
parse the same way.
"""

from __future__ import annotations

from doushou.core.board import Board
from doushou.core.piece import Piece
from doushou.core.types import BOARD_COLS, BOARD_ROWS

STARTING_DIAGRAM = """\
t.....l
.c...d.
e.w.p.r
.......
.......
.......
R.P.W.E
.D...C.
L.....T"""

EMPTY_DIAGRAM = "\n".join(["." * BOARD_COLS] * BOARD_ROWS)


def board_from_diagram(text: str) -> Board:
    """Parse a diagram into a :class:`Board`."""
    lines = [line for line in text.strip().splitlines() if line.strip()]
    if len(lines) != BOARD_ROWS:
        raise ValueError(f"Diagram must have {BOARD_ROWS} rows, got {len(lines)}")

    board = Board()
    for i, line in enumerate(lines):
        row = BOARD_ROWS - 1 - i
        symbols = "".join(line.split())
        if len(symbols) != BOARD_COLS:
            raise ValueError(
                f"Diagram row {row + 1} must have {BOARD_COLS} cells: {line!r}"
            )
        for col, ch in enumerate(symbols):
            if ch == ".":
                continue
            board[(row, col)] = Piece.from_char(ch)
    return board


def board_to_diagram(board: Board) -> str:
    """Serialise *board* in the format accepted by :func:`board_from_diagram`."""
    lines: list[str] = []
    for row in range(BOARD_ROWS - 1, -1, -1):
        line = []
        for col in range(BOARD_COLS):
            piece = board[(row, col)]
            line.append(str(piece) if piece else ".")
        lines.append("".join(line))
    return "\n".join(lines)
