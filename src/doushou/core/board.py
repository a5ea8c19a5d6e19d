"""Board - piece placement on the 9x7 grid."""

from __future__ import annotations

from doushou.core.enums import PieceKind, Side
from doushou.core.move import Move
from doushou.core.piece import Piece
from doushou.core.types import BOARD_COLS, BOARD_ROWS, Cell, cell_name, index_of

_CELL_COUNT = BOARD_ROWS * BOARD_COLS

# Standard starting placement for RED; BLACK is the point mirror.
_RED_SETUP: tuple[tuple[Cell, PieceKind], ...] = (
    ((0, 0), PieceKind.LION),
    ((0, 6), PieceKind.TIGER),
    ((1, 1), PieceKind.DOG),
    ((1, 5), PieceKind.CAT),
    ((2, 0), PieceKind.RAT),
    ((2, 2), PieceKind.LEOPARD),
    ((2, 4), PieceKind.WOLF),
    ((2, 6), PieceKind.ELEPHANT),
)


class Board:
    """Mutable occupant layer of the board.

    Terrain lives separately in :class:`~doushou.core.terrain.TerrainMap`;
    the board only knows which piece stands where.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Piece | None] = [None] * _CELL_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, cell: Cell) -> Piece | None:
        return self._cells[index_of(cell)]

    def __setitem__(self, cell: Cell, piece: Piece | None) -> None:
        self._cells[index_of(cell)] = piece

    def is_empty(self, cell: Cell) -> bool:
        return self[cell] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, side: Side) -> list[Cell]:
        """Cells occupied by *side*, row-major from (0, 0)."""
        return [
            divmod(idx, BOARD_COLS)
            for idx, piece in enumerate(self._cells)
            if piece is not None and piece.side == side
        ]

    def has_pieces(self, side: Side) -> bool:
        """Whether at least one piece of *side* remains."""
        for piece in self._cells:
            if piece is not None and piece.side == side:
                return True
        return False

    def material(self, side: Side) -> int:
        """Sum of ranks of *side*'s live pieces."""
        return sum(
            piece.rank for piece in self._cells if piece is not None and piece.side == side
        )

    def find(self, side: Side, kind: PieceKind) -> Cell | None:
        """Cell holding *side*'s piece of *kind*, if still on the board."""
        target = Piece(side, kind)
        for idx, piece in enumerate(self._cells):
            if piece == target:
                return divmod(idx, BOARD_COLS)
        return None

    # -- Mutation / copying -------------------------------------------------

    def make_move(self, move: Move) -> Piece | None:
        """Move the occupant of ``move.from_cell`` and return what it displaced.

        No legality check happens here; callers validate through
        :class:`~doushou.core.rules.Rules` first.
        """
        src = index_of(move.from_cell)
        dst = index_of(move.to_cell)
        piece = self._cells[src]
        if piece is None:
            raise ValueError(f"No piece on {cell_name(move.from_cell)} to move")
        captured = self._cells[dst]
        self._cells[dst] = piece
        self._cells[src] = None
        return captured

    def unmake_move(self, move: Move, captured: Piece | None) -> None:
        """Exact inverse of :meth:`make_move`."""
        src = index_of(move.from_cell)
        dst = index_of(move.to_cell)
        piece = self._cells[dst]
        if piece is None or self._cells[src] is not None:
            raise ValueError(f"Cannot undo {move}: board does not match the move")
        self._cells[src] = piece
        self._cells[dst] = captured

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        return b

    def clear(self) -> None:
        self._cells = [None] * _CELL_COUNT

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard 16-piece starting position."""
        b = cls()
        for (row, col), kind in _RED_SETUP:
            b[(row, col)] = Piece(Side.RED, kind)
            b[(BOARD_ROWS - 1 - row, BOARD_COLS - 1 - col)] = Piece(Side.BLACK, kind)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_ROWS - 1, -1, -1):
            line = []
            for col in range(BOARD_COLS):
                p = self._cells[row * BOARD_COLS + col]
                line.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(line)}")
        rows.append("  a b c d e f g")
        return "\n".join(rows)
