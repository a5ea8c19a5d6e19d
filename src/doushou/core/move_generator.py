"""Legal move enumeration."""

from __future__ import annotations

from doushou.core.board import Board
from doushou.core.enums import Side
from doushou.core.move import Move
from doushou.core.rules import HORIZONTAL_JUMP_COLS, VERTICAL_JUMP_ROWS, Rules
from doushou.core.terrain import STANDARD_TERRAIN, TerrainMap
from doushou.core.types import Cell

STEP_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
JUMP_OFFSETS: tuple[tuple[int, int], ...] = (
    (VERTICAL_JUMP_ROWS, 0),
    (-VERTICAL_JUMP_ROWS, 0),
    (0, HORIZONTAL_JUMP_COLS),
    (0, -HORIZONTAL_JUMP_COLS),
)


class MoveGenerator:
    """Enumerates legal moves by probing candidate targets through :class:`Rules`.

    Order is deterministic: pieces in row-major order from (0, 0), and per
    piece the four steps (up, down, left, right) before the four leaps.
    """

    __slots__ = ("_board", "_terrain")

    def __init__(
        self,
        board: Board,
        terrain_map: TerrainMap = STANDARD_TERRAIN,
    ) -> None:
        self._board = board
        self._terrain = terrain_map

    def generate_moves(self, side: Side) -> list[Move]:
        moves: list[Move] = []
        for cell in self._board.pieces(side):
            moves.extend(Move(cell, to) for to in self.destinations(cell))
        return moves

    def destinations(self, cell: Cell) -> list[Cell]:
        """Legal target cells for the piece on *cell* (empty if none)."""
        piece = self._board[cell]
        if piece is None:
            return []

        offsets = STEP_OFFSETS + JUMP_OFFSETS if piece.kind.can_jump else STEP_OFFSETS
        row, col = cell
        targets: list[Cell] = []
        for dr, dc in offsets:
            to = (row + dr, col + dc)
            if Rules.is_legal(self._board, cell, to, self._terrain):
                targets.append(to)
        return targets

    def has_legal_moves(self, side: Side) -> bool:
        for cell in self._board.pieces(side):
            if self.destinations(cell):
                return True
        return False
