"""Jungle rules: move legality, capture arbitration and terminal states."""

from __future__ import annotations

from doushou.core.board import Board
from doushou.core.enums import GameEndReason, GameResult, PieceKind, Side, Terrain
from doushou.core.move import Move
from doushou.core.piece import Piece
from doushou.core.terrain import (
    DEN_CELLS,
    STANDARD_TERRAIN,
    TerrainMap,
    is_enemy_den,
    is_enemy_trap,
    is_own_den,
)
from doushou.core.types import Cell, in_bounds

# Exact leap lengths across the rivers.
VERTICAL_JUMP_ROWS = 4
HORIZONTAL_JUMP_COLS = 3


class Rules:
    """Static rule-checker operating on a :class:`Board` and a terrain map."""

    # Legality is evaluated in a fixed order and short-circuits:
    # bounds, source, friendly fire, movement shape, own den, water, capture.

    @staticmethod
    def is_legal(
        board: Board,
        from_cell: Cell,
        to_cell: Cell,
        terrain_map: TerrainMap = STANDARD_TERRAIN,
    ) -> bool:
        if not in_bounds(*to_cell) or not in_bounds(*from_cell):
            return False

        piece = board[from_cell]
        if piece is None:
            return False

        target = board[to_cell]
        if target is not None and target.side == piece.side:
            return False

        is_step = _manhattan(from_cell, to_cell) == 1
        if not is_step and not (
            piece.kind.can_jump
            and Rules.is_clear_jump(board, from_cell, to_cell, terrain_map)
        ):
            return False

        to_terrain = terrain_map[to_cell]
        if is_own_den(to_terrain, piece.side):
            return False

        # Also rules out a Lion/Tiger jump landing in the river.
        if to_terrain == Terrain.WATER and not piece.kind.can_swim:
            return False

        if target is not None:
            return Rules.can_capture(piece, target, from_cell, to_terrain, terrain_map)
        return True

    @staticmethod
    def is_legal_move(
        board: Board,
        move: Move,
        terrain_map: TerrainMap = STANDARD_TERRAIN,
    ) -> bool:
        return Rules.is_legal(board, move.from_cell, move.to_cell, terrain_map)

    @staticmethod
    def is_clear_jump(
        board: Board,
        from_cell: Cell,
        to_cell: Cell,
        terrain_map: TerrainMap = STANDARD_TERRAIN,
    ) -> bool:
        """Whether *from_cell* -> *to_cell* is a straight leap over open water.

        Vertical leaps span exactly four rows, horizontal ones exactly three
        columns. Every cell strictly between the ends must be water and empty.
        """
        (fr, fc), (tr, tc) = from_cell, to_cell
        if fc == tc and abs(tr - fr) == VERTICAL_JUMP_ROWS:
            step = 1 if tr > fr else -1
            path = [(r, fc) for r in range(fr + step, tr, step)]
        elif fr == tr and abs(tc - fc) == HORIZONTAL_JUMP_COLS:
            step = 1 if tc > fc else -1
            path = [(fr, c) for c in range(fc + step, tc, step)]
        else:
            return False

        for cell in path:
            if terrain_map[cell] != Terrain.WATER or board[cell] is not None:
                return False
        return True

    @staticmethod
    def can_capture(
        attacker: Piece,
        defender: Piece,
        attacker_cell: Cell,
        defender_terrain: Terrain | None,
        terrain_map: TerrainMap = STANDARD_TERRAIN,
    ) -> bool:
        """Capture arbitration between two opposing pieces.

        Order: trap neutralisation, Rat/Elephant exceptions, the rule that a
        Rat never attacks out of the water, then plain rank comparison.
        """
        attacker_terrain = terrain_map[attacker_cell]
        defender_rank = (
            0 if is_enemy_trap(defender_terrain, attacker.side) else defender.rank
        )

        if attacker.kind == PieceKind.RAT and defender.kind == PieceKind.ELEPHANT:
            return attacker_terrain != Terrain.WATER

        if attacker.kind == PieceKind.ELEPHANT and defender.kind == PieceKind.RAT:
            return defender_terrain == Terrain.WATER

        if attacker.kind == PieceKind.RAT and attacker_terrain == Terrain.WATER:
            return False

        return attacker.rank >= defender_rank

    # -- Terminal states ----------------------------------------------------

    @staticmethod
    def den_breached(board: Board, side: Side) -> bool:
        """Whether an enemy piece stands on *side*'s den."""
        occupant = board[DEN_CELLS[side]]
        return occupant is not None and occupant.side != side

    @staticmethod
    def winner_after_move(
        board: Board,
        move: Move,
        terrain_map: TerrainMap = STANDARD_TERRAIN,
    ) -> tuple[GameResult, GameEndReason | None]:
        """Result of a move that has just been applied to *board*."""
        mover = board[move.to_cell]
        if mover is None:
            raise ValueError(f"Move {move} has not been applied to the board")

        if is_enemy_den(terrain_map[move.to_cell], mover.side):
            return GameResult.win_for(mover.side), GameEndReason.DEN_REACHED

        if not board.has_pieces(mover.side.opposite):
            return GameResult.win_for(mover.side), GameEndReason.ANNIHILATION

        return GameResult.IN_PROGRESS, None

    @staticmethod
    def game_result(
        board: Board,
        side_to_move: Side,
        terrain_map: TerrainMap = STANDARD_TERRAIN,
    ) -> tuple[GameResult, GameEndReason | None]:
        """Full status of a position with *side_to_move* about to play."""
        from doushou.core.move_generator import MoveGenerator

        for side in Side:
            if Rules.den_breached(board, side):
                return GameResult.win_for(side.opposite), GameEndReason.DEN_REACHED

        for side in Side:
            if not board.has_pieces(side):
                return GameResult.win_for(side.opposite), GameEndReason.ANNIHILATION

        if not MoveGenerator(board, terrain_map).has_legal_moves(side_to_move):
            return (
                GameResult.win_for(side_to_move.opposite),
                GameEndReason.NO_LEGAL_MOVES,
            )

        return GameResult.IN_PROGRESS, None


def _manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
