"""Core domain layer - pure Jungle rules with zero external dependencies.

Quick start::

    from doushou.core import Board, MoveGenerator, Side

    board = Board.initial()
    for move in MoveGenerator(board).generate_moves(Side.RED):
        print(move)
"""

from doushou.core.board import Board
from doushou.core.enums import GameEndReason, GameResult, PieceKind, Side, Terrain
from doushou.core.move import Move
from doushou.core.move_generator import MoveGenerator
from doushou.core.notation import (
    STARTING_DIAGRAM,
    board_from_diagram,
    board_to_diagram,
)
from doushou.core.piece import Piece
from doushou.core.rules import Rules
from doushou.core.terrain import STANDARD_TERRAIN, TerrainMap, terrain_at
from doushou.core.types import (
    BOARD_COLS,
    BOARD_ROWS,
    Cell,
    cell_name,
    in_bounds,
    parse_cell,
)

__all__ = [
    # Enums
    "GameEndReason",
    "GameResult",
    "PieceKind",
    "Side",
    "Terrain",
    # Types / helpers
    "BOARD_COLS",
    "BOARD_ROWS",
    "Cell",
    "cell_name",
    "in_bounds",
    "parse_cell",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    "STANDARD_TERRAIN",
    "TerrainMap",
    "terrain_at",
    # Notation
    "STARTING_DIAGRAM",
    "board_from_diagram",
    "board_to_diagram",
]
