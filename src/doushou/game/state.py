"""Game state machine - applies moves, detects wins, flips turns."""

from __future__ import annotations

from dataclasses import dataclass, field

from doushou.core.board import Board
from doushou.core.enums import GameEndReason, GameResult, Side
from doushou.core.move import Move
from doushou.core.move_generator import MoveGenerator
from doushou.core.piece import Piece
from doushou.core.rules import Rules
from doushou.core.terrain import STANDARD_TERRAIN, TerrainMap
from doushou.core.types import Cell, in_bounds
from doushou.game.interfaces import GamePhase


@dataclass
class GameState:
    """Board ownership plus turn, phase and result of one game.

    This is a pure data/logic class - no threading, no UI.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Side = field(default=Side.RED, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    end_reason: GameEndReason | None = field(default=None, init=False)
    last_move: Move | None = field(default=None, init=False)
    ply_count: int = field(default=0, init=False)
    terrain_map: TerrainMap = STANDARD_TERRAIN

    # -- Initialisation -----------------------------------------------------

    def setup(self, board: Board | None = None, side_to_move: Side = Side.RED) -> None:
        """Initialise (or reset) the game; RED moves first by default."""
        self.board = board.copy() if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.end_reason = None
        self.last_move = None
        self.ply_count = 0

    # -- Move application ---------------------------------------------------

    def apply_move(self, move: Move) -> Piece | None:
        """Apply a validated move and return the captured piece, if any.

        The caller is responsible for the legality check; a move that
        bypassed it raises ``ValueError``.
        """
        if self.is_game_over:
            raise ValueError(f"Cannot apply {move}: the game is over")
        piece = self.board[move.from_cell]
        if piece is None:
            raise ValueError(f"Cannot apply {move}: no piece on the source cell")
        if piece.side != self.side_to_move:
            raise ValueError(f"Cannot apply {move}: it is {self.side_to_move}'s turn")
        if not Rules.is_legal_move(self.board, move, self.terrain_map):
            raise ValueError(f"Cannot apply {move}: illegal move")

        captured = self.board.make_move(move)
        self.last_move = move
        self.ply_count += 1

        result, reason = Rules.winner_after_move(self.board, move, self.terrain_map)
        if result != GameResult.IN_PROGRESS:
            self._finish(result, reason)
        else:
            self.side_to_move = self.side_to_move.opposite
        return captured

    def declare_no_legal_moves(self) -> None:
        """The side to move is stuck: it loses immediately."""
        self._finish(
            GameResult.win_for(self.side_to_move.opposite),
            GameEndReason.NO_LEGAL_MOVES,
        )

    # -- Query helpers ------------------------------------------------------

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Side | None:
        return self.result.winner

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return MoveGenerator(self.board, self.terrain_map).generate_moves(
            self.side_to_move
        )

    def has_legal_moves(self) -> bool:
        return MoveGenerator(self.board, self.terrain_map).has_legal_moves(
            self.side_to_move
        )

    def legal_destinations(self, cell: Cell) -> list[Cell]:
        """Targets for the piece on *cell*; empty unless it belongs to the side to move."""
        piece = self.board[cell]
        if piece is None or piece.side != self.side_to_move or self.is_game_over:
            return []
        return MoveGenerator(self.board, self.terrain_map).destinations(cell)

    def is_legal(self, move: Move) -> bool:
        if self.is_game_over:
            return False
        piece = self.board[move.from_cell] if in_bounds(*move.from_cell) else None
        if piece is None or piece.side != self.side_to_move:
            return False
        return Rules.is_legal_move(self.board, move, self.terrain_map)

    # -- Internal -----------------------------------------------------------

    def _finish(self, result: GameResult, reason: GameEndReason | None) -> None:
        self.result = result
        self.end_reason = reason
        self.phase = GamePhase.GAME_OVER
