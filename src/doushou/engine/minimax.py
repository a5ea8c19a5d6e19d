"""Depth-bounded minimax with alpha-beta pruning."""

from __future__ import annotations

import logging
import random

from doushou.core.board import Board
from doushou.core.enums import Side
from doushou.core.move import Move
from doushou.core.move_generator import MoveGenerator
from doushou.core.terrain import STANDARD_TERRAIN, TerrainMap
from doushou.engine.evaluate import WIN_SCORE, evaluate, is_decisive
from doushou.engine.search import IEngine, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = 1_000_000


class MinimaxSearchEngine(IEngine):
    """Plain minimax searcher; no iterative deepening, no transposition table.

    The board passed to :meth:`search` is mutated in place while the tree
    is explored and is always restored before returning. Among root moves
    sharing the best score one is picked with the injected RNG.
    """

    __slots__ = ("_rng", "_terrain", "_nodes")

    def __init__(
        self,
        rng: random.Random | None = None,
        terrain_map: TerrainMap = STANDARD_TERRAIN,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._terrain = terrain_map
        self._nodes = 0

    @property
    def nodes(self) -> int:
        """Nodes visited by the last search."""
        return self._nodes

    def best_move(self, board: Board, side: Side, depth: int) -> Move | None:
        return self.search(board, side, SearchLimits(max_depth=depth)).best_move

    def search(
        self,
        board: Board,
        side: Side,
        limits: SearchLimits,
    ) -> SearchResult:
        depth = limits.max_depth
        if depth < 0:
            raise ValueError("Search depth must be >= 0")

        self._nodes = 0
        root_moves = MoveGenerator(board, self._terrain).generate_moves(side)
        if not root_moves:
            return SearchResult(None, -WIN_SCORE, depth, self._nodes)

        # Depth 0 still looks at every immediate move (greedy one-ply).
        child_depth = max(depth - 1, 0)
        best_score = -_INF_SCORE
        best_moves: list[Move] = []

        for move in root_moves:
            # Window stays one point below the best so ties are scored exactly.
            alpha = best_score - 1 if best_moves else -_INF_SCORE
            captured = board.make_move(move)
            try:
                score = self._minimax(
                    board, side, child_depth, alpha, _INF_SCORE, maximizing=False
                )
            finally:
                board.unmake_move(move, captured)

            if score > best_score:
                best_score = score
                best_moves = [move]
            elif score == best_score:
                best_moves.append(move)

        best_move = self._rng.choice(best_moves)
        _LOGGER.debug(
            "%s search depth=%d nodes=%d score=%d ties=%d best=%s",
            side,
            depth,
            self._nodes,
            best_score,
            len(best_moves),
            best_move,
        )
        return SearchResult(
            best_move, best_score, depth, self._nodes, tuple(best_moves)
        )

    def _minimax(
        self,
        board: Board,
        side: Side,
        depth: int,
        alpha: int,
        beta: int,
        maximizing: bool,
    ) -> int:
        """Score of the current node from *side*'s point of view."""
        self._nodes += 1

        score = evaluate(board, side)
        if is_decisive(score) or depth == 0:
            return score

        to_move = side if maximizing else side.opposite
        moves = MoveGenerator(board, self._terrain).generate_moves(to_move)
        if not moves:
            # The side to move is stuck and loses.
            return -WIN_SCORE if maximizing else WIN_SCORE

        if maximizing:
            best = -_INF_SCORE
            for move in moves:
                captured = board.make_move(move)
                try:
                    value = self._minimax(board, side, depth - 1, alpha, beta, False)
                finally:
                    board.unmake_move(move, captured)
                best = max(best, value)
                alpha = max(alpha, best)
                if beta <= alpha:
                    break
            return best

        best = _INF_SCORE
        for move in moves:
            captured = board.make_move(move)
            try:
                value = self._minimax(board, side, depth - 1, alpha, beta, True)
            finally:
                board.unmake_move(move, captured)
            best = min(best, value)
            beta = min(beta, best)
            if beta <= alpha:
                break
        return best
