"""GameSession - the facade offered to the presentation layer.

One human against the engine. The presentation layer starts a game with
:meth:`GameSession.new_game`, forwards clicks to :meth:`attempt_move` and
either calls :meth:`request_ai_move` itself or hands the session a
scheduler so the AI turn runs on a later event-loop tick, typically
``qt_scheduler(settings.ai_move_delay_ms)``.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from doushou.core.board import Board
from doushou.core.enums import GameEndReason, GameResult, Side, Terrain
from doushou.core.move import Move
from doushou.core.piece import Piece
from doushou.core.types import Cell, cell_name, in_bounds
from doushou.engine.minimax import MinimaxSearchEngine
from doushou.engine.search import IEngine, Scheduler, SearchLimits
from doushou.game.controller import GameController
from doushou.game.player import AIPlayer, HumanPlayer
from doushou.game.state import GameState
from doushou.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

_END_MESSAGES: dict[GameEndReason, str] = {
    GameEndReason.DEN_REACHED: "{winner} wins by reaching the den!",
    GameEndReason.ANNIHILATION: "{winner} wins by capturing all pieces!",
    GameEndReason.NO_LEGAL_MOVES: "{loser} has no legal moves! {winner} wins!",
}


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """What happened to a move request."""

    accepted: bool
    result: GameResult
    move: Move | None = None
    captured: Piece | None = None
    reason: GameEndReason | None = None

    @property
    def is_ongoing(self) -> bool:
        return self.result == GameResult.IN_PROGRESS


class GameSession:
    """Human-versus-engine game with the read-only queries a board view needs."""

    __slots__ = (
        "_settings",
        "_engine",
        "_scheduler",
        "_controller",
        "_human_side",
        "_last_ai_move",
        "_generation",
    )

    def __init__(
        self,
        settings: GameSettings | None = None,
        *,
        engine: IEngine | None = None,
        rng: random.Random | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        self._settings = settings if settings is not None else GameSettings()
        self._engine = engine if engine is not None else MinimaxSearchEngine(rng=rng)
        self._scheduler = scheduler
        self._controller = GameController()
        self._human_side = self._settings.human_side
        self._last_ai_move: Move | None = None
        # Bumped on every new game so stale scheduled AI turns are ignored.
        self._generation = 0

    # -- Properties ---------------------------------------------------------

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def state(self) -> GameState:
        return self._controller.state

    @property
    def human_side(self) -> Side:
        return self._human_side

    @property
    def ai_side(self) -> Side:
        return self._human_side.opposite

    @property
    def last_ai_move(self) -> Move | None:
        """Most recent engine move, kept only as a display hint."""
        return self._last_ai_move

    # -- Game flow ----------------------------------------------------------

    def new_game(self, human_side: Side | None = None, board: Board | None = None) -> GameState:
        """Reset to the starting layout (or *board*) with RED to move."""
        if human_side is not None:
            self._human_side = Side(human_side)
        self._generation += 1
        self._last_ai_move = None

        human = HumanPlayer(self._human_side, "You")
        ai = AIPlayer(self.ai_side, "AI", on_request_move=self._on_ai_turn)
        players = {human.side: human, ai.side: ai}
        _LOGGER.info(
            "New game: human plays %s, AI plays %s, red moves first",
            self._human_side,
            self.ai_side,
        )
        self._controller.new_game(players[Side.RED], players[Side.BLACK], board=board)
        return self.state

    def attempt_move(self, from_cell: Cell, to_cell: Cell) -> MoveOutcome:
        """Apply a human move if it is legal; otherwise nothing changes."""
        state = self.state
        if state.is_game_over or state.side_to_move != self._human_side:
            return self._outcome(accepted=False)

        move = Move(from_cell, to_cell)
        captured = state.board[to_cell] if in_bounds(*to_cell) else None
        if not self._controller.submit_move(move):
            return self._outcome(accepted=False)
        return self._outcome(accepted=True, move=move, captured=captured)

    def request_ai_move(self, depth: int | None = None) -> MoveOutcome:
        """Search and play the engine's move for the AI side."""
        state = self.state
        if state.is_game_over or state.side_to_move != self.ai_side:
            return self._outcome(accepted=False)

        if depth is None:
            depth = self._settings.search_depth
        result = self._engine.search(
            state.board, self.ai_side, SearchLimits(max_depth=depth)
        )
        if result.best_move is None:
            _LOGGER.info("AI (%s) has no legal moves", self.ai_side)
            self._controller.declare_no_legal_moves()
            return self._outcome(accepted=False)

        move = result.best_move
        piece = state.board[move.from_cell]
        _LOGGER.info(
            "AI (%s) moving %s from %s to %s (score %d, %d nodes)",
            self.ai_side,
            piece.kind.display_name if piece else "?",
            cell_name(move.from_cell),
            cell_name(move.to_cell),
            result.score,
            result.nodes,
        )
        captured = state.board[move.to_cell]
        self._last_ai_move = move
        if not self._controller.submit_move(move):
            raise ValueError(f"Engine produced an illegal move: {move}")
        return self._outcome(accepted=True, move=move, captured=captured)

    # -- Read-only queries --------------------------------------------------

    def cell_at(self, row: int, col: int) -> Piece | None:
        return self.state.board[(row, col)]

    def terrain_at(self, row: int, col: int) -> Terrain | None:
        return self.state.terrain_map.terrain_at(row, col)

    def legal_destinations(self, from_cell: Cell) -> list[Cell]:
        return self.state.legal_destinations(from_cell)

    def current_turn(self) -> Side:
        return self.state.side_to_move

    def is_terminal(self) -> bool:
        return self.state.is_game_over

    def status_message(self) -> str:
        """One-line status for a board view."""
        state = self.state
        if state.is_game_over:
            winner = state.result.winner
            if winner is None or state.end_reason is None:
                return "Game over."
            return _END_MESSAGES[state.end_reason].format(
                winner=str(winner).upper(),
                loser=str(winner.opposite).upper(),
            )
        if state.side_to_move == self._human_side:
            return f"{str(self._human_side).upper()}'s turn. Select a piece to move."
        return f"AI ({str(self.ai_side).upper()}) is thinking..."

    # -- Internal -----------------------------------------------------------

    def _on_ai_turn(self, _board: Board) -> None:
        if self._scheduler is None:
            return  # The presentation layer calls request_ai_move() itself.
        generation = self._generation
        self._scheduler(lambda: self._run_scheduled_ai_move(generation))

    def _run_scheduled_ai_move(self, generation: int) -> None:
        if generation != self._generation:
            return
        self.request_ai_move()

    def _outcome(
        self,
        *,
        accepted: bool,
        move: Move | None = None,
        captured: Piece | None = None,
    ) -> MoveOutcome:
        state = self.state
        return MoveOutcome(
            accepted=accepted,
            result=state.result,
            move=move,
            captured=captured,
            reason=state.end_reason,
        )
