"""GameController - the central orchestrator of a game.

Coordinates: Players, GameState, MoveGenerator.
Emits events via simple callbacks so the presentation layer / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from doushou.core.board import Board
from doushou.core.enums import GameEndReason, GameResult, Side
from doushou.core.move import Move
from doushou.core.piece import Piece
from doushou.game.interfaces import GamePhase, IGameController, IPlayer
from doushou.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# -- Event definitions --------------------------------------------------------

MoveCallback = Callable[[Move, "Piece | None", GameState], None]  # move, captured, state
GameOverCallback = Callable[[GameResult, "GameEndReason | None"], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# -- Controller ---------------------------------------------------------------


class GameController(IGameController):
    """Orchestrates a full game: validates moves, switches turns,
    notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). AI results arrive via ``submit_move`` on that
    same thread.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Side, IPlayer] = {}
        self.events = GameEvents()

    # -- Properties ---------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    def player(self, side: Side) -> IPlayer | None:
        return self._players.get(side)

    # -- IGameController impl -----------------------------------------------

    def new_game(
        self,
        red: IPlayer,
        black: IPlayer,
        board: Board | None = None,
    ) -> None:
        if red.side != Side.RED or black.side != Side.BLACK:
            raise ValueError("Players must be given as (red, black)")
        self._players = {Side.RED: red, Side.BLACK: black}

        self._state = GameState()
        self._state.setup(board)

        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()

    def submit_move(self, move: Move) -> bool:
        if self._state.is_game_over:
            return False
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False

        if not self._state.is_legal(move):
            _LOGGER.debug("Rejected move %s for %s", move, self._state.side_to_move)
            return False

        captured = self._state.apply_move(move)
        self._emit_move(move, captured)

        if self._state.is_game_over:
            self._emit_game_over()
            return True

        self._prompt_current_player()
        return True

    def declare_no_legal_moves(self) -> None:
        """End the game because the side to move cannot play."""
        if self._state.is_game_over:
            return
        self._state.declare_no_legal_moves()
        self._emit_game_over()

    # -- Internal helpers ---------------------------------------------------

    def _prompt_current_player(self) -> None:
        """Ask the current player to move, or end the game if it cannot."""
        cp = self.current_player
        if cp is None:
            return

        if not self._state.has_legal_moves():
            self.declare_no_legal_moves()
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.board)

    def _emit_move(self, move: Move, captured: Piece | None) -> None:
        for cb in self.events.on_move:
            cb(move, captured, self._state)

    def _emit_game_over(self) -> None:
        _LOGGER.info(
            "Game over: %s (%s)",
            self._state.result.name,
            self._state.end_reason.name if self._state.end_reason else "-",
        )
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(self._state.result, self._state.end_reason)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
