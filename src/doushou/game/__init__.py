"""Game management layer - controller, players, state machine, session.

Quick start::

    from doushou.core import Side
    from doushou.game import GameSession

    session = GameSession()
    session.new_game(human_side=Side.RED)
    session.attempt_move((2, 0), (3, 0))
    session.request_ai_move()
"""

from doushou.game.controller import GameController, GameEvents
from doushou.game.interfaces import GamePhase, IGameController, IPlayer
from doushou.game.player import AIPlayer, HumanPlayer
from doushou.game.session import GameSession, MoveOutcome
from doushou.game.state import GameState

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameSession",
    "GameState",
    "HumanPlayer",
    "MoveOutcome",
]
