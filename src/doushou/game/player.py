"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from doushou.core.enums import Side
from doushou.game.interfaces import IPlayer

if TYPE_CHECKING:
    from doushou.core.board import Board


class HumanPlayer(IPlayer):
    """A human participant - moves come from the presentation layer.

    ``request_move`` is a no-op because humans select moves interactively.
    """

    __slots__ = ("_side", "_name")

    def __init__(self, side: Side, name: str = "") -> None:
        self._side = side
        self._name = name or f"Player ({side})"

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board) -> None:
        pass  # Human moves arrive via controller.submit_move()


class AIPlayer(IPlayer):
    """An AI participant that delegates computation to a callback.

    ``AIPlayer`` only stores a *bridge* callable invoked on
    ``request_move``; the session decides whether the search runs now,
    on the next event-loop tick or on an ``EngineWorker``.

    Args:
        side: Side the AI plays.
        name: Display name.
        on_request_move: ``(Board) -> None`` - called when the game
            controller asks the AI to start thinking.
    """

    __slots__ = ("_side", "_name", "_on_request_move")

    def __init__(
        self,
        side: Side,
        name: str = "Engine",
        on_request_move: Callable[[Board], None] | None = None,
    ) -> None:
        self._side = side
        self._name = name
        self._on_request_move = on_request_move

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, board: Board) -> None:
        if self._on_request_move is not None:
            self._on_request_move(board)
