"""Tests for Player implementations."""

from doushou.core.board import Board
from doushou.core.enums import Side
from doushou.game.player import AIPlayer, HumanPlayer


class TestHumanPlayer:
    def test_properties(self) -> None:
        p = HumanPlayer(Side.RED, "Alice")
        assert p.side == Side.RED
        assert p.name == "Alice"
        assert p.is_human is True

    def test_default_name(self) -> None:
        p = HumanPlayer(Side.BLACK)
        assert "black" in p.name.lower()

    def test_request_move_noop(self) -> None:
        HumanPlayer(Side.RED).request_move(Board.initial())  # should not raise


class TestAIPlayer:
    def test_properties(self) -> None:
        p = AIPlayer(Side.BLACK, "Jungle AI")
        assert p.side == Side.BLACK
        assert p.name == "Jungle AI"
        assert p.is_human is False

    def test_request_move_calls_callback(self) -> None:
        called_with = []
        p = AIPlayer(Side.BLACK, on_request_move=called_with.append)
        board = Board.initial()
        p.request_move(board)
        assert called_with == [board]
        assert called_with[0] is board

    def test_request_move_without_callback(self) -> None:
        AIPlayer(Side.RED).request_move(Board.initial())  # should not raise
