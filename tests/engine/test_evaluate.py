"""Tests for the static evaluator."""

from doushou.core.board import Board
from doushou.core.enums import Side
from doushou.core.notation import board_from_diagram
from doushou.engine.evaluate import WIN_SCORE, evaluate, is_decisive, terminal_score


class TestEvaluate:
    def test_initial_is_balanced(self) -> None:
        assert evaluate(Board.initial(), Side.RED) == 0
        assert terminal_score(Board.initial(), Side.RED) is None

    def test_material_balance(self) -> None:
        board = Board.initial()
        board[(6, 0)] = None  # black elephant gone
        assert evaluate(board, Side.RED) == 8
        assert evaluate(board, Side.BLACK) == -8

    def test_sentinel_exceeds_material(self) -> None:
        assert WIN_SCORE > 36
        assert not is_decisive(36)
        assert is_decisive(-WIN_SCORE)

    def test_den_reached(self) -> None:
        board = board_from_diagram(
            """
            ...C...
            .......
            e......
            .......
            .......
            .......
            .......
            .......
            .......
            """
        )
        assert evaluate(board, Side.RED) == WIN_SCORE
        assert evaluate(board, Side.BLACK) == -WIN_SCORE

    def test_annihilated_side_scores_loss(self) -> None:
        board = board_from_diagram(
            """
            .......
            .......
            .......
            .......
            .......
            ...L...
            .......
            .......
            .......
            """
        )
        assert evaluate(board, Side.RED) == WIN_SCORE
        assert evaluate(board, Side.BLACK) == -WIN_SCORE
