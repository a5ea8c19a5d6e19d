"""Tests for the Qt engine bridge."""

from __future__ import annotations

import random

import pytest
from PyQt6.QtTest import QSignalSpy, QTest

from doushou.core.board import Board
from doushou.core.enums import Side
from doushou.core.move import Move
from doushou.core.move_generator import MoveGenerator
from doushou.core.notation import board_from_diagram
from doushou.engine.qt_bridge import EngineWorker, qt_scheduler
from doushou.engine.search import SearchLimits, SearchResult
from doushou.game.session import GameSession
from doushou.settings import GameSettings

_BOXED = """
.......
.......
.......
.......
.......
.......
.......
r......
Er.....
"""


class _ExplodingEngine:
    def search(self, _board: Board, _side: Side, _limits: SearchLimits) -> SearchResult:
        raise RuntimeError("boom")


class TestEngineWorker:
    def test_emits_best_move(self, qapp: object) -> None:
        board = Board.initial()
        worker = EngineWorker(max_depth=1, rng=random.Random(0))
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(board, int(Side.RED), 3)

        assert len(best_moves) == 1
        assert best_moves[0][0] == 3
        move = best_moves[0][1]
        assert isinstance(move, Move)
        assert move in MoveGenerator(board).generate_moves(Side.RED)

    def test_caller_board_untouched(self, qapp: object) -> None:
        board = Board.initial()
        before = board.copy()
        worker = EngineWorker(max_depth=2)
        worker.request_move(board, int(Side.BLACK), 1)
        assert board == before

    def test_emits_no_move_when_stuck(self, qapp: object) -> None:
        worker = EngineWorker(max_depth=2)
        no_move = QSignalSpy(worker.search_no_move)
        best_moves = QSignalSpy(worker.best_move_ready)

        worker.request_move(board_from_diagram(_BOXED), int(Side.RED), 11)

        assert len(no_move) == 1
        assert no_move[0][0] == 11
        assert len(best_moves) == 0

    def test_rejects_invalid_board(self, qapp: object) -> None:
        worker = EngineWorker()
        errors = QSignalSpy(worker.search_error)

        worker.request_move("not a board", int(Side.RED), 5)

        assert len(errors) == 1
        assert errors[0][0] == 5

    def test_engine_failure_reported(self, qapp: object) -> None:
        worker = EngineWorker()
        worker._engine = _ExplodingEngine()
        errors = QSignalSpy(worker.search_error)

        worker.request_move(Board.initial(), int(Side.RED), 9)

        assert len(errors) == 1
        assert errors[0][1] == "boom"

    def test_set_depth(self, qapp: object) -> None:
        worker = EngineWorker(max_depth=3)
        worker.set_depth(0)
        assert worker._limits == SearchLimits(max_depth=0)


class TestQtScheduler:
    def test_callback_runs_on_later_tick(self, qapp: object) -> None:
        calls: list[str] = []
        schedule = qt_scheduler(0)

        schedule(lambda: calls.append("ran"))
        assert calls == []

        QTest.qWait(50)
        assert calls == ["ran"]

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(ValueError):
            qt_scheduler(-1)

    def test_drives_session_ai_turn(self, qapp: object) -> None:
        settings = GameSettings(search_depth=1, ai_move_delay_ms=0)
        session = GameSession(
            settings,
            rng=random.Random(3),
            scheduler=qt_scheduler(settings.ai_move_delay_ms),
        )
        session.new_game(Side.BLACK)
        assert session.current_turn() == Side.RED

        QTest.qWait(200)
        assert session.current_turn() == Side.BLACK
        assert session.last_ai_move is not None
