"""Qt bridge to run engine search off the caller's stack."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from doushou.core.board import Board
from doushou.core.enums import Side
from doushou.engine.minimax import MinimaxSearchEngine
from doushou.engine.search import Scheduler, SearchLimits

_LOGGER = logging.getLogger(__name__)


def qt_scheduler(delay_ms: int = 0) -> Scheduler:
    """Scheduler that runs callbacks from the Qt event loop after *delay_ms*.

    The presentation layer gets a chance to repaint before a (possibly
    long) search blocks the thread.
    """
    if delay_ms < 0:
        raise ValueError("Scheduler delay must be >= 0")

    def schedule(callback: Callable[[], None]) -> None:
        QTimer.singleShot(delay_ms, callback)

    return schedule


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    A search always runs to completion once started; there is no
    cancellation.
    """

    best_move_ready = pyqtSignal(int, object, int, int)
    search_no_move = pyqtSignal(int, int)
    search_error = pyqtSignal(int, str)

    def __init__(
        self,
        *,
        max_depth: int = 3,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self._engine = MinimaxSearchEngine(rng=rng)
        self._limits = SearchLimits(max_depth=max_depth)

    @pyqtSlot(object, int, int)
    def request_move(self, board_obj: object, side_value: int, request_id: int) -> None:
        """Search for the best move of *side_value* on *board_obj* and emit result."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return

        # Search on a private copy; the caller's board may keep changing.
        board = board_obj.copy()
        try:
            result = self._engine.search(board, Side(side_value), self._limits)
        except Exception as exc:
            _LOGGER.warning("Engine search %d failed: %s", request_id, exc)
            self.search_error.emit(request_id, str(exc))
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id, result.score)
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.nodes,
        )

    @pyqtSlot(int)
    def set_depth(self, max_depth: int) -> None:
        """Update search depth (takes effect on the next search)."""
        self._limits = SearchLimits(max_depth=max_depth)
