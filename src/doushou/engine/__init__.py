"""Jungle engine package: evaluation, minimax search and Qt worker bridge."""

from doushou.engine.evaluate import WIN_SCORE, evaluate, terminal_score
from doushou.engine.minimax import MinimaxSearchEngine
from doushou.engine.qt_bridge import EngineWorker, qt_scheduler
from doushou.engine.search import IEngine, Scheduler, SearchLimits, SearchResult

__all__ = [
    "EngineWorker",
    "IEngine",
    "MinimaxSearchEngine",
    "Scheduler",
    "SearchLimits",
    "SearchResult",
    "WIN_SCORE",
    "evaluate",
    "qt_scheduler",
    "terminal_score",
]
