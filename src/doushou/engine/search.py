"""Shared engine search models and protocol."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from doushou.core.board import Board
    from doushou.core.enums import Side
    from doushou.core.move import Move

# Defers a zero-argument callback to a later tick of the host event loop.
Scheduler = Callable[[Callable[[], None]], None]


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = 3


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    score: int
    depth: int
    nodes: int
    candidates: tuple[Move, ...] = ()


class IEngine(Protocol):
    """Protocol for engines used by the game layer."""

    def search(
        self,
        board: Board,
        side: Side,
        limits: SearchLimits,
    ) -> SearchResult: ...
