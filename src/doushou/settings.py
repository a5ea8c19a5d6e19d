"""User-configurable game settings."""

from __future__ import annotations

from dataclasses import dataclass

from doushou.core.enums import Side


@dataclass
class GameSettings:
    """All user-configurable settings."""

    # Side the human plays; RED always moves first.
    human_side: Side = Side.RED

    # Engine
    search_depth: int = 3

    # Pause before the AI starts thinking so the board can repaint.
    ai_move_delay_ms: int = 250

    def __post_init__(self) -> None:
        if self.search_depth < 0:
            raise ValueError(f"search_depth must be >= 0, got {self.search_depth}")
        if self.ai_move_delay_ms < 0:
            raise ValueError(
                f"ai_move_delay_ms must be >= 0, got {self.ai_move_delay_ms}"
            )
        self.human_side = Side(self.human_side)

    @property
    def ai_side(self) -> Side:
        return self.human_side.opposite
