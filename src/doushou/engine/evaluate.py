"""Static position evaluation."""

from __future__ import annotations

from doushou.core.board import Board
from doushou.core.enums import Side
from doushou.core.rules import Rules

# Larger than any material balance (each side holds at most 1+2+...+8 = 36).
WIN_SCORE = 10_000


def terminal_score(board: Board, side: Side) -> int | None:
    """``+/-WIN_SCORE`` if the game is already decided, otherwise ``None``."""
    if Rules.den_breached(board, side):
        return -WIN_SCORE
    if Rules.den_breached(board, side.opposite):
        return WIN_SCORE
    if not board.has_pieces(side):
        return -WIN_SCORE
    if not board.has_pieces(side.opposite):
        return WIN_SCORE
    return None


def evaluate(board: Board, side: Side) -> int:
    """Score *board* from *side*'s point of view: win/loss sentinel or material."""
    score = terminal_score(board, side)
    if score is not None:
        return score
    return board.material(side) - board.material(side.opposite)


def is_decisive(score: int) -> bool:
    return abs(score) >= WIN_SCORE
