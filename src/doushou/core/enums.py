"""Core enumerations for the Jungle domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side color. RED is anchored to row 0 and always moves first."""

    RED = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Animal kinds; the value is the capture rank (1 weakest, 8 strongest)."""

    RAT = 1
    CAT = 2
    DOG = 3
    WOLF = 4
    LEOPARD = 5
    TIGER = 6
    LION = 7
    ELEPHANT = 8

    @property
    def rank(self) -> int:
        return int(self.value)

    @property
    def can_jump(self) -> bool:
        """Lion and Tiger may leap across the rivers."""
        return self in (PieceKind.LION, PieceKind.TIGER)

    @property
    def can_swim(self) -> bool:
        return self is PieceKind.RAT

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


class Terrain(IntEnum):
    """Static cell terrain."""

    GROUND = 0
    WATER = 1
    RED_TRAP = 2
    BLACK_TRAP = 3
    RED_DEN = 4
    BLACK_DEN = 5

    @property
    def is_trap(self) -> bool:
        return self in (Terrain.RED_TRAP, Terrain.BLACK_TRAP)

    @property
    def is_den(self) -> bool:
        return self in (Terrain.RED_DEN, Terrain.BLACK_DEN)

    @property
    def owner(self) -> Side | None:
        """Side owning a trap or den cell, ``None`` for ground and water."""
        if self in (Terrain.RED_TRAP, Terrain.RED_DEN):
            return Side.RED
        if self in (Terrain.BLACK_TRAP, Terrain.BLACK_DEN):
            return Side.BLACK
        return None


class GameResult(IntEnum):
    """Outcome of a game. There is no draw."""

    IN_PROGRESS = 0
    RED_WINS = 1
    BLACK_WINS = 2

    @classmethod
    def win_for(cls, side: Side) -> GameResult:
        return cls.RED_WINS if side == Side.RED else cls.BLACK_WINS

    @property
    def winner(self) -> Side | None:
        if self == GameResult.RED_WINS:
            return Side.RED
        if self == GameResult.BLACK_WINS:
            return Side.BLACK
        return None


class GameEndReason(IntEnum):
    """How a finished game was decided."""

    DEN_REACHED = 1
    ANNIHILATION = 2
    NO_LEGAL_MOVES = 3
