"""Tests for the terrain map."""

import pytest

from doushou.core.enums import Side, Terrain
from doushou.core.terrain import (
    DEN_CELLS,
    STANDARD_TERRAIN,
    TRAP_CELLS,
    is_enemy_den,
    is_enemy_trap,
    is_own_den,
    terrain_at,
)
from doushou.core.types import BOARD_COLS, BOARD_ROWS


class TestLayout:
    def test_water_cells(self) -> None:
        water = [
            (r, c)
            for r in range(BOARD_ROWS)
            for c in range(BOARD_COLS)
            if terrain_at(r, c) == Terrain.WATER
        ]
        assert len(water) == 12
        assert all(3 <= r <= 5 and c in (1, 2, 4, 5) for r, c in water)

    def test_land_bridges_between_rivers(self) -> None:
        for r in (3, 4, 5):
            assert terrain_at(r, 0) == Terrain.GROUND
            assert terrain_at(r, 3) == Terrain.GROUND
            assert terrain_at(r, 6) == Terrain.GROUND

    def test_dens(self) -> None:
        assert terrain_at(0, 3) == Terrain.RED_DEN
        assert terrain_at(8, 3) == Terrain.BLACK_DEN
        assert DEN_CELLS[Side.RED] == (0, 3)

    def test_traps(self) -> None:
        for cell in TRAP_CELLS[Side.RED]:
            assert terrain_at(*cell) == Terrain.RED_TRAP
        for cell in TRAP_CELLS[Side.BLACK]:
            assert terrain_at(*cell) == Terrain.BLACK_TRAP

    def test_repr_has_nine_rows(self) -> None:
        assert len(repr(STANDARD_TERRAIN).splitlines()) == BOARD_ROWS


class TestBounds:
    @pytest.mark.parametrize("cell", [(-1, 0), (9, 0), (0, -1), (0, 7), (12, 12)])
    def test_out_of_bounds_returns_none(self, cell: tuple[int, int]) -> None:
        assert terrain_at(*cell) is None
        assert STANDARD_TERRAIN[cell] is None

    def test_map_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            STANDARD_TERRAIN[(0, 0)] = Terrain.WATER  # type: ignore[index]


class TestOwnership:
    def test_owner(self) -> None:
        assert Terrain.RED_TRAP.owner == Side.RED
        assert Terrain.BLACK_DEN.owner == Side.BLACK
        assert Terrain.WATER.owner is None

    def test_den_helpers(self) -> None:
        assert is_own_den(Terrain.RED_DEN, Side.RED)
        assert not is_own_den(Terrain.BLACK_DEN, Side.RED)
        assert is_enemy_den(Terrain.BLACK_DEN, Side.RED)
        assert not is_enemy_den(None, Side.RED)

    def test_enemy_trap(self) -> None:
        assert is_enemy_trap(Terrain.BLACK_TRAP, Side.RED)
        assert not is_enemy_trap(Terrain.RED_TRAP, Side.RED)
        assert not is_enemy_trap(Terrain.GROUND, Side.BLACK)
