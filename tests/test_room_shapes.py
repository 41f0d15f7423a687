import logging

import pytest
from floorgen.level import room_shapes
from floorgen.level.room_data import Room, RoomRole
from floorgen.level.room_shapes import (
    boss_shape,
    carve_interior,
    get_room_shape,
    normal_shape,
    shop_shape,
    treasure_shape
)
from floorgen.level.seed_manager import SeededRandom
from floorgen.tiles.tile_types import TileType


def wall_grid(size=30):
    return [[TileType.WALL for _ in range(size)] for _ in range(size)]


def carve(role, room_id=0, seed=1, size=30):
    grid = wall_grid(size)
    carve_interior(SeededRandom(seed), Room(id=room_id, grid_x=0, grid_y=0, role=role), grid)
    return grid


class TestShapeRegistry:
    """Test role to shape dispatch."""

    def test_every_role_registered(self):
        """Each RoomRole has a shape"""
        for role in RoomRole:
            assert get_room_shape(role) is not None

    def test_registered_shapes(self):
        assert get_room_shape(RoomRole.START) is normal_shape
        assert get_room_shape(RoomRole.NORMAL) is normal_shape
        assert get_room_shape(RoomRole.BOSS) is boss_shape
        assert get_room_shape(RoomRole.TREASURE) is treasure_shape
        assert get_room_shape(RoomRole.SHOP) is shop_shape

    def test_missing_shape_falls_back_and_logs(self, monkeypatch, caplog):
        """An unregistered role gets the normal shape plus an ERROR log"""
        monkeypatch.delitem(room_shapes._REGISTRY, RoomRole.TREASURE)

        with caplog.at_level(logging.ERROR, logger="floorgen.level.room_shapes"):
            grid = carve(RoomRole.TREASURE, room_id=2, seed=9)

        assert grid == carve(RoomRole.NORMAL, room_id=2, seed=9)
        assert grid[15][15] == TileType.FLOOR
        assert any("configuration defect" in r.message for r in caplog.records)


class TestShapes:
    """Test individual interior shapes."""

    @pytest.mark.parametrize("role", list(RoomRole))
    @pytest.mark.parametrize("room_id", [0, 1, 2, 3, 7])
    def test_center_is_floor(self, role, room_id):
        """The entry tile is always carved"""
        for seed in (1, 50, 12345):
            assert carve(role, room_id, seed)[15][15] == TileType.FLOOR

    @pytest.mark.parametrize("role", list(RoomRole))
    def test_border_untouched(self, role):
        """Shapes never carve the outer two rings"""
        for room_id in range(4):
            grid = carve(role, room_id)
            for y in range(30):
                for x in range(30):
                    if x < 2 or y < 2 or x >= 28 or y >= 28:
                        assert grid[y][x] == TileType.WALL

    def test_normal_variants_differ(self):
        """Room id picks one of four layouts"""
        grids = [carve(RoomRole.NORMAL, room_id) for room_id in range(4)]
        for i in range(4):
            for j in range(i + 1, 4):
                assert grids[i] != grids[j]

    def test_hall_has_wall_pillars(self):
        grid = carve(RoomRole.NORMAL, room_id=3)
        assert grid[10][10] == TileType.WALL
        assert grid[19][19] == TileType.WALL
        assert grid[10][11] == TileType.FLOOR

    def test_boss_arena(self):
        """Boss room is a wide arena with four 2x2 pillars"""
        grid = carve(RoomRole.BOSS)

        assert sum(row.count(TileType.PILLAR) for row in grid) == 16
        assert grid[2][2] == TileType.FLOOR
        assert grid[27][27] == TileType.FLOOR

    def test_treasure_octagon_corners_clipped(self):
        grid = carve(RoomRole.TREASURE)

        assert grid[5][5] == TileType.WALL
        assert grid[15][5] == TileType.FLOOR
        assert grid[5][15] == TileType.FLOOR

    def test_shop_furniture(self):
        """Shop has four slots, four pillars and two torches"""
        grid = carve(RoomRole.SHOP)

        assert sum(row.count(TileType.SHOP_SLOT) for row in grid) == 4
        assert sum(row.count(TileType.PILLAR) for row in grid) == 4
        assert sum(row.count(TileType.TORCH) for row in grid) == 2
        # Slots stay clear of the 3-wide center cross
        for x in range(30):
            if grid[12][x] == TileType.SHOP_SLOT:
                assert abs(x - 15) > 1

    @pytest.mark.parametrize("role", list(RoomRole))
    def test_larger_grid(self, role):
        """Shapes scale with the grid"""
        grid = carve(role, size=40)
        assert grid[20][20] == TileType.FLOOR
