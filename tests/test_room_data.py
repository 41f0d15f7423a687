import pytest
from floorgen.level.room_data import (
    DIRECTIONS,
    Direction,
    Door,
    FloorData,
    Room,
    RoomLayoutData,
    RoomRole
)
from floorgen.tiles.tile_types import TileType


class TestTileType:
    """Test tile classification."""

    def test_solid_tiles(self):
        """Tiles that need colliders"""
        for tile in (TileType.WALL, TileType.LOCKED_DOOR, TileType.ROCK, TileType.TINTED_ROCK,
                     TileType.CRATE, TileType.PILLAR, TileType.TORCH, TileType.SHOP_SLOT):
            assert tile.is_solid
            assert not tile.is_walkable

    def test_walkable_tiles(self):
        for tile in (TileType.FLOOR, TileType.DOOR, TileType.GRASS, TileType.PEBBLE,
                     TileType.SPIKE, TileType.ENEMY_SPAWN_MARKER, TileType.EXIT_PORTAL):
            assert tile.is_walkable

    def test_hazards(self):
        """Spikes hurt but can be crossed, pits cannot"""
        assert TileType.SPIKE.is_hazard
        assert TileType.PIT.is_hazard
        assert TileType.SPIKE.is_walkable
        assert not TileType.PIT.is_walkable
        assert not TileType.PIT.is_solid

    def test_doors_and_markers(self):
        assert TileType.DOOR.is_door and TileType.LOCKED_DOOR.is_door
        assert not TileType.FLOOR.is_door
        assert TileType.LOOT_SPAWN_MARKER.is_marker
        assert not TileType.ROCK.is_marker

    def test_glyphs_unique(self):
        glyphs = [tile.glyph for tile in TileType]
        assert len(set(glyphs)) == len(glyphs)
        assert all(len(g) == 1 for g in glyphs)

    def test_display_name(self):
        assert TileType.ENEMY_SPAWN_MARKER.display_name == "Enemy Spawn Marker"


class TestDirection:
    """Test compass directions."""

    def test_offsets(self):
        """North is -y"""
        assert (Direction.NORTH.dx, Direction.NORTH.dy) == (0, -1)
        assert (Direction.SOUTH.dx, Direction.SOUTH.dy) == (0, 1)
        assert (Direction.EAST.dx, Direction.EAST.dy) == (1, 0)
        assert (Direction.WEST.dx, Direction.WEST.dy) == (-1, 0)

    def test_opposites(self):
        for direction in DIRECTIONS:
            assert direction.opposite.opposite is direction
            assert direction.dx + direction.opposite.dx == 0
            assert direction.dy + direction.opposite.dy == 0

    def test_expansion_order(self):
        assert DIRECTIONS == (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)


class TestRoomAndFloor:
    """Test room and floor helpers."""

    def make_floor(self):
        rooms = [
            Room(id=0, grid_x=0, grid_y=0, role=RoomRole.START, doors=[Door(Direction.SOUTH)]),
            Room(id=1, grid_x=0, grid_y=1, role=RoomRole.BOSS, distance_from_start=1,
                 doors=[Door(Direction.NORTH)]),
        ]
        return FloorData(rooms=rooms, start_room_id=0, exit_room_id=1, room_count=2, seed=7)

    def test_room_defaults(self):
        room = Room(id=3, grid_x=1, grid_y=2)
        assert room.role == RoomRole.NORMAL
        assert room.doors == []
        assert room.enemy_spawn_points == []
        assert room.position == (1, 2)

    def test_has_door(self):
        room = Room(id=0, grid_x=0, grid_y=0, doors=[Door(Direction.EAST, locked=True)])
        assert room.has_door(Direction.EAST)
        assert not room.has_door(Direction.WEST)
        assert room.door_directions() == [Direction.EAST]

    def test_floor_lookups(self):
        floor = self.make_floor()

        assert floor.start_room.id == 0
        assert floor.exit_room.role == RoomRole.BOSS
        assert floor.room_at(0, 1) is floor.rooms[1]
        assert floor.room_at(5, 5) is None
        assert floor.neighbor(floor.rooms[0], Direction.SOUTH) is floor.rooms[1]
        assert floor.get_room(42) is None


class TestRoomLayoutData:
    """Test layout query helpers."""

    def test_queries(self):
        grid = [
            [TileType.WALL, TileType.WALL, TileType.WALL],
            [TileType.WALL, TileType.FLOOR, TileType.ROCK],
            [TileType.WALL, TileType.ROCK, TileType.WALL],
        ]
        layout = RoomLayoutData(grid=grid, world_offset=(0, 0, 0))

        assert layout.tile_at(2, 1) == TileType.ROCK
        assert layout.positions_of(TileType.ROCK) == [(2, 1), (1, 2)]
        assert layout.count_of(TileType.WALL) == 6
        assert layout.exit_position is None

    def test_signature_tracks_content(self):
        a = RoomLayoutData(grid=[[TileType.FLOOR, TileType.WALL]], world_offset=(0, 0, 0))
        b = RoomLayoutData(grid=[[TileType.FLOOR, TileType.WALL]], world_offset=(60, 0, 0))
        c = RoomLayoutData(grid=[[TileType.WALL, TileType.FLOOR]], world_offset=(0, 0, 0))

        assert a.signature() == b.signature()
        assert a.signature() != c.signature()
