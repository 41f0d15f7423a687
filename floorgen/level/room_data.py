"""
Room, floor and layout data structures for dungeon floor generation.
"""

import hashlib
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from floorgen.tiles.tile_types import TileType

Point = Tuple[int, int]
Grid = List[List[TileType]]
WorldPosition = Tuple[float, float, float]


class Direction(Enum):
    """Compass direction between neighbouring rooms. North is -y."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def dx(self) -> int:
        return _OFFSETS[self][0]

    @property
    def dy(self) -> int:
        return _OFFSETS[self][1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OFFSETS: Dict[Direction, Point] = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

_OPPOSITES: Dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

# Expansion order before shuffling; keeps the RNG call sequence stable.
DIRECTIONS: Tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.EAST,
    Direction.WEST,
)


class RoomRole(Enum):
    START = "start"
    NORMAL = "normal"
    BOSS = "boss"
    TREASURE = "treasure"
    SHOP = "shop"


@dataclass
class Door:
    direction: Direction
    locked: bool = False


@dataclass
class Room:
    """
    A single room in the floor graph.

    Attributes:
        id: Index of the room in FloorData.rooms
        grid_x, grid_y: Position on the room grid
        role: What kind of room this is
        doors: Doors leading to neighbouring rooms
        distance_from_start: Door hops from the start room (BFS)
        enemy_spawn_points: Tile coordinates resolved once per floor
        enemy_count: Enemies to spawn; truncated to the resolved spawn points
        tinted_rock_budget: Rocks to upgrade to tinted rocks in this room
    """
    id: int
    grid_x: int
    grid_y: int
    role: RoomRole = RoomRole.NORMAL
    doors: List[Door] = field(default_factory=list)
    distance_from_start: int = 0
    enemy_spawn_points: List[Point] = field(default_factory=list)
    enemy_count: int = 0
    tinted_rock_budget: int = 0

    @property
    def position(self) -> Point:
        return (self.grid_x, self.grid_y)

    def has_door(self, direction: Direction) -> bool:
        return any(door.direction == direction for door in self.doors)

    def door_directions(self) -> List[Direction]:
        return [door.direction for door in self.doors]


@dataclass
class FloorData:
    """
    A complete generated floor.

    Attributes:
        rooms: All rooms, indexed by room id
        start_room_id: ID of the room the player enters
        exit_room_id: ID of the boss/exit room
        room_count: Number of rooms actually generated
        seed: Floor seed used for every room layout on this floor
        floor_number: Floor index the floor was generated for
    """
    rooms: List[Room]
    start_room_id: int
    exit_room_id: int
    room_count: int
    seed: int
    floor_number: int = 1

    def get_room(self, room_id: int) -> Optional[Room]:
        """Get room by ID."""
        if 0 <= room_id < len(self.rooms) and self.rooms[room_id].id == room_id:
            return self.rooms[room_id]
        for room in self.rooms:
            if room.id == room_id:
                return room
        return None

    def room_at(self, grid_x: int, grid_y: int) -> Optional[Room]:
        for room in self.rooms:
            if room.grid_x == grid_x and room.grid_y == grid_y:
                return room
        return None

    def neighbor(self, room: Room, direction: Direction) -> Optional[Room]:
        """Room adjacent to `room` on the given side, if any."""
        return self.room_at(room.grid_x + direction.dx, room.grid_y + direction.dy)

    @property
    def start_room(self) -> Room:
        return self.get_room(self.start_room_id)

    @property
    def exit_room(self) -> Room:
        return self.get_room(self.exit_room_id)


@dataclass
class RoomLayoutData:
    """Tile grid and placement info for one room."""
    grid: Grid
    world_offset: WorldPosition
    exit_position: Optional[Point] = None
    enemy_count: int = 0

    def tile_at(self, x: int, y: int) -> TileType:
        return self.grid[y][x]

    def positions_of(self, tile: TileType) -> List[Point]:
        return [
            (x, y)
            for y, row in enumerate(self.grid)
            for x, value in enumerate(row)
            if value == tile
        ]

    def count_of(self, tile: TileType) -> int:
        return sum(row.count(tile) for row in self.grid)

    def signature(self) -> str:
        """Stable digest of the grid contents, for snapshot comparisons."""
        raw = bytes(int(value) for row in self.grid for value in row)
        return hashlib.md5(raw).hexdigest()
