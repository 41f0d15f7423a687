"""Interior shapes per room role.

Each shape carves FLOOR (and fixed furniture) out of an all-WALL grid. All
shapes keep the center tile FLOOR because that is where the player enters.
"""

import logging
from typing import Callable, Dict, Optional

from floorgen.level.room_data import Grid, Room, RoomRole
from floorgen.level.seed_manager import SeededRandom
from floorgen.tiles.tile_types import TileType

logger = logging.getLogger(__name__)

RoomShape = Callable[[SeededRandom, Room, Grid], None]

_REGISTRY: Dict[RoomRole, RoomShape] = {}


def register_room_shape(role: RoomRole, shape: RoomShape) -> None:
    _REGISTRY[role] = shape


def get_room_shape(role: RoomRole) -> Optional[RoomShape]:
    return _REGISTRY.get(role)


def carve_interior(rng: SeededRandom, room: Room, grid: Grid) -> None:
    """Dispatch to the shape registered for the room's role."""
    shape = _REGISTRY.get(room.role)
    if shape is None:
        logger.error(
            "No room shape registered for role %r (room %d); using the normal "
            "shape. This is a configuration defect.",
            room.role, room.id,
        )
        shape = _REGISTRY[RoomRole.NORMAL]
    shape(rng, room, grid)


def _fill(grid: Grid, x0: int, y0: int, x1: int, y1: int, tile: TileType = TileType.FLOOR) -> None:
    """Fill the half-open rectangle [x0, x1) x [y0, y1)."""
    for y in range(y0, y1):
        for x in range(x0, x1):
            grid[y][x] = tile


def normal_shape(rng: SeededRandom, room: Room, grid: Grid) -> None:
    """Start and normal rooms: four variants picked by room id."""
    size = len(grid)
    variant = room.id % 4

    if variant == 0:
        # Square
        side = rng.next_int(size // 2 - 1, size - 8)
        start = (size - side) // 2
        _fill(grid, start, start, start + side, start + side)
    elif variant == 1:
        # L-shape
        _fill(grid, size // 6, size // 6, size * 3 // 5, size * 4 // 5)
        _fill(grid, size * 3 // 5, size // 2, size * 4 // 5, size * 4 // 5)
    elif variant == 2:
        # Cross
        mid = size // 2
        _fill(grid, mid - 3, 3, mid + 3, size - 3)
        _fill(grid, 3, mid - 3, size - 3, mid + 3)
    else:
        # Hall with four wall pillars
        _fill(grid, 4, 4, size - 4, size - 4)
        near, far = size // 3, size - 1 - size // 3
        for px, py in ((near, near), (far, near), (near, far), (far, far)):
            grid[py][px] = TileType.WALL


def boss_shape(rng: SeededRandom, room: Room, grid: Grid) -> None:
    """Open arena with four 2x2 pillars."""
    size = len(grid)
    _fill(grid, 2, 2, size - 2, size - 2)

    mid = size // 2
    offset = size // 5
    for cx in (mid - offset, mid + offset):
        for cy in (mid - offset, mid + offset):
            _fill(grid, cx, cy, cx + 2, cy + 2, TileType.PILLAR)


def treasure_shape(rng: SeededRandom, room: Room, grid: Grid) -> None:
    """Octagon: a square with clipped corners."""
    size = len(grid)
    mid = size // 2
    radius = size // 3
    for y in range(3, size - 3):
        for x in range(3, size - 3):
            dx, dy = abs(x - mid), abs(y - mid)
            if max(dx, dy) <= radius and dx + dy <= radius + radius // 2:
                grid[y][x] = TileType.FLOOR


def shop_shape(rng: SeededRandom, room: Room, grid: Grid) -> None:
    """Square shop floor with a row of item slots north of the center."""
    size = len(grid)
    mid = size // 2
    lo, hi = max(2, mid - 5), min(size - 2, mid + 6)
    _fill(grid, lo, lo, hi, hi)

    # Item slots
    for dx in (-5, -3, 3, 5):
        grid[mid - 3][mid + dx] = TileType.SHOP_SLOT

    for dx in (-4, 4):
        for dy in (-4, 4):
            grid[mid + dy][mid + dx] = TileType.PILLAR

    grid[mid - 5][mid - 2] = TileType.TORCH
    grid[mid - 5][mid + 2] = TileType.TORCH


register_room_shape(RoomRole.START, normal_shape)
register_room_shape(RoomRole.NORMAL, normal_shape)
register_room_shape(RoomRole.BOSS, boss_shape)
register_room_shape(RoomRole.TREASURE, treasure_shape)
register_room_shape(RoomRole.SHOP, shop_shape)
