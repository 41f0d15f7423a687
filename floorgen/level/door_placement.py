"""Door corridor carving.

Each door on a room gets a straight 3-wide corridor from its edge of the tile
grid to the center row/column. The corridor overwrites whatever is already
there, so this must run after every interior, decoration and hazard pass:
doors stay walkable no matter what was placed first.
"""

from typing import Iterable

from floorgen.level.room_data import Direction, Door, Grid
from floorgen.tiles.tile_types import TileType


def carve_door_corridor(grid: Grid, direction: Direction, locked: bool = False) -> None:
    """
    Carve one corridor and its door tile.

    The edge-most tile on the center line becomes DOOR (or LOCKED_DOOR);
    every other corridor tile becomes FLOOR.
    """
    size = len(grid)
    mid = size // 2
    door_tile = TileType.LOCKED_DOOR if locked else TileType.DOOR

    if direction == Direction.NORTH:
        span = range(0, mid + 1)
        edge = 0
    elif direction == Direction.SOUTH:
        span = range(mid, size)
        edge = size - 1
    elif direction == Direction.WEST:
        span = range(0, mid + 1)
        edge = 0
    else:
        span = range(mid, size)
        edge = size - 1

    vertical = direction in (Direction.NORTH, Direction.SOUTH)
    for along in span:
        for across in (mid - 1, mid, mid + 1):
            value = door_tile if (across == mid and along == edge) else TileType.FLOOR
            if vertical:
                grid[along][across] = value
            else:
                grid[across][along] = value


def carve_doors(grid: Grid, doors: Iterable[Door]) -> None:
    """Carve a corridor for every door, in door order."""
    for door in doors:
        carve_door_corridor(grid, door.direction, door.locked)
