"""Bounded-retry tile placement and organic clump growth.

Every routine here samples random interior coordinates a fixed number of
times and gives up quietly when it runs out. Coming back with fewer tiles
than asked for is a normal outcome, not an error.
"""

from typing import Callable, List, Optional

from floorgen import config as defaults
from floorgen.level.room_data import DIRECTIONS, Grid, Point
from floorgen.level.seed_manager import SeededRandom
from floorgen.tiles.tile_types import TileType

Accept = Callable[[int, int], bool]
AcceptWithPlaced = Callable[[int, int, List[Point]], bool]


def grid_center(grid: Grid) -> Point:
    return (len(grid[0]) // 2, len(grid) // 2)


def is_center(grid: Grid, x: int, y: int) -> bool:
    return (x, y) == grid_center(grid)


def not_center(grid: Grid) -> Accept:
    """Acceptance predicate keeping the entry tile free."""
    cx, cy = grid_center(grid)
    return lambda x, y: x != cx or y != cy


def min_center_distance(grid: Grid, distance: int) -> Accept:
    """Acceptance predicate: Chebyshev distance from the center >= distance."""
    cx, cy = grid_center(grid)
    return lambda x, y: max(abs(x - cx), abs(y - cy)) >= distance


def in_interior(grid: Grid, x: int, y: int, border: int = defaults.BORDER) -> bool:
    height = len(grid)
    width = len(grid[0]) if height else 0
    return border <= x < width - border and border <= y < height - border


def sample_interior(grid: Grid, rng: SeededRandom, border: int = defaults.BORDER) -> Point:
    """Random coordinate outside the reserved border (x first, then y)."""
    x = rng.next_int(border, len(grid[0]) - 1 - border)
    y = rng.next_int(border, len(grid) - 1 - border)
    return (x, y)


def find_position(
    grid: Grid,
    rng: SeededRandom,
    accept: Optional[Accept] = None,
    attempts: int = defaults.PLACEMENT_ATTEMPTS,
    border: int = defaults.BORDER,
) -> Optional[Point]:
    """
    Sample interior coordinates until one lands on FLOOR and passes `accept`.

    Returns:
        The first accepted coordinate, or None once `attempts` samples
        have been used up.
    """
    for _ in range(attempts):
        x, y = sample_interior(grid, rng, border)
        if grid[y][x] != TileType.FLOOR:
            continue
        if accept is not None and not accept(x, y):
            continue
        return (x, y)
    return None


def sample_positions(
    grid: Grid,
    rng: SeededRandom,
    count: int,
    accept: Optional[AcceptWithPlaced] = None,
    attempts: int = defaults.PLACEMENT_ATTEMPTS,
    border: int = defaults.BORDER,
) -> List[Point]:
    """
    Collect up to `count` accepted coordinates under one shared attempt budget.

    Unlike find_position, the predicate also sees the points accepted so far
    so callers can keep them apart. The grid is not modified.
    """
    accepted: List[Point] = []
    tries = 0
    while len(accepted) < count and tries < attempts:
        tries += 1
        x, y = sample_interior(grid, rng, border)
        if grid[y][x] != TileType.FLOOR:
            continue
        if accept is not None and not accept(x, y, accepted):
            continue
        accepted.append((x, y))
    return accepted


def place_single(
    grid: Grid,
    rng: SeededRandom,
    tile: TileType,
    accept: Optional[Accept] = None,
    attempts: int = defaults.PLACEMENT_ATTEMPTS,
    border: int = defaults.BORDER,
) -> Optional[Point]:
    """Write `tile` at one accepted FLOOR coordinate, if one turns up."""
    pos = find_position(grid, rng, accept, attempts, border)
    if pos is not None:
        x, y = pos
        grid[y][x] = tile
    return pos


def place_many(
    grid: Grid,
    rng: SeededRandom,
    tile: TileType,
    count: int,
    accept: Optional[Accept] = None,
    attempts: int = defaults.PLACEMENT_ATTEMPTS,
    border: int = defaults.BORDER,
) -> List[Point]:
    """Run place_single `count` times; each placement gets its own budget."""
    placed: List[Point] = []
    for _ in range(count):
        pos = place_single(grid, rng, tile, accept, attempts, border)
        if pos is not None:
            placed.append(pos)
    return placed


def grow_clump(
    grid: Grid,
    rng: SeededRandom,
    tile: TileType,
    total_budget: int,
    min_size: int,
    max_size: int,
    attempts: int = defaults.PLACEMENT_ATTEMPTS,
    retry_limit: int = defaults.CLUMP_RETRY_LIMIT,
    border: int = defaults.BORDER,
) -> List[Point]:
    """
    Grow irregular connected patches of `tile` over FLOOR.

    Each round seeds a clump on a random FLOOR tile, then repeatedly picks a
    random clump tile that still has a FLOOR neighbour and converts the first
    such neighbour in shuffled order, until the clump reaches a random size in
    [min_size, max_size]. Rounds continue until `total_budget` tiles have been
    converted or `retry_limit` rounds have run.

    Only FLOOR tiles are converted and the center tile is never touched.

    Returns:
        Every converted coordinate, in conversion order.
    """
    placed: List[Point] = []
    if total_budget <= 0:
        return placed

    keep_center = not_center(grid)

    def can_convert(x: int, y: int) -> bool:
        return (
            in_interior(grid, x, y, border)
            and grid[y][x] == TileType.FLOOR
            and keep_center(x, y)
        )

    def has_open_neighbor(point: Point) -> bool:
        px, py = point
        return any(can_convert(px + d.dx, py + d.dy) for d in DIRECTIONS)

    remaining = total_budget
    rounds = 0
    while remaining > 0 and rounds < retry_limit:
        rounds += 1
        seed = find_position(grid, rng, keep_center, attempts, border)
        if seed is None:
            continue

        sx, sy = seed
        grid[sy][sx] = tile
        remaining -= 1
        clump = [seed]
        placed.append(seed)

        target = rng.next_int(min_size, max_size)
        while len(clump) < target and remaining > 0:
            frontier = [p for p in clump if has_open_neighbor(p)]
            if not frontier:
                break
            fx, fy = rng.choice(frontier)
            for direction in rng.shuffle(DIRECTIONS):
                nx, ny = fx + direction.dx, fy + direction.dy
                if can_convert(nx, ny):
                    grid[ny][nx] = tile
                    remaining -= 1
                    clump.append((nx, ny))
                    placed.append((nx, ny))
                    break

    return placed
