"""
Room layout generation: interior shape plus the fixed sequence of
decoration, hazard, door and spawn passes.

The same (room, floor seed) always yields the same grid. The player-present
flag only decides the enemy count reported back; it never touches the grid.
"""

import logging
import math
from typing import List, Optional, Tuple

from floorgen.level.config_loader import GenerationConfig, resolve_config
from floorgen.level.door_placement import carve_doors
from floorgen.level.placement import (
    find_position,
    grow_clump,
    in_interior,
    min_center_distance,
    not_center,
    place_many,
    sample_positions,
)
from floorgen.level.room_data import DIRECTIONS, Grid, Point, Room, RoomLayoutData, RoomRole
from floorgen.level.room_shapes import carve_interior
from floorgen.level.seed_manager import (
    SeededRandom,
    derive_room_seed,
    derive_sub_seed,
)
from floorgen.tiles.tile_types import TileType

logger = logging.getLogger(__name__)

# Hazard budget multiplier per role; the start room and shop stay safe.
HAZARD_WEIGHTS = {
    RoomRole.START: 0.0,
    RoomRole.NORMAL: 1.0,
    RoomRole.BOSS: 1.0,
    RoomRole.TREASURE: 0.5,
    RoomRole.SHOP: 0.0,
}


def create_wall_grid(size: int) -> Grid:
    return [[TileType.WALL for _ in range(size)] for _ in range(size)]


# --- Rocks -----------------------------------------------------------------

def _rocks_scattered(grid: Grid, rng: SeededRandom, cfg: GenerationConfig) -> List[Point]:
    return place_many(grid, rng, TileType.ROCK, rng.next_int(4, 8),
                      not_center(grid), cfg.placement_attempts, cfg.border)


def _rocks_clustered(grid: Grid, rng: SeededRandom, cfg: GenerationConfig) -> List[Point]:
    return grow_clump(grid, rng, TileType.ROCK, rng.next_int(6, 10), 2, 4,
                      cfg.placement_attempts, cfg.clump_retry_limit, cfg.border)


def _rocks_line(grid: Grid, rng: SeededRandom, cfg: GenerationConfig) -> List[Point]:
    keep_center = not_center(grid)
    anchor = find_position(grid, rng, keep_center, cfg.placement_attempts, cfg.border)
    if anchor is None:
        return []
    horizontal = rng.next() < 0.5
    length = rng.next_int(3, 6)

    placed: List[Point] = []
    ax, ay = anchor
    for i in range(length):
        x, y = (ax + i, ay) if horizontal else (ax, ay + i)
        if not in_interior(grid, x, y, cfg.border):
            break
        if grid[y][x] == TileType.FLOOR and keep_center(x, y):
            grid[y][x] = TileType.ROCK
            placed.append((x, y))
    return placed


def _rocks_ring(grid: Grid, rng: SeededRandom, cfg: GenerationConfig) -> List[Point]:
    mid = len(grid) // 2
    d = rng.next_int(4, 7)
    placed: List[Point] = []
    for x, y in ((mid - d, mid - d), (mid + d, mid - d), (mid - d, mid + d), (mid + d, mid + d)):
        if in_interior(grid, x, y, cfg.border) and grid[y][x] == TileType.FLOOR:
            grid[y][x] = TileType.ROCK
            placed.append((x, y))
    return placed


ROCK_PATTERNS = (_rocks_scattered, _rocks_clustered, _rocks_line, _rocks_ring)


def place_rock_pattern(grid: Grid, rng: SeededRandom, cfg: GenerationConfig) -> List[Point]:
    """Place rocks using one pattern family chosen by the rng."""
    pattern = ROCK_PATTERNS[rng.next_int(0, len(ROCK_PATTERNS) - 1)]
    return pattern(grid, rng, cfg)


def upgrade_tinted_rocks(grid: Grid, rng: SeededRandom, rocks: List[Point], budget: int) -> List[Point]:
    """Turn up to `budget` of the placed rocks into tinted rocks."""
    if budget <= 0 or not rocks:
        return []
    chosen = rng.shuffle(rocks)[:budget]
    for x, y in chosen:
        grid[y][x] = TileType.TINTED_ROCK
    return chosen


# --- Decorations -----------------------------------------------------------

def place_pillars(grid: Grid, rng: SeededRandom, cfg: GenerationConfig) -> List[Point]:
    return place_many(grid, rng, TileType.PILLAR, rng.next_int(0, 2),
                      min_center_distance(grid, 3), cfg.placement_attempts, cfg.border)


def place_torches(grid: Grid, rng: SeededRandom, cfg: GenerationConfig) -> List[Point]:
    """Torches hang on walls, so only floor tiles touching a wall qualify."""
    keep_center = not_center(grid)

    def against_wall(x: int, y: int) -> bool:
        return keep_center(x, y) and any(
            grid[y + d.dy][x + d.dx] == TileType.WALL for d in DIRECTIONS
        )

    return place_many(grid, rng, TileType.TORCH, rng.next_int(1, 3),
                      against_wall, cfg.placement_attempts, cfg.border)


def place_vegetation(grid: Grid, rng: SeededRandom, cfg: GenerationConfig) -> List[Point]:
    placed: List[Point] = []
    for tile, budget, min_size, max_size in (
        (TileType.GRASS, rng.next_int(6, 14), 3, 6),
        (TileType.FLOWER, rng.next_int(0, 5), 1, 3),
        (TileType.MUSHROOM, rng.next_int(0, 4), 1, 2),
    ):
        placed.extend(grow_clump(grid, rng, tile, budget, min_size, max_size,
                                 cfg.placement_attempts, cfg.clump_retry_limit, cfg.border))
    return placed


def place_pebbles(grid: Grid, rng: SeededRandom, cfg: GenerationConfig) -> List[Point]:
    return place_many(grid, rng, TileType.PEBBLE, rng.next_int(3, 8),
                      not_center(grid), cfg.placement_attempts, cfg.border)


def place_crates(grid: Grid, rng: SeededRandom, cfg: GenerationConfig) -> List[Point]:
    return place_many(grid, rng, TileType.CRATE, rng.next_int(0, 3),
                      min_center_distance(grid, 3), cfg.placement_attempts, cfg.border)


# --- Hazards ---------------------------------------------------------------

def hazard_budgets(role: RoomRole, floor_number: int, cfg: GenerationConfig) -> Tuple[int, int]:
    """Return (spike_tiles, pit_tiles) for a room of this role on this floor."""
    weight = HAZARD_WEIGHTS.get(role, 1.0)
    spikes = min(cfg.max_spike_budget, cfg.base_spike_budget + floor_number * cfg.spike_floor_scale)
    pits = min(cfg.max_pit_budget, floor_number * 2)
    return int(spikes * weight), int(pits * weight)


def place_hazards(grid: Grid, rng: SeededRandom, room: Room, floor_number: int,
                  cfg: GenerationConfig) -> List[Point]:
    spikes, pits = hazard_budgets(room.role, floor_number, cfg)
    placed = grow_clump(grid, rng, TileType.SPIKE, spikes, 2, 5,
                        cfg.placement_attempts, cfg.clump_retry_limit, cfg.border)
    placed.extend(grow_clump(grid, rng, TileType.PIT, pits, 2, 4,
                             cfg.placement_attempts, cfg.clump_retry_limit, cfg.border))
    return placed


# --- Spawns ----------------------------------------------------------------

def resolve_enemy_spawns(grid: Grid, room: Room, room_seed: int, cfg: GenerationConfig) -> None:
    """
    Pick enemy spawn points once and store them on the room.

    Runs on its own rng stream so that resolving (first call) and reusing
    (later calls) leave the main layout stream identical.
    Does nothing when the room already has spawn points or no enemies.
    """
    if room.enemy_spawn_points or room.enemy_count <= 0:
        return

    far_enough = min_center_distance(grid, cfg.min_spawn_distance)

    def accept(x: int, y: int, accepted: List[Point]) -> bool:
        if not far_enough(x, y):
            return False
        return all(abs(x - px) >= 2 or abs(y - py) >= 2 for px, py in accepted)

    spawn_rng = SeededRandom(derive_sub_seed(room_seed, "enemies"))
    points = sample_positions(grid, spawn_rng, room.enemy_count, accept,
                              cfg.enemy_spawn_attempts, cfg.border)
    if len(points) < room.enemy_count:
        logger.debug("Room %d: placed %d of %d enemy spawns", room.id, len(points), room.enemy_count)
    room.enemy_spawn_points = points
    room.enemy_count = len(points)


def mark_enemy_spawns(grid: Grid, room: Room) -> None:
    for x, y in room.enemy_spawn_points:
        if grid[y][x] == TileType.FLOOR:
            grid[y][x] = TileType.ENEMY_SPAWN_MARKER


def loot_quota(floor_number: int, cfg: GenerationConfig) -> int:
    return cfg.base_loot_spawns + floor_number // cfg.loot_floor_divisor


def place_loot(grid: Grid, rng: SeededRandom, floor_number: int, cfg: GenerationConfig) -> List[Point]:
    return place_many(grid, rng, TileType.LOOT_SPAWN_MARKER, loot_quota(floor_number, cfg),
                      not_center(grid), cfg.placement_attempts, cfg.border)


def place_exit_portal(grid: Grid, cfg: GenerationConfig) -> Optional[Point]:
    """Put the exit portal on the interior floor tile farthest from the center."""
    size = len(grid)
    mid = size // 2
    best: Optional[Point] = None
    best_distance = 0.0
    for y in range(cfg.border, size - cfg.border):
        for x in range(cfg.border, size - cfg.border):
            if grid[y][x] != TileType.FLOOR:
                continue
            distance = math.hypot(x - mid, y - mid)
            if distance > best_distance:
                best_distance = distance
                best = (x, y)

    if best is not None:
        bx, by = best
        grid[by][bx] = TileType.EXIT_PORTAL
    return best


# --- Pipeline --------------------------------------------------------------

def generate_room_layout(
    room: Room,
    floor_number: int,
    player_present: bool,
    floor_seed: int,
    config: Optional[GenerationConfig] = None,
) -> RoomLayoutData:
    """
    Generate the tile layout for one room.

    Strategy:
    1. Fill with walls and carve the role's interior shape
    2. Rocks, tinted rocks, pillars, torches, vegetation, pebbles, crates
    3. Hazard clumps
    4. Door corridors (overwrite everything on their path)
    5. Enemy spawns (resolved on first call, reused afterwards), loot
    6. Exit portal for the boss room

    Args:
        room: Room to lay out; its spawn data is filled in on first call
        floor_number: Current floor (scales loot and hazards)
        player_present: Whether the player is in the room right now
        floor_seed: Seed of the floor the room belongs to
        config: Generation config, defaults when None

    Returns:
        RoomLayoutData; enemy_count is room.enemy_count only if the player
        is present, else 0.
    """
    cfg = resolve_config(config)
    room_seed = derive_room_seed(floor_seed, room.id, cfg.room_seed_multiplier)
    rng = SeededRandom(room_seed)

    grid = create_wall_grid(cfg.grid_size)
    carve_interior(rng, room, grid)

    rocks = place_rock_pattern(grid, rng, cfg)
    upgrade_tinted_rocks(grid, rng, rocks, room.tinted_rock_budget)
    place_pillars(grid, rng, cfg)
    place_torches(grid, rng, cfg)
    place_vegetation(grid, rng, cfg)
    place_pebbles(grid, rng, cfg)
    place_crates(grid, rng, cfg)
    place_hazards(grid, rng, room, floor_number, cfg)

    carve_doors(grid, room.doors)

    resolve_enemy_spawns(grid, room, room_seed, cfg)
    mark_enemy_spawns(grid, room)
    place_loot(grid, rng, floor_number, cfg)

    exit_position = None
    if room.role == RoomRole.BOSS:
        exit_position = place_exit_portal(grid, cfg)
        if exit_position is None:
            logger.warning("Boss room %d has no interior floor left for the exit portal", room.id)

    world_offset = (
        room.grid_x * cfg.room_world_size,
        0,
        room.grid_y * cfg.room_world_size,
    )

    logger.debug(
        "Room %d (%s) laid out with seed %d: %d rocks, %d spawns",
        room.id, room.role.value, room_seed, len(rocks), len(room.enemy_spawn_points),
    )

    return RoomLayoutData(
        grid=grid,
        world_offset=world_offset,
        exit_position=exit_position,
        enemy_count=room.enemy_count if player_present else 0,
    )
