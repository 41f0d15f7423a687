"""
Floor generation entry points.

generate_floor builds the room graph for a floor; generate_room_layout (from
room_layout) turns a single room into a tile grid on demand.
"""

import logging
from typing import Callable, Dict, Optional

from floorgen.config import DEFAULT_SEED
from floorgen.level.config_loader import GenerationConfig, resolve_config
from floorgen.level.graph_generator import build_room_graph, compute_enemy_count
from floorgen.level.room_data import FloorData, Room, RoomRole, WorldPosition
from floorgen.level.room_layout import generate_room_layout
from floorgen.level.seed_manager import SeededRandom, derive_floor_seed

logger = logging.getLogger(__name__)

__all__ = [
    "SCENARIOS",
    "generate_floor",
    "generate_room_layout",
    "get_room_world_size",
    "grid_to_world",
]


def _single_room_floor(room: Room, floor_number: int, floor_seed: int,
                       cfg: GenerationConfig) -> FloorData:
    # Layout once so the spawn data is fixed, same as the graph path.
    generate_room_layout(room, floor_number, False, floor_seed, cfg)
    return FloorData(
        rooms=[room],
        start_room_id=room.id,
        exit_room_id=room.id,
        room_count=1,
        seed=floor_seed,
        floor_number=floor_number,
    )


def _test_chamber(floor_number: int, floor_seed: int, cfg: GenerationConfig) -> FloorData:
    room = Room(id=0, grid_x=0, grid_y=0, role=RoomRole.NORMAL, enemy_count=1)
    return _single_room_floor(room, floor_number, floor_seed, cfg)


def _boss_fight(floor_number: int, floor_seed: int, cfg: GenerationConfig) -> FloorData:
    room = Room(id=0, grid_x=0, grid_y=0, role=RoomRole.BOSS)
    room.enemy_count = compute_enemy_count(RoomRole.BOSS, floor_number, cfg)
    return _single_room_floor(room, floor_number, floor_seed, cfg)


SCENARIOS: Dict[str, Callable[[int, int, GenerationConfig], FloorData]] = {
    "test_chamber": _test_chamber,
    "boss_fight": _boss_fight,
}


def generate_floor(
    floor_number: int,
    seed: int = DEFAULT_SEED,
    scenario: Optional[str] = None,
    config: Optional[GenerationConfig] = None,
) -> FloorData:
    """
    Generate a complete floor.

    Args:
        floor_number: Floor index; scales enemies, loot and hazards
        seed: Run seed
        scenario: Optional fixed test scenario ("test_chamber", "boss_fight")
            that skips the graph builder and returns a single-room floor
        config: Generation config, defaults when None

    Returns:
        FloorData with spawn data already resolved on every room

    Raises:
        ValueError: Unknown scenario tag
    """
    cfg = resolve_config(config)
    floor_seed = derive_floor_seed(seed, floor_number, cfg.floor_seed_multiplier)

    if scenario is not None:
        builder = SCENARIOS.get(scenario)
        if builder is None:
            raise ValueError(
                f"Unknown scenario {scenario!r}; expected one of {', '.join(sorted(SCENARIOS))}"
            )
        floor = builder(floor_number, floor_seed, cfg)
        logger.info("Floor %d (seed %d): built scenario %s", floor_number, floor_seed, scenario)
        return floor

    rng = SeededRandom(floor_seed)
    rooms, exit_room = build_room_graph(rng, floor_number, floor_seed, cfg)

    logger.info("Floor %d (seed %d): generated %d rooms", floor_number, floor_seed, len(rooms))
    return FloorData(
        rooms=rooms,
        start_room_id=0,
        exit_room_id=exit_room.id,
        room_count=len(rooms),
        seed=floor_seed,
        floor_number=floor_number,
    )


def grid_to_world(grid_x: float, grid_y: float, world_offset: WorldPosition,
                  config: Optional[GenerationConfig] = None) -> WorldPosition:
    """Convert tile coordinates to world coordinates (tile centers)."""
    cfg = resolve_config(config)
    tile = cfg.tile_size
    offset = -cfg.room_world_size / 2 + tile / 2
    ox, oy, oz = world_offset
    return (ox + offset + grid_x * tile, oy, oz + offset + grid_y * tile)


def get_room_world_size(config: Optional[GenerationConfig] = None) -> float:
    return resolve_config(config).room_world_size
