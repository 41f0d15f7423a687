"""Deterministic procedural dungeon floor generation."""

from floorgen.level.config_loader import GenerationConfig, load_generation_config
from floorgen.level.floor_generator import (
    generate_floor,
    generate_room_layout,
    get_room_world_size,
    grid_to_world,
)
from floorgen.level.floor_validation import validate_floor
from floorgen.level.room_data import (
    Direction,
    Door,
    FloorData,
    Room,
    RoomLayoutData,
    RoomRole,
)
from floorgen.tiles.tile_types import TileType

__all__ = [
    'Direction',
    'Door',
    'FloorData',
    'GenerationConfig',
    'Room',
    'RoomLayoutData',
    'RoomRole',
    'TileType',
    'generate_floor',
    'generate_room_layout',
    'get_room_world_size',
    'grid_to_world',
    'load_generation_config',
    'validate_floor',
]
