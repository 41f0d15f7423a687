"""Generation config loading.

GenerationConfig holds every tunable used by the floor and room generators.
Defaults come from floorgen.config; load_generation_config overlays values
read from a JSON file.
"""

import json
import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from floorgen import config as defaults

logger = logging.getLogger(__name__)

# Smallest grid every room shape fits in.
MIN_GRID_SIZE = 20


@dataclass(frozen=True)
class GenerationConfig:
    """Configuration for floor and room generation."""
    grid_size: int = defaults.GRID_SIZE
    border: int = defaults.BORDER
    room_world_size: float = defaults.ROOM_WORLD_SIZE

    floor_seed_multiplier: int = defaults.FLOOR_SEED_MULTIPLIER
    room_seed_multiplier: int = defaults.ROOM_SEED_MULTIPLIER

    min_rooms: int = defaults.MIN_ROOMS
    max_rooms: int = defaults.MAX_ROOMS
    max_expansion_failures: int = defaults.MAX_EXPANSION_FAILURES
    max_tinted_rocks: int = defaults.MAX_TINTED_ROCKS

    base_enemy_count: int = defaults.BASE_ENEMY_COUNT
    enemy_floor_scale: float = defaults.ENEMY_FLOOR_SCALE
    max_enemies_per_room: int = defaults.MAX_ENEMIES_PER_ROOM
    boss_enemy_bonus: int = defaults.BOSS_ENEMY_BONUS
    min_spawn_distance: int = defaults.MIN_SPAWN_DISTANCE
    enemy_spawn_attempts: int = defaults.ENEMY_SPAWN_ATTEMPTS

    base_loot_spawns: int = defaults.BASE_LOOT_SPAWNS
    loot_floor_divisor: int = defaults.LOOT_FLOOR_DIVISOR

    placement_attempts: int = defaults.PLACEMENT_ATTEMPTS
    clump_retry_limit: int = defaults.CLUMP_RETRY_LIMIT

    base_spike_budget: int = defaults.BASE_SPIKE_BUDGET
    spike_floor_scale: int = defaults.SPIKE_FLOOR_SCALE
    max_spike_budget: int = defaults.MAX_SPIKE_BUDGET
    max_pit_budget: int = defaults.MAX_PIT_BUDGET

    def __post_init__(self) -> None:
        self.validate()

    @property
    def center(self) -> int:
        """Center row/column index; the implicit entry point of every room."""
        return self.grid_size // 2

    @property
    def tile_size(self) -> float:
        return self.room_world_size / self.grid_size

    def validate(self) -> None:
        """Raise ValueError on values the generators cannot work with."""
        if self.grid_size < MIN_GRID_SIZE:
            raise ValueError(f"grid_size must be at least {MIN_GRID_SIZE}, got {self.grid_size}")
        if not 1 <= self.border <= 3:
            raise ValueError(f"border must be between 1 and 3, got {self.border}")
        if self.room_world_size <= 0:
            raise ValueError("room_world_size must be positive")
        if self.min_rooms <= 0:
            raise ValueError("min_rooms must be positive")
        if self.max_rooms < self.min_rooms:
            raise ValueError("max_rooms must be >= min_rooms")
        for name in ("max_expansion_failures", "enemy_spawn_attempts",
                     "placement_attempts", "clump_retry_limit", "loot_floor_divisor"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationConfig":
        """Build a config from a mapping, ignoring keys it does not know."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown generation config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in data.items() if k in known})


DEFAULT_CONFIG = GenerationConfig()


def load_generation_config(path: Optional[str] = None) -> GenerationConfig:
    """
    Load GenerationConfig from a JSON file.

    Args:
        path: JSON file to read. Defaults to config/floorgen_config.json.

    Returns:
        Loaded config, or the defaults when no path was given and the
        default file does not exist.

    Raises:
        FileNotFoundError: An explicitly given path does not exist
    """
    if path is None:
        path = defaults.CONFIG_PATH
        if not os.path.exists(path):
            logger.debug("Generation config %s not found, using defaults", path)
            return DEFAULT_CONFIG
    elif not os.path.exists(path):
        raise FileNotFoundError(f"Generation config {path} does not exist")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Generation config {path} must contain a JSON object")

    config = GenerationConfig.from_dict(data)
    logger.info("Loaded generation config from %s", path)
    return config


def resolve_config(config: Optional[GenerationConfig]) -> GenerationConfig:
    return config if config is not None else DEFAULT_CONFIG
