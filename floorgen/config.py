"""
Default constants for floor and room generation.

Values here are the defaults for GenerationConfig; override them through
config/floorgen_config.json rather than editing this module.
"""

# Room tile grid
GRID_SIZE = 30
BORDER = 2  # reserved ring; nothing but walls/doors is placed here
ROOM_WORLD_SIZE = 60  # world units per room edge (tile size 2)

# Seed derivation
DEFAULT_SEED = 12345
FLOOR_SEED_MULTIPLIER = 99999
ROOM_SEED_MULTIPLIER = 777

# Room graph
MIN_ROOMS = 6
MAX_ROOMS = 12
MAX_EXPANSION_FAILURES = 64
MAX_TINTED_ROCKS = 3

# Enemies
BASE_ENEMY_COUNT = 4
ENEMY_FLOOR_SCALE = 1.2
MAX_ENEMIES_PER_ROOM = 12
BOSS_ENEMY_BONUS = 2
MIN_SPAWN_DISTANCE = 5
ENEMY_SPAWN_ATTEMPTS = 200

# Loot
BASE_LOOT_SPAWNS = 2
LOOT_FLOOR_DIVISOR = 3

# Bounded retry budgets
PLACEMENT_ATTEMPTS = 50
CLUMP_RETRY_LIMIT = 40

# Hazards
BASE_SPIKE_BUDGET = 4
SPIKE_FLOOR_SCALE = 2
MAX_SPIKE_BUDGET = 20
MAX_PIT_BUDGET = 8

# Default JSON configuration file (relative to the working directory)
CONFIG_PATH = "config/floorgen_config.json"
