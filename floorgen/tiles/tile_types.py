from enum import IntEnum


class TileType(IntEnum):
    """Enumeration of all tile types a room grid can hold."""

    # Basic tiles
    FLOOR = 0
    WALL = 1

    # Spawn markers
    ENEMY_SPAWN_MARKER = 2
    LOOT_SPAWN_MARKER = 3
    EXIT_PORTAL = 4

    # Doors
    DOOR = 5
    LOCKED_DOOR = 6

    # Obstacles and decorations
    ROCK = 7
    TINTED_ROCK = 8
    CRATE = 9
    PILLAR = 10
    TORCH = 11
    GRASS = 12
    FLOWER = 13
    MUSHROOM = 14
    PEBBLE = 15

    # Hazards
    SPIKE = 16
    PIT = 17

    SHOP_SLOT = 18

    @property
    def is_solid(self) -> bool:
        """Return True if tile blocks movement and needs a collider."""
        return self in _SOLID

    @property
    def is_hazard(self) -> bool:
        """Return True if tile hurts or swallows whoever steps on it."""
        return self in (TileType.SPIKE, TileType.PIT)

    @property
    def is_walkable(self) -> bool:
        """Return True if an entity can stand on this tile."""
        return not self.is_solid and self != TileType.PIT

    @property
    def is_door(self) -> bool:
        return self in (TileType.DOOR, TileType.LOCKED_DOOR)

    @property
    def is_marker(self) -> bool:
        """Return True for tiles that tell the spawner where to put something."""
        return self in (
            TileType.ENEMY_SPAWN_MARKER,
            TileType.LOOT_SPAWN_MARKER,
            TileType.EXIT_PORTAL,
        )

    @property
    def glyph(self) -> str:
        """Single character used by text previews."""
        return _GLYPHS[self]

    @property
    def display_name(self) -> str:
        """Return human-readable name."""
        return self.name.replace("_", " ").title()


_SOLID = frozenset({
    TileType.WALL,
    TileType.LOCKED_DOOR,
    TileType.ROCK,
    TileType.TINTED_ROCK,
    TileType.CRATE,
    TileType.PILLAR,
    TileType.TORCH,
    TileType.SHOP_SLOT,
})

_GLYPHS = {
    TileType.FLOOR: ".",
    TileType.WALL: "#",
    TileType.ENEMY_SPAWN_MARKER: "E",
    TileType.LOOT_SPAWN_MARKER: "$",
    TileType.EXIT_PORTAL: "O",
    TileType.DOOR: "D",
    TileType.LOCKED_DOOR: "L",
    TileType.ROCK: "r",
    TileType.TINTED_ROCK: "t",
    TileType.CRATE: "c",
    TileType.PILLAR: "I",
    TileType.TORCH: "!",
    TileType.GRASS: '"',
    TileType.FLOWER: "*",
    TileType.MUSHROOM: "m",
    TileType.PEBBLE: ",",
    TileType.SPIKE: "^",
    TileType.PIT: "_",
    TileType.SHOP_SLOT: "S",
}
