import pygame
from typing import Dict, List, Optional, Sequence, Tuple

from floorgen.level.room_data import FloorData, RoomRole
from floorgen.tiles.tile_types import TileType

Color = Tuple[int, int, int]

TILE_COLORS: Dict[TileType, Color] = {
    TileType.FLOOR: (54, 60, 78),
    TileType.WALL: (22, 24, 32),
    TileType.ENEMY_SPAWN_MARKER: (200, 60, 60),
    TileType.LOOT_SPAWN_MARKER: (230, 200, 70),
    TileType.EXIT_PORTAL: (140, 90, 230),
    TileType.DOOR: (139, 90, 43),
    TileType.LOCKED_DOOR: (101, 50, 14),
    TileType.ROCK: (120, 120, 120),
    TileType.TINTED_ROCK: (90, 130, 170),
    TileType.CRATE: (139, 69, 19),
    TileType.PILLAR: (170, 165, 150),
    TileType.TORCH: (255, 160, 40),
    TileType.GRASS: (60, 130, 60),
    TileType.FLOWER: (220, 110, 180),
    TileType.MUSHROOM: (180, 140, 100),
    TileType.PEBBLE: (95, 95, 100),
    TileType.SPIKE: (210, 210, 220),
    TileType.PIT: (5, 5, 8),
    TileType.SHOP_SLOT: (80, 200, 190),
}

ROLE_COLORS: Dict[RoomRole, Color] = {
    RoomRole.START: (70, 160, 90),
    RoomRole.NORMAL: (80, 86, 104),
    RoomRole.BOSS: (190, 50, 50),
    RoomRole.TREASURE: (230, 200, 70),
    RoomRole.SHOP: (80, 200, 190),
}

BACKGROUND: Color = (10, 10, 14)


def grid_to_text(grid: Sequence[Sequence[TileType]]) -> str:
    """ASCII preview of a room grid, one glyph per tile, rows top to bottom."""
    return "\n".join("".join(TileType(value).glyph for value in row) for row in grid)


class TileRenderer:
    """Draws room grids and floor overviews onto off-screen pygame surfaces."""

    def __init__(self, tile_size: int = 8):
        if tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {tile_size}")
        self.tile_size = tile_size
        self.tile_cache: Dict[TileType, pygame.Surface] = {}

    def _get_tile_surface(self, tile_type: TileType) -> pygame.Surface:
        """Get cached or create new surface for tile."""
        if tile_type not in self.tile_cache:
            surface = pygame.Surface((self.tile_size, self.tile_size))
            surface.fill(TILE_COLORS[tile_type])
            if tile_type.is_door and self.tile_size >= 4:
                pygame.draw.rect(surface, (0, 0, 0), surface.get_rect(), 1)
            self.tile_cache[tile_type] = surface
        return self.tile_cache[tile_type]

    def render_tile_grid(self, surface: pygame.Surface, grid: Sequence[Sequence[TileType]],
                         origin: Tuple[int, int] = (0, 0)) -> None:
        ox, oy = origin
        for y, row in enumerate(grid):
            for x, value in enumerate(row):
                surface.blit(
                    self._get_tile_surface(TileType(value)),
                    (ox + x * self.tile_size, oy + y * self.tile_size),
                )

    def render_room(self, grid: List[List[TileType]]) -> pygame.Surface:
        """Return a new surface holding the whole room grid."""
        height = len(grid)
        width = len(grid[0]) if height else 0
        surface = pygame.Surface((max(1, width * self.tile_size), max(1, height * self.tile_size)))
        surface.fill(BACKGROUND)
        self.render_tile_grid(surface, grid)
        return surface

    def render_floor_overview(self, floor: FloorData, cell_size: Optional[int] = None) -> pygame.Surface:
        """
        Draw the room graph: one colored square per room, bars for doors.

        Args:
            floor: Generated floor
            cell_size: Pixel size of one room cell (defaults to 4 tiles)

        Returns:
            Surface sized to the floor's bounding box
        """
        cell = cell_size or self.tile_size * 4
        xs = [room.grid_x for room in floor.rooms]
        ys = [room.grid_y for room in floor.rooms]
        min_x, min_y = min(xs), min(ys)
        cols = max(xs) - min_x + 1
        rows = max(ys) - min_y + 1

        surface = pygame.Surface((cols * cell, rows * cell))
        surface.fill(BACKGROUND)

        gap = max(1, cell // 8)
        for room in floor.rooms:
            left = (room.grid_x - min_x) * cell
            top = (room.grid_y - min_y) * cell
            rect = pygame.Rect(left + gap, top + gap, cell - 2 * gap, cell - 2 * gap)
            pygame.draw.rect(surface, ROLE_COLORS[room.role], rect)

            # Door bars bridge the gap toward the neighbour.
            cx, cy = rect.center
            for direction in room.door_directions():
                end = (cx + direction.dx * cell // 2, cy + direction.dy * cell // 2)
                pygame.draw.line(surface, TILE_COLORS[TileType.DOOR], (cx, cy), end, max(1, gap))

        return surface

    def save(self, surface: pygame.Surface, path: str) -> None:
        pygame.image.save(surface, path)
