from .tile_types import TileType

__all__ = [
    'TileType',
]
