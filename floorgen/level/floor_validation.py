"""Consistency checks for generated floors.

validate_floor regenerates every room layout and reports anything that
would break the transition, spawning or exit systems downstream:

- doors leading nowhere, or without the matching door on the other side
- distance_from_start disagreeing with a fresh BFS
- exit room that is not (one of) the farthest rooms
- spawn points outside the interior or not marked on the grid
- boss room without an exit portal
"""

from collections import Counter, deque
from typing import Dict, List, Optional

from floorgen.level.config_loader import GenerationConfig, resolve_config
from floorgen.level.room_data import Direction, FloorData, Room, RoomRole
from floorgen.level.room_layout import generate_room_layout
from floorgen.tiles.tile_types import TileType


def _bfs_distances(floor: FloorData) -> Dict[int, int]:
    distances = {floor.start_room_id: 0}
    queue = deque([floor.start_room])
    while queue:
        current = queue.popleft()
        for direction in current.door_directions():
            neighbor = floor.neighbor(current, direction)
            if neighbor is not None and neighbor.id not in distances:
                distances[neighbor.id] = distances[current.id] + 1
                queue.append(neighbor)
    return distances


def _door_edge(size: int, direction: Direction):
    mid = size // 2
    return {
        Direction.NORTH: (mid, 0),
        Direction.SOUTH: (mid, size - 1),
        Direction.WEST: (0, mid),
        Direction.EAST: (size - 1, mid),
    }[direction]


def _check_graph(floor: FloorData, errors: List[str]) -> None:
    if floor.room_count != len(floor.rooms):
        errors.append(f"room_count {floor.room_count} != {len(floor.rooms)} rooms")

    for index, room in enumerate(floor.rooms):
        if room.id != index:
            errors.append(f"room at index {index} has id {room.id}")

    roles = Counter(room.role for room in floor.rooms)
    start_room = floor.start_room
    if start_room is None:
        errors.append(f"start room {floor.start_room_id} does not exist")
        return
    if len(floor.rooms) > 1 and start_room.role != RoomRole.START:
        errors.append(f"start room {start_room.id} has role {start_room.role.value}")
    for role in (RoomRole.START, RoomRole.BOSS, RoomRole.TREASURE, RoomRole.SHOP):
        if roles[role] > 1:
            errors.append(f"{roles[role]} rooms with role {role.value}")

    for room in floor.rooms:
        for door in room.doors:
            neighbor = floor.neighbor(room, door.direction)
            if neighbor is None:
                errors.append(f"room {room.id}: {door.direction.value} door leads nowhere")
            elif not neighbor.has_door(door.direction.opposite):
                errors.append(
                    f"room {room.id}: {door.direction.value} door has no inverse in room {neighbor.id}"
                )

    distances = _bfs_distances(floor)
    for room in floor.rooms:
        if room.id not in distances:
            errors.append(f"room {room.id} is unreachable from the start room")
        elif distances[room.id] != room.distance_from_start:
            errors.append(
                f"room {room.id}: distance_from_start {room.distance_from_start}, "
                f"BFS says {distances[room.id]}"
            )

    exit_room = floor.exit_room
    if exit_room is None:
        errors.append(f"exit room {floor.exit_room_id} does not exist")
    elif distances:
        farthest = max(distances.values())
        if distances.get(exit_room.id) != farthest:
            errors.append(f"exit room {exit_room.id} is not the farthest room")


def _check_room(room: Room, floor: FloorData, cfg: GenerationConfig, errors: List[str]) -> None:
    layout = generate_room_layout(room, floor.floor_number, True, floor.seed, cfg)
    size = len(layout.grid)
    mid = size // 2

    if not layout.tile_at(mid, mid).is_walkable:
        errors.append(f"room {room.id}: center tile is {layout.tile_at(mid, mid).name}")

    for door in room.doors:
        x, y = _door_edge(size, door.direction)
        if not layout.tile_at(x, y).is_door:
            errors.append(f"room {room.id}: no door tile on the {door.direction.value} edge")

    if room.enemy_count != len(room.enemy_spawn_points):
        errors.append(
            f"room {room.id}: enemy_count {room.enemy_count} but "
            f"{len(room.enemy_spawn_points)} spawn points"
        )
    for x, y in room.enemy_spawn_points:
        if not (cfg.border <= x < size - cfg.border and cfg.border <= y < size - cfg.border):
            errors.append(f"room {room.id}: spawn point {(x, y)} inside the border")
        elif layout.tile_at(x, y) != TileType.ENEMY_SPAWN_MARKER:
            errors.append(f"room {room.id}: spawn point {(x, y)} is {layout.tile_at(x, y).name}")

    if room.role == RoomRole.BOSS:
        if layout.exit_position is None or layout.count_of(TileType.EXIT_PORTAL) == 0:
            errors.append(f"boss room {room.id} has no exit portal")


def validate_floor(floor: FloorData, config: Optional[GenerationConfig] = None) -> List[str]:
    """
    Check a generated floor for structural problems.

    Args:
        floor: Floor returned by generate_floor
        config: Config the floor was generated with

    Returns:
        Human-readable problems; empty when the floor is consistent.
    """
    cfg = resolve_config(config)
    errors: List[str] = []
    _check_graph(floor, errors)
    for room in floor.rooms:
        _check_room(room, floor, cfg, errors)
    return errors
