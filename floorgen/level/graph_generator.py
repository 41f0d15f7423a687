"""
Room graph generation for dungeon floors.
"""

import logging
import math
from collections import deque
from typing import Dict, List, Optional

from floorgen.level.config_loader import GenerationConfig, resolve_config
from floorgen.level.room_data import DIRECTIONS, Door, Point, Room, RoomRole
from floorgen.level.room_layout import generate_room_layout
from floorgen.level.seed_manager import SeededRandom

logger = logging.getLogger(__name__)


def expand_rooms(rng: SeededRandom, room_count: int, max_failures: int) -> List[Room]:
    """
    Grow a connected set of rooms from the origin by random walk.

    Strategy:
    - Keep a list of rooms that may still have free neighbours
    - Pick one at random, try the four directions in shuffled order
    - On success link both rooms with a door and its inverse
    - On failure drop the source room and retry the same room index

    Failures are bounded by `max_failures`, so the result may hold fewer
    than `room_count` rooms.

    Args:
        rng: Floor random stream
        room_count: Target number of rooms, including the start room
        max_failures: Total failed expansion attempts allowed

    Returns:
        Rooms indexed by id; room 0 is the start room at (0, 0)
    """
    if room_count <= 0:
        raise ValueError(f"room_count must be positive, got {room_count}")

    rooms = [Room(id=0, grid_x=0, grid_y=0, role=RoomRole.START)]
    occupied: Dict[Point, int] = {(0, 0): 0}
    expandable = [0]
    failures = 0

    while len(rooms) < room_count and expandable and failures < max_failures:
        from_room = rooms[rng.choice(expandable)]

        placed = False
        for direction in rng.shuffle(DIRECTIONS):
            target = (from_room.grid_x + direction.dx, from_room.grid_y + direction.dy)
            if target in occupied:
                continue

            new_room = Room(id=len(rooms), grid_x=target[0], grid_y=target[1])
            rooms.append(new_room)
            occupied[target] = new_room.id
            expandable.append(new_room.id)

            # Always unlocked so every room stays reachable
            from_room.doors.append(Door(direction=direction, locked=False))
            new_room.doors.append(Door(direction=direction.opposite, locked=False))
            placed = True
            break

        if not placed:
            expandable.remove(from_room.id)
            failures += 1

    if len(rooms) < room_count:
        logger.warning("Room graph stopped at %d of %d rooms", len(rooms), room_count)
    return rooms


def assign_distances(rooms: List[Room]) -> None:
    """BFS from room 0 over doors, setting distance_from_start."""
    by_position = {room.position: room for room in rooms}
    start = rooms[0]
    start.distance_from_start = 0
    visited = {start.id}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        for door in current.doors:
            neighbor = by_position.get(
                (current.grid_x + door.direction.dx, current.grid_y + door.direction.dy)
            )
            if neighbor is not None and neighbor.id not in visited:
                visited.add(neighbor.id)
                neighbor.distance_from_start = current.distance_from_start + 1
                queue.append(neighbor)


def find_exit_room(rooms: List[Room]) -> Room:
    """Room farthest from the start; the first one wins ties."""
    furthest = rooms[0]
    for room in rooms:
        if room.distance_from_start > furthest.distance_from_start:
            furthest = room
    return furthest


def assign_special_rooms(rng: SeededRandom, rooms: List[Room]) -> Room:
    """
    Mark the boss room, then one treasure and one shop room when possible.

    Returns:
        The exit room (the boss room, or the start room on one-room floors)
    """
    exit_room = find_exit_room(rooms)
    if exit_room.id != 0:
        exit_room.role = RoomRole.BOSS

    for role in (RoomRole.TREASURE, RoomRole.SHOP):
        candidates = [r for r in rooms if r.role == RoomRole.NORMAL]
        if candidates:
            rng.choice(candidates).role = role

    return exit_room


def distribute_tinted_rocks(rng: SeededRandom, rooms: List[Room], max_tokens: int) -> int:
    """Hand out 0..max_tokens tinted rock tokens among non-start, non-boss rooms."""
    tokens = rng.next_int(0, max_tokens)
    candidates = [r for r in rooms if r.role not in (RoomRole.START, RoomRole.BOSS)]
    if not candidates:
        return 0
    for _ in range(tokens):
        rng.choice(candidates).tinted_rock_budget += 1
    return tokens


def compute_enemy_count(role: RoomRole, floor_number: int,
                        config: Optional[GenerationConfig] = None) -> int:
    cfg = resolve_config(config)
    if role in (RoomRole.START, RoomRole.TREASURE, RoomRole.SHOP):
        return 0
    count = max(0, min(
        cfg.max_enemies_per_room,
        cfg.base_enemy_count + math.floor(floor_number * cfg.enemy_floor_scale),
    ))
    if role == RoomRole.BOSS:
        count += cfg.boss_enemy_bonus
    return count


def resolve_spawn_data(rooms: List[Room], floor_number: int, floor_seed: int,
                       config: Optional[GenerationConfig] = None) -> None:
    """
    Fix each room's enemy count and spawn points for the floor's lifetime.

    Generates every layout once and throws the grid away; only the spawn
    data written onto the room is kept.
    """
    for room in rooms:
        room.enemy_count = compute_enemy_count(room.role, floor_number, config)
        room.enemy_spawn_points = []
        generate_room_layout(room, floor_number, False, floor_seed, config)


def build_room_graph(rng: SeededRandom, floor_number: int, floor_seed: int,
                     config: Optional[GenerationConfig] = None):
    """
    Generate all rooms of a floor.

    Args:
        rng: Random stream seeded with the floor seed
        floor_number: Current floor
        floor_seed: Floor seed, passed through to room layouts
        config: Generation config

    Returns:
        (rooms, exit_room)
    """
    cfg = resolve_config(config)
    room_count = rng.next_int(cfg.min_rooms, cfg.max_rooms)
    rooms = expand_rooms(rng, room_count, cfg.max_expansion_failures)

    assign_distances(rooms)
    exit_room = assign_special_rooms(rng, rooms)
    distribute_tinted_rocks(rng, rooms, cfg.max_tinted_rocks)
    resolve_spawn_data(rooms, floor_number, floor_seed, cfg)
    return rooms, exit_room
