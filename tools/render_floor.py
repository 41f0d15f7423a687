#!/usr/bin/env python3
"""Print a generated floor as ASCII and optionally save PNG snapshots.

Usage: python tools/render_floor.py --floor 1 --seed 12345 [--room 3] [--png out/]
(run from the repo root after `pip install -e .`)
"""
import argparse
import logging
import os
import sys

from floorgen import generate_floor, generate_room_layout, load_generation_config
from floorgen.tiles.tile_renderer import TileRenderer, grid_to_text

logger = logging.getLogger(__name__)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Render a generated dungeon floor")
    ap.add_argument("--floor", type=int, default=1, help="Floor number")
    ap.add_argument("--seed", type=int, default=12345, help="Run seed")
    ap.add_argument("--scenario", type=str, default=None, help="Fixed scenario tag")
    ap.add_argument("--room", type=int, default=None, help="Only render this room id")
    ap.add_argument("--config", type=str, default=None, help="Generation config JSON")
    ap.add_argument("--png", type=str, default=None, help="Directory for PNG snapshots")
    ap.add_argument("--tile-size", type=int, default=8, help="PNG pixels per tile")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_generation_config(args.config)
    floor = generate_floor(args.floor, args.seed, args.scenario, config)

    rooms = floor.rooms
    if args.room is not None:
        room = floor.get_room(args.room)
        if room is None:
            logger.error("Room %d does not exist (floor has %d rooms)", args.room, floor.room_count)
            return 1
        rooms = [room]

    renderer = TileRenderer(args.tile_size) if args.png else None
    if renderer:
        os.makedirs(args.png, exist_ok=True)
        overview = os.path.join(args.png, f"floor{args.floor}_seed{args.seed}.png")
        renderer.save(renderer.render_floor_overview(floor), overview)
        logger.info("Saved %s", overview)

    for room in rooms:
        layout = generate_room_layout(room, args.floor, False, floor.seed, config)
        print(f"Room {room.id} ({room.role.value}) at {room.position}, "
              f"distance {room.distance_from_start}, enemies {room.enemy_count}")
        print(grid_to_text(layout.grid))
        print()
        if renderer:
            path = os.path.join(args.png, f"floor{args.floor}_seed{args.seed}_room{room.id}.png")
            renderer.save(renderer.render_room(layout.grid), path)
            logger.info("Saved %s", path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
