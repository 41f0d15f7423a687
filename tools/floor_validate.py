#!/usr/bin/env python3
"""Validate generated floors for consistency over a range of seeds.

Checks:
- doors lead to rooms that have the inverse door
- BFS distances and the exit room agree with the graph
- spawn points are marked on interior tiles
- boss rooms have an exit portal

Usage: python tools/floor_validate.py --seeds 0 100 --floors 1 5
"""
import argparse
import logging
import sys

from floorgen import generate_floor, load_generation_config, validate_floor

logger = logging.getLogger(__name__)


def main(argv=None):
    ap = argparse.ArgumentParser(description="Validate generated floors")
    ap.add_argument("--seeds", type=int, nargs=2, default=(0, 50), metavar=("FIRST", "LAST"),
                    help="Inclusive seed range")
    ap.add_argument("--floors", type=int, nargs=2, default=(1, 3), metavar=("FIRST", "LAST"),
                    help="Inclusive floor range")
    ap.add_argument("--config", type=str, default=None, help="Generation config JSON")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    config = load_generation_config(args.config)
    errors = []
    checked = 0
    for seed in range(args.seeds[0], args.seeds[1] + 1):
        for floor_number in range(args.floors[0], args.floors[1] + 1):
            floor = generate_floor(floor_number, seed, config=config)
            checked += 1
            for problem in validate_floor(floor, config):
                errors.append(f"seed {seed} floor {floor_number}: {problem}")

    if errors:
        logger.error('Validation FAILED:')
        for e in errors:
            logger.error(' - %s', e)
        return 2

    print(f'Validation OK: {checked} floors checked')
    return 0


if __name__ == "__main__":
    sys.exit(main())
