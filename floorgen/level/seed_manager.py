"""
Seed Manager - Deterministic random streams for floor and room generation
"""

import hashlib
from typing import List, Sequence, TypeVar

from floorgen import config as defaults

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiply."""
    return (a * b) & _MASK32


class SeededRandom:
    """Mulberry32 generator.

    Two instances built from the same seed and driven with the same call
    sequence produce identical values; nothing is read from the clock or the
    global ``random`` module.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._state = seed & _MASK32

    def next(self) -> float:
        """Return a float in [0, 1)."""
        self._state = (self._state + 0x6D2B79F5) & _MASK32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK32
        return ((t ^ (t >> 14)) & _MASK32) / 4294967296

    def next_int(self, lo: int, hi: int) -> int:
        """Return an integer between lo and hi, both inclusive."""
        return int(self.next() * (hi - lo + 1)) + lo

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("SeededRandom.choice() received an empty sequence")
        return items[int(self.next() * len(items))]

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Return a shuffled copy of items (Fisher-Yates)."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = int(self.next() * (i + 1))
            result[i], result[j] = result[j], result[i]
        return result


def derive_floor_seed(seed: int, floor_number: int,
                      multiplier: int = defaults.FLOOR_SEED_MULTIPLIER) -> int:
    """Combine the run seed with the floor number."""
    return seed + floor_number * multiplier


def derive_room_seed(floor_seed: int, room_id: int,
                     multiplier: int = defaults.ROOM_SEED_MULTIPLIER) -> int:
    """Combine the floor seed with a room id."""
    return floor_seed + room_id * multiplier


def derive_sub_seed(seed: int, component: str) -> int:
    """
    Derive an independent seed for a named generation component

    Args:
        seed: Parent seed (usually a room seed)
        component: Component name ('enemies', ...)

    Returns:
        Deterministic 32-bit seed for this component
    """
    seed_string = f"{seed}_{component}"
    seed_hash = hashlib.md5(seed_string.encode()).hexdigest()
    return int(seed_hash[:8], 16)
