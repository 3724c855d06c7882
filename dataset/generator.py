"""
generator.py — Random Input Arrays
===================================
Factory for the arrays the visualizer sorts.

Values are two-digit integers so every circle label fits, and so the
non-negative precondition of counting / radix sort always holds.
"""

import random
from typing import List, Optional


VALUE_MIN = 10
VALUE_MAX = 99


def generate_random(
    size: int,
    low: int = VALUE_MIN,
    high: int = VALUE_MAX,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """
    Uniform random integers in [low, high], inclusive.

    Args:
        size : Number of elements (negative sizes give an empty list).
        seed : Seed for a private Random instance (reproducible arrays).
        rng  : Random instance to draw from; wins over `seed`.
    """
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high})")
    if rng is None:
        rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(max(0, size))]
