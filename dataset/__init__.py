"""
dataset/
--------
Input-array layer.  Public API:

    from dataset import generate_random, VALUE_MIN, VALUE_MAX
"""

from dataset.generator import generate_random, VALUE_MIN, VALUE_MAX

__all__ = [
    "generate_random",
    "VALUE_MIN",
    "VALUE_MAX",
]
