"""
counting.py — Counting Sort
============================
Tallies how often each value occurs in a table sized max + 1, then
rebuilds the array by emitting every value as many times as it was
seen, smallest first.

Precondition: values must be non-negative integers.  A negative value
would index the count table from the end, so counting_sort() raises
ValueError up front instead of producing a wrong result.

No pairwise comparisons happen.  Every output placement is counted on
the swap counter.
"""

from typing import Generator, Sequence

from algorithms.step import Step, SortTracker


def require_non_negative(values: Sequence[int], label: str) -> None:
    """Raise ValueError unless every value is a non-negative int."""
    for v in values:
        if not isinstance(v, int) or v < 0:
            raise ValueError(f"{label} needs non-negative integers, got {v!r}")


def counting_sort(values: Sequence[int]) -> Generator[Step, None, None]:
    require_non_negative(values, "Counting sort")
    return _counting_sort(values)


def _counting_sort(values: Sequence[int]) -> Generator[Step, None, None]:
    t = SortTracker(values)
    if len(t) < 2:
        yield t.settle_all()
        yield t.finish()
        return

    top = max(t.values)
    count = [0] * (top + 1)
    for v in t.values:
        count[v] += 1

    index = 0
    for v in range(top + 1):
        while count[v] > 0:
            yield t.write(index, v, counted=True)
            index += 1
            count[v] -= 1

    yield t.settle_all()
    yield t.finish()
