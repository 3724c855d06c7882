"""
bubble.py — Bubble Sort
========================
Generator-based bubble sort.  Yields a Step at every meaningful event:
  1. Compare two neighbours        →  highlight the pair
  2. Swap them if out of order     →  publish the new array
  3. End of a pass                 →  the last unsorted slot is settled

Passes shrink by one each time.  A pass with no swap means the array
is already in order, so the run stops early and every index still
unsettled is settled at once.
"""

from typing import Generator, Sequence

from algorithms.step import Step, SortTracker


def bubble_sort(values: Sequence[int]) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for every comparison / swap during bubble sort.

    Args:
        values : Input array.  Not modified.

    Yields:
        Step – one per comparison, swap and settle event, plus a final one.
    """
    t = SortTracker(values)
    n = len(t)

    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            yield t.compare(j, j + 1)
            if t.values[j] > t.values[j + 1]:
                yield t.swap(j, j + 1)
                swapped = True

        # largest remaining value has bubbled up to n-i-1
        yield t.settle(n - i - 1)
        if not swapped:
            break

    if n:
        yield t.settle(*range(n - 1, -1, -1))
    yield t.finish()
