"""
selection.py — Selection Sort
==============================
For every position i, scan the unsorted remainder for its minimum and
swap it into place.  A position that already holds the minimum costs
no swap.  Indices settle left to right.
"""

from typing import Generator, Sequence

from algorithms.step import Step, SortTracker


def selection_sort(values: Sequence[int]) -> Generator[Step, None, None]:
    t = SortTracker(values)
    n = len(t)

    for i in range(n):
        min_idx = i
        for j in range(i + 1, n):
            yield t.compare(min_idx, j)
            if t.values[j] < t.values[min_idx]:
                min_idx = j

        if min_idx != i:
            yield t.swap(i, min_idx)
        yield t.settle(i)

    yield t.finish()
