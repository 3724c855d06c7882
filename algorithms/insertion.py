"""
insertion.py — Insertion Sort
==============================
Builds the sorted prefix one element at a time.  The current key is
held aside while larger elements shift one slot right; every backward
step costs a comparison, including the one that stops the scan.
Each shift is counted as a swap.

The prefix 0..i is marked settled after every insertion, so settled
indices grow left to right.
"""

from typing import Generator, Sequence

from algorithms.step import Step, SortTracker


def insertion_sort(values: Sequence[int]) -> Generator[Step, None, None]:
    t = SortTracker(values)
    n = len(t)
    if n:
        yield t.settle(0)

    for i in range(1, n):
        key = t.values[i]
        j = i - 1
        while j >= 0:
            yield t.compare(
                j, j + 1,
                explanation=f"Compare {t.values[j]} (#{j}) with the key {key}.",
            )
            if t.values[j] > key:
                yield t.write(j + 1, t.values[j], counted=True)
                j -= 1
            else:
                break

        yield t.write(j + 1, key, wait=False)
        yield t.settle(i)

    yield t.finish()
