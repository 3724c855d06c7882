"""
merge.py — Merge Sort
======================
Top-down merge sort.  The range is split at the floor midpoint, both
halves are sorted recursively, then merged back by repeatedly taking
the smaller head.  Whatever is left in either half is drained without
further comparisons.

Merge writes are positional, so the swap counter never moves.  The
whole array is settled only once the top-level merge is done.
"""

from typing import Generator, Sequence

from algorithms.step import Step, SortTracker


def merge_sort(values: Sequence[int]) -> Generator[Step, None, None]:
    t = SortTracker(values)
    yield from _sort(t, 0, len(t) - 1)
    yield t.settle_all()
    yield t.finish()


def _sort(t: SortTracker, lo: int, hi: int) -> Generator[Step, None, None]:
    if lo >= hi:
        return
    mid = (lo + hi) // 2
    yield from _sort(t, lo, mid)
    yield from _sort(t, mid + 1, hi)
    yield from _merge(t, lo, mid, hi)


def _merge(t: SortTracker, lo: int, mid: int, hi: int) -> Generator[Step, None, None]:
    left  = t.values[lo:mid + 1]
    right = t.values[mid + 1:hi + 1]
    i = j = 0
    k = lo

    while i < len(left) and j < len(right):
        yield t.compare(
            k,
            explanation=f"Merge into #{k}: compare {left[i]} (left) with {right[j]} (right).",
        )
        # <= keeps the merge stable
        if left[i] <= right[j]:
            yield t.write(k, left[i], wait=False)
            i += 1
        else:
            yield t.write(k, right[j], wait=False)
            j += 1
        k += 1

    while i < len(left):
        yield t.write(k, left[i], active=(k,))
        i += 1
        k += 1
    while j < len(right):
        yield t.write(k, right[j], active=(k,))
        j += 1
        k += 1

    t.clear_active()
