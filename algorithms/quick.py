"""
quick.py — Quick Sort
======================
Lomuto partition scheme with the last element of the range as pivot.

Every element of the range is compared against the pivot; each one
found smaller is swapped into the growing "less than" prefix (counted
even when it swaps with itself).  The pivot is then swapped into its
final slot without pausing, and both sides are sorted recursively.
The whole array is settled when the top-level call returns.
"""

from typing import Generator, Sequence

from algorithms.step import Step, SortTracker


def quick_sort(values: Sequence[int]) -> Generator[Step, None, None]:
    t = SortTracker(values)
    yield from _quick(t, 0, len(t) - 1)
    yield t.settle_all()
    yield t.finish()


def _quick(t: SortTracker, lo: int, hi: int) -> Generator[Step, None, None]:
    if lo < hi:
        p = yield from _partition(t, lo, hi)
        yield from _quick(t, lo, p - 1)
        yield from _quick(t, p + 1, hi)


def _partition(t: SortTracker, lo: int, hi: int) -> Generator[Step, None, int]:
    """Partition t.values[lo..hi] around t.values[hi]; returns the pivot's final index."""
    pivot = t.values[hi]
    i = lo - 1
    for j in range(lo, hi):
        yield t.compare(
            j, hi,
            explanation=f"Compare {t.values[j]} (#{j}) with pivot {pivot}.",
        )
        if t.values[j] < pivot:
            i += 1
            yield t.swap(i, j)

    yield t.swap(i + 1, hi, wait=False)
    t.clear_active()
    return i + 1
