"""
heap.py — Heap Sort
====================
Phase 1 builds a max-heap bottom-up by sifting down every internal
node.  Phase 2 repeatedly swaps the root (the maximum) with the last
slot of the heap, settles that slot and sifts the new root down in the
shrunken heap.  Index 0 is settled last.
"""

from typing import Generator, Sequence

from algorithms.step import Step, SortTracker


def heap_sort(values: Sequence[int]) -> Generator[Step, None, None]:
    t = SortTracker(values)
    n = len(t)

    for i in range(n // 2 - 1, -1, -1):
        yield from _sift_down(t, n, i)

    for end in range(n - 1, 0, -1):
        yield t.swap(0, end, wait=False)
        yield t.settle(end)
        yield from _sift_down(t, end, 0)

    if n:
        yield t.settle(0)
    yield t.finish()


def _sift_down(t: SortTracker, size: int, i: int) -> Generator[Step, None, None]:
    """Restore the heap property for the subtree rooted at i within the first `size` slots."""
    largest = i
    left  = 2 * i + 1
    right = 2 * i + 2

    if left < size:
        yield t.compare(i, left)
        if t.values[left] > t.values[largest]:
            largest = left
    if right < size:
        yield t.compare(largest, right)
        if t.values[right] > t.values[largest]:
            largest = right

    if largest != i:
        yield t.swap(i, largest)
        yield from _sift_down(t, size, largest)
    t.clear_active()
