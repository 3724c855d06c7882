"""
shell.py — Shell Sort
======================
Insertion sort over a shrinking stride.  The gap starts at n // 2 and
halves every pass down to 1.  Within a pass each element is carried
back through its gap group while the element `gap` slots earlier is
larger; only those successful checks count as comparisons.

The slot an element lands in is marked settled straight away.  The
whole array is only guaranteed settled once the gap reaches 0.
"""

from typing import Generator, Sequence

from algorithms.step import Step, SortTracker


def shell_sort(values: Sequence[int]) -> Generator[Step, None, None]:
    t = SortTracker(values)
    n = len(t)

    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            temp = t.values[i]
            j = i
            while j >= gap and t.values[j - gap] > temp:
                yield t.compare(
                    j, j - gap,
                    explanation=f"{t.values[j - gap]} (#{j - gap}) is larger than {temp}, gap {gap}.",
                )
                yield t.write(j, t.values[j - gap], counted=True)
                j -= gap

            yield t.write(j, temp, wait=False)
            yield t.settle(j, wait=True)
        gap //= 2

    yield t.settle_all()
    yield t.finish()
