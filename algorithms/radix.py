"""
radix.py — LSD Radix Sort
==========================
Least-significant-digit radix sort in base 10.  One stable counting
pass per place value (ones, tens, …) until the place value exceeds the
largest element.

Precondition: values must be non-negative integers (ValueError
otherwise).

Per pass:
  1. Read the digit of every element        →  counts as a comparison
  2. Prefix-sum the digit counts
  3. Walk the source from the end, dropping each element into its
     output slot                            →  counts as a swap

The working array doubles as the output buffer during step 3: it starts
as a copy of the source, so the display never shows empty slots.
"""

from typing import Generator, Sequence

from algorithms.counting import require_non_negative
from algorithms.step import Step, SortTracker


BASE = 10


def radix_sort(values: Sequence[int]) -> Generator[Step, None, None]:
    require_non_negative(values, "Radix sort")
    return _radix_sort(values)


def _radix_sort(values: Sequence[int]) -> Generator[Step, None, None]:
    t = SortTracker(values)
    if len(t) < 2:
        yield t.settle_all()
        yield t.finish()
        return

    top = max(t.values)
    exp = 1
    while top // exp > 0:
        yield from _digit_pass(t, exp)
        exp *= BASE

    yield t.settle_all()
    yield t.finish()


def _digit_pass(t: SortTracker, exp: int) -> Generator[Step, None, None]:
    source = list(t.values)
    count = [0] * BASE

    for v in source:
        digit = (v // exp) % BASE
        count[digit] += 1
        yield t.compare(explanation=f"Digit of {v} at place {exp} is {digit}.")

    for d in range(1, BASE):
        count[d] += count[d - 1]

    # walk backwards so equal digits keep their order
    for i in range(len(source) - 1, -1, -1):
        digit = (source[i] // exp) % BASE
        count[digit] -= 1
        yield t.write(count[digit], source[i], counted=True, active=(i,))
