"""
step.py — Sorting Step Snapshot
================================
Every sorting algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything the visualizer
needs to render one frame:

    • The array as it looks right now
    • Which indices are being compared / written ("active")
    • Which indices are already in their final place ("settled")
    • The running comparison and swap counters
    • Whether the algorithm wants to pause for a beat after this step
    • A plain-English explanation of what just happened

Design decisions:
  - Step is a plain dataclass holding tuples only.  It is a SNAPSHOT.
    The SortTracker is the only writer of the working buffer; the
    controller / renderer are pure readers.
  - `wait` marks a suspension point.  Steps with wait=False are
    published immediately and the algorithm carries on (e.g. the
    pivot placement in quick sort, or a settle event).
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Tuple


COMPARE = "compare"
SWAP    = "swap"
WRITE   = "write"
SETTLE  = "settle"
DONE    = "done"


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number : 0-based index of this step in the run.
        kind        : One of compare / swap / write / settle / done.
        array       : Snapshot of the working buffer.
        active      : Indices currently highlighted (0, 1 or 2 of them).
        settled     : Indices that will not change again, in the order
                      they were settled.
        comparisons : Running comparison count.
        swaps       : Running swap count.
        wait        : True if the scheduler should pause after this step.
        explanation : Human-readable text for the step panel.
        is_final    : True on the very last step of a completed run.
    """

    step_number: int             = 0
    kind:        str             = COMPARE
    array:       Tuple[int, ...] = ()
    active:      Tuple[int, ...] = ()
    settled:     Tuple[int, ...] = ()
    comparisons: int             = 0
    swaps:       int             = 0
    wait:        bool            = True
    explanation: str             = ""
    is_final:    bool            = False


# ---------------------------------------------------------------------------
# Tracker — owns the working copy and builds Steps
# ---------------------------------------------------------------------------
class SortTracker:
    """
    Mutable scratch-pad an algorithm sorts through.

    The tracker copies the input on construction, so the caller's list
    is never touched.  Every mutating helper returns the Step describing
    the change; the algorithm simply yields it.

    Usage inside an algorithm generator:
        t = SortTracker(values)
        yield t.compare(j, j + 1)
        if t.values[j] > t.values[j + 1]:
            yield t.swap(j, j + 1)
        yield t.finish()
    """

    def __init__(self, values: Sequence[int]):
        self.values:      List[int]        = list(values)
        self.active:      Tuple[int, ...]  = ()
        self.comparisons: int              = 0
        self.swaps:       int              = 0
        self._settled:    List[int]        = []
        self._seen:       Set[int]         = set()
        self._step_no:    int              = 0

    def __len__(self) -> int:
        return len(self.values)

    @property
    def settled(self) -> Tuple[int, ...]:
        return tuple(self._settled)

    # -- events --
    def compare(self, *indices: int, explanation: str = "") -> Step:
        """Highlight `indices`, count one comparison.  Always a suspension point."""
        self.active = tuple(indices)
        self.comparisons += 1
        if not explanation and len(indices) == 2:
            i, j = indices
            explanation = f"Compare {self.values[i]} (#{i}) with {self.values[j]} (#{j})."
        return self._build(COMPARE, True, explanation)

    def swap(self, i: int, j: int, wait: bool = True) -> Step:
        """Exchange two positions and count it as a swap."""
        self.values[i], self.values[j] = self.values[j], self.values[i]
        self.swaps += 1
        return self._build(
            SWAP, wait, f"Swap positions {i} and {j}: now {self.values[i]} and {self.values[j]}."
        )

    def write(
        self,
        index: int,
        value: int,
        counted: bool = False,
        wait: bool = True,
        active: Optional[Tuple[int, ...]] = None,
    ) -> Step:
        """Positional write.  `counted` adds it to the swap counter."""
        self.values[index] = value
        if counted:
            self.swaps += 1
        if active is not None:
            self.active = active
        return self._build(WRITE, wait, f"Write {value} into position {index}.")

    def settle(self, *indices: int, wait: bool = False) -> Step:
        for idx in indices:
            if idx not in self._seen:
                self._seen.add(idx)
                self._settled.append(idx)
        return self._build(SETTLE, wait, "")

    def settle_all(self) -> Step:
        return self.settle(*range(len(self.values)))

    def clear_active(self) -> None:
        self.active = ()

    def finish(self) -> Step:
        self.active = ()
        return self._build(DONE, False, "Array sorted.", is_final=True)

    # -- internal --
    def _build(self, kind: str, wait: bool, explanation: str, is_final: bool = False) -> Step:
        step = Step(
            step_number=self._step_no,
            kind=kind,
            array=tuple(self.values),
            active=self.active,
            settled=tuple(self._settled),
            comparisons=self.comparisons,
            swaps=self.swaps,
            wait=wait,
            explanation=explanation,
            is_final=is_final,
        )
        self._step_no += 1
        return step
