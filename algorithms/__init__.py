"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows
about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, description, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and UI both consume it
so adding a new algorithm is: write the generator, add one entry here.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from algorithms.bubble    import bubble_sort
from algorithms.selection import selection_sort
from algorithms.insertion import insertion_sort
from algorithms.merge     import merge_sort
from algorithms.quick     import quick_sort
from algorithms.heap      import heap_sort
from algorithms.counting  import counting_sort
from algorithms.shell     import shell_sort
from algorithms.radix     import radix_sort


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:                   str        # registry key, e.g. "bubble"
    label:                 str        # human label, e.g. "Bubble Sort"
    fn:                    Callable   # values -> Generator[Step]
    description:           str = ""   # "About" text for the UI card
    complexity_time:       str = ""   # e.g. "O(n²)"
    complexity_space:      str = ""   # e.g. "O(1)"
    requires_non_negative: bool = False


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=bubble_sort,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly swaps adjacent elements if they are in wrong order, "
                    "bubbling the largest element to the end.",
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=selection_sort,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Selects the minimum element from unsorted part and places it at the beginning.",
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=insertion_sort,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Builds sorted array one item at a time by inserting elements "
                    "in their correct position.",
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=merge_sort,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Divide and conquer algorithm that divides array and merges sorted halves.",
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=quick_sort,
        complexity_time="O(n log n) avg", complexity_space="O(log n)",
        description="Divide and conquer algorithm using a pivot to partition array "
                    "and sort recursively.",
    ),

    "heap": AlgoInfo(
        key="heap", label="Heap Sort", fn=heap_sort,
        complexity_time="O(n log n)", complexity_space="O(1)",
        description="Builds a heap and repeatedly extracts the maximum element.",
    ),

    "counting": AlgoInfo(
        key="counting", label="Counting Sort", fn=counting_sort,
        complexity_time="O(n + k)", complexity_space="O(k)",
        requires_non_negative=True,
        description="Counts occurrences of each value and reconstructs sorted array.",
    ),

    "shell": AlgoInfo(
        key="shell", label="Shell Sort", fn=shell_sort,
        complexity_time="O(n²) worst", complexity_space="O(1)",
        description="Generalization of insertion sort that allows exchanges of distant elements.",
    ),

    "radix": AlgoInfo(
        key="radix", label="Radix Sort", fn=radix_sort,
        complexity_time="O(d · (n + 10))", complexity_space="O(n)",
        requires_non_negative=True,
        description="Sorts numbers digit by digit starting from least significant digit.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key or by label ("Bubble Sort"), or None."""
    if not isinstance(key, str):
        return None
    if key in REGISTRY:
        return REGISTRY[key]
    for info in REGISTRY.values():
        if info.label == key:
            return info
    return None


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
]
