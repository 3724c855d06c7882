"""Tests for the stepwise sorting generators."""

from __future__ import annotations

import random

import pytest

from algorithms import REGISTRY, get_algorithm, list_algorithms
from algorithms.bubble import bubble_sort
from algorithms.counting import counting_sort
from algorithms.heap import heap_sort
from algorithms.insertion import insertion_sort
from algorithms.merge import merge_sort
from algorithms.quick import quick_sort
from algorithms.radix import radix_sort
from algorithms.selection import selection_sort
from algorithms.shell import shell_sort
from algorithms.step import COMPARE, SWAP, WRITE


def collect(fn, values):
    return list(fn(values))


def final(fn, values):
    return collect(fn, values)[-1]


ALL_KEYS = list(REGISTRY)


class TestRegistry:
    def test_nine_algorithms(self):
        assert ALL_KEYS == [
            "bubble", "selection", "insertion", "merge", "quick",
            "heap", "counting", "shell", "radix",
        ]

    def test_lookup_by_key_and_label(self):
        assert get_algorithm("quick").label == "Quick Sort"
        assert get_algorithm("Radix Sort").key == "radix"
        assert get_algorithm("bogo") is None
        assert get_algorithm(["quick"]) is None

    def test_list_keeps_order(self):
        assert [a.key for a in list_algorithms()] == ALL_KEYS

    def test_non_negative_flag(self):
        flagged = {a.key for a in list_algorithms() if a.requires_non_negative}
        assert flagged == {"counting", "radix"}


@pytest.mark.parametrize("key", ALL_KEYS)
class TestCommonContract:
    def test_sorts_random_arrays(self, key):
        rng = random.Random(1234)
        fn = REGISTRY[key].fn
        for n in range(0, 51):
            values = [rng.randint(10, 99) for _ in range(n)]
            last = final(fn, values)
            assert list(last.array) == sorted(values)

    def test_settles_every_index_once(self, key):
        rng = random.Random(99)
        fn = REGISTRY[key].fn
        for n in (0, 1, 2, 7, 20):
            values = [rng.randint(10, 99) for _ in range(n)]
            last = final(fn, values)
            assert sorted(last.settled) == list(range(n))
            assert len(set(last.settled)) == len(last.settled)

    def test_input_is_not_mutated(self, key):
        values = [42, 17, 88, 17, 10]
        collect(REGISTRY[key].fn, values)
        assert values == [42, 17, 88, 17, 10]

    def test_steps_are_consistent(self, key):
        values = [64, 25, 12, 22, 11, 90, 33]
        steps = collect(REGISTRY[key].fn, values)
        for prev, cur in zip(steps, steps[1:]):
            assert cur.step_number == prev.step_number + 1
            assert cur.comparisons >= prev.comparisons
            assert cur.swaps >= prev.swaps
            assert set(prev.settled) <= set(cur.settled)
        for step in steps:
            assert len(step.array) == len(values)
            assert len(step.active) <= 2
        assert steps[-1].is_final
        assert steps[-1].active == ()

    @pytest.mark.parametrize("values", [[], [57]])
    def test_trivial_inputs(self, key, values):
        steps = collect(REGISTRY[key].fn, values)
        last = steps[-1]
        assert last.comparisons == 0
        assert last.swaps == 0
        assert last.settled == tuple(range(len(values)))
        assert not any(s.wait for s in steps)


class TestBubbleSort:
    def test_small_counts(self):
        last = final(bubble_sort, [5, 3, 4])
        assert last.comparisons == 3
        assert last.swaps == 2
        assert last.array == (3, 4, 5)

    def test_early_exit_on_sorted_input(self):
        last = final(bubble_sort, [1, 2, 3, 4])
        assert last.comparisons == 3
        assert last.swaps == 0
        assert last.settled[0] == 3
        assert sorted(last.settled) == [0, 1, 2, 3]

    def test_compares_adjacent_pairs(self):
        steps = collect(bubble_sort, [3, 2, 1])
        pairs = [s.active for s in steps if s.kind == COMPARE]
        assert pairs == [(0, 1), (1, 2), (0, 1)]


class TestSelectionSort:
    def test_five_element_example(self):
        last = final(selection_sort, [29, 10, 14, 37, 13])
        assert last.comparisons == 10
        assert last.swaps == 3
        assert last.array == (10, 13, 14, 29, 37)

    def test_settles_left_to_right(self):
        last = final(selection_sort, [3, 1, 2])
        assert last.settled == (0, 1, 2)

    def test_no_swap_when_already_minimal(self):
        last = final(selection_sort, [1, 2, 3])
        assert last.swaps == 0


class TestInsertionSort:
    def test_counts_terminating_comparison(self):
        last = final(insertion_sort, [3, 1, 2])
        assert last.comparisons == 3
        assert last.swaps == 2

    def test_key_write_does_not_wait(self):
        steps = collect(insertion_sort, [2, 1])
        writes = [s for s in steps if s.kind == WRITE]
        assert [w.wait for w in writes] == [True, False]
        assert writes[-1].array == (1, 2)

    def test_settles_cumulatively(self):
        last = final(insertion_sort, [4, 3, 2, 1])
        assert last.settled == (0, 1, 2, 3)


class TestMergeSort:
    def test_counts(self):
        last = final(merge_sort, [4, 3, 2, 1])
        assert last.comparisons == 4
        assert last.swaps == 0

    def test_settles_only_at_end(self):
        steps = collect(merge_sort, [5, 2, 8, 1])
        assert all(s.settled == () for s in steps[:-2])
        assert steps[-1].settled == (0, 1, 2, 3)

    def test_comparison_highlights_output_slot(self):
        steps = collect(merge_sort, [2, 1])
        compares = [s for s in steps if s.kind == COMPARE]
        assert [c.active for c in compares] == [(0,)]


class TestQuickSort:
    def test_counts(self):
        last = final(quick_sort, [3, 1, 2])
        assert last.comparisons == 2
        assert last.swaps == 2

    def test_compares_against_pivot(self):
        steps = collect(quick_sort, [3, 1, 2])
        compares = [s.active for s in steps if s.kind == COMPARE]
        assert compares == [(0, 2), (1, 2)]

    def test_pivot_placement_does_not_wait(self):
        steps = collect(quick_sort, [3, 1, 2])
        swaps = [s for s in steps if s.kind == SWAP]
        assert [s.wait for s in swaps] == [True, False]


class TestHeapSort:
    def test_counts(self):
        last = final(heap_sort, [1, 2, 3])
        assert last.comparisons == 3
        assert last.swaps == 4

    def test_settles_from_the_end(self):
        last = final(heap_sort, [1, 2, 3])
        assert last.settled == (2, 1, 0)


class TestCountingSort:
    def test_placements_count_as_swaps(self):
        last = final(counting_sort, [12, 10, 12, 11])
        assert last.comparisons == 0
        assert last.swaps == 4
        assert last.array == (10, 11, 12, 12)

    def test_rejects_negative_values(self):
        with pytest.raises(ValueError):
            counting_sort([3, -1, 2])


class TestShellSort:
    def test_counts(self):
        last = final(shell_sort, [2, 1])
        assert last.comparisons == 1
        assert last.swaps == 1

    def test_sorted_input_costs_nothing(self):
        last = final(shell_sort, [10, 20, 30, 40])
        assert last.comparisons == 0
        assert last.swaps == 0


class TestRadixSort:
    def test_one_pass_for_single_digits(self):
        last = final(radix_sort, [5, 3])
        assert last.comparisons == 2
        assert last.swaps == 2
        assert last.array == (3, 5)

    def test_one_pass_per_digit(self):
        last = final(radix_sort, [10, 99, 5])
        assert last.comparisons == 6
        assert last.swaps == 6
        assert last.array == (5, 10, 99)

    def test_rejects_negative_values(self):
        with pytest.raises(ValueError):
            radix_sort([3, -1])

    def test_stable_within_a_pass(self):
        steps = collect(radix_sort, [21, 11, 31])
        writes = [s for s in steps if s.kind == WRITE]
        # ones digit is equal everywhere, so the first pass keeps the order
        assert writes[2].array == (21, 11, 31)
