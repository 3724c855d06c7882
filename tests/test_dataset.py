"""Tests for random input generation."""

from __future__ import annotations

import random

import pytest

from dataset import VALUE_MAX, VALUE_MIN, generate_random


class TestGenerateRandom:
    def test_size_and_range(self):
        values = generate_random(50, seed=3)
        assert len(values) == 50
        assert all(VALUE_MIN <= v <= VALUE_MAX for v in values)

    def test_seed_is_reproducible(self):
        assert generate_random(20, seed=42) == generate_random(20, seed=42)

    def test_rng_wins_over_seed(self):
        expected = generate_random(8, rng=random.Random(5))
        assert generate_random(8, seed=999, rng=random.Random(5)) == expected

    def test_custom_bounds(self):
        assert generate_random(6, low=7, high=7) == [7] * 6

    def test_non_positive_size_is_empty(self):
        assert generate_random(0) == []
        assert generate_random(-3) == []

    def test_inverted_bounds_raise(self):
        with pytest.raises(ValueError):
            generate_random(5, low=20, high=10)
