"""Tests for the seeding strategies."""

import pytest

from torus_life.core.patterns import Pattern
from torus_life.core.seeding import empty_seed, modulo_seed, pattern_seed, random_seed


class TestModuloSeed:
    """Test cases for the default seed."""

    def test_first_indexes(self):
        """Test the divisible-by-2-or-7 rule."""
        alive = [i for i in range(30) if modulo_seed(i)]
        assert alive == [0, 2, 4, 6, 7, 8, 10, 12, 14, 16, 18, 20, 21, 22, 24, 26, 28]

    def test_empty_seed(self):
        """Test that the empty seed kills every cell."""
        assert not any(empty_seed(i) for i in range(50))


class TestPatternSeed:
    """Test cases for seeding from a pattern."""

    def test_places_pattern_with_offset(self):
        """Test pattern placement at an offset."""
        seed = pattern_seed(Pattern("Blinker", [(0, 0), (1, 0), (2, 0)]), 5, 5, column_offset=1, row_offset=2)
        assert [i for i in range(25) if seed(i)] == [11, 12, 13]

    def test_wraps_past_edges(self):
        """Test that cells past the edges wrap to the opposite side."""
        seed = pattern_seed(Pattern("Pair", [(0, 0), (1, 1)]), 4, 3, column_offset=3, row_offset=2)

        # (3, 2) stays put; (4, 3) wraps to (0, 0)
        assert [i for i in range(12) if seed(i)] == [0, 11]

    def test_invalid_dimensions(self):
        """Test that non-positive dimensions are rejected."""
        with pytest.raises(ValueError):
            pattern_seed(Pattern("Dot", [(0, 0)]), 0, 4)


class TestRandomSeed:
    """Test cases for random seeding."""

    def test_reproducible(self):
        """Test that equal seeds produce equal cells."""
        first = random_seed(0.3, seed=42)
        second = random_seed(0.3, seed=42)

        assert [first(i) for i in range(2000)] == [second(i) for i in range(2000)]

    def test_query_order_independent(self):
        """Test that an index keeps its state whatever order it's asked in."""
        forward = random_seed(0.5, seed=3)
        backward = random_seed(0.5, seed=3)

        expected = [forward(i) for i in range(3000)]
        assert [backward(i) for i in reversed(range(3000))] == list(reversed(expected))

    def test_probability_bounds(self):
        """Test the extreme probabilities."""
        assert not any(random_seed(0.0, seed=1)(i) for i in range(500))
        assert all(random_seed(1.0, seed=1)(i) for i in range(500))

    def test_density(self):
        """Test the density is roughly the probability."""
        seed = random_seed(0.5, seed=0)
        alive = sum(seed(i) for i in range(1000))
        assert 400 <= alive <= 600

    @pytest.mark.parametrize("probability", [-0.1, 1.5])
    def test_invalid_probability(self, probability):
        """Test that probabilities outside [0, 1] are rejected."""
        with pytest.raises(ValueError):
            random_seed(probability)

    def test_negative_index(self):
        """Test that negative indexes are rejected."""
        with pytest.raises(IndexError):
            random_seed(0.5, seed=1)(-1)
