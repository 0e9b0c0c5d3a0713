"""Tests for infinity sentinels and saturating arithmetic."""

import numpy as np

from dipaths.graphs import (
    SIGNED_INFINITY,
    SIGNED_MIN,
    UNSIGNED_INFINITY,
    saturating_add,
    unit_step,
    unsigned_add,
)


class TestSentinels:
    """Tests for the type-maximum sentinels."""

    def test_unsigned_infinity_is_uint64_max(self):
        """Test the unsigned sentinel."""
        assert UNSIGNED_INFINITY == 2**64 - 1
        assert UNSIGNED_INFINITY == int(np.iinfo(np.uint64).max)

    def test_signed_infinity_is_int64_max(self):
        """Test the signed sentinel."""
        assert SIGNED_INFINITY == 2**63 - 1
        assert SIGNED_MIN == -(2**63)


class TestSaturatingAdd:
    """Tests for saturating_add."""

    def test_plain_addition(self):
        """Test that in-range sums are exact."""
        assert saturating_add(3, 4) == 7
        assert saturating_add(3, -5) == -2

    def test_signed_overflow_clamps(self):
        """Test that the signed sentinel absorbs positive weights."""
        assert saturating_add(SIGNED_INFINITY, 5) == SIGNED_INFINITY
        assert saturating_add(SIGNED_INFINITY - 1, 10) == SIGNED_INFINITY

    def test_signed_underflow_clamps(self):
        """Test clamping at the bottom of the signed range."""
        assert saturating_add(SIGNED_MIN, -1) == SIGNED_MIN

    def test_unsigned_overflow_clamps(self):
        """Test that the unsigned sentinel absorbs any weight."""
        assert saturating_add(UNSIGNED_INFINITY, 1, signed=False) == UNSIGNED_INFINITY

    def test_unsigned_underflow_clamps_to_zero(self):
        """Test that unsigned sums never go below zero."""
        assert saturating_add(3, -5, signed=False) == 0

    def test_numpy_scalars_accepted(self):
        """Test that numpy integers are handled as Python ints."""
        result = saturating_add(np.int64(SIGNED_INFINITY), np.int64(1))
        assert result == SIGNED_INFINITY
        assert isinstance(result, int)


class TestDefaultSteps:
    """Tests for the default BFS and Dijkstra steps."""

    def test_unit_step(self):
        """Test one hop further."""
        assert unit_step(0) == 1
        assert unit_step(UNSIGNED_INFINITY) == UNSIGNED_INFINITY

    def test_unsigned_add(self):
        """Test the default Dijkstra accumulation."""
        assert unsigned_add(2, 5) == 7
        assert unsigned_add(UNSIGNED_INFINITY - 1, 5) == UNSIGNED_INFINITY
