"""Tests for DistanceMatrix and its eccentricity queries."""

import numpy as np
import pytest

from dipaths.graphs import SIGNED_INFINITY, DistanceMatrix, floyd_warshall


class TestDistanceMatrix:
    """Tests for construction and indexing."""

    def test_new_matrix_is_all_infinity(self):
        """Test that every entry starts at the sentinel."""
        dm = DistanceMatrix(2)
        assert dm.tolist() == [[SIGNED_INFINITY] * 2] * 2
        assert dm.order() == 2

    def test_custom_infinity(self):
        """Test a caller-chosen sentinel."""
        dm = DistanceMatrix(2, infinity=-1)
        assert dm[0, 1] == -1

    def test_zero_order_rejected(self):
        """Test that an empty matrix cannot be built."""
        with pytest.raises(ValueError, match="at least one vertex"):
            DistanceMatrix(0)

    def test_set_and_get(self):
        """Test pair indexing."""
        dm = DistanceMatrix(2)
        dm[0, 1] = 3
        assert dm[0, 1] == 3
        assert isinstance(dm[0, 1], int)

    def test_row_indexing(self):
        """Test that a single index returns a row."""
        dm = DistanceMatrix(2)
        dm[1, 0] = 4
        assert dm[1].tolist() == [4, SIGNED_INFINITY]

    def test_index_out_of_bounds(self):
        """Test that indexing is bounds-checked."""
        dm = DistanceMatrix(2)
        with pytest.raises(IndexError, match="v = 2 is out of bounds"):
            dm[0, 2]
        with pytest.raises(IndexError, match="u = -1 is out of bounds"):
            dm[-1]
        with pytest.raises(IndexError):
            dm[2, 0] = 1

    def test_from_array(self):
        """Test wrapping an existing array."""
        dm = DistanceMatrix.from_array(np.array([[0, 1], [2, 0]], dtype=np.int64))
        assert dm.tolist() == [[0, 1], [2, 0]]

    def test_from_array_not_square(self):
        """Test that a non-square array is rejected."""
        with pytest.raises(ValueError, match="square"):
            DistanceMatrix.from_array(np.zeros((2, 3), dtype=np.int64))

    def test_equality(self):
        """Test value equality."""
        a = DistanceMatrix.from_array(np.array([[0, 1], [2, 0]], dtype=np.int64))
        b = DistanceMatrix.from_array(np.array([[0, 1], [2, 0]], dtype=np.int64))
        assert a == b
        b[0, 1] = 5
        assert a != b


class TestEccentricity:
    """Tests for eccentricity-based queries."""

    def test_cross_country(self, cross_country):
        """Test queries on a complete digraph."""
        dm = floyd_warshall(cross_country)
        assert dm.eccentricities().tolist() == [10, 11, 7, 6]
        assert dm.diameter() == 11
        assert dm.center() == [3]
        assert dm.periphery() == [1]
        assert dm.is_connected()

    def test_symmetric(self, bryr_2):
        """Test queries on a symmetric digraph."""
        dm = floyd_warshall(bryr_2)
        assert dm.eccentricities().tolist() == [3, 4, 3, 2, 3, 4]
        assert dm.diameter() == 4
        assert dm.center() == [3]
        assert dm.periphery() == [1, 5]
        assert dm.is_connected()

    def test_disconnected(self, shortest_path_1):
        """Test that an unreachable pair makes the digraph disconnected."""
        dm = floyd_warshall(shortest_path_1)
        assert not dm.is_connected()
        assert dm.diameter() == SIGNED_INFINITY
        assert dm.center() == [3]

    def test_single_vertex(self):
        """Test the trivial matrix."""
        dm = DistanceMatrix(1)
        dm[0, 0] = 0
        assert dm.eccentricities().tolist() == [0]
        assert dm.center() == [0]
        assert dm.periphery() == [0]
        assert dm.is_connected()
