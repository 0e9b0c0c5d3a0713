"""
All-pairs distance matrix with eccentricity-based queries.

Row ``u`` holds the distances from ``u`` to every vertex. ``infinity`` marks
pairs without a path.
"""

from typing import List

import numpy as np

from .utils import check_vertex
from .weights import SIGNED_DTYPE, SIGNED_INFINITY


class DistanceMatrix:
    """
    Square ``order x order`` matrix of shortest distances.

    Args:
        order: Number of vertices. Must be at least 1.
        infinity: Sentinel for "no path"; every entry starts at this value.
        dtype: numpy integer dtype of the backing array.

    Raises:
        ValueError: If order is less than 1.

    Example:
        >>> dm = DistanceMatrix(2)
        >>> dm[0, 0] = 0
        >>> dm[0, 1] = 3
        >>> dm[1].tolist() == [SIGNED_INFINITY, SIGNED_INFINITY]
        True
    """

    def __init__(self, order: int, infinity: int = SIGNED_INFINITY, dtype=SIGNED_DTYPE):
        if order < 1:
            raise ValueError("a distance matrix has at least one vertex")
        self.infinity = infinity
        self.dist = np.full((order, order), infinity, dtype=dtype)

    @classmethod
    def from_array(cls, dist: np.ndarray, infinity: int = SIGNED_INFINITY) -> "DistanceMatrix":
        """Wrap a square array (copied)."""
        dist = np.asarray(dist)
        if dist.ndim != 2 or dist.shape[0] != dist.shape[1]:
            raise ValueError(f"expected a square matrix, got shape {dist.shape}")
        matrix = cls(dist.shape[0], infinity, dist.dtype)
        matrix.dist[...] = dist
        return matrix

    def order(self) -> int:
        return self.dist.shape[0]

    def __getitem__(self, index):
        if isinstance(index, tuple):
            u, v = index
            check_vertex(self.order(), u, "u")
            check_vertex(self.order(), v, "v")
            return int(self.dist[u, v])
        check_vertex(self.order(), index, "u")
        return self.dist[index]

    def __setitem__(self, index, value) -> None:
        u, v = index
        check_vertex(self.order(), u, "u")
        check_vertex(self.order(), v, "v")
        self.dist[u, v] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DistanceMatrix):
            return self.infinity == other.infinity and np.array_equal(self.dist, other.dist)
        return NotImplemented

    def __repr__(self) -> str:
        return f"DistanceMatrix({self.dist.tolist()!r})"

    def tolist(self) -> List[List[int]]:
        return self.dist.tolist()

    def eccentricities(self) -> np.ndarray:
        """
        Eccentricity of every vertex: the largest distance in its row.

        A vertex that cannot reach some other vertex has eccentricity
        ``infinity``.
        """
        return self.dist.max(axis=1)

    def diameter(self) -> int:
        """Largest eccentricity."""
        return int(self.eccentricities().max())

    def center(self) -> List[int]:
        """Vertices of minimum eccentricity, in increasing order."""
        ecc = self.eccentricities()
        return np.flatnonzero(ecc == ecc.min()).tolist()

    def periphery(self) -> List[int]:
        """Vertices whose eccentricity equals the diameter, in increasing order."""
        ecc = self.eccentricities()
        return np.flatnonzero(ecc == ecc.max()).tolist()

    def is_connected(self) -> bool:
        """True if every vertex reaches every other vertex."""
        return bool((self.eccentricities() != self.infinity).all())
