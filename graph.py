"""
Undirected, weighted graph abstraction.

Vertices are consecutive integers 0..vertex_count-1.
Every edge u - v with weight w is visible from both endpoints.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple


class Graph(ABC):
    """Undirected, weighted graph over integer vertex ids."""

    @property
    @abstractmethod
    def vertex_count(self) -> int:
        """Number of vertices, fixed at construction."""
        raise NotImplementedError

    def vertices(self) -> Iterable[int]:
        """Return all vertex ids in the graph."""
        return range(self.vertex_count)

    @abstractmethod
    def neighbors(self, vertex: int) -> List[Tuple[int, float]]:
        """
        Neighbours and edge weights for a given vertex, in insertion order.

        Parallel edges appear as separate entries.

        Returns: list[(neighbor, weight)]
        """
        raise NotImplementedError

    def edge_weight(self, u: int, v: int) -> Optional[float]:
        """Cheapest weight among the u - v edges, or None if they are not adjacent."""
        weights = [w for n, w in self.neighbors(u) if n == v]
        if not weights:
            return None
        return min(weights)
