"""
Concrete undirected, weighted graph implementation.

Implements the Graph interface using a simple adjacency-list representation.
"""

from typing import Dict, List, Optional, Tuple

from graph import Graph
from algorithms import DijkstraEngine
from dijkstra_engine import SimpleDijkstraEngine


class AdjacencyListGraph(Graph):
    """
    Undirected, weighted graph backed by a vertex -> [(neighbor, weight)] mapping.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
        self._vertex_count = vertex_count
        self._adj: Dict[int, List[Tuple[int, float]]] = {}
        self._edge_count = 0

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self._vertex_count:
            raise ValueError(
                f"Vertex {vertex} out of range for a graph with {self._vertex_count} vertices."
            )

    # --- Mutation API -----------------------------------------------------

    def add_edge(self, u: int, v: int, weight: float) -> None:
        """
        Add an undirected edge u - v with weight.

        Both directions are stored. Adding the same pair again keeps the
        earlier entry, so parallel edges coexist.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        self._adj.setdefault(u, []).append((v, weight))
        self._adj.setdefault(v, []).append((u, weight))
        self._edge_count += 1

    # --- Graph interface --------------------------------------------------

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    def neighbors(self, vertex: int) -> List[Tuple[int, float]]:
        return list(self._adj.get(vertex, []))  # defensive copy

    def edge_count(self) -> int:
        """Number of undirected edges added, parallel edges included."""
        return self._edge_count

    # --- Queries ----------------------------------------------------------

    def shortest_path(
        self,
        source: int,
        destination: int,
        engine: Optional[DijkstraEngine] = None,
    ) -> Optional[List[int]]:
        """
        Minimum-weight path from source to destination, or None if unreachable.
        """
        self._check_vertex(source)
        self._check_vertex(destination)
        engine = engine or SimpleDijkstraEngine()
        return engine.shortest_path(self, source, destination)
