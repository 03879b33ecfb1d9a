"""
Heap-based DijkstraEngine implementation.

Uses Python's heapq to compute shortest paths over any Graph implementation
that satisfies the Graph interface. Edge weights must be non-negative.
"""

from typing import List, Optional, Sequence
import heapq
import logging
import math

from graph import Graph
from algorithms import DijkstraEngine

logger = logging.getLogger(__name__)


def reconstruct_path(previous: Sequence[Optional[int]], destination: int) -> List[int]:
    """
    Walk predecessor links back from destination and return the path source first.

    previous holds one entry per vertex; None marks the source.
    """
    path = [destination]
    current = previous[destination]
    while current is not None:
        path.append(current)
        current = previous[current]
    path.reverse()
    return path


def path_weight(graph: Graph, path: Sequence[int]) -> float:
    """
    Total weight of a path, using the cheapest edge between consecutive vertices.
    """
    total = 0.0
    for u, v in zip(path, path[1:]):
        w = graph.edge_weight(u, v)
        if w is None:
            raise ValueError(f"Vertices {u} and {v} are not adjacent.")
        total += w
    return total


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Dijkstra using a binary heap with lazy deletion of stale entries.

    Heap entries are (distance, vertex) tuples, so ties on distance are
    broken by the smaller vertex id.

    Complexity:
        O(E log V) over the vertices reachable from the source.
    """

    def shortest_path(
        self, graph: Graph, source: int, destination: int
    ) -> Optional[List[int]]:
        """
        Point-to-point query that stops as soon as destination is popped.

        Once destination leaves the heap its distance is final, so nothing
        past that point can shorten the path.
        """
        distance: List[float] = [math.inf] * graph.vertex_count
        previous: List[Optional[int]] = [None] * graph.vertex_count
        distance[source] = 0
        pq = [(0, source)]  # priority queue of (distance, vertex)

        logger.debug("shortest_path %d -> %d over %d vertices", source, destination, graph.vertex_count)

        while pq:
            d_u, u = heapq.heappop(pq)

            if u == destination:
                logger.debug("reached %d at distance %s", destination, d_u)
                return reconstruct_path(previous, destination)

            # Skip outdated entries
            if d_u > distance[u]:
                continue

            for v, w in graph.neighbors(u):
                alt = d_u + w
                if alt < distance[v]:
                    distance[v] = alt
                    previous[v] = u
                    heapq.heappush(pq, (alt, v))

        logger.debug("frontier exhausted, %d unreachable from %d", destination, source)
        return None
