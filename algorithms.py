"""
Algorithm interfaces for shortest-path queries.

Keeps graph algorithms separate from the graph container and the demo wiring.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from graph import Graph


class DijkstraEngine(ABC):
    """
    Interface for point-to-point shortest-path computation.
    """

    @abstractmethod
    def shortest_path(
        self, graph: Graph, source: int, destination: int
    ) -> Optional[List[int]]:
        """
        Compute one minimum-weight path from source to destination.

        Returns:
            The vertices of the path, source first and destination last,
            or None if destination is unreachable from source.
        """
        raise NotImplementedError
