"""
CLI demonstrating shortest-path queries on a small weighted graph.

Without arguments it builds the built-in 6-vertex sample graph and prints the
shortest path from vertex 0 to vertex 4. A YAML config (see
config/sample_graph.yml) can supply a different graph and query list.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple
import argparse
import logging

from adjacency_list_graph import AdjacencyListGraph
from dijkstra_engine import path_weight

logger = logging.getLogger(__name__)

SAMPLE_VERTICES = 6
SAMPLE_EDGES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 7),
    (0, 2, 9),
    (0, 5, 14),
    (1, 2, 10),
    (1, 3, 15),
    (2, 3, 11),
    (2, 5, 2),
    (3, 4, 6),
    (4, 5, 9),
)


@dataclass(frozen=True)
class Query:
    source: int
    destination: int


@dataclass(frozen=True)
class DemoConfig:
    vertices: int
    edges: Sequence[Tuple[int, int, float]]
    queries: Sequence[Query]


DEFAULT_CONFIG = DemoConfig(
    vertices=SAMPLE_VERTICES,
    edges=SAMPLE_EDGES,
    queries=(Query(source=0, destination=4),),
)


def load_config(path: Path) -> DemoConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text())
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a mapping.")
    for key in ("vertices", "edges", "queries"):
        if key not in data:
            raise ValueError(f"Config {path} is missing '{key}'.")

    for key in ("edges", "queries"):
        if not isinstance(data[key], list):
            raise ValueError(f"Config {path}: '{key}' must be a list, got {data[key]!r}.")

    edges = []
    for edge in data["edges"]:
        if not isinstance(edge, (list, tuple)) or len(edge) != 3:
            raise ValueError(f"Edge {edge!r} must be [u, v, weight].")
        u, v, w = edge
        edges.append((int(u), int(v), float(w)))

    queries = []
    for q in data["queries"]:
        if not isinstance(q, dict) or "source" not in q or "destination" not in q:
            raise ValueError(f"Query {q!r} needs 'source' and 'destination'.")
        queries.append(Query(source=int(q["source"]), destination=int(q["destination"])))

    return DemoConfig(vertices=int(data["vertices"]), edges=edges, queries=queries)


def build_graph(cfg: DemoConfig) -> AdjacencyListGraph:
    graph = AdjacencyListGraph(cfg.vertices)
    for u, v, w in cfg.edges:
        graph.add_edge(u, v, w)
    logger.debug("built graph with %d vertices and %d edges", graph.vertex_count, graph.edge_count())
    return graph


def build_sample_graph() -> AdjacencyListGraph:
    """The fixed 6-vertex, 9-edge sample graph."""
    return build_graph(DEFAULT_CONFIG)


def run_query(graph: AdjacencyListGraph, query: Query) -> Optional[List[int]]:
    """Run one query and print its result."""
    path = graph.shortest_path(query.source, query.destination)
    if path is None:
        print(f"No path found from {query.source} to {query.destination}.")
        return None

    print(f"Shortest path from {query.source} to {query.destination}:")
    print(" ".join(str(vertex) for vertex in path))
    print(f"Total weight: {path_weight(graph, path):g}")
    return path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dijkstra shortest-path demo.")
    parser.add_argument("--config", type=Path, help="YAML file with vertices, edges and queries")
    parser.add_argument("--source", type=int, help="override the configured queries")
    parser.add_argument("--destination", type=int, help="override the configured queries")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.source is None) != (args.destination is None):
        parser.error("--source and --destination must be given together")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    # bad configs and out-of-range vertex ids are reported as usage errors
    try:
        cfg = load_config(args.config) if args.config else DEFAULT_CONFIG
        queries: Sequence[Query] = cfg.queries
        if args.source is not None:
            queries = [Query(source=args.source, destination=args.destination)]

        graph = build_graph(cfg)
        for query in queries:
            run_query(graph, query)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
