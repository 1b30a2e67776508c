"""Command that runs every algorithm on a small random graph."""

from __future__ import annotations

import argparse
import random

from .algorithms import bfs, dfs, dijkstra, kruskal, prim
from .graph import Graph


def add_random_edges(graph: Graph, count: int, rng: random.Random) -> None:
    """Add ``count`` random edges with weights between 1 and 10."""
    for _ in range(count):
        source = rng.randrange(graph.num_vertices)
        dest = rng.randrange(graph.num_vertices)
        weight = rng.randint(1, 10)
        graph.add_edge(source, dest, weight)


def format_graph_details(graph: Graph) -> str:
    """A listing of the graph followed by its vertex count."""
    return (
        "Graph Details:\n"
        + graph.render()
        + f"Number of Vertices: {graph.num_vertices}\n"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build a random graph and print its search and spanning trees."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    print("=============================")
    print("     Demo of Graph Project   ")
    print("=============================\n")

    graph = Graph(5)
    add_random_edges(graph, 7, rng)

    print("Original Graph with Random Edges:")
    print(format_graph_details(graph))

    sections = [
        ("=== BFS Tree from Node 0 ===", bfs(graph, 0)),
        ("=== DFS Tree from Node 0 ===", dfs(graph, 0)),
        ("=== Dijkstra Tree from Node 0 ===", dijkstra(graph, 0)),
        ("=== Prim's Minimum Spanning Tree ===", prim(graph)),
        ("=== Kruskal's Minimum Spanning Tree ===", kruskal(graph)),
    ]
    for title, tree in sections:
        print(title)
        print(tree.render())

    print("Demo finished successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())