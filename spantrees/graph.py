"""Undirected weighted graph stored as adjacency lists."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """One adjacency entry: the neighbouring vertex and the edge weight."""

    dest: int
    weight: int = 1


class Graph:
    """An undirected graph over the vertices ``0 .. vertices - 1``.

    Each vertex keeps its neighbours newest first, so the most recently
    added edge is the first one reported by :meth:`neighbors`.
    """

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must not be negative, got {vertices}")
        self._adjacency: list[list[Edge]] = [[] for _ in range(vertices)]

    def _contains(self, vertex: int) -> bool:
        return 0 <= vertex < len(self._adjacency)

    @property
    def num_vertices(self) -> int:
        """The number of vertices in the graph."""
        return len(self._adjacency)

    def add_edge(self, source: int, dest: int, weight: int = 1) -> None:
        """Add an undirected edge; edges touching unknown vertices are ignored."""
        if not (self._contains(source) and self._contains(dest)):
            return
        self._adjacency[source].insert(0, Edge(dest, weight))
        self._adjacency[dest].insert(0, Edge(source, weight))

    def remove_edge(self, source: int, dest: int) -> None:
        """Remove the first entry for ``dest`` from the adjacency of ``source``.

        Only the entry on the ``source`` side is removed. A missing edge or an
        unknown vertex leaves the graph unchanged.
        """
        if not (self._contains(source) and self._contains(dest)):
            return
        edges = self._adjacency[source]
        for position, edge in enumerate(edges):
            if edge.dest == dest:
                del edges[position]
                return

    def neighbors(self, vertex: int) -> tuple[Edge, ...]:
        """The edges leaving ``vertex``, newest first; empty for unknown vertices."""
        if not self._contains(vertex):
            return ()
        return tuple(self._adjacency[vertex])

    def render(self) -> str:
        """A text listing with one ``Node i: ...`` line per vertex."""
        return "".join(
            f"Node {vertex}: " + "".join(f"{edge.dest} " for edge in edges) + "\n"
            for vertex, edges in enumerate(self._adjacency)
        )