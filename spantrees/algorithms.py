"""Search trees and spanning trees built from a :class:`Graph`."""

from __future__ import annotations

from collections import deque

from .graph import Graph
from .priority_queue import Node, PriorityQueue
from .union_find import UnionFind

UNREACHABLE = 20000
"""Initial distance assigned to every vertex by :func:`dijkstra`."""


def _check_start(graph: Graph, start: int) -> None:
    if not 0 <= start < graph.num_vertices:
        raise ValueError(
            f"start vertex {start} is outside 0..{graph.num_vertices - 1}"
        )


def bfs(graph: Graph, start: int) -> Graph:
    """Return the breadth-first search tree of ``graph`` rooted at ``start``."""
    _check_start(graph, start)
    tree = Graph(graph.num_vertices)
    visited = [False] * graph.num_vertices
    visited[start] = True
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for edge in graph.neighbors(current):
            if not visited[edge.dest]:
                visited[edge.dest] = True
                tree.add_edge(current, edge.dest, edge.weight)
                queue.append(edge.dest)
    return tree


def dfs(graph: Graph, start: int) -> Graph:
    """Return the depth-first search tree of ``graph`` rooted at ``start``."""
    _check_start(graph, start)
    tree = Graph(graph.num_vertices)
    visited = [False] * graph.num_vertices
    visited[start] = True
    stack = [(start, iter(graph.neighbors(start)))]
    while stack:
        vertex, pending = stack[-1]
        for edge in pending:
            if not visited[edge.dest]:
                visited[edge.dest] = True
                tree.add_edge(vertex, edge.dest, edge.weight)
                stack.append((edge.dest, iter(graph.neighbors(edge.dest))))
                break
        else:
            stack.pop()
    return tree


def dijkstra(graph: Graph, start: int) -> Graph:
    """Return the graph of every relaxing edge found by Dijkstra from ``start``.

    An edge is added each time it shortens a tentative distance, so a vertex
    whose distance improves more than once keeps every improving edge.
    """
    _check_start(graph, start)
    n = graph.num_vertices
    tree = Graph(n)
    dist = [UNREACHABLE] * n
    visited = [False] * n
    dist[start] = 0
    pq = PriorityQueue(n)
    pq.push(Node(start, 0))
    while pq:
        u = pq.pop().vertex
        if visited[u]:
            continue
        visited[u] = True
        for edge in graph.neighbors(u):
            v, w = edge.dest, edge.weight
            if not visited[v] and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                pq.push(Node(v, dist[v]))
                tree.add_edge(u, v, w)
    return tree


def prim(graph: Graph) -> Graph:
    """Grow a spanning tree from vertex 0 in order of cheapest frontier edge.

    When a vertex joins, it is linked to every already joined vertex that has
    an edge to it, using the first such edge in that vertex's list.
    """
    n = graph.num_vertices
    tree = Graph(n)
    if n == 0:
        return tree
    visited = [False] * n
    visited[0] = True
    pq = PriorityQueue(n)
    for edge in graph.neighbors(0):
        pq.push(Node(edge.dest, edge.weight))
    while pq:
        v = pq.pop().vertex
        if visited[v]:
            continue
        visited[v] = True
        for u in (u for u in range(n) if visited[u]):
            link = next((e for e in graph.neighbors(u) if e.dest == v), None)
            if link is not None:
                tree.add_edge(u, v, link.weight)
        for edge in graph.neighbors(v):
            if not visited[edge.dest]:
                pq.push(Node(edge.dest, edge.weight))
    return tree


def kruskal(graph: Graph) -> Graph:
    """Return a minimum spanning forest of ``graph``; self-loops are ignored."""
    n = graph.num_vertices
    tree = Graph(n)
    edges = [
        (u, edge.dest, edge.weight)
        for u in range(n)
        for edge in graph.neighbors(u)
        if u < edge.dest
    ]
    edges.sort(key=lambda item: item[2])
    components = UnionFind(n)
    for u, v, w in edges:
        if components.unite(u, v):
            tree.add_edge(u, v, w)
    return tree