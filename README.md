# spantrees

A small library for weighted, undirected graphs and the trees that
traversal and spanning-tree algorithms build from them.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Graphs

`spantrees.graph.Graph(vertices)` holds the vertices `0 .. vertices - 1`
(a negative count raises `ValueError`).

- `add_edge(source, dest, weight=1)` adds the edge in both directions.
  An edge with an endpoint outside the graph is silently ignored.
- `remove_edge(source, dest)` removes the first entry for `dest` from the
  adjacency list of `source` only; the entry on the `dest` side stays.
  A missing edge or an unknown vertex leaves the graph unchanged.
- `neighbors(vertex)` returns a tuple of `Edge(dest, weight)` objects,
  newest first; it is empty for an unknown vertex.
- `num_vertices` is a property with the number of vertices.
- `render()` returns the adjacency lists as text, one `Node i: ...` line
  per vertex.

## Algorithms

Every function in `spantrees.algorithms` takes a `Graph` and returns a new
`Graph` with the same number of vertices holding only the chosen edges.
A `start` vertex outside the graph raises `ValueError`.

- `bfs(graph, start)`: breadth-first search tree from `start`.
- `dfs(graph, start)`: depth-first search tree from `start`.
- `dijkstra(graph, start)`: every edge that shortened a tentative distance
  during Dijkstra's algorithm from `start`. Distances start at
  `UNREACHABLE` (20000). A vertex whose distance improves more than once
  keeps every improving edge, so the result is not always a tree.
- `prim(graph)`: grows from vertex 0 in order of the cheapest frontier
  edge. When a vertex joins, it is linked to every vertex already joined
  that has an edge to it, so the result can hold more edges than a
  spanning tree.
- `kruskal(graph)`: a minimum spanning forest built with a union-find;
  self-loops are ignored.

```python
from spantrees.graph import Graph
from spantrees.algorithms import bfs, kruskal

g = Graph(6)
g.add_edge(0, 1, 4)
g.add_edge(0, 2, 2)
g.add_edge(1, 2, 5)
g.add_edge(1, 3, 10)
g.add_edge(2, 4, 3)
g.add_edge(4, 3, 4)
g.add_edge(3, 5, 11)

print(kruskal(g).render())
print(bfs(g, 0).render())
```

## Supporting structures

- `spantrees.priority_queue.PriorityQueue(capacity=100)`: a bounded binary
  min-heap of `Node(vertex, priority)` entries. `push(node)` returns
  `False` and drops the node when the queue is full; `pop()` returns the
  node with the smallest priority and raises `IndexError` when empty;
  `len()` gives the number of queued nodes.
- `spantrees.union_find.UnionFind(n)`: disjoint sets with path compression
  and union by rank. `find(x)` returns a set's representative;
  `unite(x, y)` merges two sets and returns `False` if they were already
  joined.

## Demo

```
spantrees-demo [--seed N]
```

Builds a five-vertex graph with seven random edges weighted 1 to 10,
prints it with its vertex count, then prints its BFS, DFS, Dijkstra, Prim
and Kruskal results. `--seed` makes the random graph repeatable.

## What it does not do

Graphs live in memory only: there is no reading or writing of graph
files, and the demo command cannot be given a graph of your own.