"""Graph traversals, shortest paths and minimum spanning trees on adjacency matrices."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from operator import attrgetter

Matrix = Sequence[Sequence[float]]


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between two vertices."""

    src: int
    dest: int
    weight: float


def _vertex_count(matrix: Matrix) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return size


def _check_vertex(vertex: int, size: int) -> None:
    if not 0 <= vertex < size:
        raise ValueError(f"vertex {vertex} is out of range for {size} vertices")


def _walk(adjacency: Matrix, start: int, visited: set[int], lifo: bool) -> Iterator[int]:
    """Visit every vertex reachable from start, marking vertices when they are scheduled."""
    pending = deque([start])
    visited.add(start)
    take = pending.pop if lifo else pending.popleft
    while pending:
        current = take()
        yield current
        for neighbour, flag in enumerate(adjacency[current]):
            if flag == 1 and neighbour not in visited:
                visited.add(neighbour)
                pending.append(neighbour)


def _traverse(adjacency: Matrix, start: int, lifo: bool, whole_graph: bool) -> list[int]:
    size = _vertex_count(adjacency)
    _check_vertex(start, size)
    visited: set[int] = set()
    order = list(_walk(adjacency, start, visited, lifo))
    if whole_graph:
        for vertex in range(size):
            if vertex not in visited:
                order.extend(_walk(adjacency, vertex, visited, lifo))
    return order


def breadth_first(adjacency: Matrix, start: int) -> list[int]:
    """Return the breadth-first order of the vertices reachable from start.

    An edge from u to v exists where adjacency[u][v] == 1.
    """
    return _traverse(adjacency, start, lifo=False, whole_graph=False)


def breadth_first_all(adjacency: Matrix, start: int) -> list[int]:
    """Breadth-first order from start, then from each unvisited vertex in index order."""
    return _traverse(adjacency, start, lifo=False, whole_graph=True)


def depth_first(adjacency: Matrix, start: int) -> list[int]:
    """Return the stack-based depth-first order of the vertices reachable from start.

    Neighbours are pushed in index order, so the highest-numbered one is visited first.
    """
    return _traverse(adjacency, start, lifo=True, whole_graph=False)


def depth_first_all(adjacency: Matrix, start: int) -> list[int]:
    """Depth-first order from start, then from each unvisited vertex in index order."""
    return _traverse(adjacency, start, lifo=True, whole_graph=True)


def dijkstra(graph: Matrix, source: int) -> list[float]:
    """Return shortest distances from source; a non-zero entry is an edge weight.

    Unreachable vertices get math.inf.
    """
    size = _vertex_count(graph)
    _check_vertex(source, size)
    dist: list[float] = [math.inf] * size
    dist[source] = 0
    pending = list(range(size))
    for _ in range(size - 1):
        # Ties go to the highest-numbered vertex.
        u = min(reversed(pending), key=dist.__getitem__)
        pending.remove(u)
        if dist[u] == math.inf:
            continue
        for v in pending:
            weight = graph[u][v]
            if weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def kruskal_mst(vertex_count: int, edges: Iterable[Edge | tuple[int, int, float]]) -> list[Edge]:
    """Return the edges of a minimum spanning forest, in the order they were chosen."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    candidates = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    for edge in candidates:
        _check_vertex(edge.src, vertex_count)
        _check_vertex(edge.dest, vertex_count)

    parent = list(range(vertex_count))
    rank = [0] * vertex_count

    def find(vertex: int) -> int:
        root = vertex
        while parent[root] != root:
            root = parent[root]
        while parent[vertex] != root:
            parent[vertex], vertex = root, parent[vertex]
        return root

    chosen: list[Edge] = []
    for edge in sorted(candidates, key=attrgetter("weight")):
        if len(chosen) >= vertex_count - 1:
            break
        x, y = find(edge.src), find(edge.dest)
        if x == y:
            continue
        chosen.append(edge)
        if rank[x] < rank[y]:
            parent[x] = y
        elif rank[x] > rank[y]:
            parent[y] = x
        else:
            parent[y] = x
            rank[x] += 1
    return chosen


def prim_mst(graph: Matrix) -> list[Edge]:
    """Return the minimum spanning tree grown from vertex 0 as (parent, child, weight) edges.

    Edges are listed by child vertex, 1 to n-1. Raises ValueError if the graph is not connected.
    """
    size = _vertex_count(graph)
    if size == 0:
        return []
    key: list[float] = [math.inf] * size
    parent: list[int | None] = [None] * size
    in_tree = [False] * size
    key[0] = 0
    for _ in range(size - 1):
        u = min((v for v in range(size) if not in_tree[v]), key=key.__getitem__)
        if key[u] == math.inf:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v, weight in enumerate(graph[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    tree = []
    for child in range(1, size):
        owner = parent[child]
        if owner is None:
            raise ValueError("graph is not connected")
        tree.append(Edge(owner, child, graph[child][owner]))
    return tree