"""Graph algorithms: breadth-first search, Prim's tree and Tarjan's components."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Hashable, Iterable, Sequence
from typing import TypeVar

N = TypeVar("N", bound=Hashable)


class Graph:
    """Directed graph on vertices ``0 .. vertex_count - 1`` with adjacency lists."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self._adjacent: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, source: int, target: int) -> None:
        """Add an edge from ``source`` to ``target``."""
        self._check(source)
        self._check(target)
        self._adjacent[source].append(target)

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacent[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order


def _check_square(matrix: Sequence[Sequence[int]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def reachable_bfs(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Vertices reachable from ``start`` in an adjacency matrix, in breadth-first order.

    A non-zero ``matrix[i][j]`` is an edge from i to j.
    """
    size = _check_square(matrix)
    if not 0 <= start < size:
        raise IndexError(f"vertex {start} out of range")
    visited = {start}
    order: list[int] = []
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour, weight in enumerate(matrix[vertex]):
            if weight and neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def prim_mst(weights: Sequence[Sequence[int]]) -> list[tuple[int, int, int]]:
    """Minimum spanning tree of a weighted adjacency matrix, grown from vertex 0.

    Zero means no edge.  Returns ``(parent, vertex, weight)`` for every vertex
    but the root, in vertex order.  A disconnected graph raises ValueError.
    """
    size = _check_square(weights)
    if size == 0:
        return []
    key = [math.inf] * size
    parent = [-1] * size
    in_tree = [False] * size
    key[0] = 0
    for _ in range(size):
        u = min((v for v in range(size) if not in_tree[v]), key=lambda v: key[v])
        if key[u] == math.inf:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v, weight in enumerate(weights[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    return [(parent[v], v, weights[v][parent[v]]) for v in range(1, size)]


def strongly_connected_components(
    nodes: Iterable[N], edges: Iterable[tuple[N, N]]
) -> list[list[N]]:
    """Strongly connected components by Tarjan's algorithm.

    Components come in the order they are completed; each lists its nodes in
    the order they were first reached.  Nodes must be unique, and an edge
    naming an unknown node raises ValueError.
    """
    order = list(nodes)
    adjacent: dict[N, list[N]] = {}
    for node in order:
        if node in adjacent:
            raise ValueError(f"duplicate node {node!r}")
        adjacent[node] = []
    for source, target in edges:
        if source not in adjacent or target not in adjacent:
            raise ValueError(f"edge ({source!r}, {target!r}) names an unknown node")
        adjacent[source].append(target)

    index_of: dict[N, int] = {}
    lowlink: dict[N, int] = {}
    stack: list[N] = []
    on_stack: set[N] = set()
    components: list[list[N]] = []

    def connect(v: N) -> None:
        index_of[v] = lowlink[v] = len(index_of)
        stack.append(v)
        on_stack.add(v)
        for w in adjacent[v]:
            if w not in index_of:
                connect(w)
                lowlink[v] = min(lowlink[v], lowlink[w])
            elif w in on_stack:
                lowlink[v] = min(lowlink[v], index_of[w])
        if lowlink[v] == index_of[v]:
            component: list[N] = []
            while True:
                w = stack.pop()
                on_stack.discard(w)
                component.append(w)
                if w == v:
                    break
            component.reverse()
            components.append(component)

    for node in order:
        if node not in index_of:
            connect(node)
    return components