"""Graph representations, traversals, shortest paths, colouring and ordering.

Vertices are the integers ``0 .. vertex_count - 1``. An adjacency list is a
list whose entry ``u`` holds the neighbours of ``u`` in insertion order; in a
weighted adjacency list each neighbour is a ``(vertex, weight)`` pair.
"""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Iterator, Sequence

__all__ = [
    "CycleError",
    "build_adjacency",
    "build_weighted_adjacency",
    "format_adjacency",
    "bfs",
    "bfs_all",
    "dfs",
    "dfs_all",
    "shortest_path",
    "dijkstra",
    "greedy_chromatic_number",
    "traversal_chromatic_number",
    "topological_sort_dfs",
    "topological_sort_kahn",
]

Adjacency = Sequence[Sequence[int]]
WeightedAdjacency = Sequence[Sequence[tuple[int, int]]]


class CycleError(ValueError):
    """Raised when a topological order is requested for a cyclic graph."""


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise IndexError(f"vertex {vertex} out of range for {vertex_count} vertices")


def build_adjacency(
    vertex_count: int, edges: Iterable[tuple[int, int]], directed: bool = False
) -> list[list[int]]:
    """Build an adjacency list from ``(u, v)`` edges.

    An undirected edge is recorded in both directions.
    """
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative, got {vertex_count}")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def build_weighted_adjacency(
    vertex_count: int, edges: Iterable[tuple[int, int, int]], directed: bool = False
) -> list[list[tuple[int, int]]]:
    """Build a weighted adjacency list from ``(u, v, weight)`` edges."""
    if vertex_count < 0:
        raise ValueError(f"vertex count must not be negative, got {vertex_count}")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]
    for u, v, weight in edges:
        _check_vertex(u, vertex_count)
        _check_vertex(v, vertex_count)
        adjacency[u].append((v, weight))
        if not directed:
            adjacency[v].append((u, weight))
    return adjacency


def _format_neighbour(entry: object) -> str:
    if isinstance(entry, tuple):
        vertex, weight = entry
        return f"({vertex}  {weight})"
    return str(entry)


def format_adjacency(adjacency: Sequence[Sequence[object]]) -> str:
    """Render one ``u -> neighbours`` line per vertex."""
    lines = []
    for vertex, neighbours in enumerate(adjacency):
        rendered = " ".join(_format_neighbour(entry) for entry in neighbours)
        lines.append(f"{vertex} -> {rendered}".rstrip())
    return "\n".join(lines)


def _bfs_from(adjacency: Adjacency, start: int, visited: list[bool]) -> Iterator[int]:
    queue = deque([start])
    visited[start] = True
    while queue:
        current = queue.popleft()
        yield current
        for neighbour in adjacency[current]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)


def _dfs_from(adjacency: Adjacency, start: int, visited: list[bool]) -> Iterator[int]:
    # Vertices are marked when pushed, so the last neighbour pushed is explored first.
    stack = [start]
    visited[start] = True
    while stack:
        current = stack.pop()
        yield current
        for neighbour in adjacency[current]:
            if not visited[neighbour]:
                visited[neighbour] = True
                stack.append(neighbour)


def bfs(adjacency: Adjacency, start: int) -> list[int]:
    """Breadth-first visiting order of the vertices reachable from ``start``."""
    _check_vertex(start, len(adjacency))
    return list(_bfs_from(adjacency, start, [False] * len(adjacency)))


def bfs_all(adjacency: Adjacency, vertex_count: int) -> list[int]:
    """Breadth-first order covering every component, seeding in vertex order."""
    visited = [False] * len(adjacency)
    order: list[int] = []
    for vertex in range(vertex_count):
        if not visited[vertex]:
            order.extend(_bfs_from(adjacency, vertex, visited))
    return order


def dfs(adjacency: Adjacency, start: int) -> list[int]:
    """Stack-based depth-first visiting order from ``start``."""
    _check_vertex(start, len(adjacency))
    return list(_dfs_from(adjacency, start, [False] * len(adjacency)))


def dfs_all(adjacency: Adjacency, vertex_count: int) -> list[int]:
    """Depth-first order covering every component, seeding in vertex order."""
    visited = [False] * len(adjacency)
    order: list[int] = []
    for vertex in range(vertex_count):
        if not visited[vertex]:
            order.extend(_dfs_from(adjacency, vertex, visited))
    return order


def shortest_path(adjacency: Adjacency, start: int, destination: int) -> list[int] | None:
    """Fewest-edges path from ``start`` to ``destination`` found by BFS.

    Returns the vertices along the path, both ends included, or None when
    ``destination`` cannot be reached.
    """
    _check_vertex(start, len(adjacency))
    _check_vertex(destination, len(adjacency))
    parent: list[int | None] = [None] * len(adjacency)
    visited = [False] * len(adjacency)
    visited[start] = True
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbour in adjacency[current]:
            if not visited[neighbour]:
                visited[neighbour] = True
                parent[neighbour] = current
                queue.append(neighbour)
    if not visited[destination]:
        return None
    path = [destination]
    while path[-1] != start:
        step = parent[path[-1]]
        assert step is not None
        path.append(step)
    path.reverse()
    return path


def dijkstra(adjacency: WeightedAdjacency, start: int) -> list[int | None]:
    """Smallest total weight from ``start`` to every vertex, None if unreachable."""
    _check_vertex(start, len(adjacency))
    distances: list[int | None] = [None] * len(adjacency)
    distances[start] = 0
    heap = [(0, start)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance != distances[node]:
            continue
        for neighbour, weight in adjacency[node]:
            candidate = distance + weight
            known = distances[neighbour]
            if known is None or candidate < known:
                distances[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distances


def greedy_chromatic_number(adjacency: Adjacency) -> int:
    """Colours used when each vertex in turn takes the smallest free colour."""
    colours: list[int | None] = [None] * len(adjacency)
    for vertex, neighbours in enumerate(adjacency):
        used = {colours[n] for n in neighbours if colours[n] is not None}
        colour = 1
        while colour in used:
            colour += 1
        colours[vertex] = colour
    return max((c for c in colours if c is not None), default=0)


def traversal_chromatic_number(vertex_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Colours used by a greedy colouring in depth-first order from vertex 0.

    Only vertices reachable from vertex 0 are coloured.
    """
    if vertex_count < 1:
        raise ValueError("graph must have at least one vertex")
    adjacency = build_adjacency(vertex_count, edges, directed=False)
    colours: list[int | None] = [None] * vertex_count
    colours[0] = 0
    count = 1
    pending: list[Iterator[int]] = [iter(adjacency[0])]
    while pending:
        for vertex in pending[-1]:
            if colours[vertex] is None:
                used = {colours[n] for n in adjacency[vertex] if colours[n] is not None}
                colour = 0
                while colour in used:
                    colour += 1
                colours[vertex] = colour
                if colour >= count:
                    count += 1
                pending.append(iter(adjacency[vertex]))
                break
        else:
            pending.pop()
    return count


def topological_sort_dfs(adjacency: Adjacency, vertex_count: int) -> list[int]:
    """Topological order as reversed depth-first finishing order.

    Seeds are taken in vertex order; the graph is assumed acyclic.
    """
    visited = [False] * len(adjacency)
    finished: list[int] = []
    for root in range(vertex_count):
        if visited[root]:
            continue
        visited[root] = True
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adjacency[root]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(adjacency[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(node)
    finished.reverse()
    return finished


def topological_sort_kahn(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Topological order of a directed graph by repeatedly removing sources.

    Raises CycleError when the graph contains a cycle.
    """
    adjacency = build_adjacency(vertex_count, edges, directed=True)
    indegree = [0] * vertex_count
    for neighbours in adjacency:
        for neighbour in neighbours:
            indegree[neighbour] += 1
    queue = deque(v for v in range(vertex_count) if indegree[v] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    if len(order) != vertex_count:
        raise CycleError("graph contains a cycle")
    return order