"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList

from dsakit.graph_traversal import topo_sort_dfs

INF = 1_000_000_000
"""Distance reported for nodes that cannot be reached."""

WeightedAdjacency = Sequence[Sequence[tuple[int, int]]]


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def shortest_path_unit(adj: Sequence[Sequence[int]], src: int) -> list[int]:
    """Return hop counts from ``src`` in a graph whose edges all weigh one."""
    dist = [INF] * len(adj)
    dist[src] = 0
    queue = deque([src])
    while queue:
        u = queue.popleft()
        for v in adj[u]:
            if dist[v] > dist[u] + 1:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


def shortest_path_dag(adj: WeightedAdjacency, src: int) -> list[int]:
    """Return distances from ``src`` in a weighted directed acyclic graph.

    ``adj[u]`` holds ``(v, weight)`` pairs; weights may be negative.
    """
    order = topo_sort_dfs([[v for v, _ in edges] for edges in adj])
    dist = [INF] * len(adj)
    dist[src] = 0
    for u in order:
        if dist[u] == INF:
            continue
        for v, weight in adj[u]:
            dist[v] = min(dist[v], dist[u] + weight)
    return dist


def _dijkstra(adj: WeightedAdjacency, src: int) -> tuple[list[int], list[int | None]]:
    dist = [INF] * len(adj)
    parent: list[int | None] = [None] * len(adj)
    dist[src] = 0
    heap = [(0, src)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, weight in adj[u]:
            if dist[v] > d + weight:
                dist[v] = d + weight
                parent[v] = u
                heapq.heappush(heap, (dist[v], v))
    return dist, parent


def dijkstra(adj: WeightedAdjacency, src: int) -> list[int]:
    """Return distances from ``src`` for non-negative weights, using a heap."""
    return _dijkstra(adj, src)[0]


def dijkstra_path(adj: WeightedAdjacency, src: int, dest: int) -> list[int]:
    """Return the nodes of a shortest path from ``src`` to ``dest``.

    Returns an empty list when ``dest`` cannot be reached.
    """
    dist, parent = _dijkstra(adj, src)
    if dist[dest] == INF:
        return []
    path = []
    node: int | None = dest
    while node is not None:
        path.append(node)
        node = parent[node]
    path.reverse()
    return path


def dijkstra_set(adj: WeightedAdjacency, src: int) -> list[int]:
    """Return distances from ``src`` using an ordered set as the frontier."""
    dist = [INF] * len(adj)
    dist[src] = 0
    frontier = SortedList([(0, src)])
    while frontier:
        d, u = frontier.pop(0)
        for v, weight in adj[u]:
            if dist[v] > d + weight:
                if dist[v] != INF:
                    frontier.discard((dist[v], v))
                dist[v] = d + weight
                frontier.add((dist[v], v))
    return dist


def bellman_ford(n: int, edges: Iterable[tuple[int, int, int]], src: int) -> list[int]:
    """Return distances from ``src`` over directed ``(u, v, weight)`` edges.

    Raises NegativeCycleError if a negative cycle is reachable from ``src``.
    """
    edge_list = list(edges)
    dist = [INF] * n
    dist[src] = 0
    for _ in range(n - 1):
        changed = False
        for u, v, weight in edge_list:
            if dist[u] != INF and dist[v] > dist[u] + weight:
                dist[v] = dist[u] + weight
                changed = True
        if not changed:
            break
    for u, v, weight in edge_list:
        if dist[u] != INF and dist[v] > dist[u] + weight:
            raise NegativeCycleError("negative cycle reachable from the source")
    return dist


def floyd_warshall(n: int, edges: Iterable[tuple[int, int, int]]) -> list[list[int]]:
    """Return the all-pairs distance matrix for undirected ``(u, v, weight)`` edges."""
    dist = [[INF] * n for _ in range(n)]
    for u in range(n):
        dist[u][u] = 0
    for u, v, weight in edges:
        dist[u][v] = min(dist[u][v], weight)
        dist[v][u] = min(dist[v][u], weight)
    for via in range(n):
        via_row = dist[via]
        for row in dist:
            to_via = row[via]
            if to_via == INF:
                continue
            for v, onward in enumerate(via_row):
                if onward != INF and to_via + onward < row[v]:
                    row[v] = to_via + onward
    return dist