"""Spanning trees, bridges, articulation points and strongly connected components."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator, Sequence

from dsakit.dsu import DisjointSet
from dsakit.graph_traversal import topo_sort_dfs


def prim_parents(adj: Sequence[Sequence[tuple[int, int]]]) -> list[int]:
    """Return the parent of each node in a minimum spanning tree grown from node 0.

    ``adj[u]`` holds ``(v, weight)`` pairs of an undirected graph. The root and
    any node it cannot reach have parent -1.
    """
    n = len(adj)
    parent = [-1] * n
    if n == 0:
        return parent
    visited = [False] * n
    heap = [(0, 0, -1)]
    while heap:
        _, u, via = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        parent[u] = via
        for v, weight in adj[u]:
            if not visited[v]:
                heapq.heappush(heap, (weight, v, u))
    return parent


def kruskal(n: int, edges: Iterable[tuple[int, int, int]]) -> list[tuple[int, int]]:
    """Return the ``(u, v)`` edges of a minimum spanning tree, in the order chosen.

    Raises ValueError if the graph is not connected.
    """
    dsu = DisjointSet(n)
    tree = []
    for u, v, _ in sorted(edges, key=lambda edge: edge[2]):
        if dsu.union(u, v):
            tree.append((u, v))
    if n and len(tree) != n - 1:
        raise ValueError("graph is not connected")
    return tree


def _undirected(n: int, connections: Iterable[Sequence[int]]) -> list[list[int]]:
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in connections:
        adj[u].append(v)
        adj[v].append(u)
    return adj


def _low_links(
    n: int, adj: list[list[int]]
) -> Iterator[tuple[int, int, list[int], list[int], list[int]]]:
    """Yield ``(u, parent, tin, low, dfs_parent)`` as each DFS subtree finishes.

    ``tin`` and ``low`` are kept current; ``dfs_parent`` holds, for every node
    discovered so far, its parent in the DFS forest, or -1 for a root.
    """
    tin = [-1] * n
    low = [0] * n
    dfs_parent = [-1] * n
    timer = 0
    for start in range(n):
        if tin[start] != -1:
            continue
        tin[start] = low[start] = timer
        timer += 1
        stack = [(start, -1, iter(adj[start]))]
        while stack:
            u, parent, neighbours = stack[-1]
            for v in neighbours:
                if v == parent:
                    continue
                if tin[v] == -1:
                    tin[v] = low[v] = timer
                    timer += 1
                    dfs_parent[v] = u
                    stack.append((v, u, iter(adj[v])))
                    break
                low[u] = min(low[u], tin[v])
            else:
                stack.pop()
                if parent != -1:
                    low[parent] = min(low[parent], low[u])
                yield u, parent, tin, low, dfs_parent


def bridges(n: int, connections: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Return the edges whose removal disconnects the graph (Tarjan)."""
    adj = _undirected(n, connections)
    return [
        (parent, u)
        for u, parent, tin, low, _ in _low_links(n, adj)
        if parent != -1 and low[u] > tin[parent]
    ]


def articulation_points(n: int, connections: Iterable[Sequence[int]]) -> list[int]:
    """Return, in ascending order, the nodes whose removal disconnects the graph."""
    adj = _undirected(n, connections)
    children = [0] * n
    points: set[int] = set()
    for u, parent, tin, low, dfs_parent in _low_links(n, adj):
        if parent == -1:
            if children[u] > 1:
                points.add(u)
            continue
        children[parent] += 1
        if dfs_parent[parent] != -1 and low[u] >= tin[parent]:
            points.add(parent)
    return sorted(points)


def count_scc(adj: Sequence[Sequence[int]]) -> int:
    """Return the number of strongly connected components (Kosaraju)."""
    n = len(adj)
    reverse: list[list[int]] = [[] for _ in range(n)]
    for u, neighbours in enumerate(adj):
        for v in neighbours:
            reverse[v].append(u)
    visited = [False] * n
    components = 0
    for start in topo_sort_dfs(adj):
        if visited[start]:
            continue
        components += 1
        visited[start] = True
        stack = [start]
        while stack:
            for v in reverse[stack.pop()]:
                if not visited[v]:
                    visited[v] = True
                    stack.append(v)
    return components