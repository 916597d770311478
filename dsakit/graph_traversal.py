"""Graph construction, traversal, cycle detection and topological sorting."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

Adjacency = Sequence[Sequence[int]]

_NEW, _ACTIVE, _DONE = 0, 1, 2


def build_undirected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Return adjacency lists for ``n`` nodes joined by undirected ``edges``."""
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


def build_directed(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Return adjacency lists for ``n`` nodes joined by directed ``edges``."""
    adj: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
    return adj


def _walk(adj: Adjacency, visited: list[bool], start: int) -> Iterator[tuple[int, bool]]:
    """Yield ``(node, entering)`` events of a depth-first walk from ``start``."""
    visited[start] = True
    yield start, True
    stack = [(start, iter(adj[start]))]
    while stack:
        u, neighbours = stack[-1]
        for v in neighbours:
            if not visited[v]:
                visited[v] = True
                yield v, True
                stack.append((v, iter(adj[v])))
                break
        else:
            stack.pop()
            yield u, False


def _walk_all(adj: Adjacency) -> Iterator[tuple[int, bool]]:
    visited = [False] * len(adj)
    for start in range(len(adj)):
        if not visited[start]:
            yield from _walk(adj, visited, start)


def dfs_recursive(adj: Adjacency) -> list[int]:
    """Return the depth-first preorder of every node, taking neighbours in list order."""
    return [node for node, entering in _walk_all(adj) if entering]


def dfs_iterative(adj: Adjacency) -> list[int]:
    """Return a stack-based depth-first order that marks nodes when pushed."""
    visited = [False] * len(adj)
    order: list[int] = []
    for start in range(len(adj)):
        if visited[start]:
            continue
        visited[start] = True
        stack = [start]
        while stack:
            u = stack.pop()
            order.append(u)
            for v in adj[u]:
                if not visited[v]:
                    visited[v] = True
                    stack.append(v)
    return order


def bfs(adj: Adjacency) -> list[int]:
    """Return the breadth-first order of every node."""
    visited = [False] * len(adj)
    order: list[int] = []
    for start in range(len(adj)):
        if visited[start]:
            continue
        visited[start] = True
        queue = deque([start])
        while queue:
            u = queue.popleft()
            order.append(u)
            for v in adj[u]:
                if not visited[v]:
                    visited[v] = True
                    queue.append(v)
    return order


def has_cycle_undirected_dfs(adj: Adjacency) -> bool:
    """Return True if the undirected graph has a cycle (depth-first search)."""
    visited = [False] * len(adj)
    for start in range(len(adj)):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, -1, iter(adj[start]))]
        while stack:
            u, parent, neighbours = stack[-1]
            for v in neighbours:
                if not visited[v]:
                    visited[v] = True
                    stack.append((v, u, iter(adj[v])))
                    break
                if v != parent:
                    return True
            else:
                stack.pop()
    return False


def has_cycle_undirected_bfs(adj: Adjacency) -> bool:
    """Return True if the undirected graph has a cycle (breadth-first search)."""
    visited = [False] * len(adj)
    for start in range(len(adj)):
        if visited[start]:
            continue
        visited[start] = True
        queue = deque([(start, -1)])
        while queue:
            u, parent = queue.popleft()
            for v in adj[u]:
                if not visited[v]:
                    visited[v] = True
                    queue.append((v, u))
                elif v != parent:
                    return True
    return False


def has_cycle_directed_dfs(adj: Adjacency) -> bool:
    """Return True if the directed graph has a cycle (back edge on the DFS path)."""
    state = [_NEW] * len(adj)
    for start in range(len(adj)):
        if state[start] != _NEW:
            continue
        state[start] = _ACTIVE
        stack = [(start, iter(adj[start]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if state[v] == _ACTIVE:
                    return True
                if state[v] == _NEW:
                    state[v] = _ACTIVE
                    stack.append((v, iter(adj[v])))
                    break
            else:
                state[u] = _DONE
                stack.pop()
    return False


def topo_sort_dfs(adj: Adjacency) -> list[int]:
    """Return nodes in reverse depth-first finishing order.

    For a directed acyclic graph this is a topological order.
    """
    finished = [node for node, entering in _walk_all(adj) if not entering]
    finished.reverse()
    return finished


def topo_sort_kahn(adj: Adjacency) -> list[int]:
    """Return a topological order by Kahn's algorithm.

    Nodes on or behind a cycle are left out, so the result is shorter than
    the graph exactly when the graph has a cycle.
    """
    indegree = [0] * len(adj)
    for neighbours in adj:
        for v in neighbours:
            indegree[v] += 1
    queue = deque(u for u, d in enumerate(indegree) if d == 0)
    order: list[int] = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adj[u]:
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    return order


def has_cycle_directed_bfs(adj: Adjacency) -> bool:
    """Return True if the directed graph has a cycle (Kahn's algorithm)."""
    return len(topo_sort_kahn(adj)) != len(adj)