"""Disjoint-set union with path compression."""

from __future__ import annotations


class DisjointSet:
    """Union-find over the elements ``0`` to ``n`` inclusive.

    Both 0-based and 1-based labels fit; ``len()`` starts at ``n`` and drops
    by one with every successful merge.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)
        self._size = [1] * (n + 1)
        self._count = n

    def find(self, u: int) -> int:
        """Return the representative of ``u``'s set."""
        if not 0 <= u < len(self._parent):
            raise IndexError(f"element {u} out of range")
        root = u
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[u] != root:
            self._parent[u], u = root, self._parent[u]
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v`` by size; return False if already joined."""
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        if self._size[u] < self._size[v]:
            u, v = v, u
        self._parent[v] = u
        self._size[u] += self._size[v]
        self._count -= 1
        return True

    def union_by_rank(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v`` by rank; return False if already joined."""
        u, v = self.find(u), self.find(v)
        if u == v:
            return False
        if self._rank[u] < self._rank[v]:
            u, v = v, u
        self._parent[v] = u
        if self._rank[u] == self._rank[v]:
            self._rank[u] += 1
        self._count -= 1
        return True

    def __len__(self) -> int:
        return self._count