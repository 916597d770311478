from graphlib import CycleError, TopologicalSorter

import pytest
from hypothesis import given, strategies as st

from dsakit.graph_traversal import (
    bfs,
    build_directed,
    build_undirected,
    dfs_iterative,
    dfs_recursive,
    has_cycle_directed_bfs,
    has_cycle_directed_dfs,
    has_cycle_undirected_bfs,
    has_cycle_undirected_dfs,
    topo_sort_dfs,
    topo_sort_kahn,
)


@st.composite
def raw_graphs(draw):
    n = draw(st.integers(1, 8))
    pairs = draw(
        st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1)), max_size=12)
    )
    return n, pairs


@st.composite
def simple_undirected(draw):
    n, pairs = draw(raw_graphs())
    edges = list(dict.fromkeys(tuple(sorted(p)) for p in pairs if p[0] != p[1]))
    return n, edges


@st.composite
def dags(draw):
    n, pairs = draw(raw_graphs())
    return n, [(u, v) for u, v in pairs if u < v]


def _union_find_summary(n, edges):
    parent = list(range(n))

    def find(x):
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    cyclic = False
    for u, v in edges:
        ru, rv = find(u), find(v)
        if ru == rv:
            cyclic = True
        else:
            parent[ru] = rv
    return len({find(x) for x in range(n)}), cyclic


def _directed_is_cyclic(n, edges):
    graph = {v: set() for v in range(n)}
    for u, v in edges:
        graph[v].add(u)
    try:
        tuple(TopologicalSorter(graph).static_order())
    except CycleError:
        return True
    return False


SAMPLE = build_undirected(4, [(0, 1), (0, 2), (1, 3)])


def test_sample_traversal_orders():
    assert bfs(SAMPLE) == [0, 1, 2, 3]
    assert dfs_recursive(SAMPLE) == [0, 1, 3, 2]
    assert dfs_iterative(SAMPLE) == [0, 2, 1, 3]


@given(raw_graphs())
def test_build_undirected_is_symmetric(graph):
    n, edges = graph
    adj = build_undirected(n, edges)
    assert len(adj) == n
    assert sum(map(len, adj)) == 2 * len(edges)
    for u, v in edges:
        assert v in adj[u] and u in adj[v]


@given(raw_graphs())
def test_build_directed_keeps_direction(graph):
    n, edges = graph
    adj = build_directed(n, edges)
    assert sum(map(len, adj)) == len(edges)
    for u, v in edges:
        assert v in adj[u]


def test_build_rejects_unknown_node():
    with pytest.raises(IndexError):
        build_undirected(2, [(0, 5)])


@pytest.mark.parametrize("traverse", [dfs_recursive, dfs_iterative, bfs])
@given(simple_undirected())
def test_traversals_visit_each_node_from_a_discovered_neighbour(traverse, graph):
    n, edges = graph
    adj = build_undirected(n, edges)
    order = traverse(adj)
    assert sorted(order) == list(range(n))
    seen = set()
    roots = 0
    for u in order:
        if not any(v in seen for v in adj[u]):
            roots += 1
        seen.add(u)
    components, _ = _union_find_summary(n, edges)
    assert roots == components


@given(simple_undirected())
def test_undirected_cycle_detection_matches_union_find(graph):
    n, edges = graph
    adj = build_undirected(n, edges)
    _, expected = _union_find_summary(n, edges)
    assert has_cycle_undirected_dfs(adj) == expected
    assert has_cycle_undirected_bfs(adj) == expected


def test_undirected_triangle_and_path():
    triangle = build_undirected(3, [(0, 1), (1, 2), (2, 0)])
    path = build_undirected(3, [(0, 1), (1, 2)])
    assert has_cycle_undirected_dfs(triangle) and has_cycle_undirected_bfs(triangle)
    assert not has_cycle_undirected_dfs(path) and not has_cycle_undirected_bfs(path)


@given(raw_graphs())
def test_directed_cycle_detection_matches_graphlib(graph):
    n, edges = graph
    adj = build_directed(n, edges)
    expected = _directed_is_cyclic(n, edges)
    assert has_cycle_directed_dfs(adj) == expected
    assert has_cycle_directed_bfs(adj) == expected
    assert (len(topo_sort_kahn(adj)) == n) == (not expected)


def test_directed_self_loop_is_a_cycle():
    adj = build_directed(2, [(0, 1), (1, 1)])
    assert has_cycle_directed_dfs(adj)
    assert has_cycle_directed_bfs(adj)


@pytest.mark.parametrize("sort", [topo_sort_dfs, topo_sort_kahn])
@given(dags())
def test_topological_orders_respect_edges(sort, graph):
    n, edges = graph
    order = sort(build_directed(n, edges))
    assert sorted(order) == list(range(n))
    position = {node: i for i, node in enumerate(order)}
    for u, v in edges:
        assert position[u] < position[v]


@given(raw_graphs())
def test_topo_sort_dfs_is_a_permutation_even_with_cycles(graph):
    n, edges = graph
    assert sorted(topo_sort_dfs(build_directed(n, edges))) == list(range(n))