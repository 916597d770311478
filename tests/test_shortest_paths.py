import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.shortest_paths import (
    INF,
    NegativeCycleError,
    bellman_ford,
    dijkstra,
    dijkstra_path,
    dijkstra_set,
    floyd_warshall,
    shortest_path_dag,
    shortest_path_unit,
)


def _directed(n, edges):
    adj = [[] for _ in range(n)]
    for u, v, w in edges:
        adj[u].append((v, w))
    return adj


def _undirected(n, edges):
    adj = [[] for _ in range(n)]
    for u, v, w in edges:
        adj[u].append((v, w))
        adj[v].append((u, w))
    return adj


@st.composite
def weighted_graphs(draw, min_weight=0):
    n = draw(st.integers(1, 7))
    node = st.integers(0, n - 1)
    edges = draw(
        st.lists(st.tuples(node, node, st.integers(min_weight, 20)), max_size=20)
    )
    src = draw(node)
    return n, edges, src


@st.composite
def dags(draw):
    n = draw(st.integers(1, 7))
    node = st.integers(0, n - 1)
    pairs = draw(st.lists(st.tuples(node, node, st.integers(-10, 20)), max_size=20))
    edges = [(min(a, b), max(a, b), w) for a, b, w in pairs if a != b]
    src = draw(node)
    return n, edges, src


def test_dijkstra_worked_example():
    adj = _directed(3, [(0, 1, 4), (0, 2, 1), (2, 1, 2)])
    assert dijkstra(adj, 0) == [0, 3, 1]


@given(weighted_graphs())
def test_dijkstra_variants_agree_with_bellman_ford(graph):
    n, edges, src = graph
    adj = _directed(n, edges)
    expected = bellman_ford(n, edges, src)
    assert dijkstra(adj, src) == expected
    assert dijkstra_set(adj, src) == expected


@given(weighted_graphs())
def test_unit_weights_match_dijkstra(graph):
    n, edges, src = graph
    plain = [[] for _ in range(n)]
    for u, v, _ in edges:
        plain[u].append(v)
        plain[v].append(u)
    unit = _undirected(n, [(u, v, 1) for u, v, _ in edges])
    assert shortest_path_unit(plain, src) == dijkstra(unit, src)


@given(weighted_graphs())
def test_floyd_warshall_rows_match_dijkstra(graph):
    n, edges, _ = graph
    adj = _undirected(n, edges)
    matrix = floyd_warshall(n, edges)
    for src in range(n):
        assert matrix[src] == dijkstra(adj, src)


@given(weighted_graphs())
def test_floyd_warshall_is_symmetric_with_zero_diagonal(graph):
    n, edges, _ = graph
    matrix = floyd_warshall(n, edges)
    for u in range(n):
        assert matrix[u][u] == 0
        for v in range(n):
            assert matrix[u][v] == matrix[v][u]


@given(dags())
def test_dag_shortest_path_matches_bellman_ford(graph):
    n, edges, src = graph
    assert shortest_path_dag(_directed(n, edges), src) == bellman_ford(n, edges, src)


@given(weighted_graphs())
def test_dijkstra_path_cost_equals_distance(graph):
    n, edges, src = graph
    adj = _directed(n, edges)
    dist = dijkstra(adj, src)
    for dest in range(n):
        path = dijkstra_path(adj, src, dest)
        if dist[dest] == INF:
            assert path == []
            continue
        assert path[0] == src
        assert path[-1] == dest
        cost = sum(
            min(w for v, w in adj[a] if v == b) for a, b in zip(path, path[1:])
        )
        assert cost == dist[dest]


def test_unreachable_nodes_report_inf():
    adj = _directed(3, [(0, 1, 5)])
    assert dijkstra(adj, 0)[2] == INF
    assert dijkstra_set(adj, 0)[2] == INF
    assert shortest_path_dag(adj, 0)[2] == INF
    assert bellman_ford(3, [(0, 1, 5)], 0)[2] == INF
    assert dijkstra_path(adj, 0, 2) == []


def test_path_to_source_is_source_alone():
    adj = _directed(2, [(0, 1, 3)])
    assert dijkstra_path(adj, 1, 1) == [1]


def test_bellman_ford_negative_cycle_raises():
    with pytest.raises(NegativeCycleError):
        bellman_ford(3, [(0, 1, 1), (1, 2, -3), (2, 1, 1)], 0)


def test_unreachable_negative_cycle_is_ignored():
    edges = [(0, 1, 2), (2, 3, -5), (3, 2, 1)]
    dist = bellman_ford(4, edges, 0)
    assert dist[1] == 2
    assert dist[2] == INF
    assert dist[3] == INF