import pytest

from cpkit.graph import bfs_order, dfs_order

EDGES = [(0, 1), (0, 2), (1, 3), (2, 4)]


def _graph(n, edges):
    adj = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


@pytest.mark.parametrize("walk", [dfs_order, bfs_order])
def test_visits_component_once(walk):
    order = walk(_graph(5, EDGES), 0)
    assert order[0] == 0
    assert sorted(order) == list(range(5))


def test_dfs_finishes_subtree_first():
    order = dfs_order(_graph(5, EDGES), 0)
    assert order.index(3) < order.index(2)
    assert order.index(1) < order.index(3)


def test_bfs_by_levels():
    order = bfs_order(_graph(5, EDGES), 0)
    assert set(order[1:3]) == {1, 2}
    assert set(order[3:]) == {3, 4}


def test_path_from_middle():
    graph = _graph(3, [(0, 1), (1, 2)])
    assert dfs_order(graph, 1) == [1, 0, 2]
    assert bfs_order(graph, 1) == [1, 0, 2]


@pytest.mark.parametrize("walk", [dfs_order, bfs_order])
def test_cycle_terminates(walk):
    graph = _graph(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
    assert sorted(walk(graph, 2)) == [0, 1, 2, 3]


@pytest.mark.parametrize("walk", [dfs_order, bfs_order])
def test_other_component_not_visited(walk):
    graph = _graph(4, [(0, 1), (2, 3)])
    assert sorted(walk(graph, 3)) == [2, 3]


def test_dfs_deep_path():
    n = 5000
    graph = _graph(n, [(i, i + 1) for i in range(n - 1)])
    assert dfs_order(graph, 0) == list(range(n))


@pytest.mark.parametrize("walk", [dfs_order, bfs_order])
def test_bad_start_raises(walk):
    with pytest.raises(IndexError):
        walk([[]], 2)