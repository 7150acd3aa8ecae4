import itertools

import pytest

from cpkit.lca import BinaryLiftingLCA, EulerTourLCA

EDGES = [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (4, 6), (4, 7), (7, 8)]
PARENT = {child: parent for parent, child in EDGES}


def _tree(n, edges):
    adj = [[] for _ in range(n)]
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    return adj


ADJ = _tree(9, EDGES)


def _ancestors(v):
    chain = [v]
    while v in PARENT:
        v = PARENT[v]
        chain.append(v)
    return chain


def test_self_and_root():
    for lca in (BinaryLiftingLCA(ADJ, 0), EulerTourLCA(ADJ, 0)):
        for v in range(9):
            assert lca.lca(v, v) == v
            assert lca.lca(0, v) == 0


def test_parent_child():
    for lca in (BinaryLiftingLCA(ADJ, 0), EulerTourLCA(ADJ, 0)):
        for parent, child in EDGES:
            assert lca.lca(parent, child) == parent
            assert lca.lca(child, parent) == parent


def test_siblings():
    assert BinaryLiftingLCA(ADJ, 0).lca(3, 4) == 1
    assert EulerTourLCA(ADJ, 0).lca(3, 4) == 1


def test_result_is_common_ancestor():
    for lca in (BinaryLiftingLCA(ADJ, 0), EulerTourLCA(ADJ, 0)):
        for u, v in itertools.combinations(range(9), 2):
            w = lca.lca(u, v)
            assert w in _ancestors(u)
            assert w in _ancestors(v)
            assert lca.lca(v, u) == w


def test_implementations_agree_on_other_root():
    a = BinaryLiftingLCA(ADJ, 4)
    b = EulerTourLCA(ADJ, 4)
    for u, v in itertools.product(range(9), repeat=2):
        assert a.lca(u, v) == b.lca(u, v)


def test_is_ancestor():
    lca = BinaryLiftingLCA(ADJ, 0)
    for v in range(9):
        for a in _ancestors(v):
            assert lca.is_ancestor(a, v)
    assert not lca.is_ancestor(3, 1)
    assert not lca.is_ancestor(3, 4)


def test_deep_path_no_recursion_limit():
    n = 5000
    adj = _tree(n, [(i, i + 1) for i in range(n - 1)])
    a = BinaryLiftingLCA(adj, 0)
    b = EulerTourLCA(adj, 0)
    assert a.lca(n - 1, n // 2) == n // 2
    assert b.lca(n - 1, n // 2) == n // 2


def test_unreached_node_raises():
    adj = _tree(4, [(0, 1), (2, 3)])
    binary = BinaryLiftingLCA(adj, 0)
    with pytest.raises(ValueError):
        binary.lca(0, 3)
    euler = EulerTourLCA(adj, 0)
    with pytest.raises(ValueError):
        euler.lca(0, 3)


def test_bad_root_raises():
    with pytest.raises(IndexError):
        BinaryLiftingLCA([[]], 5)
    with pytest.raises(IndexError):
        EulerTourLCA([[]], 5)