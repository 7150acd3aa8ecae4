"""Lowest common ancestor on rooted trees: binary lifting and Euler tour + segment tree."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

Adjacency = Sequence[Iterable[int]]


class BinaryLiftingLCA:
    """LCA queries by jump pointers of powers of two, with entry/exit times."""

    def __init__(self, adj: Adjacency, root: int = 0) -> None:
        n = len(adj)
        if not 0 <= root < n:
            raise IndexError(f"root {root} out of range")
        self._levels = max(1, n.bit_length())
        self._tin = [0] * n
        self._tout = [0] * n
        self._up = [[root] * (self._levels + 1) for _ in range(n)]
        self._reached = [False] * n

        timer = 0

        def enter(v: int, parent: int) -> None:
            nonlocal timer
            timer += 1
            self._tin[v] = timer
            self._reached[v] = True
            up = self._up[v]
            up[0] = parent
            for i in range(1, self._levels + 1):
                up[i] = self._up[up[i - 1]][i - 1]

        enter(root, root)
        stack = [(root, iter(adj[root]))]
        while stack:
            v, children = stack[-1]
            for u in children:
                if not self._reached[u]:
                    enter(u, v)
                    stack.append((u, iter(adj[u])))
                    break
            else:
                timer += 1
                self._tout[v] = timer
                stack.pop()

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._reached) or not self._reached[v]:
            raise ValueError(f"node {v} is not in the rooted tree")

    def is_ancestor(self, u: int, v: int) -> bool:
        """Return whether ``u`` is an ancestor of ``v`` (a node is its own ancestor)."""
        self._check(u)
        self._check(v)
        return self._tin[u] <= self._tin[v] and self._tout[u] >= self._tout[v]

    def lca(self, u: int, v: int) -> int:
        """Return the lowest common ancestor of ``u`` and ``v``."""
        if self.is_ancestor(u, v):
            return u
        if self.is_ancestor(v, u):
            return v
        for i in range(self._levels, -1, -1):
            jump = self._up[u][i]
            if not self.is_ancestor(jump, v):
                u = jump
        return self._up[u][0]


class EulerTourLCA:
    """LCA queries as range-minimum-depth queries over an Euler tour."""

    def __init__(self, adj: Adjacency, root: int = 0) -> None:
        n = len(adj)
        if not 0 <= root < n:
            raise IndexError(f"root {root} out of range")
        self._height = [0] * n
        self._first = [-1] * n
        euler = [root]
        self._first[root] = 0

        stack = [(root, iter(adj[root]))]
        while stack:
            node, children = stack[-1]
            for to in children:
                if self._first[to] == -1:
                    self._height[to] = self._height[node] + 1
                    self._first[to] = len(euler)
                    euler.append(to)
                    stack.append((to, iter(adj[to])))
                    break
            else:
                stack.pop()
                if stack:
                    euler.append(stack[-1][0])

        self._size = len(euler)
        tree = [0] * (2 * self._size)
        tree[self._size :] = euler
        for i in range(self._size - 1, 0, -1):
            tree[i] = self._shallower(tree[2 * i], tree[2 * i + 1])
        self._tree = tree

    def _shallower(self, a: int, b: int) -> int:
        return a if self._height[a] < self._height[b] else b

    def lca(self, u: int, v: int) -> int:
        """Return the lowest common ancestor of ``u`` and ``v``."""
        for node in (u, v):
            if not 0 <= node < len(self._first) or self._first[node] == -1:
                raise ValueError(f"node {node} is not in the rooted tree")
        left, right = sorted((self._first[u], self._first[v]))
        lo, hi = left + self._size, right + self._size + 1
        best = self._tree[lo]
        while lo < hi:
            if lo & 1:
                best = self._shallower(best, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                best = self._shallower(best, self._tree[hi])
            lo //= 2
            hi //= 2
        return best