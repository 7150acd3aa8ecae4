"""Euler tour of a tree: visiting order and subtree intervals."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence


class EulerTour:
    """Pre-order tour of a tree given as an adjacency list.

    After :meth:`run`, ``order`` holds the nodes in visiting order and, for
    each reached node ``v``, ``order[start[v]:end[v] + 1]`` is its subtree.
    Unreached nodes keep ``start`` and ``end`` equal to -1.
    """

    def __init__(self, tree: Sequence[Iterable[int]]) -> None:
        self.tree = [list(neighbors) for neighbors in tree]
        self.start = [-1] * len(self.tree)
        self.end = [-1] * len(self.tree)
        self.order: list[int] = []

    def run(self, at: int = 0) -> list[int]:
        """Tour the tree from root ``at`` and return the visiting order."""
        n = len(self.tree)
        if not 0 <= at < n:
            raise IndexError(f"root {at} out of range")
        self.start = [-1] * n
        self.end = [-1] * n
        self.order = [at]
        self.start[at] = 0

        stack = [(at, -1, iter(self.tree[at]))]
        while stack:
            node, prev, neighbors = stack[-1]
            for nb in neighbors:
                if nb == prev:
                    continue
                if self.start[nb] != -1:
                    raise ValueError("graph contains a cycle")
                self.start[nb] = len(self.order)
                self.order.append(nb)
                stack.append((nb, node, iter(self.tree[nb])))
                break
            else:
                self.end[node] = len(self.order) - 1
                stack.pop()
        return list(self.order)


def main(argv: Iterable[str] | None = None) -> int:
    """Read ``n`` and ``n - 1`` edges of a 1-based tree; print its tour from node 2."""
    tokens = iter(sys.stdin.read().split())
    n = int(next(tokens))
    graph: list[list[int]] = [[] for _ in range(n + 1)]
    for _ in range(n - 1):
        u, v = int(next(tokens)), int(next(tokens))
        graph[u].append(v)
        graph[v].append(u)
    print(" ".join(map(str, EulerTour(graph).run(2))))
    return 0