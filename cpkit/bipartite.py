"""Bipartite components: two-colouring by BFS and the larger side of each."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, MutableSequence, Sequence
from typing import NamedTuple, Optional

Color = Optional[int]


class ComponentInfo(NamedTuple):
    """Result of colouring one connected component."""

    has_odd_cycle: bool
    size0: int
    size1: int


def explore_component(
    adj: Sequence[Iterable[int]], start: int, colors: MutableSequence[Color]
) -> ComponentInfo:
    """Two-colour the component of ``start`` with colours 0 and 1.

    ``colors`` holds ``None`` for nodes not yet reached and is filled in for
    every node of the component. Returns whether an odd cycle was found and
    how many nodes got each colour.
    """
    queue = deque([start])
    colors[start] = 0
    has_odd_cycle = False
    sizes = [0, 0]

    while queue:
        u = queue.popleft()
        color = colors[u]
        sizes[color] += 1
        for neighbor in adj[u]:
            if colors[neighbor] is None:
                colors[neighbor] = 1 - color
                queue.append(neighbor)
            elif colors[neighbor] == color:
                has_odd_cycle = True

    return ComponentInfo(has_odd_cycle, sizes[0], sizes[1])


def check_entire_graph(adj: Sequence[Iterable[int]]) -> int:
    """Sum, over components without an odd cycle, the size of the larger colour class."""
    colors: list[Color] = [None] * len(adj)
    total = 0
    for node, color in enumerate(colors):
        if colors[node] is None:
            info = explore_component(adj, node, colors)
            if not info.has_odd_cycle:
                total += max(info.size0, info.size1)
    return total


def main(argv: Iterable[str] | None = None) -> int:
    """Read test cases of undirected graphs (1-based edges) and print the answer for each."""
    tokens = iter(sys.stdin.read().split())
    first = next(tokens, None)
    if first is None:
        return 0
    for _ in range(int(first)):
        n, m = int(next(tokens)), int(next(tokens))
        adj: list[list[int]] = [[] for _ in range(n)]
        for _ in range(m):
            u, v = int(next(tokens)) - 1, int(next(tokens)) - 1
            adj[u].append(v)
            adj[v].append(u)
        print(check_entire_graph(adj))
    return 0