"""Depth-first and breadth-first traversal orders."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def _check(graph: Sequence[Iterable[int]], start: int) -> None:
    if not 0 <= start < len(graph):
        raise IndexError(f"start {start} out of range")


def dfs_order(graph: Sequence[Iterable[int]], start: int) -> list[int]:
    """Return the nodes reachable from ``start`` in depth-first pre-order."""
    _check(graph, start)
    seen = {start}
    order = [start]
    stack = [iter(graph[start])]
    while stack:
        for v in stack[-1]:
            if v not in seen:
                seen.add(v)
                order.append(v)
                stack.append(iter(graph[v]))
                break
        else:
            stack.pop()
    return order


def bfs_order(graph: Sequence[Iterable[int]], start: int) -> list[int]:
    """Return the nodes reachable from ``start`` in breadth-first order."""
    _check(graph, start)
    seen = {start}
    order = []
    queue = deque([start])
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in graph[u]:
            if v not in seen:
                seen.add(v)
                queue.append(v)
    return order