"""Single-source shortest paths with a pluggable path-combining operator."""

from __future__ import annotations

import heapq
import math
import operator
import sys
from collections.abc import Callable, Iterable, Sequence

Adjacency = Sequence[Iterable[tuple[int, int]]]


def dijkstra(
    n: int,
    adj: Adjacency,
    source: int,
    combine: Callable[[int, int], int] = operator.add,
) -> list[float]:
    """Return distances from ``source`` to every node ``0 .. n - 1``.

    ``adj[u]`` yields ``(v, w)`` pairs. The cost of extending a path of cost
    ``d`` by an edge of weight ``w`` is ``combine(d, w)``. Unreachable nodes
    get ``math.inf``.
    """
    if not 0 <= source < n:
        raise IndexError(f"source {source} out of range")
    dist: list[float] = [math.inf] * n
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        dis, node = heapq.heappop(heap)
        for v, w in adj[node]:
            candidate = combine(dis, w)
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return dist


def main(argv: Iterable[str] | None = None) -> int:
    """Read a directed weighted graph and print the XOR-path distance from 1 to n.

    Prints -1 when node n cannot be reached.
    """
    tokens = iter(sys.stdin.read().split())
    n = int(next(tokens))
    m = int(next(tokens))
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for _ in range(m):
        u, v, w = int(next(tokens)), int(next(tokens)), int(next(tokens))
        adj[u].append((v, w))
    dist = dijkstra(n + 1, adj, 1, operator.xor)
    print(-1 if dist[n] == math.inf else dist[n])
    return 0