"""Offline distinct-value range queries with Mo's algorithm."""

from __future__ import annotations

import math
import sys
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence


def distinct_counts(
    values: Sequence[Hashable], queries: Sequence[tuple[int, int]]
) -> list[int]:
    """Return the number of distinct values in ``values[l..r]`` for each
    inclusive, zero-based ``(l, r)`` query, in query order."""
    n = len(values)
    for left, right in queries:
        if not 0 <= left <= right < n:
            raise ValueError(f"invalid query ({left}, {right}) for length {n}")
    if not queries:
        return []

    block = max(1, math.isqrt(n))
    order = sorted(
        range(len(queries)),
        key=lambda i: (queries[i][0] // block, queries[i][1]),
    )

    counts: Counter[Hashable] = Counter()
    distinct = 0

    def add(idx: int) -> None:
        nonlocal distinct
        counts[values[idx]] += 1
        if counts[values[idx]] == 1:
            distinct += 1

    def remove(idx: int) -> None:
        nonlocal distinct
        counts[values[idx]] -= 1
        if counts[values[idx]] == 0:
            distinct -= 1

    answers = [0] * len(queries)
    mo_left, mo_right = 0, -1
    for qi in order:
        left, right = queries[qi]
        while mo_left > left:
            mo_left -= 1
            add(mo_left)
        while mo_right < right:
            mo_right += 1
            add(mo_right)
        while mo_left < left:
            remove(mo_left)
            mo_left += 1
        while mo_right > right:
            remove(mo_right)
            mo_right -= 1
        answers[qi] = distinct
    return answers


def main(argv: Iterable[str] | None = None) -> int:
    """Read an array and one-based inclusive queries; print distinct counts."""
    tokens = iter(sys.stdin.read().split())
    n = int(next(tokens))
    values = [int(next(tokens)) for _ in range(n)]
    q = int(next(tokens))
    queries = [(int(next(tokens)) - 1, int(next(tokens)) - 1) for _ in range(q)]
    for answer in distinct_counts(values, queries):
        print(answer)
    return 0