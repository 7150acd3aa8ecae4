"""Counting prefix records: elements at least as large as everything before them."""

from __future__ import annotations

import sys
from collections.abc import Iterable


def count_records(values: Iterable[int]) -> int:
    """Return how many elements are greater than or equal to every earlier element."""
    count = 0
    current_max: int | None = None
    for value in values:
        if current_max is None or value >= current_max:
            current_max = value
            count += 1
    return count


def main(argv: Iterable[str] | None = None) -> int:
    """Read test cases of arrays and print the record count of each."""
    tokens = iter(sys.stdin.read().split())
    first = next(tokens, None)
    if first is None:
        return 0
    for _ in range(int(first)):
        n = int(next(tokens))
        values = [int(next(tokens)) for _ in range(n)]
        print(count_records(values))
    return 0