"""Z-function of a string and the shortest repeating unit built on it."""

from __future__ import annotations


def z_function(s: str) -> list[int]:
    """Return ``z`` where ``z[i]`` is the length of the longest common prefix
    of ``s`` and ``s[i:]``; ``z[0]`` is 0."""
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i < right:
            z[i] = min(right - i, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] > right:
            left, right = i, i + z[i]
    return z


def shortest_repeating_unit(s: str) -> str:
    """Return the shortest ``t`` such that ``s`` is ``t`` repeated a whole number of times."""
    n = len(s)
    for i, length in enumerate(z_function(s)):
        if i and i + length == n and n % i == 0:
            return s[:i]
    return s