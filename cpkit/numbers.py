"""Number-theory helpers: sieve of smallest prime factors, factorisation, bit counts."""

from __future__ import annotations


def smallest_prime_factors(limit: int) -> list[int]:
    """Return ``spf`` of length ``limit`` where ``spf[i]`` is the smallest prime
    factor of ``i`` for ``i >= 2``; entries 0 and 1 are 0."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    spf = [0] * limit
    for i in range(2, limit):
        if spf[i]:
            continue
        spf[i] = i
        for multiple in range(i * i, limit, i):
            if not spf[multiple]:
                spf[multiple] = i
    return spf


def prime_factorization(n: int) -> list[tuple[int, int]]:
    """Return ``(prime, exponent)`` pairs of ``n`` in increasing prime order."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    factors: list[tuple[int, int]] = []
    count = 0
    while n % 2 == 0:
        count += 1
        n //= 2
    if count:
        factors.append((2, count))
    p = 3
    while p * p <= n:
        count = 0
        while n % p == 0:
            count += 1
            n //= p
        if count:
            factors.append((p, count))
        p += 2
    if n > 2:
        factors.append((n, 1))
    return factors


def count_with_bit_set(j: int, n: int) -> int:
    """Return how many integers in ``[0, n]`` have bit ``j`` set."""
    if j < 0 or n < 0:
        raise ValueError("j and n must be non-negative")
    p2 = 1 << j
    full, rest = divmod(n, 2 * p2)
    result = full * p2
    if rest >= p2:
        result += rest - p2 + 1
    return result