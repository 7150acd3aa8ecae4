"""Binomial coefficients modulo a prime via precomputed factorials."""

from __future__ import annotations

DEFAULT_MOD = 1_000_000_007


class Binomial:
    """Computes ``C(n, r) mod mod`` for ``0 <= n <= limit``.

    ``mod`` must make every factorial up to ``limit`` invertible; a prime
    larger than ``limit`` always does.
    """

    def __init__(self, limit: int, mod: int = DEFAULT_MOD) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        if mod < 2:
            raise ValueError("mod must be at least 2")
        self.limit = limit
        self.mod = mod

        fac = [1] * (limit + 1)
        for i in range(1, limit + 1):
            fac[i] = fac[i - 1] * i % mod

        inv = [1] * (limit + 1)
        try:
            inv[limit] = pow(fac[limit], -1, mod)
        except ValueError:
            raise ValueError(
                f"{limit}! has no inverse modulo {mod}; use a prime modulus above the limit"
            ) from None
        for i in range(limit, 0, -1):
            inv[i - 1] = inv[i] * i % mod

        self._fac = fac
        self._inv = inv

    def __call__(self, n: int, r: int) -> int:
        if n < 0 or r < 0 or r > n:
            return 0
        if n > self.limit:
            raise ValueError(f"n={n} exceeds the precomputed limit {self.limit}")
        return self._fac[n] * self._inv[r] % self.mod * self._inv[n - r] % self.mod