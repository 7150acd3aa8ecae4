"""Polynomial rolling hash of a string with O(1) substring hashes."""

from __future__ import annotations


class HashedString:
    """Prefix hashes of a string under base ``BASE`` modulo ``MOD``."""

    MOD = 1_000_000_009
    BASE = 9973
    # Shared across instances: _powers[i] == BASE**i % MOD.
    _powers: list[int] = [1]

    def __init__(self, s: str) -> None:
        powers = HashedString._powers
        while len(powers) <= len(s):
            powers.append(powers[-1] * self.BASE % self.MOD)

        prefix = [0]
        for ch in s:
            prefix.append((prefix[-1] * self.BASE + ord(ch)) % self.MOD)
        self._prefix = prefix

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def get_hash(self, start: int, end: int) -> int:
        """Return the hash of the characters ``start`` through ``end`` inclusive."""
        if not 0 <= start <= end < len(self):
            raise IndexError(f"invalid range [{start}, {end}] for length {len(self)}")
        raw = self._prefix[end + 1] - self._prefix[start] * HashedString._powers[end - start + 1]
        return raw % self.MOD