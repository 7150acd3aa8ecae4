"""Sum over subsets (SOS) dynamic programming on bitmasks."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

DEFAULT_BITS = 20


class SubsetSums:
    """A table indexed by bitmasks of ``bits`` bits, with in-place zeta transforms."""

    def __init__(self, bits: int = DEFAULT_BITS) -> None:
        if bits < 0:
            raise ValueError("bits must be non-negative")
        self.bits = bits
        self._dp = [0] * (1 << bits)

    def __len__(self) -> int:
        return len(self._dp)

    def _check(self, mask: int) -> None:
        if not 0 <= mask < len(self._dp):
            raise IndexError(f"mask {mask} out of range for {self.bits} bits")

    def __getitem__(self, mask: int) -> int:
        self._check(mask)
        return self._dp[mask]

    def __setitem__(self, mask: int, value: int) -> None:
        self._check(mask)
        self._dp[mask] = value

    def add(self, mask: int, value: int) -> None:
        """Add ``value`` to the entry at ``mask``."""
        self._check(mask)
        self._dp[mask] += value

    def _sweep(self, sign: int, upward: bool) -> None:
        dp = self._dp
        size = len(dp)
        for bit in range(self.bits):
            step = 1 << bit
            for base in range(0, size, 2 * step):
                low = slice(base, base + step)
                high = slice(base + step, base + 2 * step)
                if upward:
                    dp[high] = [h + sign * lo for h, lo in zip(dp[high], dp[low])]
                else:
                    dp[low] = [lo + sign * h for lo, h in zip(dp[low], dp[high])]

    def sum_over_subsets(self) -> None:
        """Replace every entry with the sum of the entries of all its subsets."""
        self._sweep(1, upward=True)

    def undo_sum_over_subsets(self) -> None:
        """Invert :meth:`sum_over_subsets`."""
        self._sweep(-1, upward=True)

    def sum_over_supersets(self) -> None:
        """Replace every entry with the sum of the entries of all its supersets."""
        self._sweep(1, upward=False)

    def undo_sum_over_supersets(self) -> None:
        """Invert :meth:`sum_over_supersets`."""
        self._sweep(-1, upward=False)


def mask_statistics(
    values: Sequence[int], bits: int = DEFAULT_BITS
) -> list[tuple[int, int, int]]:
    """For each value ``x`` return how many values are subsets of ``x``,
    how many are supersets of ``x``, and how many share a set bit with ``x``."""
    table = SubsetSums(bits)
    full = (1 << bits) - 1
    for value in values:
        if not 0 <= value <= full:
            raise ValueError(f"value {value} does not fit in {bits} bits")
        table.add(value, 1)

    table.sum_over_subsets()
    subsets = [table[value] for value in values]
    table.undo_sum_over_subsets()

    table.sum_over_supersets()
    supersets = [table[value] for value in values]
    table.undo_sum_over_supersets()

    table.sum_over_subsets()
    n = len(values)
    overlapping = [n - table[~value & full] for value in values]

    return list(zip(subsets, supersets, overlapping))


def main(argv: Iterable[str] | None = None) -> int:
    """Read ``n`` and ``n`` values from stdin and print their mask statistics."""
    tokens = sys.stdin.read().split()
    if not tokens:
        return 0
    n = int(tokens[0])
    values = [int(tok) for tok in tokens[1 : 1 + n]]
    bits = max(1, max(values, default=0).bit_length())
    for row in mask_statistics(values, bits):
        print(*row)
    return 0