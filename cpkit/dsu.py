"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations


class DisjointSets:
    """Disjoint sets over the elements ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._parents = list(range(size))
        self._sizes = [1] * size

    def __len__(self) -> int:
        return len(self._parents)

    def find(self, x: int) -> int:
        """Return the representative of the component holding ``x``."""
        if not 0 <= x < len(self._parents):
            raise IndexError(f"element {x} out of range")
        root = x
        while self._parents[root] != root:
            root = self._parents[root]
        while self._parents[x] != root:
            self._parents[x], x = root, self._parents[x]
        return root

    def unite(self, x: int, y: int) -> bool:
        """Merge the components of ``x`` and ``y``; return whether anything changed."""
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return False
        if self._sizes[x_root] < self._sizes[y_root]:
            x_root, y_root = y_root, x_root
        self._sizes[x_root] += self._sizes[y_root]
        self._parents[y_root] = x_root
        return True

    def connected(self, x: int, y: int) -> bool:
        """Return whether ``x`` and ``y`` are in the same component."""
        return self.find(x) == self.find(y)