"""Prefix tree over lowercase Latin words."""

from __future__ import annotations

from dataclasses import dataclass, field
from string import ascii_lowercase

ALPHABET = frozenset(ascii_lowercase)


@dataclass
class _Node:
    children: dict[str, "_Node"] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """A set of words made of the letters ``a`` to ``z``."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word``; raises ``ValueError`` for characters outside ``a``-``z``."""
        bad = set(word) - ALPHABET
        if bad:
            raise ValueError(f"unsupported characters: {''.join(sorted(bad))!r}")
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.is_end = True

    def _walk(self, text: str) -> _Node | None:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """Return whether ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Return whether some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)