"""Prefix trees that count words and prefixes."""

from __future__ import annotations

from typing import Optional


class _Node:
    __slots__ = ("children", "end_count", "prefix_count")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.end_count = 0
        self.prefix_count = 0


class _CountingTrie:
    def __init__(self) -> None:
        self._root = _Node()

    def _check(self, word: str) -> None:
        """Hook for subclasses that restrict the alphabet."""

    def _find(self, word: str) -> Optional[_Node]:
        self._check(word)
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _insert(self, word: str) -> None:
        self._check(word)
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            node.prefix_count += 1
        node.end_count += 1

    def _search(self, word: str) -> bool:
        node = self._find(word)
        return node is not None and node.end_count > 0

    def _erase(self, word: str) -> None:
        if not self._search(word):
            raise KeyError(word)
        node = self._root
        for ch in word:
            child = node.children[ch]
            child.prefix_count -= 1
            if child.prefix_count == 0:
                del node.children[ch]
                return
            node = child
        node.end_count -= 1


class Trie(_CountingTrie):
    """A trie over the lowercase letters ``a`` to ``z``."""

    def _check(self, word: str) -> None:
        for ch in word:
            if not "a" <= ch <= "z":
                raise ValueError(f"character {ch!r} is not a lowercase letter")

    def insert(self, word: str) -> None:
        """Add one occurrence of ``word``."""
        self._insert(word)

    def search(self, word: str) -> bool:
        """Return True if ``word`` has been inserted and not fully erased."""
        return self._search(word)

    def count_words_equal_to(self, word: str) -> int:
        """Return how many times ``word`` is stored."""
        node = self._find(word)
        return node.end_count if node is not None else 0

    def starts_with(self, prefix: str) -> bool:
        """Return True if some stored word begins with ``prefix``."""
        return self._find(prefix) is not None

    def count_words_starting_with(self, prefix: str) -> int:
        """Return how many stored words begin with a non-empty ``prefix``."""
        node = self._find(prefix)
        return node.prefix_count if node is not None else 0

    def erase(self, word: str) -> None:
        """Remove one occurrence of ``word``; raise KeyError if absent."""
        self._erase(word)


class MapTrie(_CountingTrie):
    """A trie accepting any characters."""

    def insert(self, word: str) -> None:
        """Add one occurrence of ``word``."""
        self._insert(word)

    def search(self, word: str) -> bool:
        """Return True if ``word`` has been inserted and not fully erased."""
        return self._search(word)

    def erase(self, word: str) -> None:
        """Remove one occurrence of ``word``; raise KeyError if absent."""
        self._erase(word)