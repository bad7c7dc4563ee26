"""Prefix tree that suggests the smallest matching words as a word is typed."""

from __future__ import annotations

from bisect import insort
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_end: bool = False
    top: list[str] = field(default_factory=list)


class Trie:
    """A prefix tree that keeps the ``k`` smallest words under every prefix."""

    def __init__(self, k: int = 3) -> None:
        if k < 0:
            raise ValueError("k must not be negative")
        self.k = k
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word`` to the tree."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
            insort(node.top, word)
            del node.top[self.k :]
        node.is_end = True

    def suggest(self, word: str) -> list[list[str]]:
        """For each prefix of ``word``, the smallest stored words starting with it."""
        suggestions: list[list[str]] = []
        node: _Node | None = self._root
        for ch in word:
            node = node.children.get(ch) if node is not None else None
            suggestions.append(list(node.top) if node is not None else [])
        return suggestions

    def _walk(self, text: str) -> _Node | None:
        node = self._root
        for ch in text:
            found = node.children.get(ch)
            if found is None:
                return None
            node = found
        return node

    def search(self, word: str) -> bool:
        """Whether ``word`` itself was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Whether some inserted word starts with ``prefix``."""
        return self._walk(prefix) is not None


def suggested_products(products: Iterable[str], search_word: str) -> list[list[str]]:
    """Up to three smallest products matching each typed prefix of ``search_word``."""
    trie = Trie(3)
    for product in products:
        trie.insert(product)
    return trie.suggest(search_word)