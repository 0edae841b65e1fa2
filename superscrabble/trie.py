"""Prefix trie for fast word, prefix and next-letter lookups."""

from __future__ import annotations

from typing import Iterable


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class Trie:
    """Prefix trie. The move generator walks it one letter at a time."""

    def __init__(self, words: Iterable[str] = ()):
        self.root = TrieNode()
        self._size = 0
        for word in words:
            self.insert(word)

    def __len__(self) -> int:
        return self._size

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            node = node.children.setdefault(ch, TrieNode())
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def is_word(self, word: str) -> bool:
        node = self.node_for(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self.node_for(prefix) is not None

    def next_letters(self, prefix: str) -> frozenset[str]:
        """Letters that can follow *prefix* on the way to some word."""
        node = self.node_for(prefix)
        return frozenset(node.children) if node is not None else frozenset()

    def node_for(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
