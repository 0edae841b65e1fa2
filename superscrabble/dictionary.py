"""Word-membership oracles.

The engine only needs ``is_word``; ``is_prefix`` is optional and lets the
move generator prune dead branches early. Anything with those methods
works, so tests can use a plain in-memory word list.
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol, runtime_checkable

from superscrabble.trie import Trie

log = logging.getLogger("superscrabble")


@runtime_checkable
class WordOracle(Protocol):
    def is_word(self, word: str) -> bool: ...


@runtime_checkable
class PrefixOracle(WordOracle, Protocol):
    def is_prefix(self, prefix: str) -> bool: ...


class Dictionary:
    """In-memory word list with both set-lookup and trie-based prefix search.

    Words are upper-cased. Entries shorter than two letters or containing
    anything but A-Z are skipped.
    """

    def __init__(self, words: Iterable[str], max_length: int | None = None):
        self.words: set[str] = set()
        self.trie = Trie()
        for raw in words:
            word = raw.strip().upper()
            if len(word) < 2 or not (word.isascii() and word.isalpha()):
                continue
            if max_length is not None and len(word) > max_length:
                continue
            self.words.add(word)
            self.trie.insert(word)
        log.info("Built dictionary with %s words", f"{len(self.words):,}")

    def is_word(self, word: str) -> bool:
        return word.upper() in self.words

    def is_prefix(self, prefix: str) -> bool:
        return self.trie.is_prefix(prefix.upper())

    def next_letters(self, prefix: str) -> frozenset[str]:
        return self.trie.next_letters(prefix.upper())

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def __len__(self) -> int:
        return len(self.words)
