"""Player rack: a multiset of tiles."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator

from superscrabble.constants import BLANK_CHAR
from superscrabble.errors import InsufficientRackLettersError
from superscrabble.letter import Letter


class Rack:
    """Multiset of tiles. Order is irrelevant, duplicates are allowed.

    Letters are counted by character, blanks under ``'?'``.
    """

    __slots__ = ("_counts",)

    def __init__(self, tiles: Iterable[Letter | str] = ()):
        self._counts: Counter[str] = Counter()
        for tile in tiles:
            letter = tile if isinstance(tile, Letter) else Letter.from_char(tile)
            self._counts[BLANK_CHAR if letter.is_blank else letter.char] += 1

    @classmethod
    def from_string(cls, text: str) -> Rack:
        """Rack from text such as ``"AEIRST?"``. Case is ignored."""
        return cls(ch if ch == BLANK_CHAR else ch.upper() for ch in text if not ch.isspace())

    @property
    def counts(self) -> Counter[str]:
        return Counter(self._counts)

    @property
    def blanks(self) -> int:
        return self._counts[BLANK_CHAR]

    def __len__(self) -> int:
        return sum(self._counts.values())

    def __iter__(self) -> Iterator[Letter]:
        for ch in sorted(self._counts):
            for _ in range(self._counts[ch]):
                yield Letter.from_char(ch)

    def __contains__(self, ch: str) -> bool:
        return self._counts[ch] > 0

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Rack) and +self._counts == +other._counts

    def missing_for(self, chars: Iterable[str]) -> list[str]:
        """Characters the rack cannot supply.

        Uppercase characters use a matching tile, falling back to a blank.
        Lowercase characters demand a blank.
        """
        counts = Counter(self._counts)
        missing: list[str] = []
        # Explicit blanks first so they cannot be stolen by the fallback.
        ordered = sorted(chars, key=lambda ch: not ch.islower())
        for ch in ordered:
            if ch.islower() or ch == BLANK_CHAR:
                key = BLANK_CHAR
            elif counts[ch] > 0:
                key = ch
            else:
                key = BLANK_CHAR
            if counts[key] > 0:
                counts[key] -= 1
            else:
                missing.append(ch)
        return missing

    def can_supply(self, chars: Iterable[str]) -> bool:
        return not self.missing_for(chars)

    def can_spell(self, word: str) -> bool:
        """True if *word* can be built from this rack alone."""
        return self.can_supply(word.upper())

    def take(self, chars: Iterable[str]) -> list[Letter]:
        """The tiles that would be played for *chars*, blanks assigned.

        Raises ``InsufficientRackLettersError`` if the rack falls short.
        """
        chars = list(chars)
        missing = self.missing_for(chars)
        if missing:
            raise InsufficientRackLettersError(missing)
        counts = Counter(self._counts)
        for ch in chars:
            if ch.islower():
                counts[BLANK_CHAR] -= 1
        played: list[Letter] = []
        for ch in chars:
            if ch.islower():
                played.append(Letter.blank(ch))
            elif counts[ch] > 0:
                counts[ch] -= 1
                played.append(Letter(ch))
            else:
                counts[BLANK_CHAR] -= 1
                played.append(Letter.blank(ch))
        return played

    def remove(self, letters: Iterable[Letter]) -> Rack:
        """New rack without *letters* (the leave after a move)."""
        counts = Counter(self._counts)
        for letter in letters:
            counts[BLANK_CHAR if letter.is_blank else letter.char] -= 1
        return Rack(ch for ch, n in counts.items() for _ in range(max(0, n)))

    def __repr__(self) -> str:
        return f"Rack({''.join(letter.to_char() for letter in self)!r})"
