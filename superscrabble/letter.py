"""Letter / tile model and play directions."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from superscrabble.constants import ALPHABET, BLANK_CHAR, TILE_VALUES


class Direction(enum.Enum):
    """Reading direction of a word: left-to-right or top-to-bottom."""

    RIGHT = "H"
    DOWN = "V"

    @property
    def delta(self) -> tuple[int, int]:
        return (0, 1) if self is Direction.RIGHT else (1, 0)

    def opposite(self) -> Direction:
        return Direction.DOWN if self is Direction.RIGHT else Direction.RIGHT

    @property
    def arrow(self) -> str:
        return "→" if self is Direction.RIGHT else "↓"


@dataclass(frozen=True)
class Letter:
    """A single tile.

    Concrete tiles carry their letter. Blank tiles carry ``None`` while on
    the rack and the letter they stand for once placed.
    """

    char: str | None
    is_blank: bool = False

    def __post_init__(self):
        if self.char is None:
            if not self.is_blank:
                raise ValueError("Only a blank tile may be unassigned")
        elif self.char not in ALPHABET:
            raise ValueError(f"Invalid letter: {self.char!r}")

    @classmethod
    def from_char(cls, ch: str) -> Letter:
        """'A'-'Z' concrete, 'a'-'z' placed blank, '?' or ' ' unassigned blank."""
        if ch in (BLANK_CHAR, " "):
            return cls(None, is_blank=True)
        if len(ch) == 1 and ch.islower():
            return cls(ch.upper(), is_blank=True)
        return cls(ch)

    @classmethod
    def blank(cls, represents: str | None = None) -> Letter:
        return cls(represents.upper() if represents else None, is_blank=True)

    def to_char(self) -> str:
        if self.char is None:
            return BLANK_CHAR
        return self.char.lower() if self.is_blank else self.char

    def placed_as(self, ch: str) -> Letter:
        """The letter this tile shows once placed as *ch*."""
        ch = ch.upper()
        if self.is_blank:
            return Letter(ch, is_blank=True)
        if ch != self.char:
            raise ValueError(f"Tile {self.char} cannot be played as {ch}")
        return self

    @property
    def raw_score(self) -> int:
        """Face value of the letter, ignoring blanks."""
        return TILE_VALUES.get(self.char, 0) if self.char else 0

    @property
    def score(self) -> int:
        return 0 if self.is_blank else self.raw_score

    def __str__(self) -> str:
        return self.to_char()
