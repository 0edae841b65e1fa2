"""Read-only view of a board used by move generation and scoring."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from superscrabble.constants import Ruleset


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr = np.array(arr, copy=True)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class BoardSnapshot:
    """Immutable copy of a board's tiles and bonus squares.

    ``letters`` holds uppercase letters ('' for empty cells) and ``blanks``
    marks cells whose tile is a blank. Because nothing here can change, a
    snapshot may be shared freely between worker threads.
    """

    letters: np.ndarray
    blanks: np.ndarray
    letter_mult: np.ndarray
    word_mult: np.ndarray
    start: tuple[int, int]
    ruleset: Ruleset
    is_transposed: bool = False

    @classmethod
    def from_cells(
        cls,
        cells: np.ndarray,
        letter_mult: np.ndarray,
        word_mult: np.ndarray,
        start: tuple[int, int],
        ruleset: Ruleset,
    ) -> BoardSnapshot:
        """Build from a board grid of '' / 'A'-'Z' / 'a'-'z' (blank) cells."""
        return cls(
            letters=_frozen(np.char.upper(cells)),
            blanks=_frozen(np.char.islower(cells)),
            letter_mult=_frozen(letter_mult),
            word_mult=_frozen(word_mult),
            start=start,
            ruleset=ruleset,
        )

    def snapshot(self) -> BoardSnapshot:
        return self

    @property
    def size(self) -> int:
        return self.letters.shape[0]

    def transposed(self) -> BoardSnapshot:
        """Mirror across the main diagonal so columns read as rows."""
        return BoardSnapshot(
            letters=self.letters.T,
            blanks=self.blanks.T,
            letter_mult=self.letter_mult.T,
            word_mult=self.word_mult.T,
            start=(self.start[1], self.start[0]),
            ruleset=self.ruleset,
            is_transposed=not self.is_transposed,
        )

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def is_occupied(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self.letters[row, col] != ""

    def letter_at(self, row: int, col: int) -> str:
        """Uppercase letter at (row, col), '' if empty or off the board."""
        if not self.in_bounds(row, col):
            return ""
        return str(self.letters[row, col])

    def tile_value(self, row: int, col: int) -> int:
        """Face value of the tile already on (row, col); blanks are 0."""
        if self.blanks[row, col]:
            return 0
        return self.ruleset.value_of(self.letter_at(row, col))

    def is_empty(self) -> bool:
        return not bool(np.any(self.letters != ""))

    def has_neighbor(self, row: int, col: int) -> bool:
        """True if any orthogonal neighbour of (row, col) holds a tile."""
        return any(
            self.is_occupied(row + dr, col + dc)
            for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1))
        )

    def run_from(self, row: int, col: int, dr: int, dc: int) -> str:
        """Letters on consecutive occupied cells starting at (row, col)."""
        out: list[str] = []
        while self.is_occupied(row, col):
            out.append(self.letter_at(row, col))
            row += dr
            col += dc
        return "".join(out)
