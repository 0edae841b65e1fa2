"""Game constants: tile values, bonus layouts and ruleset presets."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

import numpy as np

ALPHABET: frozenset[str] = frozenset(string.ascii_uppercase)

DEFAULT_SS_BOARD_SIZE = 21
CLASSIC_BOARD_SIZE = 15

BLANK_CHAR = "?"

# Standard English tile point values. Blanks are always 0.
TILE_VALUES: dict[str, int] = {
    "A": 1, "B": 3, "C": 3, "D": 2, "E": 1, "F": 4, "G": 2,
    "H": 4, "I": 1, "J": 8, "K": 5, "L": 1, "M": 3, "N": 1,
    "O": 1, "P": 3, "Q": 10, "R": 1, "S": 1, "T": 1, "U": 1,
    "V": 4, "W": 4, "X": 8, "Y": 4, "Z": 10, BLANK_CHAR: 0,
}


def _parse_layout(table: str) -> np.ndarray:
    """Turn a text table ('.' = 1, digit = multiplier) into a square array."""
    rows = [line.strip() for line in table.strip().splitlines() if line.strip()]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError(f"Bonus layout must be square, got {size} rows of varying width")
    grid = np.ones((size, size), dtype=np.uint8)
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch != ".":
                grid[r, c] = int(ch)
    grid.flags.writeable = False
    return grid


# Bonus layouts
# Key: . = no bonus, 2/3/4 = double/triple/quadruple
# fmt: off
_SUPER_WORD_MULT = """
    4......3.....3......4
    .2......2...2......2.
    ..2......2.2......2..
    ...3......3......3...
    ....2...........2....
    .....2.........2.....
    ......2.......2......
    3......2.....2......3
    .2.................2.
    ..2...............2..
    ...3......2......3...
    ..2...............2..
    .2.................2.
    3......2.....2......3
    ......2.......2......
    .....2.........2.....
    ....2...........2....
    ...3......3......3...
    ..2......2.2......2..
    .2......2...2......2.
    4......3.....3......4
"""

_SUPER_LETTER_MULT = """
    ...2......2......2...
    ....3...........3....
    .....4.........4.....
    2.....2.......2.....2
    .3......3...3......3.
    ..4......2.2......4..
    ...2......2......2...
    .....................
    ....3...3...3...3....
    .....2...2.2...2.....
    2.....2.......2.....2
    .....2...2.2...2.....
    ....3...3...3...3....
    .....................
    ...2......2......2...
    ..4......2.2......4..
    .3......3...3......3.
    2.....2.......2.....2
    .....4.........4.....
    ....3...........3....
    ...2......2......2...
"""

_CLASSIC_WORD_MULT = """
    3......3......3
    .2...........2.
    ..2.........2..
    ...2.......2...
    ....2.....2....
    ...............
    ...............
    3......2......3
    ...............
    ...............
    ....2.....2....
    ...2.......2...
    ..2.........2..
    .2...........2.
    3......3......3
"""

_CLASSIC_LETTER_MULT = """
    ...2.......2...
    .....3...3.....
    ......2.2......
    2......2......2
    ...............
    .3...3...3...3.
    ..2...2.2...2..
    ...2.......2...
    ..2...2.2...2..
    .3...3...3...3.
    ...............
    2......2......2
    ......2.2......
    .....3...3.....
    ...2.......2...
"""
# fmt: on

SUPER_WORD_MULT = _parse_layout(_SUPER_WORD_MULT)
SUPER_LETTER_MULT = _parse_layout(_SUPER_LETTER_MULT)
CLASSIC_WORD_MULT = _parse_layout(_CLASSIC_WORD_MULT)
CLASSIC_LETTER_MULT = _parse_layout(_CLASSIC_LETTER_MULT)

LAYOUTS: dict[int, tuple[np.ndarray, np.ndarray]] = {
    DEFAULT_SS_BOARD_SIZE: (SUPER_LETTER_MULT, SUPER_WORD_MULT),
    CLASSIC_BOARD_SIZE: (CLASSIC_LETTER_MULT, CLASSIC_WORD_MULT),
}


def layout_for_size(size: int) -> tuple[np.ndarray, np.ndarray]:
    """(letter multipliers, word multipliers) for a board of *size*.

    Unrecognised sizes get a layout with no bonus squares.
    """
    if size in LAYOUTS:
        return LAYOUTS[size]
    plain = np.ones((size, size), dtype=np.uint8)
    plain.flags.writeable = False
    return plain, plain


@dataclass(frozen=True)
class Ruleset:
    """Scoring rules that vary between game variants."""

    name: str
    board_size: int
    rack_size: int = 7
    full_rack_bonus: int = 50
    tile_values: dict[str, int] = field(default_factory=lambda: dict(TILE_VALUES))

    def value_of(self, ch: str) -> int:
        return self.tile_values.get(ch.upper(), 0)


CLASSIC = Ruleset("classic", CLASSIC_BOARD_SIZE)
SUPER_SCRABBLE = Ruleset("super", DEFAULT_SS_BOARD_SIZE)

_PRESETS: dict[int, Ruleset] = {
    CLASSIC_BOARD_SIZE: CLASSIC,
    DEFAULT_SS_BOARD_SIZE: SUPER_SCRABBLE,
}


def ruleset_for_size(size: int) -> Ruleset:
    """Preset ruleset for *size*, or a generic one for custom boards."""
    return _PRESETS.get(size) or Ruleset("custom", size)
