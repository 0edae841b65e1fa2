"""Cross-checks: which letters may go in each empty cell.

Computed for words running left-to-right on a snapshot; the move generator
handles top-to-bottom words by passing the transposed snapshot. A cell with
tiles directly above or below it may only take letters that turn that
vertical run into a valid word. Cells without such neighbours are
unconstrained.
"""

from __future__ import annotations

import logging
from typing import Iterator

import numpy as np

from superscrabble.constants import ALPHABET
from superscrabble.dictionary import WordOracle
from superscrabble.snapshot import BoardSnapshot

log = logging.getLogger("superscrabble")


class CrossChecks:
    """Allowed letters per constrained cell; every other cell allows A-Z."""

    __slots__ = ("_allowed",)

    def __init__(self, allowed: dict[tuple[int, int], frozenset[str]]):
        self._allowed = allowed

    def allowed(self, row: int, col: int) -> frozenset[str]:
        return self._allowed.get((row, col), ALPHABET)

    def is_constrained(self, row: int, col: int) -> bool:
        return (row, col) in self._allowed

    def items(self) -> Iterator[tuple[tuple[int, int], frozenset[str]]]:
        return iter(sorted(self._allowed.items()))

    def __len__(self) -> int:
        return len(self._allowed)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CrossChecks) and self._allowed == other._allowed

    def __repr__(self) -> str:
        return f"CrossChecks({len(self._allowed)} constrained cells)"


def _vertical_neighbours(occupied: np.ndarray) -> np.ndarray:
    near = np.zeros_like(occupied)
    near[1:, :] |= occupied[:-1, :]
    near[:-1, :] |= occupied[1:, :]
    return near


def compute_cross_checks(snapshot: BoardSnapshot, dictionary: WordOracle) -> CrossChecks:
    """Cross-check sets for left-to-right play on *snapshot*."""
    occupied = snapshot.letters != ""
    candidates = np.argwhere(_vertical_neighbours(occupied) & ~occupied)

    allowed: dict[tuple[int, int], frozenset[str]] = {}
    for r, c in candidates:
        r, c = int(r), int(c)
        above = snapshot.run_from(r - 1, c, -1, 0)[::-1]
        below = snapshot.run_from(r + 1, c, 1, 0)
        allowed[(r, c)] = frozenset(
            ch for ch in ALPHABET if dictionary.is_word(above + ch + below)
        )
    log.debug("Cross-checks: %d constrained cells", len(allowed))
    return CrossChecks(allowed)
