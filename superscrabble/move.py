"""Move representation."""

from __future__ import annotations

from dataclasses import dataclass, field

from superscrabble.letter import Direction, Letter


@dataclass(frozen=True)
class Placement:
    """One tile put down by a move."""

    row: int
    col: int
    letter: Letter

    def transposed(self) -> Placement:
        return Placement(self.col, self.row, self.letter)


@dataclass(frozen=True, repr=False)
class Move:
    """A single scored, legal placement.

    ``row``/``col`` is the first cell of the main word and ``word`` is the
    whole main word including tiles already on the board (blanks in
    lowercase), so ``board.make_move(m.row, m.col, m.word, m.direction)``
    plays it. ``tiles`` lists only the newly placed tiles.
    """

    word: str
    row: int
    col: int
    direction: Direction
    score: int
    tiles: tuple[Placement, ...]
    cross_words: tuple[str, ...] = field(default=())
    is_bingo: bool = False

    @property
    def letters(self) -> tuple[Letter, ...]:
        return tuple(p.letter for p in self.tiles)

    @property
    def key(self) -> frozenset[tuple[int, int, str]]:
        """Identity of the placement regardless of how it was found."""
        return frozenset((p.row, p.col, p.letter.to_char()) for p in self.tiles)

    @property
    def blank_positions(self) -> set[tuple[int, int]]:
        return {(p.row, p.col) for p in self.tiles if p.letter.is_blank}

    def __repr__(self) -> str:
        bingo = " +BINGO!" if self.is_bingo else ""
        return f"{self.word} at ({self.row},{self.col}) {self.direction.arrow} = {self.score} pts{bingo}"
