"""N×N game board with a static bonus layout."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, NamedTuple, Sequence

import numpy as np

from superscrabble.constants import (
    DEFAULT_SS_BOARD_SIZE,
    Ruleset,
    layout_for_size,
    ruleset_for_size,
)
from superscrabble.dictionary import WordOracle
from superscrabble.errors import (
    ConflictError,
    InvalidWordError,
    IsolatedPlacementError,
    NoTilesPlacedError,
    OutOfBoundsError,
)
from superscrabble.letter import Direction, Letter
from superscrabble.move import Placement
from superscrabble.rack import Rack
from superscrabble.scoring import score_placement, words_formed
from superscrabble.snapshot import BoardSnapshot

if TYPE_CHECKING:
    from superscrabble.move import Move

log = logging.getLogger("superscrabble")


class Bonus(NamedTuple):
    letter_multiplier: int
    word_multiplier: int


class Cell(NamedTuple):
    row: int
    col: int
    letter: Letter | None
    bonus: Bonus

    @property
    def is_empty(self) -> bool:
        return self.letter is None


class PlayedWord(NamedTuple):
    """Record of a word committed to the board."""

    row: int
    col: int
    direction: Direction
    word: str
    tiles: tuple[Placement, ...]
    score: int


class Board:
    """Square game board.

    Cells hold '' (empty), 'A'-'Z' (tile) or lowercase 'a'-'z' (blank used
    as that letter). Bonus squares are fixed at construction; a size of 21
    gets the Super Scrabble layout, 15 the classic one, and any other size
    a board without bonus squares.
    """

    DEFAULT_SS_BOARD_SIZE = DEFAULT_SS_BOARD_SIZE

    def __init__(self, size: int = DEFAULT_SS_BOARD_SIZE, ruleset: Ruleset | None = None):
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}")
        self.size = size
        self.ruleset = ruleset or ruleset_for_size(size)
        self.letter_mult, self.word_mult = layout_for_size(size)
        self.start: tuple[int, int] = (size // 2, size // 2)
        self.cells: np.ndarray = np.full((size, size), "", dtype="<U1")
        self.moves: list[PlayedWord] = []

    @classmethod
    def new(cls, size: int = DEFAULT_SS_BOARD_SIZE) -> Board:
        return cls(size)

    # queries

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Cell | None:
        """Tile and bonus at (row, col), or None off the board."""
        if not self.in_bounds(row, col):
            return None
        return Cell(row, col, self.letter_at(row, col), self.bonus(row, col))

    def letter_at(self, row: int, col: int) -> Letter | None:
        if not self.in_bounds(row, col):
            return None
        ch = str(self.cells[row, col])
        return Letter.from_char(ch) if ch else None

    def bonus(self, row: int, col: int) -> Bonus:
        return Bonus(int(self.letter_mult[row, col]), int(self.word_mult[row, col]))

    def is_occupied(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self.cells[row, col] != ""

    def is_empty(self) -> bool:
        """True if no tiles on the board."""
        return not bool(np.any(self.cells != ""))

    def count_tiles(self) -> int:
        return int(np.count_nonzero(self.cells != ""))

    def tiles(self) -> Iterator[tuple[int, int, Letter]]:
        """(row, col, letter) for every tile, row by row."""
        for row, col in zip(*np.nonzero(self.cells != "")):
            yield int(row), int(col), Letter.from_char(str(self.cells[row, col]))

    def to_index(self, row: int, col: int) -> int:
        return row * self.size + col

    def from_index(self, index: int) -> tuple[int, int]:
        return divmod(index, self.size)

    def snapshot(self) -> BoardSnapshot:
        """Immutable copy of the current state for move generation."""
        return BoardSnapshot.from_cells(
            self.cells, self.letter_mult, self.word_mult, self.start, self.ruleset,
        )

    def copy(self) -> Board:
        b = Board(self.size, self.ruleset)
        b.cells = self.cells.copy()
        b.moves = list(self.moves)
        return b

    # placement

    def make_move(
        self,
        row: int,
        col: int,
        word: str | Sequence[Letter],
        direction: Direction | str,
        dictionary: WordOracle | None = None,
        rack: Rack | None = None,
    ) -> PlayedWord:
        """Place *word* starting at (row, col) reading in *direction*.

        Uppercase characters are regular tiles, lowercase ones are blanks.
        Cells already holding the same letter are reused. When *dictionary*
        is given the main word and every crossing word must be valid; when
        *rack* is given it must hold the new tiles.

        Raises a ``PlacementError`` subclass and leaves the board untouched
        if the placement is illegal.
        """
        direction = Direction(direction)
        chars = [ch.to_char() if isinstance(ch, Letter) else ch for ch in word]
        if not chars:
            raise ValueError("Cannot place an empty word")
        dr, dc = direction.delta
        end_r = row + (len(chars) - 1) * dr
        end_c = col + (len(chars) - 1) * dc
        if not (self.in_bounds(row, col) and self.in_bounds(end_r, end_c)):
            raise OutOfBoundsError(
                f"'{''.join(chars)}' at ({row},{col}) runs off the {self.size}x{self.size} board",
                row, col,
            )

        new_cells: list[tuple[int, int, str]] = []
        reused = False
        for i, ch in enumerate(chars):
            r, c = row + i * dr, col + i * dc
            letter = Letter.from_char(ch)
            if letter.char is None:
                raise ValueError("Blanks must be placed as a letter")
            existing = str(self.cells[r, c])
            if existing:
                if existing.upper() != letter.char:
                    raise ConflictError(
                        f"({r},{c}) holds {existing.upper()}, cannot place {letter.char}", r, c,
                    )
                reused = True
            else:
                new_cells.append((r, c, ch))
        if not new_cells:
            raise NoTilesPlacedError("Every cell is already occupied", row, col)

        snapshot = self.snapshot()
        if snapshot.is_empty():
            if not any((r, c) == self.start for r, c, _ in new_cells):
                raise IsolatedPlacementError(
                    f"The first move must cover the start cell {self.start}", row, col,
                )
        elif not reused and not any(snapshot.has_neighbor(r, c) for r, c, _ in new_cells):
            raise IsolatedPlacementError("The move does not touch any tile", row, col)

        if rack is not None:
            letters = rack.take(ch for _, _, ch in new_cells)
        else:
            letters = [Letter.from_char(ch) for _, _, ch in new_cells]
        tiles = tuple(Placement(r, c, letter) for (r, c, _), letter in zip(new_cells, letters))

        if dictionary is not None:
            self._check_words(snapshot, tiles, direction, dictionary)

        played = score_placement(snapshot, tiles, direction)
        for t in tiles:
            self.cells[t.row, t.col] = t.letter.to_char()
        record = PlayedWord(
            played.main_word.row, played.main_word.col, direction,
            played.main_word.text, tiles, played.score,
        )
        self.moves.append(record)
        log.debug("Placed %s at (%d,%d) %s for %d", record.word, record.row, record.col,
                  direction.arrow, record.score)
        return record

    def apply(self, move: Move, dictionary: WordOracle | None = None, rack: Rack | None = None) -> PlayedWord:
        """Commit a generated move."""
        return self.make_move(move.row, move.col, move.word, move.direction, dictionary, rack)

    @staticmethod
    def _check_words(
        snapshot: BoardSnapshot,
        tiles: tuple[Placement, ...],
        direction: Direction,
        dictionary: WordOracle,
    ) -> None:
        main, cross_words = words_formed(snapshot, tiles, direction)
        if len(main.text) < 2 and not cross_words:
            raise InvalidWordError(main.text, main.row, main.col)
        for formed in [main, *cross_words]:
            if len(formed.text) >= 2 and not dictionary.is_word(formed.text):
                raise InvalidWordError(formed.text, formed.row, formed.col)

    def __str__(self) -> str:
        header = "    " + " ".join(f"{c:>2}" for c in range(self.size))
        sep = "   " + "---" * self.size
        lines = [header, sep]
        for r in range(self.size):
            parts = [f"{r:>2} |"]
            for c in range(self.size):
                val = str(self.cells[r, c])
                if val:
                    parts.append(f" {val} ")
                elif (r, c) == self.start:
                    parts.append(" * ")
                else:
                    parts.append(" . ")
            lines.append("".join(parts))
        return "\n".join(lines)
