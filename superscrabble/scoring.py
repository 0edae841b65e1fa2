"""Scoring of placements: main word, crossing words and the full-rack bonus.

Rules implemented:
- Letter and word multipliers apply only to tiles placed by this move.
- A multiplier under a new tile applies to every word that tile is part of
  (the main word and its crossing word).
- Tiles already on the board count at face value; blanks count 0.
- Placing ``ruleset.rack_size`` tiles in one move earns
  ``ruleset.full_rack_bonus`` once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, NamedTuple

from superscrabble.letter import Direction, Letter
from superscrabble.move import Placement
from superscrabble.snapshot import BoardSnapshot

if TYPE_CHECKING:
    from superscrabble.board import Board
    from superscrabble.move import Move


class FormedWord(NamedTuple):
    """A word spelled on the board by a placement."""

    text: str
    row: int
    col: int
    direction: Direction
    cells: tuple[tuple[int, int], ...]


class ScoredPlay(NamedTuple):
    score: int
    main_word: FormedWord
    cross_words: list[FormedWord]
    is_bingo: bool


def _span(
    snapshot: BoardSnapshot,
    row: int,
    col: int,
    dr: int,
    dc: int,
    placed: dict[tuple[int, int], Letter],
) -> list[tuple[int, int]]:
    """Cells of the contiguous line through (row, col) along (dr, dc)."""

    def filled(r: int, c: int) -> bool:
        return (r, c) in placed or snapshot.is_occupied(r, c)

    while filled(row - dr, col - dc):
        row -= dr
        col -= dc
    cells: list[tuple[int, int]] = []
    while filled(row, col):
        cells.append((row, col))
        row += dr
        col += dc
    return cells


def _formed(
    snapshot: BoardSnapshot,
    cells: list[tuple[int, int]],
    placed: dict[tuple[int, int], Letter],
    direction: Direction,
) -> FormedWord:
    text = "".join(
        placed[rc].char if rc in placed else snapshot.letter_at(*rc)
        for rc in cells
    )
    return FormedWord(text, cells[0][0], cells[0][1], direction, tuple(cells))


def words_formed(
    snapshot: BoardSnapshot,
    tiles: Iterable[Placement],
    direction: Direction,
) -> tuple[FormedWord, list[FormedWord]]:
    """The main word and every crossing word (length >= 2) a placement makes.

    Raises ``ValueError`` if the tiles are not on one contiguous line.
    """
    placed = {(t.row, t.col): t.letter for t in tiles}
    if not placed:
        raise ValueError("A play must place at least one tile")
    line = {r for r, _ in placed} if direction is Direction.RIGHT else {c for _, c in placed}
    if len(line) != 1:
        raise ValueError(f"Tiles do not share a line in direction {direction.name}")

    dr, dc = direction.delta
    first = min(placed)
    main_cells = _span(snapshot, first[0], first[1], dr, dc, placed)
    if not placed.keys() <= set(main_cells):
        raise ValueError("Tiles do not form a contiguous word")
    main = _formed(snapshot, main_cells, placed, direction)

    cross_words: list[FormedWord] = []
    for r, c in main_cells:
        if (r, c) not in placed:
            continue
        cells = _span(snapshot, r, c, dc, dr, {(r, c): placed[(r, c)]})
        if len(cells) > 1:
            cross_words.append(_formed(snapshot, cells, placed, direction.opposite()))
    return main, cross_words


def score_word(
    snapshot: BoardSnapshot,
    word: FormedWord,
    placed: dict[tuple[int, int], Letter],
) -> int:
    total = 0
    word_mult = 1
    for r, c in word.cells:
        letter = placed.get((r, c))
        if letter is None:
            # Existing tile on board -- no bonus
            total += snapshot.tile_value(r, c)
            continue
        value = 0 if letter.is_blank else snapshot.ruleset.value_of(letter.char)
        total += value * int(snapshot.letter_mult[r, c])
        word_mult *= int(snapshot.word_mult[r, c])
    return total * word_mult


def score_placement(
    snapshot: BoardSnapshot,
    tiles: Iterable[Placement],
    direction: Direction,
) -> ScoredPlay:
    """Score *tiles* placed on *snapshot* reading in *direction*."""
    tiles = list(tiles)
    placed = {(t.row, t.col): t.letter for t in tiles}
    main, cross_words = words_formed(snapshot, tiles, direction)

    total = sum(score_word(snapshot, cw, placed) for cw in cross_words)
    # A lone tile's one-letter "main word" only counts when nothing crosses it.
    if len(main.text) > 1 or not cross_words:
        total += score_word(snapshot, main, placed)

    is_bingo = len(tiles) == snapshot.ruleset.rack_size
    if is_bingo:
        total += snapshot.ruleset.full_rack_bonus
    return ScoredPlay(total, main, cross_words, is_bingo)


def score(board: Board | BoardSnapshot, move: Move) -> int:
    """Points *move* earns on *board* (the board as it was before the move)."""
    return score_placement(board.snapshot(), move.tiles, move.direction).score
