"""Move engine: anchor-based generation (Appel-Jacobson) with prefix pruning."""

from __future__ import annotations

import heapq
import logging
from collections import Counter
from concurrent.futures import Executor
from dataclasses import dataclass
from itertools import repeat
from typing import Iterable, Iterator

import numpy as np

from superscrabble.board import Board
from superscrabble.constants import ALPHABET, BLANK_CHAR
from superscrabble.crosscheck import CrossChecks, compute_cross_checks
from superscrabble.dictionary import WordOracle
from superscrabble.letter import Direction, Letter
from superscrabble.move import Move, Placement
from superscrabble.rack import Rack
from superscrabble.scoring import score_placement
from superscrabble.snapshot import BoardSnapshot

log = logging.getLogger("superscrabble")


def find_anchors(snapshot: BoardSnapshot) -> list[tuple[int, int]]:
    """Empty cells next to a tile, or the start cell on an empty board."""
    occupied = snapshot.letters != ""
    if not occupied.any():
        return [snapshot.start]
    near = np.zeros_like(occupied)
    near[1:, :] |= occupied[:-1, :]
    near[:-1, :] |= occupied[1:, :]
    near[:, 1:] |= occupied[:, :-1]
    near[:, :-1] |= occupied[:, 1:]
    return [(int(r), int(c)) for r, c in np.argwhere(near & ~occupied)]


@dataclass(frozen=True)
class _Search:
    """Everything one direction's anchor searches share (all read-only)."""

    snapshot: BoardSnapshot
    cross_checks: CrossChecks
    anchors: frozenset[tuple[int, int]]
    rack: Counter
    direction: Direction


def _sort_key(m: Move) -> tuple:
    return (-m.score, m.word, m.row, m.col, m.direction.value)


class MoveGenerator:
    """Finds every legal move for a rack.

    Words reading down are found by running the left-to-right search on the
    transposed board. Pass a ``concurrent.futures`` executor to spread
    anchors over workers; the board snapshot they share is read-only.
    """

    def __init__(self, dictionary: WordOracle):
        self.dict = dictionary
        self._has_next_letters = callable(getattr(dictionary, "next_letters", None))
        self._has_prefix = callable(getattr(dictionary, "is_prefix", None))

    # public API

    def generate(
        self,
        board: Board | BoardSnapshot,
        rack: Rack | str | Iterable[Letter | str],
        executor: Executor | None = None,
    ) -> Iterator[Move]:
        """Lazily yield each legal move once, in no particular order."""
        rack = _as_rack(rack)
        if not len(rack):
            return
        snapshot = board.snapshot()
        seen: set[frozenset[tuple[int, int, str]]] = set()
        for search in self._searches(snapshot, rack):
            if executor is None:
                batches: Iterable[Iterable[Move]] = (
                    self._moves_at_anchor(search, anchor) for anchor in sorted(search.anchors)
                )
            else:
                batches = executor.map(
                    self._anchor_batch, repeat(search), sorted(search.anchors),
                )
            found = 0
            for batch in batches:
                for move in batch:
                    if move.key in seen:
                        continue
                    seen.add(move.key)
                    found += 1
                    yield move
            log.debug("%s: %d moves", search.direction.name, found)

    def best_moves(
        self,
        board: Board | BoardSnapshot,
        rack: Rack | str | Iterable[Letter | str],
        top_n: int | None = None,
        executor: Executor | None = None,
    ) -> list[Move]:
        """Legal moves sorted by score, best first (top *top_n* if given)."""
        moves = self.generate(board, rack, executor=executor)
        if top_n is not None:
            return heapq.nsmallest(top_n, moves, key=_sort_key)
        return sorted(moves, key=_sort_key)

    # move generation

    def _searches(self, snapshot: BoardSnapshot, rack: Rack) -> Iterator[_Search]:
        for direction in (Direction.RIGHT, Direction.DOWN):
            oriented = snapshot if direction is Direction.RIGHT else snapshot.transposed()
            anchors = find_anchors(oriented)
            log.debug("%s: %d anchors", direction.name, len(anchors))
            yield _Search(
                snapshot=oriented,
                cross_checks=compute_cross_checks(oriented, self.dict),
                anchors=frozenset(anchors),
                rack=rack.counts,
                direction=direction,
            )

    def _anchor_batch(self, search: _Search, anchor: tuple[int, int]) -> list[Move]:
        return list(self._moves_at_anchor(search, anchor))

    def _moves_at_anchor(self, search: _Search, anchor: tuple[int, int]) -> Iterator[Move]:
        """Moves whose main word places a tile on *anchor*."""
        snap = search.snapshot
        row, anchor_c = anchor
        rack = Counter(search.rack)

        if snap.is_occupied(row, anchor_c - 1):
            # Tiles already left of the anchor are a fixed left part
            c = anchor_c - 1
            while snap.is_occupied(row, c - 1):
                c -= 1
            prefix = snap.run_from(row, c, 0, 1)
            if self._is_prefix(prefix):
                yield from self._extend_right(search, row, anchor_c, prefix, [], rack, anchor_c)
            return

        # Left part from the rack, over empty non-anchor cells only so
        # that no placement is reached from two anchors.
        limit = 0
        c = anchor_c - 1
        while (
            limit < sum(rack.values()) - 1
            and snap.in_bounds(row, c)
            and not snap.is_occupied(row, c)
            and (row, c) not in search.anchors
        ):
            limit += 1
            c -= 1
        yield from self._left_part(search, row, anchor_c, "", [], rack, limit)

    def _left_part(
        self,
        search: _Search,
        row: int,
        anchor_c: int,
        partial: str,
        left: list[Letter],
        rack: Counter,
        limit: int,
    ) -> Iterator[Move]:
        start_c = anchor_c - len(left)
        placed = [Placement(row, start_c + i, letter) for i, letter in enumerate(left)]
        yield from self._extend_right(search, row, anchor_c, partial, placed, rack, anchor_c)
        if limit == 0:
            return
        for ch, tile in self._choices(partial, rack, ALPHABET):
            rack[tile] -= 1
            yield from self._left_part(
                search, row, anchor_c, partial + ch,
                left + [Letter(ch, is_blank=tile == BLANK_CHAR)], rack, limit - 1,
            )
            rack[tile] += 1

    def _extend_right(
        self,
        search: _Search,
        row: int,
        col: int,
        partial: str,
        placed: list[Placement],
        rack: Counter,
        anchor_c: int,
    ) -> Iterator[Move]:
        snap = search.snapshot
        if snap.is_occupied(row, col):
            # Square already has a tile -- the word must follow it
            ch = snap.letter_at(row, col)
            if self._can_follow(partial, ch):
                yield from self._extend_right(search, row, col + 1, partial + ch, placed, rack, anchor_c)
            return

        if col > anchor_c and len(partial) >= 2 and self.dict.is_word(partial):
            yield self._build_move(search, row, col - len(partial), partial, placed)

        if not snap.in_bounds(row, col):
            return
        for ch, tile in self._choices(partial, rack, search.cross_checks.allowed(row, col)):
            rack[tile] -= 1
            letter = Letter(ch, is_blank=tile == BLANK_CHAR)
            yield from self._extend_right(
                search, row, col + 1, partial + ch,
                placed + [Placement(row, col, letter)], rack, anchor_c,
            )
            rack[tile] += 1

    def _choices(
        self, prefix: str, rack: Counter, allowed: frozenset[str],
    ) -> Iterator[tuple[str, str]]:
        """(letter, rack tile) pairs that keep *prefix* on the way to a word."""
        if self._has_next_letters:
            allowed = allowed & self.dict.next_letters(prefix)
        for ch in sorted(allowed):
            if not self._has_next_letters and not self._is_prefix(prefix + ch):
                continue
            if rack[ch] > 0:
                yield ch, ch
            if rack[BLANK_CHAR] > 0:
                # Blank: try every letter (value stays 0)
                yield ch, BLANK_CHAR

    def _can_follow(self, prefix: str, ch: str) -> bool:
        if self._has_next_letters:
            return ch in self.dict.next_letters(prefix)
        return self._is_prefix(prefix + ch)

    def _is_prefix(self, prefix: str) -> bool:
        return not self._has_prefix or self.dict.is_prefix(prefix)

    # scoring

    def _build_move(
        self,
        search: _Search,
        row: int,
        start_c: int,
        word: str,
        placed: list[Placement],
    ) -> Move:
        snap = search.snapshot
        scored = score_placement(snap, placed, Direction.RIGHT)
        new = {p.col: p.letter for p in placed}
        text = "".join(
            new[start_c + i].to_char() if start_c + i in new
            else (ch.lower() if snap.blanks[row, start_c + i] else ch)
            for i, ch in enumerate(word)
        )
        tiles = tuple(placed)
        if search.direction is Direction.DOWN:
            row, start_c = start_c, row
            tiles = tuple(p.transposed() for p in tiles)
        return Move(
            word=text,
            row=row,
            col=start_c,
            direction=search.direction,
            score=scored.score,
            tiles=tiles,
            cross_words=tuple(cw.text for cw in scored.cross_words),
            is_bingo=scored.is_bingo,
        )


def _as_rack(rack: Rack | str | Iterable[Letter | str]) -> Rack:
    if isinstance(rack, Rack):
        return rack
    if isinstance(rack, str):
        return Rack.from_string(rack)
    return Rack(rack)


def best_moves(
    board: Board | BoardSnapshot,
    rack: Rack | str | Iterable[Letter | str],
    dictionary: WordOracle,
    top_n: int | None = None,
    executor: Executor | None = None,
) -> list[Move]:
    """Top moves for *rack* on *board*, highest score first."""
    return MoveGenerator(dictionary).best_moves(board, rack, top_n=top_n, executor=executor)
