"""Super Scrabble move engine: move generation and scoring."""

from superscrabble.constants import (
    CLASSIC,
    CLASSIC_BOARD_SIZE,
    DEFAULT_SS_BOARD_SIZE,
    SUPER_SCRABBLE,
    TILE_VALUES,
    Ruleset,
    ruleset_for_size,
)
from superscrabble.letter import Direction, Letter
from superscrabble.rack import Rack
from superscrabble.errors import (
    ConflictError,
    InsufficientRackLettersError,
    InvalidWordError,
    IsolatedPlacementError,
    NoTilesPlacedError,
    OutOfBoundsError,
    PlacementError,
)
from superscrabble.trie import Trie, TrieNode
from superscrabble.dictionary import Dictionary, PrefixOracle, WordOracle
from superscrabble.snapshot import BoardSnapshot
from superscrabble.move import Move, Placement
from superscrabble.scoring import score, score_placement, words_formed
from superscrabble.board import Board, Bonus, Cell, PlayedWord
from superscrabble.crosscheck import CrossChecks, compute_cross_checks
from superscrabble.engine import MoveGenerator, best_moves, find_anchors

__all__ = [
    "CLASSIC",
    "CLASSIC_BOARD_SIZE",
    "DEFAULT_SS_BOARD_SIZE",
    "SUPER_SCRABBLE",
    "TILE_VALUES",
    "Board",
    "BoardSnapshot",
    "Bonus",
    "Cell",
    "ConflictError",
    "CrossChecks",
    "Dictionary",
    "Direction",
    "InsufficientRackLettersError",
    "InvalidWordError",
    "IsolatedPlacementError",
    "Letter",
    "Move",
    "MoveGenerator",
    "NoTilesPlacedError",
    "OutOfBoundsError",
    "Placement",
    "PlacementError",
    "PlayedWord",
    "PrefixOracle",
    "Rack",
    "Ruleset",
    "Trie",
    "TrieNode",
    "WordOracle",
    "best_moves",
    "compute_cross_checks",
    "find_anchors",
    "ruleset_for_size",
    "score",
    "score_placement",
    "words_formed",
]
