import numpy as np

from superscrabble import (
    CLASSIC,
    Board,
    BoardSnapshot,
    Dictionary,
    Direction,
    compute_cross_checks,
)
from superscrabble.constants import ALPHABET

WORDS = Dictionary(["HELLO", "AH", "EH", "OH", "HA", "HE", "CAT", "COT", "CUT", "TA", "TO"])


def snapshot_from(cells: dict[tuple[int, int], str], size: int = 5) -> BoardSnapshot:
    grid = np.full((size, size), "", dtype="<U1")
    for (r, c), ch in cells.items():
        grid[r, c] = ch
    plain = np.ones((size, size), dtype=np.uint8)
    return BoardSnapshot.from_cells(grid, plain, plain, (size // 2, size // 2), CLASSIC)


def test_cells_above_and_below_a_word():
    board = Board(15)
    board.make_move(7, 7, "HELLO", Direction.RIGHT)
    checks = compute_cross_checks(board.snapshot(), WORDS)
    assert checks.allowed(6, 7) == {"A", "E", "O"}
    assert checks.allowed(8, 7) == {"A", "E"}
    assert checks.allowed(6, 9) == frozenset()


def test_unconstrained_cells_allow_everything():
    board = Board(15)
    board.make_move(7, 7, "HELLO", Direction.RIGHT)
    checks = compute_cross_checks(board.snapshot(), WORDS)
    # Diagonal and in-line neighbours do not constrain left-to-right play
    assert not checks.is_constrained(6, 6)
    assert not checks.is_constrained(7, 6)
    assert checks.allowed(7, 6) == ALPHABET
    assert len(checks) == 10


def test_gap_between_two_runs():
    checks = compute_cross_checks(snapshot_from({(1, 2): "C", (3, 2): "T"}), WORDS)
    assert checks.allowed(2, 2) == {"A", "O", "U"}
    assert checks.allowed(0, 2) == frozenset()
    assert checks.allowed(4, 2) == {"A", "O"}


def test_blank_tiles_check_as_their_letter():
    upper = compute_cross_checks(snapshot_from({(1, 2): "C", (3, 2): "T"}), WORDS)
    lower = compute_cross_checks(snapshot_from({(1, 2): "c", (3, 2): "T"}), WORDS)
    assert upper == lower


def test_transposed_snapshot_checks_the_other_direction():
    board = Board(15)
    board.make_move(7, 7, "HELLO", Direction.RIGHT)
    checks = compute_cross_checks(board.snapshot().transposed(), WORDS)
    # Left of H / right of O in board coordinates
    assert checks.allowed(6, 7) == frozenset()
    assert checks.allowed(12, 7) == frozenset()
    assert len(checks) == 2


def test_recomputing_is_idempotent():
    board = Board(15)
    board.make_move(7, 7, "HELLO", Direction.RIGHT)
    snapshot = board.snapshot()
    assert compute_cross_checks(snapshot, WORDS) == compute_cross_checks(snapshot, WORDS)
