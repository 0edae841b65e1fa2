import numpy as np
import pytest

from superscrabble import (
    Board,
    Bonus,
    ConflictError,
    Dictionary,
    Direction,
    InsufficientRackLettersError,
    InvalidWordError,
    IsolatedPlacementError,
    Letter,
    NoTilesPlacedError,
    OutOfBoundsError,
    Rack,
)

RIGHT, DOWN = Direction.RIGHT, Direction.DOWN


def board_with_hello() -> Board:
    board = Board(15)
    board.make_move(7, 7, "HELLO", RIGHT)
    return board


def test_default_board_is_super_scrabble():
    board = Board()
    assert board.size == Board.DEFAULT_SS_BOARD_SIZE == 21
    assert board.start == (10, 10)
    assert board.is_empty()
    assert board.get(0, 0).bonus == Bonus(1, 4)
    assert board.get(10, 10).bonus == Bonus(1, 2)
    assert board.get(2, 5).bonus == Bonus(4, 1)


def test_classic_layout():
    board = Board.new(15)
    assert board.start == (7, 7)
    assert board.get(7, 7).bonus == Bonus(1, 2)
    assert board.get(0, 0).bonus == Bonus(1, 3)
    assert board.get(0, 3).bonus == Bonus(2, 1)
    assert board.get(1, 5).bonus == Bonus(3, 1)


def test_layouts_are_symmetric():
    for size in (15, 21):
        board = Board(size)
        for grid in (board.letter_mult, board.word_mult):
            assert np.array_equal(grid, grid.T)
            assert np.array_equal(grid, grid[::-1, :])


def test_unknown_size_has_no_bonuses():
    board = Board(9)
    assert board.start == (4, 4)
    assert all(board.get(r, c).bonus == Bonus(1, 1) for r in range(9) for c in range(9))


def test_too_small_board_rejected():
    with pytest.raises(ValueError):
        Board(1)


def test_get_off_board_is_none():
    board = Board(15)
    assert board.get(-1, 0) is None
    assert board.get(0, 15) is None
    assert board.get(3, 3).is_empty


def test_make_move_places_tiles():
    board = board_with_hello()
    assert not board.is_empty()
    assert board.count_tiles() == 5
    assert board.get(7, 9).letter == Letter("L")
    assert [(r, c, l.to_char()) for r, c, l in board.tiles()] == [
        (7, 7, "H"), (7, 8, "E"), (7, 9, "L"), (7, 10, "L"), (7, 11, "O"),
    ]


def test_make_move_records_played_word():
    board = board_with_hello()
    record = board.moves[-1]
    assert (record.row, record.col, record.word, record.direction) == (7, 7, "HELLO", RIGHT)
    # H on the center DW, O on a DL: (4 + 1 + 1 + 1 + 2) * 2
    assert record.score == 18


def test_make_move_accepts_direction_codes_and_letters():
    board = Board(15)
    board.make_move(6, 7, [Letter("H"), Letter("I")], "V")
    assert board.get(7, 7).letter == Letter("I")


def test_conflict_leaves_board_unchanged():
    board = board_with_hello()
    before = board.cells.copy()
    with pytest.raises(ConflictError) as exc:
        board.make_move(7, 7, "JELLO", RIGHT)
    assert (exc.value.row, exc.value.col) == (7, 7)
    assert np.array_equal(board.cells, before)
    assert len(board.moves) == 1


def test_out_of_bounds():
    board = Board(15)
    with pytest.raises(OutOfBoundsError):
        board.make_move(7, 12, "HELLO", RIGHT)
    with pytest.raises(OutOfBoundsError):
        board.make_move(-1, 7, "HELLO", DOWN)


def test_first_move_must_cover_start():
    board = Board(15)
    with pytest.raises(IsolatedPlacementError):
        board.make_move(0, 0, "HI", RIGHT)
    assert board.is_empty()


def test_later_move_must_touch_existing_tiles():
    board = board_with_hello()
    with pytest.raises(IsolatedPlacementError):
        board.make_move(0, 0, "HI", RIGHT)
    # Adjacent without reusing a tile is fine
    board.make_move(8, 11, "HI", RIGHT)


def test_placing_nothing_new_is_rejected():
    board = board_with_hello()
    with pytest.raises(NoTilesPlacedError):
        board.make_move(7, 7, "HELLO", RIGHT)


def test_reusing_existing_tile_across():
    board = board_with_hello()
    board.make_move(6, 9, "OLE", DOWN)
    assert board.get(6, 9).letter == Letter("O")
    assert board.get(8, 9).letter == Letter("E")
    assert [t.row for t in board.moves[-1].tiles] == [6, 8]


def test_dictionary_validates_extended_main_word():
    board = board_with_hello()
    with pytest.raises(InvalidWordError) as exc:
        board.make_move(7, 12, "S", RIGHT, dictionary=Dictionary(["HELLO"]))
    assert exc.value.word == "HELLOS"

    record = board.make_move(7, 12, "S", RIGHT, dictionary=Dictionary(["HELLO", "HELLOS"]))
    assert (record.row, record.col, record.word) == (7, 7, "HELLOS")


def test_dictionary_validates_crossing_words():
    board = board_with_hello()
    with pytest.raises(InvalidWordError) as exc:
        board.make_move(8, 7, "AT", RIGHT, dictionary=Dictionary(["AT", "HA"]))
    assert exc.value.word == "ET"
    assert not board.is_occupied(8, 7)


def test_rack_must_supply_new_tiles():
    board = Board(15)
    with pytest.raises(InsufficientRackLettersError):
        board.make_move(7, 7, "HELLO", RIGHT, rack=Rack.from_string("HELO"))
    assert board.is_empty()


def test_rack_blank_fills_the_gap():
    board = Board(15)
    board.make_move(7, 7, "HELLO", RIGHT, rack=Rack.from_string("HEL?O"))
    assert board.get(7, 10).letter == Letter("L", is_blank=True)
    # Blank L scores nothing: (4 + 1 + 1 + 0 + 2) * 2
    assert board.moves[-1].score == 16


def test_index_conversion_round_trips():
    board = Board(21)
    assert board.to_index(2, 3) == 45
    assert board.from_index(45) == (2, 3)


def test_copy_is_independent():
    board = board_with_hello()
    clone = board.copy()
    clone.make_move(8, 7, "A", RIGHT)
    assert clone.is_occupied(8, 7)
    assert not board.is_occupied(8, 7)


def test_str_shows_tiles_and_start():
    assert " * " in str(Board(15))
    assert " H " in str(board_with_hello())
