"""Placement errors reported by ``Board.make_move``."""

from __future__ import annotations


class PlacementError(ValueError):
    """Base class for every illegal placement."""

    def __init__(self, message: str, row: int | None = None, col: int | None = None):
        super().__init__(message)
        self.row = row
        self.col = col


class OutOfBoundsError(PlacementError):
    """The word runs past the edge of the board."""


class ConflictError(PlacementError):
    """A target cell already holds a different letter."""


class IsolatedPlacementError(PlacementError):
    """The word neither touches existing tiles nor covers the start cell."""


class NoTilesPlacedError(PlacementError):
    """Every target cell was already occupied."""


class InvalidWordError(PlacementError):
    """The main word or a crossing word is not in the dictionary."""

    def __init__(self, word: str, row: int | None = None, col: int | None = None):
        super().__init__(f"'{word}' is not a valid word", row, col)
        self.word = word


class InsufficientRackLettersError(PlacementError):
    """The rack cannot supply the tiles the placement needs."""

    def __init__(self, missing: list[str]):
        super().__init__(f"Rack is missing: {' '.join(missing)}")
        self.missing = missing
