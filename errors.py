# errors.py
# Error taxonomy shared by the board, pieces and solver

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by the puzzle core."""


class InvalidDate(PuzzleError, ValueError):
    """Month or day outside the range the board can represent."""

    def __init__(self, month: int, day: int, reason: str):
        self.month = month
        self.day = day
        super().__init__(f"cannot place {month}/{day} on the board: {reason}")


class PuzzleDefinitionError(PuzzleError, RuntimeError):
    """The static board or piece data is inconsistent."""
