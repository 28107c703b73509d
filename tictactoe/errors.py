"""
Errors raised by the tic-tac-toe rules engine.
"""

from typing import Optional


class TicTacToeError(Exception):
    """Base class for every error the engine raises."""


class InvalidSize(TicTacToeError, ValueError):
    """Board size is below the minimum (or not an integer)."""

    def __init__(self, size, minimum: int):
        self.size = size
        self.minimum = minimum
        super().__init__(
            f"Invalid board size {size!r}, should be {minimum} or above"
        )


class InvalidMarks(TicTacToeError, ValueError):
    """The configured mark set can't be used for a game."""


class InvalidMove(TicTacToeError):
    """
    A move broke one of the placement rules.

    The engine is unchanged when this is raised; retry with a corrected move.
    """

    def __init__(
        self,
        message: str,
        violation=None,
        x: Optional[int] = None,
        y: Optional[int] = None,
        mark: Optional[str] = None,
        expected_mark: Optional[str] = None,
    ):
        super().__init__(message)
        self.violation = violation      # MoveViolation
        self.x = x
        self.y = y
        self.mark = mark
        self.expected_mark = expected_mark  # only set for wrong-turn moves
