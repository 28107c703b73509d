"""
Engine configuration for the tic-tac-toe rules engine.
Board limits, default marks, and rendering glyphs.
"""

from typing import Optional, Sequence, Tuple

from .errors import InvalidMarks


class EngineConfig:
    """
    Configuration class for engine settings.
    Subclass or pass a custom instance to change the defaults.
    """

    # ==================== BOARD SETTINGS ====================
    # Smallest square board the rules make sense for
    MIN_BOARD_SIZE = 3

    # Size used when the caller doesn't give one
    DEFAULT_BOARD_SIZE = 3

    # ==================== MARK SETTINGS ====================
    # Legal marks, in turn order. The first mark after the last is the first.
    DEFAULT_MARKS = ("X", "O")

    # A game needs at least two marks to alternate
    MIN_MARKS = 2

    # ==================== RENDERING ====================
    EMPTY_GLYPH = " "
    SHOW_COORDINATES = True

    def resolve_marks(self, marks: Optional[Sequence[str]] = None) -> Tuple[str, ...]:
        """
        Get the mark order to use for a game.

        Args:
            marks: Marks given by the caller, or None for the defaults.

        Returns:
            The marks as a tuple, in turn order.

        Raises:
            InvalidMarks: If marks is a single string rather than a sequence.
        """
        if marks is None:
            return tuple(self.DEFAULT_MARKS)
        if isinstance(marks, str):
            raise InvalidMarks(f"Marks must be a sequence of strings, got the string {marks!r}")
        return tuple(marks)
