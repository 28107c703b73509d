"""
Move validator for the tic-tac-toe rules engine.
Checks that a move follows the placement and turn rules.
"""

from enum import Enum
from typing import Optional, Tuple, List
from dataclasses import dataclass

import numpy as np

from .errors import InvalidMove
from .game_state import GameState


class MoveViolation(Enum):
    """Which placement rule a move broke."""
    OUT_OF_RANGE = "out_of_range"
    ALREADY_TAKEN = "already_taken"
    UNSUPPORTED_MARK = "unsupported_mark"
    WRONG_TURN = "wrong_turn"


def is_coordinate(value) -> bool:
    """True for plain integer indices. Bools and floats are not coordinates."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    violation: Optional[MoveViolation] = None
    expected_mark: Optional[str] = None

    def to_error(self, x: int, y: int, mark: str) -> InvalidMove:
        """Build the exception for a failed validation."""
        return InvalidMove(
            self.error_message,
            violation=self.violation,
            x=x,
            y=y,
            mark=mark,
            expected_mark=self.expected_mark,
        )


class MoveValidator:
    """
    Validates tic-tac-toe moves.

    Rules, checked in this order (the first failure wins):
    1. Coordinates must be on the board
    2. Can only place on empty cells
    3. The mark must be one of the game's marks
    4. The mark must differ from the previous move's mark

    A finished game is not a validation failure; the engine reports it
    as a status after validation passes.
    """

    def validate_move(
        self,
        game_state: GameState,
        x: int,
        y: int,
        mark: str
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            x: Row to place the mark in.
            y: Column to place the mark in.
            mark: Mark being placed.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if x/y are board indices in valid range
        if not (is_coordinate(x) and is_coordinate(y)) or not game_state.in_range(x, y):
            return ValidationResult(
                is_valid=False,
                error_message=f"Move out of range ({x}, {y}), must be 0-{game_state.size - 1}",
                violation=MoveViolation.OUT_OF_RANGE,
            )

        # Check if cell is empty
        if not game_state.is_empty(x, y):
            return ValidationResult(
                is_valid=False,
                error_message=f"Position ({x}, {y}) already taken by '{game_state.get_cell(x, y)}'",
                violation=MoveViolation.ALREADY_TAKEN,
            )

        return self.validate_mark(game_state, mark)

    def validate_mark(self, game_state: GameState, mark: str) -> ValidationResult:
        """
        Validate that a mark may be played next.

        Args:
            game_state: Current game state.
            mark: Mark being placed.

        Returns:
            ValidationResult. For a wrong-turn mark, expected_mark is set.
        """
        if mark not in game_state.marks:
            return ValidationResult(
                is_valid=False,
                error_message=f"Not valid mark '{mark}'",
                violation=MoveViolation.UNSUPPORTED_MARK,
            )

        if game_state.previous_mark is not None and mark == game_state.previous_mark:
            expected = game_state.successor(game_state.previous_mark)
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid mark, '{expected}' was expected instead",
                violation=MoveViolation.WRONG_TURN,
                expected_mark=expected,
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Get all cells a mark could still go in.

        Args:
            game_state: Current game state.

        Returns:
            List of (x, y) positions; empty once the game is over.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()


# Quick test
if __name__ == "__main__":
    print("Testing MoveValidator...")

    game = GameState(size=3)
    validator = MoveValidator()

    result = validator.validate_move(game, 1, 1, "X")
    print(f"Move (1,1,X): valid={result.is_valid}, error={result.error_message}")

    game.place(1, 1, "X")

    result = validator.validate_move(game, 1, 1, "O")
    print(f"Move (1,1,O) again: valid={result.is_valid}, error={result.error_message}")

    result = validator.validate_move(game, 5, 5, "O")
    print(f"Move (5,5,O): valid={result.is_valid}, error={result.error_message}")

    result = validator.validate_move(game, 0, 0, "X")
    print(f"Move (0,0,X): valid={result.is_valid}, error={result.error_message}")

    print(f"Valid moves: {validator.get_valid_moves(game)}")

    print("\nMoveValidator test done!")
