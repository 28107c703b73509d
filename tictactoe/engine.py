"""
Rules engine for N x N tic-tac-toe.

Ties together:
- GameState (board, turn state, move count)
- MoveValidator (placement and turn rules)
- WinChecker (win/draw detection on the placed cell)

The caller supplies moves and reads back the status; nothing here
parses input, picks moves, or stores games.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, List

import numpy as np

from .config import EngineConfig
from .errors import InvalidMarks, InvalidSize
from .game_state import EngineState, GameState, GameStatus, Move
from .move_validator import MoveValidator, is_coordinate
from .win_checker import WinChecker

log = logging.getLogger("tictactoe.engine")


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only copy of everything a caller may want to display."""
    size: int
    marks: Tuple[str, ...]
    board: Tuple[Tuple[Optional[str], ...], ...]
    move_count: int
    is_finished: bool
    state: EngineState
    previous_mark: Optional[str]
    next_mark: Optional[str]
    winner: Optional[str]
    winning_line: Optional[Tuple[Tuple[int, int], ...]]


class GameEngine:
    """
    One game of N x N tic-tac-toe.

    Game flow:
    1. Create the engine with a board size (and optionally the marks)
    2. Call move(x, y, mark) with marks in turn order
    3. Each move returns CONTINUE until one returns WINNER or DRAW
    4. Later moves return ALREADY_FINISHED until reset()

    Rule violations raise InvalidMove and leave the game untouched.
    """

    def __init__(
        self,
        size: Optional[int] = None,
        marks: Optional[Sequence[str]] = None,
        config: Optional[EngineConfig] = None
    ):
        """
        Initialize the engine.

        Args:
            size: Board size (N for an N x N board). Defaults to the config's.
            marks: Legal marks in turn order. Defaults to the config's.
            config: Engine configuration.

        Raises:
            InvalidSize: If size is below the minimum.
            InvalidMarks: If the marks can't be used for a game.
        """
        self.config = config or EngineConfig()
        self._marks = self._check_marks(self.config.resolve_marks(marks))

        if size is None:
            size = self.config.DEFAULT_BOARD_SIZE
        size = self._check_size(size)

        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self._state = GameState(size=size, marks=self._marks)

        log.debug("New %dx%d game with marks %s", size, size, self._marks)

    def _check_size(self, size) -> int:
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise InvalidSize(size, self.config.MIN_BOARD_SIZE)
        if size < self.config.MIN_BOARD_SIZE:
            raise InvalidSize(size, self.config.MIN_BOARD_SIZE)
        return int(size)

    def _check_marks(self, marks: Tuple[str, ...]) -> Tuple[str, ...]:
        if len(marks) < self.config.MIN_MARKS:
            raise InvalidMarks(
                f"At least {self.config.MIN_MARKS} marks are needed, got {len(marks)}"
            )
        for mark in marks:
            if not isinstance(mark, str) or not mark:
                raise InvalidMarks(f"Marks must be non-empty strings, got {mark!r}")
        if len(set(marks)) != len(marks):
            raise InvalidMarks(f"Marks must be distinct, got {marks}")
        return marks

    def reset(self, size: Optional[int] = None) -> None:
        """
        Start a new game, discarding the current board.

        Args:
            size: Board size for the new game, or None to keep the current one.

        Raises:
            InvalidSize: If size is below the minimum. The current game
                is kept as it was.
        """
        if size is None:
            size = self._state.size
        size = self._check_size(size)

        self._state = GameState(size=size, marks=self._marks)
        log.debug("Reset to a fresh %dx%d game", size, size)

    def move(self, x: int, y: int, mark: str) -> GameStatus:
        """
        Place a mark.

        Args:
            x: Row index, 0 to size - 1.
            y: Column index, 0 to size - 1.
            mark: One of the game's marks, different from the last one played.

        Returns:
            CONTINUE, WINNER, DRAW, or ALREADY_FINISHED (game was over;
            nothing placed).

        Raises:
            InvalidMove: Out of range, cell taken, unknown mark, or wrong turn.
                Checked in that order.
        """
        result = self.validator.validate_move(self._state, x, y, mark)
        if not result.is_valid:
            log.debug("Rejected move (%s, %s, %r): %s", x, y, mark, result.error_message)
            raise result.to_error(x, y, mark)

        if self._state.is_game_over:
            log.info("Game is already over, ignoring move (%d, %d, '%s')", x, y, mark)
            return GameStatus.ALREADY_FINISHED

        x, y = int(x), int(y)
        placed = self._state.place(x, y, mark)
        log.debug("Move %d: '%s' at (%d, %d)", placed.move_number, mark, x, y)

        return self.win_checker.update_game_state(self._state, x, y, mark)

    # ---------------- Read-only accessors -----------------
    @property
    def size(self) -> int:
        return self._state.size

    @property
    def marks(self) -> Tuple[str, ...]:
        return self._marks

    @property
    def board(self) -> List[List[Optional[str]]]:
        """Copy of the board. None means an empty cell."""
        return self._state.board.tolist()

    def cell(self, x: int, y: int) -> Optional[str]:
        if not (is_coordinate(x) and is_coordinate(y)) or not self._state.in_range(x, y):
            raise IndexError(f"Cell ({x}, {y}) is off the {self.size}x{self.size} board")
        return self._state.get_cell(x, y)

    @property
    def move_count(self) -> int:
        return self._state.move_count

    @property
    def is_finished(self) -> bool:
        return self._state.is_game_over

    @property
    def previous_mark(self) -> Optional[str]:
        return self._state.previous_mark

    @property
    def next_mark(self) -> Optional[str]:
        """Mark expected next, or None before the first move."""
        return self._state.next_mark()

    @property
    def winner(self) -> Optional[str]:
        return self._state.winner

    @property
    def winning_line(self) -> Optional[List[Tuple[int, int]]]:
        line = self._state.winning_line
        return list(line) if line is not None else None

    @property
    def state(self) -> EngineState:
        return self._state.state

    @property
    def moves(self) -> Tuple[Move, ...]:
        return tuple(self._state.moves)

    def valid_moves(self) -> List[Tuple[int, int]]:
        """Empty cells still open to a move; empty once the game is over."""
        return self.validator.get_valid_moves(self._state)

    def snapshot(self) -> GameSnapshot:
        line = self._state.winning_line
        return GameSnapshot(
            size=self.size,
            marks=self._marks,
            board=tuple(tuple(row) for row in self._state.board.tolist()),
            move_count=self.move_count,
            is_finished=self.is_finished,
            state=self.state,
            previous_mark=self.previous_mark,
            next_mark=self.next_mark,
            winner=self.winner,
            winning_line=tuple(line) if line is not None else None,
        )

    # ---------------- Display -----------------
    def render(self) -> str:
        return self._state.render(
            empty_glyph=self.config.EMPTY_GLYPH,
            show_coordinates=self.config.SHOW_COORDINATES,
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"GameEngine(size={self.size}, marks={self._marks}, "
            f"state={self.state.value}, moves={self.move_count})"
        )


# Quick test
if __name__ == "__main__":
    print("Testing GameEngine...")

    engine = GameEngine(3)

    for x, y, mark in [(0, 0, "X"), (2, 0, "O"), (0, 1, "X"), (1, 1, "O"), (0, 2, "X"), (2, 1, "O")]:
        status = engine.move(x, y, mark)
        print(f"\n{mark} moves to ({x}, {y}) -> {status.value}")
        print(engine)

    print(f"\n{engine!r}")
    print("\nGameEngine test done!")
