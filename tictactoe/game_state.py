"""
Game state for the tic-tac-toe rules engine.
Tracks the board, whose mark went last, and the move count.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import EngineConfig


class GameStatus(Enum):
    """Outcome of a move attempt."""
    CONTINUE = "continue"
    WINNER = "winner"
    DRAW = "draw"
    ALREADY_FINISHED = "already_finished"


class EngineState(Enum):
    """Where the game is in its lifecycle."""
    FRESH = "fresh"
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class Move:
    """
    A placed mark.
    """
    x: int                  # Row index
    y: int                  # Column index
    mark: str               # Mark placed (e.g., "X")
    move_number: int        # 1 for the first move of the game


def new_board(size: int) -> np.ndarray:
    """Create an empty size x size board. None means an empty cell."""
    return np.full((size, size), None, dtype=object)


@dataclass(eq=False)
class GameState:
    """
    The complete state of one game.

    Tracks:
    - The NxN board (which mark is where)
    - The mark used by the last move (decides the next legal mark)
    - How many marks have been placed (decides draws)
    - Move history
    - Game result (won, drawn, or still going)
    """

    size: int
    marks: Tuple[str, ...] = EngineConfig.DEFAULT_MARKS

    # size x size object array, filled in __post_init__ when not given
    board: Optional[np.ndarray] = None

    previous_mark: Optional[str] = None
    move_count: int = 0
    moves: List[Move] = field(default_factory=list)

    # Game result
    winner: Optional[str] = None
    winning_line: Optional[List[Tuple[int, int]]] = None
    is_draw: bool = False
    is_game_over: bool = False

    def __post_init__(self):
        if self.board is None:
            self.board = new_board(self.size)

    @property
    def state(self) -> EngineState:
        if self.winner is not None:
            return EngineState.WON
        if self.is_draw:
            return EngineState.DRAWN
        if self.move_count == 0:
            return EngineState.FRESH
        return EngineState.IN_PROGRESS

    def in_range(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def is_empty(self, x: int, y: int) -> bool:
        return self.board[x, y] is None

    def get_cell(self, x: int, y: int) -> Optional[str]:
        return self.board[x, y]

    def successor(self, mark: str) -> str:
        """
        Get the mark that follows `mark` in turn order.
        Wraps to the first mark after the last one.
        """
        index = self.marks.index(mark)
        return self.marks[(index + 1) % len(self.marks)]

    def next_mark(self) -> Optional[str]:
        """
        Get the mark expected on the next move.

        Returns:
            The successor of the last mark played, or None if no move has
            been made yet (any mark may open).
        """
        if self.previous_mark is None:
            return None
        return self.successor(self.previous_mark)

    def place(self, x: int, y: int, mark: str) -> Move:
        """
        Put a mark on the board and update the counters.
        No rule checks happen here; validate the move first.

        Args:
            x: Row index.
            y: Column index.
            mark: Mark to place.

        Returns:
            The recorded move.
        """
        self.board[x, y] = mark
        self.previous_mark = mark
        self.move_count += 1

        move = Move(x=x, y=y, mark=mark, move_number=self.move_count)
        self.moves.append(move)
        return move

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (x, y) tuples.
        """
        empty = []
        for x in range(self.size):
            for y in range(self.size):
                if self.board[x, y] is None:
                    empty.append((x, y))
        return empty

    def render(self, empty_glyph: str = " ", show_coordinates: bool = True) -> str:
        """
        Draw the board as a box grid.

        Rows are x, columns are y. Presentation only.
        """
        n = self.size
        width = max(len(mark) for mark in self.marks) + 2
        label_width = len(str(n - 1)) + 1 if show_coordinates else 0
        pad = " " * label_width
        bar = "─" * width

        lines = []
        if show_coordinates:
            lines.append(pad + " " + " ".join(str(y).center(width) for y in range(n)))
        lines.append(pad + "┌" + "┬".join([bar] * n) + "┐")

        for x in range(n):
            cells = []
            for y in range(n):
                mark = self.board[x, y]
                cells.append((empty_glyph if mark is None else mark).center(width))
            label = str(x).ljust(label_width) if show_coordinates else ""
            lines.append(label + "│" + "│".join(cells) + "│")

            if x < n - 1:
                lines.append(pad + "├" + "┼".join([bar] * n) + "┤")

        lines.append(pad + "└" + "┴".join([bar] * n) + "┘")
        return "\n".join(lines)


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState(size=3)

    for x, y, mark in [(1, 1, "X"), (0, 0, "O"), (0, 2, "X")]:
        print(f"\n{mark} moves to ({x}, {y})")
        game.place(x, y, mark)
        print(game.render())

    print(f"\nNext mark: {game.next_mark()}")
    print(f"State: {game.state.value}")
    print("\nGame state test done!")
