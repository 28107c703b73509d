"""
Win checker for the tic-tac-toe rules engine.
Checks whether the last move won the game or filled the board.
"""

import logging
from typing import Optional, List, Tuple

import numpy as np

from .game_state import GameState, GameStatus

log = logging.getLogger("tictactoe.win_checker")


class WinChecker:
    """
    Checks for win conditions after a move.

    Win condition: `size` marks of the same kind in a row
    (horizontally, vertically, or diagonally).

    Only the lines through the placed cell can have changed, so only
    those are checked: its row, its column, and a diagonal only when
    the cell lies on it.
    """

    def lines_through(self, size: int, x: int, y: int) -> List[List[Tuple[int, int]]]:
        """
        Get every full line that passes through a cell.

        Args:
            size: Board size.
            x: Row of the cell.
            y: Column of the cell.

        Returns:
            Lines as lists of (x, y) positions: row, column, then
            main diagonal and anti-diagonal when the cell is on them.
        """
        lines = [
            [(x, j) for j in range(size)],
            [(i, y) for i in range(size)],
        ]
        if x == y:
            lines.append([(i, i) for i in range(size)])
        if x + y == size - 1:
            lines.append([(i, size - 1 - i) for i in range(size)])
        return lines

    def _line_values(self, board: np.ndarray, x: int, y: int) -> List[Tuple[List[Tuple[int, int]], np.ndarray]]:
        # Same order as lines_through, but as numpy views
        size = board.shape[0]
        lines = self.lines_through(size, x, y)
        values = [board[x, :], board[:, y]]
        if x == y:
            values.append(np.diagonal(board))
        if x + y == size - 1:
            values.append(np.diagonal(np.fliplr(board)))
        return list(zip(lines, values))

    def check_move(
        self,
        game_state: GameState,
        x: int,
        y: int,
        mark: str
    ) -> Optional[List[Tuple[int, int]]]:
        """
        Check if the mark just placed at (x, y) completed a line.

        Args:
            game_state: The game state, with the mark already placed.
            x: Row of the placed mark.
            y: Column of the placed mark.
            mark: The placed mark.

        Returns:
            The first completed line as a list of (x, y), or None.
        """
        for line, values in self._line_values(game_state.board, x, y):
            if np.all(values == mark):
                return line

        return None

    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the board is full.

        Only meaningful once the last move is known not to have won.
        """
        return game_state.move_count == game_state.size * game_state.size

    def update_game_state(
        self,
        game_state: GameState,
        x: int,
        y: int,
        mark: str
    ) -> GameStatus:
        """
        Update the game state with winner/draw information after a move.

        Args:
            game_state: The game state to update.
            x: Row of the placed mark.
            y: Column of the placed mark.
            mark: The placed mark.

        Returns:
            WINNER, DRAW, or CONTINUE.
        """
        line = self.check_move(game_state, x, y, mark)

        if line is not None:
            game_state.winner = mark
            game_state.winning_line = line
            game_state.is_game_over = True
            log.info("'%s' wins on move %d with line %s", mark, game_state.move_count, line)
            return GameStatus.WINNER

        if self.check_draw(game_state):
            game_state.is_draw = True
            game_state.is_game_over = True
            log.info("Draw after %d moves", game_state.move_count)
            return GameStatus.DRAW

        return GameStatus.CONTINUE


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()

    # Row 0 win, completed at (0, 2)
    game = GameState(size=3)
    for x, y, mark in [(0, 0, "X"), (2, 0, "O"), (0, 1, "X"), (1, 1, "O"), (0, 2, "X")]:
        game.place(x, y, mark)
    status = checker.update_game_state(game, 0, 2, "X")
    print(f"Test 1 (line): status = {status}, line = {game.winning_line}")
    assert status == GameStatus.WINNER

    # Off-diagonal cell only checks its row and column
    lines = checker.lines_through(3, 0, 1)
    print(f"Test 2 (lines through (0, 1)): {len(lines)} lines")
    assert len(lines) == 2

    # Centre of an odd board is on both diagonals
    lines = checker.lines_through(3, 1, 1)
    print(f"Test 3 (lines through (1, 1)): {len(lines)} lines")
    assert len(lines) == 4

    print("\nWinChecker test done!")
