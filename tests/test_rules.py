import unittest

from tictactoe.config import EngineConfig
from tictactoe.errors import InvalidMove
from tictactoe.game_state import EngineState, GameState, GameStatus
from tictactoe.move_validator import MoveValidator, MoveViolation
from tictactoe.win_checker import WinChecker


class GameStateTests(unittest.TestCase):
    def test_new_state_has_empty_board(self):
        state = GameState(size=4)
        self.assertEqual(state.board.shape, (4, 4))
        self.assertEqual(len(state.get_empty_cells()), 16)
        self.assertEqual(state.state, EngineState.FRESH)
        self.assertIsNone(state.next_mark())

    def test_place_updates_counters(self):
        state = GameState(size=3)
        move = state.place(2, 1, "O")
        self.assertEqual(move.move_number, 1)
        self.assertEqual(state.get_cell(2, 1), "O")
        self.assertEqual(state.previous_mark, "O")
        self.assertEqual(state.move_count, 1)
        self.assertNotIn((2, 1), state.get_empty_cells())
        self.assertEqual(state.state, EngineState.IN_PROGRESS)

    def test_default_marks_come_from_config(self):
        self.assertEqual(GameState(size=3).marks, EngineConfig.DEFAULT_MARKS)

    def test_successor_wraps(self):
        state = GameState(size=3, marks=("A", "B", "C"))
        self.assertEqual(state.successor("A"), "B")
        self.assertEqual(state.successor("B"), "C")
        self.assertEqual(state.successor("C"), "A")

    def test_render_fits_wide_marks(self):
        state = GameState(size=3, marks=("XX", "O"))
        state.place(0, 0, "XX")
        lines = state.render(show_coordinates=False).splitlines()
        self.assertEqual(len(lines), 7)
        self.assertTrue(lines[1].startswith("│ XX │"))
        self.assertEqual(len({len(line) for line in lines}), 1)


class MoveValidatorTests(unittest.TestCase):
    def setUp(self):
        self.validator = MoveValidator()
        self.state = GameState(size=3)

    def test_valid_move(self):
        result = self.validator.validate_move(self.state, 1, 1, "X")
        self.assertTrue(result.is_valid)
        self.assertIsNone(result.error_message)

    def test_failures_in_order(self):
        self.state.place(0, 0, "X")
        cases = [
            ((3, 0, "Q"), MoveViolation.OUT_OF_RANGE),
            ((0, 0, "Q"), MoveViolation.ALREADY_TAKEN),
            ((1, 0, "Q"), MoveViolation.UNSUPPORTED_MARK),
            ((1, 0, "X"), MoveViolation.WRONG_TURN),
        ]
        for (x, y, mark), violation in cases:
            result = self.validator.validate_move(self.state, x, y, mark)
            self.assertFalse(result.is_valid)
            self.assertEqual(result.violation, violation)

    def test_bool_and_float_coordinates_are_out_of_range(self):
        for x, y in [(True, 0), (0, True), (1.0, 1), (1, 2.0)]:
            result = self.validator.validate_move(self.state, x, y, "X")
            self.assertFalse(result.is_valid)
            self.assertEqual(result.violation, MoveViolation.OUT_OF_RANGE)

    def test_wrong_turn_result_builds_error(self):
        self.state.place(0, 0, "O")
        result = self.validator.validate_move(self.state, 1, 1, "O")
        self.assertEqual(result.expected_mark, "X")
        error = result.to_error(1, 1, "O")
        self.assertIsInstance(error, InvalidMove)
        self.assertEqual(error.expected_mark, "X")
        self.assertEqual(str(error), "Invalid mark, 'X' was expected instead")

    def test_no_valid_moves_once_over(self):
        self.assertEqual(len(self.validator.get_valid_moves(self.state)), 9)
        self.state.is_game_over = True
        self.assertEqual(self.validator.get_valid_moves(self.state), [])


class WinCheckerTests(unittest.TestCase):
    def setUp(self):
        self.checker = WinChecker()

    def test_lines_through_edge_cell(self):
        lines = self.checker.lines_through(3, 0, 1)
        self.assertEqual(lines, [
            [(0, 0), (0, 1), (0, 2)],
            [(0, 1), (1, 1), (2, 1)],
        ])

    def test_lines_through_corners(self):
        main = self.checker.lines_through(4, 3, 3)
        self.assertEqual(len(main), 3)
        self.assertEqual(main[2], [(0, 0), (1, 1), (2, 2), (3, 3)])

        anti = self.checker.lines_through(4, 0, 3)
        self.assertEqual(len(anti), 3)
        self.assertEqual(anti[2], [(0, 3), (1, 2), (2, 1), (3, 0)])

    def test_center_of_odd_board_has_both_diagonals(self):
        self.assertEqual(len(self.checker.lines_through(5, 2, 2)), 4)
        # Even boards have no cell on both diagonals
        for x in range(4):
            for y in range(4):
                self.assertLessEqual(len(self.checker.lines_through(4, x, y)), 3)

    def test_only_lines_through_the_placed_cell_count(self):
        state = GameState(size=3)
        for x, y, mark in [(0, 0, "X"), (1, 0, "O"), (0, 1, "X"), (1, 1, "O"), (0, 2, "X")]:
            state.place(x, y, mark)
        # Row 0 is full of X but (2, 2) is not on it
        state.place(2, 2, "O")
        self.assertIsNone(self.checker.check_move(state, 2, 2, "O"))
        self.assertEqual(self.checker.check_move(state, 0, 2, "X"), [(0, 0), (0, 1), (0, 2)])

    def test_update_game_state_statuses(self):
        state = GameState(size=3)
        state.place(1, 1, "X")
        self.assertEqual(self.checker.update_game_state(state, 1, 1, "X"), GameStatus.CONTINUE)
        self.assertFalse(state.is_game_over)

    def test_draw_when_board_full(self):
        state = GameState(size=3)
        moves = [
            (0, 0, "O"), (0, 1, "X"), (0, 2, "O"),
            (1, 1, "X"), (1, 2, "O"), (2, 2, "X"),
            (2, 1, "O"), (1, 0, "X"), (2, 0, "O"),
        ]
        for x, y, mark in moves:
            state.place(x, y, mark)
        self.assertTrue(self.checker.check_draw(state))
        with self.assertLogs("tictactoe.win_checker", level="INFO"):
            status = self.checker.update_game_state(state, 2, 0, "O")
        self.assertEqual(status, GameStatus.DRAW)
        self.assertTrue(state.is_draw)
        self.assertTrue(state.is_game_over)
        self.assertEqual(state.state, EngineState.DRAWN)


if __name__ == "__main__":
    unittest.main()
