import unittest

from atropos_core.board import BLUE, GREEN, RED, UNCOLORED
from atropos_core.codec import board_to_text, format_move, parse_board
from atropos_core.errors import MalformedInput
from atropos_core.layout import initial_board
from atropos_core.move import Move
from atropos_core.search import Side, best_move

OPENING_3 = "[13][302][1003][30002][1212]LastPlay:null"
AFTER_OPENING_3 = "[13][302][1003][31002][1212]LastPlay:(1,1,1,3)"


class TestParseBoard(unittest.TestCase):
    def test_given_opening_text_when_parsed_then_size_border_and_no_last_move(self):
        board = parse_board(OPENING_3)
        self.assertEqual(board.size, 3)
        self.assertIsNone(board.last_move)
        self.assertEqual(board, initial_board(3))
        self.assertEqual(board.color_at(4, 0), RED)
        self.assertEqual(board.color_at(4, 1), GREEN)
        self.assertEqual(board.color_at(3, 2), BLUE)
        self.assertEqual(board.color_at(0, 1), RED)
        self.assertEqual(board.color_at(0, 4), BLUE)
        self.assertEqual(board.count_free_cells(), 6)

    def test_given_last_move_tuple_when_parsed_then_last_move_set(self):
        board = parse_board(AFTER_OPENING_3)
        self.assertEqual(board.last_move, Move(RED, 1, 1, 3))
        self.assertEqual(board.color_at(1, 1), RED)
        self.assertEqual(board.color_at(1, 2), UNCOLORED)

    def test_given_missing_or_null_tail_when_parsed_then_opening_position(self):
        self.assertIsNone(parse_board("[13][302][1003][30002][1212]").last_move)
        self.assertIsNone(parse_board("[13][302][1003][30002][1212]LastPlay:null").last_move)
        self.assertIsNone(parse_board("  [13][302][1003][30002][1212]LastPlay:null\n").last_move)

    def test_given_smallest_board_when_parsed_then_single_playable_circle(self):
        board = parse_board("[13][302][12]LastPlay:null")
        self.assertEqual(board.size, 1)
        self.assertEqual(list(board.interior_coords()), [(1, 1, 1)])
        self.assertEqual(str(best_move(board, 4, Side.MAX)), "(1,1,1,1)")

    def test_given_boards_when_encoded_then_parse_back_to_same_text(self):
        for text in (OPENING_3, AFTER_OPENING_3, board_to_text(initial_board(6))):
            self.assertEqual(board_to_text(parse_board(text)), text)

    def test_given_broken_rows_when_parsed_then_malformed_input(self):
        bad = [
            "[13][302]LastPlay:null",               # too few rows
            "13][302][1003][30002][1212]",          # missing "["
            "[13][3a2][1003][30002][1212]",         # not a digit
            "[13][302][1004][30002][1212]",         # color out of range
            "[13][302][103][30002][1212]",          # short row
            "[13][302][1003][30002][12121]",        # long bottom row
            "[13][300][1003][30002][1212]",         # uncolored border circle
            "[13][302][1003][30002]",               # rows of the wrong shape
        ]
        for text in bad:
            with self.assertRaises(MalformedInput, msg=text):
                parse_board(text)

    def test_given_broken_last_move_when_parsed_then_malformed_input(self):
        rows = "[13][302][1003][31002][1212]"
        bad = [
            "LastPlay:(1,1,1)",      # three fields
            "LastPlay:(a,1,1,3)",    # not an integer
            "LastPlay:(1,1,1,2)",    # x+y+z != size+2
            "LastPlay:(4,1,1,3)",    # no such color
            "LastPlay:(1,1,1,3",     # unterminated
            "LastPlay:(2,1,1,3)",    # board holds red there
            "LastPlay:(1,0,2,3)",    # border circle
        ]
        for tail in bad:
            with self.assertRaises(MalformedInput, msg=tail):
                parse_board(rows + tail)

    def test_given_non_text_when_parsed_then_malformed_input(self):
        with self.assertRaises(MalformedInput):
            parse_board(None)  # type: ignore[arg-type]

    def test_given_malformed_input_when_caught_as_value_error_then_matches(self):
        with self.assertRaises(ValueError):
            parse_board("")


class TestFormatMove(unittest.TestCase):
    def test_given_move_when_formatted_then_tuple_without_spaces(self):
        self.assertEqual(format_move(Move(3, 2, 1, 4, score=-10)), "(3,2,1,4)")

    def test_given_opening_scenario_when_searching_then_one_one_one_three(self):
        board = parse_board(OPENING_3)
        self.assertEqual(format_move(best_move(board, 4, Side.MAX)), "(1,1,1,3)")


if __name__ == '__main__':
    unittest.main(verbosity=2)
