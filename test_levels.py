"""Tests for level parsing, the puzzle catalog and solver configuration."""

import unittest

from config import DEFAULT_MAX_STATES, SolverConfig
from levels import LevelError, parse_level, validate_level
from puzzles import DEMO_LEVELS, PUZZLES, get_puzzle, get_puzzle_names
from state import State


class TestParsing(unittest.TestCase):

    def test_canonical_rows_pass_through(self):
        rows = get_puzzle("Corridor")
        self.assertEqual(parse_level(rows), rows)

    def test_string_with_aliases(self):
        rows = parse_level("""\
######
#@ aT#
######
""")
        self.assertEqual(rows, ["■■■■■■", "■@□aT■", "■■■■■■"])

    def test_dash_floor(self):
        self.assertEqual(parse_level(["#####", "#@aT#", "#-#-#", "#####"])[2],
                         "■□■□■")

    def test_input_not_modified(self):
        rows = ["#####", "#@aT#", "#####"]
        parse_level(rows)
        self.assertEqual(rows, ["#####", "#@aT#", "#####"])


class TestValidation(unittest.TestCase):

    def assertRejected(self, rows, fragment):
        with self.assertRaises(LevelError) as ctx:
            validate_level(rows)
        self.assertIn(fragment, str(ctx.exception))

    def test_empty(self):
        self.assertRejected([], "empty")
        with self.assertRaises(LevelError):
            parse_level("")

    def test_ragged_rows(self):
        self.assertRejected(["■■■■■", "■@aT■", "■■■■"], "Row 2")

    def test_unknown_glyph(self):
        self.assertRejected(["■■■■■", "■@eT■", "■■■■■"], "Unknown glyph")

    def test_no_player(self):
        self.assertRejected(["■■■■■", "■□aT■", "■■■■■"], "no player")

    def test_two_players(self):
        self.assertRejected(["■■■■■■", "■@aT+■", "■■■■■■"], "2 players")

    def test_no_boxes(self):
        self.assertRejected(["■■■■■", "■@□T■", "■■■■■"], "no boxes")

    def test_duplicate_letters(self):
        self.assertRejected(["■■■■■■■", "■@aATT■", "■■■■■■■"], "Duplicate")

    def test_too_few_targets(self):
        self.assertRejected(["■■■■■■", "■@abT■", "■■■■■■"], "less than box count")

    def test_rows_must_be_strings(self):
        with self.assertRaises(LevelError) as ctx:
            parse_level([1, 2])
        self.assertIn("must be strings", str(ctx.exception))

    def test_level_error_is_value_error(self):
        self.assertTrue(issubclass(LevelError, ValueError))


class TestPuzzles(unittest.TestCase):

    def test_all_puzzles_valid(self):
        for name in get_puzzle_names():
            with self.subTest(puzzle=name):
                validate_level(PUZZLES[name])

    def test_demo_levels_have_four_boxes(self):
        for name in DEMO_LEVELS:
            with self.subTest(puzzle=name):
                root = State.from_level(get_puzzle(name))
                self.assertEqual(sorted(b.letter for b in root.boxes),
                                 ["a", "b", "c", "d"])
                self.assertEqual(len(root.grid.targets), 4)

    def test_get_puzzle_returns_copy(self):
        rows = get_puzzle("Corridor")
        rows.append("extra")
        self.assertEqual(len(PUZZLES["Corridor"]), 3)


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        config = SolverConfig()
        self.assertEqual(config.heuristic, "nearest_target")
        self.assertEqual(config.max_states, DEFAULT_MAX_STATES)

    def test_unknown_heuristic(self):
        with self.assertRaises(ValueError):
            SolverConfig(heuristic="bogus")

    def test_from_env(self):
        config = SolverConfig.from_env({
            "SOKOBOT_HEURISTIC": "assignment",
            "SOKOBOT_MAX_STATES": "0",
            "SOKOBOT_SOLVE_TIMEOUT": "2.5",
            "SOKOBOT_LOG_LEVEL": "debug",
        })
        self.assertEqual(config.heuristic, "assignment")
        self.assertIsNone(config.max_states)
        self.assertEqual(config.solve_timeout, 2.5)
        self.assertEqual(config.log_level, "DEBUG")

    def test_from_env_defaults(self):
        self.assertEqual(SolverConfig.from_env({}), SolverConfig())


if __name__ == "__main__":
    unittest.main(verbosity=2)
