# -*- coding: utf-8 -*-
"""Test cases for the command line launcher."""
import os
import tempfile
import unittest
from unittest import mock

from parameterized import parameterized

from sudoku_maker.cli import launcher
from sudoku_maker.common.config import build_config
from sudoku_maker.generator import GenerationError


class TestParseCellsToClear(unittest.TestCase):
    @parameterized.expand([(["0"], 0), (["25"], 25), (["81"], 81), (["40"], 40)])
    def test_valid_argument(self, args, expected):
        self.assertEqual(launcher.parse_cells_to_clear(args), expected)

    @parameterized.expand(
        [
            ([],),
            (["-5"],),
            (["abc"],),
            (["999"],),
            (["82"],),
            (["4.5"],),
            (["10", "20"],),
            (["1_0"],),
            ([" 7 "],),
            (["7\n"],),
            (["\u0665"],),
            ([""],),
        ]
    )
    def test_invalid_argument_falls_back_to_default(self, args):
        self.assertEqual(launcher.parse_cells_to_clear(args), 40)


class TestLauncher(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.cwd = os.getcwd()
        os.chdir(self.temp_dir.name)

    def tearDown(self):
        os.chdir(self.cwd)
        self.temp_dir.cleanup()

    def read_output(self, filename="sudoku.html"):
        with open(os.path.join(self.temp_dir.name, filename), encoding="utf-8") as f:
            return f.read()

    @mock.patch("builtins.print")
    def test_main_writes_six_tables(self, mock_print):
        self.assertEqual(launcher.main(["30"]), 0)

        html = self.read_output()
        self.assertEqual(html.count("<table>"), 6)
        self.assertEqual(html.count('<td class="empty"></td>'), 3 * 30)
        mock_print.assert_called_once_with("HTML content written to sudoku.html")

    @parameterized.expand(
        [
            ([],),
            (["-5"],),
            (["abc"],),
            (["1_0"],),
            (["999"],),
            (["--cells=3"],),
            (["--", "5"],),
            (["--"],),
        ]
    )
    @mock.patch("builtins.print")
    def test_main_uses_default_for_bad_input(self, argv, mock_print):
        self.assertEqual(launcher.main(argv), 0)

        html = self.read_output()
        self.assertEqual(html.count('<td class="empty"></td>'), 3 * 40)

    @mock.patch("builtins.print")
    def test_unwritable_destination(self, mock_print):
        output_path = os.path.join(self.temp_dir.name, "missing", "sudoku.html")
        config = build_config(output_path=output_path, seed=11).check_and_update()

        self.assertEqual(launcher.run(config), 1)
        self.assertFalse(os.path.exists(output_path))
        message = mock_print.call_args[0][0]
        self.assertTrue(message.startswith("Error writing to file:"))

    @mock.patch("builtins.print")
    def test_generation_failure_writes_nothing(self, mock_print):
        config = build_config(seed=11).check_and_update()
        with mock.patch.object(
            launcher.SudokuGenerator,
            "generate_pairs",
            side_effect=GenerationError("Search exhausted without a complete grid"),
        ):
            self.assertEqual(launcher.run(config), 1)

        self.assertFalse(os.path.exists(os.path.join(self.temp_dir.name, "sudoku.html")))
        mock_print.assert_called_once_with(
            "Error generating puzzles: Search exhausted without a complete grid"
        )

    @mock.patch("builtins.print")
    def test_same_seed_same_page(self, mock_print):
        config = build_config(output_path="seeded.html", seed=5).check_and_update()
        self.assertEqual(launcher.run(config), 0)
        first = self.read_output("seeded.html")
        self.assertEqual(launcher.run(config), 0)

        self.assertEqual(self.read_output("seeded.html"), first)
        self.assertEqual(first.count("<table>"), 6)
