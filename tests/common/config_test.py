# -*- coding: utf-8 -*-
"""Test cases for Config modules."""
import unittest

from parameterized import parameterized

from sudoku_maker.common.config import GeneratorConfig, build_config


class TestConfig(unittest.TestCase):
    def test_default_config(self):
        config = GeneratorConfig().check_and_update()

        self.assertEqual(config.cells_to_clear, 40)
        self.assertEqual(config.pair_count, 3)
        self.assertEqual(config.output_path, "sudoku.html")
        self.assertEqual(config.renderer, "html")
        self.assertIsNone(config.seed)

    def test_build_with_overrides(self):
        config = build_config(cells_to_clear=55, log_level="debug").check_and_update()

        self.assertIsInstance(config, GeneratorConfig)
        self.assertEqual(config.cells_to_clear, 55)
        self.assertEqual(config.pair_count, 3)
        self.assertEqual(config.log_level, "DEBUG")

    @parameterized.expand(
        [
            ("unknown_key", {"difficulty": "hard"}),
            ("wrong_type", {"cells_to_clear": "many"}),
        ]
    )
    def test_build_rejects_schema_errors(self, name, overrides):
        with self.assertRaises(ValueError):
            build_config(**overrides)

    @parameterized.expand(
        [
            ("negative_cells", {"cells_to_clear": -5}),
            ("too_many_cells", {"cells_to_clear": 999}),
            ("no_pairs", {"pair_count": 0}),
            ("unknown_renderer", {"renderer": "text"}),
            ("bad_log_level", {"log_level": "loud"}),
            ("negative_backtracks", {"max_backtracks": -1}),
        ]
    )
    def test_check_rejects(self, name, overrides):
        config = build_config(**overrides)
        with self.assertRaises(ValueError):
            config.check_and_update()
