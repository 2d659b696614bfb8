# -*- coding: utf-8 -*-
"""Constants."""

# board geometry

BOARD_SIZE = 9
SUBGRID_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE
DIGITS = tuple(range(1, BOARD_SIZE + 1))
EMPTY = 0

# generation

DEFAULT_EMPTY_CELLS = 40
DEFAULT_PAIR_COUNT = 3
DEFAULT_MAX_BACKTRACKS = 100_000

# output

DEFAULT_OUTPUT_PATH = "sudoku.html"
DEFAULT_RENDERER = "html"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
