# -*- coding: utf-8 -*-
"""Grid generation."""
from sudoku_maker.generator.constraint_tracker import ConstraintTracker
from sudoku_maker.generator.sudoku_generator import (
    GenerationError,
    PuzzlePair,
    SudokuGenerator,
)
from sudoku_maker.generator.sudoku_judge import SudokuJudge

__all__ = [
    "ConstraintTracker",
    "GenerationError",
    "PuzzlePair",
    "SudokuGenerator",
    "SudokuJudge",
]
