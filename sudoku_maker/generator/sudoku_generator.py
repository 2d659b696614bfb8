import random
from dataclasses import dataclass
from typing import List, Optional

from sudoku_maker.common.constants import (
    BOARD_SIZE,
    CELL_COUNT,
    DEFAULT_MAX_BACKTRACKS,
    EMPTY,
    SUBGRID_SIZE,
)
from sudoku_maker.generator.constraint_tracker import ConstraintTracker
from sudoku_maker.generator.sudoku_judge import SudokuJudge
from sudoku_maker.utils.log import get_logger

Grid = List[List[int]]

logger = get_logger(__name__)


class GenerationError(RuntimeError):
    """Raised when no complete valid grid could be produced."""


@dataclass
class PuzzlePair:
    """A solved grid and the playable grid derived from it."""

    solution: Grid
    puzzle: Grid


def empty_grid() -> Grid:
    return [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]


def copy_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


class SudokuGenerator:
    """
    Sudoku generator using randomized backtracking.

    Features:
    - Fills cells in row-major order; candidates come from a `ConstraintTracker`
      and are shuffled with the generator's own random source
    - Sub-grid validity is checked by scanning the 3x3 block of the cell
    - Clears a fixed number of random cells from a copy of the solution
    - Every call to `generate_solution` starts from a fresh grid and tracker
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        max_backtracks: Optional[int] = DEFAULT_MAX_BACKTRACKS,
    ):
        """
        Initialize the generator.

        Args:
            rng (random.Random, optional): Random source used for shuffling and clearing.
            seed (int, optional): Seed for a new random source, used when `rng` is not given.
                Without either, the source is seeded by the operating system.
            max_backtracks (int, optional): Abort the search after this many undone
                placements. None disables the bound.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.max_backtracks = max_backtracks
        self.board: Grid = empty_grid()
        self.tracker = ConstraintTracker()
        self.assignments = 0
        self.backtracks = 0

    def generate_solution(self) -> Grid:
        """
        Fill a new board completely.

        Returns:
            list[list[int]]: A solved board owned by the caller.

        Raises:
            GenerationError: If the search is exhausted, exceeds `max_backtracks`,
                or yields a board that fails validation.
        """
        self.board = empty_grid()
        self.tracker = ConstraintTracker()
        self.assignments = 0
        self.backtracks = 0

        if not self._solve(0, 0):
            if self._budget_exceeded():
                raise GenerationError(
                    f"Search aborted after {self.backtracks} backtracks "
                    f"(max_backtracks={self.max_backtracks})"
                )
            raise GenerationError("Search exhausted without a complete grid")
        if not SudokuJudge.is_solved_board(self.board):
            raise GenerationError("Generated grid violates sudoku constraints")

        logger.debug(
            f"Solved grid after {self.assignments} assignments and {self.backtracks} backtracks"
        )
        return copy_grid(self.board)

    def _budget_exceeded(self) -> bool:
        return self.max_backtracks is not None and self.backtracks > self.max_backtracks

    def _solve(self, row: int, col: int) -> bool:
        """
        Fill the board from (row, col) onwards.

        Returns:
            bool: True once every cell is filled, False if this branch is a dead end.
        """
        if col == BOARD_SIZE:
            row, col = row + 1, 0
        if row == BOARD_SIZE:
            return True

        candidates = self.tracker.available_for_cell(row, col)
        self.rng.shuffle(candidates)

        for digit in candidates:
            if not self._is_valid(digit, row, col):
                continue
            self.board[row][col] = digit
            self.tracker.place(row, col, digit)
            self.assignments += 1

            if self._solve(row, col + 1):
                return True

            self.board[row][col] = EMPTY
            self.tracker.unplace(row, col, digit)
            self.backtracks += 1
            if self._budget_exceeded():
                return False

        return False

    def _is_valid(self, digit: int, row: int, col: int) -> bool:
        br = (row // SUBGRID_SIZE) * SUBGRID_SIZE
        bc = (col // SUBGRID_SIZE) * SUBGRID_SIZE
        for r in range(br, br + SUBGRID_SIZE):
            for c in range(bc, bc + SUBGRID_SIZE):
                if self.board[r][c] == digit:
                    return False
        return self.tracker.is_available(row, col, digit)

    def clear_cells(self, grid: Grid, count: int) -> Grid:
        """
        Clear `count` distinct random cells from a copy of `grid`.

        Positions are drawn uniformly; a position that is already empty is
        drawn again. The input grid is left untouched.

        Args:
            grid (list[list[int]]): Source board.
            count (int): Number of cells to clear, 0..81.

        Returns:
            list[list[int]]: A new board with `count` more empty cells, or with
                every cell empty if `grid` had fewer than `count` filled cells.
        """
        if not 0 <= count <= CELL_COUNT:
            raise ValueError(f"count must be in [0, {CELL_COUNT}], got {count}")

        board = copy_grid(grid)
        filled = CELL_COUNT - SudokuJudge.count_empty(board)
        cleared = 0
        while cleared < count and filled > 0:
            r = self.rng.randrange(BOARD_SIZE)
            c = self.rng.randrange(BOARD_SIZE)
            if board[r][c] != EMPTY:
                board[r][c] = EMPTY
                cleared += 1
                filled -= 1
        return board

    def generate_pair(self, cells_to_clear: int) -> PuzzlePair:
        """Generate one solution and a playable puzzle cleared from its own copy."""
        solution = self.generate_solution()
        puzzle = self.clear_cells(solution, cells_to_clear)
        return PuzzlePair(solution=solution, puzzle=puzzle)

    def generate_pairs(self, count: int, cells_to_clear: int) -> List[PuzzlePair]:
        pairs = []
        for i in range(count):
            pairs.append(self.generate_pair(cells_to_clear))
            logger.debug(f"Generated puzzle pair {i + 1}/{count}")
        return pairs
