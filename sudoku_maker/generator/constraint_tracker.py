from typing import List

from sudoku_maker.common.constants import BOARD_SIZE, DIGITS


class ConstraintTracker:
    """
    Tracks which digits are still free in every row and every column.

    - One boolean flag per (row, digit) and per (column, digit); index 0 is unused
    - `place` and `unplace` are exact inverses, so the search can undo a move
    - Sub-grids are not tracked; the generator scans the 3x3 block directly
    """

    def __init__(self, size: int = BOARD_SIZE):
        self.size = size
        self.rows: List[List[bool]] = []
        self.cols: List[List[bool]] = []
        self.initialize()

    def initialize(self):
        """Mark every digit as available in every row and column."""
        self.rows = [[False] + [True] * self.size for _ in range(self.size)]
        self.cols = [[False] + [True] * self.size for _ in range(self.size)]

    def is_available(self, row: int, col: int, digit: int) -> bool:
        return self.rows[row][digit] and self.cols[col][digit]

    def available_for_cell(self, row: int, col: int) -> List[int]:
        """
        Digits free in both `row` and `col`, in ascending order.

        Args:
            row (int): Row index.
            col (int): Column index.

        Returns:
            list[int]: Candidate digits, not yet filtered by the sub-grid.
        """
        row_free = self.rows[row]
        col_free = self.cols[col]
        return [d for d in DIGITS[: self.size] if row_free[d] and col_free[d]]

    def place(self, row: int, col: int, digit: int):
        if not self.is_available(row, col, digit):
            raise ValueError(f"Digit {digit} is not available at ({row}, {col})")
        self.rows[row][digit] = False
        self.cols[col][digit] = False

    def unplace(self, row: int, col: int, digit: int):
        if self.rows[row][digit] or self.cols[col][digit]:
            raise ValueError(f"Digit {digit} was not placed at ({row}, {col})")
        self.rows[row][digit] = True
        self.cols[col][digit] = True
