from typing import Iterator, List

from sudoku_maker.common.constants import BOARD_SIZE, DIGITS, EMPTY, SUBGRID_SIZE


class SudokuJudge:
    """
    Judge 9x9 board states.

    - Empty cells (0) are allowed and ignored by `is_valid`
    - `is_solved_board` additionally requires every unit to hold 1-9 exactly once
    """

    @staticmethod
    def units(board: List[List[int]]) -> Iterator[List[int]]:
        """Yield every row, column and 3x3 block as a flat list."""
        for row in board:
            yield list(row)
        for c in range(BOARD_SIZE):
            yield [board[r][c] for r in range(BOARD_SIZE)]
        for br in range(0, BOARD_SIZE, SUBGRID_SIZE):
            for bc in range(0, BOARD_SIZE, SUBGRID_SIZE):
                yield [
                    board[r][c]
                    for r in range(br, br + SUBGRID_SIZE)
                    for c in range(bc, bc + SUBGRID_SIZE)
                ]

    @staticmethod
    def has_shape(board) -> bool:
        return len(board) == BOARD_SIZE and all(len(row) == BOARD_SIZE for row in board)

    @staticmethod
    def is_valid(board: List[List[int]]) -> bool:
        if not SudokuJudge.has_shape(board):
            return False
        for unit in SudokuJudge.units(board):
            nums = [v for v in unit if v != EMPTY]
            if any(v not in DIGITS for v in nums):
                return False
            if len(nums) != len(set(nums)):
                return False
        return True

    @staticmethod
    def is_solved_board(board: List[List[int]]) -> bool:
        if not SudokuJudge.has_shape(board):
            return False
        return all(sorted(unit) == list(DIGITS) for unit in SudokuJudge.units(board))

    @staticmethod
    def count_empty(board: List[List[int]]) -> int:
        return sum(row.count(EMPTY) for row in board)
