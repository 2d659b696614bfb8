from abc import ABC, abstractmethod
from typing import List

from sudoku_maker.generator.sudoku_generator import PuzzlePair


class Renderer(ABC):
    """Turns puzzle pairs into the text of one output document."""

    suffix: str = ""

    @abstractmethod
    def render(self, pairs: List[PuzzlePair]) -> str:
        """Render every pair, solution first, in generation order."""
