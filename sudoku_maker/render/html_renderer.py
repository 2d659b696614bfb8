import io
from typing import List

from sudoku_maker.common.constants import BOARD_SIZE, EMPTY, SUBGRID_SIZE
from sudoku_maker.generator.sudoku_generator import Grid, PuzzlePair
from sudoku_maker.render.renderer import Renderer

TABLE_STYLE = (
    "<style>"
    "table { border-collapse: collapse; }\n"
    "td { border: 1px solid black; width: 20px; height: 20px; text-align: center; }\n"
    "td.empty { background-color: lightgray; }\n"
    "td.subgrid-separator { border: none; width: 10px; }\n"
    "</style>\n"
)


class HTMLRenderer(Renderer):
    """
    Render puzzle pairs as a single HTML page.

    Each pair takes one flex row: the solved grid on the left, the playable
    grid on the right. Empty cells get the `empty` class; blank
    `subgrid-separator` cells and rows split the 3x3 blocks.
    """

    suffix = ".html"

    def render(self, pairs: List[PuzzlePair]) -> str:
        out = io.StringIO()
        out.write("<html><body>")
        for pair in pairs:
            out.write('<div style="display: flex;">')
            for grid in (pair.solution, pair.puzzle):
                out.write('<div style="flex: 1;">')
                out.write("<hr/><br/>")
                self.write_table(out, grid)
                out.write("</div>")
            out.write("</div><br/>")
        out.write("</body></html>")
        return out.getvalue()

    def render_table(self, grid: Grid) -> str:
        out = io.StringIO()
        self.write_table(out, grid)
        return out.getvalue()

    @staticmethod
    def write_table(out: io.StringIO, grid: Grid):
        out.write(TABLE_STYLE)
        out.write("<table>\n")
        for i, row in enumerate(grid):
            out.write("<tr>")
            for j, num in enumerate(row):
                if num == EMPTY:
                    out.write('<td class="empty"></td>')
                else:
                    out.write(f'<td class="">{num}</td>')
                if (j + 1) % SUBGRID_SIZE == 0 and j < BOARD_SIZE - 1:
                    out.write('<td class="subgrid-separator"></td>')
            out.write("</tr>")
            if (i + 1) % SUBGRID_SIZE == 0 and i < BOARD_SIZE - 1:
                colspan = BOARD_SIZE + SUBGRID_SIZE - 1
                out.write(f'<tr><td colspan="{colspan}" class="subgrid-separator"></td></tr>')
        out.write("</table>\n")
