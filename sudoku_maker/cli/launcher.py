"""Command line entry point: generate puzzle pairs and write them to one document."""
import argparse
import re
import sys
import time
from typing import List, Optional, Sequence

from sudoku_maker.common.config import GeneratorConfig, build_config
from sudoku_maker.common.constants import CELL_COUNT, DEFAULT_EMPTY_CELLS
from sudoku_maker.generator import GenerationError, PuzzlePair, SudokuGenerator
from sudoku_maker.render import RENDERERS
from sudoku_maker.utils.log import get_logger, set_log_level

logger = get_logger(__name__)

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_cells_to_clear(args: Sequence[str]) -> int:
    """Read the number of cells to clear.

    Exactly one plain decimal integer argument in [0, 81] is honoured;
    anything else falls back to the default.
    """
    if len(args) != 1:
        return DEFAULT_EMPTY_CELLS
    if not INTEGER_PATTERN.fullmatch(args[0]):
        logger.debug(f"Ignoring non-integer argument {args[0]!r}")
        return DEFAULT_EMPTY_CELLS
    cells_to_clear = int(args[0])
    if cells_to_clear < 0 or cells_to_clear > CELL_COUNT:
        logger.debug(f"Ignoring out-of-range argument {cells_to_clear}")
        return DEFAULT_EMPTY_CELLS
    return cells_to_clear


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-maker",
        description="Generate solved sudoku grids with playable counterparts as an HTML page.",
        add_help=False,
    )
    parser.add_argument(
        "cells",
        nargs="*",
        help=f"Number of cells to clear in each playable grid, 0-{CELL_COUNT}.",
    )
    return parser


def generate(config: GeneratorConfig) -> List[PuzzlePair]:
    seed = config.seed if config.seed is not None else time.time_ns()
    logger.info(f"Generating {config.pair_count} puzzle pairs, clearing {config.cells_to_clear} cells")
    generator = SudokuGenerator(seed=seed, max_backtracks=config.max_backtracks)
    return generator.generate_pairs(config.pair_count, config.cells_to_clear)


def write_to_file(filename: str, content: str) -> None:
    with open(filename, "w", encoding="utf-8") as f:
        f.write(content)


def run(config: GeneratorConfig) -> int:
    set_log_level(config.log_level)
    try:
        pairs = generate(config)
    except GenerationError as e:
        print(f"Error generating puzzles: {e}")
        return 1

    renderer = RENDERERS.get(config.renderer)()
    content = renderer.render(pairs)

    try:
        write_to_file(config.output_path, content)
    except OSError as e:
        logger.error(f"Failed to write {config.output_path}: {e}")
        print(f"Error writing to file: {e}")
        return 1

    print(f"HTML content written to {config.output_path}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    raw_args = list(sys.argv[1:] if argv is None else argv)
    if len(raw_args) == 1:
        args, unknown = build_parser().parse_known_args(raw_args)
        cells = DEFAULT_EMPTY_CELLS if unknown else parse_cells_to_clear(args.cells)
    else:
        cells = DEFAULT_EMPTY_CELLS
    config = build_config(cells_to_clear=cells).check_and_update()
    return run(config)


if __name__ == "__main__":
    sys.exit(main())
