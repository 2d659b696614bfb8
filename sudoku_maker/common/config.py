# -*- coding: utf-8 -*-
"""Configs for puzzle generation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from omegaconf import OmegaConf

from sudoku_maker.common.constants import (
    CELL_COUNT,
    DEFAULT_EMPTY_CELLS,
    DEFAULT_MAX_BACKTRACKS,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_PAIR_COUNT,
    DEFAULT_RENDERER,
    LOG_LEVELS,
)
from sudoku_maker.render import RENDERERS
from sudoku_maker.utils.log import get_logger

logger = get_logger(__name__)


@dataclass
class GeneratorConfig:
    """Configuration for one run of the puzzle maker."""

    # cells cleared in every playable grid, 0..81
    cells_to_clear: int = DEFAULT_EMPTY_CELLS
    # number of (solution, puzzle) pairs per run
    pair_count: int = DEFAULT_PAIR_COUNT

    output_path: str = DEFAULT_OUTPUT_PATH
    renderer: str = DEFAULT_RENDERER

    # None means a time-derived seed is drawn at startup
    seed: Optional[int] = None
    # abort the search after this many undone placements, None disables the bound
    max_backtracks: Optional[int] = DEFAULT_MAX_BACKTRACKS

    log_level: str = "INFO"

    def check_and_update(self) -> GeneratorConfig:
        """Validate the config and normalize its fields."""
        if not 0 <= self.cells_to_clear <= CELL_COUNT:
            raise ValueError(
                f"`cells_to_clear` must be in [0, {CELL_COUNT}], got {self.cells_to_clear}"
            )
        if self.pair_count < 1:
            raise ValueError(f"`pair_count` must be positive, got {self.pair_count}")
        if self.max_backtracks is not None and self.max_backtracks < 0:
            raise ValueError(f"`max_backtracks` must be non-negative, got {self.max_backtracks}")
        if not self.output_path:
            raise ValueError("`output_path` is required.")
        if self.renderer not in RENDERERS:
            raise ValueError(
                f"Unknown renderer `{self.renderer}`, expected one of {RENDERERS.keys()}"
            )
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"`log_level` must be one of {LOG_LEVELS}, got {self.log_level}")
        logger.debug(f"Config checked: {self}")
        return self


def build_config(**overrides) -> GeneratorConfig:
    """Build a config from defaults and keyword overrides, type-checked against the schema."""
    schema = OmegaConf.structured(GeneratorConfig)
    try:
        config = OmegaConf.merge(schema, OmegaConf.create(overrides))
        return OmegaConf.to_object(config)
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}") from e
