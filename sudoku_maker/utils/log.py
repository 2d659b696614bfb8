# -*- coding: utf-8 -*-
"""Logging utilities."""
import logging
import sys
from typing import Optional, Union

_FORMAT = "[%(asctime)s] [%(levelname)s] [%(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_ROOT_NAME = "sudoku_maker"
_DEFAULT_LEVEL = logging.INFO


def _get_root_logger() -> logging.Logger:
    root = logging.getLogger(_ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
        root.setLevel(_DEFAULT_LEVEL)
        root.propagate = False
    return root


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of every logger created by `get_logger`."""
    if isinstance(level, str):
        level = level.upper()
    _get_root_logger().setLevel(level)


def get_logger(name: Optional[str] = None, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Get a logger under the `sudoku_maker` namespace.

    Args:
        name (`Optional[str]`): The logger name. Usually `__name__`.
        level (`Optional[Union[int, str]]`): Overrides the level of this logger only.

    Returns:
        `logging.Logger`: The logger.
    """
    root = _get_root_logger()
    if name is None or name == _ROOT_NAME:
        logger = root
    elif name.startswith(_ROOT_NAME + "."):
        logger = logging.getLogger(name)
    else:
        logger = root.getChild(name)
    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
