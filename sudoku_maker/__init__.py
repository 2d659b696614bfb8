# -*- coding: utf-8 -*-
"""Sudoku Maker."""

__version__ = "0.1.0"
