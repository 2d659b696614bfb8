# -*- coding: utf-8 -*-
"""Renderer module"""
from sudoku_maker.render.renderer import Renderer
from sudoku_maker.utils.registry import Registry

RENDERERS: Registry = Registry(
    "renderers",
    default_mapping={
        "html": "sudoku_maker.render.html_renderer.HTMLRenderer",
    },
)

__all__ = ["Renderer", "RENDERERS"]
