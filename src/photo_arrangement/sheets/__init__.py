"""
Sheet rendering split into the visual tree, the style pass, rasterization
primitives and preview persistence.
"""

from __future__ import annotations

from . import core, previews, raster, style, tree
from .previews import preview_name, save_previews
from .raster import rasterize_sheet, rasterize_tree, render_placeholder
from .style import StyleController, StyleParams
from .tree import CellNode, RenderTree, SheetNode, build_render_tree

__all__ = [
    "CellNode",
    "RenderTree",
    "SheetNode",
    "StyleController",
    "StyleParams",
    "build_render_tree",
    "core",
    "preview_name",
    "previews",
    "raster",
    "rasterize_sheet",
    "rasterize_tree",
    "render_placeholder",
    "save_previews",
    "style",
    "tree",
]
