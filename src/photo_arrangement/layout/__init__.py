"""
Sheet partitioning and grid selection.

The package exposes the pure layout pieces directly: sheet dimensions,
the grid solver and the paginator that combines them.
"""

from __future__ import annotations

from . import grid_solver, page_size, paginator
from .grid_solver import (
    AUTO,
    AutoLayout,
    FixedLayout,
    Grid,
    LayoutMode,
    solve,
)
from .page_size import PageSize, dimensions
from .paginator import Arrangement, Page, paginate

__all__ = [
    "AUTO",
    "Arrangement",
    "AutoLayout",
    "FixedLayout",
    "Grid",
    "LayoutMode",
    "Page",
    "PageSize",
    "dimensions",
    "grid_solver",
    "page_size",
    "paginate",
    "paginator",
    "solve",
]
