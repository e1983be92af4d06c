"""
Grid selection for a single sheet.

Given how many items a sheet holds and the sheet's physical size, pick the
row/column partition whose cells come closest to square. Fixed layouts use
a near-square grid derived from the declared count so that every sheet of
an arrangement shares the same grid.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

_PAIR_COUNT = 2
_TARGET_CELL_RATIO = 1.0


@dataclass(frozen=True, slots=True)
class Grid:
    """Row/column partition of a sheet into equal cells."""

    rows: int
    cols: int

    @property
    def capacity(self) -> int:
        """Number of cells in the grid."""
        return self.rows * self.cols

    def empty_cells(self, item_count: int) -> int:
        """Return how many trailing cells stay empty for item_count items."""
        return self.capacity - item_count


@dataclass(frozen=True, slots=True)
class AutoLayout:
    """Put every item on one sheet and let the sheet shape pick the grid."""

    def __str__(self) -> str:
        return "auto"


@dataclass(frozen=True, slots=True)
class FixedLayout:
    """Place a fixed number of items on each sheet."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 1:
            msg = f"Items per page must be positive, got {self.count}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return str(self.count)


LayoutMode = AutoLayout | FixedLayout
AUTO = AutoLayout()


def fixed_grid(count: int, page_width: float, page_height: float) -> Grid:
    """
    Return the near-square grid for ``count`` cells.

    Columns are ``ceil(sqrt(count))`` and rows whatever is needed to hold
    ``count``. On a landscape sheet the grid is kept at least as wide as
    it is tall.
    """
    cols = math.isqrt(count)
    if cols * cols < count:
        cols += 1
    rows = -(-count // cols)
    if page_width > page_height and rows > cols:
        rows, cols = cols, rows
    return Grid(rows=rows, cols=cols)


def auto_grid(item_count: int, page_width: float, page_height: float) -> Grid:
    """
    Score every column count and return the grid with the squarest cells.

    Candidates run from one column up to ``item_count`` columns, each with
    just enough rows to hold every item. The score is the distance of the
    cell aspect ratio from 1; the first minimum wins, so ties go to the
    smaller column count.
    """
    cols = np.arange(1, item_count + 1)
    rows = -(-item_count // cols)
    cell_ratio = (page_width / cols) / (page_height / rows)
    scores = np.abs(cell_ratio - _TARGET_CELL_RATIO)
    best = int(np.argmin(scores))
    grid = Grid(rows=int(rows[best]), cols=int(cols[best]))

    # Two items always form one strip along the long side of the sheet.
    # TODO: teach the score to prefer single strips for small counts so this
    # override can be dropped.
    if item_count == _PAIR_COUNT:
        if page_width > page_height:
            grid = Grid(rows=1, cols=2)
        else:
            grid = Grid(rows=2, cols=1)
    return grid


def solve(
    item_count: int,
    page_width: float,
    page_height: float,
    mode: LayoutMode,
) -> Grid:
    """
    Return the grid for a sheet holding ``item_count`` items.

    Fixed layouts ignore ``item_count`` beyond validating it and derive the
    grid from the declared per-page count.

    Raises:
        ValueError: If ``item_count`` is less than one.

    """
    if item_count < 1:
        msg = f"Cannot lay out a sheet with {item_count} items"
        raise ValueError(msg)
    if isinstance(mode, FixedLayout):
        return fixed_grid(mode.count, page_width, page_height)
    return auto_grid(item_count, page_width, page_height)
