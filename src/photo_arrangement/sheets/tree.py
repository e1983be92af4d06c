"""
Visual tree built from an arrangement.

Each sheet node mirrors one page: its grid, its cells in item order and
the presentation values (gap, scale, fill) that the style pass sets.
Nodes are mutable so presentation can be re-applied without rebuilding;
grids and item assignment are fixed once the tree is built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from photo_arrangement.config_defaults import (
    DEFAULT_FILL_MODE,
    DEFAULT_GAP_MM,
    DEFAULT_SCALE_PERCENT,
)
from photo_arrangement.constants import EMPTY_STATE_TEXT, SHEET_PADDING_MM

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator

    from photo_arrangement.layout import Arrangement, Grid, Page, PageSize
    from photo_arrangement.store import ImageHandle
    from photo_arrangement.type_defs import FillMode


@dataclass
class CellNode:
    """One grid cell holding one image."""

    image: ImageHandle
    index: int
    scale_percent: float = DEFAULT_SCALE_PERCENT
    fill_mode: FillMode = DEFAULT_FILL_MODE


@dataclass
class SheetNode:
    """One physical sheet laid out as a grid of cells."""

    page: Page[ImageHandle]
    page_size: PageSize
    cells: list[CellNode] = field(default_factory=list)
    gap_mm: float = DEFAULT_GAP_MM
    padding_mm: float = SHEET_PADDING_MM

    @property
    def grid(self) -> Grid:
        """Grid chosen for this sheet."""
        return self.page.grid

    def content_size_mm(self) -> tuple[float, float]:
        """Return the area inside the sheet padding."""
        return (
            self.page_size.width - 2 * self.padding_mm,
            self.page_size.height - 2 * self.padding_mm,
        )

    def cell_size_mm(self) -> tuple[float, float]:
        """
        Return the size of one cell.

        Gaps sit between cells only, so a row of ``cols`` cells consumes
        ``cols - 1`` gaps.
        """
        content_w, content_h = self.content_size_mm()
        rows, cols = self.grid.rows, self.grid.cols
        cell_w = (content_w - (cols - 1) * self.gap_mm) / cols
        cell_h = (content_h - (rows - 1) * self.gap_mm) / rows
        return max(0.0, cell_w), max(0.0, cell_h)

    def cell_origin_mm(self, index: int) -> tuple[float, float]:
        """Return the top left corner of the cell at ``index``."""
        cell_w, cell_h = self.cell_size_mm()
        row, col = divmod(index, self.grid.cols)
        x = self.padding_mm + col * (cell_w + self.gap_mm)
        y = self.padding_mm + row * (cell_h + self.gap_mm)
        return x, y


@dataclass
class RenderTree:
    """Every sheet of an arrangement, or the empty-state placeholder."""

    page_size: PageSize
    sheets: list[SheetNode] = field(default_factory=list)
    placeholder: str | None = None

    @property
    def is_empty(self) -> bool:
        """True when there are no sheets to show, print or export."""
        return not self.sheets

    @property
    def orientation(self) -> str:
        """Orientation shared by every sheet."""
        return self.page_size.orientation

    def cells(self) -> Iterator[CellNode]:
        """Iterate over every cell of every sheet in order."""
        for sheet in self.sheets:
            yield from sheet.cells


def build_sheet(page: Page[ImageHandle], page_size: PageSize) -> SheetNode:
    """Create the sheet node for a single page."""
    cells = [
        CellNode(image=handle, index=idx)
        for idx, handle in enumerate(page.items)
    ]
    return SheetNode(page=page, page_size=page_size, cells=cells)


def build_render_tree(
    arrangement: Arrangement[ImageHandle],
    page_size: PageSize,
) -> RenderTree:
    """
    Build the visual tree for an arrangement.

    An empty arrangement produces a tree without sheets that carries the
    empty-state placeholder text instead.
    """
    if arrangement.is_empty:
        return RenderTree(page_size=page_size, placeholder=EMPTY_STATE_TEXT)
    sheets = [build_sheet(page, page_size) for page in arrangement]
    return RenderTree(page_size=page_size, sheets=sheets)
