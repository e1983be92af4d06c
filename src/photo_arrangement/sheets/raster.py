"""Rasterize sheet nodes into Pillow images."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import Image

from photo_arrangement.constants import (
    COLOR_GREY,
    COLOR_MODE_RGB,
    COLOR_WHITE,
    EMPTY_STATE_TEXT,
    PLACEHOLDER_TEXT_MM,
    PREVIEW_DPI,
)
from photo_arrangement.sheets.core import (
    Rect,
    draw_centered_text,
    mm_to_px,
    place_in_cell,
)

if TYPE_CHECKING:  # pragma: no cover
    from photo_arrangement.layout import PageSize
    from photo_arrangement.sheets.tree import RenderTree, SheetNode
    from photo_arrangement.type_defs import RGB


def page_pixels(page_size: PageSize, dpi: float) -> tuple[int, int]:
    """Return the pixel size of a sheet at ``dpi``."""
    return (
        max(1, mm_to_px(page_size.width, dpi)),
        max(1, mm_to_px(page_size.height, dpi)),
    )


def cell_rect(sheet: SheetNode, index: int, dpi: float) -> Rect:
    """Return the pixel box of the cell at ``index``."""
    cell_w, cell_h = sheet.cell_size_mm()
    x, y = sheet.cell_origin_mm(index)
    x0, y0 = mm_to_px(x, dpi), mm_to_px(y, dpi)
    w = max(1, mm_to_px(cell_w, dpi))
    h = max(1, mm_to_px(cell_h, dpi))
    return Rect(x0, y0, x0 + w, y0 + h)


def rasterize_sheet(
    sheet: SheetNode,
    *,
    dpi: float = PREVIEW_DPI,
    bg_color: RGB = COLOR_WHITE,
) -> Image.Image:
    """Compose one sheet: blank page plus every cell at its grid position."""
    canvas = Image.new(COLOR_MODE_RGB, page_pixels(sheet.page_size, dpi),
                       bg_color)
    for cell in sheet.cells:
        box = cell_rect(sheet, cell.index, dpi)
        tile = place_in_cell(
            cell.image.image,
            box.size(),
            scale_percent=cell.scale_percent,
            fit_mode=cell.fill_mode,
            bg_color=bg_color,
        )
        canvas.paste(tile, box.origin())
    return canvas


def rasterize_tree(
    tree: RenderTree,
    *,
    dpi: float = PREVIEW_DPI,
) -> list[Image.Image]:
    """Rasterize every sheet in order; an empty tree yields no pages."""
    return [rasterize_sheet(sheet, dpi=dpi) for sheet in tree.sheets]


def render_placeholder(
    page_size: PageSize,
    text: str = EMPTY_STATE_TEXT,
    *,
    dpi: float = PREVIEW_DPI,
) -> Image.Image:
    """Render the empty-state page shown instead of any sheet."""
    canvas = Image.new(COLOR_MODE_RGB, page_pixels(page_size, dpi),
                       COLOR_WHITE)
    draw_centered_text(
        canvas,
        text,
        px=mm_to_px(PLACEHOLDER_TEXT_MM, dpi),
        fill=COLOR_GREY,
    )
    return canvas
