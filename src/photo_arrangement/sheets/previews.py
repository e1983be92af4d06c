"""Write rendered sheets to PNG files for on-screen display."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from photo_arrangement.constants import (
    PLACEHOLDER_PREVIEW_NAME,
    PREVIEW_DPI,
    PREVIEW_NAME_TEMPLATE,
)
from photo_arrangement.logging_utils import logger
from photo_arrangement.sheets.raster import rasterize_sheet, render_placeholder

if TYPE_CHECKING:  # pragma: no cover
    from photo_arrangement.sheets.tree import RenderTree


def preview_name(index: int) -> str:
    """Build the deterministic file name for the sheet at ``index`` (1-based)."""
    return PREVIEW_NAME_TEMPLATE.format(index=index)


def save_previews(
    tree: RenderTree,
    out_dir: Path,
    *,
    dpi: float = PREVIEW_DPI,
) -> list[Path]:
    """
    Save one PNG per sheet, or the placeholder page when the tree is empty.

    Returns the written paths in sheet order.
    """
    if not isinstance(out_dir, Path):
        msg = "out_dir must be a pathlib.Path"
        raise TypeError(msg)

    out_dir.mkdir(parents=True, exist_ok=True)

    if tree.is_empty:
        path = out_dir / PLACEHOLDER_PREVIEW_NAME
        render_placeholder(
            tree.page_size,
            tree.placeholder or "",
            dpi=dpi,
        ).save(path, format="PNG")
        logger.info("No sheets to preview; wrote placeholder %s", path)
        return [path]

    saved: list[Path] = []
    for index, sheet in enumerate(tree.sheets, start=1):
        path = out_dir / preview_name(index)
        rasterize_sheet(sheet, dpi=dpi).save(path, format="PNG")
        saved.append(path)
    logger.info("Saved %d sheet previews to %s", len(saved), out_dir)
    return saved
