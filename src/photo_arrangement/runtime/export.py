"""Write the rendered sheets to a single PDF document."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from photo_arrangement.constants import (
    EXPORT_DPI,
    EXPORT_FILENAME,
    EXPORT_JPEG_QUALITY,
)
from photo_arrangement.logging_utils import logger
from photo_arrangement.sheets.raster import rasterize_tree

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

    from PIL import Image

    from photo_arrangement.sheets.tree import RenderTree

_FALLBACK_OUTPUT_DIR = "photo_arrangement_output"


def setup_output_directory(
    output_path: str | Path,
    path_factory: Callable[[str], Path] = Path,
) -> Path:
    """
    Create the output directory if needed and return its path.

    Falls back to ``photo_arrangement_output`` when the requested directory
    cannot be created so the run can still save its results.
    """
    resolved_path = path_factory(str(output_path))
    try:
        resolved_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Failed to create output directory %s: %s",
                     resolved_path, exc)
        fallback_path = path_factory(_FALLBACK_OUTPUT_DIR)
        fallback_path.mkdir(parents=True, exist_ok=True)
        logger.info("Using fallback directory: %s", fallback_path)
        return fallback_path
    return resolved_path


def export_path(output_dir: Path | str) -> Path:
    """Return where the exported document is written inside output_dir."""
    return Path(output_dir) / EXPORT_FILENAME


def write_pdf(
    pages: Sequence[Image.Image],
    out_path: Path,
    *,
    dpi: float = EXPORT_DPI,
) -> Path:
    """
    Save ``pages`` as one PDF, one document page per image, in order.

    The page resolution is set to ``dpi`` so the physical page size matches
    the sheet size the pages were rasterized for.
    """
    if not pages:
        msg = "No pages to write"
        raise ValueError(msg)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    first, *rest = pages
    first.save(
        out_path,
        format="PDF",
        save_all=True,
        append_images=rest,
        resolution=float(dpi),
        quality=EXPORT_JPEG_QUALITY,
    )
    return out_path


def export_pdf(tree: RenderTree, output_dir: Path | str) -> Path | None:
    """
    Export every sheet of ``tree`` to the arrangement PDF.

    Returns the document path, or ``None`` without writing anything when
    the tree holds no sheets.
    """
    if tree.is_empty:
        logger.info("Nothing to export: no images loaded.")
        return None

    pages = rasterize_tree(tree, dpi=EXPORT_DPI)
    out_path = write_pdf(pages, export_path(output_dir), dpi=EXPORT_DPI)
    logger.info("Exported %d %s sheet(s) to %s", len(pages),
                tree.orientation, out_path)
    return out_path
