"""Hand the rendered sheets to the host's print and preview facility."""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from photo_arrangement.logging_utils import logger
from photo_arrangement.runtime.export import export_pdf

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable

    from photo_arrangement.sheets.tree import RenderTree

_SPOOL_DIR_NAME = "photo-arrangement-spool"


def open_for_printing(path: Path) -> None:
    """
    Open ``path`` in the platform's print or preview flow.

    Windows sends the document straight to the print verb; macOS opens
    Preview; other systems use the desktop default viewer.
    """
    if sys.platform == "win32":
        os.startfile(path, "print")  # type: ignore[attr-defined]  # noqa: S606
    elif sys.platform == "darwin":
        subprocess.run(["open", "-a", "Preview", str(path)], check=True)  # noqa: S603, S607
    else:
        subprocess.run(["xdg-open", str(path)], check=True)  # noqa: S603, S607


def default_spool_dir() -> Path:
    """Return the shared spool directory for print jobs."""
    return Path(tempfile.gettempdir()) / _SPOOL_DIR_NAME


def print_tree(
    tree: RenderTree,
    *,
    spool_dir: Path | None = None,
    launcher: Callable[[Path], None] = open_for_printing,
) -> Path | None:
    """
    Export ``tree`` to a spool PDF and open it for printing.

    The document is the same one produced by export, so printed pages match
    the on-screen sheets. Without ``spool_dir`` every call reuses one
    directory under the system temp dir, overwriting the previous document.
    Returns the spooled path, or ``None`` when there is nothing to print.
    """
    if tree.is_empty:
        logger.info("Nothing to print: no images loaded.")
        return None

    target_dir = spool_dir or default_spool_dir()
    document = export_pdf(tree, target_dir)
    if document is None:
        return None
    launcher(document)
    logger.info("Opened %s for printing", document)
    return document
