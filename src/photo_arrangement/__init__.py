"""Public package exports for photo arrangement."""

from __future__ import annotations

from .controller import ArrangementController, LayoutSettings
from .intake import UploadItem, load_batch
from .layout import (
    AUTO,
    Arrangement,
    FixedLayout,
    Grid,
    Page,
    PageSize,
    dimensions,
    paginate,
    solve,
)
from .sheets import RenderTree, StyleController, StyleParams
from .store import ImageHandle, ImageStore

__all__ = [
    "AUTO",
    "Arrangement",
    "ArrangementController",
    "FixedLayout",
    "Grid",
    "ImageHandle",
    "ImageStore",
    "LayoutSettings",
    "Page",
    "PageSize",
    "RenderTree",
    "StyleController",
    "StyleParams",
    "UploadItem",
    "dimensions",
    "load_batch",
    "paginate",
    "solve",
]
