"""Presentation pass over an existing visual tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from photo_arrangement.config_defaults import (
    DEFAULT_FILL_MODE,
    DEFAULT_GAP_MM,
    DEFAULT_SCALE_PERCENT,
)

if TYPE_CHECKING:  # pragma: no cover
    from photo_arrangement.config import StyleConfig
    from photo_arrangement.sheets.tree import RenderTree
    from photo_arrangement.type_defs import FillMode


@dataclass(frozen=True, slots=True)
class StyleParams:
    """Gap between cells, image scale inside a cell, and fill mode."""

    gap_mm: float = DEFAULT_GAP_MM
    scale_percent: float = DEFAULT_SCALE_PERCENT
    fill_mode: FillMode = DEFAULT_FILL_MODE

    @classmethod
    def from_config(cls, config: StyleConfig) -> StyleParams:
        """Build style parameters from the validated style section."""
        return cls(
            gap_mm=config.gap_mm,
            scale_percent=config.scale_percent,
            fill_mode=config.fill_mode,
        )


class StyleController:
    """
    Apply presentation parameters to a render tree.

    Only gap, scale and fill values change; grids and the image assigned to
    each cell are left alone, so applying the same parameters again leaves
    the tree as it was.
    """

    @staticmethod
    def apply(tree: RenderTree, style: StyleParams) -> RenderTree:
        """Set ``style`` on every sheet and cell of ``tree``."""
        for sheet in tree.sheets:
            sheet.gap_mm = style.gap_mm
            for cell in sheet.cells:
                cell.scale_percent = style.scale_percent
                cell.fill_mode = style.fill_mode
        return tree
