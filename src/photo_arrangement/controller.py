"""
Application state and commands for one arrangement session.

The controller owns the image store, the current layout settings, the
current arrangement and its render tree. Commands either recompute the
arrangement (new images, clear, orientation, layout mode) or only re-apply
presentation (gap, scale, fill), which never re-partitions.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING

from photo_arrangement.config_defaults import DEFAULT_ORIENTATION
from photo_arrangement.intake import items_from_paths, load_batch
from photo_arrangement.layout import (
    AUTO,
    Arrangement,
    AutoLayout,
    FixedLayout,
    dimensions,
    paginate,
)
from photo_arrangement.logging_utils import logger
from photo_arrangement.runtime.export import export_pdf
from photo_arrangement.runtime.printing import print_tree
from photo_arrangement.runtime.validation import (
    non_negative_float,
    parse_layout_mode,
    positive_float,
    setting_from_mode,
    validate_fill_mode,
    validate_orientation,
)
from photo_arrangement.sheets import (
    StyleController,
    StyleParams,
    build_render_tree,
    save_previews,
)
from photo_arrangement.store import ImageHandle, ImageStore

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Iterable, Sequence

    from photo_arrangement.config import ArrangementConfig
    from photo_arrangement.intake import UploadItem
    from photo_arrangement.layout import LayoutMode, PageSize
    from photo_arrangement.sheets import RenderTree
    from photo_arrangement.type_defs import Orientation

    BatchLoader = Callable[[Sequence[UploadItem]], list[ImageHandle]]
    Exporter = Callable[[RenderTree, Path], Path | None]
    Printer = Callable[[RenderTree], Path | None]


@dataclass(frozen=True, slots=True)
class LayoutSettings:
    """Control values captured once per recomputation."""

    orientation: Orientation = DEFAULT_ORIENTATION
    mode: LayoutMode = AUTO
    style: StyleParams = field(default_factory=StyleParams)

    @property
    def page_size(self) -> PageSize:
        """Sheet dimensions for the current orientation."""
        return dimensions(self.orientation)

    @classmethod
    def from_config(cls, config: ArrangementConfig) -> LayoutSettings:
        """Build settings from a validated configuration."""
        return cls(
            orientation=config.page.orientation,
            mode=parse_layout_mode(config.layout.mode),
            style=StyleParams.from_config(config.style),
        )


class ArrangementController:
    """Single owner of the store, settings, arrangement and render tree."""

    def __init__(
        self,
        settings: LayoutSettings | None = None,
        *,
        loader: BatchLoader = load_batch,
        exporter: Exporter = export_pdf,
        printer: Printer = print_tree,
    ) -> None:
        self._store = ImageStore()
        self._settings = settings or LayoutSettings()
        self._loader = loader
        self._exporter = exporter
        self._printer = printer
        self._arrangement: Arrangement[ImageHandle] = Arrangement()
        self._tree = build_render_tree(
            self._arrangement, self._settings.page_size,
        )
        self.recompute()

    @classmethod
    def from_config(
        cls,
        config: ArrangementConfig,
        *,
        loader: BatchLoader = load_batch,
        exporter: Exporter = export_pdf,
        printer: Printer = print_tree,
    ) -> ArrangementController:
        """Create a controller whose initial settings come from ``config``."""
        return cls(
            LayoutSettings.from_config(config),
            loader=loader,
            exporter=exporter,
            printer=printer,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def settings(self) -> LayoutSettings:
        """Current control values."""
        return self._settings

    @property
    def arrangement(self) -> Arrangement[ImageHandle]:
        """Arrangement from the last recomputation."""
        return self._arrangement

    @property
    def render_tree(self) -> RenderTree:
        """Visual tree for the current arrangement."""
        return self._tree

    @property
    def images(self) -> tuple[ImageHandle, ...]:
        """Snapshot of the loaded images in placement order."""
        return self._store.snapshot()

    # ------------------------------------------------------------------
    # Layout commands
    # ------------------------------------------------------------------
    def recompute(self) -> Arrangement[ImageHandle]:
        """Re-partition the store and rebuild the render tree."""
        settings = self._settings
        page = settings.page_size
        self._arrangement = paginate(
            self._store.snapshot(), settings.mode, page.width, page.height,
        )
        self._tree = build_render_tree(self._arrangement, page)
        StyleController.apply(self._tree, settings.style)
        logger.debug(
            "Laid out %d image(s) on %d %s sheet(s), layout %s",
            len(self._store), len(self._arrangement),
            settings.orientation, settings.mode,
        )
        return self._arrangement

    def add_batch(self, items: Sequence[UploadItem]) -> int:
        """
        Load one upload batch and lay out again once it has settled.

        Returns how many images were added.
        """
        handles = self._loader(items)
        self._store.extend(handles)
        self.recompute()
        return len(handles)

    def add_paths(self, paths: Iterable[str | Path]) -> int:
        """Load image files as one batch, in the given order."""
        return self.add_batch(items_from_paths(paths))

    def clear(self) -> None:
        """Remove every image; the tree falls back to the placeholder."""
        self._store.clear()
        logger.info("Cleared all images.")
        self.recompute()

    def set_orientation(self, value: str) -> None:
        """Switch sheet orientation; invalid values keep the current one."""
        orientation = validate_orientation(value)
        self._settings = replace(self._settings, orientation=orientation)
        self.recompute()

    def set_layout_mode(self, value: str | int | LayoutMode) -> None:
        """Switch layout mode; invalid values keep the current one."""
        if isinstance(value, AutoLayout | FixedLayout):
            mode = value
        else:
            mode = parse_layout_mode(value)
        self._settings = replace(self._settings, mode=mode)
        logger.debug("Layout mode set to %s", setting_from_mode(mode))
        self.recompute()

    # ------------------------------------------------------------------
    # Presentation commands
    # ------------------------------------------------------------------
    def set_gap(self, gap_mm: float) -> None:
        """Change the gap between cells without re-partitioning."""
        gap = non_negative_float(gap_mm)
        self._restyle(replace(self._settings.style, gap_mm=gap))

    def set_scale(self, scale_percent: float) -> None:
        """Change image scale inside each cell without re-partitioning."""
        scale = positive_float(scale_percent)
        self._restyle(replace(self._settings.style, scale_percent=scale))

    def set_fill_mode(self, fill_mode: str) -> None:
        """Switch between letterboxing and cropping images to their cells."""
        mode = validate_fill_mode(fill_mode)
        self._restyle(replace(self._settings.style, fill_mode=mode))

    def _restyle(self, style: StyleParams) -> None:
        self._settings = replace(self._settings, style=style)
        StyleController.apply(self._tree, style)

    # ------------------------------------------------------------------
    # Output commands
    # ------------------------------------------------------------------
    def save_previews(self, output_dir: Path | str) -> list[Path]:
        """Write PNG previews of the current sheets (or the placeholder)."""
        return save_previews(self._tree, Path(output_dir))

    def export(self, output_dir: Path | str) -> Path | None:
        """Export the sheets to PDF; a no-op while nothing is loaded."""
        if self._tree.is_empty:
            logger.info("Nothing to export: no images loaded.")
            return None
        return self._exporter(self._tree, Path(output_dir))

    def print_sheets(self) -> Path | None:
        """Open the sheets for printing; a no-op while nothing is loaded."""
        if self._tree.is_empty:
            logger.info("Nothing to print: no images loaded.")
            return None
        return self._printer(self._tree)
