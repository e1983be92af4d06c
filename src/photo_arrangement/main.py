"""Top-level orchestration for arranging image files onto sheets."""

from __future__ import annotations

from typing import TYPE_CHECKING

import photo_arrangement.runtime as pa_runtime
from photo_arrangement.controller import ArrangementController
from photo_arrangement.logging_utils import logger
from photo_arrangement.type_defs import ArrangementOutputs

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence
    from pathlib import Path

    from photo_arrangement.config import ArrangementConfig


def arrange_images(
    image_paths: Sequence[str | Path],
    config: ArrangementConfig,
    *,
    controller: ArrangementController | None = None,
) -> ArrangementOutputs:
    """
    Lay out ``image_paths`` per ``config`` and produce the requested outputs.

    Images keep the order in which they are given. Previews, the PDF export
    and printing are each produced only when enabled in ``config.output``.
    """
    pa_runtime.validate_input_paths(image_paths)

    ctrl = controller or ArrangementController.from_config(config)
    added = ctrl.add_paths(image_paths)
    arrangement = ctrl.arrangement
    logger.info(
        "Arranged %d image(s) on %d sheet(s)", added, len(arrangement),
    )
    for number, page in enumerate(arrangement, start=1):
        logger.info(
            "Sheet %d: %d image(s) in %d x %d grid",
            number, len(page), page.grid.rows, page.grid.cols,
        )

    outputs = ArrangementOutputs()
    output = config.output
    needs_dir = output.preview or output.export_pdf
    out_dir = (
        pa_runtime.setup_output_directory(output.output_dir)
        if needs_dir
        else None
    )

    if output.preview and out_dir is not None:
        outputs.previews = ctrl.save_previews(out_dir)
    if output.export_pdf and out_dir is not None:
        outputs.document = ctrl.export(out_dir)
    if output.print_sheets:
        outputs.printed = ctrl.print_sheets()

    return outputs
