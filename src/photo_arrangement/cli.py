"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING, TypeVar

import photo_arrangement.config as pa_config
import photo_arrangement.main as pa_main
from photo_arrangement.config_defaults import (
    DEFAULT_FILL_MODE,
    DEFAULT_GAP_MM,
    DEFAULT_LAYOUT_MODE,
    DEFAULT_ORIENTATION,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SCALE_PERCENT,
    FIXED_LAYOUT_CHOICES,
)
from photo_arrangement.constants import EXPORT_FILENAME
from photo_arrangement.logging_utils import logger
from photo_arrangement.runtime import (
    layout_setting,
    non_negative_float,
    positive_float,
    resolve_project_version,
)
from photo_arrangement.type_defs import FILL_MODE_CHOICES, ORIENTATION_CHOICES

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

    from photo_arrangement.type_defs import ArrangementOutputs

_PROG = "photo-arrangement"

T = TypeVar("T")


def _wrap_validator(
    validator: Callable[[str], T],
    error_cls: type[argparse.ArgumentTypeError] = argparse.ArgumentTypeError,
) -> Callable[[str], T]:
    """Convert ``ValueError`` from a validator into ``ArgumentTypeError``."""

    def wrapper(text: str) -> T:
        try:
            return validator(text)
        except ValueError as exc:
            raise error_cls(str(exc)) from exc

    return wrapper


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    fixed_counts = ", ".join(str(n) for n in FIXED_LAYOUT_CHOICES)
    p = argparse.ArgumentParser(
        prog=_PROG,
        description="Arrange photos on printable A4 sheets.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {_PROG} a.jpg b.jpg c.jpg\n"
            f"  {_PROG} *.png --layout 4 --orientation landscape\n"
            f"  {_PROG} *.jpg --gap 2 --scale 90 --fill cover --preview\n\n"
            "Note:\n"
            "  Images are placed in the order given. The PDF is written to\n"
            f"  <output-dir>/{EXPORT_FILENAME}."
        ),
    )
    p.add_argument(
        "images", nargs="*",
        help="Image files, in placement order")
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")

    page = p.add_argument_group("page")
    page.add_argument(
        "--orientation", choices=list(ORIENTATION_CHOICES),
        help=f"Sheet orientation (default: {DEFAULT_ORIENTATION})",
        default=argparse.SUPPRESS)

    layout = p.add_argument_group("layout")
    layout.add_argument(
        "--layout", type=_wrap_validator(layout_setting),
        help=(
            "'auto' puts every image on one sheet and picks the grid; a "
            f"number fixes images per sheet, e.g. {fixed_counts} "
            f"(default: {DEFAULT_LAYOUT_MODE})"
        ),
        default=argparse.SUPPRESS)

    style = p.add_argument_group("style")
    style.add_argument(
        "--gap", type=_wrap_validator(non_negative_float),
        help=f"Gap between images in mm (default: {DEFAULT_GAP_MM:g})",
        default=argparse.SUPPRESS)
    style.add_argument(
        "--scale", type=_wrap_validator(positive_float),
        help=(
            "Image size as a percentage of its cell "
            f"(default: {DEFAULT_SCALE_PERCENT:g})"
        ),
        default=argparse.SUPPRESS)
    style.add_argument(
        "--fill", choices=list(FILL_MODE_CHOICES),
        help=(
            "'contain' shows the whole image, 'cover' crops to fill the "
            f"cell (default: {DEFAULT_FILL_MODE})"
        ),
        default=argparse.SUPPRESS)

    output = p.add_argument_group("output")
    output.add_argument(
        "--output-dir", type=str,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})",
        default=argparse.SUPPRESS)
    output.add_argument(
        "--preview", action="store_true",
        help="Also save one PNG preview per sheet")
    output.add_argument(
        "--no-export", action="store_true",
        help="Skip writing the PDF document")
    output.add_argument(
        "--print", action="store_true",
        help="Open the sheets in the system print dialog")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without arranging images")

    return p


def log_parameters(
    images: Sequence[str],
    cfg: pa_config.ArrangementConfig,
    args: argparse.Namespace,
) -> None:
    """Log all effective parameters."""
    logger.info("Images: %d file(s)", len(images))
    if getattr(args, "config", None):
        logger.info("Loaded config from: %s", args.config)
    logger.info("Orientation: %s", cfg.page.orientation)
    logger.info("Layout: %s", cfg.layout.mode)
    logger.info("Gap (mm): %g", cfg.style.gap_mm)
    logger.info("Scale (%%): %g", cfg.style.scale_percent)
    logger.info("Fill Mode: %s", cfg.style.fill_mode)
    logger.info("Output Directory: %s", cfg.output.output_dir)
    logger.info("PDF Export: %s",
                "Enabled" if cfg.output.export_pdf else "Disabled")
    logger.info("Previews: %s",
                "Enabled" if cfg.output.preview else "Disabled")
    logger.info("Print: %s",
                "Enabled" if cfg.output.print_sheets else "Disabled")


def run_from_args(args: argparse.Namespace) -> ArrangementOutputs:
    """Arrange images from parsed command-line arguments."""
    base_cfg: pa_config.ArrangementConfig | None = None
    if args.config:
        base_cfg = pa_config.ConfigLoader.load(args.config)
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            sys.exit(0)

    cfg = pa_config.build_config_from_cli(vars(args), base_config=base_cfg)

    images: list[str] = list(args.images)
    log_parameters(images, cfg, args)

    return pa_main.arrange_images(images, cfg)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    if args.validate_config_only and not args.config:
        arg_parser.error("--validate-config-only requires --config")
    if not args.validate_config_only and not args.images:
        arg_parser.error("the following arguments are required: images")

    try:
        run_from_args(args)
    except (ValueError, FileNotFoundError) as exc:
        arg_parser.error(str(exc))

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
