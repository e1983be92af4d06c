"""Runtime helpers for validation, export, printing and version lookup."""

from .export import export_path, export_pdf, setup_output_directory, write_pdf
from .printing import open_for_printing, print_tree
from .validation import (
    layout_setting,
    non_negative_float,
    parse_layout_mode,
    positive_float,
    setting_from_mode,
    validate_fill_mode,
    validate_input_paths,
    validate_orientation,
)
from .version import resolve_project_version

__all__ = [
    "export_path",
    "export_pdf",
    "layout_setting",
    "non_negative_float",
    "open_for_printing",
    "parse_layout_mode",
    "positive_float",
    "print_tree",
    "resolve_project_version",
    "setting_from_mode",
    "setup_output_directory",
    "validate_fill_mode",
    "validate_input_paths",
    "validate_orientation",
    "write_pdf",
]
