"""
Configuration schema and loader for photo arrangement.

Defines Pydantic models representing structured configuration sections
and a TOML-based config loader with validation support.
"""

from pathlib import Path
from typing import Annotated, Any, Literal

import tomlkit
from pydantic import BaseModel, Field

from photo_arrangement.config_defaults import (
    DEFAULT_FILL_MODE,
    DEFAULT_GAP_MM,
    DEFAULT_LAYOUT_MODE,
    DEFAULT_ORIENTATION,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SCALE_PERCENT,
)
from photo_arrangement.type_defs import FillMode, Orientation


class PageConfig(BaseModel):
    """Select the sheet orientation."""

    orientation: Orientation = Field(DEFAULT_ORIENTATION)


class LayoutConfig(BaseModel):
    """Choose automatic grids or a fixed number of images per sheet."""

    mode: Literal["auto"] | Annotated[int, Field(ge=1)] = Field(
        DEFAULT_LAYOUT_MODE,
    )


class StyleConfig(BaseModel):
    """Control spacing, scaling and fill of images on a sheet."""

    gap_mm: float = Field(DEFAULT_GAP_MM, ge=0)
    scale_percent: float = Field(DEFAULT_SCALE_PERCENT, gt=0)
    fill_mode: FillMode = Field(DEFAULT_FILL_MODE)


class OutputConfig(BaseModel):
    """Configure where results go and which ones are produced."""

    output_dir: str = Field(DEFAULT_OUTPUT_DIR)
    export_pdf: bool = True
    preview: bool = False
    print_sheets: bool = False


class ArrangementConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml, grouping related parameters
    under logical categories.
    """

    # model_validate({}) lets Pydantic fill every field from its Field(...)
    # default while keeping the factory a zero-argument callable.
    page: PageConfig = Field(
        default_factory=lambda: PageConfig.model_validate({}),
    )
    layout: LayoutConfig = Field(
        default_factory=lambda: LayoutConfig.model_validate({}),
    )
    style: StyleConfig = Field(
        default_factory=lambda: StyleConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> ArrangementConfig:
        """
        Load an arrangement configuration from a TOML file.

        Returns a validated ArrangementConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return ArrangementConfig.model_validate(doc.unwrap())


# CLI argument name -> (section, field)
_CLI_VALUE_FIELDS: dict[str, tuple[str, str]] = {
    "orientation": ("page", "orientation"),
    "layout": ("layout", "mode"),
    "gap": ("style", "gap_mm"),
    "scale": ("style", "scale_percent"),
    "fill": ("style", "fill_mode"),
    "output_dir": ("output", "output_dir"),
}

# CLI switch name -> (section, field, value set when the switch is given)
_CLI_SWITCH_FIELDS: dict[str, tuple[str, str, bool]] = {
    "no_export": ("output", "export_pdf", False),
    "preview": ("output", "preview", True),
    "print": ("output", "print_sheets", True),
}


def build_config_from_cli(
    args: dict[str, Any],
    base_config: ArrangementConfig | None = None,
) -> ArrangementConfig:
    """
    Overlay command-line values on a base configuration.

    Arguments that are missing or ``None`` keep the value from
    ``base_config`` (or the defaults when no base is given). Switches only
    apply when they were set.
    """
    base = base_config or ArrangementConfig.model_validate({})
    data = base.model_dump()

    for arg_name, (section, key) in _CLI_VALUE_FIELDS.items():
        value = args.get(arg_name)
        if value is not None:
            data[section][key] = value

    for arg_name, (section, key, switch_value) in _CLI_SWITCH_FIELDS.items():
        if args.get(arg_name):
            data[section][key] = switch_value

    return ArrangementConfig.model_validate(data)
