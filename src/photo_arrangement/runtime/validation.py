"""
Input validation for control values and input paths.

Every control change passes through these helpers before it reaches the
layout code, so a rejected value never replaces the current setting.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import TYPE_CHECKING, cast

from photo_arrangement.layout.grid_solver import (
    AUTO,
    AutoLayout,
    FixedLayout,
)
from photo_arrangement.type_defs import FILL_MODE_CHOICES, ORIENTATION_CHOICES

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable

    from photo_arrangement.layout.grid_solver import LayoutMode
    from photo_arrangement.type_defs import FillMode, LayoutSetting, Orientation

_AUTO_TEXT = "auto"


def parse_layout_mode(value: str | int) -> LayoutMode:
    """
    Turn ``"auto"`` or a per-page count into a layout mode.

    Raises:
        ValueError: If the value is neither ``"auto"`` nor a positive
            integer.

    """
    if isinstance(value, str):
        text = value.strip().lower()
        if text == _AUTO_TEXT:
            return AUTO
        try:
            count = int(text)
        except ValueError as exc:
            msg = f"Layout must be 'auto' or a positive integer, got {value!r}"
            raise ValueError(msg) from exc
    elif isinstance(value, bool) or not isinstance(value, int):
        msg = f"Layout must be 'auto' or a positive integer, got {value!r}"
        raise ValueError(msg)
    else:
        count = value
    return FixedLayout(count)


def layout_setting(value: str | int) -> LayoutSetting:
    """Validate a layout value and return its config form."""
    return setting_from_mode(parse_layout_mode(value))


def setting_from_mode(mode: LayoutMode) -> LayoutSetting:
    """Return ``"auto"`` or the per-page count for ``mode``."""
    if isinstance(mode, AutoLayout):
        return "auto"
    return mode.count


def validate_orientation(value: str) -> Orientation:
    """Accept ``portrait`` or ``landscape`` in any case."""
    text = value.strip().lower()
    if text not in ORIENTATION_CHOICES:
        msg = f"Orientation must be one of {ORIENTATION_CHOICES}, got {value!r}"
        raise ValueError(msg)
    return cast("Orientation", text)


def validate_fill_mode(value: str) -> FillMode:
    """Accept ``contain`` or ``cover`` in any case."""
    text = value.strip().lower()
    if text not in FILL_MODE_CHOICES:
        msg = f"Fill mode must be one of {FILL_MODE_CHOICES}, got {value!r}"
        raise ValueError(msg)
    return cast("FillMode", text)


def non_negative_float(value: str | float) -> float:
    """Parse a finite number that is zero or larger."""
    number = _finite_float(value)
    if number < 0:
        msg = "must not be negative"
        raise ValueError(msg)
    return number


def positive_float(value: str | float) -> float:
    """Parse a finite number strictly greater than zero."""
    number = _finite_float(value)
    if number <= 0:
        msg = "must be positive"
        raise ValueError(msg)
    return number


def _finite_float(value: str | float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        msg = "must be a number"
        raise ValueError(msg) from exc
    if not math.isfinite(number):
        msg = "must be a finite number"
        raise ValueError(msg)
    return number


def validate_input_paths(paths: Iterable[str | Path]) -> None:
    """Ensure every provided image path points to a file."""
    for path in paths:
        if not Path(path).is_file():
            msg = f"Image file not found: {path}"
            raise FileNotFoundError(msg)
