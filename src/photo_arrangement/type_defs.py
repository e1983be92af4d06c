"""
Defines shared type aliases for the photo arrangement package.

Centralizes reusable type hints to improve consistency and readability.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

Orientation = Literal["portrait", "landscape"]
FillMode = Literal["contain", "cover"]
LayoutSetting = Literal["auto"] | int
RGB = tuple[int, int, int]

ORIENTATION_CHOICES: tuple[Orientation, ...] = ("portrait", "landscape")
FILL_MODE_CHOICES: tuple[FillMode, ...] = ("contain", "cover")


@dataclass(slots=True)
class ArrangementOutputs:
    """Files produced by one run."""

    previews: list[Path] = field(default_factory=list)
    document: Path | None = None
    printed: Path | None = None
