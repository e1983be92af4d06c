"""Physical sheet dimensions for portrait and landscape orientation."""

from __future__ import annotations

from dataclasses import dataclass

from photo_arrangement.constants import A4_HEIGHT_MM, A4_WIDTH_MM


@dataclass(frozen=True, slots=True)
class PageSize:
    """Width and height of a sheet in millimetres."""

    width: float
    height: float

    @property
    def is_landscape(self) -> bool:
        """True when the sheet is wider than tall."""
        return self.width > self.height

    @property
    def orientation(self) -> str:
        """Return ``"landscape"`` or ``"portrait"`` for this sheet."""
        return "landscape" if self.is_landscape else "portrait"

    def size(self) -> tuple[float, float]:
        """Return (width, height)."""
        return self.width, self.height


def dimensions(orientation: str) -> PageSize:
    """
    Return the nominal A4 sheet for the given orientation.

    Only ``"landscape"`` swaps the sides; every other value is treated as
    portrait.
    """
    if orientation == "landscape":
        return PageSize(width=A4_HEIGHT_MM, height=A4_WIDTH_MM)
    return PageSize(width=A4_WIDTH_MM, height=A4_HEIGHT_MM)
