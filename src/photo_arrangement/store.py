"""Ordered holder for the images loaded into an arrangement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Iterator

    from PIL import Image


@dataclass(frozen=True, eq=False)
class ImageHandle:
    """
    Decoded image plus the name it was loaded under.

    Handles compare by identity, so loading the same file twice yields two
    distinct entries.
    """

    image: Image.Image
    name: str = ""

    @property
    def size(self) -> tuple[int, int]:
        """Pixel (width, height) of the decoded image."""
        return self.image.size


class ImageStore:
    """Insertion-ordered image list; duplicates are allowed."""

    def __init__(self, handles: Iterable[ImageHandle] = ()) -> None:
        self._handles: list[ImageHandle] = list(handles)

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[ImageHandle]:
        return iter(self.snapshot())

    def append(self, handle: ImageHandle) -> None:
        """Add one image at the end."""
        self._handles.append(handle)

    def extend(self, handles: Iterable[ImageHandle]) -> None:
        """Add images at the end, keeping their order."""
        self._handles.extend(handles)

    def clear(self) -> None:
        """Drop every image."""
        self._handles.clear()

    def snapshot(self) -> tuple[ImageHandle, ...]:
        """Return an immutable copy of the current order."""
        return tuple(self._handles)
