"""Split an ordered image sequence into sheets and solve each sheet's grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from photo_arrangement.layout.grid_solver import FixedLayout, Grid, solve

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator, Sequence

    from photo_arrangement.layout.grid_solver import LayoutMode

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One sheet: its grid and the contiguous run of items it holds."""

    grid: Grid
    items: tuple[T, ...]

    def __len__(self) -> int:
        return len(self.items)

    @property
    def empty_cells(self) -> int:
        """Number of trailing cells left empty on this sheet."""
        return self.grid.empty_cells(len(self.items))


@dataclass(frozen=True)
class Arrangement(Generic[T]):
    """Ordered sheets covering every item exactly once."""

    pages: tuple[Page[T], ...] = ()

    def __len__(self) -> int:
        return len(self.pages)

    def __iter__(self) -> Iterator[Page[T]]:
        return iter(self.pages)

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to lay out."""
        return not self.pages

    def items(self) -> tuple[T, ...]:
        """Return every item in sheet order."""
        return tuple(item for page in self.pages for item in page.items)


def chunk_size(mode: LayoutMode, item_count: int) -> int:
    """Items per sheet: the declared count, or everything for auto."""
    if isinstance(mode, FixedLayout):
        return mode.count
    return item_count


def paginate(
    images: Sequence[T],
    mode: LayoutMode,
    page_width: float,
    page_height: float,
) -> Arrangement[T]:
    """
    Partition ``images`` into sheets and pick a grid for each.

    Auto mode keeps every image on a single sheet; fixed mode fills sheets
    of ``count`` items and leaves the remainder on a shorter last sheet.
    An empty sequence yields an empty arrangement.
    """
    if not images:
        return Arrangement()

    size = chunk_size(mode, len(images))
    pages = []
    for start in range(0, len(images), size):
        chunk = tuple(images[start:start + size])
        grid = solve(len(chunk), page_width, page_height, mode)
        pages.append(Page(grid=grid, items=chunk))
    return Arrangement(pages=tuple(pages))
