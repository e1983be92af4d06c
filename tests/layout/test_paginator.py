"""Tests for splitting images into sheets."""
import math

import pytest

from photo_arrangement.layout.grid_solver import AUTO, FixedLayout, Grid, solve
from photo_arrangement.layout.paginator import Arrangement, chunk_size, paginate

A4_PORTRAIT = (210, 297)


class TestPaginate:
    def test_empty_input_gives_empty_arrangement(self) -> None:
        arrangement = paginate([], AUTO, *A4_PORTRAIT)
        assert arrangement == Arrangement()
        assert arrangement.is_empty
        assert len(arrangement) == 0

    def test_auto_keeps_everything_on_one_sheet(self) -> None:
        items = list(range(7))
        arrangement = paginate(items, AUTO, *A4_PORTRAIT)
        assert len(arrangement) == 1
        page = arrangement.pages[0]
        assert page.items == tuple(items)
        assert page.grid == solve(7, *A4_PORTRAIT, AUTO)

    def test_ten_items_four_per_page(self) -> None:
        arrangement = paginate(list("abcdefghij"), FixedLayout(4), *A4_PORTRAIT)
        assert [len(page) for page in arrangement] == [4, 4, 2]
        assert all(page.grid == Grid(2, 2) for page in arrangement)
        assert arrangement.pages[-1].empty_cells == 2

    @pytest.mark.parametrize("per_page", [1, 2, 3, 4, 6, 8, 9])
    @pytest.mark.parametrize("count", [1, 5, 9, 10, 23])
    def test_fixed_pages_cover_items_in_order(
        self, per_page: int, count: int,
    ) -> None:
        items = list(range(count))
        arrangement = paginate(items, FixedLayout(per_page), *A4_PORTRAIT)
        assert len(arrangement) == math.ceil(count / per_page)
        assert all(0 < len(page) <= per_page for page in arrangement)
        assert list(arrangement.items()) == items

    def test_duplicates_are_kept(self) -> None:
        item = object()
        arrangement = paginate([item, item], AUTO, *A4_PORTRAIT)
        assert arrangement.items() == (item, item)

    def test_chunk_size(self) -> None:
        assert chunk_size(AUTO, 11) == 11
        assert chunk_size(FixedLayout(3), 11) == 3
