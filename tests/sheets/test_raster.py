"""Tests for sheet rasterization primitives."""
import pytest
from PIL import Image, ImageChops

from photo_arrangement.constants import COLOR_WHITE
from photo_arrangement.layout import AUTO, dimensions, paginate
from photo_arrangement.sheets.core import (
    fit_image,
    mm_to_px,
    place_in_cell,
    scaled_box,
    to_rgb,
)
from photo_arrangement.sheets.raster import (
    cell_rect,
    page_pixels,
    rasterize_sheet,
    rasterize_tree,
    render_placeholder,
)
from photo_arrangement.sheets.tree import build_render_tree
from photo_arrangement.store import ImageHandle

pytestmark = pytest.mark.visual

# Single 100x50 image on an A4 portrait sheet at 96 dpi: the 190x277 mm
# cell is 718x1047 px and starts at (38, 38).
CELL_X0, CELL_Y0 = 38, 38
CELL_W, CELL_H = 718, 1047


def _is_red(pixel: tuple[int, int, int]) -> bool:
    r, g, b = pixel
    return r > 200 and g < 60 and b < 60


def _single_sheet(fill_mode: str = "contain", scale: float = 100):
    page = dimensions("portrait")
    handle = ImageHandle(image=Image.new("RGB", (100, 50), "red"))
    arrangement = paginate([handle], AUTO, page.width, page.height)
    tree = build_render_tree(arrangement, page)
    sheet = tree.sheets[0]
    sheet.cells[0].fill_mode = fill_mode
    sheet.cells[0].scale_percent = scale
    return tree, sheet


class TestPrimitives:
    def test_mm_to_px(self) -> None:
        assert mm_to_px(25.4, 96) == 96
        assert mm_to_px(210, 96) == 794
        assert mm_to_px(297, 192) == 2245

    def test_scaled_box(self) -> None:
        assert scaled_box((200, 100), 50) == (100, 50)
        assert scaled_box((200, 100), 150) == (300, 150)
        assert scaled_box((3, 3), 1) == (1, 1)

    def test_to_rgb_composites_alpha(self) -> None:
        rgba = Image.new("RGBA", (4, 4), (0, 0, 0, 0))
        out = to_rgb(rgba, bg_color=COLOR_WHITE)
        assert out.mode == "RGB"
        assert out.getpixel((0, 0)) == COLOR_WHITE

    @pytest.mark.parametrize("mode", ["contain", "cover"])
    def test_fit_image_matches_box(self, sample_image, mode: str) -> None:
        assert fit_image(sample_image, (30, 70), fit_mode=mode).size == (30, 70)

    def test_overscaled_image_is_clipped_to_cell(self, sample_image) -> None:
        tile = place_in_cell(sample_image, (40, 20), scale_percent=200,
                             fit_mode="cover")
        assert tile.size == (40, 20)
        assert _is_red(tile.getpixel((0, 0)))
        assert _is_red(tile.getpixel((39, 19)))


class TestRasterizeSheet:
    def test_page_size_in_pixels(self) -> None:
        assert page_pixels(dimensions("portrait"), 96) == (794, 1123)
        assert page_pixels(dimensions("landscape"), 96) == (1123, 794)

    def test_cell_rect(self) -> None:
        _, sheet = _single_sheet()
        rect = cell_rect(sheet, 0, 96)
        assert rect.origin() == (CELL_X0, CELL_Y0)
        assert rect.size() == (CELL_W, CELL_H)

    def test_contain_letterboxes(self) -> None:
        _, sheet = _single_sheet("contain")
        canvas = rasterize_sheet(sheet, dpi=96)
        assert canvas.size == (794, 1123)
        assert canvas.getpixel((CELL_X0 + 359, CELL_Y0 + 5)) == COLOR_WHITE
        assert _is_red(canvas.getpixel((CELL_X0 + 359, CELL_Y0 + 523)))
        assert canvas.getpixel((5, 5)) == COLOR_WHITE

    def test_cover_fills_cell(self) -> None:
        _, sheet = _single_sheet("cover")
        canvas = rasterize_sheet(sheet, dpi=96)
        assert _is_red(canvas.getpixel((CELL_X0 + 359, CELL_Y0 + 5)))
        assert _is_red(canvas.getpixel((CELL_X0 + 2, CELL_Y0 + 523)))

    def test_half_scale_leaves_margin_in_cell(self) -> None:
        _, sheet = _single_sheet("cover", scale=50)
        canvas = rasterize_sheet(sheet, dpi=96)
        assert canvas.getpixel((CELL_X0 + 5, CELL_Y0 + 5)) == COLOR_WHITE
        assert _is_red(canvas.getpixel((CELL_X0 + 359, CELL_Y0 + 523)))

    def test_rasterize_tree_one_image_per_sheet(self, make_handles) -> None:
        page = dimensions("landscape")
        tree = build_render_tree(
            paginate(make_handles(3), AUTO, page.width, page.height), page,
        )
        pages = rasterize_tree(tree, dpi=48)
        assert len(pages) == 1
        assert pages[0].size == page_pixels(page, 48)


class TestPlaceholder:
    def test_placeholder_draws_text(self) -> None:
        page = dimensions("portrait")
        canvas = render_placeholder(page, dpi=96)
        blank = Image.new("RGB", canvas.size, COLOR_WHITE)
        assert canvas.size == (794, 1123)
        assert ImageChops.difference(canvas, blank).getbbox() is not None
