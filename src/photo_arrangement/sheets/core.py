"""Rendering primitives shared by sheet rasterization and the empty state."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from PIL import Image, ImageDraw, ImageFont, ImageOps

from photo_arrangement.constants import (
    COLOR_MODE_RGB,
    COLOR_WHITE,
    MM_PER_INCH,
)
from photo_arrangement.type_defs import RGB, FillMode


def mm_to_px(mm: float, dpi: float) -> int:
    """Convert a length in millimetres to whole pixels at ``dpi``."""
    return round(mm / MM_PER_INCH * dpi)


@dataclass(frozen=True)
class Rect:
    """Simple rectangle with convenience accessors."""

    x0: int
    y0: int
    x1: int
    y1: int

    @property
    def w(self) -> int:
        """Width."""
        return self.x1 - self.x0

    @property
    def h(self) -> int:
        """Height."""
        return self.y1 - self.y0

    def size(self) -> tuple[int, int]:
        """Return (w, h)."""
        return self.w, self.h

    def origin(self) -> tuple[int, int]:
        """Return the top left corner."""
        return self.x0, self.y0


def to_rgb(img: Image.Image, *, bg_color: RGB) -> Image.Image:
    """Convert PIL image to RGB, alpha compositing if needed."""
    if img.mode == COLOR_MODE_RGB:
        return img
    if img.mode in ("RGBA", "LA", "PA") or "transparency" in img.info:
        bg = Image.new("RGBA", img.size, (*bg_color, 255))
        comp = Image.alpha_composite(bg, img.convert("RGBA"))
        return comp.convert(COLOR_MODE_RGB)
    return img.convert(COLOR_MODE_RGB)


def scaled_box(cell_size: tuple[int, int], scale_percent: float) -> tuple[int, int]:
    """Return the image box for a cell scaled by ``scale_percent`` per axis."""
    factor = scale_percent / 100.0
    w, h = cell_size
    return max(1, round(w * factor)), max(1, round(h * factor))


def fit_image(
    img: Image.Image,
    box_size: tuple[int, int],
    *,
    fit_mode: FillMode = "contain",
    bg_color: RGB = COLOR_WHITE,
) -> Image.Image:
    """
    Resize img into box_size.

    fit_mode:
        - "cover": fills the box and crops the overflow
        - "contain": letterboxes to preserve all content
    """
    if fit_mode == "cover":
        return ImageOps.fit(
            img,
            box_size,
            method=Image.Resampling.LANCZOS,
            centering=(0.5, 0.5),
        )

    iw, ih = img.size
    bw, bh = box_size
    scale = min(bw / iw, bh / ih)
    rw, rh = max(1, int(iw * scale)), max(1, int(ih * scale))
    resized = img.resize((rw, rh), Image.Resampling.LANCZOS)
    boxed = Image.new(COLOR_MODE_RGB, box_size, bg_color)
    boxed.paste(resized, ((bw - rw) // 2, (bh - rh) // 2))
    return boxed


def place_in_cell(
    img: Image.Image,
    cell_size: tuple[int, int],
    *,
    scale_percent: float,
    fit_mode: FillMode,
    bg_color: RGB = COLOR_WHITE,
) -> Image.Image:
    """
    Render one cell: the fitted image centred and clipped to the cell.

    Scales above 100 percent grow the image box past the cell edges; the
    overflow is cut off at the cell boundary.
    """
    cw, ch = cell_size
    tile = Image.new(COLOR_MODE_RGB, cell_size, bg_color)
    bw, bh = scaled_box(cell_size, scale_percent)
    fitted = fit_image(
        to_rgb(img, bg_color=bg_color),
        (bw, bh),
        fit_mode=fit_mode,
        bg_color=bg_color,
    )
    tile.paste(fitted, ((cw - bw) // 2, (ch - bh) // 2))
    return tile


@lru_cache(maxsize=8)
def _get_font(px: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Load a font at the given pixel size with fallback; cached."""
    try:
        return ImageFont.truetype("DejaVuSans.ttf", px)
    except OSError:
        return ImageFont.load_default()


def draw_centered_text(
    canvas: Image.Image,
    text: str,
    *,
    px: int,
    fill: RGB,
) -> None:
    """Draw ``text`` centred on the canvas."""
    draw = ImageDraw.Draw(canvas)
    font = _get_font(max(1, px))
    x0, y0, x1, y1 = draw.textbbox((0, 0), text, font=font)
    x = (canvas.width - (x1 - x0)) // 2 - x0
    y = (canvas.height - (y1 - y0)) // 2 - y0
    draw.text((x, y), text, font=font, fill=fill)
