"""
Test configuration and shared fixtures for photo_arrangement.

Provides in-memory images, image handles, upload items written as real
PNG bytes, and a config factory. Loaded automatically by pytest.
"""
from __future__ import annotations

from collections.abc import Callable
from io import BytesIO
from pathlib import Path
from typing import Any

import pytest
from PIL import Image

from photo_arrangement.config import ArrangementConfig
from photo_arrangement.constants import COLOR_MODE_RGB
from photo_arrangement.intake import UploadItem
from photo_arrangement.logging_utils import logger
from photo_arrangement.store import ImageHandle

_PALETTE = ("red", "green", "blue", "yellow", "purple", "orange", "cyan")


def png_bytes(img: Image.Image) -> bytes:
    """Encode an image as PNG bytes."""
    buffer = BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def sample_image() -> Image.Image:
    """Create a sample 100x100 red RGB PIL image."""
    return Image.new(COLOR_MODE_RGB, (100, 100), color="red")


@pytest.fixture
def make_handles() -> Callable[[int], list[ImageHandle]]:
    """Factory for ``count`` small distinct image handles."""

    def _build(count: int) -> list[ImageHandle]:
        return [
            ImageHandle(
                image=Image.new(
                    COLOR_MODE_RGB, (40, 30), _PALETTE[i % len(_PALETTE)],
                ),
                name=f"img_{i}.png",
            )
            for i in range(count)
        ]

    return _build


@pytest.fixture
def make_upload() -> Callable[..., UploadItem]:
    """Factory for PNG upload items with an optional media type override."""

    def _build(
        name: str = "photo.png",
        *,
        color: str = "red",
        size: tuple[int, int] = (32, 24),
        media_type: str = "image/png",
    ) -> UploadItem:
        img = Image.new(COLOR_MODE_RGB, size, color)
        return UploadItem(name=name, media_type=media_type,
                          data=png_bytes(img))

    return _build


@pytest.fixture
def image_files(tmp_path: Path) -> list[Path]:
    """Write three small images to disk and return their paths in order."""
    paths = []
    for idx, color in enumerate(("red", "green", "blue")):
        path = tmp_path / f"photo_{idx}.png"
        Image.new(COLOR_MODE_RGB, (48, 32), color).save(path)
        paths.append(path)
    return paths


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., ArrangementConfig]:
    """
    Build ArrangementConfig instances with optional section overrides.

    Output goes to an isolated directory under tmp_path unless a section
    override says otherwise.
    """

    def _build(**sections: dict[str, Any]) -> ArrangementConfig:
        data: dict[str, Any] = {
            name: dict(values) for name, values in sections.items()
        }
        output = data.setdefault("output", {})
        output.setdefault("output_dir", str(tmp_path / "out"))
        return ArrangementConfig.model_validate(data)

    return _build


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the package logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)
