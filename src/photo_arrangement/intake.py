"""
Upload intake: decode a batch of files into image handles.

Decoding runs on a small thread pool, but results are written into a slot
reserved for each item at submission time and only returned once the whole
batch has settled. Callers therefore see images in the order the files
were submitted, regardless of which decode finished first.
"""
from __future__ import annotations

import mimetypes
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image

from photo_arrangement.constants import IMAGE_MEDIA_PREFIX, INTAKE_MAX_WORKERS
from photo_arrangement.logging_utils import logger
from photo_arrangement.store import ImageHandle

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Iterable, Sequence

_UNKNOWN_MEDIA_TYPE = "application/octet-stream"


@dataclass(frozen=True, slots=True)
class UploadItem:
    """Raw uploaded file with its declared media type."""

    name: str
    media_type: str
    data: bytes = field(repr=False)

    @property
    def is_image(self) -> bool:
        """True when the declared media type is an image type."""
        return self.media_type.startswith(IMAGE_MEDIA_PREFIX)

    @classmethod
    def from_path(cls, path: str | Path) -> UploadItem:
        """
        Read a file from disk, guessing its media type from the name.

        Raises:
            FileNotFoundError: If ``path`` is not an existing file.

        """
        file_path = Path(path)
        if not file_path.is_file():
            msg = f"Image file not found: {path}"
            raise FileNotFoundError(msg)
        media_type, _ = mimetypes.guess_type(file_path.name)
        return cls(
            name=file_path.name,
            media_type=media_type or _UNKNOWN_MEDIA_TYPE,
            data=file_path.read_bytes(),
        )


def items_from_paths(paths: Iterable[str | Path]) -> list[UploadItem]:
    """Build upload items for each path, keeping the given order."""
    return [UploadItem.from_path(p) for p in paths]


def decode_item(item: UploadItem) -> ImageHandle:
    """
    Decode an uploaded image fully into memory.

    Raises:
        OSError: If Pillow cannot identify or read the data, or the image
            exceeds Pillow's decompression bomb limit.

    """
    try:
        with Image.open(BytesIO(item.data)) as img:
            img.load()
            decoded = img.copy()
    except (OSError, Image.DecompressionBombError) as e:
        msg = f"Error decoding image '{item.name}': {e!s}"
        raise OSError(msg) from e
    return ImageHandle(image=decoded, name=item.name)


def load_batch(
    items: Sequence[UploadItem],
    *,
    decoder: Callable[[UploadItem], ImageHandle] = decode_item,
    max_workers: int = INTAKE_MAX_WORKERS,
) -> list[ImageHandle]:
    """
    Decode every image item of a batch and return handles in submission order.

    Items whose media type is not an image are skipped. Items that fail to
    decode are logged and skipped; the rest of the batch still completes.
    """
    slots: list[ImageHandle | None] = [None] * len(items)
    pending: list[tuple[int, UploadItem]] = []
    for idx, item in enumerate(items):
        if item.is_image:
            pending.append((idx, item))
        else:
            logger.debug(
                "Skipping non-image upload %s (%s)", item.name, item.media_type,
            )

    if pending:
        workers = max(1, min(max_workers, len(pending)))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = {
                pool.submit(decoder, item): idx for idx, item in pending
            }
            for future in as_completed(futures):
                idx = futures[future]
                try:
                    slots[idx] = future.result()
                except OSError as exc:
                    logger.warning("Skipping %s: %s", items[idx].name, exc)

    loaded = [handle for handle in slots if handle is not None]
    logger.info("Loaded %d of %d uploaded files", len(loaded), len(items))
    return loaded
