"""Tests for the ordered image store."""
from photo_arrangement.store import ImageHandle, ImageStore


class TestImageStore:
    def test_append_and_extend_keep_order(self, make_handles) -> None:
        first, *rest = make_handles(4)
        store = ImageStore()
        store.append(first)
        store.extend(rest)
        assert store.snapshot() == (first, *rest)
        assert len(store) == 4
        assert list(store) == [first, *rest]

    def test_duplicates_are_distinct_entries(self, sample_image) -> None:
        a = ImageHandle(image=sample_image, name="same.png")
        b = ImageHandle(image=sample_image, name="same.png")
        store = ImageStore([a, b])
        assert a != b
        assert len(store) == 2

    def test_snapshot_is_detached(self, make_handles) -> None:
        store = ImageStore(make_handles(2))
        before = store.snapshot()
        store.clear()
        assert len(before) == 2
        assert store.snapshot() == ()

    def test_handle_size(self, sample_image) -> None:
        assert ImageHandle(image=sample_image).size == (100, 100)
