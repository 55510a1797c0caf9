"""Unit tests for the filesystem asset store."""

from __future__ import annotations

import asyncio
from pathlib import Path

from gateway.storage import LocalAssetStore
from tests.helpers.images import PNG_BYTES, JPEG_BYTES


def test_save_writes_file_and_returns_url(tmp_path: Path) -> None:
    store = LocalAssetStore(tmp_path / "assets", base_url="https://cdn.example/", route="media")

    url = asyncio.run(store.save(PNG_BYTES, "image/png"))

    assert url.startswith("https://cdn.example/media/")
    assert url.endswith(".png")
    filename = url.rsplit("/", 1)[-1]
    assert (tmp_path / "assets" / filename).read_bytes() == PNG_BYTES


def test_each_save_gets_unique_name(tmp_path: Path) -> None:
    store = LocalAssetStore(tmp_path)

    first = asyncio.run(store.save(JPEG_BYTES, "image/jpeg"))
    second = asyncio.run(store.save(JPEG_BYTES, "image/jpeg"))

    assert first != second
    assert first.endswith(".jpg")
    assert len(list(tmp_path.iterdir())) == 2
