"""Filesystem-backed asset store served by a StaticFiles mount."""

from __future__ import annotations

import uuid
import asyncio
import logging
from pathlib import Path

from ..utils import extension_for
from ..config import ASSET_DIR, ASSET_ROUTE, ASSET_BASE_URL
from .base import AssetStore

logger = logging.getLogger(__name__)


class LocalAssetStore(AssetStore):
    """Writes each asset to ``<directory>/<uuid>.<ext>``.

    URLs are ``<base_url><route>/<filename>``, matching the static mount the
    server installs over ``directory``.
    """

    def __init__(
        self,
        directory: str | Path = ASSET_DIR,
        *,
        base_url: str = ASSET_BASE_URL,
        route: str = ASSET_ROUTE,
    ) -> None:
        self.directory = Path(directory)
        self.base_url = base_url.rstrip("/")
        self.route = "/" + route.strip("/")

    def ensure_directory(self) -> Path:
        self.directory.mkdir(parents=True, exist_ok=True)
        return self.directory

    def url_for(self, filename: str) -> str:
        return f"{self.base_url}{self.route}/{filename}"

    async def save(self, data: bytes, media_type: str) -> str:
        filename = f"{uuid.uuid4().hex}.{extension_for(media_type)}"
        path = self.directory / filename
        await asyncio.to_thread(self._write, path, data)
        logger.info("stored asset %s (%s bytes, %s)", filename, len(data), media_type)
        return self.url_for(filename)

    def _write(self, path: Path, data: bytes) -> None:
        self.ensure_directory()
        path.write_bytes(data)


__all__ = ["LocalAssetStore"]
