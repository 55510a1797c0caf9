"""Abstract base class for uploaded asset storage."""

from __future__ import annotations

from abc import ABC, abstractmethod


class AssetStore(ABC):
    """Persists validated image bytes and returns a durable URL for them."""

    @abstractmethod
    async def save(self, data: bytes, media_type: str) -> str:
        """Store ``data`` and return the URL clients should reference."""


__all__ = ["AssetStore"]
