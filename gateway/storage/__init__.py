"""Storage for images uploaded through the HTTP endpoint."""

from .base import AssetStore
from .local import LocalAssetStore

__all__ = ["AssetStore", "LocalAssetStore"]
