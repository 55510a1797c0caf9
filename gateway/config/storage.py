"""Uploaded asset storage configuration."""

import os


ASSET_DIR = os.getenv("ASSET_DIR", "./assets")
ASSET_ROUTE = os.getenv("ASSET_ROUTE", "/assets")
# Public origin used to build durable asset URLs (no trailing slash)
ASSET_BASE_URL = (os.getenv("ASSET_BASE_URL", "http://localhost:2500") or "").rstrip("/")

__all__ = [
    "ASSET_DIR",
    "ASSET_ROUTE",
    "ASSET_BASE_URL",
]
