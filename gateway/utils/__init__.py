"""Public API for lightweight utility helpers."""

from .env import env_flag, env_list
from .media import extension_for, sniff_image_media_type

__all__ = ["env_flag", "env_list", "extension_for", "sniff_image_media_type"]
