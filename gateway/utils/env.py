"""Typed readers for environment-provided settings."""

from __future__ import annotations

import os

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean; unset or unrecognised values fall back to ``default``."""
    raw = (os.getenv(name) or "").strip().lower()
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    return default


def env_list(name: str, default: str = "") -> tuple[str, ...]:
    """Read a comma-separated list, dropping blanks."""
    raw = os.getenv(name)
    if raw is None:
        raw = default
    return tuple(part for part in (item.strip() for item in raw.split(",")) if part)


__all__ = ["env_flag", "env_list"]
