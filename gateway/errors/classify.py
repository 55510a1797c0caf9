"""Exception classification helpers for telemetry labels."""

from __future__ import annotations

from .validation import ValidationError
from .provider import ProviderError, ProviderTimeoutError

ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (ValidationError, "validation"),
    (ProviderTimeoutError, "provider_timeout"),
    (ProviderError, "provider"),
    (TimeoutError, "timeout"),
    (ConnectionError, "connection"),
)


def classify_error(exc: BaseException) -> str:
    """Map an exception to a telemetry-friendly category label."""

    for cls, label in ERROR_CATEGORIES:
        if isinstance(exc, cls):
            return label
    return "unknown"


__all__ = ["ERROR_CATEGORIES", "classify_error"]
