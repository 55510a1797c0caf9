"""Input validation exceptions with structured status classification.

This module provides validation exceptions that carry both a human-readable
message and a status classification for error responses.
"""

from __future__ import annotations

from .status import ErrorStatus


class ValidationError(Exception):
    """Structured validation failure with status metadata.

    Raised by the validation layer when a request is rejected. Handlers
    convert it into an ``error`` event without touching session history.

    Attributes:
        status: Classification of the rejection (bad request, media type, ...).
        message: Human-readable error description.
    """

    def __init__(self, status: ErrorStatus, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message

    @property
    def error_code(self) -> str:
        return self.status.value


__all__ = ["ValidationError"]
