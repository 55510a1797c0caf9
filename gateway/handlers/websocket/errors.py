"""Shared response helpers for WebSocket error handling.

All error responses follow a consistent JSON structure:

    {
        "type": "error",
        "error_code": "bad_request",   # Status classification
        "status": 400,                 # Matching HTTP status code
        "message": "Prompt is too large",
        ...extra fields
    }

Error codes:
    - not_found: The connection has no registered session
    - bad_request: Malformed, oversize or missing input
    - unsupported_media_type: Attached asset is not an allowed image type
    - unprocessable: The generation provider failed or timed out
"""

from __future__ import annotations

from typing import Any

from ...errors import ErrorStatus
from ..connection import Connection


def build_error_payload(
    status: ErrorStatus,
    message: str,
    *,
    extra: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Build the body of an ``error`` event (without the ``type`` tag)."""
    payload: dict[str, Any] = {
        "error_code": status.value,
        "status": status.http_status,
        "message": message,
    }
    if extra:
        for key, value in extra.items():
            payload.setdefault(key, value)
    return payload


async def send_error(
    connection: Connection,
    status: ErrorStatus,
    message: str,
    *,
    extra: dict[str, Any] | None = None,
) -> bool:
    """Send a structured error event to the client.

    Args:
        connection: The originating connection.
        status: Classification of the failure.
        message: Human-readable error description.
        extra: Additional fields to include in the response.

    Returns:
        True if sent, False if the channel was already closed.
    """
    return await connection.send_event("error", build_error_payload(status, message, extra=extra))


__all__ = ["build_error_payload", "send_error"]
