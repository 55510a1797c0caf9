"""Status classification carried by every client-facing error."""

from __future__ import annotations

from enum import Enum


class ErrorStatus(str, Enum):
    """Client-facing error classification.

    The value is the machine-readable ``error_code`` sent to clients;
    ``http_status`` is the matching HTTP code for the upload endpoint and
    for clients that branch on numeric status.
    """

    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    UNPROCESSABLE = "unprocessable"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS: dict[ErrorStatus, int] = {
    ErrorStatus.NOT_FOUND: 404,
    ErrorStatus.BAD_REQUEST: 400,
    ErrorStatus.UNSUPPORTED_MEDIA_TYPE: 415,
    ErrorStatus.UNPROCESSABLE: 422,
}


__all__ = ["ErrorStatus"]
