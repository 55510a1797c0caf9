"""HTTP upload endpoint handler for image assets.

Clients upload an image once and then reference the returned URL in the
``asset`` field of send-text requests instead of inlining base64.
"""

from __future__ import annotations

import logging

from fastapi import UploadFile
from fastapi.responses import ORJSONResponse

from ..config import ASSET_MAX_BYTES, ALLOWED_ASSET_MEDIA_TYPES
from ..errors import ErrorStatus, ValidationError
from ..storage import AssetStore
from ..messages.validators import validate_asset_bytes
from .websocket.errors import build_error_payload

logger = logging.getLogger(__name__)


def _error_response(status: ErrorStatus, message: str) -> ORJSONResponse:
    return ORJSONResponse(build_error_payload(status, message), status_code=status.http_status)


async def handle_upload(
    image: UploadFile | None,
    asset_store: AssetStore,
    *,
    max_bytes: int = ASSET_MAX_BYTES,
    allowed_media_types: frozenset[str] = ALLOWED_ASSET_MEDIA_TYPES,
) -> ORJSONResponse:
    """Validate and store one uploaded image.

    Returns:
        200 with ``{"url": ...}``; 400 for a missing, empty or oversize
        upload; 415 when the bytes are not an allowed image type.
    """
    if image is None:
        return _error_response(ErrorStatus.BAD_REQUEST, "Image is required")

    # One byte past the ceiling is enough to detect oversize input
    data = await image.read(max_bytes + 1)
    await image.close()
    try:
        media_type = validate_asset_bytes(
            data,
            max_bytes=max_bytes,
            allowed_media_types=allowed_media_types,
        )
    except ValidationError as exc:
        logger.info("upload rejected filename=%s: %s", image.filename, exc.message)
        return _error_response(exc.status, exc.message)

    url = await asset_store.save(data, media_type)
    return ORJSONResponse({"url": url})


__all__ = ["handle_upload"]
