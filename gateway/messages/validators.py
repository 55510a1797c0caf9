"""Validation layer: pure per-capability request checks.

Every validator either returns the accepted, normalized value or raises
ValidationError carrying a status classification and a human-readable
message. Validators never touch session state; handlers run them before
recording anything in history.

Rules:
    send-text:          prompt required, <= TEXT_PROMPT_MAX_CHARS; optional asset
    generate-image:     prompt required, <= IMAGE_PROMPT_MAX_CHARS
    synthesize-speech:  explicit text <= SPEECH_TEXT_MAX_CHARS, otherwise the
                        text of the session's last history entry
    asset:              http(s) URL reference, or inline base64 / data URL image
                        decoded <= ASSET_MAX_BYTES with an allow-listed type
"""

from __future__ import annotations

import base64
import binascii
from typing import Any
from urllib.parse import urlsplit
from dataclasses import dataclass

from ..config import (
    ASSET_MAX_BYTES,
    TEXT_PROMPT_MAX_CHARS,
    IMAGE_PROMPT_MAX_CHARS,
    SPEECH_TEXT_MAX_CHARS,
    ALLOWED_ASSET_MEDIA_TYPES,
)
from ..errors import ErrorStatus, ValidationError
from ..state import HistoryEntry
from ..utils.media import sniff_image_media_type
from .requests import SendTextRequest, GenerateImageRequest, SynthesizeSpeechRequest


@dataclass(frozen=True, slots=True)
class AssetReference:
    """An accepted image attachment.

    Attributes:
        url: http(s) URL, or a ``data:`` URL carrying the sniffed media type.
        media_type: Sniffed type for inline images; None for URL references.
        size: Decoded byte size for inline images; None for URL references.
    """

    url: str
    media_type: str | None = None
    size: int | None = None

    @property
    def inline(self) -> bool:
        return self.media_type is not None


@dataclass(frozen=True, slots=True)
class ValidatedText:
    prompt: str
    asset: AssetReference | None = None


def _bad_request(message: str) -> ValidationError:
    return ValidationError(ErrorStatus.BAD_REQUEST, message)


def _require_text(raw: Any, *, label: str, max_chars: int) -> str:
    if raw is None:
        raise _bad_request(f"{label} is required")
    if not isinstance(raw, str):
        raise _bad_request(f"{label} must be a string")
    if len(raw) > max_chars:
        raise _bad_request(f"{label} is too large")
    text = raw.strip()
    if not text:
        raise _bad_request(f"{label} is required")
    return text


def validate_asset_bytes(
    data: bytes,
    *,
    max_bytes: int = ASSET_MAX_BYTES,
    allowed_media_types: frozenset[str] = ALLOWED_ASSET_MEDIA_TYPES,
) -> str:
    """Check decoded image bytes and return their sniffed media type."""
    if not data:
        raise _bad_request("Asset is empty")
    if len(data) > max_bytes:
        raise _bad_request("Asset is too large")
    media_type = sniff_image_media_type(data)
    if media_type is None or media_type not in allowed_media_types:
        raise ValidationError(
            ErrorStatus.UNSUPPORTED_MEDIA_TYPE,
            "Asset must be one of: " + ", ".join(sorted(allowed_media_types)),
        )
    return media_type


def _split_inline_asset(raw: str) -> str:
    """Return the base64 payload of a data URL or bare base64 string."""
    if not raw.startswith("data:"):
        return raw
    header, sep, payload = raw[5:].partition(",")
    if not sep or ";base64" not in header.lower():
        raise _bad_request("Asset data URL must be base64-encoded")
    return payload


def validate_asset(raw: Any, *, max_bytes: int = ASSET_MAX_BYTES) -> AssetReference:
    """Accept an http(s) asset URL or an inline base64 image."""
    if not isinstance(raw, str) or not raw.strip():
        raise _bad_request("Asset must be a non-empty string")
    value = raw.strip()

    if value.lower().startswith(("http://", "https://")):
        parts = urlsplit(value)
        if not parts.netloc or any(ch.isspace() for ch in value):
            raise _bad_request("Asset URL is malformed")
        return AssetReference(url=value)

    payload = "".join(_split_inline_asset(value).split())
    # Reject before decoding when even the encoded length is over budget
    if len(payload) > 4 * ((max_bytes + 2) // 3):
        raise _bad_request("Asset is too large")
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise _bad_request("Asset is not valid base64") from exc

    media_type = validate_asset_bytes(data, max_bytes=max_bytes)
    return AssetReference(
        url=f"data:{media_type};base64,{payload}",
        media_type=media_type,
        size=len(data),
    )


def validate_send_text(
    request: SendTextRequest,
    *,
    max_chars: int = TEXT_PROMPT_MAX_CHARS,
) -> ValidatedText:
    prompt = _require_text(request.prompt, label="Prompt", max_chars=max_chars)
    if request.asset is None or request.asset == "":
        return ValidatedText(prompt=prompt)
    return ValidatedText(prompt=prompt, asset=validate_asset(request.asset))


def validate_generate_image(
    request: GenerateImageRequest,
    *,
    max_chars: int = IMAGE_PROMPT_MAX_CHARS,
) -> str:
    return _require_text(request.prompt, label="Prompt", max_chars=max_chars)


def validate_synthesize_speech(
    request: SynthesizeSpeechRequest,
    last_entry: HistoryEntry | None,
    *,
    max_chars: int = SPEECH_TEXT_MAX_CHARS,
) -> str:
    """Resolve the text to speak.

    Explicit text wins; when it is absent or blank the last history entry's
    text is repeated. Entries without text (images, audio) cannot be repeated.
    """
    explicit = request.text
    if explicit is not None and not isinstance(explicit, str):
        raise _bad_request("Text must be a string")
    if explicit and explicit.strip():
        return _require_text(explicit, label="Text", max_chars=max_chars)

    previous = last_entry.text if last_entry is not None else None
    if not previous or not previous.strip():
        raise _bad_request("Text is required")
    return previous


__all__ = [
    "AssetReference",
    "ValidatedText",
    "validate_asset",
    "validate_asset_bytes",
    "validate_send_text",
    "validate_generate_image",
    "validate_synthesize_speech",
]
