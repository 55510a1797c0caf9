"""Unit tests for capability input validation."""

from __future__ import annotations

import pytest

from gateway.errors import ErrorStatus, ValidationError
from gateway.state import HistoryEntry, TextContent, AssetContent
from gateway.messages.requests import SendTextRequest, GenerateImageRequest, SynthesizeSpeechRequest
from gateway.messages.validators import (
    validate_asset,
    validate_send_text,
    validate_asset_bytes,
    validate_generate_image,
    validate_synthesize_speech,
)
from tests.helpers.images import GIF_BYTES, PNG_BYTES, JPEG_BYTES, b64, data_url


def _status(exc_info: pytest.ExceptionInfo[ValidationError]) -> ErrorStatus:
    return exc_info.value.status


# --- send-text ---


def test_send_text_strips_prompt() -> None:
    validated = validate_send_text(SendTextRequest(prompt="  hello  "))
    assert validated.prompt == "hello"
    assert validated.asset is None


def test_send_text_accepts_prompt_at_limit() -> None:
    assert validate_send_text(SendTextRequest(prompt="x" * 150)).prompt == "x" * 150


@pytest.mark.parametrize("prompt", [None, "", "   ", 42])
def test_send_text_rejects_missing_or_non_string_prompt(prompt: object) -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_send_text(SendTextRequest(prompt=prompt))
    assert _status(exc_info) is ErrorStatus.BAD_REQUEST


def test_send_text_rejects_long_prompt() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_send_text(SendTextRequest(prompt="x" * 151))
    assert _status(exc_info) is ErrorStatus.BAD_REQUEST
    assert exc_info.value.message == "Prompt is too large"


def test_send_text_limit_counts_surrounding_whitespace() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_send_text(SendTextRequest(prompt=" " + "x" * 150))
    assert exc_info.value.message == "Prompt is too large"


def test_send_text_with_inline_asset() -> None:
    validated = validate_send_text(SendTextRequest(prompt="what", asset=data_url(PNG_BYTES)))
    assert validated.asset is not None
    assert validated.asset.media_type == "image/png"
    assert validated.asset.url == data_url(PNG_BYTES)


def test_send_text_with_asset_url() -> None:
    validated = validate_send_text(SendTextRequest(prompt="what", asset="https://assets.example/a.png"))
    assert validated.asset is not None
    assert validated.asset.url == "https://assets.example/a.png"
    assert not validated.asset.inline


# --- assets ---


def test_bare_base64_is_normalized_to_data_url() -> None:
    ref = validate_asset(b64(JPEG_BYTES))
    assert ref.media_type == "image/jpeg"
    assert ref.url.startswith("data:image/jpeg;base64,")
    assert ref.size == len(JPEG_BYTES)


def test_declared_type_is_replaced_by_sniffed_type() -> None:
    ref = validate_asset(data_url(PNG_BYTES, media_type="image/jpeg"))
    assert ref.url.startswith("data:image/png;base64,")


def test_asset_not_base64_is_bad_request() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_asset("not base64 !!")
    assert _status(exc_info) is ErrorStatus.BAD_REQUEST


def test_data_url_without_base64_marker_is_bad_request() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_asset("data:image/png,rawbytes")
    assert _status(exc_info) is ErrorStatus.BAD_REQUEST


def test_oversize_asset_is_bad_request() -> None:
    big = PNG_BYTES + b"\x00" * 600
    with pytest.raises(ValidationError) as exc_info:
        validate_asset(b64(big), max_bytes=512)
    assert _status(exc_info) is ErrorStatus.BAD_REQUEST
    assert exc_info.value.message == "Asset is too large"


def test_disallowed_image_type_is_unsupported() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_asset(b64(GIF_BYTES))
    assert _status(exc_info) is ErrorStatus.UNSUPPORTED_MEDIA_TYPE


def test_unknown_bytes_are_unsupported() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_asset(b64(b"plain text, not an image"))
    assert _status(exc_info) is ErrorStatus.UNSUPPORTED_MEDIA_TYPE


def test_malformed_asset_url_is_bad_request() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_asset("https://")
    assert _status(exc_info) is ErrorStatus.BAD_REQUEST


def test_validate_asset_bytes_limits() -> None:
    assert validate_asset_bytes(PNG_BYTES) == "image/png"
    with pytest.raises(ValidationError):
        validate_asset_bytes(b"")
    with pytest.raises(ValidationError) as exc_info:
        validate_asset_bytes(PNG_BYTES, max_bytes=8)
    assert _status(exc_info) is ErrorStatus.BAD_REQUEST


# --- generate-image ---


def test_generate_image_limit_is_100() -> None:
    assert validate_generate_image(GenerateImageRequest(prompt="y" * 100)) == "y" * 100
    with pytest.raises(ValidationError) as exc_info:
        validate_generate_image(GenerateImageRequest(prompt="y" * 101))
    assert _status(exc_info) is ErrorStatus.BAD_REQUEST


# --- synthesize-speech ---


def test_speech_explicit_text_wins() -> None:
    last = HistoryEntry.assistant(TextContent(text="previous"))
    assert validate_synthesize_speech(SynthesizeSpeechRequest(text=" say this "), last) == "say this"


def test_speech_defaults_to_last_entry_text() -> None:
    last = HistoryEntry.assistant(TextContent(text="previous"))
    assert validate_synthesize_speech(SynthesizeSpeechRequest(), last) == "previous"


def test_speech_without_text_or_history_is_bad_request() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_synthesize_speech(SynthesizeSpeechRequest(), None)
    assert _status(exc_info) is ErrorStatus.BAD_REQUEST
    assert exc_info.value.message == "Text is required"


def test_speech_last_entry_without_text_is_bad_request() -> None:
    last = HistoryEntry.assistant(AssetContent(url="https://images.example/1.png"))
    with pytest.raises(ValidationError):
        validate_synthesize_speech(SynthesizeSpeechRequest(), last)


def test_speech_text_too_long() -> None:
    with pytest.raises(ValidationError) as exc_info:
        validate_synthesize_speech(SynthesizeSpeechRequest(text="z" * 151), None)
    assert _status(exc_info) is ErrorStatus.BAD_REQUEST
