"""Typed inbound requests, one variant per capability.

Fields hold the raw client values; the validation layer is responsible for
type and size checks so that every rejection carries a proper status.
"""

from __future__ import annotations

import uuid
from typing import Any, ClassVar
from dataclasses import field, dataclass

from .capabilities import Capability, resolve_capability


def _request_id() -> str:
    return f"req-{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True, slots=True)
class SendTextRequest:
    capability: ClassVar[Capability] = Capability.SEND_TEXT
    prompt: Any = None
    asset: Any = None
    request_id: str = field(default_factory=_request_id)


@dataclass(frozen=True, slots=True)
class GenerateImageRequest:
    capability: ClassVar[Capability] = Capability.GENERATE_IMAGE
    prompt: Any = None
    request_id: str = field(default_factory=_request_id)


@dataclass(frozen=True, slots=True)
class SynthesizeSpeechRequest:
    capability: ClassVar[Capability] = Capability.SYNTHESIZE_SPEECH
    text: Any = None
    request_id: str = field(default_factory=_request_id)


@dataclass(frozen=True, slots=True)
class FetchHistoryRequest:
    capability: ClassVar[Capability] = Capability.FETCH_HISTORY
    request_id: str = field(default_factory=_request_id)


InboundRequest = SendTextRequest | GenerateImageRequest | SynthesizeSpeechRequest | FetchHistoryRequest


def build_request(msg: dict[str, Any]) -> InboundRequest:
    """Build the typed request for a parsed client message.

    ``asset`` may also arrive as ``url`` (older clients).

    Raises:
        ValueError: If the message type is not a known capability.
    """
    msg_type = str(msg.get("type") or "")
    capability = resolve_capability(msg_type)
    if capability is None:
        raise ValueError(f"Message type '{msg_type}' is not supported.")

    extra: dict[str, Any] = {}
    if msg.get("request_id"):
        extra["request_id"] = str(msg["request_id"])

    if capability is Capability.SEND_TEXT:
        asset = msg.get("asset")
        if asset is None:
            asset = msg.get("url")
        return SendTextRequest(prompt=msg.get("prompt"), asset=asset, **extra)
    if capability is Capability.GENERATE_IMAGE:
        return GenerateImageRequest(prompt=msg.get("prompt"), **extra)
    if capability is Capability.SYNTHESIZE_SPEECH:
        return SynthesizeSpeechRequest(text=msg.get("text"), **extra)
    return FetchHistoryRequest(**extra)


__all__ = [
    "InboundRequest",
    "SendTextRequest",
    "GenerateImageRequest",
    "SynthesizeSpeechRequest",
    "FetchHistoryRequest",
    "build_request",
]
