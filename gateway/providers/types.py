"""Provider-facing request and result types.

Requests carry the validated client input plus the connection id, which the
provider uses as a per-user correlation token.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass

from ..state import HistoryEntry


@dataclass(frozen=True, slots=True)
class TextCompletionRequest:
    """Text prompt, optional image attachment and prior conversation turns."""

    user_id: str
    prompt: str
    asset_url: str | None = None
    context: tuple[HistoryEntry, ...] = ()


@dataclass(frozen=True, slots=True)
class ImageGenerationRequest:
    user_id: str
    prompt: str


@dataclass(frozen=True, slots=True)
class SpeechSynthesisRequest:
    user_id: str
    text: str


@dataclass(frozen=True, slots=True)
class GeneratedImage:
    url: str  # http(s) URL or inline data URL, provider-dependent


@dataclass(frozen=True, slots=True)
class SynthesizedAudio:
    audio: bytes
    media_type: str

    def to_base64(self) -> str:
        return base64.b64encode(self.audio).decode("ascii")


__all__ = [
    "TextCompletionRequest",
    "ImageGenerationRequest",
    "SpeechSynthesisRequest",
    "GeneratedImage",
    "SynthesizedAudio",
]
