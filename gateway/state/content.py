"""Tagged content variants carried by history entries.

Each variant is a frozen dataclass with a ``kind`` tag so that the
validation layer, dispatch router and provider adapters can branch on the
variant exhaustively:

TextContent:
    Plain text (prompts, completions, speech input).

AssetContent:
    A reference to an image: an http(s) URL or an inline ``data:`` URL.

AudioContent:
    Base64-encoded synthesized audio with its media type.

MultimodalContent:
    Text plus an attached image reference (send-text with an asset).
"""

from __future__ import annotations

from typing import Any, Literal, ClassVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TextContent:
    kind: ClassVar[Literal["text"]] = "text"
    text: str

    def to_payload(self) -> dict[str, Any]:
        return {"kind": self.kind, "text": self.text}


@dataclass(frozen=True, slots=True)
class AssetContent:
    kind: ClassVar[Literal["asset"]] = "asset"
    url: str

    def to_payload(self) -> dict[str, Any]:
        return {"kind": self.kind, "url": self.url}


@dataclass(frozen=True, slots=True)
class AudioContent:
    kind: ClassVar[Literal["audio"]] = "audio"
    audio: str  # base64
    media_type: str

    def to_payload(self) -> dict[str, Any]:
        return {"kind": self.kind, "audio": self.audio, "media_type": self.media_type}


@dataclass(frozen=True, slots=True)
class MultimodalContent:
    kind: ClassVar[Literal["multimodal"]] = "multimodal"
    text: str
    url: str

    def to_payload(self) -> dict[str, Any]:
        return {"kind": self.kind, "text": self.text, "url": self.url}


Content = TextContent | AssetContent | AudioContent | MultimodalContent


def text_of(content: Content) -> str | None:
    """Return the textual part of ``content``, or None when it has none."""
    if isinstance(content, (TextContent, MultimodalContent)):
        return content.text
    return None


__all__ = [
    "Content",
    "TextContent",
    "AssetContent",
    "AudioContent",
    "MultimodalContent",
    "text_of",
]
