"""Capability names and their inbound/outbound event types."""

from __future__ import annotations

from enum import Enum


class Capability(str, Enum):
    """The request kinds a connected client can issue.

    The value is the canonical inbound ``type`` tag.
    """

    SEND_TEXT = "send-text"
    GENERATE_IMAGE = "generate-image"
    SYNTHESIZE_SPEECH = "synthesize-speech"
    FETCH_HISTORY = "fetch-history"

    @property
    def response_event(self) -> str:
        return _RESPONSE_EVENTS[self]


_RESPONSE_EVENTS: dict[Capability, str] = {
    Capability.SEND_TEXT: "message-response",
    Capability.GENERATE_IMAGE: "image-response",
    Capability.SYNTHESIZE_SPEECH: "audio-response",
    Capability.FETCH_HISTORY: "chat-history",
}

# Legacy inbound event names accepted from older clients
CAPABILITY_ALIASES: dict[str, Capability] = {
    "send-message": Capability.SEND_TEXT,
    "text-to-speech": Capability.SYNTHESIZE_SPEECH,
    "fetch-messages": Capability.FETCH_HISTORY,
}


def resolve_capability(msg_type: str) -> Capability | None:
    """Map an inbound ``type`` tag (canonical or alias) to its Capability."""
    normalized = (msg_type or "").strip().lower().replace("_", "-")
    alias = CAPABILITY_ALIASES.get(normalized)
    if alias is not None:
        return alias
    try:
        return Capability(normalized)
    except ValueError:
        return None


__all__ = ["Capability", "CAPABILITY_ALIASES", "resolve_capability"]
