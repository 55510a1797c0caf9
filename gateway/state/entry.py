"""Immutable conversation history entries."""

from __future__ import annotations

from typing import Any
from datetime import datetime, timezone
from dataclasses import field, dataclass

from .roles import Role
from .content import Content, text_of


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """One turn recorded in a session's history.

    Entries are immutable once created; the History Store only ever appends
    them, so insertion order is chronological order.

    Attributes:
        role: Who produced the turn (user or assistant).
        content: Tagged content variant (text, asset, audio or text+asset).
        created_at: UTC wall-clock time the entry was created.
    """

    role: Role
    content: Content
    created_at: datetime = field(default_factory=_utc_now)

    @classmethod
    def user(cls, content: Content) -> "HistoryEntry":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: Content) -> "HistoryEntry":
        return cls(role=Role.ASSISTANT, content=content)

    @property
    def text(self) -> str | None:
        return text_of(self.content)

    def to_payload(self) -> dict[str, Any]:
        """Serialize for outbound websocket events."""
        return {
            "role": self.role.value,
            "content": self.content.to_payload(),
            "created_at": self.created_at.isoformat(),
        }


__all__ = ["HistoryEntry"]
