"""In-memory Connection that records every emitted event."""

from __future__ import annotations

from typing import Any

from gateway.handlers.connection import Connection


class FakeConnection(Connection):
    def __init__(self, connection_id: str | None = None) -> None:
        super().__init__(connection_id)
        self.events: list[tuple[str, dict[str, Any]]] = []
        self.closed: tuple[int, str] | None = None

    async def send_event(self, event_type: str, payload: dict[str, Any] | None = None) -> bool:
        if self.closed is not None:
            return False
        self.events.append((event_type, dict(payload or {})))
        return True

    async def close(self, code: int, reason: str = "") -> None:
        if self.closed is None:
            self.closed = (code, reason)

    @property
    def event_types(self) -> list[str]:
        return [event_type for event_type, _ in self.events]

    def events_of(self, event_type: str) -> list[dict[str, Any]]:
        return [payload for kind, payload in self.events if kind == event_type]
