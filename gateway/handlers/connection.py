"""Transport-neutral connection handle.

The session registry keys sessions by Connection identity: two handles are
equal only if they are the same object, i.e. the same live channel. The
websocket transport provides the concrete implementation; tests supply
in-memory fakes.
"""

from __future__ import annotations

import uuid
from typing import Any
from abc import ABC, abstractmethod


class Connection(ABC):
    """One live bidirectional channel to a client.

    Attributes:
        connection_id: Opaque identifier used for logging and as the
            per-user correlation token passed to the generation provider.
    """

    def __init__(self, connection_id: str | None = None) -> None:
        self.connection_id = connection_id or uuid.uuid4().hex

    @abstractmethod
    async def send_event(self, event_type: str, payload: dict[str, Any] | None = None) -> bool:
        """Emit a typed event to the client.

        Returns:
            True if the event was sent, False if the channel is already gone.
        """

    @abstractmethod
    async def close(self, code: int, reason: str = "") -> None:
        """Close the underlying channel. Must not raise if already closed."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(connection_id={self.connection_id!r})"


__all__ = ["Connection"]
