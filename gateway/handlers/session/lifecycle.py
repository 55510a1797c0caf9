"""Connection lifecycle: registration, eviction and disconnect notices."""

from __future__ import annotations

import logging

from ...config.websocket import WS_CLOSE_EVICTED_CODE, WS_CLOSE_EVICTED_REASON
from ...state import Session
from ..connection import Connection
from .registry import SessionRegistry

logger = logging.getLogger(__name__)


class SessionLifecycle:
    """Handles connect/disconnect events against a SessionRegistry.

    Connect always succeeds: if the registry is full the oldest session is
    evicted first and its channel is closed. Disconnect is idempotent.
    """

    def __init__(self, registry: SessionRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> SessionRegistry:
        return self._registry

    async def on_connect(self, connection: Connection) -> Session:
        """Register ``connection`` and acknowledge it with a ``connected`` event."""
        evicted = self._registry.register(connection)
        if evicted is not None:
            await self._close_evicted(evicted)

        session = self._registry.lookup(connection)
        if session is None:  # pragma: no cover - register always inserts
            raise RuntimeError(f"registration failed for {connection!r}")

        await connection.send_event(
            "connected",
            {"message": "Connected", "connection_id": connection.connection_id},
        )
        logger.info(
            "session registered connection_id=%s active=%s/%s",
            connection.connection_id,
            len(self._registry),
            self._registry.capacity,
        )
        return session

    async def on_disconnect(self, connection: Connection) -> Session | None:
        """Notify the client and drop its session; no-op if not registered."""
        await connection.send_event("disconnected", {"message": "Disconnected"})
        session = self._registry.unregister(connection)
        if session is None:
            logger.debug("disconnect for unregistered connection_id=%s", connection.connection_id)
            return None
        logger.info(
            "session removed connection_id=%s entries=%s active=%s",
            connection.connection_id,
            len(session.history),
            len(self._registry),
        )
        return session

    async def _close_evicted(self, session: Session) -> None:
        connection = session.connection
        await connection.send_event(
            "disconnected",
            {"message": "Disconnected", "reason": WS_CLOSE_EVICTED_REASON},
        )
        await connection.close(WS_CLOSE_EVICTED_CODE, WS_CLOSE_EVICTED_REASON)


__all__ = ["SessionLifecycle"]
