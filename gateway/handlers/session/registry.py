"""Bounded registry of live sessions keyed by connection identity.

The registry is the gateway's single shared mutable structure. It is
mutated only by connect, disconnect and eviction, all through the
synchronous methods below. Because they never suspend, no two structural
mutations can interleave on the event loop.

Eviction policy:
    When the registry is full, registering a new connection first removes
    the session with the smallest ``connected_at`` (the oldest). Ties go
    to the first such session in insertion order. The registry never holds
    more than ``capacity`` sessions.

Example:
    registry = SessionRegistry(capacity=2)
    registry.register(conn_a)
    registry.register(conn_b)
    evicted = registry.register(conn_c)   # evicted.connection is conn_a
"""

from __future__ import annotations

import time
import logging
from typing import Any
from collections.abc import Callable

from ...config import MAX_SESSIONS
from ...state import Session
from ..connection import Connection

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Maps each live Connection to its Session, with oldest-first eviction.

    Attributes:
        capacity: Maximum number of concurrently registered sessions.
    """

    def __init__(
        self,
        capacity: int = MAX_SESSIONS,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._clock = clock
        self._sessions: dict[Connection, Session] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def lookup(self, connection: Connection) -> Session | None:
        """Return the live session for ``connection``, if registered."""
        return self._sessions.get(connection)

    def is_live(self, session: Session) -> bool:
        """True while this exact session object is still registered."""
        return self._sessions.get(session.connection) is session

    def register(self, connection: Connection) -> Session | None:
        """Create a session for ``connection``, evicting the oldest if full.

        Returns:
            The evicted session, or None if no eviction was needed. The
            caller is responsible for closing the evicted connection.
        """
        existing = self._sessions.get(connection)
        if existing is not None:
            return None

        evicted: Session | None = None
        if len(self._sessions) >= self.capacity:
            evicted = self._evict_oldest()

        self._sessions[connection] = Session(connection=connection, connected_at=self._clock())
        return evicted

    def unregister(self, connection: Connection) -> Session | None:
        """Remove and return the session for ``connection``; no-op if absent."""
        return self._sessions.pop(connection, None)

    def _evict_oldest(self) -> Session | None:
        if not self._sessions:
            return None
        oldest = min(self._sessions.values(), key=lambda session: session.connected_at)
        del self._sessions[oldest.connection]
        logger.info(
            "evicted oldest session connection_id=%s age=%.1fs",
            oldest.connection_id,
            self._clock() - oldest.connected_at,
        )
        return oldest

    def get_capacity_info(self) -> dict[str, Any]:
        """Get capacity information.

        Returns:
            Dict with active, max, and available session counts
        """
        active = len(self._sessions)
        return {
            "active": active,
            "max": self.capacity,
            "available": self.capacity - active,
            "at_capacity": active >= self.capacity,
        }


__all__ = ["SessionRegistry"]
