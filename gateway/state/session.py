"""Per-connection session state.

Session:
    Created when a connection registers and discarded when it disconnects or
    is evicted. It pairs the connection with its connect time (monotonic,
    used for eviction ordering) and its own History Store.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING
from dataclasses import field, dataclass

from .history import HistoryStore

if TYPE_CHECKING:
    from ..handlers.connection import Connection


@dataclass(eq=False)
class Session:
    """Live per-connection state bundle.

    Identity-compared: two sessions are equal only if they are the same
    object, which lets late results detect that their session was replaced.

    Attributes:
        connection: The live channel this session belongs to.
        connected_at: Monotonic timestamp of registration (eviction order).
        history: Append-only conversation log owned by this session only.
    """

    connection: Connection
    connected_at: float = field(default_factory=time.monotonic)
    history: HistoryStore = field(default_factory=HistoryStore)

    @property
    def connection_id(self) -> str:
        return self.connection.connection_id


__all__ = ["Session"]
