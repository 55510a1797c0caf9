"""Connection handle backed by a FastAPI/Starlette WebSocket."""

from __future__ import annotations

import logging
import contextlib
from typing import Any

from fastapi import WebSocket
from starlette.websockets import WebSocketState

from ..connection import Connection
from .helpers import safe_send_json

logger = logging.getLogger(__name__)


class WebSocketConnection(Connection):
    """Adapts a WebSocket to the Connection interface.

    Sends become no-ops returning False once either side has closed, so
    late-arriving results for a disconnected client fail silently.
    """

    def __init__(self, websocket: WebSocket, connection_id: str | None = None) -> None:
        super().__init__(connection_id)
        self._ws = websocket
        self._closed = False

    @property
    def websocket(self) -> WebSocket:
        return self._ws

    @property
    def is_open(self) -> bool:
        if self._closed:
            return False
        return (
            self._ws.client_state == WebSocketState.CONNECTED
            and self._ws.application_state == WebSocketState.CONNECTED
        )

    async def send_event(self, event_type: str, payload: dict[str, Any] | None = None) -> bool:
        if not self.is_open:
            return False
        frame: dict[str, Any] = {"type": event_type}
        if payload:
            frame.update(payload)
        sent = await safe_send_json(self._ws, frame)
        if not sent:
            self._closed = True
        return sent

    async def close(self, code: int, reason: str = "") -> None:
        if not self.is_open:
            self._closed = True
            return
        self._closed = True
        with contextlib.suppress(Exception):
            await self._ws.close(code=code, reason=reason)
        logger.info("closed connection code=%s reason=%s", code, reason or "-")


__all__ = ["WebSocketConnection"]
