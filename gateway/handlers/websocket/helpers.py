"""Outbound frame helpers that tolerate a vanished peer.

A result can arrive after the client has gone away, so every send reports
success as a boolean instead of raising for ordinary transport teardown.
Unexpected send failures still propagate.
"""

from __future__ import annotations

import logging
from typing import Any

import orjson
from fastapi import WebSocket

from .disconnects import is_expected_disconnect

logger = logging.getLogger(__name__)


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    """Send one text frame; False means the peer was already gone."""
    try:
        await ws.send_text(text)
    except Exception as exc:  # noqa: BLE001
        if not is_expected_disconnect(exc):
            raise
        logger.info("peer gone before %s-byte frame could be sent", len(text))
        return False
    return True


async def safe_send_json(ws: WebSocket, payload: dict[str, Any]) -> bool:
    """Serialize ``payload`` with orjson and send it as a text frame."""
    return await safe_send_text(ws, orjson.dumps(payload).decode("utf-8"))


__all__ = ["safe_send_text", "safe_send_json"]
