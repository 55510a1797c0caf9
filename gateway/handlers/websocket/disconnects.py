"""Classification of exceptions raised by normal WebSocket teardown.

Sends and receives against a closed socket surface as a mix of Starlette,
websockets, anyio and plain OS errors depending on which side closed first
and which server implementation is running. They all mean the same thing to
the gateway: the peer is gone and the session should be wound down quietly.
"""

from __future__ import annotations

from fastapi import WebSocketDisconnect
from websockets.exceptions import ConnectionClosed
from anyio import EndOfStream, BrokenResourceError, ClosedResourceError

EXPECTED_DISCONNECT_TYPES: tuple[type[BaseException], ...] = (
    WebSocketDisconnect,
    ConnectionClosed,
    ClosedResourceError,
    BrokenResourceError,
    EndOfStream,
    ConnectionResetError,
    BrokenPipeError,
    EOFError,
)

# Starlette reports use-after-close as RuntimeError; match on the message
_CLOSED_SOCKET_PHRASES: tuple[str, ...] = (
    "websocket is not connected",
    "once a disconnect message has been received",
    "once a close message has been sent",
    "after sending 'websocket.close'",
)


def is_expected_disconnect(exc: BaseException) -> bool:
    """True when ``exc`` only signals that the connection has ended."""
    if isinstance(exc, EXPECTED_DISCONNECT_TYPES):
        return True
    if not isinstance(exc, RuntimeError):
        return False
    message = str(exc).lower()
    return any(phrase in message for phrase in _CLOSED_SOCKET_PHRASES)


__all__ = ["EXPECTED_DISCONNECT_TYPES", "is_expected_disconnect"]
