"""Primary WebSocket connection handler.

This module contains the entry point for every client connection. It:

1. Accepts the socket and registers a session (evicting the oldest one
   when the registry is full).
2. Runs the receive loop:
   - ping/pong/end control frames
   - capability frames, each dispatched as its own task so requests from
     one connection run concurrently and complete in any order
   - malformed or unknown frames answered with a ``bad_request`` error
3. Unregisters the session on disconnect, idle timeout or eviction.
   In-flight requests are left to finish; their results are dropped.

Message Types:
    send-text          - Text completion, optional image asset
    generate-image     - Text-to-image
    synthesize-speech  - Text-to-speech (defaults to the last entry)
    fetch-history      - Return the session history
    ping/pong          - Keep-alive heartbeat
    end                - Client-initiated disconnect
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from fastapi import WebSocket, WebSocketDisconnect

from ...errors import ErrorStatus
from ...logging import log_context
from ...runtime import Gateway
from ...messages.requests import build_request
from ...config.websocket import WS_WATCHDOG_TICK_S, WS_CLOSE_CLIENT_REQUEST_CODE
from .errors import send_error
from .parser import parse_client_message
from .lifecycle import WebSocketLifecycle
from .connection import WebSocketConnection
from .disconnects import is_expected_disconnect

logger = logging.getLogger(__name__)

_CONTROL_MESSAGES = frozenset({"ping", "pong", "end"})
BINARY_FRAME_MESSAGE = "Binary frames are not supported"


def _track_task(tasks: set[asyncio.Task], task: asyncio.Task) -> None:
    tasks.add(task)

    def _done(finished: asyncio.Task) -> None:
        tasks.discard(finished)
        if finished.cancelled():
            return
        exc = finished.exception()
        if exc is not None and not is_expected_disconnect(exc):
            logger.error("request task failed", exc_info=exc)

    task.add_done_callback(_done)


async def _recv_with_watchdog(ws: WebSocket, lifecycle: WebSocketLifecycle) -> tuple[str | bytes | None, bool]:
    """Return the next frame payload, or None on a watchdog tick.

    The second element is True when the idle watchdog wants the loop to stop.
    """
    try:
        message = await asyncio.wait_for(ws.receive(), timeout=WS_WATCHDOG_TICK_S * 2)
    except TimeoutError:
        return None, lifecycle.idle_timed_out()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(message.get("code", 1000), message.get("reason"))
    text = message.get("text")
    if text is None:
        return message.get("bytes") or b"", False
    return text, False


async def _handle_control_message(connection: WebSocketConnection, msg_type: str) -> bool:
    """Process ping/pong/end messages; return True if the loop should stop."""
    if msg_type == "ping":
        await connection.send_event("pong")
        return False
    if msg_type == "end":
        logger.info("WS recv: end")
        return True
    return False


async def _parse_message_or_send_error(connection: WebSocketConnection, raw_msg: str) -> dict[str, Any] | None:
    try:
        return parse_client_message(raw_msg)
    except ValueError as exc:
        await send_error(connection, ErrorStatus.BAD_REQUEST, str(exc))
        return None


async def run_message_loop(
    ws: WebSocket,
    connection: WebSocketConnection,
    lifecycle: WebSocketLifecycle,
    gateway: Gateway,
    tasks: set[asyncio.Task],
) -> None:
    """Receive, parse, and dispatch client messages until the socket ends."""
    while True:
        raw_msg, should_close = await _recv_with_watchdog(ws, lifecycle)
        if raw_msg is None:
            if should_close:
                break
            continue

        lifecycle.touch()
        if isinstance(raw_msg, bytes):
            await send_error(connection, ErrorStatus.BAD_REQUEST, BINARY_FRAME_MESSAGE)
            continue
        msg = await _parse_message_or_send_error(connection, raw_msg)
        if msg is None:
            continue

        msg_type = msg["type"]
        if msg_type in _CONTROL_MESSAGES:
            if await _handle_control_message(connection, msg_type):
                break
            continue

        try:
            request = build_request(msg)
        except ValueError as exc:
            await send_error(
                connection,
                ErrorStatus.BAD_REQUEST,
                str(exc),
                extra={"request_id": msg.get("request_id")} if msg.get("request_id") else None,
            )
            continue

        logger.info("WS recv: %s request_id=%s", request.capability.value, request.request_id)
        _track_task(tasks, asyncio.create_task(gateway.dispatcher.dispatch(connection, request)))


async def handle_websocket_connection(ws: WebSocket, gateway: Gateway) -> None:
    """Serve one client connection from accept to teardown."""
    await ws.accept()
    connection = WebSocketConnection(ws)
    lifecycle = WebSocketLifecycle(connection)
    tasks: set[asyncio.Task] = set()

    with log_context(connection_id=connection.connection_id):
        await gateway.lifecycle.on_connect(connection)
        lifecycle.start()
        try:
            await run_message_loop(ws, connection, lifecycle, gateway, tasks)
        except Exception as exc:  # noqa: BLE001
            if is_expected_disconnect(exc):
                logger.info("WebSocket disconnected")
            else:
                logger.exception("WebSocket error")
        finally:
            await lifecycle.stop()
            if lifecycle.idle_timed_out():
                logger.info("closing idle connection in_flight=%s", len(tasks))
            await gateway.lifecycle.on_disconnect(connection)
            await connection.close(WS_CLOSE_CLIENT_REQUEST_CODE)


__all__ = ["handle_websocket_connection", "run_message_loop"]
