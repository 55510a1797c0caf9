"""Idle enforcement for one WebSocket connection.

A client that stops sending frames (including pings) for
``WS_IDLE_TIMEOUT_S`` is closed with ``WS_CLOSE_IDLE_CODE``. Without this an
abandoned socket would hold its session until newer connections evicted it.

Usage:
    lifecycle = WebSocketLifecycle(connection)
    lifecycle.start()
    ...
    lifecycle.touch()        # on every inbound frame
    ...
    await lifecycle.stop()   # during teardown
"""

from __future__ import annotations

import time
import asyncio
import logging
import contextlib

from ...config.websocket import (
    WS_IDLE_TIMEOUT_S,
    WS_WATCHDOG_TICK_S,
    WS_CLOSE_IDLE_CODE,
    WS_CLOSE_IDLE_REASON,
)
from ..connection import Connection

logger = logging.getLogger(__name__)


class WebSocketLifecycle:
    """Background watchdog that closes a connection after a silent period."""

    def __init__(
        self,
        connection: Connection,
        idle_timeout_s: float | None = None,
        watchdog_tick_s: float | None = None,
        idle_close_code: int | None = None,
    ) -> None:
        self._connection = connection
        self._idle_timeout_s = idle_timeout_s if idle_timeout_s is not None else WS_IDLE_TIMEOUT_S
        self._tick_s = watchdog_tick_s if watchdog_tick_s is not None else WS_WATCHDOG_TICK_S
        self._close_code = idle_close_code if idle_close_code is not None else WS_CLOSE_IDLE_CODE
        self._last_seen = time.monotonic()
        self._stopped = asyncio.Event()
        self._timed_out = False
        self._task: asyncio.Task | None = None

    @property
    def seconds_idle(self) -> float:
        return time.monotonic() - self._last_seen

    def touch(self) -> None:
        self._last_seen = time.monotonic()

    def idle_timed_out(self) -> bool:
        """True once the watchdog has closed the connection for idleness."""
        return self._timed_out

    def start(self) -> asyncio.Task:
        if self._task is None:
            self._task = asyncio.create_task(self._watch())
        return self._task

    async def stop(self) -> None:
        self._stopped.set()
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _watch(self) -> None:
        while not self._stopped.is_set():
            with contextlib.suppress(TimeoutError):
                await asyncio.wait_for(self._stopped.wait(), timeout=self._tick_s)
            if self._stopped.is_set():
                return
            if self.seconds_idle >= self._idle_timeout_s:
                await self._expire()
                return

    async def _expire(self) -> None:
        self._timed_out = True
        self._stopped.set()
        logger.info("closing connection after %.1fs without frames", self.seconds_idle)
        try:
            await self._connection.close(self._close_code, WS_CLOSE_IDLE_REASON)
        except Exception:  # noqa: BLE001
            logger.debug("idle close failed", exc_info=True)


__all__ = ["WebSocketLifecycle"]
