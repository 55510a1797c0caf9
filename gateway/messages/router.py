"""Dispatch router: session lookup, validation errors and handler selection.

Each inbound request resolves to exactly one outcome on its originating
connection: an ``error`` event, the capability's response event, or
nothing at all when the session departed before the provider answered.
"""

from __future__ import annotations

import logging
from typing import Any
from collections.abc import Callable, Awaitable

from ..config import PROVIDER_TIMEOUT_S
from ..errors import ErrorStatus, ValidationError
from ..state import Session
from ..logging import log_context
from ..providers import GenerationProvider
from ..handlers.connection import Connection
from ..handlers.websocket.errors import send_error
from ..handlers.session.registry import SessionRegistry
from .capabilities import Capability
from .requests import InboundRequest
from .send_text import handle_send_text
from .generation import GenerationPipeline
from .fetch_history import handle_fetch_history
from .generate_image import handle_generate_image
from .synthesize_speech import handle_synthesize_speech

logger = logging.getLogger(__name__)

CapabilityHandlerFn = Callable[[GenerationPipeline, Session, Any], Awaitable[None]]

_CAPABILITY_HANDLERS: dict[Capability, CapabilityHandlerFn] = {
    Capability.SEND_TEXT: handle_send_text,
    Capability.GENERATE_IMAGE: handle_generate_image,
    Capability.SYNTHESIZE_SPEECH: handle_synthesize_speech,
    Capability.FETCH_HISTORY: handle_fetch_history,
}

NOT_CONNECTED_MESSAGE = "Client not connected"


class Dispatcher:
    """Routes typed requests to capability handlers for registered sessions."""

    def __init__(
        self,
        registry: SessionRegistry,
        provider: GenerationProvider,
        *,
        timeout_s: float = PROVIDER_TIMEOUT_S,
    ) -> None:
        self._registry = registry
        self._pipeline = GenerationPipeline(registry, provider, timeout_s=timeout_s)

    async def dispatch(self, connection: Connection, request: InboundRequest) -> None:
        """Handle one request from ``connection`` to completion."""
        with log_context(connection_id=connection.connection_id, request_id=request.request_id):
            session = self._registry.lookup(connection)
            if session is None:
                logger.info("request from unregistered connection capability=%s", request.capability.value)
                await send_error(
                    connection,
                    ErrorStatus.NOT_FOUND,
                    NOT_CONNECTED_MESSAGE,
                    extra={"request_id": request.request_id},
                )
                return

            handler = _CAPABILITY_HANDLERS[request.capability]
            try:
                await handler(self._pipeline, session, request)
            except ValidationError as exc:
                logger.info(
                    "rejected %s: %s (%s)",
                    request.capability.value,
                    exc.message,
                    exc.error_code,
                )
                await send_error(
                    connection,
                    exc.status,
                    exc.message,
                    extra={"request_id": request.request_id},
                )


__all__ = ["Dispatcher", "NOT_CONNECTED_MESSAGE"]
