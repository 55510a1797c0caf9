"""Shared provider-call pipeline for generating capabilities.

Every generating capability follows the same steps once its input has been
validated:

1. Append the user entry to the session history.
2. Await the provider under ``PROVIDER_TIMEOUT_S``.
3. On failure or timeout, log, report and send an ``unprocessable`` error.
   The history keeps the user entry and gets no assistant entry.
4. On success, drop the result if the session is no longer live.
   Otherwise append the assistant entry and emit the capability event to
   the originating connection.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, TypeVar
from collections.abc import Callable, Awaitable

from ..config import PROVIDER_TIMEOUT_S
from ..errors import ErrorStatus, ProviderError, ProviderTimeoutError, classify_error
from ..state import Content, Session, HistoryEntry
from ..telemetry import capture_error
from ..providers import GenerationProvider
from ..handlers.websocket.errors import send_error
from ..handlers.session.registry import SessionRegistry
from .requests import InboundRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")

GENERATION_FAILED_MESSAGE = "Generation failed, please try again"


def build_response_payload(
    request: InboundRequest,
    user_entry: HistoryEntry,
    assistant_entry: HistoryEntry,
) -> dict[str, Any]:
    return {
        "request_id": request.request_id,
        "user_entry": user_entry.to_payload(),
        "assistant_entry": assistant_entry.to_payload(),
    }


class GenerationPipeline:
    """Runs one provider call against a session and records the exchange."""

    def __init__(
        self,
        registry: SessionRegistry,
        provider: GenerationProvider,
        *,
        timeout_s: float = PROVIDER_TIMEOUT_S,
    ) -> None:
        self._registry = registry
        self._provider = provider
        self._timeout_s = timeout_s

    @property
    def provider(self) -> GenerationProvider:
        return self._provider

    @property
    def registry(self) -> SessionRegistry:
        return self._registry

    async def run(
        self,
        session: Session,
        request: InboundRequest,
        *,
        user_content: Content,
        call: Callable[[], Awaitable[T]],
        to_content: Callable[[T], Content],
    ) -> HistoryEntry | None:
        """Execute the pipeline; return the assistant entry or None."""
        user_entry = HistoryEntry.user(user_content)
        session.history.append(user_entry)

        result = await self._call_provider(session, request, call)
        if result is None:
            return None

        if not self._registry.is_live(session):
            logger.info(
                "dropping late %s result for departed connection_id=%s",
                request.capability.value,
                session.connection_id,
            )
            return None

        assistant_entry = HistoryEntry.assistant(to_content(result))
        session.history.append(assistant_entry)
        await session.connection.send_event(
            request.capability.response_event,
            build_response_payload(request, user_entry, assistant_entry),
        )
        return assistant_entry

    async def _call_provider(
        self,
        session: Session,
        request: InboundRequest,
        call: Callable[[], Awaitable[T]],
    ) -> T | None:
        capability = request.capability.value
        try:
            return await asyncio.wait_for(call(), timeout=self._timeout_s)
        except TimeoutError:
            error: Exception = ProviderTimeoutError(
                f"{self._provider.name} {capability} timed out after {self._timeout_s}s"
            )
            logger.warning("provider timeout capability=%s timeout_s=%s", capability, self._timeout_s)
        except ProviderError as exc:
            error = exc
            logger.warning("provider failure capability=%s: %s", capability, exc, exc_info=exc)
        except Exception as exc:  # noqa: BLE001
            error = exc
            logger.exception("unexpected provider error capability=%s", capability)

        capture_error(
            error,
            capability=capability,
            extra={"provider": self._provider.name, "category": classify_error(error)},
        )
        if self._registry.is_live(session):
            await send_error(
                session.connection,
                ErrorStatus.UNPROCESSABLE,
                GENERATION_FAILED_MESSAGE,
                extra={"request_id": request.request_id},
            )
        return None


__all__ = ["GenerationPipeline", "GENERATION_FAILED_MESSAGE", "build_response_payload"]
