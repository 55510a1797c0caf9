"""Runtime dependency container.

All long-lived gateway services are assembled once by ``create_app`` and
passed explicitly to the websocket and upload handlers. This avoids lazy
singleton initialization during request processing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..config import MAX_SESSIONS, PROVIDER_TIMEOUT_S
from ..storage import AssetStore
from ..providers import GenerationProvider
from ..messages.router import Dispatcher
from ..handlers.session import SessionRegistry, SessionLifecycle

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Gateway:
    """Process-wide services shared by every connection."""

    registry: SessionRegistry
    lifecycle: SessionLifecycle
    dispatcher: Dispatcher
    provider: GenerationProvider
    asset_store: AssetStore

    async def shutdown(self) -> None:
        logger.info("shutting down provider=%s active_sessions=%s", self.provider.name, len(self.registry))
        await self.provider.shutdown()


def build_gateway(
    provider: GenerationProvider,
    asset_store: AssetStore,
    *,
    capacity: int = MAX_SESSIONS,
    timeout_s: float = PROVIDER_TIMEOUT_S,
) -> Gateway:
    registry = SessionRegistry(capacity)
    return Gateway(
        registry=registry,
        lifecycle=SessionLifecycle(registry),
        dispatcher=Dispatcher(registry, provider, timeout_s=timeout_s),
        provider=provider,
        asset_store=asset_store,
    )


__all__ = ["Gateway", "build_gateway"]
