"""Main FastAPI server for the realtime generation gateway.

It provides:

- REST endpoints for health checks (/healthz, /)
- WebSocket endpoint for client sessions (/ws)
- Image upload endpoint (/upload) and the static mount serving stored assets
- Graceful shutdown with provider cleanup

Server Lifecycle:
    1. On startup: initialize error reporting, prepare the asset directory
    2. Accept WebSocket connections on /ws
    3. Route requests through the dispatcher to the generation provider
    4. On shutdown: close the provider client and flush error reports

Example:
    Run directly with uvicorn:
        $ uvicorn gateway.server:app --host 0.0.0.0 --port 2500

    Or as a module:
        $ python -m gateway
"""

from __future__ import annotations

import logging

from fastapi import File, FastAPI, WebSocket, UploadFile
from fastapi.responses import ORJSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ALLOW_ORIGINS, CORS_ALLOW_CREDENTIALS
from .logging import configure_logging
from .runtime import build_gateway
from .storage import AssetStore, LocalAssetStore
from .telemetry import init_sentry, shutdown_sentry
from .providers import OpenAIProvider, GenerationProvider
from .handlers.upload import handle_upload
from .handlers.websocket.manager import handle_websocket_connection

logger = logging.getLogger(__name__)

configure_logging()


def create_app(
    provider: GenerationProvider | None = None,
    asset_store: AssetStore | None = None,
) -> FastAPI:
    """Build the application and the services it owns.

    Args:
        provider: Generation backend; defaults to the OpenAI provider.
        asset_store: Upload storage; defaults to the local filesystem store.
    """
    gateway = build_gateway(
        provider or OpenAIProvider(),
        asset_store or LocalAssetStore(),
    )

    app = FastAPI(default_response_class=ORJSONResponse)
    app.state.gateway = gateway

    if CORS_ALLOW_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(CORS_ALLOW_ORIGINS),
            allow_credentials=CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if isinstance(gateway.asset_store, LocalAssetStore):
        app.mount(
            gateway.asset_store.route,
            StaticFiles(directory=gateway.asset_store.directory, check_dir=False),
            name="assets",
        )

    @app.on_event("startup")
    async def start_services() -> None:
        init_sentry()
        if isinstance(gateway.asset_store, LocalAssetStore):
            gateway.asset_store.ensure_directory()
        logger.info(
            "gateway ready provider=%s capacity=%s",
            gateway.provider.name,
            gateway.registry.capacity,
        )

    @app.on_event("shutdown")
    async def stop_services() -> None:
        """Close the provider client and flush pending error reports."""
        await gateway.shutdown()
        shutdown_sentry()

    @app.get("/")
    async def root():
        """Root endpoint for load balancer health checks."""
        return {"status": "ok"}

    @app.get("/healthz")
    async def healthz():
        """Health check endpoint with session capacity."""
        return {"status": "ok", "sessions": gateway.registry.get_capacity_info()}

    @app.get("/favicon.ico", status_code=204)
    async def favicon():
        """Suppress favicon requests from browsers/probes."""
        return None

    @app.post("/upload")
    async def upload(image: UploadFile | None = File(None)):
        """Store an uploaded image and return its URL."""
        return await handle_upload(image, gateway.asset_store)

    @app.websocket("/ws")
    async def websocket_endpoint(websocket: WebSocket):
        """Main WebSocket endpoint for client sessions."""
        await handle_websocket_connection(websocket, gateway)

    return app


app = create_app()
