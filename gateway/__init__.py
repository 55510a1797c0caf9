"""Realtime generation gateway package.

This package serves a websocket gateway that lets many concurrent clients hold
independent multi-turn conversations with a generative backend:

- Text completion with optional image attachments
- Image generation
- Speech synthesis, optionally repeating the last recorded text

Architecture Overview:
    - server.py: FastAPI application factory and routes
    - config/: Configuration modules (environment-based)
    - state/: Session and history data structures
    - handlers/: Session registry, connection lifecycle, websocket loop, uploads
    - messages/: Request parsing, validation and per-capability dispatch
    - providers/: Generation provider interface and OpenAI adapter
    - storage/: Asset storage for uploaded images
    - telemetry/: Sentry error reporting

Example:
    Start the server with uvicorn:

    $ uvicorn gateway.server:app --host 0.0.0.0 --port 2500

Environment Variables:
    Required:
        - OPENAI_API_KEY: Credential for the generation provider

    Optional:
        - MAX_SESSIONS: Maximum concurrently registered sessions (default: 5000)
        - PROVIDER_TIMEOUT_S: Bound on each provider call (default: 60)
        - ASSET_DIR / ASSET_BASE_URL: Where uploads are stored and served from
"""
