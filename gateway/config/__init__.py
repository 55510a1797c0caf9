"""Aggregator of configuration modules.

This module re-exports the config API from smaller modules:
- limits: session capacity, prompt ceilings, asset limits
- timeouts: provider call bound
- websocket: idle timeout, close codes, sentinels
- provider: credentials and model selection
- storage: upload directory and public URL
- server: bind address and CORS
- logging / telemetry: observability settings
"""

from .limits import (
    MAX_SESSIONS,
    TEXT_PROMPT_MAX_CHARS,
    IMAGE_PROMPT_MAX_CHARS,
    SPEECH_TEXT_MAX_CHARS,
    ASSET_MAX_BYTES,
    ALLOWED_ASSET_MEDIA_TYPES,
    HISTORY_CONTEXT_MAX_ENTRIES,
)
from .timeouts import PROVIDER_TIMEOUT_S
from .provider import (
    OPENAI_API_KEY,
    OPENAI_ORG_ID,
    OPENAI_BASE_URL,
    CHAT_MODEL,
    CHAT_MAX_OUT,
    CHAT_SYSTEM_PROMPT,
    IMAGE_MODEL,
    IMAGE_SIZE,
    SPEECH_MODEL,
    SPEECH_VOICE,
    SPEECH_FORMAT,
)
from .storage import ASSET_DIR, ASSET_ROUTE, ASSET_BASE_URL
from .server import HOST, PORT, CORS_ALLOW_ORIGINS, CORS_ALLOW_CREDENTIALS

__all__ = [
    "MAX_SESSIONS",
    "TEXT_PROMPT_MAX_CHARS",
    "IMAGE_PROMPT_MAX_CHARS",
    "SPEECH_TEXT_MAX_CHARS",
    "ASSET_MAX_BYTES",
    "ALLOWED_ASSET_MEDIA_TYPES",
    "HISTORY_CONTEXT_MAX_ENTRIES",
    "PROVIDER_TIMEOUT_S",
    "OPENAI_API_KEY",
    "OPENAI_ORG_ID",
    "OPENAI_BASE_URL",
    "CHAT_MODEL",
    "CHAT_MAX_OUT",
    "CHAT_SYSTEM_PROMPT",
    "IMAGE_MODEL",
    "IMAGE_SIZE",
    "SPEECH_MODEL",
    "SPEECH_VOICE",
    "SPEECH_FORMAT",
    "ASSET_DIR",
    "ASSET_ROUTE",
    "ASSET_BASE_URL",
    "HOST",
    "PORT",
    "CORS_ALLOW_ORIGINS",
    "CORS_ALLOW_CREDENTIALS",
]
