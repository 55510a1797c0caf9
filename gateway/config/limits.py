"""Session capacity, request size and history context limits."""

import os


# Maximum concurrently registered sessions; the oldest is evicted past this
MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "5000"))

# Prompt ceilings in characters, per capability
TEXT_PROMPT_MAX_CHARS = int(os.getenv("TEXT_PROMPT_MAX_CHARS", "150"))
IMAGE_PROMPT_MAX_CHARS = int(os.getenv("IMAGE_PROMPT_MAX_CHARS", "100"))
SPEECH_TEXT_MAX_CHARS = int(os.getenv("SPEECH_TEXT_MAX_CHARS", str(TEXT_PROMPT_MAX_CHARS)))

# Image assets (inline attachments and uploads)
ASSET_MAX_BYTES = int(os.getenv("ASSET_MAX_BYTES", str(512 * 1024)))  # 512 KiB decoded
ALLOWED_ASSET_MEDIA_TYPES = frozenset(
    item.strip().lower()
    for item in os.getenv("ALLOWED_ASSET_MEDIA_TYPES", "image/png,image/jpeg").split(",")
    if item.strip()
)

# Prior history entries sent to the provider as conversation context
HISTORY_CONTEXT_MAX_ENTRIES = int(os.getenv("HISTORY_CONTEXT_MAX_ENTRIES", "20"))

__all__ = [
    "MAX_SESSIONS",
    "TEXT_PROMPT_MAX_CHARS",
    "IMAGE_PROMPT_MAX_CHARS",
    "SPEECH_TEXT_MAX_CHARS",
    "ASSET_MAX_BYTES",
    "ALLOWED_ASSET_MEDIA_TYPES",
    "HISTORY_CONTEXT_MAX_ENTRIES",
]
