"""Telemetry configuration: Sentry env vars and tag names."""

import os

# ---------------------------------------------------------------------------
# Sentry
# ---------------------------------------------------------------------------
SENTRY_DSN: str = os.getenv("SENTRY_DSN", "")
SENTRY_ENVIRONMENT: str = os.getenv("SENTRY_ENVIRONMENT", "production")
SENTRY_RELEASE: str = os.getenv("SENTRY_RELEASE", "")
SENTRY_SAMPLE_RATE: float = float(os.getenv("SENTRY_SAMPLE_RATE", "1.0"))
# Minimum seconds between reports of the same exception class
SENTRY_RATE_LIMIT_S: float = float(os.getenv("SENTRY_RATE_LIMIT_S", "30"))

SENTRY_TAG_CONNECTION_ID = "gateway.connection_id"
SENTRY_TAG_REQUEST_ID = "gateway.request_id"
SENTRY_TAG_CAPABILITY = "gateway.capability"

__all__ = [
    "SENTRY_DSN",
    "SENTRY_ENVIRONMENT",
    "SENTRY_RELEASE",
    "SENTRY_SAMPLE_RATE",
    "SENTRY_RATE_LIMIT_S",
    "SENTRY_TAG_CONNECTION_ID",
    "SENTRY_TAG_REQUEST_ID",
    "SENTRY_TAG_CAPABILITY",
]
