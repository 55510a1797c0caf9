"""Sentry error reporting for provider and transport failures.

Reporting is off unless ``SENTRY_DSN`` is set. Each exception class is
reported at most once per ``SENTRY_RATE_LIMIT_S`` so an outage of the
generation backend produces one event per window instead of one per request.
Events are tagged with the connection and request ids bound in the logging
context of the failing task.
"""

from __future__ import annotations

import time
import logging
from typing import Any

import sentry_sdk

from ..logging import current_log_context
from ..config.telemetry import (
    SENTRY_DSN,
    SENTRY_RELEASE,
    SENTRY_ENVIRONMENT,
    SENTRY_SAMPLE_RATE,
    SENTRY_RATE_LIMIT_S,
    SENTRY_TAG_CAPABILITY,
    SENTRY_TAG_REQUEST_ID,
    SENTRY_TAG_CONNECTION_ID,
)

logger = logging.getLogger(__name__)

_last_reported: dict[str, float] = {}
_initialized: bool = False


def _should_report(error: BaseException) -> bool:
    key = f"{type(error).__module__}.{type(error).__qualname__}"
    now = time.monotonic()
    previous = _last_reported.get(key)
    if previous is not None and now - previous < SENTRY_RATE_LIMIT_S:
        return False
    _last_reported[key] = now
    return True


def init_sentry() -> None:
    """Start the Sentry client when a DSN is configured. Idempotent."""
    global _initialized  # noqa: PLW0603
    if _initialized or not SENTRY_DSN:
        return

    options: dict[str, Any] = {
        "dsn": SENTRY_DSN,
        "environment": SENTRY_ENVIRONMENT,
        "sample_rate": SENTRY_SAMPLE_RATE,
        "traces_sample_rate": 0.0,
        "attach_stacktrace": True,
        "send_default_pii": False,
    }
    if SENTRY_RELEASE:
        options["release"] = SENTRY_RELEASE

    sentry_sdk.init(**options)
    _initialized = True
    logger.info("Sentry enabled environment=%s sample_rate=%s", SENTRY_ENVIRONMENT, SENTRY_SAMPLE_RATE)


def shutdown_sentry() -> None:
    """Flush queued events before exit. Idempotent."""
    global _initialized  # noqa: PLW0603
    if not _initialized:
        return
    _initialized = False
    try:
        sentry_sdk.flush(timeout=2.0)
    except Exception:  # noqa: BLE001
        logger.debug("Sentry flush failed", exc_info=True)


def capture_error(
    error: BaseException,
    *,
    capability: str | None = None,
    extra: dict[str, Any] | None = None,
) -> None:
    """Report ``error`` unless Sentry is off or its class was just reported."""
    if not _initialized or not _should_report(error):
        return

    ids = current_log_context()
    with sentry_sdk.new_scope() as scope:
        scope.set_tag(SENTRY_TAG_CONNECTION_ID, ids["connection_id"])
        scope.set_tag(SENTRY_TAG_REQUEST_ID, ids["request_id"])
        if capability:
            scope.set_tag(SENTRY_TAG_CAPABILITY, capability)
        for key, value in (extra or {}).items():
            scope.set_extra(key, value)
        sentry_sdk.capture_exception(error)


__all__ = ["init_sentry", "shutdown_sentry", "capture_error"]
