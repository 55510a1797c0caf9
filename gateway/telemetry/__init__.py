"""Error reporting hooks."""

from .sentry import capture_error, init_sentry, shutdown_sentry

__all__ = ["init_sentry", "shutdown_sentry", "capture_error"]
