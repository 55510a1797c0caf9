"""Per-task logging fields for connection and request correlation.

Every record emitted while a connection or request is being served carries
``connection_id`` and ``request_id`` attributes, so the default format can
print them without each call site passing them explicitly. Values live in
ContextVars, which asyncio copies into every task it creates: a request task
spawned from the receive loop inherits the connection id and then binds its
own request id without affecting the loop.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import Token, ContextVar

_UNSET = "-"

_CONNECTION_ID: ContextVar[str] = ContextVar("connection_id", default=_UNSET)
_REQUEST_ID: ContextVar[str] = ContextVar("request_id", default=_UNSET)

_FIELDS: dict[str, ContextVar[str]] = {
    "connection_id": _CONNECTION_ID,
    "request_id": _REQUEST_ID,
}

ContextTokens = list[tuple[ContextVar[str], Token[str]]]

_factory_installed = False


def set_log_context(*, connection_id: str | None = None, request_id: str | None = None) -> ContextTokens:
    """Bind the given fields for the current task; None leaves a field as is."""
    values = {"connection_id": connection_id, "request_id": request_id}
    return [(_FIELDS[name], _FIELDS[name].set(value)) for name, value in values.items() if value is not None]


def reset_log_context(tokens: ContextTokens) -> None:
    for var, token in reversed(tokens):
        var.reset(token)


@contextmanager
def log_context(*, connection_id: str | None = None, request_id: str | None = None) -> Iterator[None]:
    """Bind log fields for the duration of a block."""
    tokens = set_log_context(connection_id=connection_id, request_id=request_id)
    try:
        yield
    finally:
        reset_log_context(tokens)


def current_log_context() -> dict[str, str]:
    """Return the log fields bound to the running task."""
    return {name: var.get() for name, var in _FIELDS.items()}


def install_log_context() -> None:
    """Wrap the LogRecord factory so records pick up the bound fields."""
    global _factory_installed  # noqa: PLW0603
    if _factory_installed:
        return

    base_factory = logging.getLogRecordFactory()

    def factory(*args, **kwargs) -> logging.LogRecord:
        record = base_factory(*args, **kwargs)
        for name, var in _FIELDS.items():
            setattr(record, name, var.get())
        return record

    logging.setLogRecordFactory(factory)
    _factory_installed = True


def configure_logging() -> None:
    """Set up root logging with the gateway format. Safe to call repeatedly."""
    from gateway.config.logging import APP_LOG_LEVEL, APP_LOG_FORMAT, APP_LOG_DATEFMT  # noqa: PLC0415

    install_log_context()
    root = logging.getLogger()
    if root.handlers:
        # uvicorn or pytest already installed handlers; only adjust the level
        root.setLevel(APP_LOG_LEVEL)
    else:
        logging.basicConfig(level=APP_LOG_LEVEL, format=APP_LOG_FORMAT, datefmt=APP_LOG_DATEFMT)
    logging.getLogger("gateway").setLevel(APP_LOG_LEVEL)


__all__ = [
    "log_context",
    "set_log_context",
    "reset_log_context",
    "current_log_context",
    "install_log_context",
    "configure_logging",
]
