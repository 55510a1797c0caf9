"""Session registry and connection lifecycle."""

from .registry import SessionRegistry
from .lifecycle import SessionLifecycle

__all__ = ["SessionRegistry", "SessionLifecycle"]
