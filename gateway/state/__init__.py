"""Session and history state containers."""

from .roles import Role
from .entry import HistoryEntry
from .session import Session
from .history import HistoryStore
from .content import (
    Content,
    TextContent,
    AssetContent,
    AudioContent,
    MultimodalContent,
    text_of,
)

__all__ = [
    "Role",
    "Content",
    "TextContent",
    "AssetContent",
    "AudioContent",
    "MultimodalContent",
    "text_of",
    "HistoryEntry",
    "HistoryStore",
    "Session",
]
