"""Conversation roles recorded in session history."""

from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


__all__ = ["Role"]
