"""Append-only conversation history for a single session.

The store is owned by exactly one Session. It is mutated only through
``append`` by handlers acting for that session's own connection, and it is
never truncated or reordered. Readers get immutable tuples so a snapshot
taken earlier never reflects later appends.
"""

from __future__ import annotations

from .entry import HistoryEntry


class HistoryStore:
    """Ordered log of HistoryEntry objects (insertion order = chronological)."""

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, entry: HistoryEntry) -> None:
        """Add ``entry`` to the end of the log. No validation happens here."""
        self._entries.append(entry)

    def last_entry(self) -> HistoryEntry | None:
        """Return the most recently appended entry, if any."""
        if not self._entries:
            return None
        return self._entries[-1]

    def snapshot(self) -> tuple[HistoryEntry, ...]:
        """Return the full ordered log as an immutable copy."""
        return tuple(self._entries)

    def recent(self, limit: int) -> tuple[HistoryEntry, ...]:
        """Return up to ``limit`` trailing entries, oldest first."""
        if limit <= 0:
            return ()
        return tuple(self._entries[-limit:])


__all__ = ["HistoryStore"]
