"""Unit tests for the bounded session registry."""

from __future__ import annotations

import pytest

from gateway.handlers.session import SessionRegistry
from tests.helpers.fake_connection import FakeConnection


class _Clock:
    def __init__(self, *values: float) -> None:
        self._values = list(values)
        self._last = 0.0

    def __call__(self) -> float:
        if self._values:
            self._last = self._values.pop(0)
        return self._last


def test_register_and_lookup() -> None:
    registry = SessionRegistry(capacity=3)
    conn = FakeConnection()

    assert registry.register(conn) is None
    session = registry.lookup(conn)
    assert session is not None
    assert session.connection is conn
    assert len(session.history) == 0
    assert len(registry) == 1


def test_lookup_miss_returns_none() -> None:
    registry = SessionRegistry(capacity=3)
    assert registry.lookup(FakeConnection()) is None


def test_sessions_have_independent_histories() -> None:
    registry = SessionRegistry(capacity=3)
    a, b = FakeConnection(), FakeConnection()
    registry.register(a)
    registry.register(b)

    assert registry.lookup(a).history is not registry.lookup(b).history


def test_full_registry_evicts_oldest() -> None:
    registry = SessionRegistry(capacity=2, clock=_Clock(10.0, 20.0, 30.0, 30.0))
    a, b, c = FakeConnection("a"), FakeConnection("b"), FakeConnection("c")
    registry.register(a)
    registry.register(b)

    evicted = registry.register(c)

    assert evicted is not None
    assert evicted.connection is a
    assert len(registry) == 2
    assert registry.lookup(a) is None
    assert registry.lookup(b) is not None
    assert registry.lookup(c) is not None


def test_eviction_tie_breaks_by_insertion_order() -> None:
    registry = SessionRegistry(capacity=2, clock=lambda: 5.0)
    a, b, c = FakeConnection("a"), FakeConnection("b"), FakeConnection("c")
    registry.register(a)
    registry.register(b)

    evicted = registry.register(c)

    assert evicted is not None
    assert evicted.connection is a


def test_size_never_exceeds_capacity() -> None:
    registry = SessionRegistry(capacity=3)
    for _ in range(10):
        registry.register(FakeConnection())
        assert len(registry) <= 3
    assert len(registry) == 3


def test_capacity_one_evicts_previous() -> None:
    registry = SessionRegistry(capacity=1)
    a, b = FakeConnection(), FakeConnection()
    registry.register(a)
    evicted = registry.register(b)

    assert evicted is not None and evicted.connection is a
    assert registry.lookup(a) is None
    assert registry.lookup(b) is not None
    assert len(registry) == 1


def test_unregister_is_idempotent() -> None:
    registry = SessionRegistry(capacity=2)
    conn = FakeConnection()
    registry.register(conn)

    assert registry.unregister(conn) is not None
    assert registry.unregister(conn) is None
    assert len(registry) == 0


def test_is_live_tracks_exact_session_object() -> None:
    registry = SessionRegistry(capacity=2)
    conn = FakeConnection()
    registry.register(conn)
    original = registry.lookup(conn)

    registry.unregister(conn)
    assert not registry.is_live(original)

    registry.register(conn)
    assert registry.lookup(conn) is not original
    assert not registry.is_live(original)
    assert registry.is_live(registry.lookup(conn))


def test_register_existing_connection_keeps_session() -> None:
    registry = SessionRegistry(capacity=2)
    conn = FakeConnection()
    registry.register(conn)
    session = registry.lookup(conn)

    assert registry.register(conn) is None
    assert registry.lookup(conn) is session
    assert len(registry) == 1


def test_get_capacity_info() -> None:
    registry = SessionRegistry(capacity=2)
    registry.register(FakeConnection())

    assert registry.get_capacity_info() == {"active": 1, "max": 2, "available": 1, "at_capacity": False}


def test_invalid_capacity_rejected() -> None:
    with pytest.raises(ValueError):
        SessionRegistry(capacity=0)
