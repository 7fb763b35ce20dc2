from __future__ import annotations

from typing import Any

import pytest

from meetgrid.events.grid import SlotGrid
from meetgrid.events.store import EventStore
from meetgrid.realtime.protocol import SyncProtocol
from meetgrid.realtime.sessions import SessionRegistry


class RecordingBroadcaster:
    """In-memory broadcaster that resolves topics at publish time."""

    def __init__(self) -> None:
        self.subscriptions: dict[str, set[str]] = {}
        self.messages: list[tuple[str, str, Any]] = []

    def subscribe(self, sid: str, topic: str) -> None:
        self.subscriptions.setdefault(topic, set()).add(sid)

    def unsubscribe(self, sid: str, topic: str) -> None:
        self.subscriptions.get(topic, set()).discard(sid)

    def publish(self, topic: str, event: str, payload: Any) -> None:
        for sid in sorted(self.subscriptions.get(topic, ())):
            self.messages.append((sid, event, payload))

    def send(self, sid: str, event: str, payload: Any) -> None:
        self.messages.append((sid, event, payload))

    def received(self, sid: str) -> list[tuple[str, Any]]:
        return [(event, payload) for to, event, payload in self.messages if to == sid]

    def clear(self) -> None:
        self.messages.clear()


@pytest.fixture
def grid() -> SlotGrid:
    return SlotGrid()


@pytest.fixture
def small_grid() -> SlotGrid:
    # One day of ten 30-minute slots: TOTAL_SLOTS == 10.
    return SlotGrid(
        days=1,
        day_start_minutes=0,
        day_end_minutes=300,
        slot_duration_minutes=30,
    )


@pytest.fixture
def store(small_grid: SlotGrid) -> EventStore:
    return EventStore(small_grid)


@pytest.fixture
def broadcaster() -> RecordingBroadcaster:
    return RecordingBroadcaster()


@pytest.fixture
def registry() -> SessionRegistry:
    return SessionRegistry()


@pytest.fixture
def protocol(
    store: EventStore,
    registry: SessionRegistry,
    broadcaster: RecordingBroadcaster,
) -> SyncProtocol:
    return SyncProtocol(store=store, registry=registry, broadcaster=broadcaster)
