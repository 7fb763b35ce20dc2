"""In-memory event registry.

Events live for the lifetime of the process: nothing is ever pruned, so
memory grows with every event and participant created.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from typing import TYPE_CHECKING

from django.utils import timezone

from .exceptions import EventNotFound
from .slots import SlotSet

if TYPE_CHECKING:  # import for type checking only
    from .grid import SlotGrid

logger = logging.getLogger(__name__)

DEFAULT_EVENT_TITLE = "Untitled event"
EVENT_ID_LENGTH = 8


def make_event_id() -> str:
    return str(uuid.uuid4())[:EVENT_ID_LENGTH]


@dataclass
class Event:
    id: str
    title: str
    created_at: datetime
    participant_slots: dict[str, SlotSet] = field(default_factory=dict)

    def slots_for(self, participant_id: str | None) -> SlotSet:
        if participant_id is None:
            return SlotSet()
        return self.participant_slots.get(participant_id, SlotSet())

    def replace_slots(self, participant_id: str, slots: SlotSet) -> None:
        """Last write wins: the new set replaces the previous one wholesale."""

        self.participant_slots[participant_id] = slots


class EventStore:
    def __init__(self, grid: SlotGrid, *, default_title: str = DEFAULT_EVENT_TITLE):
        self.grid = grid
        self.default_title = default_title
        self._events: dict[str, Event] = {}

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, event_id: object) -> bool:
        return event_id in self._events

    def create(self, title: str | None = None) -> Event:
        clean_title = (title or "").strip() or self.default_title
        event_id = make_event_id()
        while event_id in self._events:
            event_id = make_event_id()
        event = Event(id=event_id, title=clean_title, created_at=timezone.now())
        self._events[event_id] = event
        logger.info("Created event %s (%s)", event_id, clean_title)
        return event

    def get(self, event_id: object) -> Event:
        if not isinstance(event_id, str):
            raise EventNotFound(event_id)
        try:
            return self._events[event_id]
        except KeyError:
            raise EventNotFound(event_id) from None
