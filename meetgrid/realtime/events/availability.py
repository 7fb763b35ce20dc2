from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

from meetgrid.events.services import serialize_event

if TYPE_CHECKING:  # import for type checking only
    from meetgrid.events.slots import SlotSet
    from meetgrid.events.store import Event

EVENT_STATE = "eventState"
EVENT_ERROR = "eventError"
EVENT_UPDATE = "eventUpdate"
YOUR_SLOTS = "yourSlots"

EVENT_NOT_FOUND_MESSAGE = "Event not found"


def build_event_state_payload(
    event: Event,
    *,
    total_slots: int,
    your_slots: SlotSet,
    base_url: str | None = None,
) -> dict[str, Any]:
    """Private snapshot sent to a session that just joined."""

    payload = serialize_event(event, total_slots=total_slots, base_url=base_url)
    payload["yourSlots"] = your_slots.ascending()
    return payload


def build_event_update_payload(event: Event, *, total_slots: int) -> dict[str, Any]:
    return serialize_event(event, total_slots=total_slots)


def build_event_error_payload(message: str = EVENT_NOT_FOUND_MESSAGE) -> dict[str, Any]:
    return {"message": message}


def build_your_slots_payload(slots: SlotSet) -> list[int]:
    return slots.ascending()
