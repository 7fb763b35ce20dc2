from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any

from django.apps import apps

from .aggregation import compute_aggregate
from .sharing import share_link

if TYPE_CHECKING:  # import for type checking only
    from datetime import datetime

    from .store import Event
    from .store import EventStore


def get_event_store() -> EventStore:
    """Return the process-wide store built when the events app became ready."""

    return apps.get_app_config("events").store


def format_timestamp(value: datetime) -> str:
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def serialize_event(
    event: Event,
    *,
    total_slots: int,
    base_url: str | None = None,
) -> dict[str, Any]:
    """Public view of an event: metadata plus its freshly computed aggregate.

    ``shareLink`` is only present when a base URL is known.
    """

    aggregate = compute_aggregate(event, total_slots=total_slots)
    payload: dict[str, Any] = {
        "id": event.id,
        "title": event.title,
        "createdAt": format_timestamp(event.created_at),
        "participantCount": aggregate.participant_count,
        "slotTotals": aggregate.slot_totals,
    }
    if base_url:
        payload["shareLink"] = share_link(base_url, event.id)
    return payload
