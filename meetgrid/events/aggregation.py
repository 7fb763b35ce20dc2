from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # import for type checking only
    from .store import Event


@dataclass(frozen=True)
class Aggregate:
    slot_totals: list[int]
    participant_count: int


def compute_aggregate(event: Event, *, total_slots: int) -> Aggregate:
    """Recount every slot from the event's current selections.

    Nothing is maintained incrementally. ``participant_count`` includes
    participants whose stored selection is empty.
    """

    # Snapshot first: HTTP lookups read from a worker thread while the
    # event loop may be inserting new participants.
    selections = tuple(event.participant_slots.values())

    totals = [0] * total_slots
    for slot_set in selections:
        for slot in slot_set:
            totals[slot] += 1
    return Aggregate(slot_totals=totals, participant_count=len(selections))
