"""Weekly slot grid.

One definition of the grid shared by the validation boundary (slot range
checks) and every presentation layer (served from ``GET /api/grid``).

Slots are laid out day-major: slot ``i`` belongs to day ``i // slots_per_day``
and starts ``(i % slots_per_day) * slot_duration_minutes`` minutes after the
day window opens.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True)
class SlotGrid:
    days: int = 7
    day_start_minutes: int = 6 * 60
    day_end_minutes: int = MINUTES_PER_DAY
    slot_duration_minutes: int = 30

    def __post_init__(self) -> None:
        if self.days <= 0:
            msg = "Grid must span at least one day."
            raise ImproperlyConfigured(msg)
        if self.slot_duration_minutes <= 0:
            msg = "Slot duration must be a positive number of minutes."
            raise ImproperlyConfigured(msg)
        if not 0 <= self.day_start_minutes < self.day_end_minutes <= MINUTES_PER_DAY:
            msg = "Day window must satisfy 0 <= start < end <= 1440 minutes."
            raise ImproperlyConfigured(msg)
        window = self.day_end_minutes - self.day_start_minutes
        if window % self.slot_duration_minutes:
            msg = (
                f"Day window of {window} minutes is not a multiple of the "
                f"{self.slot_duration_minutes}-minute slot duration."
            )
            raise ImproperlyConfigured(msg)

    @property
    def slots_per_day(self) -> int:
        return (self.day_end_minutes - self.day_start_minutes) // (
            self.slot_duration_minutes
        )

    @property
    def total_slots(self) -> int:
        return self.days * self.slots_per_day

    def as_dict(self) -> dict[str, Any]:
        return {
            "days": self.days,
            "slotsPerDay": self.slots_per_day,
            "totalSlots": self.total_slots,
            "dayStartMinutes": self.day_start_minutes,
            "dayEndMinutes": self.day_end_minutes,
            "slotDurationMinutes": self.slot_duration_minutes,
        }


def get_slot_grid() -> SlotGrid:
    """Build the grid from Django settings."""

    return SlotGrid(
        days=int(settings.MEETGRID_DAYS),
        day_start_minutes=int(settings.MEETGRID_DAY_START_MINUTES),
        day_end_minutes=int(settings.MEETGRID_DAY_END_MINUTES),
        slot_duration_minutes=int(settings.MEETGRID_SLOT_DURATION_MINUTES),
    )
