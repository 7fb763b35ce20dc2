import pytest
from django.core.exceptions import ImproperlyConfigured

from meetgrid.events.grid import SlotGrid
from meetgrid.events.grid import get_slot_grid


def test_default_grid_is_six_to_midnight_in_half_hours():
    grid = SlotGrid()
    assert grid.slots_per_day == 36
    assert grid.total_slots == 252


def test_settings_grid_matches_defaults(settings):
    assert get_slot_grid() == SlotGrid()

    settings.MEETGRID_DAY_START_MINUTES = 0
    settings.MEETGRID_SLOT_DURATION_MINUTES = 15
    grid = get_slot_grid()
    assert grid.slots_per_day == 96
    assert grid.total_slots == 672


@pytest.mark.parametrize(
    ("kwargs", "match"),
    [
        ({"days": 0}, "at least one day"),
        ({"slot_duration_minutes": 0}, "positive"),
        ({"day_start_minutes": 600, "day_end_minutes": 600}, "Day window"),
        ({"day_end_minutes": 1500}, "Day window"),
        ({"slot_duration_minutes": 25}, "not a multiple"),
    ],
)
def test_misconfigured_grid_is_rejected(kwargs, match):
    with pytest.raises(ImproperlyConfigured, match=match):
        SlotGrid(**kwargs)


def test_as_dict_uses_wire_names():
    assert SlotGrid().as_dict() == {
        "days": 7,
        "slotsPerDay": 36,
        "totalSlots": 252,
        "dayStartMinutes": 360,
        "dayEndMinutes": 1440,
        "slotDurationMinutes": 30,
    }
