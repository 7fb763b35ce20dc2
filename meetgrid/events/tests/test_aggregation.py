import random

from meetgrid.events.aggregation import compute_aggregate
from meetgrid.events.slots import SlotSet


def test_empty_event_has_zero_totals(store):
    event = store.create("x")
    aggregate = compute_aggregate(event, total_slots=10)
    assert aggregate.slot_totals == [0] * 10
    assert aggregate.participant_count == 0


def test_counts_match_membership_for_every_slot(store):
    event = store.create("x")
    rng = random.Random(7)
    selections = {
        f"p{n}": SlotSet(rng.sample(range(10), rng.randint(0, 10))) for n in range(25)
    }
    for participant_id, slots in selections.items():
        event.replace_slots(participant_id, slots)

    aggregate = compute_aggregate(event, total_slots=10)

    for slot in range(10):
        expected = sum(1 for slots in selections.values() if slot in slots)
        assert aggregate.slot_totals[slot] == expected
    assert aggregate.participant_count == 25


def test_empty_selection_still_counts_as_respondent(store):
    event = store.create("x")
    event.replace_slots("alice", SlotSet())
    event.replace_slots("bob", SlotSet({4}))

    aggregate = compute_aggregate(event, total_slots=10)

    assert aggregate.participant_count == 2
    assert aggregate.slot_totals[4] == 1
    assert sum(aggregate.slot_totals) == 1


def test_recomputation_reflects_replacement(store):
    event = store.create("x")
    event.replace_slots("alice", SlotSet({1, 2}))
    assert compute_aggregate(event, total_slots=10).slot_totals[1] == 1

    event.replace_slots("alice", SlotSet({2}))
    aggregate = compute_aggregate(event, total_slots=10)
    assert aggregate.slot_totals[1] == 0
    assert aggregate.slot_totals[2] == 1
