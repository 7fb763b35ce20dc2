import pytest

from meetgrid.events import store as store_module
from meetgrid.events.exceptions import EventNotFound
from meetgrid.events.slots import SlotSet
from meetgrid.events.store import DEFAULT_EVENT_TITLE
from meetgrid.events.store import EventStore


def test_create_stores_trimmed_title(store):
    event = store.create("  Team sync  ")
    assert event.title == "Team sync"
    assert len(event.id) == 8
    assert event.participant_slots == {}
    assert event.created_at.tzinfo is not None
    assert store.get(event.id) is event
    assert event.id in store
    assert len(store) == 1


@pytest.mark.parametrize("title", ["", "   ", None])
def test_create_falls_back_to_default_title(store, title):
    assert store.create(title).title == DEFAULT_EVENT_TITLE


def test_default_title_is_configurable(small_grid):
    store = EventStore(small_grid, default_title="Planning")
    assert store.create("").title == "Planning"


def test_get_unknown_event_raises_not_found(store):
    with pytest.raises(EventNotFound) as excinfo:
        store.get("missing")
    assert excinfo.value.event_id == "missing"
    assert isinstance(excinfo.value, LookupError)


@pytest.mark.parametrize("event_id", [None, 42, ["abc"]])
def test_get_non_string_id_is_not_found(store, event_id):
    with pytest.raises(EventNotFound):
        store.get(event_id)


def test_colliding_ids_are_regenerated(store, monkeypatch):
    ids = iter(["aaaaaaaa", "aaaaaaaa", "bbbbbbbb"])
    monkeypatch.setattr(store_module, "make_event_id", lambda: next(ids))

    first = store.create("one")
    second = store.create("two")

    assert first.id == "aaaaaaaa"
    assert second.id == "bbbbbbbb"
    assert store.get("aaaaaaaa").title == "one"


def test_replace_slots_is_wholesale(store):
    event = store.create("x")
    event.replace_slots("alice", SlotSet({1, 2, 3}))
    event.replace_slots("alice", SlotSet({7}))
    assert event.slots_for("alice") == {7}
    assert event.slots_for("bob") == SlotSet()
    assert event.slots_for(None) == SlotSet()
