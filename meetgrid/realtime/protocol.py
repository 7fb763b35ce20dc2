"""Join/update/disconnect handling for realtime sessions.

Every method here is synchronous and runs to completion on the event loop
before the next message is handled, so state changes never interleave and
broadcasts leave in the order their mutations were accepted.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

from meetgrid.events.exceptions import EventNotFound
from meetgrid.events.slots import SlotSet

from .broadcaster import room_for_event
from .events.availability import EVENT_ERROR
from .events.availability import EVENT_STATE
from .events.availability import EVENT_UPDATE
from .events.availability import YOUR_SLOTS
from .events.availability import build_event_error_payload
from .events.availability import build_event_state_payload
from .events.availability import build_event_update_payload
from .events.availability import build_your_slots_payload
from .sessions import SessionState

if TYPE_CHECKING:  # import for type checking only
    from meetgrid.events.store import EventStore

    from .broadcaster import Broadcaster
    from .sessions import Session
    from .sessions import SessionRegistry

logger = logging.getLogger(__name__)


def _is_participant_id(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


class SyncProtocol:
    def __init__(
        self,
        store: EventStore,
        registry: SessionRegistry,
        broadcaster: Broadcaster,
    ) -> None:
        self.store = store
        self.registry = registry
        self.broadcaster = broadcaster

    @property
    def total_slots(self) -> int:
        return self.store.grid.total_slots

    def connect(self, sid: str, *, base_url: str | None = None) -> Session:
        logger.debug("Session %s connected", sid)
        return self.registry.open(sid, base_url=base_url)

    def join(self, sid: str, event_id: Any, participant_id: Any) -> bool:
        """Bind a session to an event and send it a private snapshot.

        An unknown event id leaves the session unjoined and sends it a
        private ``eventError``. Nobody else hears about a join either way.
        """

        session = self.registry.get(sid)
        if session is None or session.state is not SessionState.UNJOINED:
            logger.debug("Ignoring join from session %s (not unjoined)", sid)
            return False

        try:
            event = self.store.get(event_id)
        except EventNotFound:
            logger.info("Session %s tried to join unknown event %r", sid, event_id)
            self.broadcaster.send(sid, EVENT_ERROR, build_event_error_payload())
            return False

        self.registry.bind(sid, event.id)
        self.broadcaster.subscribe(sid, room_for_event(event.id))

        your_slots = (
            event.slots_for(participant_id)
            if _is_participant_id(participant_id)
            else SlotSet()
        )
        self.broadcaster.send(
            sid,
            EVENT_STATE,
            build_event_state_payload(
                event,
                total_slots=self.total_slots,
                your_slots=your_slots,
                base_url=session.base_url,
            ),
        )
        logger.info("Session %s joined event %s", sid, event.id)
        return True

    def update(
        self,
        sid: str,
        event_id: Any,
        participant_id: Any,
        raw_slots: Any,
    ) -> SlotSet | None:
        """Replace a participant's selection and fan out the new aggregate.

        Messages from sessions not joined to ``event_id`` (stale, duplicate,
        pre-join or post-disconnect) are dropped without any reply. Returns
        the stored selection, or ``None`` when the message was dropped.
        """

        session = self.registry.get(sid)
        if session is None or not session.is_joined_to(event_id):
            logger.debug("Ignoring update from session %s for %r", sid, event_id)
            return None
        if not _is_participant_id(participant_id):
            logger.debug("Ignoring update from session %s without participant", sid)
            return None

        event = self.store.get(event_id)
        slots = SlotSet.from_candidates(raw_slots, total_slots=self.total_slots)
        event.replace_slots(participant_id, slots)

        self.broadcaster.publish(
            room_for_event(event.id),
            EVENT_UPDATE,
            build_event_update_payload(event, total_slots=self.total_slots),
        )
        self.broadcaster.send(sid, YOUR_SLOTS, build_your_slots_payload(slots))
        logger.debug(
            "Participant %s stored %d slot(s) in event %s",
            participant_id,
            len(slots),
            event.id,
        )
        return slots

    def disconnect(self, sid: str) -> None:
        session = self.registry.close(sid)
        if session is None:
            return
        if session.event_id is not None:
            self.broadcaster.unsubscribe(sid, room_for_event(session.event_id))
        logger.debug("Session %s disconnected", sid)
