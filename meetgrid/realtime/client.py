"""Python participant client for the availability channel.

Behaves like the browser page: joins on connect, keeps the local selection
authoritative until the server echoes its canonical form, and paces
``updateSlots`` through a :class:`SubmissionPacer`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any

import socketio

from .events.availability import EVENT_ERROR
from .events.availability import EVENT_STATE
from .events.availability import EVENT_UPDATE
from .events.availability import YOUR_SLOTS
from .pacing import DEFAULT_QUIESCENCE_SECONDS
from .pacing import SubmissionPacer

if TYPE_CHECKING:  # import for type checking only
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class AvailabilityClient:
    def __init__(
        self,
        event_id: str,
        participant_id: str,
        *,
        quiescence: float = DEFAULT_QUIESCENCE_SECONDS,
        client: Any | None = None,
    ) -> None:
        self.event_id = event_id
        self.participant_id = participant_id
        self.sio = client if client is not None else socketio.AsyncClient()
        self.pacer = SubmissionPacer(self.submit, quiescence=quiescence)

        self.selection: set[int] = set()
        self.title: str | None = None
        self.share_link: str | None = None
        self.slot_totals: list[int] = []
        self.participant_count = 0
        self.error: str | None = None

        self.sio.on("connect", self._on_connect)
        self.sio.on(EVENT_STATE, self._on_event_state)
        self.sio.on(EVENT_UPDATE, self._on_event_update)
        self.sio.on(YOUR_SLOTS, self._on_your_slots)
        self.sio.on(EVENT_ERROR, self._on_event_error)

    async def connect(self, url: str, **kwargs: Any) -> None:
        await self.sio.connect(url, **kwargs)

    async def disconnect(self) -> None:
        await self.pacer.flush()
        await self.sio.disconnect()

    async def _on_connect(self) -> None:
        # Also runs after a reconnect, which is a brand-new server session.
        await self.sio.emit(
            "joinEvent",
            {"eventId": self.event_id, "participantId": self.participant_id},
        )

    async def _on_event_state(self, state: dict[str, Any]) -> None:
        self.error = None
        self.title = state.get("title")
        self.share_link = state.get("shareLink", self.share_link)
        self._apply_aggregate(state)
        self.selection = {int(slot) for slot in state.get("yourSlots") or ()}

    async def _on_event_update(self, state: dict[str, Any]) -> None:
        self._apply_aggregate(state)

    async def _on_your_slots(self, slots: list[int]) -> None:
        if self.pacer.pending:
            # A newer local change is about to be submitted.
            return
        self.selection = {int(slot) for slot in slots or ()}

    async def _on_event_error(self, data: dict[str, Any]) -> None:
        self.error = (data or {}).get("message")
        logger.warning("Event %s rejected join: %s", self.event_id, self.error)

    def _apply_aggregate(self, state: dict[str, Any]) -> None:
        self.slot_totals = list(state.get("slotTotals") or [])
        self.participant_count = int(state.get("participantCount") or 0)

    def select(self, slot: int) -> None:
        self.selection.add(slot)
        self.pacer.touch()

    def deselect(self, slot: int) -> None:
        self.selection.discard(slot)
        self.pacer.touch()

    def toggle(self, slot: int) -> None:
        if slot in self.selection:
            self.deselect(slot)
        else:
            self.select(slot)

    def set_selection(self, slots: Iterable[int]) -> None:
        self.selection = set(slots)
        self.pacer.touch()

    async def submit(self) -> None:
        await self.sio.emit(
            "updateSlots",
            {
                "eventId": self.event_id,
                "participantId": self.participant_id,
                "slots": sorted(self.selection),
            },
        )
