"""Outbound delivery.

Each event id is a topic (a Socket.IO room). The protocol subscribes
sessions on join, publishes to the topic on every accepted update, and
sends private messages straight to one session. It never waits on delivery.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from dataclasses import dataclass
from typing import Any
from typing import Protocol

logger = logging.getLogger(__name__)


def room_for_event(event_id: str) -> str:
    return f"event_{event_id}"


class Broadcaster(Protocol):
    def subscribe(self, sid: str, topic: str) -> None: ...

    def unsubscribe(self, sid: str, topic: str) -> None: ...

    def publish(self, topic: str, event: str, payload: Any) -> None: ...

    def send(self, sid: str, event: str, payload: Any) -> None: ...


@dataclass(frozen=True)
class Delivery:
    action: str
    target: str
    event: str = ""
    payload: Any = None
    sid: str = ""


SUBSCRIBE = "subscribe"
UNSUBSCRIBE = "unsubscribe"
EMIT = "emit"


class SocketIOBroadcaster:
    """Broadcaster backed by a python-socketio ``AsyncServer``.

    Calls only append to an outbox. A single background task drains it in
    order, so members of a topic observe messages in the order the
    mutations behind them were accepted. A failed delivery is logged and
    the next one proceeds.
    """

    def __init__(self, server) -> None:
        self.server = server
        self._outbox: deque[Delivery] = deque()
        self._ready = asyncio.Event()
        self._task = None

    def __len__(self) -> int:
        return len(self._outbox)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if not self.running:
            self._task = self.server.start_background_task(self.run)

    def subscribe(self, sid: str, topic: str) -> None:
        self._enqueue(Delivery(SUBSCRIBE, topic, sid=sid))

    def unsubscribe(self, sid: str, topic: str) -> None:
        self._enqueue(Delivery(UNSUBSCRIBE, topic, sid=sid))

    def publish(self, topic: str, event: str, payload: Any) -> None:
        self._enqueue(Delivery(EMIT, topic, event, payload))

    def send(self, sid: str, event: str, payload: Any) -> None:
        self._enqueue(Delivery(EMIT, sid, event, payload))

    def _enqueue(self, delivery: Delivery) -> None:
        self._outbox.append(delivery)
        self._ready.set()

    async def _deliver(self, delivery: Delivery) -> None:
        if delivery.action == SUBSCRIBE:
            await self.server.enter_room(delivery.sid, delivery.target)
        elif delivery.action == UNSUBSCRIBE:
            await self.server.leave_room(delivery.sid, delivery.target)
        else:
            await self.server.emit(delivery.event, delivery.payload, to=delivery.target)

    async def flush(self) -> int:
        """Deliver everything queued so far; return how many succeeded."""

        delivered = 0
        while self._outbox:
            delivery = self._outbox.popleft()
            try:
                await self._deliver(delivery)
            except Exception:
                logger.exception(
                    "Realtime delivery failed: %s %s -> %s",
                    delivery.action,
                    delivery.event,
                    delivery.target,
                )
            else:
                delivered += 1
        return delivered

    async def run(self) -> None:
        while True:
            await self._ready.wait()
            self._ready.clear()
            await self.flush()
