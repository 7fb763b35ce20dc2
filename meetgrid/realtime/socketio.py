"""Socket.IO server for availability events.

Browser convention:
- Socket.IO path: /socket.io/ (``SOCKETIO_PATH``)
- No auth: every message carries an opaque ``participantId``
- On connect the client emits ``joinEvent``; selection changes are sent
  as ``updateSlots`` with the complete current selection.
"""

from __future__ import annotations

import functools
import logging
from typing import Any

import socketio

from meetgrid.events.services import get_event_store
from meetgrid.events.sharing import headers_from_environ
from meetgrid.events.sharing import resolve_base_url

from .broadcaster import SocketIOBroadcaster
from .protocol import SyncProtocol
from .sessions import SessionRegistry

logger = logging.getLogger(__name__)


sio = socketio.AsyncServer(
    async_mode="asgi",
    cors_allowed_origins="*",
    logger=False,
    engineio_logger=False,
)

broadcaster = SocketIOBroadcaster(sio)


@functools.cache
def get_protocol() -> SyncProtocol:
    return SyncProtocol(
        store=get_event_store(),
        registry=SessionRegistry(),
        broadcaster=broadcaster,
    )


def _participant_id(data: dict[str, Any]) -> Any:
    # ``userId`` is what earlier browser clients send.
    participant_id = data.get("participantId")
    if participant_id is None:
        participant_id = data.get("userId")
    return participant_id


@sio.event
async def connect(sid: str, environ: dict[str, Any], auth: Any | None = None):
    headers, secure = headers_from_environ(environ)
    get_protocol().connect(sid, base_url=resolve_base_url(headers, secure=secure))
    broadcaster.start()


@sio.event
async def disconnect(sid: str, reason: Any = None):
    get_protocol().disconnect(sid)


@sio.on("joinEvent")
async def join_event(sid: str, data: Any):
    if not isinstance(data, dict):
        logger.debug("Dropping malformed joinEvent from %s", sid)
        return
    get_protocol().join(sid, data.get("eventId"), _participant_id(data))


@sio.on("updateSlots")
async def update_slots(sid: str, data: Any):
    if not isinstance(data, dict):
        logger.debug("Dropping malformed updateSlots from %s", sid)
        return
    get_protocol().update(
        sid,
        data.get("eventId"),
        _participant_id(data),
        data.get("slots"),
    )
