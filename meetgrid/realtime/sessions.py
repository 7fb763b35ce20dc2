"""Live connection bookkeeping.

A session is bound to at most one event for its whole lifetime. Sessions
joined to the same event form that event's membership group, the audience
for its broadcasts.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class SessionState(enum.Enum):
    UNJOINED = "unjoined"
    JOINED = "joined"
    CLOSED = "closed"


@dataclass
class Session:
    sid: str
    base_url: str | None = None
    event_id: str | None = None
    closed: bool = False

    @property
    def state(self) -> SessionState:
        if self.closed:
            return SessionState.CLOSED
        if self.event_id is None:
            return SessionState.UNJOINED
        return SessionState.JOINED

    def is_joined_to(self, event_id: object) -> bool:
        return self.state is SessionState.JOINED and self.event_id == event_id


class SessionRegistry:
    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._members: dict[str, set[str]] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def open(self, sid: str, *, base_url: str | None = None) -> Session:
        session = Session(sid=sid, base_url=base_url)
        self._sessions[sid] = session
        return session

    def get(self, sid: str) -> Session | None:
        return self._sessions.get(sid)

    def bind(self, sid: str, event_id: str) -> bool:
        """Move an unjoined session into ``event_id``'s membership group.

        Returns ``False`` (and changes nothing) for unknown, closed or
        already-joined sessions.
        """

        session = self._sessions.get(sid)
        if session is None or session.state is not SessionState.UNJOINED:
            return False
        session.event_id = event_id
        self._members.setdefault(event_id, set()).add(sid)
        return True

    def close(self, sid: str) -> Session | None:
        session = self._sessions.pop(sid, None)
        if session is None:
            return None
        session.closed = True
        if session.event_id is not None:
            members = self._members.get(session.event_id)
            if members is not None:
                members.discard(sid)
                if not members:
                    del self._members[session.event_id]
        return session

    def members(self, event_id: str) -> frozenset[str]:
        return frozenset(self._members.get(event_id, ()))
