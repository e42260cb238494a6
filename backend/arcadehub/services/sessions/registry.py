import enum
import threading
import time
from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, Optional, Tuple

from .errors import AlreadyJoined, DuplicateCode, SessionFull, SessionNotFound

MAX_PARTICIPANTS = 2


class SessionState(enum.Enum):
    WAITING = 'waiting'
    ACTIVE = 'active'
    TERMINATED = 'terminated'


@dataclass
class Session:
    code: str
    participants: Tuple[str, ...] = ()
    state: SessionState = SessionState.WAITING
    created_at: float = field(default_factory=time.time)

    @property
    def host(self) -> Optional[str]:
        return self.participants[0] if self.participants else None

    def others(self, connection_id: str) -> Tuple[str, ...]:
        return tuple(p for p in self.participants if p != connection_id)


class SessionRegistry:
    """In-memory ``code -> Session`` map.

    Every mutation happens under one lock, and callers only ever see
    copies, so membership and capacity checks cannot interleave.
    """

    def __init__(self):
        self._sessions: Dict[str, Session] = {}
        self._lock = threading.Lock()

    def create(self, code: str, host_id: str) -> Session:
        with self._lock:
            if code in self._sessions:
                raise DuplicateCode()
            session = Session(code=code, participants=(host_id,))
            self._sessions[code] = session
            return replace(session)

    def join(self, code: str, connection_id: str) -> Session:
        """Append ``connection_id`` as the second participant and activate."""
        with self._lock:
            session = self._sessions.get(code)
            if session is None:
                raise SessionNotFound()
            if connection_id in session.participants:
                raise AlreadyJoined()
            if len(session.participants) >= MAX_PARTICIPANTS:
                raise SessionFull()
            session.participants = session.participants + (connection_id,)
            session.state = SessionState.ACTIVE
            return replace(session)

    def get(self, code: str) -> Session:
        with self._lock:
            session = self._sessions.get(code)
            if session is None:
                raise SessionNotFound()
            return replace(session)

    def remove(self, code: str) -> Optional[Session]:
        """Drop the session; returns it, or None if it was already gone."""
        with self._lock:
            session = self._sessions.pop(code, None)
        if session is None:
            return None
        session.state = SessionState.TERMINATED
        return session

    def remove_if_member(self, code: str, connection_id: str) -> Optional[Session]:
        with self._lock:
            session = self._sessions.get(code)
            if session is None or connection_id not in session.participants:
                return None
            del self._sessions[code]
        session.state = SessionState.TERMINATED
        return session

    def codes(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._sessions)

    def __contains__(self, code) -> bool:
        with self._lock:
            return code in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
