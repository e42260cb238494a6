import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from .codes import CodeGenerator
from .errors import AlreadyJoined, CapacityExhausted, DuplicateCode, SessionNotFound
from .messages import OPPONENT_DISCONNECTED
from .registry import Session, SessionRegistry
from .relay import MessageRelay

logger = logging.getLogger(__name__)


@dataclass
class Connection:
    """One live client connection.

    ``session_code`` is only a lookup key into the registry; the session
    itself decides who its participants are.
    """
    id: str
    session_code: Optional[str] = None


class SessionManager:
    """Host / join / relay / teardown on top of a SessionRegistry.

    A session moves Waiting -> Active -> Terminated and never back. Any
    participant leaving terminates it for everybody.
    """

    def __init__(self, relay: MessageRelay, registry: Optional[SessionRegistry] = None,
                 generator: Optional[CodeGenerator] = None, roles: Sequence[str] = ('X', 'O')):
        if len(roles) != 2 or roles[0] == roles[1]:
            raise ValueError('exactly two distinct roles are required')
        self.relay = relay
        self.registry = registry if registry is not None else SessionRegistry()
        self.generator = generator if generator is not None else CodeGenerator()
        self.roles = tuple(roles)

    def session_for(self, connection: Connection) -> Optional[Session]:
        """The live session ``connection`` belongs to, if any.

        A stale binding (session gone, or its code reused by someone
        else) is cleared on the way.
        """
        if not connection.session_code:
            return None
        try:
            session = self.registry.get(connection.session_code)
        except SessionNotFound:
            connection.session_code = None
            return None
        if connection.id not in session.participants:
            connection.session_code = None
            return None
        return session

    def host_session(self, connection: Connection) -> str:
        self._leave(connection)
        for _ in range(self.generator.max_attempts):
            try:
                code = self.generator.generate(self.registry.codes())
            except CapacityExhausted:
                break
            try:
                self.registry.create(code, connection.id)
            except DuplicateCode:
                logger.warning(f"[session-duplicate] code={code} taken concurrently, retrying")
                continue
            connection.session_code = code
            logger.info(f"[session-host] code={code} sid={connection.id}")
            return code
        logger.error(f"[session-capacity] sid={connection.id} no free code after "
                     f"{self.generator.max_attempts} attempts")
        raise CapacityExhausted()

    def join_session(self, connection: Connection, code: str) -> Dict[str, str]:
        """Pair ``connection`` with the host of ``code``.

        Returns the role of each participant keyed by connection id: the
        host gets the first role, the joiner the second.
        """
        current = self.session_for(connection)
        if current is not None and current.code == code:
            raise AlreadyJoined()
        session = self.registry.join(code, connection.id)
        if current is not None:
            self._leave(connection, current.code)
        connection.session_code = code
        logger.info(f"[session-join] code={code} sid={connection.id} host={session.host}")
        return dict(zip(session.participants, self.roles))

    def relay_move(self, connection: Connection, payload: Any) -> int:
        session = self.session_for(connection)
        if session is None:
            return 0
        return self.relay.forward(session, connection.id, payload)

    def handle_disconnect(self, connection: Connection) -> Optional[Session]:
        """Tear down the connection's session, warning whoever is left."""
        return self._leave(connection)

    def _leave(self, connection: Connection, code: Optional[str] = None) -> Optional[Session]:
        code = code or connection.session_code
        connection.session_code = None
        if not code:
            return None
        session = self.registry.remove_if_member(code, connection.id)
        if session is not None:
            self.relay.notify_others(session, connection.id, OPPONENT_DISCONNECTED)
            logger.info(f"[session-end] code={session.code} left_by={connection.id}")
        return session

