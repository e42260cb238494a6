import logging
import threading
from typing import Any, Dict, Mapping, Optional

from .codes import CodeGenerator
from .errors import SessionError
from .manager import Connection, SessionManager
from .messages import (
    ERROR,
    GAME_HOSTED,
    GAME_STARTED,
    Disconnect,
    HostGame,
    JoinGame,
    MakeMove,
    parse_command,
)
from .registry import SessionRegistry
from .relay import Deliver, MessageRelay

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = 'Erreur interne du serveur.'


class ConnectionGateway:
    """Owns the Connection records and maps client events to the manager.

    Replies go out through the relay, so the same ``deliver`` callable
    carries every outbound notification.
    """

    def __init__(self, manager: SessionManager):
        self.manager = manager
        self._connections: Dict[str, Connection] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: Mapping[str, Any], deliver: Deliver) -> 'ConnectionGateway':
        generator = CodeGenerator(
            length=int(config.get('SESSION_CODE_LENGTH', 4)),
            alphabet=config.get('SESSION_CODE_ALPHABET', 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'),
            max_attempts=int(config.get('SESSION_CODE_MAX_ATTEMPTS', 1000)),
        )
        manager = SessionManager(
            MessageRelay(deliver),
            registry=SessionRegistry(),
            generator=generator,
            roles=tuple(config.get('SESSION_ROLES', ('X', 'O'))),
        )
        return cls(manager)

    @property
    def relay(self) -> MessageRelay:
        return self.manager.relay

    def connection(self, connection_id: str) -> Optional[Connection]:
        with self._lock:
            return self._connections.get(connection_id)

    def connect(self, connection_id: str) -> Connection:
        with self._lock:
            conn = self._connections.get(connection_id)
            if conn is None:
                conn = self._connections[connection_id] = Connection(connection_id)
        logger.info(f"[connect] sid={connection_id}")
        return conn

    def disconnect(self, connection_id: str) -> None:
        with self._lock:
            conn = self._connections.pop(connection_id, None)
        logger.info(f"[disconnect] sid={connection_id}")
        if conn is None:
            return
        try:
            self.manager.handle_disconnect(conn)
        except Exception:
            logger.exception(f"[disconnect-fail] sid={connection_id}")

    def handle_event(self, connection_id: str, event: str, data: Any = None) -> None:
        command = parse_command(event, data)
        if command is None:
            logger.warning(f"[event-unknown] sid={connection_id} event={event}")
            return
        self.dispatch(connection_id, command)

    def dispatch(self, connection_id: str, command) -> None:
        """Run one command for one connection.

        Session errors become a single ``error`` event for the caller;
        anything else is logged and reported generically.
        """
        if isinstance(command, Disconnect):
            self.disconnect(connection_id)
            return
        conn = self.connection(connection_id)
        if conn is None:
            # late event after disconnect, or a socket that never connected
            logger.warning(f"[event-orphan] sid={connection_id} command={type(command).__name__}")
            return
        try:
            if isinstance(command, HostGame):
                code = self.manager.host_session(conn)
                self.relay.send(conn.id, GAME_HOSTED, code)
            elif isinstance(command, JoinGame):
                roles = self.manager.join_session(conn, command.code)
                for participant, role in roles.items():
                    self.relay.send(participant, GAME_STARTED, role)
            elif isinstance(command, MakeMove):
                self.manager.relay_move(conn, command.payload)
            else:
                raise TypeError(f'unsupported command {command!r}')
        except SessionError as exc:
            logger.info(f"[session-reject] sid={connection_id} command={type(command).__name__} reason={exc.message}")
            self.relay.send(conn.id, ERROR, exc.message)
        except Exception:
            logger.exception(f"[session-fail] sid={connection_id} command={type(command).__name__}")
            self.relay.send(conn.id, ERROR, INTERNAL_ERROR_MESSAGE)

    def active_sessions(self) -> int:
        return len(self.manager.registry)

