"""Session broker: short join codes, two-party rooms and move relay.

Nothing in this package imports Flask. The Socket.IO layer in
``arcadehub.socketio_events`` translates transport events into the
commands defined in ``messages`` and delivers the resulting
notifications back to the sockets.
"""

from .codes import CodeGenerator
from .errors import (
    AlreadyJoined,
    CapacityExhausted,
    DuplicateCode,
    SessionError,
    SessionFull,
    SessionNotFound,
)
from .gateway import ConnectionGateway
from .manager import Connection, SessionManager
from .messages import Notification
from .registry import Session, SessionRegistry, SessionState
from .relay import MessageRelay

__all__ = [
    'AlreadyJoined',
    'CapacityExhausted',
    'CodeGenerator',
    'Connection',
    'ConnectionGateway',
    'DuplicateCode',
    'MessageRelay',
    'Notification',
    'Session',
    'SessionError',
    'SessionFull',
    'SessionManager',
    'SessionNotFound',
    'SessionRegistry',
    'SessionState',
]
