"""Wire contract of the session broker.

Client events are parsed into small command objects; everything the
broker sends back is a ``Notification`` addressed to one connection.
"""

from dataclasses import dataclass
from typing import Any, Tuple

# client -> server
HOST_GAME = 'hostGame'
JOIN_GAME = 'joinGame'
MAKE_MOVE = 'makeMove'

# server -> client
GAME_HOSTED = 'gameHosted'
GAME_STARTED = 'gameStarted'
MOVE_MADE = 'moveMade'
ERROR = 'error'
OPPONENT_DISCONNECTED = 'opponentDisconnected'


@dataclass(frozen=True)
class HostGame:
    pass


@dataclass(frozen=True)
class JoinGame:
    code: str


@dataclass(frozen=True)
class MakeMove:
    payload: Any


@dataclass(frozen=True)
class Disconnect:
    pass


@dataclass(frozen=True)
class Notification:
    target: str
    event: str
    args: Tuple[Any, ...] = ()

    @property
    def payload(self):
        return self.args[0] if self.args else None


def normalize_code(raw) -> str:
    if not isinstance(raw, str):
        return ''
    return raw.strip().upper()


def parse_command(event: str, data: Any = None):
    """Build the command for a raw client event; None for unknown events."""
    if event == HOST_GAME:
        return HostGame()
    if event == JOIN_GAME:
        # bare string or {"code": "ABCD"}
        if isinstance(data, dict):
            data = data.get('code')
        return JoinGame(normalize_code(data))
    if event == MAKE_MOVE:
        return MakeMove(data)
    return None
