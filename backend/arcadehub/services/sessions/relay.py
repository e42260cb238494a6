import logging
from typing import Any, Callable

from .messages import MOVE_MADE, Notification
from .registry import Session

logger = logging.getLogger(__name__)

Deliver = Callable[[Notification], None]


class MessageRelay:
    """Fire-and-forget delivery of notifications to connection ids.

    ``deliver`` hands a notification to the transport; it must not wait
    for the peer. A failing target is logged and skipped.
    """

    def __init__(self, deliver: Deliver):
        self._deliver = deliver

    def send(self, target: str, event: str, *args: Any) -> bool:
        try:
            self._deliver(Notification(target, event, tuple(args)))
        except Exception:
            logger.exception(f"[relay-fail] target={target} event={event}")
            return False
        return True

    def notify_others(self, session: Session, from_id: str, event: str, *args: Any) -> int:
        sent = 0
        for target in session.others(from_id):
            if self.send(target, event, *args):
                sent += 1
        return sent

    def forward(self, session: Session, from_id: str, payload: Any) -> int:
        """Send ``payload`` untouched as ``moveMade`` to everyone but the sender."""
        return self.notify_others(session, from_id, MOVE_MADE, payload)
