from flask import current_app, request
from arcadehub import socketio
from arcadehub.services.sessions import ConnectionGateway, Notification
from arcadehub.services.sessions.messages import Disconnect, HOST_GAME, JOIN_GAME, MAKE_MOVE

EXTENSION_KEY = 'session_broker'


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _gateway() -> ConnectionGateway:
    return current_app.extensions[EXTENSION_KEY]


def handle_connect(auth=None):
    _gateway().connect(_get_sid())


def handle_disconnect(reason=None):
    # Transport-detected loss is the only way a session ends
    _gateway().dispatch(_get_sid(), Disconnect())


def handle_host_game(data=None):
    _gateway().handle_event(_get_sid(), HOST_GAME, data)


def handle_join_game(code=None):
    _gateway().handle_event(_get_sid(), JOIN_GAME, code)


def handle_make_move(payload=None):
    _gateway().handle_event(_get_sid(), MAKE_MOVE, payload)


def make_emitter(namespace: str):
    """Deliver notifications to a single socket without waiting on it."""
    def deliver(notification: Notification) -> None:
        socketio.emit(notification.event, *notification.args, to=notification.target, namespace=namespace)
    return deliver


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register the broker's Socket.IO event handlers on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event(HOST_GAME, handle_host_game, namespace=namespace)
    socketio.on_event(JOIN_GAME, handle_join_game, namespace=namespace)
    socketio.on_event(MAKE_MOVE, handle_make_move, namespace=namespace)


def init_session_broker(flask_app) -> ConnectionGateway:
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    gateway = ConnectionGateway.from_config(flask_app.config, make_emitter(namespace))
    flask_app.extensions[EXTENSION_KEY] = gateway
    register_socketio_handlers(namespace)
    flask_app.logger.info(f"[broker-ready] namespace={namespace}")
    return gateway
