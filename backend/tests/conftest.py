import os
import sys
import pytest

# Ensure the backend root (containing the `arcadehub` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from arcadehub import create_app, db, socketio
from arcadehub.services.sessions import MessageRelay, SessionManager, SessionRegistry, CodeGenerator


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    CORS_ORIGINS = ('*',)
    SOCKETIO_NAMESPACE = '/'
    SESSION_CODE_LENGTH = 4
    SESSION_CODE_ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    SESSION_CODE_MAX_ATTEMPTS = 1000
    SESSION_ROLES = ('X', 'O')
    SCORE_ASCENDING_GAMES = ('reflex',)
    SCORE_LEADERBOARD_SIZE = 10
    PLAYER_NAME_MIN_LENGTH = 3
    PLAYER_NAME_MAX_LENGTH = 15
    STATIC_ROOT = None


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import arcadehub.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_factory(flask_app):
    """Open Socket.IO test clients; all are disconnected on teardown."""
    opened = []

    def _open():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        opened.append(test_client)
        return test_client

    yield _open
    for test_client in opened:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


class Outbox:
    """Records notifications instead of sending them anywhere."""

    def __init__(self):
        self.sent = []

    def __call__(self, notification):
        self.sent.append(notification)

    def for_target(self, target):
        return [(n.event, n.args) for n in self.sent if n.target == target]

    def clear(self):
        self.sent.clear()


@pytest.fixture()
def outbox():
    return Outbox()


@pytest.fixture()
def manager(outbox):
    return SessionManager(
        MessageRelay(outbox),
        registry=SessionRegistry(),
        generator=CodeGenerator(),
        roles=('X', 'O'),
    )
