import os
import sys
import pytest

# Ensure the project root (containing the `dice_duel` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from dice_duel import create_app, socketio
from dice_duel.services.games import GameCoordinator, RecordingBroadcaster


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    HOST = '127.0.0.1'
    PORT = 3000
    CORS_ALLOWED_ORIGINS = '*'
    SOCKETIO_NAMESPACE = '/'
    LOG_LEVEL = 'DEBUG'


class ScriptedDice:
    """Stands in for random.Random: hands out the given faces in order, then repeats the last one."""

    def __init__(self, faces):
        self.faces = list(faces)
        self.calls = 0

    def randint(self, low, high):
        face = self.faces[min(self.calls, len(self.faces) - 1)]
        self.calls += 1
        return face


@pytest.fixture()
def dice():
    # A rolls 6, 2, 2 (=10); B rolls 1, 4, 2 (=7), alternating A, B, A, B, A, B
    return ScriptedDice([6, 1, 2, 4, 2, 2])


@pytest.fixture()
def broadcaster():
    return RecordingBroadcaster()


@pytest.fixture()
def coordinator(broadcaster, dice):
    return GameCoordinator(broadcaster, rng=dice)


@pytest.fixture()
def flask_app(dice):
    application = create_app(TestConfig, rng=dice)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
    )
    yield test_client
    try:
        test_client.disconnect()
    except Exception:
        pass
