import os
import sys
import pytest

# Ensure the backend root (containing the `wordrooms` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from wordrooms import create_app, socketio
from wordrooms.services.rooms import GameCoordinator, RoomRegistry, RoundScheduler


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ALLOWED_ORIGINS = '*'
    SOCKETIO_NAMESPACE = '/'
    LOG_LEVEL = 'DEBUG'
    ROOM_CODE_LENGTH = 4
    MAX_PLAYERS = 4
    MIN_PLAYERS = 2
    NEW_ROUND_DELAY_SEC = 0


class RecordingBroadcaster:
    """Connection layer double that tracks channels and every outbound event."""

    def __init__(self):
        self.channels = {}
        self.sent = []

    def subscribe(self, sid, channel):
        self.channels.setdefault(channel, set()).add(sid)

    def unsubscribe(self, sid, channel):
        members = self.channels.get(channel, set())
        members.discard(sid)
        if not members:
            self.channels.pop(channel, None)

    def send_to(self, sid, event, payload):
        self.sent.append(('to', sid, event, payload))

    def broadcast(self, channel, event, payload):
        self.sent.append(('room', channel, event, payload))

    def broadcast_except(self, channel, exclude_sid, event, payload):
        self.sent.append(('room-except', channel, exclude_sid, event, payload))

    def events(self, name):
        return [entry for entry in self.sent if entry[-2] == name]

    def clear(self):
        self.sent.clear()


class ManualClock:
    """Collects scheduled tasks so tests decide when simulated time passes."""

    def __init__(self):
        self.tasks = []
        self.slept = []

    def start_task(self, fn, *args):
        self.tasks.append((fn, args))

    def sleep(self, seconds):
        self.slept.append(seconds)

    def run_all(self):
        tasks, self.tasks = self.tasks, []
        for fn, args in tasks:
            fn(*args)
        return len(tasks)


class WordSequence:
    def __init__(self, *words):
        self.words = list(words)
        self.calls = 0

    def __call__(self):
        word = self.words[min(self.calls, len(self.words) - 1)]
        self.calls += 1
        return word


@pytest.fixture()
def broadcaster():
    return RecordingBroadcaster()


@pytest.fixture()
def clock():
    return ManualClock()


@pytest.fixture()
def words():
    return WordSequence('CRANE', 'SLATE', 'PIANO')


@pytest.fixture()
def registry():
    return RoomRegistry()


@pytest.fixture()
def coordinator(registry, broadcaster, words, clock):
    return GameCoordinator(
        registry=registry,
        broadcaster=broadcaster,
        word_source=words,
        scheduler=RoundScheduler(start_task=clock.start_task, sleep=clock.sleep),
        new_round_delay=5,
    )


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_client(flask_app):
    clients = []

    def _make():
        test_client = socketio.test_client(
            flask_app,
            flask_test_client=flask_app.test_client(),
        )
        clients.append(test_client)
        return test_client

    yield _make
    for test_client in clients:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


@pytest.fixture()
def sio_client(make_client):
    return make_client()
