"""
Test fixtures for the groove app.

Provides a throwaway JSON store, a notifier that records what it was asked
to deliver, and a controllable clock so date-dependent logic is testable.
"""

import random
import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import groove_core  # noqa: E402
from groove_app.notifier import Notifier  # noqa: E402
from groove_app.storage import JsonFileStore  # noqa: E402

# Monday before the active window opens; Tuesday/Thursday/Saturday are the default sport days
MONDAY = datetime(2024, 3, 4, 6, 0)
TUESDAY = datetime(2024, 3, 5, 6, 0)


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)
        return self.now


class RecordingNotifier(Notifier):
    def __init__(self):
        self.calls = []

    def schedule_at(self, notification_id, title, body, when, payload):
        self.calls.append(("schedule_at", notification_id, title, body, when, payload))
        return True

    def cancel(self, notification_id):
        self.calls.append(("cancel", notification_id))
        return True

    def cancel_all(self):
        self.calls.append(("cancel_all",))
        return True

    def show_now(self, notification_id, title, body, payload):
        self.calls.append(("show_now", notification_id, title, body, payload))
        return True

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


class ScriptedRandom(random.Random):
    """A Random whose randrange draws come from a fixed script."""

    def __init__(self, draws, seed=0):
        super().__init__(seed)
        self.draws = list(draws)

    def randrange(self, start, stop=None, step=1):
        if len(self.draws) > 1:
            return self.draws.pop(0)
        return self.draws[0]


@pytest.fixture(autouse=True)
def action_log(tmp_path, monkeypatch):
    """Keep the action log out of the repo."""
    path = tmp_path / "logs.jsonl"
    monkeypatch.setattr(groove_core, "LOG_FILE", str(path))
    return path


@pytest.fixture
def store(tmp_path):
    return JsonFileStore(str(tmp_path / "data"))


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def clock():
    return FixedClock(MONDAY)


@pytest.fixture
def client(tmp_path, clock, monkeypatch):
    from app import app

    monkeypatch.setitem(app.config, "GROOVE_DATA_DIR", str(tmp_path / "app-data"))
    monkeypatch.setitem(app.config, "GROOVE_NOTIFY_BASE", None)
    monkeypatch.setitem(app.config, "GROOVE_CLOCK", clock)
    app.config["TESTING"] = True
    app.extensions.pop("groove_walk_timer", None)

    with app.test_client() as test_client:
        yield test_client

    timer = app.extensions.pop("groove_walk_timer", None)
    if timer is not None and timer.is_running:
        timer.stop()
