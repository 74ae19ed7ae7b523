"""
Shared test fixtures: temp train log, recording event sink, test client.
"""

import pytest
from fastapi.testclient import TestClient

from garagepro.events import EventRecorder, get_event_recorder
from garagepro.main import app
from garagepro.training_log import TrainLog, get_train_log


class RecordingEventRecorder(EventRecorder):
    """Keeps recorded events in memory for assertions."""

    def __init__(self):
        self.events = []

    def record(self, event, payload):
        self.events.append((event, payload))


@pytest.fixture
def train_log(tmp_path):
    """Train log in a per-test temp directory."""
    return TrainLog(tmp_path / "data" / "pipeline.json", max_entries=200)


@pytest.fixture
def recorder():
    return RecordingEventRecorder()


@pytest.fixture
def client(train_log, recorder):
    """FastAPI test client wired to the temp log and in-memory recorder."""
    app.dependency_overrides[get_train_log] = lambda: train_log
    app.dependency_overrides[get_event_recorder] = lambda: recorder
    yield TestClient(app)
    app.dependency_overrides.clear()
