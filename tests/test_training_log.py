"""
Train log + event recorder tests.
"""

import json
import urllib.error
from unittest.mock import MagicMock, patch

from garagepro.config import settings
from garagepro.events import (
    HttpEventRecorder, LocalEventRecorder, NullEventRecorder, get_event_recorder,
)
from garagepro.training_log import TrainLog, get_train_log


# ============================================================
# TrainLog
# ============================================================

def test_ensure_exists_creates_empty_list(tmp_path):
    log = TrainLog(tmp_path / "nested" / "pipeline.json")
    log.ensure_exists()
    assert json.loads(log.path.read_text()) == []


def test_entries_when_missing(tmp_path):
    assert TrainLog(tmp_path / "pipeline.json").entries() == []


def test_append_stamps_and_keeps_fields(tmp_path):
    log = TrainLog(tmp_path / "pipeline.json")
    stamped = log.append({"event": "inference", "payload": {"price": 75}})
    assert isinstance(stamped["t"], int)
    assert stamped["t"] > 1_600_000_000_000  # epoch milliseconds
    assert log.entries() == [stamped]


def test_append_caps_to_newest(tmp_path):
    log = TrainLog(tmp_path / "pipeline.json", max_entries=5)
    for i in range(8):
        log.append({"n": i})
    assert [e["n"] for e in log.entries()] == [3, 4, 5, 6, 7]


def test_default_cap_is_200(tmp_path):
    log = get_train_log()
    assert log.max_entries == 200

    log = TrainLog(tmp_path / "pipeline.json", max_entries=200)
    for i in range(205):
        log.append({"n": i})
    entries = log.entries()
    assert len(entries) == 200
    assert entries[0]["n"] == 5
    assert entries[-1]["n"] == 204


def test_corrupt_file_starts_fresh(tmp_path):
    path = tmp_path / "pipeline.json"
    path.write_text("{not json")
    log = TrainLog(path)
    assert log.entries() == []
    log.append({"event": "x"})
    assert len(log.entries()) == 1


def test_non_list_file_starts_fresh(tmp_path):
    path = tmp_path / "pipeline.json"
    path.write_text('{"event": "x"}')
    assert TrainLog(path).entries() == []


def test_file_is_indented_json(tmp_path):
    log = TrainLog(tmp_path / "pipeline.json")
    log.append({"event": "x"})
    assert "\n  " in log.path.read_text()


def test_get_train_log_uses_settings(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DATA_DIR", str(tmp_path))
    assert get_train_log().path == tmp_path / "pipeline.json"


# ============================================================
# Event recorders
# ============================================================

def test_local_recorder_writes_log(tmp_path):
    log = TrainLog(tmp_path / "pipeline.json")
    LocalEventRecorder(log).record("inference", {"price": 85})
    entry = log.entries()[0]
    assert entry["event"] == "inference"
    assert entry["payload"] == {"price": 85}


def test_local_recorder_swallows_write_errors(tmp_path):
    """Directory as log path: append fails, record() doesn't."""
    LocalEventRecorder(TrainLog(tmp_path)).record("inference", {})


def test_null_recorder():
    assert NullEventRecorder().record("inference", {"price": 75}) is None


def test_http_recorder_posts_json():
    recorder = HttpEventRecorder("https://example.test/", timeout=2.0)
    assert recorder.url == "https://example.test/train-collect"
    with patch("garagepro.events.urllib.request.urlopen") as urlopen:
        urlopen.return_value.__enter__.return_value = MagicMock()
        recorder.record("inference", {"price": 85})
    req = urlopen.call_args.args[0]
    assert req.full_url == "https://example.test/train-collect"
    assert req.get_method() == "POST"
    assert json.loads(req.data) == {"event": "inference", "payload": {"price": 85}}
    assert urlopen.call_args.kwargs["timeout"] == 2.0


def test_http_recorder_swallows_http_error():
    recorder = HttpEventRecorder("https://example.test")
    error = urllib.error.HTTPError(recorder.url, 500, "Server Error", hdrs=None, fp=None)
    with patch("garagepro.events.urllib.request.urlopen", side_effect=error):
        recorder.record("inference", {})


def test_http_recorder_swallows_network_error():
    recorder = HttpEventRecorder("https://example.test")
    with patch("garagepro.events.urllib.request.urlopen", side_effect=TimeoutError("slow")):
        recorder.record("inference", {})


def test_recorder_selection(monkeypatch):
    monkeypatch.setattr(settings, "BASE_URL", "https://backend.example")
    assert isinstance(get_event_recorder(), HttpEventRecorder)

    monkeypatch.setattr(settings, "BASE_URL", "")
    monkeypatch.setattr(settings, "TRAIN_LOG_ENABLED", True)
    assert isinstance(get_event_recorder(), LocalEventRecorder)

    monkeypatch.setattr(settings, "TRAIN_LOG_ENABLED", False)
    assert isinstance(get_event_recorder(), NullEventRecorder)
