"""
Event recorders: where /inference sends a copy of each estimate.

Recording is fire-and-forget: a failure is logged and dropped, it never
reaches the caller.
"""

import json
import logging
import urllib.error
import urllib.request
from abc import ABC, abstractmethod

from .config import settings
from .training_log import TrainLog, get_train_log

logger = logging.getLogger(__name__)


class EventRecorder(ABC):

    @abstractmethod
    def record(self, event: str, payload: dict) -> None:
        pass


class NullEventRecorder(EventRecorder):

    def record(self, event: str, payload: dict) -> None:
        return None


class LocalEventRecorder(EventRecorder):
    """Writes events straight into the train log on this host."""

    def __init__(self, train_log: TrainLog):
        self.train_log = train_log

    def record(self, event: str, payload: dict) -> None:
        try:
            self.train_log.append({"event": event, "payload": payload})
        except Exception as e:
            logger.warning("Local event record failed for %s: %s", event, e)


class HttpEventRecorder(EventRecorder):
    """POSTs events to a /train-collect endpoint, usually another instance of this app."""

    def __init__(self, base_url: str, timeout: float = 5.0):
        self.url = base_url.rstrip("/") + "/train-collect"
        self.timeout = timeout

    def record(self, event: str, payload: dict) -> None:
        body = json.dumps({"event": event, "payload": payload}).encode("utf-8")
        req = urllib.request.Request(
            self.url,
            data=body,
            headers={"Content-Type": "application/json"},
            method="POST",
        )
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                response.read()
        except urllib.error.HTTPError as e:
            logger.warning("Event %s rejected by %s: HTTP %s", event, self.url, e.code)
        except Exception as e:
            logger.warning("Event %s not delivered to %s: %s", event, self.url, e)


def get_event_recorder() -> EventRecorder:
    """FastAPI dependency: picks the recorder from settings."""
    if settings.BASE_URL:
        return HttpEventRecorder(settings.BASE_URL, timeout=settings.EVENT_TIMEOUT_SECONDS)
    if settings.TRAIN_LOG_ENABLED:
        return LocalEventRecorder(get_train_log())
    return NullEventRecorder()
