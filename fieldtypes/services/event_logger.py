"""Event logger — in-memory, append-only record of labeled timestamps."""

import threading
from typing import Any

import structlog
from pydantic import BaseModel

from fieldtypes.validators.models import Result
from fieldtypes.validators.stamp import stamp_validator
from fieldtypes.validators.text import short_text_validator

logger = structlog.get_logger()


class EventRecord(BaseModel):
    """A labeled moment. Never modified after it is appended."""

    label: str
    timestamp: int  # epoch milliseconds

    model_config = {"frozen": True}


class EventLogger:
    """Records when labeled events happened and how long ago.

    Labels are validated as ShortText before they are stored. Records live as
    long as the logger instance; there is no deletion or capacity bound.
    A single lock serialises appends and reads across threads.
    """

    def __init__(self):
        self._events: list[EventRecord] = []
        self._lock = threading.Lock()

    def new(self, label: Any) -> Result:
        """Record an event stamped with the current time.

        Returns:
            Result carrying the stored EventRecord, or the label's validation errors
        """
        validation = short_text_validator.test(label)
        if not validation.valid:
            logger.info("event_rejected", errors=validation.errors)
            return Result.failure(validation.errors)

        record = EventRecord(label=validation.sanitised, timestamp=stamp_validator.now())
        with self._lock:
            self._events.append(record)
            total = len(self._events)

        if structlog.is_configured():
            logger.debug("event_recorded", label=record.label, timestamp=record.timestamp, total_events=total)
        return Result.success(record)

    def find(self, label: str) -> list[int]:
        """Timestamps of every event with exactly this label, oldest first."""
        return [record.timestamp for record in self._matching(label)]

    def age(self, label: str) -> list[int]:
        """Milliseconds elapsed since each event with this label, oldest first."""
        now = stamp_validator.now()
        return [now - record.timestamp for record in self._matching(label)]

    @property
    def records(self) -> tuple[EventRecord, ...]:
        """Snapshot of all records in insertion order."""
        with self._lock:
            return tuple(self._events)

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def _matching(self, label: str) -> list[EventRecord]:
        with self._lock:
            return [record for record in self._events if record.label == label]
