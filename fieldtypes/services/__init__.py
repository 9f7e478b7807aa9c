"""Stateful services built on the field data types."""

from fieldtypes.services.event_logger import EventLogger, EventRecord

__all__ = ["EventLogger", "EventRecord"]
