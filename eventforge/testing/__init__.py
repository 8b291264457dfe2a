"""Testing utilities for EventForge."""

from .factory import EventFactory
from .fixtures import dispatcher, dispatcher_fixture
from .recorder import CallRecorder, RecordedCall

__all__ = [
    "EventFactory",
    "dispatcher",
    "dispatcher_fixture",
    "CallRecorder",
    "RecordedCall",
]
