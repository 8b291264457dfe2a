"""Domain models shared by the dispatcher."""

from .events import Event, EventReference, event_id_of
from .listeners import DEFAULT_PRIORITY, ONE_SHOT_PRIORITY, Listener, ListenerCallback
from .exceptions import (
    ConfigurationError,
    EventForgeError,
    InvalidEventReference,
    InvalidSortOrder,
)

__all__ = [
    "Event",
    "EventReference",
    "event_id_of",
    "DEFAULT_PRIORITY",
    "ONE_SHOT_PRIORITY",
    "Listener",
    "ListenerCallback",
    "ConfigurationError",
    "EventForgeError",
    "InvalidEventReference",
    "InvalidSortOrder",
]
