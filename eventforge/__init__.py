"""EventForge public API."""

from .config import DispatcherConfig, SortOrder
from .dispatcher import CompletedEvent, Dispatcher
from .domain.events import Event
from .domain.exceptions import (
    ConfigurationError,
    EventForgeError,
    InvalidEventReference,
    InvalidSortOrder,
)
from .domain.listeners import Listener

__all__ = [
    "CompletedEvent",
    "ConfigurationError",
    "Dispatcher",
    "DispatcherConfig",
    "Event",
    "EventForgeError",
    "InvalidEventReference",
    "InvalidSortOrder",
    "Listener",
    "SortOrder",
]
