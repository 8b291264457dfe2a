"""Exceptions raised by the EventForge dispatcher."""

from __future__ import annotations

from typing import Any


class EventForgeError(RuntimeError):
    """Base class for dispatcher exceptions."""


class InvalidEventReference(EventForgeError, TypeError):
    """Raised when an event is neither a name nor an Event instance."""

    def __init__(self, reference: Any) -> None:
        super().__init__(
            f"Event must be string or instance of Event - {type(reference).__name__} given."
        )
        self.reference = reference


class InvalidSortOrder(EventForgeError, ValueError):
    """Raised when an unknown listener sort order is requested."""

    def __init__(self, order: Any) -> None:
        super().__init__(f"Invalid sort order {order!r}.")
        self.order = order


class ConfigurationError(EventForgeError, ValueError):
    """Raised when dispatcher settings cannot be parsed."""
