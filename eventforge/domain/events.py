"""Event objects passed through listener chains."""

from __future__ import annotations

from typing import Union

from .exceptions import InvalidEventReference


class Event:
    """Named event carrying DOM-style cancellation flags.

    The same instance is handed to every listener of a trigger, so subclasses
    may carry state that later listeners observe. Both flags are one-way: once
    set they stay set for the lifetime of the object.
    """

    def __init__(self, event_id: str) -> None:
        self._id = event_id
        self._propagation_stopped = False
        self._default_prevented = False

    @property
    def id(self) -> str:
        return self._id

    def stop_propagation(self) -> None:
        """Prevent listeners after the current one from running."""
        self._propagation_stopped = True

    def is_propagation_stopped(self) -> bool:
        return self._propagation_stopped

    def prevent_default(self) -> None:
        """Flag the event's default action as cancelled."""
        self._default_prevented = True

    def is_default_prevented(self) -> bool:
        return self._default_prevented

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id!r}, "
            f"propagation_stopped={self._propagation_stopped}, "
            f"default_prevented={self._default_prevented})"
        )


EventReference = Union[str, Event]


def event_id_of(reference: object) -> str:
    """Return the event name a reference points at."""
    if isinstance(reference, Event):
        return reference.id
    if isinstance(reference, str):
        return reference
    raise InvalidEventReference(reference)


__all__ = ["Event", "EventReference", "event_id_of"]
