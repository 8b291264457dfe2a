"""Storage for raw listener bindings keyed by event name."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator

from .domain.listeners import ONE_SHOT_PRIORITY, ListenerCallback


RawBinding = tuple[ListenerCallback, int]


@dataclass(slots=True)
class _Bindings:
    normal: list[RawBinding] = field(default_factory=list)
    one: RawBinding | None = None

    def __bool__(self) -> bool:
        return bool(self.normal) or self.one is not None


class ListenerRegistry:
    """Keep ``(callback, priority)`` pairs per event name.

    Listener objects are not built here; the dispatcher wraps the raw pairs
    when an event is actually triggered. A one-shot binding, when present,
    is the only binding returned for its name.
    """

    def __init__(self) -> None:
        self._bindings: Dict[str, _Bindings] = {}

    def add(self, event_name: str, callback: ListenerCallback, priority: int) -> None:
        self._bindings.setdefault(event_name, _Bindings()).normal.append((callback, priority))

    def set_one(self, event_name: str, callback: ListenerCallback) -> None:
        self._bindings.setdefault(event_name, _Bindings()).one = (callback, ONE_SHOT_PRIORITY)

    def remove(self, event_name: str, callback: ListenerCallback | None = None) -> int:
        """Remove bindings and return how many were dropped."""
        bindings = self._bindings.get(event_name)
        if not bindings:
            return 0
        if callback is None:
            del self._bindings[event_name]
            return len(bindings.normal) + (bindings.one is not None)

        kept = [binding for binding in bindings.normal if binding[0] != callback]
        removed = len(bindings.normal) - len(kept)
        bindings.normal = kept
        if bindings.one is not None and bindings.one[0] == callback:
            bindings.one = None
            removed += 1
        if not bindings:
            del self._bindings[event_name]
        return removed

    def resolve(self, event_name: str) -> tuple[RawBinding, ...]:
        """Return the bindings a trigger of ``event_name`` should run."""
        bindings = self._bindings.get(event_name)
        if not bindings:
            return ()
        if bindings.one is not None:
            return (bindings.one,)
        return tuple(bindings.normal)

    def normal(self, event_name: str) -> tuple[RawBinding, ...]:
        bindings = self._bindings.get(event_name)
        return tuple(bindings.normal) if bindings else ()

    def one(self, event_name: str) -> RawBinding | None:
        bindings = self._bindings.get(event_name)
        return bindings.one if bindings else None

    def has(self, event_name: str) -> bool:
        return bool(self._bindings.get(event_name))

    def names(self) -> list[str]:
        return [name for name, bindings in self._bindings.items() if bindings]

    def clear(self) -> None:
        self._bindings.clear()

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self.names())


__all__ = ["ListenerRegistry", "RawBinding"]
