"""Synchronous priority-ordered event dispatcher."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock
from typing import Any, Dict, Iterable, Sequence

from .config import DispatcherConfig, SortOrder
from .domain.events import Event, EventReference, event_id_of
from .domain.listeners import Listener, ListenerCallback
from .registry import ListenerRegistry

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CompletedEvent:
    event: Event
    result: list[Any]


class Dispatcher:
    """Bind listeners to event names and trigger them in priority order.

    Listeners are called as ``callback(event, *args)``. Each trigger sorts
    its listeners with a stable sort, so equal priorities run in the order
    they were registered. After every call the dispatcher checks the event:
    once propagation is stopped no further listener runs. The last finished
    trigger of every name is kept and can be read back with :meth:`event`
    and :meth:`result`.

    Exceptions raised by listeners are not caught. They abort the trigger
    and nothing is recorded for it.
    """

    def __init__(self, config: DispatcherConfig | None = None) -> None:
        self.config = config or DispatcherConfig()
        self._sort_order = SortOrder.coerce(self.config.sort_order)
        self._stop_on_false = bool(self.config.stop_on_false)
        self._registry = ListenerRegistry()
        self._completed: Dict[str, CompletedEvent] = {}
        self._lock = RLock()

    @property
    def sort_order(self) -> SortOrder:
        return self._sort_order

    @property
    def stop_on_false(self) -> bool:
        return self._stop_on_false

    def set_sort_order(self, order: SortOrder | int) -> "Dispatcher":
        self._sort_order = SortOrder.coerce(order)
        return self

    def set_stop_on_false(self, enabled: bool) -> "Dispatcher":
        self._stop_on_false = bool(enabled)
        return self

    # Registration

    def on(
        self, event: EventReference, callback: ListenerCallback, priority: int | None = None
    ) -> "Dispatcher":
        event_name = event_id_of(event)
        if priority is None:
            priority = self.config.default_priority
        with self._lock:
            self._registry.add(event_name, callback, priority)
        logger.debug("Registered listener for '%s' with priority %s", event_name, priority)
        return self

    def one(self, event: EventReference, callback: ListenerCallback) -> "Dispatcher":
        """Make ``callback`` the only listener run for ``event``.

        Normal listeners stay registered but are skipped until the one-shot
        binding is removed with :meth:`off`.
        """
        event_name = event_id_of(event)
        with self._lock:
            self._registry.set_one(event_name, callback)
        logger.debug("Registered exclusive listener for '%s'", event_name)
        return self

    def off(
        self, event: EventReference, callback: ListenerCallback | None = None
    ) -> "Dispatcher":
        event_name = event_id_of(event)
        with self._lock:
            removed = self._registry.remove(event_name, callback)
        if removed:
            logger.debug("Removed %d listener(s) from '%s'", removed, event_name)
        return self

    def clear(self) -> None:
        """Remove every listener and forget completed events."""
        with self._lock:
            self._registry.clear()
            self._completed.clear()

    # Triggering

    def trigger(self, event: EventReference, *args: Any) -> list[Any]:
        return self.trigger_array(event, args)

    def trigger_array(self, event: EventReference, args: Iterable[Any] = ()) -> list[Any]:
        prepared = self._prepare(event)
        if prepared is None:
            return []
        resolved, listeners = prepared
        return self._execute(resolved, listeners, tuple(args))

    def _prepare(self, event: EventReference) -> tuple[Event, list[Listener]] | None:
        event_name = event_id_of(event)

        with self._lock:
            bindings = self._registry.resolve(event_name)
        if not bindings:
            logger.debug("Triggered '%s' with no listeners", event_name)
            return None

        if not isinstance(event, Event):
            event = Event(event_name)
        listeners = [Listener(event_name, callback, priority) for callback, priority in bindings]
        return event, listeners

    def _execute(self, event: Event, listeners: list[Listener], args: Sequence[Any]) -> list[Any]:
        result: list[Any] = []
        for listener in self._sorted(listeners):
            value = listener(event, args)
            if self._stop_on_false and value is False:
                event.stop_propagation()
            else:
                result.append(value)
            if event.is_propagation_stopped():
                logger.debug(
                    "Propagation of '%s' stopped by %s", event.id, listener.describe()
                )
                break
        return self._complete(event, result)

    def _sorted(self, listeners: list[Listener]) -> list[Listener]:
        return sorted(
            listeners,
            key=lambda listener: listener.priority,
            reverse=self._sort_order is SortOrder.HIGH_TO_LOW,
        )

    def _complete(self, event: Event, result: list[Any]) -> list[Any]:
        with self._lock:
            self._completed[event.id] = CompletedEvent(event=event, result=result)
        logger.debug("Completed '%s' with %d result(s)", event.id, len(result))
        return result

    # Completed events

    def did(self, event_name: str) -> bool:
        return event_name in self._completed

    def completed(self, event_name: str) -> CompletedEvent | None:
        return self._completed.get(event_name)

    def event(self, event_name: str) -> Event | None:
        entry = self._completed.get(event_name)
        return entry.event if entry else None

    def result(self, event_name: str) -> list[Any] | None:
        entry = self._completed.get(event_name)
        return entry.result if entry else None

    def completed_names(self) -> list[str]:
        return list(self._completed)

    # Introspection

    def listeners(self, event_name: str) -> tuple[Listener, ...]:
        """Return the listeners a trigger would run, in execution order."""
        with self._lock:
            bindings = self._registry.resolve(event_name)
        listeners = [Listener(event_name, callback, priority) for callback, priority in bindings]
        return tuple(self._sorted(listeners))

    def has_listeners(self, event_name: str) -> bool:
        return self._registry.has(event_name)

    def event_names(self) -> list[str]:
        with self._lock:
            return self._registry.names()

    @property
    def registry(self) -> ListenerRegistry:
        return self._registry


__all__ = ["CompletedEvent", "Dispatcher"]
