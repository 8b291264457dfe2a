"""Listener bindings materialized at trigger time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from .events import Event


ListenerCallback = Callable[..., Any]

DEFAULT_PRIORITY = 10
ONE_SHOT_PRIORITY = 1


@dataclass(frozen=True, slots=True)
class Listener:
    event_name: str
    callback: ListenerCallback
    priority: int = DEFAULT_PRIORITY

    def __call__(self, event: Event, args: Sequence[Any] = ()) -> Any:
        return self.callback(event, *args)

    def describe(self) -> str:
        callback = self.callback
        name = getattr(callback, "__qualname__", None) or type(callback).__name__
        module = getattr(callback, "__module__", None)
        return f"{module}.{name}" if module else name


__all__ = ["DEFAULT_PRIORITY", "ONE_SHOT_PRIORITY", "Listener", "ListenerCallback"]
