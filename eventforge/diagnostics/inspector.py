"""Snapshot and console rendering of a dispatcher's listeners."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table

from ..dispatcher import Dispatcher


def snapshot(dispatcher: Dispatcher) -> dict[str, Any]:
    """Export registered listeners and completed events for debugging."""
    registry = dispatcher.registry
    return {
        "sort_order": dispatcher.sort_order.name.lower(),
        "stop_on_false": dispatcher.stop_on_false,
        "events": {
            name: {
                "exclusive": registry.one(name) is not None,
                "listeners": [
                    {"callback": listener.describe(), "priority": listener.priority}
                    for listener in dispatcher.listeners(name)
                ],
            }
            for name in dispatcher.event_names()
        },
        "completed": {
            name: len(dispatcher.result(name) or ())
            for name in dispatcher.completed_names()
        },
    }


def render_listeners(dispatcher: Dispatcher, console: Console | None = None) -> Table:
    """Print a table of listeners in execution order and return it."""
    console = console or Console()
    table = Table(title=f"Listeners ({dispatcher.sort_order.name.lower()})")
    table.add_column("Event")
    table.add_column("#", justify="right")
    table.add_column("Priority", justify="right")
    table.add_column("Callback")
    table.add_column("Completed")

    for name in dispatcher.event_names():
        exclusive = dispatcher.registry.one(name) is not None
        completed = "yes" if dispatcher.did(name) else ""
        for position, listener in enumerate(dispatcher.listeners(name), start=1):
            label = listener.describe()
            if exclusive:
                label = f"[bold]{label}[/bold] (exclusive)"
            table.add_row(name, str(position), str(listener.priority), label, completed)

    console.print(table)
    return table


__all__ = ["render_listeners", "snapshot"]
