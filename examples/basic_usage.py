"""Wire a few listeners, trigger events and inspect what happened."""

from __future__ import annotations

import logging

from eventforge import Dispatcher, DispatcherConfig, Event
from eventforge.diagnostics import render_listeners, run_checklist


class PriceEvent(Event):
    """Filter-style event whose value is adjusted by each listener."""

    def __init__(self, event_id: str, value: float) -> None:
        super().__init__(event_id)
        self.value = value


def apply_discount(event: PriceEvent, percent: int) -> float:
    event.value *= (100 - percent) / 100
    return event.value


def add_tax(event: PriceEvent, _percent: int) -> float:
    event.value *= 1.2
    return event.value


def block_free_orders(event: PriceEvent, _percent: int) -> bool:
    if event.value <= 0:
        event.prevent_default()
        return False
    return True


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    dispatcher = Dispatcher(DispatcherConfig.from_env()).set_stop_on_false(True)

    dispatcher.on("price.calculate", add_tax, 20)
    dispatcher.on("price.calculate", apply_discount, 5)
    dispatcher.on("price.calculate", block_free_orders, 30)

    results = dispatcher.trigger(PriceEvent("price.calculate", 100.0), 10)
    print(f"Listener results: {results}")
    print(f"Final price: {dispatcher.event('price.calculate').value:.2f}")

    dispatcher.one("shutdown", lambda event: "only me")
    dispatcher.on("shutdown", lambda event: "never called")
    print(dispatcher.trigger("shutdown"))

    render_listeners(dispatcher)
    for issue in run_checklist(dispatcher):
        print(f"[{issue.severity.upper()}] {issue.message}")


if __name__ == "__main__":
    main()
