import pytest

from eventforge import Event, Listener
from eventforge.testing import EventFactory


def test_event_flags_start_cleared():
    event = Event("ready")
    assert event.id == "ready"
    assert not event.is_propagation_stopped()
    assert not event.is_default_prevented()


def test_event_flags_are_independent_and_sticky():
    event = Event("ready")

    event.prevent_default()
    assert event.is_default_prevented()
    assert not event.is_propagation_stopped()

    event.stop_propagation()
    event.stop_propagation()
    assert event.is_propagation_stopped()
    assert event.is_default_prevented()


def test_event_id_is_read_only():
    event = Event("ready")
    with pytest.raises(AttributeError):
        event.id = "other"


def test_factory_builds_distinct_events():
    factory = EventFactory()
    first, second = factory.build(), factory.build()
    assert first.id != second.id
    assert factory.build("fixed").id == "fixed"


def test_listener_spreads_arguments_after_event():
    event = Event("calc")
    listener = Listener("calc", lambda e, a, b: (e.id, a * b), priority=2)

    assert listener(event, (3, 4)) == ("calc", 12)


def test_listener_is_immutable():
    listener = Listener("calc", print)
    assert listener.priority == 10
    with pytest.raises(AttributeError):
        listener.priority = 1
