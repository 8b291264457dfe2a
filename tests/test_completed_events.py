from eventforge import CompletedEvent, Event
from eventforge.testing import EventFactory


def test_trigger_without_listeners_has_no_side_effects(dispatcher):
    name = EventFactory().name()

    assert dispatcher.trigger(name, 1, 2) == []
    assert dispatcher.did(name) is False
    assert dispatcher.event(name) is None
    assert dispatcher.result(name) is None
    assert dispatcher.completed_names() == []


def test_trigger_event_object_without_listeners_is_not_completed(dispatcher):
    event = Event("orphan")
    assert dispatcher.trigger(event) == []
    assert not dispatcher.did("orphan")


def test_completed_event_and_result_are_cached(dispatcher):
    dispatcher.on("build", lambda event: "done")

    result = dispatcher.trigger("build")

    assert dispatcher.did("build")
    assert dispatcher.result("build") is result
    assert dispatcher.event("build").id == "build"
    entry = dispatcher.completed("build")
    assert isinstance(entry, CompletedEvent)
    assert entry.event is dispatcher.event("build")


def test_supplied_event_object_is_cached(dispatcher):
    event = Event("deploy")
    dispatcher.on("deploy", lambda e: e is event)

    assert dispatcher.trigger(event) == [True]
    assert dispatcher.event("deploy") is event


def test_only_most_recent_completion_is_kept(dispatcher):
    counter = iter(range(10))
    dispatcher.on("poll", lambda event: next(counter))

    first = dispatcher.trigger("poll")
    first_event = dispatcher.event("poll")
    second = dispatcher.trigger("poll")

    assert first == [0]
    assert second == [1]
    assert dispatcher.result("poll") is second
    assert dispatcher.event("poll") is not first_event


def test_empty_trigger_keeps_previous_completion(dispatcher):
    callback = lambda event: "ran"  # noqa: E731
    dispatcher.on("job", callback)
    result = dispatcher.trigger("job")
    dispatcher.off("job", callback)

    assert dispatcher.trigger("job") == []
    assert dispatcher.result("job") is result


def test_stopped_trigger_is_still_completed(dispatcher):
    dispatcher.on("halt", lambda event: event.stop_propagation() or "stopped")
    dispatcher.on("halt", lambda event: "never")

    assert dispatcher.trigger("halt") == ["stopped"]
    assert dispatcher.did("halt")
    assert dispatcher.result("halt") == ["stopped"]


def test_completions_are_tracked_per_name(dispatcher):
    factory = EventFactory()
    names = list(factory.names(3))
    for name in names:
        dispatcher.on(name, lambda event: event.id)

    dispatcher.trigger(names[0])
    dispatcher.trigger(names[2])

    assert dispatcher.did(names[0])
    assert not dispatcher.did(names[1])
    assert dispatcher.result(names[2]) == [names[2]]
    assert sorted(dispatcher.completed_names()) == sorted([names[0], names[2]])
