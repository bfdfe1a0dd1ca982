import pytest

from dissent.handler import Handler, MainThreadHandler


class Event:
    pass


class MessageEvent(Event):
    def __init__(self, text):
        self.text = text


class TypingEvent(Event):
    pass


def test_dispatch_matches_type():
    h = Handler()
    seen = []
    h.add_handler(MessageEvent, lambda ev: seen.append(ev.text))
    h.add_handler(TypingEvent, lambda ev: seen.append("typing"))
    h.dispatch(MessageEvent("hi"))
    assert seen == ["hi"]


def test_base_type_receives_subclasses():
    h = Handler()
    seen = []
    h.add_handler(Event, seen.append)
    ev = TypingEvent()
    h.dispatch(ev)
    assert seen == [ev]


def test_callers_in_registration_order():
    h = Handler()
    first = lambda ev: None  # noqa: E731
    second = lambda ev: None  # noqa: E731
    h.add_handler(Event, first)
    h.add_handler(MessageEvent, second)
    assert h.callers_for(MessageEvent("x")) == [first, second]
    assert h.callers_for(TypingEvent()) == [first]


def test_remove_handler_is_idempotent():
    h = Handler()
    seen = []
    remove = h.add_handler(Event, seen.append)
    remove()
    remove()
    h.dispatch(Event())
    assert seen == []


def test_add_handler_rejects_bad_arguments():
    h = Handler()
    with pytest.raises(TypeError):
        h.add_handler("not a type", print)
    with pytest.raises(TypeError):
        h.add_handler(Event, 42)


def test_main_thread_handler_defers_to_scheduler():
    source = Handler()
    jobs = []
    m = MainThreadHandler(source, jobs.append)
    seen = []
    m.add_handler(MessageEvent, lambda ev: seen.append(ev.text))
    source.dispatch(MessageEvent("hello"))
    assert seen == []
    assert len(jobs) == 1
    jobs.pop()()
    assert seen == ["hello"]


def test_main_thread_handler_schedules_nothing_without_callers():
    source = Handler()
    jobs = []
    m = MainThreadHandler(source, jobs.append)
    m.add_handler(TypingEvent, lambda ev: None)
    source.dispatch(MessageEvent("ignored"))
    assert jobs == []


def test_main_thread_handler_snapshot_at_dispatch():
    source = Handler()
    jobs = []
    m = MainThreadHandler(source, jobs.append)
    seen = []
    remove = m.add_handler(Event, seen.append)
    ev = Event()
    source.dispatch(ev)
    remove()
    jobs.pop()()
    assert seen == [ev]
    source.dispatch(Event())
    assert jobs == []


def test_main_thread_handler_default_runs_immediately():
    source = Handler()
    m = MainThreadHandler(source)
    seen = []
    m.add_sync_handler(MessageEvent, lambda ev: seen.append(ev.text))
    source.dispatch(MessageEvent("now"))
    assert seen == ["now"]


def test_add_sync_handler_removal():
    source = Handler()
    m = MainThreadHandler(source)
    seen = []
    remove = m.add_sync_handler(Event, seen.append)
    remove()
    source.dispatch(Event())
    assert seen == []