"""Typed event handler registries and main-thread dispatch."""

from __future__ import annotations

import itertools
import threading
from typing import Any, Callable

Callback = Callable[[Any], None]
Scheduler = Callable[[Callable[[], None]], None]


class Handler:
    """A registry of callbacks keyed by event type."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count()
        self._handlers: dict[int, tuple[type, Callback]] = {}

    def add_handler(self, event_type: type, fn: Callback) -> Callable[[], None]:
        """Register fn for events of event_type; return a function removing it."""
        if not isinstance(event_type, type):
            raise TypeError("event_type must be a type")
        if not callable(fn):
            raise TypeError("handler must be callable")

        with self._lock:
            key = next(self._ids)
            self._handlers[key] = (event_type, fn)

        def remove() -> None:
            with self._lock:
                self._handlers.pop(key, None)

        return remove

    def callers_for(self, event: Any) -> list[Callback]:
        """Return the callbacks that accept event, in registration order."""
        with self._lock:
            entries = list(self._handlers.values())
        return [fn for event_type, fn in entries if isinstance(event, event_type)]

    def dispatch(self, event: Any) -> None:
        """Call every callback that accepts event."""
        for fn in self.callers_for(event):
            fn(event)


def _run_now(job: Callable[[], None]) -> None:
    job()


class MainThreadHandler:
    """Forwards events from a source handler through a scheduler.

    The callbacks for an event are chosen when it arrives and then run
    together as one job handed to the scheduler, which is expected to run
    it on the main thread.
    """

    def __init__(self, source: Handler, schedule: Scheduler | None = None) -> None:
        self._handler = Handler()
        self._schedule = schedule or _run_now
        source.add_handler(object, self._forward)

    def _forward(self, event: Any) -> None:
        callers = self._handler.callers_for(event)
        if not callers:
            return

        def run() -> None:
            for fn in callers:
                fn(event)

        self._schedule(run)

    def add_handler(self, event_type: type, fn: Callback) -> Callable[[], None]:
        """Register fn to run on the main thread; return a function removing it."""
        return self._handler.add_handler(event_type, fn)

    def add_sync_handler(self, event_type: type, fn: Callback) -> Callable[[], None]:
        """Same as add_handler."""
        return self.add_handler(event_type, fn)