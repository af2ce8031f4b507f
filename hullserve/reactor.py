"""A select-based reactor dispatching readable descriptors to handlers."""

from __future__ import annotations

import select
import threading
import time
from typing import Any, Callable

Handler = Callable[[Any], object]


class Reactor:
    """Calls each registered handler when its descriptor becomes readable.

    Descriptors may be integers or objects with a ``fileno`` method; the
    handler receives the descriptor it was registered with.
    """

    def __init__(self, poll_interval: float = 1.0) -> None:
        self._handlers: dict[Any, Handler] = {}
        self._lock = threading.Lock()
        self._running = False
        self._poll_interval = poll_interval

    def add_fd(self, fd: Any, handler: Handler) -> None:
        """Register ``handler`` for ``fd``; ValueError if already registered."""
        with self._lock:
            if fd in self._handlers:
                raise ValueError(f"descriptor {fd!r} is already registered")
            self._handlers[fd] = handler

    def remove_fd(self, fd: Any) -> None:
        """Stop watching ``fd``; KeyError if it is not registered."""
        with self._lock:
            try:
                del self._handlers[fd]
            except KeyError:
                raise KeyError(f"descriptor {fd!r} is not registered") from None

    def run(self) -> None:
        """Dispatch events until :meth:`stop` is called."""
        self._running = True
        while self._running:
            with self._lock:
                watched = list(self._handlers)
            if not watched:
                time.sleep(self._poll_interval)
                continue
            try:
                ready, _, _ = select.select(watched, [], [], self._poll_interval)
            except (OSError, ValueError):
                continue
            for fd in ready:
                with self._lock:
                    handler = self._handlers.get(fd)
                if handler is not None:
                    handler(fd)

    def stop(self) -> None:
        """Ask the loop to finish after its current wait."""
        self._running = False