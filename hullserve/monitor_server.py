"""Graph server that reports when the hull area crosses a threshold."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import Callable

from hullserve.graph_server import GraphServer, _serve
from hullserve.proactor import DEFAULT_PORT

AREA_THRESHOLD = 100.0
ABOVE_MESSAGE = "At Least 100 units belongs to CH"
BELOW_MESSAGE = "At Least 100 units no longer belongs to CH"


def _announce(message: str) -> None:
    print(message, flush=True)


class AreaMonitor:
    """Watches reported hull areas and announces threshold crossings.

    Only the latest area reported before the monitor wakes is examined.
    """

    def __init__(
        self,
        threshold: float = AREA_THRESHOLD,
        notify: Callable[[str], object] | None = None,
    ) -> None:
        self.threshold = threshold
        self.above = False
        self._notify = notify or _announce
        self._cond = threading.Condition()
        self._pending: float | None = None
        self._stopping = False

    def update(self, area: float) -> None:
        """Report a freshly computed hull area."""
        with self._cond:
            self._pending = area
            self._cond.notify()

    def run(self) -> None:
        """Examine reported areas until stopped and nothing is pending."""
        while True:
            with self._cond:
                self._cond.wait_for(
                    lambda: self._pending is not None or self._stopping
                )
                if self._pending is None:
                    return
                area, self._pending = self._pending, None
            self._check(area)

    def _check(self, area: float) -> None:
        if area >= self.threshold and not self.above:
            self.above = True
            self._notify(ABOVE_MESSAGE)
        elif area < self.threshold and self.above:
            self.above = False
            self._notify(BELOW_MESSAGE)

    def stop(self) -> None:
        """Let :meth:`run` return once pending areas are handled."""
        with self._cond:
            self._stopping = True
            self._cond.notify_all()


class MonitorServer(GraphServer):
    """Graph server that reports every ``CH`` area to an :class:`AreaMonitor`."""

    def __init__(self, monitor: AreaMonitor | None = None) -> None:
        super().__init__()
        self.monitor = monitor or AreaMonitor()

    def _hull_area(self) -> float:
        area = super()._hull_area()
        self.monitor.update(area)
        return area

    def handle_line(self, client, line):
        """Process one line from ``client``; ``CH`` areas reach the monitor."""
        return super().handle_line(client, line)

    def disconnect(self, client):
        """Forget the per-client state of ``client``."""
        return super().disconnect(client)

    def handle_client(self, conn):
        """Serve one connection until the peer closes it."""
        return super().handle_client(conn)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Convex hull server with area monitor.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    server = MonitorServer()
    threading.Thread(target=server.monitor.run, name="area-monitor", daemon=True).start()
    try:
        return _serve(server, args.host, args.port)
    finally:
        server.monitor.stop()


if __name__ == "__main__":
    sys.exit(main())