"""Convex hull server editing a shared graph, one thread per client."""

from __future__ import annotations

import argparse
import socket
import sys
import threading
from typing import Hashable

from hullserve.geometry import Point, convex_hull, format_area, polygon_area
from hullserve.proactor import DEFAULT_PORT, open_listener, start_proactor
from hullserve.proactor_server import (
    UNEXPECTED_POINT,
    _BLANKS,
    _read_floats,
    _read_int,
    _serve_lines,
    _split_command,
)

INVALID_COMMAND = "Invalid command.\n"


class GraphServer:
    """Shared point graph edited by ``Newgraph``, ``Newpoint``,
    ``Removepoint`` and ``CH``; after ``Newgraph n`` a client may send
    n point lines of ``x,y`` or ``x y``.
    """

    def __init__(self) -> None:
        self.graph: list[Point] = []
        self._remaining: dict[Hashable, int] = {}
        self._lock = threading.Lock()

    def _hull_area(self) -> float:
        with self._lock:
            snapshot = list(self.graph)
        return polygon_area(convex_hull(snapshot))

    def handle_line(self, client: Hashable, line: str) -> str | None:
        """Apply one line from ``client``; return the reply, if any."""
        line = line.strip(_BLANKS)
        if not line:
            return None
        command, rest = _split_command(line)

        if command == "Newgraph":
            count = _read_int(rest)
            if count is None:
                return None
            with self._lock:
                self.graph.clear()
                self._remaining[client] = count
            return f"Expecting {count} point(s)...\n"

        if command == "Newpoint":
            coords = _read_floats(rest, 2)
            if coords is not None:
                with self._lock:
                    self.graph.append(Point(*coords))
            return None

        if command == "Removepoint":
            coords = _read_floats(rest, 2)
            if coords is not None:
                with self._lock:
                    try:
                        self.graph.remove(Point(*coords))
                    except ValueError:
                        pass
            return None

        if command == "CH":
            return format_area(self._hull_area()) + "\n"

        coords = _read_floats(line.replace(",", " "), 2)
        if coords is None:
            return INVALID_COMMAND
        with self._lock:
            if self._remaining.get(client, 0) <= 0:
                return UNEXPECTED_POINT
            self.graph.append(Point(*coords))
            self._remaining[client] -= 1
        x, y = coords
        return f"Added point: ({x:g},{y:g})\n"

    def disconnect(self, client: Hashable) -> None:
        """Forget any pending point input of ``client``."""
        with self._lock:
            self._remaining.pop(client, None)

    def handle_client(self, conn: socket.socket) -> None:
        """Serve one connection until the peer closes it."""
        try:
            _serve_lines(conn, self.handle_line, conn)
        finally:
            self.disconnect(conn)


def _serve(server: GraphServer, host: str, port: int) -> int:
    try:
        listener = open_listener(host, port)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(f"Server listening on port {port}...", flush=True)
    with listener:
        proactor = start_proactor(listener, server.handle_client)
        try:
            proactor.join()
        except KeyboardInterrupt:
            proactor.stop()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Threaded convex hull graph server.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    return _serve(GraphServer(), args.host, args.port)


if __name__ == "__main__":
    sys.exit(main())