"""Convex hull server with one thread per client that builds graphs point by point."""

from __future__ import annotations

import argparse
import re
import socket
import sys
import threading
from typing import Callable, Hashable

from hullserve.geometry import Point, convex_hull, polygon_area
from hullserve.proactor import DEFAULT_PORT, open_listener, start_proactor
from hullserve.select_server import BUFFER_SIZE

WELCOME = "Welcome to the convex hull server!\n"
ALL_RECEIVED = "All points received. You may now run CH.\n"
UNEXPECTED_POINT = "Unexpected point. Use Newgraph first.\n"
INVALID_INPUT = "Invalid command or point.\n"
NOT_READY = "Not enough points or points still pending. Use Newgraph.\n"

_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT = re.compile(r"\s*([+-]?\d+)")
_BLANKS = " \t\r\n"


def _read_int(text: str) -> int | None:
    """Leading integer of ``text``, or None if it does not start with one."""
    match = _INT.match(text)
    return int(match.group(1)) if match else None


def _read_floats(text: str, count: int) -> tuple[float, ...] | None:
    """Read ``count`` leading numbers; None if fewer can be read."""
    values: list[float] = []
    pos = 0
    while len(values) < count:
        match = _FLOAT.match(text, pos)
        if not match:
            return None
        values.append(float(match.group(1)))
        pos = match.end()
    return tuple(values)


def _split_command(line: str) -> tuple[str, str]:
    fields = line.split(None, 1)
    return fields[0], fields[1] if len(fields) > 1 else ""


def _serve_lines(
    conn: socket.socket,
    handle_line: Callable[[Hashable, str], str | None],
    client: Hashable,
) -> None:
    """Greet ``conn`` and answer each complete line until it closes."""
    pending = b""
    try:
        conn.sendall(WELCOME.encode())
        while True:
            data = conn.recv(BUFFER_SIZE - 1)
            if not data:
                return
            *lines, pending = (pending + data).split(b"\n")
            for raw in lines:
                reply = handle_line(client, raw.decode("utf-8", errors="replace"))
                if reply:
                    conn.sendall(reply.encode())
    except OSError:
        return


class ProactorServer:
    """Shared point graph filled through ``Newgraph n`` and point lines.

    After ``Newgraph n`` a client sends n lines of ``x y``; ``CH`` reports
    the hull area once all announced points have arrived.
    """

    def __init__(self) -> None:
        self.graph: list[Point] = []
        self._remaining: dict[Hashable, int] = {}
        self._lock = threading.Lock()

    def handle_line(self, client: Hashable, line: str) -> str | None:
        """Apply one line from ``client``; return the reply, if any."""
        line = line.strip(_BLANKS)
        if not line:
            return None
        command, rest = _split_command(line)

        with self._lock:
            if command == "Newgraph":
                count = _read_int(rest)
                if count is None:
                    return None
                self.graph.clear()
                self._remaining[client] = count
                return f"Expecting {count} point(s)...\n"

            if command == "CH":
                if self._remaining.get(client, 0) == 0 and self.graph:
                    area = polygon_area(convex_hull(self.graph))
                    return f"Convex Hull Area: {area:g}\n"
                return NOT_READY

            coords = _read_floats(line, 2)
            if coords is None:
                return INVALID_INPUT
            if self._remaining.get(client, 0) <= 0:
                return UNEXPECTED_POINT
            x, y = coords
            self.graph.append(Point(x, y))
            self._remaining[client] -= 1
            reply = f"Added point: ({x:g},{y:g})\n"
            if self._remaining[client] == 0:
                reply += ALL_RECEIVED
            return reply

    def handle_client(self, conn: socket.socket) -> None:
        """Serve one connection until the peer closes it."""
        try:
            _serve_lines(conn, self.handle_line, conn)
        finally:
            with self._lock:
                self._remaining.pop(conn, None)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Proactor-based convex hull server.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        listener = open_listener(args.host, args.port)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"[Server] Listening on port {args.port}...", flush=True)
    with listener:
        proactor = start_proactor(listener, ProactorServer().handle_client)
        try:
            proactor.join()
        except KeyboardInterrupt:
            proactor.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())