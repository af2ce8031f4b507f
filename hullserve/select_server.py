"""Single-threaded convex hull server multiplexing clients with select."""

from __future__ import annotations

import argparse
import select
import socket
import sys
from typing import Callable, Hashable

from hullserve.geometry import Point
from hullserve.hull_cli import _area_text
from hullserve.interactive import _leading_int, _lenient_point
from hullserve.proactor import DEFAULT_PORT, open_listener

BUFFER_SIZE = 1024

_BLANKS = " \t\r\n"


class SelectServer:
    """Shared point graph edited by text commands from many clients.

    Commands are ``Newgraph n`` (after which that client's next n lines
    are points), ``Newpoint x,y``, ``Removepoint x,y`` and ``CH``.
    """

    def __init__(self, poll_interval: float = 0.5) -> None:
        self.graph: list[Point] = []
        self._remaining: dict[Hashable, int] = {}
        self._poll_interval = poll_interval

    def handle_line(self, client: Hashable, line: str) -> str | None:
        """Apply one command line from ``client``; return the reply, if any."""
        line = line.strip(_BLANKS)
        if not line:
            return None

        if self._remaining.get(client, 0) > 0:
            self.graph.append(_lenient_point(line))
            self._remaining[client] -= 1
            return None

        command, _, rest = line.partition(" ")

        if command == "Newgraph":
            count = _leading_int(rest)
            self.graph.clear()
            self._remaining[client] = count
            return f"Expecting {count} point(s)...\n"
        if command == "Newpoint":
            self.graph.append(_lenient_point(rest))
            return None
        if command == "Removepoint":
            target = _lenient_point(rest)
            if target in self.graph:
                self.graph.remove(target)
            return None
        if command == "CH":
            return _area_text(self.graph) + "\n"
        return "Unknown command\n"

    def disconnect(self, client: Hashable) -> None:
        """Forget any pending point input of ``client``."""
        self._remaining.pop(client, None)

    def serve_forever(self, listener: socket.socket) -> None:
        """Serve clients on ``listener`` until the listener is closed."""
        clients: list[socket.socket] = []
        try:
            while listener.fileno() != -1:
                try:
                    ready, _, _ = select.select(
                        [listener, *clients], [], [], self._poll_interval
                    )
                except (OSError, ValueError):
                    continue
                for sock in ready:
                    if sock is listener:
                        self._accept(listener, clients)
                    else:
                        self._receive(sock, clients)
        finally:
            for conn in clients:
                conn.close()

    def _answer(self, conn: socket.socket, data: bytes) -> None:
        """Handle every line in ``data`` and send the replies to ``conn``."""
        for line in data.decode("utf-8", errors="replace").split("\n"):
            reply = self.handle_line(conn, line)
            if reply is not None:
                conn.sendall(reply.encode())

    def _accept(self, listener: socket.socket, clients: list[socket.socket]) -> None:
        try:
            conn, _ = listener.accept()
        except OSError as exc:
            print(f"accept: {exc}", file=sys.stderr)
            return
        clients.append(conn)
        print(f"New connection on socket {conn.fileno()}", flush=True)

    def _receive(self, conn: socket.socket, clients: list[socket.socket]) -> None:
        fd = conn.fileno()
        try:
            data = conn.recv(BUFFER_SIZE - 1)
        except OSError as exc:
            print(f"recv: {exc}", file=sys.stderr)
        else:
            if not data:
                print(f"Socket {fd} disconnected", flush=True)
            else:
                try:
                    self._answer(conn, data)
                    return
                except OSError:
                    pass
        self._drop(conn, clients)

    def _drop(self, conn: socket.socket, clients: list[socket.socket]) -> None:
        conn.close()
        clients.remove(conn)
        self.disconnect(conn)


def _serve_main(
    argv: list[str] | None,
    description: str,
    banner: str,
    serve: Callable[[socket.socket], None],
) -> int:
    """Parse host and port, open the listener and run ``serve`` on it."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        listener = open_listener(args.host, args.port)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(banner.format(port=args.port), flush=True)
    with listener:
        try:
            serve(listener)
        except KeyboardInterrupt:
            pass
    return 0


def main(argv: list[str] | None = None) -> int:
    return _serve_main(
        argv,
        "Select-based convex hull server.",
        "Server listening on port {port}...",
        SelectServer().serve_forever,
    )


if __name__ == "__main__":
    sys.exit(main())