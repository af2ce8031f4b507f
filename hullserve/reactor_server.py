"""Convex hull server driven by the reactor, buffering partial lines."""

from __future__ import annotations

import socket
import sys
from typing import Hashable

from hullserve.reactor import Reactor
from hullserve.select_server import BUFFER_SIZE, SelectServer, _serve_main


class ReactorServer(SelectServer):
    """Hull server whose clients are dispatched by a :class:`Reactor`.

    Input is buffered per client so a command split across reads is
    handled once its line is complete.
    """

    def __init__(self, poll_interval: float = 1.0) -> None:
        super().__init__(poll_interval)
        self._buffers: dict[Hashable, bytes] = {}

    def feed(self, client: Hashable, data: bytes) -> list[str]:
        """Add received bytes and return replies to every complete line."""
        *lines, rest = (self._buffers.get(client, b"") + data).split(b"\n")
        self._buffers[client] = rest
        replies = (
            self.handle_line(client, raw.decode("utf-8", errors="replace"))
            for raw in lines
        )
        return [reply for reply in replies if reply is not None]

    def disconnect(self, client: Hashable) -> None:
        """Forget the pending input and buffered bytes of ``client``."""
        super().disconnect(client)
        self._buffers.pop(client, None)

    def serve(self, listener: socket.socket) -> None:
        """Run the reactor on ``listener``; blocks while serving."""
        reactor = Reactor(self._poll_interval)

        def on_client(conn: socket.socket) -> None:
            try:
                data = conn.recv(BUFFER_SIZE - 1)
                if data:
                    for reply in self.feed(conn, data):
                        conn.sendall(reply.encode())
                    return
            except OSError:
                pass
            reactor.remove_fd(conn)
            conn.close()
            self.disconnect(conn)

        def on_accept(sock: socket.socket) -> None:
            try:
                conn, _ = sock.accept()
            except OSError:
                return
            print(f"New connection: {conn.fileno()}", flush=True)
            reactor.add_fd(conn, on_client)

        reactor.add_fd(listener, on_accept)
        reactor.run()


def main(argv: list[str] | None = None) -> int:
    return _serve_main(
        argv,
        "Reactor-based convex hull server.",
        "Server running on port {port}...",
        ReactorServer().serve,
    )


if __name__ == "__main__":
    sys.exit(main())