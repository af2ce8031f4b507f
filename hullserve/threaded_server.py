"""Convex hull server with one thread per client."""

from __future__ import annotations

import select
import socket
import sys
import threading
from typing import Hashable

from hullserve.select_server import BUFFER_SIZE, SelectServer, _serve_main


class ThreadedServer(SelectServer):
    """Hull server whose shared state is guarded for concurrent clients."""

    def __init__(self, poll_interval: float = 0.5) -> None:
        super().__init__(poll_interval)
        self._lock = threading.Lock()

    def handle_line(self, client: Hashable, line: str) -> str | None:
        """Apply one command line atomically; return the reply, if any."""
        with self._lock:
            return super().handle_line(client, line)

    def disconnect(self, client: Hashable) -> None:
        """Forget any pending point input of ``client``."""
        with self._lock:
            super().disconnect(client)

    def serve_forever(self, listener: socket.socket) -> None:
        """Accept clients until ``listener`` is closed."""
        while listener.fileno() != -1:
            try:
                ready, _, _ = select.select([listener], [], [], self._poll_interval)
                if not ready:
                    continue
                conn, _ = listener.accept()
            except (OSError, ValueError) as exc:
                if listener.fileno() != -1:
                    print(f"accept: {exc}", file=sys.stderr)
                continue
            print(f"New client connected: {conn.fileno()}", flush=True)
            threading.Thread(target=self._serve_client, args=(conn,), daemon=True).start()

    def _serve_client(self, conn: socket.socket) -> None:
        fd = conn.fileno()
        with conn:
            try:
                while data := conn.recv(BUFFER_SIZE - 1):
                    self._answer(conn, data)
            except OSError:
                pass
        print(f"Client on socket {fd} disconnected.", flush=True)
        self.disconnect(conn)


def main(argv: list[str] | None = None) -> int:
    return _serve_main(
        argv,
        "Threaded convex hull server.",
        "Server listening on port {port}...",
        ThreadedServer().serve_forever,
    )


if __name__ == "__main__":
    sys.exit(main())