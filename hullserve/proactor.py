"""Accept connections on a background thread, one thread per client."""

from __future__ import annotations

import select
import socket
import sys
import threading
from typing import Callable

ClientHandler = Callable[[socket.socket], object]

DEFAULT_PORT = 9034


class Proactor:
    """Accept loop that hands every new connection to ``handler``.

    Each client runs in its own daemon thread; the connection is closed
    once the handler returns.
    """

    def __init__(
        self,
        sock: socket.socket,
        handler: ClientHandler,
        poll_interval: float = 0.2,
    ) -> None:
        self._sock = sock
        self._handler = handler
        self._poll_interval = poll_interval
        self._stopping = threading.Event()
        self._thread = threading.Thread(
            target=self._accept_loop, name="proactor", daemon=True
        )

    def _start(self) -> "Proactor":
        self._thread.start()
        return self

    def _accept_loop(self) -> None:
        while not self._stopping.is_set():
            try:
                ready, _, _ = select.select([self._sock], [], [], self._poll_interval)
            except (OSError, ValueError):
                break
            if not ready:
                continue
            try:
                conn, _ = self._sock.accept()
            except OSError:
                print("Accept failed", file=sys.stderr)
                continue
            threading.Thread(target=self._serve, args=(conn,), daemon=True).start()

    def _serve(self, conn: socket.socket) -> None:
        with conn:
            self._handler(conn)

    def stop(self) -> None:
        """Stop accepting new connections; running clients continue."""
        self._stopping.set()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the accept loop to end; True if it has."""
        self._thread.join(timeout)
        return not self._thread.is_alive()


def start_proactor(sock: socket.socket, handler: ClientHandler) -> Proactor:
    """Start accepting on ``sock`` and return the running proactor."""
    return Proactor(sock, handler)._start()


def open_listener(host: str = "", port: int = DEFAULT_PORT) -> socket.socket:
    """Create a listening TCP socket with address reuse enabled."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(10)
    except OSError:
        sock.close()
        raise
    return sock