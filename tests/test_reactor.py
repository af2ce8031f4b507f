import os
import threading
import time
from contextlib import contextmanager

import pytest

from hullserve.reactor import Reactor


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    os.close(read_fd)
    os.close(write_fd)


@contextmanager
def _running(reactor):
    """Run ``reactor`` in a thread for the duration of the block."""
    runner = threading.Thread(target=reactor.run, daemon=True)
    runner.start()
    try:
        yield runner
    finally:
        reactor.stop()
        runner.join(2)
    assert not runner.is_alive()


def _collecting_reactor(fd, received):
    reactor = Reactor(poll_interval=0.05)
    reactor.add_fd(fd, lambda ready: received.append(os.read(ready, 127)))
    return reactor


def test_callback_receives_written_data(pipe):
    read_fd, write_fd = pipe
    received = []
    reactor = _collecting_reactor(read_fd, received)

    writer = threading.Timer(0.1, os.write, args=(write_fd, b"Hello!\n"))
    writer.start()
    with _running(reactor):
        time.sleep(0.5)
    writer.join()

    assert received == [b"Hello!\n"]


def test_duplicate_registration_is_rejected(pipe):
    reactor = Reactor()
    reactor.add_fd(pipe[0], lambda fd: None)
    with pytest.raises(ValueError):
        reactor.add_fd(pipe[0], lambda fd: None)


def test_removing_unknown_descriptor_raises():
    with pytest.raises(KeyError):
        Reactor().remove_fd(42)


def test_removed_descriptor_is_not_dispatched(pipe):
    read_fd, write_fd = pipe
    received = []
    reactor = _collecting_reactor(read_fd, received)
    reactor.remove_fd(read_fd)
    os.write(write_fd, b"ignored\n")

    with _running(reactor):
        time.sleep(0.2)

    assert received == []


def test_stop_ends_idle_loop():
    reactor = Reactor(poll_interval=0.05)
    with _running(reactor) as runner:
        time.sleep(0.1)
        assert runner.is_alive()