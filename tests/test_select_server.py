import socket
import threading

import pytest

from hullserve.geometry import Point
from hullserve.proactor import open_listener
from hullserve.select_server import SelectServer, main


@pytest.fixture
def server():
    return SelectServer(poll_interval=0.05)


def _send(server, *lines, client="a"):
    return [server.handle_line(client, line) for line in lines]


def test_newgraph_reply_and_points_collected(server):
    replies = _send(server, "Newgraph 3", "0,0", "4 0", " 4,4\r\n")
    assert replies == ["Expecting 3 point(s)...\n", None, None, None]
    assert server.graph == [Point(0, 0), Point(4, 0), Point(4, 4)]
    assert _send(server, "1,1") == ["Unknown command\n"]
    assert len(server.graph) == 3


def test_ch_of_square(server):
    replies = _send(server, "Newpoint 0,0", "Newpoint 4,0", "Newpoint 4,4", "Newpoint 0,4", "CH")
    assert replies == [None, None, None, None, "16.000000\n"]


def test_ch_ignores_interior_points(server):
    coords = [(1.5, 2.0), (7.0, -3.0), (4.0, 9.5), (3.0, 3.0), (-2.0, 1.0)]
    _send(server, *(f"Newpoint {x},{y}" for x, y in coords))
    assert _send(server, "CH") == ["50.250000\n"]


def test_ch_of_empty_graph(server):
    assert _send(server, "CH") == ["0.000000\n"]


def test_removepoint_removes_one_match(server):
    _send(server, "Newpoint 1,2", "Newpoint 1,2")
    assert _send(server, "Removepoint 1 2") == [None]
    assert server.graph == [Point(1, 2)]
    _send(server, "Removepoint 5,5")
    assert server.graph == [Point(1, 2)]


def test_newgraph_clears_graph(server):
    _send(server, "Newpoint 1,1")
    _send(server, "Newgraph 1", client="b")
    assert server.graph == []


def test_newgraph_without_number_expects_nothing(server):
    assert _send(server, "Newgraph x", "2,2") == [
        "Expecting 0 point(s)...\n",
        "Unknown command\n",
    ]


def test_blank_and_unknown_lines(server):
    assert _send(server, "  \t\r\n", "Hello") == [None, "Unknown command\n"]
    assert server.graph == []


def test_clients_have_separate_input_state(server):
    _send(server, "Newgraph 1")
    assert _send(server, "3,3", client="b") == ["Unknown command\n"]
    assert _send(server, "3,3") == [None]
    assert server.graph == [Point(3, 3)]


def test_disconnect_drops_pending_input(server):
    _send(server, "Newgraph 2")
    server.disconnect("a")
    assert _send(server, "1,1") == ["Unknown command\n"]
    assert server.graph == []


@pytest.mark.parametrize("line", ["Newpoint 2,5", "Newpoint 2 5", "Newpoint   2 , 5"])
def test_newpoint_formats(server, line):
    _send(server, line)
    assert server.graph == [Point(2, 5)]


def test_serve_forever_over_tcp(server):
    listener = open_listener("127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, args=(listener,), daemon=True)
    thread.start()
    try:
        with socket.create_connection(listener.getsockname(), timeout=5) as client:
            with client.makefile("rb") as reader:
                client.sendall(b"Newgraph 3\n")
                assert reader.readline() == b"Expecting 3 point(s)...\n"
                client.sendall(b"0,0\n4,0\n0,4\nCH\n")
                assert reader.readline() == b"8.000000\n"
    finally:
        listener.close()
    thread.join(5)
    assert not thread.is_alive()


def test_main_reports_busy_port(capsys):
    with socket.socket() as blocker:
        blocker.bind(("127.0.0.1", 0))
        blocker.listen()
        port = blocker.getsockname()[1]
        assert main(["--host", "127.0.0.1", "--port", str(port)]) == 2
    assert "error" in capsys.readouterr().err