import io

from hullserve.geometry import Point, convex_hull, format_area, polygon_area
from hullserve.interactive import InteractiveSession, main

UNIT_SQUARE = ["Newgraph 4", "0,0", "0,1", "1,1", "1,0"]


def _run(lines):
    session = InteractiveSession()
    return session, list(session.run(lines))


def test_newgraph_then_ch():
    session, out = _run(UNIT_SQUARE + ["CH"])
    assert out == ["1.000000"]
    assert session.points == [Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0)]


def test_empty_graph_area():
    _, out = _run(["CH"])
    assert out == ["0.000000"]


def test_newpoint_extends_graph():
    session, out = _run(UNIT_SQUARE + ["Newpoint 2,2", "CH"])
    assert Point(2, 2) in session.points
    assert out == [format_area(polygon_area(convex_hull(session.points)))]


def test_removepoint_then_readd_restores_area():
    lines = UNIT_SQUARE + ["CH", "Removepoint 1,1", "CH", "Newpoint 1,1", "CH"]
    _, out = _run(lines)
    assert out[0] == out[2]
    assert out[1] != out[0]


def test_removing_missing_point_changes_nothing():
    session, out = _run(UNIT_SQUARE + ["CH", "Removepoint 9,9", "CH"])
    assert out[0] == out[1]
    assert len(session.points) == 4


def test_newgraph_replaces_points_and_accepts_spaces():
    session, _ = _run(UNIT_SQUARE + ["Newgraph 2", "1 2", "3,4"])
    assert session.points == [Point(1, 2), Point(3, 4)]


def test_unknown_commands_produce_nothing():
    session, out = _run(["hello", "", "ch"])
    assert out == []
    assert session.points == []


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(UNIT_SQUARE + ["CH"]) + "\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "1.000000\n"