"""Line-oriented interactive convex hull session."""

from __future__ import annotations

import argparse
import itertools
import re
import sys
from typing import Iterable, Iterator

from hullserve.geometry import Point
from hullserve.hull_cli import _area_text

_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT = re.compile(r"\s*([+-]?\d+)")


def _scan_floats(text: str, limit: int) -> list[float]:
    """Read up to ``limit`` leading numbers, stopping at the first non-number."""
    values: list[float] = []
    pos = 0
    while len(values) < limit:
        match = _FLOAT.match(text, pos)
        if not match:
            break
        values.append(float(match.group(1)))
        pos = match.end()
    return values


def _lenient_point(text: str) -> Point:
    """Read up to two leading numbers; missing ones count as zero."""
    values = _scan_floats(text.replace(",", " "), 2)
    values += [0.0] * (2 - len(values))
    return Point(values[0], values[1])


def _leading_int(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


class InteractiveSession:
    """Holds a point set edited by text commands.

    Commands: ``Newgraph n`` followed by n point lines, ``Newpoint x,y``,
    ``Removepoint x,y`` and ``CH``, which reports the hull area.
    Unknown lines are ignored.
    """

    def __init__(self) -> None:
        self.points: list[Point] = []

    def run(self, lines: Iterable[str]) -> Iterator[str]:
        """Process command lines, yielding the area for each ``CH``."""
        source = iter(lines)
        for line in source:
            command, _, rest = line.strip().partition(" ")

            if command == "Newgraph":
                count = max(_leading_int(rest), 0)
                self.points[:] = [
                    _lenient_point(entry) for entry in itertools.islice(source, count)
                ]
            elif command == "Newpoint":
                self.points.append(_lenient_point(rest))
            elif command == "Removepoint":
                target = _lenient_point(rest)
                if target in self.points:
                    self.points.remove(target)
            elif command == "CH":
                yield _area_text(self.points)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive convex hull session.")
    parser.parse_args(argv)
    for answer in InteractiveSession().run(sys.stdin):
        print(answer, flush=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())