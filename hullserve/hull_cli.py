"""Read a point set from standard input and print its convex hull area."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, TextIO

from hullserve.geometry import Point, convex_hull, format_area, polygon_area


def _area_text(points: Iterable[Point]) -> str:
    """Return the formatted area of the convex hull of ``points``."""
    return format_area(polygon_area(convex_hull(list(points))))


def read_points(stream: TextIO) -> list[Point]:
    """Read a count followed by that many ``x,y`` points.

    Raises ValueError if the count is missing or too few points follow.
    """
    parts = stream.read().split(None, 1)
    if not parts:
        raise ValueError("missing point count")
    count = int(parts[0])
    if count < 0:
        raise ValueError(f"negative point count {count}")
    fields = (parts[1] if len(parts) > 1 else "").replace(",", " ").split()
    if len(fields) < 2 * count:
        raise ValueError(f"expected {count} points, found {len(fields) // 2}")
    coords = iter(float(field) for field in fields[: 2 * count])
    return [Point(x, y) for x, y in zip(coords, coords)]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the area of the convex hull of points read from stdin."
    )
    parser.parse_args(argv)
    try:
        points = read_points(sys.stdin)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(_area_text(points))
    return 0


if __name__ == "__main__":
    sys.exit(main())