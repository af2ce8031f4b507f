"""Generate a large random point set in the hull input format."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from hullserve.geometry import Point

DEFAULT_OUTPUT = "input_large.txt"
DEFAULT_COUNT = 10000


def generate_points(count: int, rng: random.Random | None = None) -> list[Point]:
    """Return ``count`` points on a 0.1 grid within [0, 999.9]."""
    rng = rng or random.Random()
    return [
        Point(rng.randrange(10000) / 10.0, rng.randrange(10000) / 10.0)
        for _ in range(count)
    ]


def write_input(
    path: str | Path,
    count: int = DEFAULT_COUNT,
    rng: random.Random | None = None,
) -> list[Point]:
    """Write ``count`` random points to ``path`` and return them."""
    points = generate_points(count, rng)
    with open(path, "w", encoding="ascii") as out:
        out.write(f"{count}\n")
        out.writelines(f"{p.x:.2f},{p.y:.2f}\n" for p in points)
    return points


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate random hull input.")
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    write_input(args.output, args.count, random.Random(args.seed))
    print(f"{args.output} generated with {args.count} points.")
    return 0


if __name__ == "__main__":
    sys.exit(main())