"""Planar points, convex hulls and polygon areas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, order=True)
class Point:
    """A point in the plane, ordered by x and then by y."""

    x: float
    y: float


def cross(o: Point, a: Point, b: Point) -> float:
    """Z component of (a - o) x (b - o); positive for a left turn."""
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def convex_hull(points: Iterable[Point]) -> list[Point]:
    """Return the convex hull counter-clockwise, starting at the lowest point.

    Collinear points on the boundary are dropped. Inputs of zero or one
    point are returned unchanged.
    """
    pts = sorted(points)
    if len(pts) <= 1:
        return pts

    hull: list[Point] = []
    for p in pts:
        while len(hull) >= 2 and cross(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)

    lower_limit = len(hull) + 1
    for p in reversed(pts[:-1]):
        while len(hull) >= lower_limit and cross(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)

    return hull[:-1]


def convex_hull_stack(points: Iterable[Point]) -> list[Point]:
    """Convex hull built by pushing and popping a single stack.

    Gives the same result as :func:`convex_hull`; kept as the second
    variant that the profiler compares against.
    """
    pts = sorted(points)
    if not pts:
        return []

    stack: list[Point] = []
    for p in pts:
        while len(stack) >= 2 and cross(stack[-2], stack[-1], p) <= 0:
            stack.pop()
        stack.append(p)

    lower_size = len(stack)
    for p in reversed(pts):
        while len(stack) > lower_size and cross(stack[-2], stack[-1], p) <= 0:
            stack.pop()
        stack.append(p)

    stack.pop()
    return stack


def polygon_area(poly: Iterable[Point]) -> float:
    """Area of a simple polygon by the shoelace formula."""
    vertices = list(poly)
    if not vertices:
        return 0.0
    doubled = sum(
        p1.x * p2.y - p2.x * p1.y
        for p1, p2 in zip(vertices, vertices[1:] + vertices[:1])
    )
    return abs(doubled) / 2.0


def parse_point(text: str) -> Point:
    """Parse ``"x,y"`` or ``"x y"`` into a point.

    Raises ValueError when two numbers cannot be read.
    """
    fields = text.replace(",", " ").split()
    if len(fields) < 2:
        raise ValueError(f"expected two coordinates in {text!r}")
    try:
        return Point(float(fields[0]), float(fields[1]))
    except ValueError:
        raise ValueError(f"invalid coordinates in {text!r}") from None


def format_area(area: float) -> str:
    """Render an area with six digits after the decimal point."""
    return f"{area:.6f}"