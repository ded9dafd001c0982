# hull_overlay/core/geometry.py
"""
Geometry helpers: point coercion, centroid, rectangle overlap and overlap area,
shoelace area, perimeter, tolerant deduplication, polygon conversion.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np
from shapely.geometry import Polygon

from hull_overlay.core.config import DEDUP_TOLERANCE
from hull_overlay.core.types import Point, Rect


def as_points(coords: Iterable[Point | tuple[float, float]]) -> list[Point]:
    """Accept Point objects or (x, y) pairs; return a list of Point."""
    out: list[Point] = []
    for c in coords:
        if isinstance(c, Point):
            out.append(c)
        else:
            x, y = c
            out.append(Point(float(x), float(y)))
    return out


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """Points as an (N, 2) float array."""
    if not points:
        return np.zeros((0, 2))
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)


def centroid(points: Sequence[Point]) -> Point:
    """Arithmetic mean of the points (not area-weighted). Empty input gives the origin."""
    if not points:
        return Point(0.0, 0.0)
    xy = points_to_array(points).mean(axis=0)
    return Point(float(xy[0]), float(xy[1]))


def distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def cross(o: Point, a: Point, b: Point) -> float:
    """z of (a - o) x (b - o); positive for a counter-clockwise turn (y up)."""
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def rects_overlap(r1: Rect, r2: Rect) -> bool:
    """
    True unless one rectangle lies entirely left, right, above or below the other.
    Touching edges count as overlapping.
    """
    return not (
        r1.right < r2.x
        or r2.right < r1.x
        or r1.bottom < r2.y
        or r2.bottom < r1.y
    )


def overlap_area(r1: Rect, r2: Rect) -> float:
    """Area of the intersection rectangle; 0 when they only touch or are apart."""
    left = max(r1.x, r2.x)
    right = min(r1.right, r2.right)
    top = max(r1.y, r2.y)
    bottom = min(r1.bottom, r2.bottom)
    if left < right and top < bottom:
        return (right - left) * (bottom - top)
    return 0.0


def signed_area(points: Sequence[Point]) -> float:
    """Shoelace sum / 2 over the implicitly closed ring."""
    n = len(points)
    if n < 3:
        return 0.0
    s = 0.0
    for i in range(n):
        j = (i + 1) % n
        s += points[i].x * points[j].y - points[j].x * points[i].y
    return s / 2.0


def polygon_area(points: Sequence[Point]) -> float:
    return abs(signed_area(points))


def polygon_perimeter(points: Sequence[Point]) -> float:
    """Sum of edge lengths including the closing edge."""
    n = len(points)
    if n < 2:
        return 0.0
    return sum(distance(points[i], points[(i + 1) % n]) for i in range(n))


def dedupe_points(points: Sequence[Point], tolerance: float = DEDUP_TOLERANCE) -> list[Point]:
    """
    Drop points within tolerance (on both axes) of an earlier kept point.
    First occurrence wins, so appending a near-duplicate never changes the result.
    """
    unique: list[Point] = []
    for p in points:
        if any(abs(u.x - p.x) < tolerance and abs(u.y - p.y) < tolerance for u in unique):
            continue
        unique.append(p)
    return unique


def bounding_rect(points: Sequence[Point]) -> Rect:
    """Axis-aligned bounds of the points; zero rect for empty input."""
    if not points:
        return Rect(0.0, 0.0, 0.0, 0.0)
    xy = points_to_array(points)
    minx, miny = xy.min(axis=0)
    maxx, maxy = xy.max(axis=0)
    return Rect(float(minx), float(miny), float(maxx - minx), float(maxy - miny))


def boundary_to_polygon(boundary: Sequence[Point]) -> Polygon:
    """Shapely polygon from an open boundary ring; empty polygon below 3 points."""
    if len(boundary) < 3:
        return Polygon()
    return Polygon([(p.x, p.y) for p in boundary])
