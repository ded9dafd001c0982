# hull_overlay/core/hull.py
"""
Hull construction: concave boundary through a pluggable tracer, convex boundary
through a polar-angle stack scan, plus area and perimeter of the result.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Protocol, Sequence

import numpy as np
from shapely import concave_hull
from shapely.geometry import MultiPoint, Polygon

from hull_overlay.core.config import (
    DEDUP_TOLERANCE,
    DEFAULT_CONCAVITY,
    DEFAULT_LENGTH_THRESHOLD,
    MIN_HULL_POINTS,
)
from hull_overlay.core.error_codes import (
    InsufficientPointsError,
    InsufficientUniquePointsError,
)
from hull_overlay.core.geometry import (
    as_points,
    cross,
    dedupe_points,
    distance,
    points_to_array,
    polygon_area,
    polygon_perimeter,
)
from hull_overlay.core.types import HullResult, Point

logger = logging.getLogger(__name__)


class ConcaveHullTracer(Protocol):
    """
    Traces a simple closed boundary around unique points given as an (N, 2) array.
    Higher concavity must never give a less convex result. The returned ring may
    or may not repeat its first point.
    """

    def trace(self, points: np.ndarray, concavity: float, length_threshold: float) -> np.ndarray:
        ...


def _prepare_points(points: Iterable[Point | tuple[float, float]]) -> list[Point]:
    """Coerce, count and deduplicate. Raises on fewer than 3 (unique) points."""
    pts = as_points(points)
    if len(pts) < MIN_HULL_POINTS:
        raise InsufficientPointsError(
            f"At least {MIN_HULL_POINTS} points are required to calculate a hull, got {len(pts)}"
        )
    unique = dedupe_points(pts, DEDUP_TOLERANCE)
    if len(unique) < MIN_HULL_POINTS:
        raise InsufficientUniquePointsError(
            f"At least {MIN_HULL_POINTS} unique points are required to calculate a hull, got {len(unique)}"
        )
    return unique


def _convex_scan(points: Sequence[Point]) -> list[Point]:
    """
    Anchor at lowest y (then lowest x), sort the rest by polar angle (nearer first
    on ties), pop while the last three points fail a strict counter-clockwise turn.
    """
    anchor_i = min(range(len(points)), key=lambda i: (points[i].y, points[i].x))
    anchor = points[anchor_i]
    rest = [p for i, p in enumerate(points) if i != anchor_i]
    rest.sort(key=lambda p: (math.atan2(p.y - anchor.y, p.x - anchor.x), distance(anchor, p)))

    hull = [anchor]
    for p in rest:
        while len(hull) > 1 and cross(hull[-2], hull[-1], p) <= 0:
            hull.pop()
        hull.append(p)
    return hull


def compute_convex_boundary(points: Iterable[Point | tuple[float, float]]) -> list[Point]:
    """
    Convex boundary in counter-clockwise order (y up). Every returned point is
    one of the (deduplicated) inputs.
    """
    return _convex_scan(_prepare_points(points))


class ShapelyRatioTracer:
    """
    GEOS concave hull via shapely. Concavity maps onto the GEOS edge-length ratio
    as concavity / (1 + concavity), so 0 is the tightest fit and large values
    approach the convex hull. GEOS has no absolute edge floor: length_threshold
    only returns the convex hull early when every convex edge is already shorter.
    """

    def trace(self, points: np.ndarray, concavity: float, length_threshold: float) -> np.ndarray:
        xy = np.asarray(points, dtype=np.float64)
        multipoint = MultiPoint([tuple(p) for p in xy])
        convex = multipoint.convex_hull
        if not isinstance(convex, Polygon):
            # collinear input; the caller orders it along the line
            return np.array(convex.coords)
        if length_threshold > 0:
            ring = np.array(convex.exterior.coords)
            edges = np.linalg.norm(np.diff(ring, axis=0), axis=1)
            if edges.size and float(edges.max()) < length_threshold:
                return ring

        concavity = max(0.0, concavity)
        ratio = concavity / (1.0 + concavity)
        hull = concave_hull(multipoint, ratio=ratio, allow_holes=False)
        if isinstance(hull, Polygon) and not hull.is_empty:
            return np.array(hull.exterior.coords)
        logger.debug("GEOS concave hull degenerated to %s; using convex hull", hull.geom_type)
        return np.array(convex.exterior.coords)


def _open_ring(coords: np.ndarray) -> list[Point]:
    """Points from tracer output with a repeated closing point removed."""
    out = [Point(float(x), float(y)) for x, y in coords]
    if len(out) > 1 and out[0] == out[-1]:
        out.pop()
    return out


def compute_concave_boundary(
    points: Iterable[Point | tuple[float, float]],
    concavity: float = DEFAULT_CONCAVITY,
    length_threshold: float = DEFAULT_LENGTH_THRESHOLD,
    tracer: ConcaveHullTracer | None = None,
) -> HullResult:
    """
    Concave hull of the points with area and perimeter. Deduplicates first.
    Raises InsufficientPointsError / InsufficientUniquePointsError.
    Boundary winding is whatever the tracer returns (ShapelyRatioTracer by default).
    Collinear input gives the unique points in order along the line (zero area).
    """
    unique = _prepare_points(points)
    tracer = tracer if tracer is not None else ShapelyRatioTracer()
    coords = tracer.trace(points_to_array(unique), concavity, length_threshold)
    boundary = _open_ring(np.asarray(coords, dtype=np.float64))
    if len(boundary) < MIN_HULL_POINTS:
        # collinear: lexicographic order is order along the line
        boundary = sorted(unique, key=lambda p: (p.x, p.y))

    area = polygon_area(boundary)
    perimeter = polygon_perimeter(boundary)
    if area == 0:
        logger.warning("Hull of %d points is degenerate (zero area)", len(unique))
    logger.debug(
        "Hull: %d unique points -> %d boundary points, area=%.2f, perimeter=%.2f",
        len(unique), len(boundary), area, perimeter,
    )
    return HullResult(boundary=tuple(boundary), area=area, perimeter=perimeter)
