# hull_overlay/core/validate.py
"""
Input sanity checks: which obstacle rectangles to trust, obstacle collection
with a collision buffer, and simple-polygon checks on hull boundaries.
"""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from hull_overlay.core.config import (
    COLLISION_BUFFER,
    OBSTACLE_MAX_EXTENT,
    OBSTACLE_MIN_ORIGIN,
)
from hull_overlay.core.geometry import boundary_to_polygon
from hull_overlay.core.types import Point, Rect


def is_reasonable_obstacle(rect: Rect) -> bool:
    """
    Reject degenerate or bogus bounding boxes: non-positive or huge extents,
    or an origin far outside the canvas.
    """
    return (
        0 < rect.width <= OBSTACLE_MAX_EXTENT
        and 0 < rect.height <= OBSTACLE_MAX_EXTENT
        and rect.x >= OBSTACLE_MIN_ORIGIN
        and rect.y >= OBSTACLE_MIN_ORIGIN
    )


def collect_obstacles(
    rects: Iterable[Rect],
    is_valid: Callable[[Rect], bool] = is_reasonable_obstacle,
    buffer: float = COLLISION_BUFFER,
) -> list[Rect]:
    """Keep rects passing is_valid, each grown by buffer on all sides."""
    return [r.inflate(buffer) for r in rects if is_valid(r)]


def is_simple_boundary(boundary: Sequence[Point]) -> bool:
    """True if the closed ring has at least 3 points, no self-intersections and non-zero area."""
    poly = boundary_to_polygon(boundary)
    return not poly.is_empty and poly.is_valid and poly.area > 0
