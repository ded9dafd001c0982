# hull_overlay/core/candidates.py
"""
Label anchor candidates: the preferred anchor, then rings of compass offsets at
growing radii. Generation order is part of the contract (ties keep the earliest).
"""

from __future__ import annotations

import math

from hull_overlay.core.config import COMPASS_DIRECTIONS, SEARCH_MAX_DISTANCE, SEARCH_STEP
from hull_overlay.core.types import Point


def ring_radii(step: float = SEARCH_STEP, max_distance: float = SEARCH_MAX_DISTANCE) -> list[float]:
    """step, 2*step, ... up to and including max_distance."""
    if step <= 0 or max_distance < step:
        return []
    count = int(math.floor(max_distance / step + 1e-9))
    return [step * i for i in range(1, count + 1)]


def candidate_anchors(
    preferred: Point,
    step: float = SEARCH_STEP,
    max_distance: float = SEARCH_MAX_DISTANCE,
) -> list[Point]:
    """
    [preferred] + for each radius r: N, NE, E, SE, S, SW, W, NW at (dx*r, dy*r).
    Diagonals are not normalized, so they sit r*sqrt(2) away.
    """
    out = [preferred]
    for r in ring_radii(step, max_distance):
        for dx, dy in COMPASS_DIRECTIONS:
            out.append(Point(preferred.x + dx * r, preferred.y + dy * r))
    return out
