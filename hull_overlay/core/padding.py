# hull_overlay/core/padding.py
"""
Radial padding: push every boundary point outward along the ray from the
boundary centroid by a fixed distance. Not a Minkowski offset; concave notches
widen in proportion to their distance from the centroid.
"""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from hull_overlay.core.geometry import points_to_array
from hull_overlay.core.types import Point

logger = logging.getLogger(__name__)


def expand_boundary(boundary: Sequence[Point], distance: float) -> list[Point]:
    """
    Move each point `distance` further from the centroid (arithmetic mean).
    distance <= 0 returns the points unchanged; a point sitting on the centroid
    stays put. Count and order are preserved.
    """
    points = list(boundary)
    if distance <= 0 or not points:
        return points

    xy = points_to_array(points)
    center = xy.mean(axis=0)
    offsets = xy - center
    lengths = np.hypot(offsets[:, 0], offsets[:, 1])
    moved = lengths > 0
    scale = np.ones_like(lengths)
    scale[moved] = (lengths[moved] + distance) / lengths[moved]
    padded = center + offsets * scale[:, None]
    # exact copies where nothing moves
    padded[~moved] = xy[~moved]

    logger.debug("Padded %d boundary points by %.2f", len(points), distance)
    return [Point(float(x), float(y)) for x, y in padded]
