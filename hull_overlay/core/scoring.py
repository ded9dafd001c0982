# hull_overlay/core/scoring.py
"""
Label candidate score. Lower is better:
distance * w_distance + obstacle_hits * w_obstacle + label_hits * w_label
+ (obstacle_overlap_area + label_factor * label_overlap_area) * w_area.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from hull_overlay.core.config import (
    LABEL_OVERLAP_AREA_FACTOR,
    SCORE_WEIGHT_DISTANCE,
    SCORE_WEIGHT_LABEL_HIT,
    SCORE_WEIGHT_OBSTACLE_HIT,
    SCORE_WEIGHT_OVERLAP_AREA,
)
from hull_overlay.core.geometry import distance, overlap_area, rects_overlap
from hull_overlay.core.types import Point, Rect


@dataclass(frozen=True)
class ScoreWeights:
    distance: float = SCORE_WEIGHT_DISTANCE
    obstacle_hit: float = SCORE_WEIGHT_OBSTACLE_HIT
    label_hit: float = SCORE_WEIGHT_LABEL_HIT
    overlap_area: float = SCORE_WEIGHT_OVERLAP_AREA
    label_area_factor: float = LABEL_OVERLAP_AREA_FACTOR


def count_hits(box: Rect, rects: Sequence[Rect]) -> tuple[int, float]:
    """(number of rects overlapping box, summed intersection area)."""
    hits = 0
    area = 0.0
    for r in rects:
        if rects_overlap(box, r):
            hits += 1
            area += overlap_area(box, r)
    return hits, area


def score_candidate(
    box: Rect,
    candidate: Point,
    preferred: Point,
    obstacles: Sequence[Rect],
    placed: Sequence[Rect],
    weights: ScoreWeights | None = None,
) -> float:
    w = weights or ScoreWeights()
    obstacle_hits, obstacle_area = count_hits(box, obstacles)
    label_hits, label_area = count_hits(box, placed)
    return (
        distance(candidate, preferred) * w.distance
        + obstacle_hits * w.obstacle_hit
        + label_hits * w.label_hit
        + (obstacle_area + w.label_area_factor * label_area) * w.overlap_area
    )
