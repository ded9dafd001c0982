# hull_overlay/core/placement.py
"""
Label placement. LabelPlacer scores every candidate anchor against the session's
obstacles and already placed labels and keeps the cheapest; placement never fails.
find_first_clear_position is the stateless variant: first candidate whose
buffered footprint touches no obstacle.
"""

from __future__ import annotations

import logging
from typing import Sequence

from hull_overlay.core.candidates import candidate_anchors
from hull_overlay.core.config import (
    COLLISION_BUFFER,
    SEARCH_MAX_DISTANCE,
    SEARCH_STEP,
)
from hull_overlay.core.geometry import rects_overlap
from hull_overlay.core.scoring import ScoreWeights, score_candidate
from hull_overlay.core.text_metrics import text_box_at
from hull_overlay.core.types import PlacementState, Point, Rect, TextBox

logger = logging.getLogger(__name__)


def _as_point(anchor: Point | tuple[float, float]) -> Point:
    if isinstance(anchor, Point):
        return anchor
    return Point(float(anchor[0]), float(anchor[1]))


class LabelPlacer:
    """
    One placer per rendering session. Each place() call registers the winning
    footprint so later labels steer around it. Callers serialize place() calls.
    """

    def __init__(
        self,
        state: PlacementState | None = None,
        weights: ScoreWeights | None = None,
        step: float = SEARCH_STEP,
        max_distance: float = SEARCH_MAX_DISTANCE,
    ) -> None:
        self.state = state if state is not None else PlacementState()
        self.weights = weights or ScoreWeights()
        self.step = step
        self.max_distance = max_distance

    @property
    def placed(self) -> list[TextBox]:
        return self.state.placed

    def place(
        self,
        text: str,
        font_size: float,
        font_family: str,
        preferred_anchor: Point | tuple[float, float],
    ) -> Point:
        """Best-scoring anchor; ties keep the earliest candidate (the preferred anchor first)."""
        preferred = _as_point(preferred_anchor)
        best_point = preferred
        best_box = text_box_at(text, font_size, font_family, preferred)
        best_score = float("inf")

        for candidate in candidate_anchors(preferred, self.step, self.max_distance):
            box = text_box_at(text, font_size, font_family, candidate)
            score = score_candidate(
                box, candidate, preferred, self.state.obstacles, self.state.placed, self.weights
            )
            if score < best_score:
                best_score = score
                best_point = candidate
                best_box = box

        self.state.placed.append(best_box)
        logger.debug(
            "Placed %r at (%.1f, %.1f), score %.2f (preferred (%.1f, %.1f))",
            text, best_point.x, best_point.y, best_score, preferred.x, preferred.y,
        )
        return best_point

    def reset(self) -> None:
        """Forget placed labels; obstacles stay."""
        self.state.reset()


def find_first_clear_position(
    text: str,
    font_size: float,
    font_family: str,
    preferred: Point | tuple[float, float],
    obstacles: Sequence[Rect],
    max_distance: float = SEARCH_MAX_DISTANCE,
    increment: float = SEARCH_STEP,
    buffer: float = COLLISION_BUFFER,
) -> Point:
    """
    First candidate (same order as LabelPlacer) whose footprint, grown by
    `buffer`, overlaps none of `obstacles`. Falls back to the preferred anchor.
    """
    anchor = _as_point(preferred)
    for candidate in candidate_anchors(anchor, increment, max_distance):
        box = text_box_at(text, font_size, font_family, candidate).inflate(buffer)
        if not any(rects_overlap(box, o) for o in obstacles):
            return candidate
    logger.debug("No clear position for %r within %.0f; keeping preferred anchor", text, max_distance)
    return anchor
