# hull_overlay/core/layout.py
"""
Multi-group overlay orchestration: hull -> padding -> curve per group, then label
placement with collision avoidance. Larger hulls are handled first so their
labels get the best spots; one LabelPlacer session is shared across groups.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from hull_overlay.core.config import (
    DEFAULT_CONCAVITY,
    DEFAULT_FILL,
    DEFAULT_LENGTH_THRESHOLD,
    DEFAULT_PADDING,
    LABEL_FONT_FAMILY,
    LABEL_FONT_SIZE,
)
from hull_overlay.core.curves import generate_curve
from hull_overlay.core.geometry import as_points, centroid
from hull_overlay.core.hull import ConcaveHullTracer, compute_concave_boundary
from hull_overlay.core.padding import expand_boundary
from hull_overlay.core.placement import LabelPlacer
from hull_overlay.core.scoring import ScoreWeights, count_hits
from hull_overlay.core.text_metrics import text_box_at
from hull_overlay.core.types import (
    CatmullRomCurve,
    CurveConfig,
    CurveResult,
    HullResult,
    PlacementState,
    Point,
    Rect,
    TextBox,
)
from hull_overlay.core.validate import is_simple_boundary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupSpec:
    """A named point group to outline, with optional styling and link metadata."""
    name: str
    points: tuple[Point, ...]
    color: str | None = None
    url: str | None = None
    description: str | None = None
    tooltip: str | None = None

    @classmethod
    def from_coords(cls, name: str, coords: Iterable[Point | tuple[float, float]], **kwargs) -> "GroupSpec":
        return cls(name=name, points=tuple(as_points(coords)), **kwargs)


@dataclass(frozen=True)
class OverlayOptions:
    concavity: float = DEFAULT_CONCAVITY
    length_threshold: float = DEFAULT_LENGTH_THRESHOLD
    padding: float = DEFAULT_PADDING
    curve: CurveConfig = field(default_factory=CatmullRomCurve)
    font_size: float = LABEL_FONT_SIZE
    font_family: str = LABEL_FONT_FAMILY
    weights: ScoreWeights = field(default_factory=ScoreWeights)
    tracer: ConcaveHullTracer | None = None


@dataclass
class HullOverlay:
    """One group's result: raw hull, padded boundary, curve and label position."""
    group: GroupSpec
    hull: HullResult
    boundary: tuple[Point, ...]
    curve: CurveResult
    label_anchor: Point
    label_box: TextBox
    simple: bool

    @property
    def fill(self) -> str:
        return self.group.color or DEFAULT_FILL


@dataclass
class OverlayLayout:
    """Overlays in placement order (largest hull area first)."""
    overlays: list[HullOverlay]
    obstacles: tuple[Rect, ...]
    label_collisions: int
    options: OverlayOptions


def build_overlays(
    groups: Sequence[GroupSpec],
    obstacles: Iterable[Rect] = (),
    options: OverlayOptions | None = None,
) -> OverlayLayout:
    """
    Outline every group and place its name label. Obstacles are used as given;
    run them through collect_obstacles first to filter and buffer them.
    Raises the hull/curve errors of the first group that cannot be outlined.
    """
    opts = options or OverlayOptions()
    state = PlacementState.with_obstacles(obstacles)
    if not groups:
        return OverlayLayout(overlays=[], obstacles=state.obstacles, label_collisions=0, options=opts)

    shaped: list[tuple[GroupSpec, HullResult, list[Point], CurveResult]] = []
    for group in groups:
        hull = compute_concave_boundary(
            group.points,
            concavity=opts.concavity,
            length_threshold=opts.length_threshold,
            tracer=opts.tracer,
        )
        padded = expand_boundary(hull.boundary, opts.padding)
        curve = generate_curve(padded, opts.curve)
        shaped.append((group, hull, padded, curve))
    shaped.sort(key=lambda s: -s[1].area)

    placer = LabelPlacer(state, weights=opts.weights)
    overlays: list[HullOverlay] = []
    collisions = 0
    for group, hull, padded, curve in shaped:
        earlier = list(placer.placed)
        anchor = placer.place(group.name, opts.font_size, opts.font_family, centroid(padded))
        box = text_box_at(group.name, opts.font_size, opts.font_family, anchor)
        obstacle_hits, _ = count_hits(box, state.obstacles)
        label_hits, _ = count_hits(box, earlier)
        if obstacle_hits or label_hits:
            collisions += 1
            logger.debug(
                "Label %r still overlaps %d obstacle(s) and %d label(s)",
                group.name, obstacle_hits, label_hits,
            )

        simple = is_simple_boundary(padded)
        if not simple:
            logger.warning("Padded boundary for %r self-intersects", group.name)
        overlays.append(
            HullOverlay(
                group=group,
                hull=hull,
                boundary=tuple(padded),
                curve=curve,
                label_anchor=anchor,
                label_box=box,
                simple=simple,
            )
        )

    logger.info("Built %d overlay(s), %d label collision(s)", len(overlays), collisions)
    return OverlayLayout(
        overlays=overlays,
        obstacles=state.obstacles,
        label_collisions=collisions,
        options=opts,
    )
