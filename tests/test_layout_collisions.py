# tests/test_layout_collisions.py
"""
Multi-group overlay layout: larger raw hulls first, shared label session avoids
label-label collisions, unavoidable collisions are counted, collinear groups are
flagged as non-simple, errors propagate.
"""

from __future__ import annotations

import pytest

from hull_overlay.core.config import DEFAULT_FILL
from hull_overlay.core.error_codes import InsufficientPointsError
from hull_overlay.core.geometry import rects_overlap
from hull_overlay.core.layout import GroupSpec, OverlayOptions, build_overlays
from hull_overlay.core.types import LinearCurve, Rect


def _square_group(name: str, lo: float, hi: float, **kwargs) -> GroupSpec:
    return GroupSpec.from_coords(name, [(lo, lo), (hi, lo), (hi, hi), (lo, hi)], **kwargs)


def test_empty_groups() -> None:
    layout = build_overlays([])
    assert layout.overlays == []
    assert layout.label_collisions == 0


def test_larger_hull_placed_first_and_labels_separate() -> None:
    small = _square_group("Beta", 10, 90)
    big = _square_group("Alpha", 0, 100)
    layout = build_overlays([small, big])
    names = [o.group.name for o in layout.overlays]
    assert names == ["Alpha", "Beta"]

    alpha, beta = layout.overlays
    assert alpha.label_anchor.as_tuple() == pytest.approx((50.0, 50.0))
    assert beta.label_anchor.as_tuple() == pytest.approx((50.0, 10.0))
    assert not rects_overlap(alpha.label_box, beta.label_box)
    assert layout.label_collisions == 0


def test_overlay_contents() -> None:
    layout = build_overlays(
        [_square_group("Core", 0, 100, color="#FFE8CC", tooltip="core services")],
        options=OverlayOptions(padding=10.0, curve=LinearCurve()),
    )
    (o,) = layout.overlays
    assert o.hull.area == pytest.approx(10000.0)
    assert len(o.boundary) == 4
    assert o.curve.family == "linear"
    assert o.curve.path_data.startswith("M")
    assert o.fill == "#FFE8CC"
    assert o.simple
    # padded corner sits padding further from the centroid
    corner = o.boundary[0]
    assert ((corner.x - 50) ** 2 + (corner.y - 50) ** 2) ** 0.5 == pytest.approx(50 * 2 ** 0.5 + 10)


def test_default_fill() -> None:
    layout = build_overlays([_square_group("Plain", 0, 10)])
    assert layout.overlays[0].fill == DEFAULT_FILL


def test_unavoidable_collision_counted() -> None:
    wall = Rect(-1000, -1000, 3000, 3000)
    layout = build_overlays([_square_group("Walled", 0, 100)], obstacles=[wall])
    assert layout.label_collisions == 1
    assert layout.overlays[0].label_anchor.as_tuple() == pytest.approx((50.0, 50.0))
    assert layout.obstacles == (wall,)


def test_group_with_too_few_points_raises() -> None:
    bad = GroupSpec.from_coords("Tiny", [(0, 0), (1, 1)])
    with pytest.raises(InsufficientPointsError):
        build_overlays([_square_group("Fine", 0, 10), bad])


def test_order_follows_raw_hull_area_not_padded_area() -> None:
    # padding inflates the small square past the thin strip
    thin = GroupSpec.from_coords("Thin", [(0, 0), (100, 0), (100, 3), (0, 3)])
    small = GroupSpec.from_coords("Small", [(200, 200), (216, 200), (216, 216), (200, 216)])
    layout = build_overlays([small, thin], options=OverlayOptions(padding=15.0))
    assert [o.group.name for o in layout.overlays] == ["Thin", "Small"]
    assert [o.hull.area for o in layout.overlays] == pytest.approx([300.0, 256.0])


def test_collinear_group_gets_flagged_overlay() -> None:
    line = GroupSpec.from_coords("Line", [(0, 0), (5, 0), (10, 0)])
    layout = build_overlays([line], options=OverlayOptions(padding=15.0))
    (o,) = layout.overlays
    assert o.hull.area == 0.0
    assert len(o.hull.boundary) == 3
    assert [c for p in o.boundary for c in p.as_tuple()] == pytest.approx([-15.0, 0.0, 5.0, 0.0, 25.0, 0.0])
    assert o.curve.path_data.startswith("M")
    assert not o.simple
