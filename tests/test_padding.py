# tests/test_padding.py
"""Radial padding from the centroid: identity, exact offsets, additivity, order."""

from __future__ import annotations

import math

import pytest

from hull_overlay.core.geometry import as_points, centroid, distance
from hull_overlay.core.padding import expand_boundary
from hull_overlay.core.types import Point

SQUARE = as_points([(0, 0), (10, 0), (10, 10), (0, 10)])


def test_non_positive_distance_is_identity() -> None:
    assert expand_boundary(SQUARE, 0) == SQUARE
    assert expand_boundary(SQUARE, -3.0) == SQUARE


def test_square_padded_by_five() -> None:
    out = expand_boundary(SQUARE, 5.0)
    assert len(out) == 4
    center = Point(5.0, 5.0)
    for before, after in zip(SQUARE, out):
        assert distance(center, after) == pytest.approx(math.sqrt(50) + 5.0)
        # same direction from the centroid
        assert math.copysign(1, after.x - 5) == math.copysign(1, before.x - 5)
        assert math.copysign(1, after.y - 5) == math.copysign(1, before.y - 5)
    assert out[0].x == pytest.approx(5 - (math.sqrt(50) + 5) / math.sqrt(2))


def test_padding_is_additive_for_symmetric_boundary() -> None:
    once = expand_boundary(SQUARE, 7.0)
    twice = expand_boundary(expand_boundary(SQUARE, 3.0), 4.0)
    for a, b in zip(once, twice):
        assert a.x == pytest.approx(b.x)
        assert a.y == pytest.approx(b.y)


def test_point_on_centroid_stays() -> None:
    pts = as_points([(0, 0), (2, 0), (1, 0)])
    assert centroid(pts) == Point(1.0, 0.0)
    out = expand_boundary(pts, 2.0)
    assert out[2] == Point(1.0, 0.0)
    assert out[0] == Point(-2.0, 0.0)
    assert out[1] == Point(4.0, 0.0)


def test_order_and_count_preserved_for_concave_boundary() -> None:
    arrow = as_points([(0, 0), (10, 5), (0, 10), (3, 5)])
    out = expand_boundary(arrow, 2.0)
    assert len(out) == len(arrow)
    c = centroid(arrow)
    for before, after in zip(arrow, out):
        assert distance(c, after) == pytest.approx(distance(c, before) + 2.0)


def test_empty_boundary() -> None:
    assert expand_boundary([], 5.0) == []
