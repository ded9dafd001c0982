# tests/test_validate.py
"""Obstacle sanity filter, obstacle collection with buffer, boundary simplicity."""

from __future__ import annotations

from hull_overlay.core.geometry import as_points
from hull_overlay.core.types import Rect
from hull_overlay.core.validate import collect_obstacles, is_reasonable_obstacle, is_simple_boundary


def test_reasonable_obstacle() -> None:
    assert is_reasonable_obstacle(Rect(0, 0, 10, 10))
    assert is_reasonable_obstacle(Rect(-50, -50, 1000, 1000))
    assert not is_reasonable_obstacle(Rect(0, 0, 0, 10))
    assert not is_reasonable_obstacle(Rect(0, 0, 10, -1))
    assert not is_reasonable_obstacle(Rect(0, 0, 1001, 10))
    assert not is_reasonable_obstacle(Rect(-51, 0, 10, 10))


def test_collect_obstacles_filters_and_inflates() -> None:
    rects = [Rect(10, 10, 4, 4), Rect(0, 0, 0, 0), Rect(0, 0, 5000, 20)]
    out = collect_obstacles(rects)
    assert out == [Rect(5, 5, 14, 14)]


def test_collect_obstacles_custom_predicate_and_buffer() -> None:
    rects = [Rect(0, 0, 0, 0), Rect(1, 1, 2, 2)]
    out = collect_obstacles(rects, is_valid=lambda r: True, buffer=0)
    assert out == rects


def test_is_simple_boundary() -> None:
    assert is_simple_boundary(as_points([(0, 0), (10, 0), (10, 10), (0, 10)]))
    assert not is_simple_boundary(as_points([(0, 0), (10, 10), (10, 0), (0, 10)]))
    assert not is_simple_boundary(as_points([(0, 0), (10, 0)]))
    assert not is_simple_boundary(as_points([(0, 0), (5, 0), (10, 0)]))
