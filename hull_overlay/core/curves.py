# hull_overlay/core/curves.py
"""
Boundary -> SVG path data under one of five curve families (linear, catmull-rom,
cardinal, basis, basis-closed). Control points follow the d3-shape curve
definitions so paths match what a browser renderer would draw for the same
points. Also: option validation and the clamping config factory.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from hull_overlay.core.config import (
    CURVE_EPSILON,
    DEFAULT_ALPHA,
    DEFAULT_CURVE_FAMILY,
    DEFAULT_TENSION,
    MIN_HULL_POINTS,
    PATH_DECIMALS,
)
from hull_overlay.core.error_codes import (
    InsufficientPointsError,
    InvalidCurveParameterError,
    PathGenerationFailedError,
    UnsupportedCurveFamilyError,
)
from hull_overlay.core.geometry import as_points, points_to_array
from hull_overlay.core.types import (
    CURVE_FAMILIES,
    BasisClosedCurve,
    BasisCurve,
    CardinalCurve,
    CatmullRomCurve,
    CurveConfig,
    CurveResult,
    LinearCurve,
    Point,
)

logger = logging.getLogger(__name__)

_FAMILY_DESCRIPTIONS: dict[str, str] = {
    "linear": "Straight lines between points (sharp corners)",
    "catmull-rom": "Smooth curve through every point (alpha: 0 uniform, 0.5 centripetal, 1 chordal)",
    "cardinal": "Smooth curve through every point with adjustable tension",
    "basis": "B-spline; very smooth, passes near the points rather than through them",
    "basis-closed": "Closed B-spline; very smooth and seamless around the whole boundary",
}


def curve_family_descriptions() -> dict[str, str]:
    """Family name -> one-line description, in canonical family order."""
    return {name: _FAMILY_DESCRIPTIONS[name] for name in CURVE_FAMILIES}


def validate_curve_options(
    family: str,
    tension: float | None = None,
    alpha: float | None = None,
) -> None:
    """Raise UnsupportedCurveFamilyError / InvalidCurveParameterError; no points needed."""
    if family not in CURVE_FAMILIES:
        raise UnsupportedCurveFamilyError(
            f"Unknown curve family {family!r}; expected one of {', '.join(CURVE_FAMILIES)}"
        )
    if tension is not None and not 0.0 <= tension <= 1.0:
        raise InvalidCurveParameterError(f"tension must be between 0.0 and 1.0, got {tension!r}")
    if alpha is not None and not 0.0 <= alpha <= 1.0:
        raise InvalidCurveParameterError(f"alpha must be between 0.0 and 1.0, got {alpha!r}")


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def create_curve_config(
    family: str = DEFAULT_CURVE_FAMILY,
    tension: float | None = None,
    alpha: float | None = None,
) -> CurveConfig:
    """
    Build the config variant for a family. tension and alpha are clamped to
    [0, 1]; a parameter the family does not use is ignored.
    """
    if family not in CURVE_FAMILIES:
        raise UnsupportedCurveFamilyError(
            f"Unknown curve family {family!r}; expected one of {', '.join(CURVE_FAMILIES)}"
        )
    if family == "cardinal":
        if alpha is not None:
            logger.debug("alpha is ignored for cardinal curves")
        return CardinalCurve(tension=_clamp01(DEFAULT_TENSION if tension is None else tension))
    if family == "catmull-rom":
        if tension is not None:
            logger.debug("tension is ignored for catmull-rom curves")
        return CatmullRomCurve(alpha=_clamp01(DEFAULT_ALPHA if alpha is None else alpha))
    if tension is not None or alpha is not None:
        logger.debug("%s curves take no parameters; ignoring tension/alpha", family)
    if family == "linear":
        return LinearCurve()
    if family == "basis":
        return BasisCurve()
    return BasisClosedCurve()


# ----- Path building -----

def _fmt(v: float) -> str:
    s = f"{v:.{PATH_DECIMALS}f}".rstrip("0").rstrip(".")
    return "0" if s in ("-0", "") else s


class _PathBuilder:
    """Accumulates SVG path commands and every coordinate written."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._coords: list[float] = []

    def _xy(self, *pts: np.ndarray) -> str:
        out = []
        for p in pts:
            x, y = float(p[0]), float(p[1])
            self._coords.extend((x, y))
            out.append(f"{_fmt(x)},{_fmt(y)}")
        return ",".join(out)

    def move_to(self, p: np.ndarray) -> None:
        self._parts.append("M" + self._xy(p))

    def line_to(self, p: np.ndarray) -> None:
        self._parts.append("L" + self._xy(p))

    def curve_to(self, c1: np.ndarray, c2: np.ndarray, p: np.ndarray) -> None:
        self._parts.append("C" + self._xy(c1, c2, p))

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in self._coords)

    def path(self) -> str:
        return "".join(self._parts)


def _linear(b: _PathBuilder, p: np.ndarray) -> None:
    b.move_to(p[0])
    for q in p[1:]:
        b.line_to(q)


def _basis_segment(b: _PathBuilder, p0: np.ndarray, p1: np.ndarray, p2: np.ndarray) -> None:
    b.curve_to((2 * p0 + p1) / 3, (p0 + 2 * p1) / 3, (p0 + 4 * p1 + p2) / 6)


def _basis(b: _PathBuilder, p: np.ndarray) -> None:
    n = len(p)
    b.move_to(p[0])
    b.line_to((5 * p[0] + p[1]) / 6)
    for k in range(2, n):
        _basis_segment(b, p[k - 2], p[k - 1], p[k])
    _basis_segment(b, p[n - 2], p[n - 1], p[n - 1])
    b.line_to(p[n - 1])


def _basis_closed(b: _PathBuilder, q: np.ndarray) -> None:
    m = len(q)
    b.move_to((q[0] + 4 * q[1] + q[2]) / 6)
    for k in range(3, m + 3):
        _basis_segment(b, q[(k - 2) % m], q[(k - 1) % m], q[k % m])


def _cardinal(b: _PathBuilder, p: np.ndarray, tension: float) -> None:
    n = len(p)
    k = (1.0 - tension) / 6.0
    b.move_to(p[0])
    for i in range(n - 1):
        prev = p[i - 1] if i > 0 else p[i + 1]
        nxt = p[i + 2] if i + 2 < n else p[i]
        c1 = p[i] + k * (p[i + 1] - prev)
        c2 = p[i + 1] + k * (p[i] - nxt)
        b.curve_to(c1, c2, p[i + 1])


def _catmull_rom(b: _PathBuilder, p: np.ndarray, alpha: float) -> None:
    if alpha == 0:
        _cardinal(b, p, 0.0)
        return
    n = len(p)
    seg = np.hypot(*np.diff(p, axis=0).T)
    la = seg ** alpha
    l2a = seg ** (2 * alpha)

    b.move_to(p[0])
    for i in range(n - 1):
        l12, l12_2a = la[i], l2a[i]
        c1 = p[i]
        if i > 0 and la[i - 1] > CURVE_EPSILON:
            l01, l01_2a = la[i - 1], l2a[i - 1]
            a = 2 * l01_2a + 3 * l01 * l12 + l12_2a
            nn = 3 * l01 * (l01 + l12)
            c1 = (p[i] * a - p[i - 1] * l12_2a + p[i + 1] * l01_2a) / nn
        c2 = p[i + 1]
        if i + 2 < n and la[i + 1] > CURVE_EPSILON:
            l23, l23_2a = la[i + 1], l2a[i + 1]
            bb = 2 * l23_2a + 3 * l23 * l12 + l12_2a
            m = 3 * l23 * (l23 + l12)
            c2 = (p[i + 1] * bb + p[i] * l23_2a - p[i + 2] * l12_2a) / m
        b.curve_to(c1, c2, p[i + 1])


def generate_curve(
    boundary: Sequence[Point | tuple[float, float]],
    config: CurveConfig | None = None,
) -> CurveResult:
    """
    SVG path data for the boundary under the given family (default catmull-rom).
    Open families close the ring by appending the first point when first != last;
    basis-closed wraps instead and drops a trailing duplicate of the first point.
    """
    points = as_points(boundary)
    if config is None:
        config = CatmullRomCurve()
    if len(points) < MIN_HULL_POINTS:
        raise InsufficientPointsError(
            f"At least {MIN_HULL_POINTS} points are required to generate a curve, got {len(points)}"
        )

    xy = points_to_array(points)
    builder = _PathBuilder()
    if isinstance(config, BasisClosedCurve):
        ring = xy[:-1] if np.array_equal(xy[0], xy[-1]) else xy
        if len(ring) < MIN_HULL_POINTS:
            raise InsufficientPointsError(
                f"At least {MIN_HULL_POINTS} distinct ring points are required, got {len(ring)}"
            )
        _basis_closed(builder, ring)
    else:
        if not np.array_equal(xy[0], xy[-1]):
            xy = np.vstack([xy, xy[:1]])
        if isinstance(config, LinearCurve):
            _linear(builder, xy)
        elif isinstance(config, CatmullRomCurve):
            _catmull_rom(builder, xy, config.alpha)
        elif isinstance(config, CardinalCurve):
            _cardinal(builder, xy, config.tension)
        elif isinstance(config, BasisCurve):
            _basis(builder, xy)
        else:
            raise UnsupportedCurveFamilyError(f"Unsupported curve config: {config!r}")

    path_data = builder.path()
    if not path_data or not builder.is_finite():
        raise PathGenerationFailedError(
            f"{config.family} curve produced no usable path for {len(points)} points"
        )
    logger.debug("Generated %s path from %d points", config.family, len(points))
    return CurveResult(path_data=path_data, family=config.family, source_points=tuple(points))
