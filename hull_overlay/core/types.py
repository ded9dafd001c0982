# hull_overlay/core/types.py
"""
Dataclasses for points, rectangles, hull and curve results, text footprints
and the per-session placement state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Literal, Union

from hull_overlay.core.config import DEFAULT_ALPHA, DEFAULT_TENSION
from hull_overlay.core.error_codes import InvalidCurveParameterError


CurveFamily = Literal["linear", "catmull-rom", "cardinal", "basis", "basis-closed"]

CURVE_FAMILIES: tuple[str, ...] = ("linear", "catmull-rom", "cardinal", "basis", "basis-closed")


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle; (x, y) is the top-left corner in SVG coordinates."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def inflate(self, margin: float) -> "Rect":
        """Grow by margin on every side."""
        return Rect(
            x=self.x - margin,
            y=self.y - margin,
            width=self.width + 2 * margin,
            height=self.height + 2 * margin,
        )


@dataclass(frozen=True)
class HullResult:
    """
    Closed boundary polygon, stored open (first != last) and implicitly closed.
    Produced once per hull call; never mutated.
    """
    boundary: tuple[Point, ...]
    area: float
    perimeter: float


# ----- Curve configuration: one variant per family -----

def _check_unit_interval(name: str, value: float) -> None:
    if not 0.0 <= value <= 1.0:
        raise InvalidCurveParameterError(f"{name} must be between 0.0 and 1.0, got {value!r}")


@dataclass(frozen=True)
class LinearCurve:
    family: ClassVar[str] = "linear"


@dataclass(frozen=True)
class CatmullRomCurve:
    """alpha: 0 uniform, 0.5 centripetal, 1 chordal."""
    family: ClassVar[str] = "catmull-rom"
    alpha: float = DEFAULT_ALPHA

    def __post_init__(self) -> None:
        _check_unit_interval("alpha", self.alpha)


@dataclass(frozen=True)
class CardinalCurve:
    family: ClassVar[str] = "cardinal"
    tension: float = DEFAULT_TENSION

    def __post_init__(self) -> None:
        _check_unit_interval("tension", self.tension)


@dataclass(frozen=True)
class BasisCurve:
    family: ClassVar[str] = "basis"


@dataclass(frozen=True)
class BasisClosedCurve:
    family: ClassVar[str] = "basis-closed"


CurveConfig = Union[LinearCurve, CatmullRomCurve, CardinalCurve, BasisCurve, BasisClosedCurve]


@dataclass(frozen=True)
class CurveResult:
    """path_data is an SVG path "d" string; source_points is the boundary as given."""
    path_data: str
    family: str
    source_points: tuple[Point, ...]


@dataclass(frozen=True)
class TextBox(Rect):
    """Approximate text footprint, centered on its anchor."""
    text: str = ""
    font_size: float = 0.0
    font_family: str = ""


@dataclass
class PlacementState:
    """
    One rendering session: external obstacles (snapshot) plus labels placed so far.
    Owned by a single LabelPlacer; reset clears placed labels only.
    """
    obstacles: tuple[Rect, ...] = ()
    placed: list[TextBox] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.obstacles = tuple(self.obstacles)

    @classmethod
    def with_obstacles(cls, obstacles: Iterable[Rect]) -> "PlacementState":
        return cls(obstacles=tuple(obstacles))

    def reset(self) -> None:
        self.placed.clear()
