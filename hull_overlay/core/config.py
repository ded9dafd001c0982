# hull_overlay/core/config.py
"""
Central configuration for hull overlays and label placement.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Log level for entry points. Set env LOG_LEVEL=DEBUG for hull/label traces."""

# ----- Point preparation -----
MIN_HULL_POINTS: int = 3
"""Fewest points a hull or curve can be built from."""

DEDUP_TOLERANCE: float = 1e-3
"""Two points closer than this on both axes are the same point (input units)."""

# ----- Hull construction -----
DEFAULT_CONCAVITY: float = 20.0
"""Lower hugs clusters tighter; higher approaches the convex hull."""

DEFAULT_LENGTH_THRESHOLD: float = 0.0
"""Edges shorter than this are never dug further."""

DEFAULT_PADDING: float = 15.0
"""Radial padding added around each hull (input units)."""

# ----- Curves -----
DEFAULT_CURVE_FAMILY: str = "catmull-rom"

DEFAULT_TENSION: float = 0.5
"""Cardinal tension when the caller gives none."""

DEFAULT_ALPHA: float = 0.5
"""Catmull-Rom alpha when the caller gives none (0.5 = centripetal)."""

CURVE_EPSILON: float = 1e-12
"""Segment lengths below this skip Catmull-Rom reparameterization."""

PATH_DECIMALS: int = 3
"""Decimal places written into path data."""

# ----- Text metrics -----
CHAR_WIDTH_FACTOR: float = 0.6
"""Average glyph advance as a fraction of font size."""

LABEL_FONT_SIZE: float = 36.0
LABEL_FONT_FAMILY: str = "Arial, sans-serif"

# ----- Label candidate search -----
SEARCH_STEP: float = 20.0
"""Radius increment between candidate rings."""

SEARCH_MAX_DISTANCE: float = 200.0
"""Outermost ring radius."""

COMPASS_DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, -1),   # N
    (1, -1),   # NE
    (1, 0),    # E
    (1, 1),    # SE
    (0, 1),    # S
    (-1, 1),   # SW
    (-1, 0),   # W
    (-1, -1),  # NW
)
"""Ring offsets in generation order; y grows downward as in SVG."""

# ----- Label scoring (lower is better) -----
SCORE_WEIGHT_DISTANCE: float = 3.0
SCORE_WEIGHT_OBSTACLE_HIT: float = 50.0
SCORE_WEIGHT_LABEL_HIT: float = 300.0
SCORE_WEIGHT_OVERLAP_AREA: float = 0.05

LABEL_OVERLAP_AREA_FACTOR: float = 2.0
"""Overlap area with placed labels counts this many times in the area term."""

# ----- Obstacles -----
COLLISION_BUFFER: float = 5.0
"""Margin added on every side of obstacle rectangles."""

OBSTACLE_MAX_EXTENT: float = 1000.0
"""Obstacles wider or taller than this are treated as bogus bounding boxes."""

OBSTACLE_MIN_ORIGIN: float = -50.0
"""Obstacles starting left of / above this are treated as bogus bounding boxes."""

# ----- Rendering -----
DEFAULT_FILL: str = "#E5F3FF"
HULL_FILL_OPACITY: float = 0.9
LABEL_FILL_OPACITY: float = 0.9
SVG_MARGIN: float = 20.0
