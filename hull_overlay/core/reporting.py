# hull_overlay/core/reporting.py
"""
Create reports/<run_name>/ and write overlays.json: per-group hull, padded
boundary, curve path and label anchor, plus a config snapshot.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from hull_overlay.core.config import (
    COLLISION_BUFFER,
    DEDUP_TOLERANCE,
    REPORTS_DIR,
    SEARCH_MAX_DISTANCE,
    SEARCH_STEP,
)
from hull_overlay.core.layout import HullOverlay, OverlayLayout
from hull_overlay.core.types import Point

SCHEMA_VERSION = "1.0"


def _points(points: tuple[Point, ...] | list[Point]) -> list[dict[str, float]]:
    return [{"x": float(p.x), "y": float(p.y)} for p in points]


def overlay_to_dict(overlay: HullOverlay) -> dict:
    """Structure of one entry in overlays.json."""
    g = overlay.group
    box = overlay.label_box
    return {
        "name": g.name,
        "style": {
            "fill": overlay.fill,
            "url": g.url,
            "description": g.description,
            "tooltip": g.tooltip,
        },
        "hull": {
            "boundary": _points(overlay.hull.boundary),
            "area": overlay.hull.area,
            "perimeter": overlay.hull.perimeter,
            "simple": overlay.simple,
        },
        "padded_boundary": _points(overlay.boundary),
        "curve": {
            "family": overlay.curve.family,
            "path_data": overlay.curve.path_data,
        },
        "label": {
            "text": box.text,
            "font_size": box.font_size,
            "font_family": box.font_family,
            "anchor": {"x": overlay.label_anchor.x, "y": overlay.label_anchor.y},
            "bbox": {"x": box.x, "y": box.y, "width": box.width, "height": box.height},
        },
    }


def layout_to_dict(layout: OverlayLayout) -> dict:
    """Full overlays.json document."""
    opts = layout.options
    curve_params = dict(vars(opts.curve))
    return {
        "schema_version": SCHEMA_VERSION,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "config": {
            "concavity": opts.concavity,
            "length_threshold": opts.length_threshold,
            "padding": opts.padding,
            "curve": {"family": opts.curve.family, **curve_params},
            "font_size": opts.font_size,
            "font_family": opts.font_family,
            "score_weights": dict(vars(opts.weights)),
            "DEDUP_TOLERANCE": DEDUP_TOLERANCE,
            "SEARCH_STEP": SEARCH_STEP,
            "SEARCH_MAX_DISTANCE": SEARCH_MAX_DISTANCE,
            "COLLISION_BUFFER": COLLISION_BUFFER,
        },
        "summary": {
            "n_overlays": len(layout.overlays),
            "n_obstacles": len(layout.obstacles),
            "label_collisions": layout.label_collisions,
        },
        "overlays": [overlay_to_dict(o) for o in layout.overlays],
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_overlays_json(report_dir: Path, layout: OverlayLayout) -> Path:
    """Write overlays.json to report_dir. Returns path to file."""
    path = report_dir / "overlays.json"
    path.write_text(json.dumps(layout_to_dict(layout), indent=2), encoding="utf-8")
    return path
