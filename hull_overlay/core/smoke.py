# hull_overlay/core/smoke.py
"""
Single entrypoint to verify the overlay pipeline end-to-end on a built-in
synthetic diagram: hulls, curves, labels, overlays.json and overlay.svg.
Does not run on import. Run: python -m hull_overlay.core.smoke
"""

from __future__ import annotations

import logging
from pathlib import Path

from hull_overlay.core.config import LOG_LEVEL
from hull_overlay.core.error_codes import HullOverlayError
from hull_overlay.core.layout import GroupSpec, OverlayLayout, OverlayOptions, build_overlays
from hull_overlay.core.render_svg import export_overlay_svg
from hull_overlay.core.reporting import ensure_report_dir, write_overlays_json
from hull_overlay.core.types import Point, Rect
from hull_overlay.core.validate import collect_obstacles

logger = logging.getLogger(__name__)

NODE_SIZE = (60.0, 30.0)


def _node_boxes() -> dict[str, Rect]:
    """Diagram nodes as bounding boxes, laid out on a loose grid."""
    w, h = NODE_SIZE
    centers = {
        "api": (100.0, 80.0),
        "auth": (220.0, 60.0),
        "gateway": (160.0, 170.0),
        "orders": (420.0, 90.0),
        "billing": (520.0, 150.0),
        "ledger": (450.0, 230.0),
        "queue": (300.0, 320.0),
        "worker": (180.0, 360.0),
    }
    return {name: Rect(cx - w / 2, cy - h / 2, w, h) for name, (cx, cy) in centers.items()}


def _corners(rect: Rect) -> list[Point]:
    return [
        Point(rect.x, rect.y),
        Point(rect.right, rect.y),
        Point(rect.right, rect.bottom),
        Point(rect.x, rect.bottom),
    ]


def build_demo_layout() -> OverlayLayout:
    """Three groups over the synthetic diagram, with every node box as an obstacle."""
    boxes = _node_boxes()
    groups_def = [
        ("Edge", ["api", "auth", "gateway"], "#FFE8CC", None),
        ("Payments", ["orders", "billing", "ledger"], "#E0F2E9", "https://example.org/payments"),
        ("Async\nprocessing", ["queue", "worker"], None, None),
    ]
    groups = []
    for name, members, color, url in groups_def:
        points = [p for m in members for p in _corners(boxes[m])]
        title = " ".join(name.splitlines())
        groups.append(
            GroupSpec(
                name=name,
                points=tuple(points),
                color=color,
                url=url,
                tooltip=f"{title}: {', '.join(members)}",
            )
        )
    obstacles = collect_obstacles(boxes.values())
    return build_overlays(groups, obstacles, OverlayOptions())


def main() -> None:
    """Build the demo layout and write reports/smoke/overlays.json and overlay.svg."""
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    repo_root = Path.cwd().resolve()
    try:
        layout = build_demo_layout()
    except HullOverlayError as e:
        logger.error("%s (%s)", e.user_message, e)
        raise
    report_dir = ensure_report_dir(repo_root, "smoke")
    json_path = write_overlays_json(report_dir, layout)
    svg_path = export_overlay_svg(layout, report_dir / "overlay.svg")
    logger.info("Wrote %s and %s", json_path, svg_path)


if __name__ == "__main__":
    main()
