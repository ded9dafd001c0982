# hull_overlay/core/render_svg.py
"""
Export an overlay layout as a self-contained SVG: one filled curve path per hull
(optionally linked, with a hover title) and one centered name label per hull.
Coordinates are SVG coordinates (y down); no flip is applied.
"""

from __future__ import annotations

import colorsys
import xml.etree.ElementTree as ET
from pathlib import Path

from hull_overlay.core.config import (
    HULL_FILL_OPACITY,
    LABEL_FILL_OPACITY,
    SVG_MARGIN,
)
from hull_overlay.core.layout import HullOverlay, OverlayLayout

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

FALLBACK_TEXT_COLOR = "#374151"
LINE_HEIGHT_FACTOR = 1.2
DESCRIPTION_SIZE_FACTOR = 0.7
DESCRIPTION_GAP = 3.0


def text_color_for_fill(fill: str) -> str:
    """Darker, less saturated shade of a #rgb / #rrggbb fill so labels stay readable."""
    h = fill.strip().lstrip("#")
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    if len(h) != 6:
        return FALLBACK_TEXT_COLOR
    try:
        r, g, b = (int(h[i:i + 2], 16) / 255.0 for i in (0, 2, 4))
    except ValueError:
        return FALLBACK_TEXT_COLOR
    hue, light, sat = colorsys.rgb_to_hls(r, g, b)
    r, g, b = colorsys.hls_to_rgb(hue, max(0.2, light * 0.6), sat * 0.8)
    return "#{:02x}{:02x}{:02x}".format(round(r * 255), round(g * 255), round(b * 255))


def _view_box(layout: OverlayLayout) -> tuple[float, float, float, float]:
    xs: list[float] = []
    ys: list[float] = []
    for o in layout.overlays:
        xs.extend(p.x for p in o.boundary)
        ys.extend(p.y for p in o.boundary)
        xs.extend((o.label_box.x, o.label_box.right))
        ys.extend((o.label_box.y, o.label_box.bottom))
    if not xs:
        return (0.0, 0.0, 1.0, 1.0)
    min_x, min_y = min(xs) - SVG_MARGIN, min(ys) - SVG_MARGIN
    w = max(1.0, max(xs) + SVG_MARGIN - min_x)
    h = max(1.0, max(ys) + SVG_MARGIN - min_y)
    return (min_x, min_y, w, h)


def _add_hull_path(parent: ET.Element, overlay: HullOverlay) -> None:
    g = overlay.group
    if g.url:
        parent = ET.SubElement(parent, "a", {"href": g.url, "xlink:href": g.url})
    path = ET.SubElement(
        parent,
        "path",
        {
            "d": overlay.curve.path_data,
            "fill": overlay.fill,
            "fill-opacity": f"{HULL_FILL_OPACITY:.1f}",
            "stroke": "none",
            "style": "mix-blend-mode: multiply;",
            "data-hull-entity": g.name,
            "data-curve-type": overlay.curve.family,
        },
    )
    if g.tooltip:
        ET.SubElement(path, "title").text = g.tooltip


def _add_label(parent: ET.Element, overlay: HullOverlay) -> None:
    g = overlay.group
    box = overlay.label_box
    x, y = overlay.label_anchor.x, overlay.label_anchor.y
    color = text_color_for_fill(overlay.fill)
    common = {
        "text-anchor": "middle",
        "dominant-baseline": "middle",
        "font-family": box.font_family,
        "fill": color,
        "stroke": "#000",
    }

    lines = g.name.splitlines() or [""]
    line_height = box.font_size * LINE_HEIGHT_FACTOR
    desc_size = round(box.font_size * DESCRIPTION_SIZE_FACTOR)
    total = len(lines) * line_height
    if g.description:
        total += DESCRIPTION_GAP + desc_size * LINE_HEIGHT_FACTOR
    start_y = y - total / 2 + line_height / 2

    text = ET.SubElement(
        parent,
        "text",
        {
            **common,
            "font-size": f"{box.font_size:g}",
            "font-weight": "bold",
            "fill-opacity": f"{LABEL_FILL_OPACITY:.2f}",
            "stroke-width": "0.5",
            "data-label-for": g.name,
        },
    )
    if len(lines) == 1:
        text.set("x", f"{x:.2f}")
        text.set("y", f"{start_y:.2f}")
        text.text = lines[0]
    else:
        for i, line in enumerate(lines):
            tspan = ET.SubElement(text, "tspan", {"x": f"{x:.2f}", "y": f"{start_y + i * line_height:.2f}"})
            tspan.text = line

    if g.description:
        desc = ET.SubElement(
            parent,
            "text",
            {
                **common,
                "x": f"{x:.2f}",
                "y": f"{start_y + len(lines) * line_height + DESCRIPTION_GAP:.2f}",
                "font-size": str(desc_size),
                "font-weight": "normal",
                "fill-opacity": f"{LABEL_FILL_OPACITY * 0.8:.2f}",
                "stroke-width": "0.3",
                "data-description-for": g.name,
            },
        )
        desc.text = g.description


def export_overlay_svg(layout: OverlayLayout, out_path: str | Path) -> Path:
    """Write the standalone SVG; hulls first, labels on top. Returns the path written."""
    min_x, min_y, vw, vh = _view_box(layout)
    # Plain tag names with xmlns set once; prefixed xlink:href attributes.
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "xmlns:xlink": XLINK_NS,
            "width": f"{vw:.0f}",
            "height": f"{vh:.0f}",
            "viewBox": f"{min_x:.2f} {min_y:.2f} {vw:.2f} {vh:.2f}",
        },
    )
    hulls = ET.SubElement(root, "g", {"id": "hulls"})
    labels = ET.SubElement(root, "g", {"id": "labels"})
    for overlay in layout.overlays:
        _add_hull_path(hulls, overlay)
        _add_label(labels, overlay)

    out = Path(out_path)
    out_str = ET.tostring(root, encoding="unicode", method="xml")
    out.write_text('<?xml version="1.0" encoding="UTF-8"?>\n' + out_str, encoding="utf-8")
    return out
