# tests/test_smoke_contract.py
"""
overlays.json shape (required keys, schema version), SVG export structure, and
the smoke entrypoint writing both files. Deterministic, writes only to tmp_path.
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from hull_overlay.core import smoke
from hull_overlay.core.layout import OverlayLayout
from hull_overlay.core.render_svg import export_overlay_svg, text_color_for_fill
from hull_overlay.core.reporting import (
    SCHEMA_VERSION,
    ensure_report_dir,
    layout_to_dict,
    overlay_to_dict,
    write_overlays_json,
)

SVG = "{http://www.w3.org/2000/svg}"
XLINK_HREF = "{http://www.w3.org/1999/xlink}href"

REQUIRED_OVERLAY_KEYS = [
    ("name",),
    ("style", "fill"),
    ("hull", "boundary"),
    ("hull", "area"),
    ("hull", "perimeter"),
    ("hull", "simple"),
    ("padded_boundary",),
    ("curve", "family"),
    ("curve", "path_data"),
    ("label", "text"),
    ("label", "anchor"),
    ("label", "bbox"),
]


@pytest.fixture(scope="module")
def layout() -> OverlayLayout:
    return smoke.build_demo_layout()


def test_demo_layout_places_every_group(layout: OverlayLayout) -> None:
    assert len(layout.overlays) == 3
    areas = [o.hull.area for o in layout.overlays]
    assert areas == sorted(areas, reverse=True)
    assert len(layout.obstacles) == 8


def test_overlay_dict_has_required_keys(layout: OverlayLayout) -> None:
    for overlay in layout.overlays:
        d = overlay_to_dict(overlay)
        for path in REQUIRED_OVERLAY_KEYS:
            node = d
            for key in path:
                assert key in node, f"missing {'.'.join(path)}"
                node = node[key]
        assert d["curve"]["family"] == "catmull-rom"
        assert d["hull"]["area"] > 0


def test_layout_dict_is_json_serializable(layout: OverlayLayout) -> None:
    d = layout_to_dict(layout)
    assert d["schema_version"] == SCHEMA_VERSION == "1.0"
    assert d["summary"]["n_overlays"] == 3
    assert d["config"]["curve"] == {"family": "catmull-rom", "alpha": 0.5}
    assert json.loads(json.dumps(d))["overlays"][0]["name"] == layout.overlays[0].group.name


def test_write_overlays_json(tmp_path: Path, layout: OverlayLayout) -> None:
    report_dir = ensure_report_dir(tmp_path, "run1")
    assert report_dir.is_dir()
    path = write_overlays_json(report_dir, layout)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert path.name == "overlays.json"
    assert len(data["overlays"]) == 3


def test_export_svg_structure(tmp_path: Path, layout: OverlayLayout) -> None:
    out = export_overlay_svg(layout, tmp_path / "overlay.svg")
    root = ET.parse(out).getroot()
    assert root.tag == f"{SVG}svg"

    paths = root.findall(f".//{SVG}path")
    assert len(paths) == 3
    entities = {p.get("data-hull-entity") for p in paths}
    assert entities == {"Edge", "Payments", "Async\nprocessing"}
    assert all(p.get("data-curve-type") == "catmull-rom" for p in paths)
    assert all(p.find(f"{SVG}title") is not None for p in paths)

    links = root.findall(f".//{SVG}a")
    assert len(links) == 1
    assert links[0].get(XLINK_HREF) == "https://example.org/payments"

    labels = [t for t in root.iter(f"{SVG}text") if t.get("data-label-for")]
    assert len(labels) == 3
    multi = next(t for t in labels if t.get("data-label-for") == "Async\nprocessing")
    assert [s.text for s in multi.findall(f"{SVG}tspan")] == ["Async", "processing"]


def test_text_color_for_fill() -> None:
    dark = text_color_for_fill("#E5F3FF")
    assert dark.startswith("#") and len(dark) == 7
    assert dark != "#e5f3ff"
    assert text_color_for_fill("#abc") == text_color_for_fill("#aabbcc")
    assert text_color_for_fill("steelblue") == "#374151"


def test_smoke_main_writes_reports(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    smoke.main()
    report_dir = tmp_path / "reports" / "smoke"
    assert (report_dir / "overlays.json").is_file()
    assert (report_dir / "overlay.svg").is_file()
