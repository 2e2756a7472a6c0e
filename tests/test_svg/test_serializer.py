"""Tests for SVG serialization."""

from __future__ import annotations

from xml.etree import ElementTree as ET

from sankeysight.engine.layout import draw_sankey
from sankeysight.svg.serializer import scene_to_svg, serialize_svg
from tests.conftest import PASSTHROUGH, PLANT

NS = {"svg": "http://www.w3.org/2000/svg"}


def _parse(markup: str) -> ET.Element:
    return ET.fromstring(markup.split("\n", 1)[1])


def test_serialize_escapes_attributes_and_text():
    svg = serialize_svg(
        [{"tag": "text", "x": "1", "y": "2", "text": "a < b & c"}],
        canvas_w=10,
        canvas_h=10,
        title="T&C",
    )
    root = _parse(svg)
    assert root.find("svg:title", NS).text == "T&C"
    assert root.find("svg:text", NS).text == "a < b & c"


def test_scene_counts_match_primitives():
    scene = draw_sankey(**PLANT)
    root = _parse(scene_to_svg(scene))
    assert len(root.findall("svg:polygon", NS)) == len(scene.fills)
    assert len(root.findall("svg:polyline", NS)) == len(scene.strokes)
    assert len(root.findall("svg:text", NS)) == len(scene.texts)


def test_fills_painted_before_strokes_and_text():
    scene = draw_sankey(**PLANT)
    root = _parse(scene_to_svg(scene))
    tags = [el.tag.split("}")[1] for el in root if el.tag.split("}")[1] != "title"]
    assert tags.index("polyline") > max(i for i, t in enumerate(tags) if t == "polygon")
    assert tags.index("text") > max(i for i, t in enumerate(tags) if t == "polyline")


def test_separator_is_dashed():
    scene = draw_sankey(**PLANT)
    root = _parse(scene_to_svg(scene))
    dashed = [el for el in root.findall("svg:polyline", NS) if el.get("stroke-dasharray")]
    assert len(dashed) == 1
    assert dashed[0].get("class") == "separator"


def test_multiline_labels_use_tspans():
    scene = draw_sankey(**PASSTHROUGH)
    root = _parse(scene_to_svg(scene))
    first = root.findall("svg:text", NS)[0]
    spans = first.findall("svg:tspan", NS)
    assert [s.text for s in spans] == ["Feed", "50.0 [kW]"]
    assert first.get("text-anchor") == "end"


def test_y_axis_is_flipped():
    scene = draw_sankey(**PASSTHROUGH)
    root = _parse(scene_to_svg(scene, scale=100.0))
    # viewport spans x from -0.15 and y down from 1.4; the outline starts at (0.1, 0.0)
    outline = root.findall("svg:polyline", NS)[0]
    first_point = outline.get("points").split()[0]
    assert first_point == "25.00,140.00"
    assert root.get("viewBox") == "0 0 150.0 180.0"
