"""Write SVG markup for a laid-out Sankey scene."""

from __future__ import annotations

from html import escape
from typing import Any

from sankeysight.engine.primitives import Fill, Scene, Stroke, Text, Viewport

# Pixels per diagram unit (1.0 == total input)
_PX_PER_UNIT = 500.0

# Line spacing for multi-line labels
_LINE_EM = 1.2

_DASH = "8 4"


def _attr_str(elem: dict[str, Any]) -> str:
    attrs = {k: v for k, v in elem.items() if k not in ("tag", "children", "text")}
    return " ".join(f'{k}="{escape(str(v), quote=True)}"' for k, v in attrs.items())


def _element_lines(elem: dict[str, Any], indent: str) -> list[str]:
    tag = elem.get("tag", "path")
    attr_str = _attr_str(elem)
    if "children" in elem:
        inner = "".join(
            f"<{c.get('tag', 'tspan')} {_attr_str(c)}>{escape(c.get('text', ''))}</{c.get('tag', 'tspan')}>"
            for c in elem["children"]
        )
        return [f"{indent}<{tag} {attr_str}>{inner}</{tag}>"]
    if "text" in elem:
        return [f"{indent}<{tag} {attr_str}>{escape(elem['text'])}</{tag}>"]
    return [f"{indent}<{tag} {attr_str} />"]


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 24.0,
    canvas_h: float = 24.0,
    title: str = "",
) -> str:
    """Generate SVG markup from element definitions.

    Each element is a dict with a ``tag``, attribute keys, and optionally
    ``text`` content or ``children`` (a list of element dicts, one level deep).
    """
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {canvas_w:.1f} {canvas_h:.1f}" width="{canvas_w:.0f}" height="{canvas_h:.0f}"'
        ' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    for elem in elements:
        lines.extend(_element_lines(elem, "  "))

    lines.append("</svg>")
    return "\n".join(lines)


class _Projection:
    """Diagram space (y up) to SVG pixel space (y down)."""

    def __init__(self, viewport: Viewport, scale: float) -> None:
        self.vp = viewport
        self.scale = scale

    def __call__(self, x: float, y: float) -> tuple[float, float]:
        return (x - self.vp.xmin) * self.scale, (self.vp.ymax - y) * self.scale

    def points(self, pts: tuple[tuple[float, float], ...]) -> str:
        return " ".join("{:.2f},{:.2f}".format(*self(x, y)) for x, y in pts)


def _rgb(colour: tuple[float, float, float]) -> str:
    r, g, b = (round(255 * max(0.0, min(1.0, c))) for c in colour)
    return f"rgb({r},{g},{b})"


def _fill_element(fill: Fill, proj: _Projection) -> dict[str, Any]:
    return {
        "tag": "polygon",
        "points": proj.points(fill.points),
        "fill": _rgb(fill.colour),
        "stroke": "none",
        "class": fill.role,
    }


def _stroke_element(stroke: Stroke, proj: _Projection) -> dict[str, Any]:
    elem: dict[str, Any] = {
        "tag": "polyline",
        "points": proj.points(stroke.points),
        "fill": "none",
        "stroke": "black",
        "stroke-width": f"{stroke.width:g}",
        "stroke-linejoin": "round",
        "class": stroke.role,
    }
    if stroke.dashed:
        elem["stroke-dasharray"] = _DASH
    return elem


def _text_element(text: Text, proj: _Projection) -> dict[str, Any]:
    x, y = proj(text.x, text.y)
    rows = text.text.split("\n")
    anchor = {"left": "start", "right": "end", "center": "middle"}.get(text.align, "start")
    elem: dict[str, Any] = {
        "tag": "text",
        "x": f"{x:.2f}",
        "y": f"{y:.2f}",
        "font-size": text.font_size,
        "font-family": "sans-serif",
        "text-anchor": anchor,
    }
    if text.rotation:
        elem["transform"] = f"rotate({-text.rotation:g} {x:.2f} {y:.2f})"
        first_dy = 0.0
    else:
        # vertically centre the block on the anchor
        first_dy = 0.35 - (len(rows) - 1) * _LINE_EM / 2
    elem["children"] = [
        {"tag": "tspan", "x": f"{x:.2f}", "dy": f"{first_dy if i == 0 else _LINE_EM:.2f}em", "text": row}
        for i, row in enumerate(rows)
    ]
    return elem


def scene_to_svg(scene: Scene, scale: float = _PX_PER_UNIT, title: str = "Sankey diagram") -> str:
    """Serialize a scene: fills, then outlines, then labels, each in paint order."""
    proj = _Projection(scene.viewport, scale)
    elements: list[dict[str, Any]] = []
    elements.extend(_fill_element(f, proj) for f in scene.fills)
    elements.extend(_stroke_element(s, proj) for s in scene.strokes)
    elements.extend(_text_element(t, proj) for t in scene.texts)
    return serialize_svg(
        elements,
        canvas_w=scene.viewport.width * scale,
        canvas_h=scene.viewport.height * scale,
        title=title,
    )
