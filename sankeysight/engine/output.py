"""Output arrow — run-out, band-attributed fill, kite arrowhead and label."""

from __future__ import annotations

import logging

from sankeysight.engine.bands import BandFillResult, fill_slab
from sankeysight.engine.config import LayoutConfig
from sankeysight.engine.cursor import BandCursor
from sankeysight.engine.fractions import FlowSet
from sankeysight.engine.labels import LabelRole, size_label
from sankeysight.engine.primitives import RGB, Fill, Primitive, Stroke, Text

logger = logging.getLogger(__name__)


def output_runout(cursor: BandCursor, config: LayoutConfig) -> float:
    """x where the output arrowhead starts, a little past every side arrow."""
    return max(cursor.pos_top, cursor.pos_bot) + max(
        config.output_runout_ratio * cursor.lim_top, config.output_runout_min
    )


def output_head(
    x: float, top: float, bottom: float, config: LayoutConfig
) -> tuple[tuple[float, float], ...]:
    """Kite arrowhead for the output band [bottom, top] starting at x."""
    thickness = top - bottom
    length = max(config.loss_tip_height_min, config.tip_height_ratio * thickness)
    barb = max(config.loss_tip_edge_min, thickness / 3)
    return (
        (x, bottom),
        (x, bottom - barb),
        (x + length, (top + bottom) / 2),
        (x, top + barb),
        (x, top),
    )


def fill_output(
    cursor: BandCursor, x_right: float, colour_index: int, colour: RGB
) -> BandFillResult:
    """Colour the output slab, attributing it to the bands it crosses.

    A single input has nothing to attribute: the slab becomes one polygon
    whose left side follows the tail chevron (through its apex when the
    slab reaches above the band midpoint) and whose right side is
    ``x_right``.
    """
    top, bottom = cursor.lim_top, cursor.lim_bot
    if len(cursor.bands) == 1:
        band = cursor.band(0)
        outline: list[tuple[float, float]] = [(band.notch_x(top), top)]
        if top > band.mid:
            outline.append((band.notch_x(band.mid), band.mid))
        outline.extend([(band.notch_x(bottom), bottom), (x_right, bottom), (x_right, top)])
        return BandFillResult(fills=[Fill(tuple(outline), colour_index, colour, role="output_band")])
    return fill_slab(cursor.bands, top, bottom, x_right, colour_index, colour, role="output_band")


def render_output(
    cursor: BandCursor,
    flows: FlowSet,
    name: str,
    unit: str,
    colour_index: int,
    colour: RGB,
    config: LayoutConfig | None = None,
) -> tuple[float, list[Primitive], BandFillResult]:
    """Finish the diagram. Returns the arrow tip x, primitives and the fill result."""
    config = config or LayoutConfig()
    x = output_runout(cursor, config)
    top, bottom = cursor.lim_top, cursor.lim_bot

    filled = fill_output(cursor, x, colour_index, colour)
    head = output_head(x, top, bottom, config)
    tip_x = head[2][0]

    prims: list[Primitive] = list(filled.fills)
    prims.append(Fill(head, colour_index, colour, role="output_tip"))
    prims.extend(
        [
            Stroke(((cursor.pos_top, top), (x, top)), width=config.outline_width),
            Stroke(((cursor.pos_bot, bottom), (x, bottom)), width=config.outline_width),
            Stroke(head, width=config.outline_width),
        ]
    )

    style = size_label(name, flows.output, unit, flows.fr_output, LabelRole.OUTPUT, config=config)
    # label tracks the unfloored head length so thin outputs keep it close
    label_x = x + config.tip_height_ratio * (top - bottom) + config.output_label_offset
    prims.append(Text(style.text, label_x, (top + bottom) / 2, style.font_size))

    logger.debug(
        "Output: band [%.4f, %.4f], %d fills, tip at %.4f",
        bottom,
        top,
        len(filled.fills),
        tip_x,
    )
    return tip_x, prims, filled
