"""Input arrows — the primary arrow plus secondary inputs stacked beneath it.

Each input contributes one Band. Band order follows input order, top to
bottom; a negligible input still gets a (zero-height) band so band k always
belongs to input k.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from sankeysight.engine.arcs import bend_radii, input_arcs
from sankeysight.engine.config import LayoutConfig
from sankeysight.engine.cursor import Band, BandCursor
from sankeysight.engine.fractions import FlowSet
from sankeysight.engine.labels import LabelRole, size_label
from sankeysight.engine.primitives import Primitive, Stroke, Text, as_points

logger = logging.getLogger(__name__)


def render_primary(
    flows: FlowSet, name: str, unit: str, config: LayoutConfig
) -> tuple[BandCursor, list[Primitive]]:
    """Horizontal arrow for the first input, tail chevron on the left."""
    f0 = float(flows.fr_inputs[0])
    style = size_label(
        name,
        float(flows.inputs[0]),
        unit,
        f0,
        LabelRole.PRIMARY,
        show_percent=flows.significant_inputs(config.negligible) > 1,
        config=config,
    )
    prims: list[Primitive] = [
        Text(style.text, 0.0, f0 / 2, style.font_size, align="right"),
        Stroke(
            (
                (config.primary_bottom_length, 0.0),
                (0.0, 0.0),
                (config.notch_depth, f0 / 2),
                (0.0, f0),
                (config.primary_top_length, f0),
            ),
            width=config.outline_width,
        ),
    ]
    cursor = BandCursor(
        pos_top=config.primary_top_length,
        pos_bot=config.primary_bottom_length,
        lim_top=f0,
        bands=(Band(0, f0, 0.0, config.notch_depth),),
    )
    return cursor, prims


def render_secondary(
    cursor: BandCursor,
    index: int,
    flows: FlowSet,
    name: str,
    unit: str,
    config: LayoutConfig,
) -> tuple[BandCursor, list[Primitive]]:
    """Stack input ``index`` below the current bottom band."""
    f = float(flows.fr_inputs[index])
    lim_bot = cursor.lim_bot

    if f <= config.negligible:
        logger.debug("Input %d negligible (%.3g), empty band", index, f)
        return cursor.with_band(Band(index, lim_bot, lim_bot, config.notch_depth)), []

    _, r_e = bend_radii(f, config)
    pos_bot = cursor.pos_bot + r_e * math.sin(math.pi / 4) + config.junction_gap
    prims: list[Primitive] = [
        Stroke(((cursor.pos_bot, lim_bot), (pos_bot, lim_bot)), width=config.outline_width)
    ]

    if config.input_junction_arcs:
        arc_i, arc_e = input_arcs(pos_bot, lim_bot, f, config)
        prims.append(Stroke(as_points(arc_i), width=config.outline_width, role="junction"))
        prims.append(Stroke(as_points(arc_e), width=config.outline_width, role="junction"))

    # tail chevron and bottom edge
    prims.append(
        Stroke(
            (
                (0.0, lim_bot),
                (config.notch_depth, lim_bot - f / 2),
                (0.0, lim_bot - f),
                (pos_bot, lim_bot - f),
            ),
            width=config.outline_width,
        )
    )

    style = size_label(name, float(flows.inputs[index]), unit, f, LabelRole.INPUT, config=config)
    prims.append(Text(style.text, 0.0, lim_bot - f / 2, style.font_size, align="right"))

    band = Band(index, lim_bot, lim_bot - f, config.notch_depth)
    return cursor.advance_bottom(pos_bot).with_band(band), prims


def render_inputs(
    flows: FlowSet,
    labels: Sequence[str],
    unit: str,
    config: LayoutConfig | None = None,
) -> tuple[BandCursor, list[Primitive]]:
    """Lay out every input arrow; returns the cursor with all bands established."""
    config = config or LayoutConfig()
    cursor, prims = render_primary(flows, labels[0], unit, config)
    for j in range(1, len(flows.fr_inputs)):
        cursor, step = render_secondary(cursor, j, flows, labels[j], unit, config)
        prims.extend(step)
    logger.debug(
        "Inputs laid out: %d bands, bottom at %.4f, pos_bot %.4f",
        len(cursor.bands),
        cursor.lim_bot,
        cursor.pos_bot,
    )
    return cursor, prims


def render_dividers(cursor: BandCursor, config: LayoutConfig | None = None) -> list[Stroke]:
    """Thin lines marking each boundary between stacked input bands."""
    config = config or LayoutConfig()
    return [
        Stroke(
            ((0.0, band.bottom), (config.primary_top_length, band.bottom)),
            width=config.divider_width,
            role="divider",
        )
        for band in cursor.bands[:-1]
        if band.height > 0
    ]
