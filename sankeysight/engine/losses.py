"""Loss arrows — side flows peeled off the top of the main arrow, left to right."""

from __future__ import annotations

import logging

import numpy as np

from sankeysight.engine.arcs import bend_radii, loss_arcs
from sankeysight.engine.bands import BandFillResult, fill_slab
from sankeysight.engine.config import LayoutConfig
from sankeysight.engine.cursor import BandCursor
from sankeysight.engine.fractions import FlowSet
from sankeysight.engine.labels import LabelRole, size_label
from sankeysight.engine.primitives import RGB, Fill, Primitive, Stroke, Text, as_points

logger = logging.getLogger(__name__)


def loss_tip(pos_top: float, lim_top: float, f: float, config: LayoutConfig) -> tuple[tuple[float, float], ...]:
    """Five-point arrowhead capping the vertical end of a loss arrow."""
    r_i, _ = bend_radii(f, config)
    edge = max(config.loss_tip_edge_min, r_i / 3)
    height = max(config.loss_tip_height_min, config.tip_height_ratio * f)
    x0 = pos_top + r_i
    y0 = lim_top + r_i
    return (
        (x0, y0),
        (x0 - edge, y0),
        (x0 + f / 2, y0 + height),
        (x0 + f + edge, y0),
        (x0 + f, y0),
    )


def render_loss(
    cursor: BandCursor,
    index: int,
    flows: FlowSet,
    name: str,
    unit: str,
    colour: RGB,
    config: LayoutConfig | None = None,
) -> tuple[BandCursor, list[Primitive], BandFillResult | None]:
    """Draw loss ``index`` and colour the slab it drains from the input bands.

    The band fill runs inside this step, against the cursor as it was
    before the loss was removed, so the two stay in lockstep.
    """
    config = config or LayoutConfig()
    f = float(flows.fr_losses[index])
    if f <= config.negligible:
        logger.debug("Loss %d negligible (%.3g), skipped", index, f)
        return cursor, [], None

    pos_top, lim_top = cursor.pos_top, cursor.lim_top
    r_i, r_e = bend_radii(f, config)
    arc_i, arc_e = loss_arcs(pos_top, lim_top, f, config)
    tip = loss_tip(pos_top, lim_top, f, config)

    prims: list[Primitive] = [
        Fill(as_points(np.vstack([arc_e, arc_i[::-1]])), index, colour, role="loss_arc"),
        Fill(tip, index, colour, role="loss_tip"),
    ]

    # leading edge of the branch: inner arc starts at lim_top, outer at lim_top - f
    new_lim = lim_top - f
    slab = fill_slab(
        cursor.bands,
        top=lim_top,
        bottom=new_lim,
        x_right=pos_top,
        colour_index=index,
        colour=colour,
    )
    prims.extend(slab.fills)

    new_pos = pos_top + r_e + config.junction_gap
    prims.extend(
        [
            Stroke(as_points(arc_i), width=config.outline_width),
            Stroke(as_points(arc_e), width=config.outline_width),
            Stroke(tip, width=config.outline_width),
            Stroke(((pos_top, new_lim), (new_pos, new_lim)), width=config.outline_width),
        ]
    )

    height = tip[2][1] - tip[0][1]
    style = size_label(name, float(flows.losses[index]), unit, f, LabelRole.LOSS, config=config)
    prims.append(
        Text(
            style.text,
            pos_top + r_i + f / 2,
            lim_top + r_i + height + config.loss_label_offset,
            style.font_size,
            rotation=90.0,
        )
    )

    logger.debug(
        "Loss %d: fraction %.4f, %d band fills, pos_top %.4f -> %.4f",
        index,
        f,
        len(slab.fills),
        pos_top,
        new_pos,
    )
    return cursor.advance_top(new_pos, new_lim), prims, slab
