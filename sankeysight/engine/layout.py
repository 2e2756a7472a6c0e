"""Sankey layout orchestrator — flow magnitudes in, ordered vector scene out.

One linear pass: validate, normalize, stack inputs (bands), peel losses off
the top (each loss fills its slab of the bands), optional separators,
then the output arrow. Cursor state is threaded step to step; nothing
outlives the call.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Collection, Sequence

from sankeysight.engine.config import LayoutConfig
from sankeysight.engine.fractions import FlowSet, compute_fractions
from sankeysight.engine.inputs import render_dividers, render_inputs
from sankeysight.engine.losses import render_loss
from sankeysight.engine.output import render_output
from sankeysight.engine.primitives import RGB, Scene, Viewport
from sankeysight.engine.separators import render_separator
from sankeysight.engine.validator import validate_flows

logger = logging.getLogger(__name__)


def _as_rgb(colour: Sequence[float]) -> RGB:
    r, g, b = (float(c) for c in colour[:3])
    return (r, g, b)


def compute_viewport(flows: FlowSet, tip_x: float, config: LayoutConfig) -> Viewport:
    """Axis limits framing the whole diagram at equal aspect."""
    f0 = float(flows.fr_inputs[0])
    first_loss = float(flows.fr_losses[0]) if len(flows.fr_losses) else 0.0
    return Viewport(
        xmin=-config.margin_left,
        xmax=tip_x + config.margin_right,
        ymin=f0 - float(flows.fr_inputs.sum()) - config.margin_vertical,
        ymax=f0 + first_loss + config.margin_vertical,
    )


def draw_sankey(
    inputs: Sequence[float],
    losses: Sequence[float],
    unit: str,
    labels: Sequence[str],
    colours: Sequence[Sequence[float]],
    separators: Collection[int] | None = None,
    config: LayoutConfig | None = None,
) -> Scene:
    """Lay out a single-output Sankey diagram.

    Args:
        inputs: input magnitudes; the first is drawn as the main arrow,
            the rest are stacked beneath it.
        losses: loss magnitudes, drawn left to right along the top.
        unit: unit string shown in labels.
        labels: one label per input, then per loss, then the output.
        colours: RGB triples in [0, 1], one per loss then one for the output.
        separators: 1-based loss numbers after which a dashed line is drawn.
        config: geometry constants; defaults to LayoutConfig().

    Raises:
        SankeyError: on unbalanced, negative, or under-specified data.
    """
    start = time.perf_counter()
    validate_flows(inputs, losses, colours, labels)

    config = config or LayoutConfig()
    flows = compute_fractions(inputs, losses)
    palette = [_as_rgb(c) for c in colours]
    breaks = set(separators or ())
    has_secondary = flows.has_secondary(config.negligible)

    cursor, primitives = render_inputs(flows, labels, unit, config)

    n_inputs = len(flows.inputs)
    for i in range(len(flows.losses)):
        cursor, step, _ = render_loss(
            cursor, i, flows, labels[n_inputs + i], unit, palette[i], config
        )
        primitives.extend(step)
        if i + 1 in breaks:
            primitives.append(render_separator(cursor, has_secondary, config))

    out_index = len(flows.losses)
    tip_x, step, _ = render_output(
        cursor, flows, labels[n_inputs + out_index], unit, out_index, palette[out_index], config
    )
    primitives.extend(step)
    primitives.extend(render_dividers(cursor, config))

    scene = Scene(
        primitives=primitives,
        viewport=compute_viewport(flows, tip_x, config),
        bands=cursor.bands,
        flows=flows,
        unit=unit,
    )

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Sankey laid out: %d inputs, %d losses -> %d strokes, %d fills, %d labels in %.1fms",
        n_inputs,
        len(flows.losses),
        len(scene.strokes),
        len(scene.fills),
        len(scene.texts),
        elapsed,
    )
    return scene
