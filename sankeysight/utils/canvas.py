"""Matplotlib binding — paint a Scene onto an Axes or into a PNG."""

from __future__ import annotations

import io

import matplotlib

matplotlib.use("Agg")
import matplotlib.patches as mpatches
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

from sankeysight.engine.primitives import Fill, Scene, Stroke, Text

# Fills under outlines under labels, independent of paint order within a kind
_Z_FILL = 1
_Z_STROKE = 2
_Z_TEXT = 3

# Figure size used when rendering standalone images (inches)
_FIG_SIZE = (12.0, 8.0)


def draw_scene(ax: Axes, scene: Scene) -> Axes:
    """Add every primitive of the scene to ``ax`` and frame it."""
    for prim in scene.primitives:
        if isinstance(prim, Fill):
            ax.add_patch(
                mpatches.Polygon(
                    prim.points,
                    closed=True,
                    facecolor=prim.colour,
                    edgecolor="none",
                    zorder=_Z_FILL,
                )
            )
        elif isinstance(prim, Stroke):
            xs, ys = zip(*prim.points)
            ax.add_line(
                Line2D(
                    xs,
                    ys,
                    color="black",
                    linewidth=prim.width,
                    linestyle="--" if prim.dashed else "-",
                    zorder=_Z_STROKE,
                )
            )
        elif isinstance(prim, Text):
            ax.text(
                prim.x,
                prim.y,
                prim.text,
                fontsize=prim.font_size,
                rotation=prim.rotation,
                horizontalalignment=prim.align,
                verticalalignment="center" if prim.rotation == 0 else "bottom",
                zorder=_Z_TEXT,
            )

    vp = scene.viewport
    ax.set_aspect("equal")
    ax.set_xlim(vp.xmin, vp.xmax)
    ax.set_ylim(vp.ymin, vp.ymax)
    ax.set_axis_off()
    return ax


def scene_to_figure(scene: Scene) -> Figure:
    fig = Figure(figsize=_FIG_SIZE, facecolor="white")
    ax = fig.add_axes((0.1, 0.0, 0.75, 0.75))
    draw_scene(ax, scene)
    return fig


def scene_to_png(scene: Scene, dpi: int = 150) -> bytes:
    """Render the scene to PNG bytes."""
    fig = scene_to_figure(scene)
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=dpi, facecolor="white")
    return buf.getvalue()
