"""Arc sampling for the bends where side arrows join the main spine."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from sankeysight.engine.config import LayoutConfig


def bend_radii(f: float, config: LayoutConfig | None = None) -> tuple[float, float]:
    """(inner, outer) bend radius for a flow of fraction f.

    Inner radius never drops below the configured floor so thin flows
    still curve visibly; outer = inner + flow width.
    """
    config = config or LayoutConfig()
    r_inner = max(config.min_bend_radius, abs(f) / 2)
    return r_inner, r_inner + abs(f)


def arc_points(
    center: tuple[float, float],
    radius: float,
    start: float,
    sweep: float,
    n: int = 50,
) -> NDArray[np.float64]:
    """Sample n points along a circular arc. Returns (n, 2) array of (x, y)."""
    theta = start + np.linspace(0.0, sweep, n)
    cx, cy = center
    return np.column_stack([cx + radius * np.cos(theta), cy + radius * np.sin(theta)])


def arc_pair(
    center: tuple[float, float],
    r_inner: float,
    r_outer: float,
    start: float,
    sweep: float,
    n: int = 50,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Concentric inner/outer arcs bounding one arrow's thickness."""
    return (
        arc_points(center, r_inner, start, sweep, n),
        arc_points(center, r_outer, start, sweep, n),
    )


def loss_arcs(
    pos_top: float, lim_top: float, f: float, config: LayoutConfig
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Quarter-circle pair turning a loss from horizontal to vertical.

    Inner arc starts at (pos_top, lim_top); outer at (pos_top, lim_top - f).
    Both end pointing straight up at height lim_top + r_inner.
    """
    r_i, r_e = bend_radii(f, config)
    return arc_pair((pos_top, lim_top + r_i), r_i, r_e, -math.pi / 2, math.pi / 2, config.arc_samples)


def input_arcs(
    pos_bot: float, lim_bot: float, f: float, config: LayoutConfig
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Eighth-circle pair joining a secondary input to the spine.

    Outer arc starts at (pos_bot, lim_bot); inner at (pos_bot, lim_bot - f).
    """
    r_i, r_e = bend_radii(f, config)
    return arc_pair((pos_bot, lim_bot - r_e), r_i, r_e, math.pi / 2, math.pi / 4, config.arc_samples)
