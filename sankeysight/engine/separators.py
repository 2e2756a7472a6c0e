"""Dashed section breaks drawn after selected losses."""

from __future__ import annotations

from sankeysight.engine.config import LayoutConfig
from sankeysight.engine.cursor import BandCursor
from sankeysight.engine.primitives import Stroke

# Anchor ratio along the top edge when secondary inputs make the tail ragged
_STACKED_ANCHOR_RATIO = 0.1


def separator_anchor(cursor: BandCursor, has_secondary: bool, config: LayoutConfig) -> float:
    """Left x of the divider.

    With a single input the tail chevron of the unit-height band is exact,
    so the line starts on it; otherwise it starts a tenth of the way along.
    """
    if has_secondary:
        return _STACKED_ANCHOR_RATIO * cursor.pos_top
    return config.notch_depth * (1 - 2 * abs(cursor.lim_top - 0.5))


def render_separator(
    cursor: BandCursor, has_secondary: bool, config: LayoutConfig | None = None
) -> Stroke:
    """Dashed horizontal line at the current top edge. Cursor is left untouched."""
    config = config or LayoutConfig()
    x_left = separator_anchor(cursor, has_secondary, config)
    return Stroke(
        ((x_left, cursor.lim_top), (cursor.pos_top, cursor.lim_top)),
        width=config.separator_width,
        dashed=True,
        role="separator",
    )
