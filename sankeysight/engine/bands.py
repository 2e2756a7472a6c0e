"""Band fill engine — colour a flow slab band by band.

A slab is the vertical interval [bottom, top] a loss (or the output)
occupies on the main arrow. Walking the stacked input bands top to bottom,
the slab is cut at every band boundary and at every band midpoint (where
the tail chevron bends), so each emitted polygon is a quadrilateral from
the chevron to ``x_right`` that stays inside one half of one band.

States:
    SCANNING            locate the band holding the slab's current top
    EMITTING_REMAINDER  slab runs past the band bottom: fill the rest of
                        the band, clamp top to the band bottom, next band
    EMITTING_SPLIT      slab ends inside the band: fill it (split at the
                        midpoint if it straddles it), then stop
    DONE                no slab left or no bands left

Tie-break: a piece whose bottom sits exactly on a midpoint belongs to the
upper half, one whose top sits exactly on it to the lower half, and
zero-height pieces are never emitted.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from sankeysight.engine.cursor import Band
from sankeysight.engine.primitives import RGB, Fill

logger = logging.getLogger(__name__)

# Pieces thinner than this are degenerate
_MIN_PIECE = 1e-12


class FillState(enum.Enum):
    SCANNING = "scanning"
    EMITTING_SPLIT = "emitting_split"
    EMITTING_REMAINDER = "emitting_remainder"
    DONE = "done"


@dataclass
class BandFillResult:
    fills: list[Fill] = field(default_factory=list)
    trace: list[FillState] = field(default_factory=list)
    bands_visited: list[int] = field(default_factory=list)


def _quad(band: Band, lo: float, hi: float, x_right: float) -> tuple[tuple[float, float], ...]:
    return (
        (band.notch_x(lo), lo),
        (band.notch_x(hi), hi),
        (x_right, hi),
        (x_right, lo),
    )


def band_pieces(band: Band, lo: float, hi: float, x_right: float) -> list[tuple[tuple[float, float], ...]]:
    """Quads covering [lo, hi] inside one band, split at the band midpoint."""
    if hi - lo <= _MIN_PIECE:
        return []
    mid = band.mid
    if lo >= mid or hi <= mid:
        return [_quad(band, lo, hi, x_right)]
    return [_quad(band, mid, hi, x_right), _quad(band, lo, mid, x_right)]


def fill_slab(
    bands: Sequence[Band],
    top: float,
    bottom: float,
    x_right: float,
    colour_index: int,
    colour: RGB,
    role: str = "band",
) -> BandFillResult:
    """Emit fills for the slab [bottom, top] across the stacked bands."""
    result = BandFillResult()
    state = FillState.SCANNING
    slab_top = top
    k = 0

    while state is not FillState.DONE:
        result.trace.append(state)

        if state is FillState.SCANNING:
            if k >= len(bands) or top - bottom <= _MIN_PIECE:
                state = FillState.DONE
            elif top <= bands[k].bottom:
                k += 1
            elif bottom >= bands[k].bottom:
                state = FillState.EMITTING_SPLIT
            else:
                state = FillState.EMITTING_REMAINDER

        elif state is FillState.EMITTING_SPLIT:
            band = bands[k]
            result.bands_visited.append(band.index)
            for pts in band_pieces(band, bottom, top, x_right):
                result.fills.append(Fill(pts, colour_index, colour, role))
            state = FillState.DONE

        elif state is FillState.EMITTING_REMAINDER:
            band = bands[k]
            result.bands_visited.append(band.index)
            for pts in band_pieces(band, band.bottom, top, x_right):
                result.fills.append(Fill(pts, colour_index, colour, role))
            top = band.bottom
            k += 1
            state = FillState.SCANNING

    result.trace.append(FillState.DONE)
    logger.debug(
        "Slab [%.4f, %.4f] colour %d: %d fills over bands %s",
        bottom,
        slab_top,
        colour_index,
        len(result.fills),
        result.bands_visited,
    )
    return result
