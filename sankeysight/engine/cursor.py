"""Immutable layout cursor and input bands.

Every layout step takes a BandCursor and returns a new one; nothing is
mutated in place, so the numeric state each step sees is explicit.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Band:
    """Vertical territory [bottom, top] owned by one input.

    The input's tail is a chevron: x = 0 at the band edges, x = notch_depth
    at the midpoint. Fills start at this chevron.
    """

    index: int
    top: float
    bottom: float
    notch_depth: float = 0.05

    @property
    def mid(self) -> float:
        return (self.top + self.bottom) / 2

    @property
    def height(self) -> float:
        return self.top - self.bottom

    def notch_x(self, y: float) -> float:
        """x-coordinate of the tail chevron at height y (clamped to the band)."""
        half = self.height / 2
        if half <= 0:
            return 0.0
        y = min(max(y, self.bottom), self.top)
        if y >= self.mid:
            return self.notch_depth * (self.top - y) / half
        return self.notch_depth * (y - self.bottom) / half


@dataclass(frozen=True)
class BandCursor:
    """Drawing progress: rightward positions and vertical extents."""

    pos_top: float
    pos_bot: float
    lim_top: float
    bands: tuple[Band, ...] = ()

    @property
    def lim_bot(self) -> float:
        """Bottom edge of the lowest band stacked so far."""
        assert self.bands, "no bands established"
        return self.bands[-1].bottom

    def band(self, k: int) -> Band:
        assert 0 <= k < len(self.bands), f"band index {k} out of range ({len(self.bands)})"
        return self.bands[k]

    def with_band(self, band: Band) -> BandCursor:
        return replace(self, bands=self.bands + (band,))

    def advance_top(self, pos_top: float, lim_top: float) -> BandCursor:
        return replace(self, pos_top=pos_top, lim_top=lim_top)

    def advance_bottom(self, pos_bot: float) -> BandCursor:
        return replace(self, pos_bot=pos_bot)
