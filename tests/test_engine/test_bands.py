"""Tests for the band fill state machine."""

from __future__ import annotations

import pytest

from sankeysight.engine.bands import FillState, band_pieces, fill_slab
from sankeysight.engine.cursor import Band
from sankeysight.utils.geometry import overlap_area, union_area

RED = (1.0, 0.0, 0.0)

S = FillState.SCANNING
SPLIT = FillState.EMITTING_SPLIT
REM = FillState.EMITTING_REMAINDER
DONE = FillState.DONE


def _stack() -> list[Band]:
    return [Band(0, 1.0, 0.5), Band(1, 0.5, 0.0), Band(2, 0.0, -0.5)]


class TestBand:
    def test_notch_follows_chevron(self):
        band = Band(0, 1.0, 0.0, notch_depth=0.05)
        assert band.mid == pytest.approx(0.5)
        assert band.notch_x(1.0) == pytest.approx(0.0)
        assert band.notch_x(0.5) == pytest.approx(0.05)
        assert band.notch_x(0.75) == pytest.approx(0.025)
        assert band.notch_x(0.0) == pytest.approx(0.0)

    def test_zero_height_band_has_flat_notch(self):
        assert Band(3, 0.2, 0.2).notch_x(0.2) == 0.0


class TestBandPieces:
    def test_upper_half_is_one_quad(self):
        assert len(band_pieces(Band(0, 1.0, 0.0), 0.6, 0.9, 1.0)) == 1

    def test_straddling_midpoint_splits(self):
        pieces = band_pieces(Band(0, 1.0, 0.0), 0.3, 0.9, 1.0)
        assert len(pieces) == 2
        upper, lower = pieces
        assert min(y for _, y in upper) == pytest.approx(0.5)
        assert max(y for _, y in lower) == pytest.approx(0.5)

    def test_edge_on_midpoint_is_not_split(self):
        band = Band(0, 1.0, 0.0)
        assert len(band_pieces(band, 0.5, 0.8, 1.0)) == 1
        assert len(band_pieces(band, 0.2, 0.5, 1.0)) == 1

    def test_zero_height_emits_nothing(self):
        assert band_pieces(Band(0, 1.0, 0.0), 0.4, 0.4, 1.0) == []


class TestFillSlab:
    def test_slab_in_lower_half_of_first_band(self):
        result = fill_slab(_stack(), 0.7, 0.6, 1.0, 0, RED)
        assert len(result.fills) == 1
        assert result.trace == [S, SPLIT, DONE]
        assert result.bands_visited == [0]

    def test_skips_bands_fully_behind_the_slab(self):
        result = fill_slab(_stack(), 0.2, 0.1, 1.0, 0, RED)
        assert result.trace == [S, S, SPLIT, DONE]
        assert result.bands_visited == [1]
        assert len(result.fills) == 1

    def test_crossing_a_band_boundary_emits_remainder(self):
        result = fill_slab(_stack(), 0.9, 0.3, 1.0, 0, RED)
        assert result.trace == [S, REM, S, SPLIT, DONE]
        assert result.bands_visited == [0, 1]
        # band 0: [0.5, 0.9] straddles 0.75; band 1: [0.3, 0.5] is upper half
        assert len(result.fills) == 3

    def test_full_height_slab_exhausts_every_band(self):
        result = fill_slab(_stack(), 1.0, -0.5, 2.0, 4, RED, role="output_band")
        assert result.bands_visited == [0, 1, 2]
        assert len(result.fills) == 6
        assert all(f.role == "output_band" and f.colour_index == 4 for f in result.fills)

    def test_pieces_tile_the_slab_without_overlap(self):
        result = fill_slab(_stack(), 0.9, -0.2, 1.0, 0, RED)
        polys = [f.points for f in result.fills]
        for i, a in enumerate(polys):
            for b in polys[i + 1 :]:
                assert overlap_area([a], [b]) == pytest.approx(0.0, abs=1e-12)
        # area = slab width * height minus the chevron wedges, which are at most notch_depth deep
        height = 0.9 - (-0.2)
        assert union_area(polys) == pytest.approx(height * 1.0, abs=0.05 * height)

    def test_empty_slab_terminates_immediately(self):
        result = fill_slab(_stack(), 0.4, 0.4, 1.0, 0, RED)
        assert result.fills == []
        assert result.trace == [S, DONE]

    def test_no_bands(self):
        result = fill_slab([], 0.4, 0.1, 1.0, 0, RED)
        assert result.fills == []
        assert result.trace == [S, DONE]
