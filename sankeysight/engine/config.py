"""Layout configuration — every geometric constant of the diagram in one place.

All lengths are in diagram units: 1.0 == total input flow.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutConfig:
    """Constants controlling arrow geometry, spacing and label placement."""

    # Arc sampling
    arc_samples: int = 50

    # Flows at or below this fraction are skipped (no zero-width arrows)
    negligible: float = sys.float_info.epsilon

    # Bend radius floor so thin flows still show a visible curve
    min_bend_radius: float = 0.07

    # Horizontal gap left after each loss / input junction
    junction_gap: float = 0.01

    # Input tail chevron depth and primary arrow extents
    notch_depth: float = 0.05
    primary_top_length: float = 0.4
    primary_bottom_length: float = 0.1

    # Loss arrowhead: barb overhang floor and tip height floor / ratio
    loss_tip_edge_min: float = 0.015
    loss_tip_height_min: float = 0.04
    tip_height_ratio: float = 0.8
    loss_label_offset: float = 0.05

    # Output arrow run-out after the last side arrow
    output_runout_min: float = 0.05
    output_runout_ratio: float = 0.05
    output_label_offset: float = 0.05

    # Stroke widths (points)
    outline_width: float = 2.5
    divider_width: float = 1.5
    separator_width: float = 2.0

    # Draw the 45° junction arc pair where secondary inputs meet the spine
    input_junction_arcs: bool = True

    # Viewport margins around the drawing
    margin_left: float = 0.15
    margin_right: float = 0.1
    margin_vertical: float = 0.4

    # Label font size clamp
    min_font_size: int = 10
    max_font_size: int = 12
