"""Label sizing — map a flow fraction and role to a text template and font size.

Large shares get a two-line label and slowly growing type; mid shares a
single line with faster growth; small shares are pinned to the minimum size.
Every size is clamped to [min_font_size, max_font_size].
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from sankeysight.engine.config import LayoutConfig

# Share above which a flow gets the two-line label
_LARGE_SHARE = 0.10
# Share above which a single-line label still scales
_MID_SHARE = 0.05

# Large shares: +1pt per 5 percentage points above 1%
_LARGE_ORIGIN = 0.01
_LARGE_STEP = 0.05
# Mid shares: +1pt per 2.5 percentage points above 5%
_MID_STEP = 0.025
# Output: +1pt per 5 percentage points above 10%
_OUTPUT_ORIGIN = 0.10
_OUTPUT_STEP = 0.05


class LabelRole(str, enum.Enum):
    PRIMARY = "primary"
    INPUT = "input"
    LOSS = "loss"
    OUTPUT = "output"


@dataclass(frozen=True)
class LabelStyle:
    text: str
    font_size: int


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _clamp(size: int, config: LayoutConfig) -> int:
    return max(config.min_font_size, min(config.max_font_size, size))


def font_size(f: float, role: LabelRole, config: LayoutConfig | None = None) -> int:
    """Font size tier for a flow fraction."""
    config = config or LayoutConfig()
    base = config.min_font_size

    if role is LabelRole.PRIMARY:
        size = base + math.ceil((f - _MID_SHARE) / _MID_STEP)
    elif role is LabelRole.OUTPUT:
        size = base + math.ceil((f - _OUTPUT_ORIGIN) / _OUTPUT_STEP)
    elif f > _LARGE_SHARE:
        # Loss labels start from the top of the range; they have more room
        large_base = config.max_font_size if role is LabelRole.LOSS else base
        size = large_base + _round_half_away((f - _LARGE_ORIGIN) / _LARGE_STEP)
    elif f > _MID_SHARE:
        size = base + math.ceil((f - _MID_SHARE) / _MID_STEP)
    else:
        size = base
    return _clamp(size, config)


def size_label(
    name: str,
    value: float,
    unit: str,
    f: float,
    role: LabelRole,
    show_percent: bool = True,
    config: LayoutConfig | None = None,
) -> LabelStyle:
    """Build label text and font size for one flow."""
    pct = 100.0 * f
    if role is LabelRole.OUTPUT:
        text = f"{name}\n{value:.0f} [{unit}] {pct:.1f} [%]"
    elif role is LabelRole.PRIMARY:
        text = f"{name}\n{value:.1f} [{unit}]"
        if show_percent:
            text += f" {pct:.1f} [%]"
    elif f > _LARGE_SHARE:
        text = f"{name}\n{value:.1f} [{unit}] {pct:.1f} [%]"
    else:
        text = f"{name}: {value:.1f} [{unit}] {pct:.1f} [%]"
    return LabelStyle(text=text, font_size=font_size(f, role, config))
