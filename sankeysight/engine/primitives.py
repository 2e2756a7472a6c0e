"""Scene primitives — the ordered drawing output of one layout pass.

Primitives are frozen and hold plain float tuples, so two scenes built from
the same arguments compare equal.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from sankeysight.engine.cursor import Band
    from sankeysight.engine.fractions import FlowSet

Point = tuple[float, float]
RGB = tuple[float, float, float]


def as_points(points: NDArray[np.float64] | Iterable[Iterable[float]]) -> tuple[Point, ...]:
    """Freeze an (N, 2) array or point iterable into a tuple of float pairs."""
    arr = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    return tuple((float(x), float(y)) for x, y in arr)


@dataclass(frozen=True)
class Stroke:
    """Open polyline. Roles: outline, junction, divider, separator."""

    points: tuple[Point, ...]
    width: float = 2.5
    dashed: bool = False
    role: str = "outline"


@dataclass(frozen=True)
class Fill:
    """Closed colour-filled polygon. Roles: loss_arc, loss_tip, band, output_band, output_tip."""

    points: tuple[Point, ...]
    colour_index: int
    colour: RGB
    role: str = "band"


@dataclass(frozen=True)
class Text:
    text: str
    x: float
    y: float
    font_size: int
    rotation: float = 0.0
    align: str = "left"


Primitive = Union[Stroke, Fill, Text]


@dataclass(frozen=True)
class Viewport:
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin


@dataclass
class Scene:
    """Finished diagram: primitives in paint order plus layout metadata."""

    primitives: list[Primitive] = field(default_factory=list)
    viewport: Viewport = Viewport(0.0, 1.0, 0.0, 1.0)
    bands: tuple["Band", ...] = ()
    flows: "FlowSet | None" = None
    unit: str = ""

    @property
    def strokes(self) -> list[Stroke]:
        return [p for p in self.primitives if isinstance(p, Stroke)]

    @property
    def fills(self) -> list[Fill]:
        return [p for p in self.primitives if isinstance(p, Fill)]

    @property
    def texts(self) -> list[Text]:
        return [p for p in self.primitives if isinstance(p, Text)]

    @property
    def output(self) -> float:
        return self.flows.output if self.flows is not None else 0.0

    def strokes_with_role(self, role: str) -> list[Stroke]:
        return [s for s in self.strokes if s.role == role]

    def fills_for(self, colour_index: int, role: str | None = None) -> list[Fill]:
        return [
            f
            for f in self.fills
            if f.colour_index == colour_index and (role is None or f.role == role)
        ]

    def fill_area(self, colour_index: int, role: str | None = None) -> float:
        """Union area of all fills painted with one colour index."""
        from sankeysight.utils.geometry import union_area

        return union_area([f.points for f in self.fills_for(colour_index, role)])
