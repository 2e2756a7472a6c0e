"""Leaf-node polygon helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon
from shapely.ops import unary_union
from shapely.validation import make_valid

PointSeq = Sequence[tuple[float, float]] | NDArray[np.float64]


def to_polygon(points: PointSeq) -> Polygon:
    """Shapely polygon from a vertex list; self-touching outlines are repaired."""
    poly = Polygon(points)
    if not poly.is_valid:
        poly = make_valid(poly)
    return poly


def union_area(polygons: Iterable[PointSeq]) -> float:
    """Area covered by the union of several polygons."""
    shapes = [to_polygon(p) for p in polygons if len(p) >= 3]
    if not shapes:
        return 0.0
    return float(unary_union(shapes).area)


def overlap_area(a: Iterable[PointSeq], b: Iterable[PointSeq]) -> float:
    """Area shared between two groups of polygons."""
    shapes_a = [to_polygon(p) for p in a if len(p) >= 3]
    shapes_b = [to_polygon(p) for p in b if len(p) >= 3]
    if not shapes_a or not shapes_b:
        return 0.0
    return float(unary_union(shapes_a).intersection(unary_union(shapes_b)).area)
