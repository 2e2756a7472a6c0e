"""SankeySight diagram layout engine."""

from sankeysight.engine.config import LayoutConfig
from sankeysight.engine.errors import (
    InsufficientColourError,
    LabelCountError,
    NegativeFlowError,
    SankeyError,
    UnbalancedFlowError,
)
from sankeysight.engine.layout import draw_sankey
from sankeysight.engine.primitives import Fill, Scene, Stroke, Text

__all__ = [
    "draw_sankey",
    "LayoutConfig",
    "Scene",
    "Stroke",
    "Fill",
    "Text",
    "SankeyError",
    "UnbalancedFlowError",
    "NegativeFlowError",
    "InsufficientColourError",
    "LabelCountError",
]
