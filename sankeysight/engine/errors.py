"""Validation errors raised before any drawing state exists."""

from __future__ import annotations


class SankeyError(ValueError):
    """Base class for rejected flow data."""


class UnbalancedFlowError(SankeyError):
    """Total losses reach or exceed total inputs."""


class NegativeFlowError(SankeyError):
    """An input or loss magnitude is below zero."""


class InsufficientColourError(SankeyError):
    """Fewer colours than losses + output."""


class LabelCountError(SankeyError):
    """Label list does not match inputs + losses + output."""
