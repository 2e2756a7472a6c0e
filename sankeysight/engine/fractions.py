"""Normalize raw flow magnitudes into diagram-space fractions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class FlowSet:
    """Validated magnitudes plus their fractions of total input.

    The same normalizer (sum of inputs) is applied to inputs and losses,
    so the stacked inputs span exactly one diagram unit.
    """

    inputs: NDArray[np.float64]
    losses: NDArray[np.float64]
    fr_inputs: NDArray[np.float64]
    fr_losses: NDArray[np.float64]

    @property
    def total(self) -> float:
        return float(np.sum(self.inputs))

    @property
    def output(self) -> float:
        return float(np.sum(self.inputs) - np.sum(self.losses))

    @property
    def fr_output(self) -> float:
        return 1.0 - float(np.sum(self.fr_losses))

    def significant_inputs(self, eps: float) -> int:
        """Number of inputs whose fraction is above the negligible threshold."""
        return int(np.count_nonzero(self.fr_inputs > eps))

    def has_secondary(self, eps: float) -> bool:
        return bool(np.any(self.fr_inputs[1:] > eps))


def fraction(x: float | NDArray[np.float64], total: float) -> float | NDArray[np.float64]:
    return x / total


def compute_fractions(inputs: Sequence[float], losses: Sequence[float]) -> FlowSet:
    """Build a FlowSet. Assumes validated data (positive total input)."""
    arr_in = np.asarray(inputs, dtype=np.float64)
    arr_loss = np.asarray(losses, dtype=np.float64).reshape(-1)
    total = float(np.sum(arr_in))
    return FlowSet(
        inputs=arr_in,
        losses=arr_loss,
        fr_inputs=fraction(arr_in, total),
        fr_losses=fraction(arr_loss, total),
    )
