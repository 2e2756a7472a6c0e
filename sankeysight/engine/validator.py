"""Input gate — reject inconsistent flow data before layout begins."""

from __future__ import annotations

from collections.abc import Sequence

from sankeysight.engine.errors import (
    InsufficientColourError,
    LabelCountError,
    NegativeFlowError,
    UnbalancedFlowError,
)


def validate_flows(
    inputs: Sequence[float],
    losses: Sequence[float],
    colours: Sequence[Sequence[float]],
    labels: Sequence[str] | None = None,
) -> None:
    """Raise a SankeyError subclass if the flows cannot be drawn.

    Checks run in a fixed order and the first failure wins: sign,
    balance, colour count, then label count (only when labels are given).
    """
    if any(v < 0 for v in inputs) or any(v < 0 for v in losses):
        raise NegativeFlowError("negative inputs or losses encountered")

    total_in = float(sum(inputs))
    total_out = float(sum(losses))
    if total_out >= total_in:
        raise UnbalancedFlowError(
            f"losses exceed inputs ({total_out:g} >= {total_in:g}), unable to draw diagram"
        )

    needed = len(losses) + 1
    if len(colours) < needed:
        raise InsufficientColourError(
            f"got {len(colours)} colours, need one per loss plus the output ({needed})"
        )

    if labels is not None:
        expected = len(inputs) + len(losses) + 1
        if len(labels) != expected:
            raise LabelCountError(
                f"got {len(labels)} labels, expected {expected} "
                "(inputs, then losses, then output)"
            )
