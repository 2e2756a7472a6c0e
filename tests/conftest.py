"""Shared test fixtures."""

from __future__ import annotations

import pytest

# Two inputs, three losses: 107 MW in, 89.2 MW out
PLANT = {
    "inputs": [75.0, 32.0],
    "losses": [10.0, 5.0, 2.8],
    "unit": "MW",
    "labels": ["Main Input", "Aux Input", "Losses I", "Losses II", "Losses III", "Output"],
    "colours": [
        (0.0, 0.4, 0.74),
        (0.30, 0.74, 0.93),
        (0.92, 0.69, 0.125),
        (0.63, 0.078, 0.18),
        (0.85, 0.32, 0.09),
    ],
    "separators": [1],
}

# Single input, nothing lost
PASSTHROUGH = {
    "inputs": [50.0],
    "losses": [],
    "unit": "kW",
    "labels": ["Feed", "Delivered"],
    "colours": [(0.2, 0.5, 0.2)],
}

# Small primary on top of a large secondary: the loss drains both bands
DEEP_LOSS = {
    "inputs": [20.0, 80.0],
    "losses": [50.0],
    "unit": "t",
    "labels": ["Top", "Bottom", "Waste", "Product"],
    "colours": [(0.9, 0.1, 0.1), (0.1, 0.1, 0.9)],
}

# Single input with one large loss straddling the band midpoint
HALF_LOSS = {
    "inputs": [100.0],
    "losses": [60.0],
    "unit": "GWh",
    "labels": ["Fuel", "Heat", "Electricity"],
    "colours": [(0.8, 0.3, 0.1), (0.1, 0.3, 0.8)],
}


@pytest.fixture
def plant() -> dict:
    return dict(PLANT)
