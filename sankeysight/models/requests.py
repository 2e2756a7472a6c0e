"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class SankeyRequest(BaseModel):
    inputs: list[float] = Field(..., min_length=1, description="Input magnitudes; first is the main input")
    losses: list[float] = Field(default_factory=list, description="Loss magnitudes, left to right")
    unit: str = Field(default="", description="Unit shown in labels")
    labels: list[str] = Field(..., description="Labels for inputs, then losses, then the output")
    colours: list[tuple[float, float, float]] = Field(
        ..., description="RGB triples in [0, 1]: one per loss, then the output"
    )
    separators: list[int] = Field(
        default_factory=list,
        description="1-based loss numbers followed by a dashed separator",
    )

    @field_validator("colours")
    @classmethod
    def _colours_in_unit_range(cls, value: list[tuple[float, float, float]]) -> list[tuple[float, float, float]]:
        for rgb in value:
            if any(c < 0.0 or c > 1.0 for c in rgb):
                raise ValueError(f"colour components must lie in [0, 1], got {rgb}")
        return value
