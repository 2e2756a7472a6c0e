"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class StrokeModel(BaseModel):
    points: list[tuple[float, float]]
    width: float
    dashed: bool = False
    role: str = "outline"


class FillModel(BaseModel):
    points: list[tuple[float, float]]
    colour_index: int
    colour: tuple[float, float, float]
    role: str = "band"


class TextModel(BaseModel):
    text: str
    x: float
    y: float
    font_size: int
    rotation: float = 0.0
    align: str = "left"


class ViewportModel(BaseModel):
    xmin: float
    xmax: float
    ymin: float
    ymax: float


class SankeyResponse(BaseModel):
    strokes: list[StrokeModel] = Field(default_factory=list)
    fills: list[FillModel] = Field(default_factory=list)
    texts: list[TextModel] = Field(default_factory=list)
    viewport: ViewportModel
    output: float = 0.0
    band_count: int = 0
    processing_time_ms: float = 0.0
