"""POST /api/sankey — lay out a diagram and return it as JSON, SVG or PNG."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from sankeysight.config import Settings
from sankeysight.dependencies import get_layout_config, get_settings
from sankeysight.engine.config import LayoutConfig
from sankeysight.engine.errors import SankeyError
from sankeysight.engine.layout import draw_sankey
from sankeysight.engine.primitives import Scene
from sankeysight.models.requests import SankeyRequest
from sankeysight.models.responses import (
    FillModel,
    SankeyResponse,
    StrokeModel,
    TextModel,
    ViewportModel,
)
from sankeysight.svg.serializer import scene_to_svg
from sankeysight.utils.canvas import scene_to_png

logger = logging.getLogger(__name__)

router = APIRouter()


def _layout(req: SankeyRequest, config: LayoutConfig) -> Scene:
    try:
        return draw_sankey(
            req.inputs,
            req.losses,
            req.unit,
            req.labels,
            req.colours,
            separators=req.separators,
            config=config,
        )
    except SankeyError as e:
        logger.info("Rejected sankey request: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/sankey", response_model=SankeyResponse)
def sankey(
    req: SankeyRequest, config: LayoutConfig = Depends(get_layout_config)
) -> SankeyResponse:
    start = time.perf_counter()
    scene = _layout(req, config)
    vp = scene.viewport
    return SankeyResponse(
        strokes=[
            StrokeModel(points=list(s.points), width=s.width, dashed=s.dashed, role=s.role)
            for s in scene.strokes
        ],
        fills=[
            FillModel(points=list(f.points), colour_index=f.colour_index, colour=f.colour, role=f.role)
            for f in scene.fills
        ],
        texts=[
            TextModel(
                text=t.text,
                x=t.x,
                y=t.y,
                font_size=t.font_size,
                rotation=t.rotation,
                align=t.align,
            )
            for t in scene.texts
        ],
        viewport=ViewportModel(xmin=vp.xmin, xmax=vp.xmax, ymin=vp.ymin, ymax=vp.ymax),
        output=scene.output,
        band_count=len(scene.bands),
        processing_time_ms=round((time.perf_counter() - start) * 1000, 1),
    )


@router.post("/sankey/svg")
def sankey_svg(
    req: SankeyRequest, config: LayoutConfig = Depends(get_layout_config)
) -> Response:
    scene = _layout(req, config)
    return Response(content=scene_to_svg(scene), media_type="image/svg+xml")


@router.post("/sankey/png")
def sankey_png(
    req: SankeyRequest,
    config: LayoutConfig = Depends(get_layout_config),
    app_settings: Settings = Depends(get_settings),
) -> Response:
    scene = _layout(req, config)
    return Response(content=scene_to_png(scene, dpi=app_settings.sankeysight_png_dpi), media_type="image/png")
