"""POST /api/polylabel — pole of inaccessibility for one polygon or a batch.

Handlers are plain ``def`` so the CPU-bound search runs in FastAPI's threadpool.
"""

from __future__ import annotations

import logging
import math
import time

from fastapi import APIRouter, Depends, HTTPException

from polelabel.config import Settings
from polelabel.dependencies import get_settings
from polelabel.engine.search import LabelLocation, polylabel
from polelabel.models.requests import BatchLabelRequest, LabelRequest, PolygonCoords
from polelabel.models.responses import BatchLabelResponse, LabelResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _locate(
    polygon: PolygonCoords, precision: float | None, debug: bool, settings: Settings
) -> LabelResponse:
    if precision is not None and not math.isfinite(precision):
        raise HTTPException(status_code=400, detail=f"precision must be finite, got {precision}")

    start = time.perf_counter()
    try:
        location: LabelLocation = polylabel(
            polygon,
            precision,
            debug,
            default_precision=settings.default_precision,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    elapsed = (time.perf_counter() - start) * 1000

    return LabelResponse(
        position=list(location.position),
        distance=location.distance,
        probes=location.probes,
        processing_time_ms=round(elapsed, 3),
    )


@router.post("/polylabel", response_model=LabelResponse)
def label(req: LabelRequest, settings: Settings = Depends(get_settings)) -> LabelResponse:
    response = _locate(req.polygon, req.precision, req.debug, settings)
    logger.info(
        "polylabel: %d rings, distance %.4f after %d probes in %.1fms",
        len(req.polygon),
        response.distance,
        response.probes,
        response.processing_time_ms,
    )
    return response


@router.post("/polylabel/batch", response_model=BatchLabelResponse)
def label_batch(
    req: BatchLabelRequest, settings: Settings = Depends(get_settings)
) -> BatchLabelResponse:
    start = time.perf_counter()
    results = [_locate(polygon, req.precision, False, settings) for polygon in req.polygons]
    elapsed = (time.perf_counter() - start) * 1000
    logger.info("polylabel batch: %d polygons in %.1fms", len(results), elapsed)
    return BatchLabelResponse(results=results, processing_time_ms=round(elapsed, 3))
