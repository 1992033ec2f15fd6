from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/aiops/check")
async def check(request: Request) -> dict:
    pipeline = request.app.state.pipeline
    result = await pipeline.run()
    return result.to_response()


@router.get("/metrics")
async def metrics(request: Request) -> Response:
    gauge = request.app.state.gauge
    return Response(content=gauge.render(), media_type=gauge.content_type)


@router.get("/health")
async def health(request: Request) -> dict:
    state = request.app.state
    last = state.gauge.value
    return {
        "status": "ok",
        "inference_configured": state.inference.configured,
        "last_anomaly": None if last is None else int(last),
    }
