from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mcp_aiops.api.routes import router
from mcp_aiops.clients import GeminiClient
from mcp_aiops.collectors import PrometheusCollector, default_queries
from mcp_aiops.config import settings
from mcp_aiops.engine import AnomalyGauge, CheckPipeline
from mcp_aiops.errors import AIOpsError, UnexpectedError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ── startup ───────────────────────────────────────
    configure_logging()
    http_client = httpx.AsyncClient()

    collector = PrometheusCollector(
        http_client,
        settings.prometheus_url,
        queries=default_queries(settings),
        timeout=settings.metrics_timeout,
    )
    inference = GeminiClient(
        http_client,
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
        timeout=settings.inference_timeout,
    )
    gauge = AnomalyGauge()
    pipeline = CheckPipeline(collector, inference, gauge)

    if not inference.configured:
        logger.warning(
            "GEMINI_API_KEY is not set; checks will fail until it is configured"
        )

    # Store on app.state for route access
    app.state.http_client = http_client
    app.state.collector = collector
    app.state.inference = inference
    app.state.gauge = gauge
    app.state.pipeline = pipeline

    logger.info(
        "%s started on port %d (prometheus=%s)",
        settings.app_name,
        settings.port,
        settings.prometheus_url,
    )

    yield

    # ── shutdown ──────────────────────────────────────
    await http_client.aclose()
    logger.info("%s shut down", settings.app_name)


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

app.include_router(router)


@app.exception_handler(AIOpsError)
async def aiops_error_handler(request: Request, exc: AIOpsError) -> JSONResponse:
    # 500s are logged with a traceback where they are raised
    if exc.http_status != 500:
        logger.warning("%s %s -> %d: %s", request.method, request.url.path, exc.http_status, exc.message)
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    error = UnexpectedError()
    return JSONResponse(status_code=error.http_status, content=error.to_dict())
