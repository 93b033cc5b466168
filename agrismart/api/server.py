from __future__ import annotations

import random
import traceback
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..application.services.recommendation_service import RecommendationEngine
from ..infra.config import AppConfig, get_config
from ..infra.predictor_provider import build_disease_predictor
from ..observability.logging_utils import (
    get_trace_id,
    init_logging,
    log_error,
    log_event,
    reset_trace_id,
    set_trace_id,
)
from ..schemas.results import ErrorResponse
from .routes import router
from .validation import PayloadValidationError, payload_validation_handler


TRACE_HEADER = "X-Request-ID"


def build_engine(cfg: AppConfig) -> RecommendationEngine:
    rng = random.Random(cfg.recommendation_seed) if cfg.recommendation_seed is not None else None
    return RecommendationEngine(
        build_disease_predictor(cfg, rng=rng),
        rng=rng,
        crop_limit=cfg.crop_recommendation_limit,
        min_suitability=cfg.crop_min_suitability,
    )


async def _unhandled_exception_handler(request: Request, exc: Exception):
    # runs outside the trace middleware, which has already reset its context
    trace_id = getattr(request.state, "trace_id", None) or get_trace_id()
    log_error(
        "unhandled_error",
        trace_id=trace_id,
        path=request.url.path,
        error=str(exc),
        traceback=traceback.format_exc(),
    )
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(message="Internal server error").model_dump(mode="json"),
        headers={TRACE_HEADER: trace_id},
    )


def create_app(
    engine: Optional[RecommendationEngine] = None,
    config: Optional[AppConfig] = None,
) -> FastAPI:
    """
    Build the HTTP app around one explicitly constructed engine.

    Raises:
        UnknownSchemaError: if a route names a schema that is not registered.
        ValueError: if the configured disease predictor cannot be built.
    """
    cfg = config or get_config()
    init_logging(log_path=cfg.log_path)
    if engine is None:
        engine = build_engine(cfg)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        log_event(
            "app_started",
            app=cfg.app_name,
            predictor=engine.predictor.name,
        )
        yield

    app = FastAPI(title=cfg.app_name, version=__version__, lifespan=lifespan)
    app.state.engine = engine
    app.state.config = cfg
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def _trace_requests(request: Request, call_next):
        trace_id = request.headers.get(TRACE_HEADER) or uuid.uuid4().hex
        request.state.trace_id = trace_id
        token = set_trace_id(trace_id)
        try:
            response = await call_next(request)
        finally:
            reset_trace_id(token)
        response.headers[TRACE_HEADER] = trace_id
        return response

    app.add_exception_handler(PayloadValidationError, payload_validation_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)

    @app.get("/health")
    async def health():
        return {"status": "ok", "predictor": app.state.engine.predictor.name}

    app.include_router(router)
    return app
