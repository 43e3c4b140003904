"""Cycle Insights API: FastAPI application entry point.

Run locally:
    uvicorn src.main:app --reload --port 8000
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.config import get_settings
from src.cycle.config_loader import reload_cycle_config
from src.routers import fertility, health, insights, periods, symptoms
from src.services.store import StoreError, close_store, init_store

# ---------- Logging ----------

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stdout,
)
logger = logging.getLogger("cycle_insights")


# ---------- Lifespan ----------

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup / shutdown hooks."""
    settings = get_settings()
    logger.info(
        "Starting Cycle Insights API v%s [%s]",
        settings.app_version,
        settings.environment,
    )
    if settings.cycle_config_path:
        reload_cycle_config(settings.cycle_config_path)
    init_store(settings)
    yield
    close_store()
    logger.info("Cycle Insights API shut down")


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Record store error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Record store error"})


# ---------- App factory ----------

def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        description=(
            "Period tracking, cycle predictions, fertile window estimates and "
            "symptom/mood phase correlations."
        ),
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_exception_handler(StoreError, store_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- Health check (outside v1 prefix, always at /health) ----------
    app.include_router(health.router)

    # ---------- API v1 routes ----------
    v1_prefix = "/api/v1"

    app.include_router(periods.router, prefix=v1_prefix)
    app.include_router(symptoms.router, prefix=v1_prefix)
    app.include_router(fertility.router, prefix=v1_prefix)
    app.include_router(insights.router, prefix=v1_prefix)

    return app


app = create_app()
