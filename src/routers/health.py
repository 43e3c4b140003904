"""Health check endpoint."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from src.cycle.config_loader import get_cycle_config
from src.dependencies import AppSettings
from src.services.store import StoreError, get_store

router = APIRouter(tags=["system"])
logger = logging.getLogger("cycle_insights.health")


@router.get("/health")
def health_check(settings: AppSettings) -> dict:
    """Liveness probe. Returns 200 if the API process is up.

    Also checks that the record store is initialized and readable.
    """
    store_ok = False
    try:
        get_store().load_list("periods")
        store_ok = True
    except StoreError as exc:
        logger.warning("Health check store probe failed: %s", exc)

    return {
        "status": "healthy" if store_ok else "degraded",
        "version": settings.app_version,
        "environment": settings.environment,
        "store": "available" if store_ok else "unavailable",
        "cycle_config_version": get_cycle_config().version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
