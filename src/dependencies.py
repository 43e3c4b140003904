"""Shared FastAPI dependencies injected into route handlers."""

from __future__ import annotations

from datetime import date
from typing import Annotated

from fastapi import Depends

from src.config import Settings, get_settings
from src.cycle.config_loader import CycleConfig, get_cycle_config
from src.services.store import JsonRecordStore, get_store


def get_record_store() -> JsonRecordStore:
    return get_store()


def get_today() -> date:
    """The engine's "current date".  Overridden in tests to pin the clock."""
    return date.today()


# Annotated shortcuts for route signatures
RecordStore = Annotated[JsonRecordStore, Depends(get_record_store)]
Today = Annotated[date, Depends(get_today)]
EngineConfig = Annotated[CycleConfig, Depends(get_cycle_config)]
AppSettings = Annotated[Settings, Depends(get_settings)]
