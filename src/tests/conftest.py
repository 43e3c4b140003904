"""Fixtures for API and store tests.

The app runs against a throwaway JSON store under ``tmp_path`` and a
pinned "today" so date-relative insights are deterministic.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from src.config import get_settings
from src.dependencies import get_today
from src.main import app
from src.services.store import JsonRecordStore, get_store

TEST_TODAY = date(2026, 2, 23)
API = "/api/v1"


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "cycle_store.json"


@pytest.fixture
def record_store(store_path: Path) -> JsonRecordStore:
    return JsonRecordStore(store_path)


@pytest.fixture
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """TestClient with startup/shutdown run against a temp data dir."""
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    get_settings.cache_clear()
    app.dependency_overrides[get_today] = lambda: TEST_TODAY
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    get_settings.cache_clear()


@pytest.fixture
def app_store(client: TestClient) -> JsonRecordStore:
    """The store the running app was initialized with."""
    return get_store()
