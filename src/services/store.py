"""Local JSON record store.

A single JSON document on disk maps a key (``periods``, ``symptoms``,
``moods``, ``bbt``, ``cervical_mucus``) to a list of record dicts, the same
shape as a device key-value store: whole lists are loaded and saved, and
callers filter in memory.

Writes go to a temp file that is renamed over the original.  A lock
serializes read-modify-write cycles; sync route handlers run in a
threadpool.
"""

from __future__ import annotations

import json
import logging
import os
import threading
import uuid
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from src.config import Settings, get_settings

logger = logging.getLogger("cycle_insights.store")

STORE_KEYS = ("periods", "symptoms", "moods", "bbt", "cervical_mucus")

M = TypeVar("M", bound=BaseModel)


class StoreError(RuntimeError):
    """Raised when the store file is unreadable, corrupt, or not initialized."""


def new_record_id() -> str:
    return uuid.uuid4().hex


class JsonRecordStore:
    """Load/save-list persistence over one JSON file.

    Usage::

        store = JsonRecordStore(Path("data/cycle_store.json"))
        store.add("periods", {"id": new_record_id(), "start_date": "2026-02-01"})
        periods = store.load_models("periods", PeriodRead)
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Raw document access
    # ------------------------------------------------------------------

    def _read(self) -> dict[str, list[dict[str, Any]]]:
        if not self.path.exists():
            return {key: [] for key in STORE_KEYS}
        try:
            doc = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as exc:
            raise StoreError(f"Cannot read record store {self.path}: {exc}") from exc
        if not isinstance(doc, dict):
            raise StoreError(f"Record store {self.path} must contain a JSON object")
        for key in STORE_KEYS:
            doc.setdefault(key, [])
        return doc

    def _write(self, doc: dict[str, list[dict[str, Any]]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(doc, indent=2, default=str), encoding="utf-8")
        os.replace(tmp, self.path)

    @staticmethod
    def _check_key(key: str) -> None:
        if key not in STORE_KEYS:
            raise KeyError(f"Unknown store key '{key}' (expected one of {STORE_KEYS})")

    # ------------------------------------------------------------------
    # List semantics
    # ------------------------------------------------------------------

    def load_list(self, key: str) -> list[dict[str, Any]]:
        self._check_key(key)
        with self._lock:
            return list(self._read()[key])

    def save_list(self, key: str, items: list[dict[str, Any]]) -> None:
        self._check_key(key)
        with self._lock:
            doc = self._read()
            doc[key] = list(items)
            self._write(doc)

    def load_models(self, key: str, model: type[M]) -> list[M]:
        """Load a list and validate every item against ``model``.

        Raises:
            StoreError: If any stored item fails validation.
        """
        items = self.load_list(key)
        try:
            return TypeAdapter(list[model]).validate_python(items)
        except ValidationError as exc:
            raise StoreError(
                f"Stored '{key}' records failed validation: {exc.error_count()} error(s)"
            ) from exc

    # ------------------------------------------------------------------
    # Record operations
    # ------------------------------------------------------------------

    def get(self, key: str, record_id: str) -> dict[str, Any] | None:
        return next((r for r in self.load_list(key) if r.get("id") == record_id), None)

    def add(self, key: str, item: dict[str, Any]) -> dict[str, Any]:
        """Append a record.  An ``id`` is assigned when the item has none."""
        self._check_key(key)
        record = dict(item)
        record.setdefault("id", new_record_id())
        with self._lock:
            doc = self._read()
            doc[key].append(record)
            self._write(doc)
        logger.info("Added %s record %s", key, record["id"])
        return record

    def replace(self, key: str, record_id: str, item: dict[str, Any]) -> dict[str, Any] | None:
        """Replace a record in place.  Returns None when the id is unknown."""
        self._check_key(key)
        with self._lock:
            doc = self._read()
            for i, existing in enumerate(doc[key]):
                if existing.get("id") == record_id:
                    record = {**item, "id": record_id}
                    doc[key][i] = record
                    self._write(doc)
                    return record
        return None

    def delete(self, key: str, record_id: str) -> bool:
        self._check_key(key)
        with self._lock:
            doc = self._read()
            remaining = [r for r in doc[key] if r.get("id") != record_id]
            if len(remaining) == len(doc[key]):
                return False
            doc[key] = remaining
            self._write(doc)
        logger.info("Deleted %s record %s", key, record_id)
        return True


# ---------------------------------------------------------------------------
# Module-level store, initialized once at app startup
# ---------------------------------------------------------------------------

_store: JsonRecordStore | None = None


def init_store(settings: Settings | None = None) -> JsonRecordStore:
    """Open the record store.  Call once at app startup."""
    global _store
    s = settings or get_settings()
    path = s.store_path
    if not path.exists():
        logger.warning("Record store %s not found; starting empty", path)
    _store = JsonRecordStore(path)
    logger.info("Record store initialized at %s", path)
    return _store


def close_store() -> None:
    global _store
    if _store:
        _store = None
        logger.info("Record store closed")


def get_store() -> JsonRecordStore:
    if _store is None:
        raise StoreError("Record store not initialized; call init_store() first")
    return _store
