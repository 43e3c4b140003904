"""Endpoints for fertility-awareness records: BBT and cervical mucus."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException

from src.dependencies import RecordStore
from src.models.tracking import (
    BBTEntryCreate,
    BBTEntryRead,
    CervicalMucusCreate,
    CervicalMucusRead,
)
from src.services.store import new_record_id

router = APIRouter(prefix="/fertility", tags=["fertility"])


# ---------- Basal body temperature ----------

@router.get("/bbt", response_model=list[BBTEntryRead])
def list_bbt_entries(store: RecordStore) -> Any:
    return sorted(store.load_models("bbt", BBTEntryRead), key=lambda e: e.date)


@router.post("/bbt", response_model=BBTEntryRead, status_code=201)
def create_bbt_entry(store: RecordStore, body: BBTEntryCreate) -> Any:
    entry = BBTEntryRead(id=new_record_id(), **body.model_dump())
    store.add("bbt", entry.model_dump(mode="json"))
    return entry


@router.delete("/bbt/{entry_id}", status_code=204)
def delete_bbt_entry(entry_id: str, store: RecordStore) -> None:
    if not store.delete("bbt", entry_id):
        raise HTTPException(status_code=404, detail="BBT entry not found")


# ---------- Cervical mucus ----------

@router.get("/cervical-mucus", response_model=list[CervicalMucusRead])
def list_mucus_entries(store: RecordStore) -> Any:
    return sorted(
        store.load_models("cervical_mucus", CervicalMucusRead), key=lambda e: e.date
    )


@router.post("/cervical-mucus", response_model=CervicalMucusRead, status_code=201)
def create_mucus_entry(store: RecordStore, body: CervicalMucusCreate) -> Any:
    entry = CervicalMucusRead(id=new_record_id(), **body.model_dump())
    store.add("cervical_mucus", entry.model_dump(mode="json"))
    return entry


@router.delete("/cervical-mucus/{entry_id}", status_code=204)
def delete_mucus_entry(entry_id: str, store: RecordStore) -> None:
    if not store.delete("cervical_mucus", entry_id):
        raise HTTPException(status_code=404, detail="Cervical mucus entry not found")
