"""Endpoints for logged symptoms and moods."""

from __future__ import annotations

from datetime import date
from typing import Any

from fastapi import APIRouter, HTTPException, Query

from src.cycle.records import PREDEFINED_SYMPTOMS
from src.dependencies import RecordStore
from src.models.tracking import (
    MoodLogCreate,
    MoodLogRead,
    PredefinedSymptomRead,
    SymptomLogCreate,
    SymptomLogRead,
)
from src.services.store import new_record_id

router = APIRouter(tags=["symptoms"])


def _within(day: date, start_date: date | None, end_date: date | None) -> bool:
    if start_date and day < start_date:
        return False
    if end_date and day > end_date:
        return False
    return True


# ---------- Symptoms ----------

@router.get("/symptoms/predefined", response_model=list[PredefinedSymptomRead])
def list_predefined_symptoms() -> Any:
    return [PredefinedSymptomRead.model_validate(s) for s in PREDEFINED_SYMPTOMS]


@router.get("/symptoms", response_model=list[SymptomLogRead])
def list_symptoms(
    store: RecordStore,
    start_date: date | None = Query(default=None),
    end_date: date | None = Query(default=None),
) -> Any:
    rows = store.load_models("symptoms", SymptomLogRead)
    rows = [s for s in rows if _within(s.date, start_date, end_date)]
    return sorted(rows, key=lambda s: s.date, reverse=True)


@router.post("/symptoms", response_model=SymptomLogRead, status_code=201)
def log_symptom(store: RecordStore, body: SymptomLogCreate) -> Any:
    symptom = SymptomLogRead(id=new_record_id(), **body.model_dump())
    store.add("symptoms", symptom.model_dump(mode="json"))
    return symptom


@router.delete("/symptoms/{symptom_log_id}", status_code=204)
def delete_symptom(symptom_log_id: str, store: RecordStore) -> None:
    if not store.delete("symptoms", symptom_log_id):
        raise HTTPException(status_code=404, detail="Symptom log not found")


# ---------- Moods ----------

@router.get("/moods", response_model=list[MoodLogRead])
def list_moods(
    store: RecordStore,
    start_date: date | None = Query(default=None),
    end_date: date | None = Query(default=None),
) -> Any:
    rows = store.load_models("moods", MoodLogRead)
    rows = [m for m in rows if _within(m.date, start_date, end_date)]
    return sorted(rows, key=lambda m: m.date, reverse=True)


@router.post("/moods", response_model=MoodLogRead, status_code=201)
def log_mood(store: RecordStore, body: MoodLogCreate) -> Any:
    mood = MoodLogRead(id=new_record_id(), **body.model_dump())
    store.add("moods", mood.model_dump(mode="json"))
    return mood


@router.delete("/moods/{mood_log_id}", status_code=204)
def delete_mood(mood_log_id: str, store: RecordStore) -> None:
    if not store.delete("moods", mood_log_id):
        raise HTTPException(status_code=404, detail="Mood log not found")
