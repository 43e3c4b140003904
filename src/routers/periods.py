"""CRUD endpoints for logged periods."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from src.dependencies import RecordStore
from src.models.base import ErrorDetail, utc_now
from src.models.tracking import PeriodCreate, PeriodRead, PeriodUpdate
from src.services.store import new_record_id

router = APIRouter(prefix="/periods", tags=["periods"])

_NOT_FOUND = {404: {"model": ErrorDetail}}


@router.get("", response_model=list[PeriodRead])
def list_periods(store: RecordStore) -> Any:
    periods = store.load_models("periods", PeriodRead)
    return sorted(periods, key=lambda p: p.start_date, reverse=True)


@router.post("", response_model=PeriodRead, status_code=201)
def create_period(store: RecordStore, body: PeriodCreate) -> Any:
    period = PeriodRead(id=new_record_id(), **body.model_dump())
    store.add("periods", period.model_dump(mode="json"))
    return period


@router.get("/{period_id}", response_model=PeriodRead, responses=_NOT_FOUND)
def get_period(period_id: str, store: RecordStore) -> Any:
    row = store.get("periods", period_id)
    if not row:
        raise HTTPException(status_code=404, detail="Period not found")
    return PeriodRead.model_validate(row)


@router.patch("/{period_id}", response_model=PeriodRead, responses=_NOT_FOUND)
def update_period(period_id: str, store: RecordStore, body: PeriodUpdate) -> Any:
    updates = body.model_dump(exclude_unset=True)
    if not updates:
        raise HTTPException(status_code=400, detail="No fields to update")

    row = store.get("periods", period_id)
    if not row:
        raise HTTPException(status_code=404, detail="Period not found")

    try:
        period = PeriodRead.model_validate({**row, **updates, "updated_at": utc_now()})
    except ValidationError as exc:
        # Merged record can still violate end_date >= start_date
        raise HTTPException(
            status_code=422,
            detail=[{"loc": list(e["loc"]), "msg": e["msg"]} for e in exc.errors()],
        ) from exc

    store.replace("periods", period_id, period.model_dump(mode="json"))
    return period


@router.delete("/{period_id}", status_code=204, responses=_NOT_FOUND)
def delete_period(period_id: str, store: RecordStore) -> None:
    if not store.delete("periods", period_id):
        raise HTTPException(status_code=404, detail="Period not found")
