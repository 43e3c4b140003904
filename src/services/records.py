"""Load validated engine records out of the record store.

This is the data-loading boundary: stored dicts are validated through the
pydantic ``*Read`` models (a bad date or enum raises ``StoreError`` here),
then converted into the immutable dataclasses the engine consumes.
"""

from __future__ import annotations

from src.cycle.records import BBTEntry, CervicalMucusEntry, LoggedMood, LoggedSymptom, Period
from src.models.tracking import (
    BBTEntryRead,
    CervicalMucusRead,
    MoodLogRead,
    PeriodRead,
    SymptomLogRead,
)
from src.services.store import JsonRecordStore


def load_periods(store: JsonRecordStore) -> list[Period]:
    return [p.to_record() for p in store.load_models("periods", PeriodRead)]


def load_symptoms(store: JsonRecordStore) -> list[LoggedSymptom]:
    return [s.to_record() for s in store.load_models("symptoms", SymptomLogRead)]


def load_moods(store: JsonRecordStore) -> list[LoggedMood]:
    return [m.to_record() for m in store.load_models("moods", MoodLogRead)]


def load_bbt_entries(store: JsonRecordStore) -> list[BBTEntry]:
    return [e.to_record() for e in store.load_models("bbt", BBTEntryRead)]


def load_mucus_entries(store: JsonRecordStore) -> list[CervicalMucusEntry]:
    return [e.to_record() for e in store.load_models("cervical_mucus", CervicalMucusRead)]
