"""Pydantic models for tracked records: periods, symptoms, moods, BBT and
cervical mucus.

These are the validation boundary.  Malformed dates, inverted period
ranges, out-of-range intensities and unknown vocabulary values are rejected
here, so the engine in ``src.cycle`` only ever sees well-formed records.
Each ``*Read`` model converts to its engine record via ``to_record()``.
"""

from __future__ import annotations

import datetime as dt

from pydantic import Field, model_validator

from src.cycle.records import (
    BBTEntry,
    CervicalMucusEntry,
    LoggedMood,
    LoggedSymptom,
    MoodType,
    MucusAmount,
    MucusConsistency,
    Period,
    SymptomCategory,
    SymptomIntensity,
)
from src.models.base import CycleInsightsBase, TimestampMixin


# ---------- Periods ----------

class PeriodBase(CycleInsightsBase):
    start_date: dt.date
    end_date: dt.date | None = None
    notes: str | None = None

    @model_validator(mode="after")
    def _end_not_before_start(self) -> "PeriodBase":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self


class PeriodCreate(PeriodBase):
    pass


class PeriodUpdate(CycleInsightsBase):
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    notes: str | None = None


class PeriodRead(PeriodBase, TimestampMixin):
    id: str

    def to_record(self) -> Period:
        return Period(
            id=self.id,
            start_date=self.start_date,
            end_date=self.end_date,
            notes=self.notes,
        )


# ---------- Symptoms ----------

class SymptomLogBase(CycleInsightsBase):
    symptom_id: str = Field(min_length=1)
    symptom_name: str = Field(min_length=1)
    intensity: SymptomIntensity
    date: dt.date
    is_custom: bool = False
    notes: str | None = None


class SymptomLogCreate(SymptomLogBase):
    pass


class SymptomLogRead(SymptomLogBase, TimestampMixin):
    id: str

    def to_record(self) -> LoggedSymptom:
        return LoggedSymptom(
            id=self.id,
            symptom_id=self.symptom_id,
            symptom_name=self.symptom_name,
            intensity=self.intensity,
            date=self.date,
            is_custom=self.is_custom,
            notes=self.notes,
        )


class PredefinedSymptomRead(CycleInsightsBase):
    id: str
    name: str
    category: SymptomCategory


# ---------- Moods ----------

class MoodLogBase(CycleInsightsBase):
    mood: MoodType
    intensity: int = Field(ge=1, le=5)
    date: dt.date
    notes: str | None = None


class MoodLogCreate(MoodLogBase):
    pass


class MoodLogRead(MoodLogBase, TimestampMixin):
    id: str

    def to_record(self) -> LoggedMood:
        return LoggedMood(
            id=self.id,
            mood=self.mood,
            intensity=self.intensity,
            date=self.date,
            notes=self.notes,
        )


# ---------- Basal body temperature ----------

class BBTEntryBase(CycleInsightsBase):
    date: dt.date
    temperature: float = Field(gt=30.0, lt=45.0)  # °C
    time_of_measurement: str = Field(default="07:00", pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    notes: str | None = None


class BBTEntryCreate(BBTEntryBase):
    pass


class BBTEntryRead(BBTEntryBase, TimestampMixin):
    id: str

    def to_record(self) -> BBTEntry:
        return BBTEntry(
            id=self.id,
            date=self.date,
            temperature=self.temperature,
            time_of_measurement=self.time_of_measurement,
            notes=self.notes,
        )


# ---------- Cervical mucus ----------

class CervicalMucusBase(CycleInsightsBase):
    date: dt.date
    consistency: MucusConsistency
    amount: MucusAmount
    notes: str | None = None


class CervicalMucusCreate(CervicalMucusBase):
    pass


class CervicalMucusRead(CervicalMucusBase, TimestampMixin):
    id: str

    def to_record(self) -> CervicalMucusEntry:
        return CervicalMucusEntry(
            id=self.id,
            date=self.date,
            consistency=self.consistency,
            amount=self.amount,
            notes=self.notes,
        )
