"""Response models for derived cycle insights.

All of these are built from the engine's dataclasses with
``model_validate(obj)`` (``from_attributes`` is enabled on the base).
"""

from __future__ import annotations

import datetime as dt

from src.cycle.correlation import InsightStatus
from src.cycle.records import CyclePhase, MoodType
from src.cycle.signals import BBTTrend, OvulationSignal
from src.models.base import CycleInsightsBase


class CycleStatsRead(CycleInsightsBase):
    average_cycle_length: int
    total_periods: int
    next_predicted_period: dt.date | None = None
    cycle_lengths: list[int] = []


class FertileWindowRead(CycleInsightsBase):
    ovulation_date: dt.date
    start: dt.date
    end: dt.date


class PhaseRead(CycleInsightsBase):
    date: dt.date
    phase: CyclePhase
    days_since_period_start: int | None = None


class SymptomCountRead(CycleInsightsBase):
    name: str
    count: int


class MoodCountRead(CycleInsightsBase):
    mood: MoodType
    count: int


class CorrelationInsightsRead(CycleInsightsBase):
    status: InsightStatus
    window_start: dt.date
    top_symptoms: list[SymptomCountRead] = []
    top_moods: list[MoodCountRead] = []
    phase_symptoms: dict[CyclePhase, list[str]] = {}
    dominant_phase: CyclePhase | None = None
    dominant_phase_insight: str | None = None
    message: str | None = None


class CycleForecastRead(CycleInsightsBase):
    cycle_number: int
    period_start: dt.date
    ovulation_date: dt.date
    fertile_start: dt.date
    fertile_end: dt.date


class FertilitySignalsRead(CycleInsightsBase):
    date: dt.date
    bbt_trend: BBTTrend
    fertility_score: int
    fertility_level: str
    ovulation_signal: OvulationSignal
    ovulation_message: str


class NextPeriodCountdownRead(CycleInsightsBase):
    next_predicted_period: dt.date | None = None
    days_until: int | None = None
