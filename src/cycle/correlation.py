"""Symptom and mood correlation with cycle phase.

Looks at a trailing window of logged symptoms and moods (30 days by
default) and surfaces:
- the most frequent symptoms and moods, with counts
- which cycle phase most of the recent symptoms fell in

Phase assignment goes through ``classify_phase`` so it shares its fixed
thresholds.  When nothing was logged in the window at all, the result is a
dedicated empty state rather than an insight built from zero counts.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from src.cycle.config_loader import CycleConfig, get_cycle_config
from src.cycle.dates import add_days
from src.cycle.phase import PHASE_DISPLAY_NAMES, classify_phase
from src.cycle.records import (
    ACTIVE_PHASES,
    CyclePhase,
    LoggedMood,
    LoggedSymptom,
    MoodType,
    Period,
)

logger = logging.getLogger("cycle_insights.cycle.correlation")

EMPTY_STATE_MESSAGE = "Start logging symptoms and moods to see patterns with your cycle"
NO_PATTERN_MESSAGE = "No recent symptom patterns detected"


class InsightStatus(str, Enum):
    empty = "empty"          # nothing logged in the window
    populated = "populated"  # something logged, insight may still be "no pattern"


@dataclass(frozen=True)
class SymptomCount:
    name: str
    count: int


@dataclass(frozen=True)
class MoodCount:
    mood: MoodType
    count: int


@dataclass
class CorrelationInsights:
    """Result of a correlation pass.

    Attributes:
        status:                 Empty vs. populated, for caller messaging.
        window_start:           First day included in the trailing window.
        top_symptoms:           Most frequent symptom names, descending.
        top_moods:              Most frequent moods, descending.
        phase_symptoms:         Phase → symptom names logged in that phase.
        dominant_phase:         Phase with the most symptoms, or None.
        dominant_phase_insight: Display sentence; None in the empty state.
        message:                Empty-state prompt; None when populated.
    """

    status: InsightStatus
    window_start: date
    top_symptoms: list[SymptomCount] = field(default_factory=list)
    top_moods: list[MoodCount] = field(default_factory=list)
    phase_symptoms: dict[CyclePhase, list[str]] = field(default_factory=dict)
    dominant_phase: CyclePhase | None = None
    dominant_phase_insight: str | None = None
    message: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.status is InsightStatus.empty


def _bucket_by_phase(
    symptoms: list[LoggedSymptom],
    periods: list[Period],
    config: CycleConfig,
) -> dict[CyclePhase, list[str]]:
    buckets: dict[CyclePhase, list[str]] = {phase: [] for phase in ACTIVE_PHASES}
    for symptom in symptoms:
        phase = classify_phase(symptom.date, periods, config)
        if phase in buckets:
            buckets[phase].append(symptom.symptom_name)
    return buckets


def _dominant_phase(buckets: dict[CyclePhase, list[str]]) -> CyclePhase | None:
    """Phase with the most entries; earlier phases win ties."""
    best: CyclePhase | None = None
    best_count = 0
    for phase in ACTIVE_PHASES:
        count = len(buckets.get(phase, []))
        if count > best_count:
            best, best_count = phase, count
    return best


def compute_correlation_insights(
    symptoms: list[LoggedSymptom],
    moods: list[LoggedMood],
    periods: list[Period],
    today: date,
    config: CycleConfig | None = None,
) -> CorrelationInsights:
    """Rank recent symptoms/moods and find the dominant symptom phase.

    Args:
        symptoms: All logged symptoms.
        moods:    All logged moods.
        periods:  Logged periods in any order.
        today:    Reference date for the trailing window.
        config:   Heuristic config (defaults to the global singleton).

    Returns:
        CorrelationInsights.  ``status`` is ``empty`` when neither list has
        an entry inside the window.
    """
    cfg = config or get_cycle_config()
    window_start = add_days(today, -cfg.correlation.window_days)
    top_n = cfg.correlation.top_n

    recent_symptoms = [s for s in symptoms if s.date >= window_start]
    recent_moods = [m for m in moods if m.date >= window_start]

    logger.debug(
        "Correlating %d/%d symptoms and %d/%d moods since %s",
        len(recent_symptoms), len(symptoms), len(recent_moods), len(moods), window_start,
    )

    if not recent_symptoms and not recent_moods:
        return CorrelationInsights(
            status=InsightStatus.empty,
            window_start=window_start,
            message=EMPTY_STATE_MESSAGE,
        )

    # Counter.most_common is a stable sort, so ties keep first-seen order
    symptom_counts = Counter(s.symptom_name for s in recent_symptoms)
    mood_counts = Counter(m.mood for m in recent_moods)

    buckets = _bucket_by_phase(recent_symptoms, periods, cfg)
    dominant = _dominant_phase(buckets)
    if dominant is None:
        insight = NO_PATTERN_MESSAGE
    else:
        insight = f"Most symptoms occur during {PHASE_DISPLAY_NAMES[dominant]}"

    return CorrelationInsights(
        status=InsightStatus.populated,
        window_start=window_start,
        top_symptoms=[SymptomCount(name, n) for name, n in symptom_counts.most_common(top_n)],
        top_moods=[MoodCount(MoodType(mood), n) for mood, n in mood_counts.most_common(top_n)],
        phase_symptoms=buckets,
        dominant_phase=dominant,
        dominant_phase_insight=insight,
    )
