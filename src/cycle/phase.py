"""Cycle phase classification for a single date.

The classifier looks back to the most recent period that started on or
before the date and buckets the elapsed days with fixed thresholds:

    0-5    menstrual
    6-13   follicular
    14-16  ovulation
    17+    luteal

The thresholds do not adapt to the user's average cycle length, unlike
the statistics and fertility estimators.
"""

from __future__ import annotations

from datetime import date, datetime

from src.cycle.config_loader import CycleConfig, get_cycle_config
from src.cycle.dates import as_date, day_difference
from src.cycle.records import CyclePhase, Period

PHASE_DISPLAY_NAMES: dict[CyclePhase, str] = {
    CyclePhase.menstrual: "menstrual phase",
    CyclePhase.follicular: "follicular phase",
    CyclePhase.ovulation: "ovulation",
    CyclePhase.luteal: "luteal phase",
}


def phase_for_days_since(
    days_since: int, config: CycleConfig | None = None
) -> CyclePhase:
    """Map days elapsed since a period start onto a phase."""
    thresholds = (config or get_cycle_config()).phases
    if days_since <= thresholds.menstrual_max_day:
        return CyclePhase.menstrual
    if days_since <= thresholds.follicular_max_day:
        return CyclePhase.follicular
    if days_since <= thresholds.ovulation_max_day:
        return CyclePhase.ovulation
    return CyclePhase.luteal


def relevant_period(reference_date: date | datetime, periods: list[Period]) -> Period | None:
    """Latest period starting on or before ``reference_date``."""
    day = as_date(reference_date)
    candidates = [p for p in periods if p.start_date <= day]
    if not candidates:
        return None
    return max(candidates, key=lambda p: p.start_date)


def classify_phase(
    reference_date: date | datetime,
    periods: list[Period],
    config: CycleConfig | None = None,
) -> CyclePhase:
    """Classify a date into a cycle phase.

    Args:
        reference_date: Date to classify.
        periods:        Logged periods in any order.
        config:         Heuristic config (defaults to the global singleton).

    Returns:
        The CyclePhase, or ``CyclePhase.none`` when every period starts
        after the date.
    """
    period = relevant_period(reference_date, periods)
    if period is None:
        return CyclePhase.none
    days_since = day_difference(period.start_date, reference_date)
    return phase_for_days_since(days_since, config)
