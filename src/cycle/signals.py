"""Fertility signals from basal body temperature and cervical mucus.

Three day-level heuristics:

1. BBT trend: compare the mean of the first and second halves of the last
   few readings.  A move of more than 0.1 °C either way is a trend.
2. Fertility score (0-100) for a single day: points for a rising or stable
   BBT trend plus points for mucus consistency and amount.
3. Ovulation signal: a thermal shift (a reading more than 0.2 °C above the
   mean of the three before it, within the last week of readings) combined
   with the presence of fertile-quality mucus (egg-white or watery).

These are independent of the calendar phase classifier.
"""

from __future__ import annotations

import logging
import statistics
from datetime import date
from enum import Enum

from src.cycle.config_loader import CycleConfig, get_cycle_config
from src.cycle.records import BBTEntry, CervicalMucusEntry, MucusAmount, MucusConsistency

logger = logging.getLogger("cycle_insights.cycle.signals")

MAX_FERTILITY_SCORE = 100

# Score contributions
_BBT_TREND_POINTS = {"rising": 30, "stable": 10, "falling": 0}
_CONSISTENCY_POINTS: dict[MucusConsistency, int] = {
    MucusConsistency.egg_white: 40,
    MucusConsistency.watery: 30,
    MucusConsistency.creamy: 20,
    MucusConsistency.sticky: 10,
    MucusConsistency.dry: 0,
}
_AMOUNT_POINTS: dict[MucusAmount, int] = {
    MucusAmount.heavy: 20,
    MucusAmount.moderate: 15,
    MucusAmount.light: 10,
    MucusAmount.none: 0,
}
_FERTILE_MUCUS = {MucusConsistency.egg_white, MucusConsistency.watery}

# Ovulation window covers the last 7 readings
_SHIFT_WINDOW = 7
_SHIFT_BASELINE = 3


class BBTTrend(str, Enum):
    rising = "rising"
    falling = "falling"
    stable = "stable"


class OvulationSignal(str, Enum):
    likely_ovulated = "likely_ovulated"
    approaching = "approaching"
    post_ovulation = "post_ovulation"
    insufficient_data = "insufficient_data"


OVULATION_SIGNAL_MESSAGES: dict[OvulationSignal, str] = {
    OvulationSignal.likely_ovulated: "Ovulation likely occurred in the past 1-3 days",
    OvulationSignal.approaching: "Approaching ovulation - fertile window",
    OvulationSignal.post_ovulation: "Post-ovulation phase",
    OvulationSignal.insufficient_data: "Insufficient data for prediction",
}


def calculate_bbt_trend(
    entries: list[BBTEntry],
    days: int | None = None,
    config: CycleConfig | None = None,
) -> BBTTrend:
    """Classify the recent direction of basal body temperature.

    Args:
        entries: BBT readings in any order.
        days:    Number of most recent readings to consider (default 3).
        config:  Heuristic config (defaults to the global singleton).

    Returns:
        BBTTrend.  ``stable`` when fewer than ``days`` readings exist, or when
        ``days`` is 1 and there is nothing to compare against.

    Raises:
        ValueError: If ``days`` is less than 1.
    """
    sg = (config or get_cycle_config()).signals
    if days is None:
        days = sg.bbt_trend_days
    if days < 1:
        raise ValueError(f"days must be >= 1, got {days}")
    if len(entries) < days:
        return BBTTrend.stable

    recent = sorted(entries, key=lambda e: e.date)[-days:]
    temps = [e.temperature for e in recent]
    half = days // 2
    if half == 0:
        return BBTTrend.stable

    diff = statistics.mean(temps[-half:]) - statistics.mean(temps[:half])
    if diff > sg.bbt_trend_threshold_c:
        return BBTTrend.rising
    if diff < -sg.bbt_trend_threshold_c:
        return BBTTrend.falling
    return BBTTrend.stable


def fertility_score(
    on_date: date,
    bbt_entries: list[BBTEntry],
    mucus_entries: list[CervicalMucusEntry],
    config: CycleConfig | None = None,
) -> int:
    """Score how fertile a single day looks, from 0 to 100.

    Only entries logged on ``on_date`` contribute.  The BBT trend is
    computed from readings up to and including that day.
    """
    score = 0

    bbt_entry = next((e for e in bbt_entries if e.date == on_date), None)
    if bbt_entry is not None:
        history = [e for e in bbt_entries if e.date <= on_date]
        trend = calculate_bbt_trend(history, config=config)
        score += _BBT_TREND_POINTS[trend.value]

    mucus_entry = next((e for e in mucus_entries if e.date == on_date), None)
    if mucus_entry is not None:
        score += _CONSISTENCY_POINTS[mucus_entry.consistency]
        score += _AMOUNT_POINTS[mucus_entry.amount]

    return min(score, MAX_FERTILITY_SCORE)


def fertility_level(score: int) -> str:
    if score >= 70:
        return "high"
    if score >= 40:
        return "medium"
    return "low"


def _has_temperature_shift(temps: list[float], threshold: float) -> bool:
    last = temps[-_SHIFT_WINDOW:]
    for i in range(_SHIFT_BASELINE, len(last)):
        baseline = statistics.mean(last[i - _SHIFT_BASELINE:i])
        if last[i] > baseline + threshold:
            return True
    return False


def ovulation_signal(
    bbt_entries: list[BBTEntry],
    mucus_entries: list[CervicalMucusEntry],
    config: CycleConfig | None = None,
) -> OvulationSignal:
    """Combine a thermal shift and fertile mucus into an ovulation signal.

    Only the most recent entries of each list (30 by default, taken in the
    order supplied, then sorted by date) are considered.

    Returns:
        OvulationSignal.  ``insufficient_data`` with fewer than 7 BBT or 3
        mucus entries.
    """
    sg = (config or get_cycle_config()).signals
    recent_bbt = sorted(bbt_entries[-sg.recent_entries:], key=lambda e: e.date)
    recent_mucus = sorted(mucus_entries[-sg.recent_entries:], key=lambda e: e.date)

    if len(recent_bbt) < sg.min_bbt_entries or len(recent_mucus) < sg.min_mucus_entries:
        logger.debug(
            "Not enough data for ovulation signal: %d BBT, %d mucus",
            len(recent_bbt), len(recent_mucus),
        )
        return OvulationSignal.insufficient_data

    shift = _has_temperature_shift(
        [e.temperature for e in recent_bbt], sg.bbt_shift_threshold_c
    )
    fertile_mucus = any(
        e.consistency in _FERTILE_MUCUS
        for e in recent_mucus[-sg.recent_mucus_entries:]
    )

    if shift and fertile_mucus:
        return OvulationSignal.likely_ovulated
    if fertile_mucus:
        return OvulationSignal.approaching
    if shift:
        return OvulationSignal.post_ovulation
    return OvulationSignal.insufficient_data
