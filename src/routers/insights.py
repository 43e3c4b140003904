"""Derived cycle insights: statistics, predictions, phase and correlations.

Every handler loads the relevant record lists, injects "today", and
delegates to the pure engine in ``src.cycle``.  Nothing here is cached;
results are recomputed per request.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from fastapi import APIRouter, HTTPException, Query

from src.cycle.correlation import compute_correlation_insights
from src.cycle.dates import day_difference, days_until
from src.cycle.fertility import compute_fertile_window
from src.cycle.forecast import forecast_cycles
from src.cycle.phase import classify_phase, relevant_period
from src.cycle.signals import (
    OVULATION_SIGNAL_MESSAGES,
    calculate_bbt_trend,
    fertility_level,
    fertility_score,
    ovulation_signal,
)
from src.cycle.stats import compute_cycle_stats
from src.dependencies import EngineConfig, RecordStore, Today
from src.models.insights import (
    CorrelationInsightsRead,
    CycleForecastRead,
    CycleStatsRead,
    FertileWindowRead,
    FertilitySignalsRead,
    NextPeriodCountdownRead,
    PhaseRead,
)
from src.services.records import (
    load_bbt_entries,
    load_moods,
    load_mucus_entries,
    load_periods,
    load_symptoms,
)

router = APIRouter(prefix="/insights", tags=["insights"])
logger = logging.getLogger("cycle_insights.insights")


@router.get("/cycle-stats", response_model=CycleStatsRead)
def get_cycle_stats(store: RecordStore, config: EngineConfig) -> Any:
    return CycleStatsRead.model_validate(compute_cycle_stats(load_periods(store), config))


@router.get("/fertile-window", response_model=FertileWindowRead)
def get_fertile_window(store: RecordStore, config: EngineConfig) -> Any:
    window = compute_fertile_window(load_periods(store), config)
    if window is None:
        raise HTTPException(status_code=404, detail="No periods logged yet")
    return FertileWindowRead.model_validate(window)


@router.get("/phase", response_model=PhaseRead)
def get_phase(
    store: RecordStore,
    config: EngineConfig,
    today: Today,
    on: date | None = Query(default=None, description="Date to classify (defaults to today)"),
) -> Any:
    target = on or today
    periods = load_periods(store)
    period = relevant_period(target, periods)
    return PhaseRead(
        date=target,
        phase=classify_phase(target, periods, config),
        days_since_period_start=day_difference(period.start_date, target) if period else None,
    )


@router.get("/correlations", response_model=CorrelationInsightsRead)
def get_correlations(store: RecordStore, config: EngineConfig, today: Today) -> Any:
    insights = compute_correlation_insights(
        load_symptoms(store),
        load_moods(store),
        load_periods(store),
        today=today,
        config=config,
    )
    return CorrelationInsightsRead.model_validate(insights)


@router.get("/forecast", response_model=list[CycleForecastRead])
def get_forecast(
    store: RecordStore,
    config: EngineConfig,
    cycles: int = Query(default=3, ge=1, le=12),
) -> Any:
    return [
        CycleForecastRead.model_validate(f)
        for f in forecast_cycles(load_periods(store), cycles, config)
    ]


@router.get("/fertility-signals", response_model=FertilitySignalsRead)
def get_fertility_signals(
    store: RecordStore,
    config: EngineConfig,
    today: Today,
    on: date | None = Query(default=None, description="Date to score (defaults to today)"),
) -> Any:
    target = on or today
    bbt = load_bbt_entries(store)
    mucus = load_mucus_entries(store)

    score = fertility_score(target, bbt, mucus, config)
    signal = ovulation_signal(bbt, mucus, config)
    logger.debug("Fertility signals for %s: score=%d signal=%s", target, score, signal.value)
    return FertilitySignalsRead(
        date=target,
        bbt_trend=calculate_bbt_trend([e for e in bbt if e.date <= target], config=config),
        fertility_score=score,
        fertility_level=fertility_level(score),
        ovulation_signal=signal,
        ovulation_message=OVULATION_SIGNAL_MESSAGES[signal],
    )


@router.get("/days-until-next-period", response_model=NextPeriodCountdownRead)
def get_days_until_next_period(store: RecordStore, config: EngineConfig, today: Today) -> Any:
    stats = compute_cycle_stats(load_periods(store), config)
    if stats.next_predicted_period is None:
        return NextPeriodCountdownRead()
    return NextPeriodCountdownRead(
        next_predicted_period=stats.next_predicted_period,
        days_until=days_until(stats.next_predicted_period, today),
    )
