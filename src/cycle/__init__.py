"""Cycle prediction and phase-correlation engine.

Pure, synchronous functions over lists of period, symptom, mood and
fertility records.  Nothing in this package performs I/O apart from loading
its heuristic configuration, and no function mutates its inputs.

Core modules:
    dates        : Calendar-day arithmetic
    stats        : Average cycle length and next-period prediction
    fertility    : Ovulation date and fertile window
    phase        : Phase classification for a date
    correlation  : Symptom/mood frequency and dominant symptom phase
    forecast     : Multi-cycle projection
    signals      : BBT trend, fertility score, ovulation signal
    config_loader: Load/validate/hot-reload cycle_config.yaml
    records      : Record dataclasses and closed vocabularies
"""

from src.cycle.config_loader import CycleConfig, get_cycle_config
from src.cycle.correlation import CorrelationInsights, compute_correlation_insights
from src.cycle.fertility import FertileWindow, compute_fertile_window
from src.cycle.forecast import CycleForecast, forecast_cycles
from src.cycle.phase import classify_phase
from src.cycle.records import (
    BBTEntry,
    CervicalMucusEntry,
    CyclePhase,
    LoggedMood,
    LoggedSymptom,
    Period,
)
from src.cycle.stats import CycleStats, compute_cycle_stats

__all__ = [
    "BBTEntry",
    "CervicalMucusEntry",
    "CorrelationInsights",
    "CycleConfig",
    "CycleForecast",
    "CyclePhase",
    "CycleStats",
    "FertileWindow",
    "LoggedMood",
    "LoggedSymptom",
    "Period",
    "classify_phase",
    "compute_correlation_insights",
    "compute_cycle_stats",
    "compute_fertile_window",
    "forecast_cycles",
    "get_cycle_config",
]
