"""Cycle statistics engine.

Derives the average cycle length, period count and next-period prediction
from a list of logged periods.  Pure calendar averaging: every interval
between consecutive period starts is one cycle-length sample, and the
prediction is simply the latest start plus the rounded mean.

Known limitation: overlapping or duplicate periods are accepted as-is and
produce short (or zero-length) samples.  They never raise.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from src.cycle.config_loader import CycleConfig, get_cycle_config
from src.cycle.dates import add_days, day_difference
from src.cycle.records import Period

logger = logging.getLogger("cycle_insights.cycle.stats")


@dataclass(frozen=True)
class CycleStats:
    """Derived cycle statistics.  Never persisted.

    Attributes:
        average_cycle_length:  Rounded mean cycle length in days.  Falls back
                               to the configured default (28) with fewer
                               than two periods.
        total_periods:         Number of periods supplied (not samples).
        next_predicted_period: Latest period start + average length.  None
                               when no periods exist.
        cycle_lengths:         Individual samples, oldest first.
    """

    average_cycle_length: int
    total_periods: int
    next_predicted_period: date | None = None
    cycle_lengths: tuple[int, ...] = ()


def sort_periods(periods: Iterable[Period]) -> list[Period]:
    """Return a new list ordered by start date, oldest first."""
    return sorted(periods, key=lambda p: p.start_date)


def latest_period(periods: Iterable[Period]) -> Period | None:
    ordered = sort_periods(periods)
    return ordered[-1] if ordered else None


def cycle_lengths(periods: Iterable[Period]) -> tuple[int, ...]:
    """Day counts between each pair of consecutive period starts."""
    ordered = sort_periods(periods)
    return tuple(
        day_difference(prev.start_date, curr.start_date)
        for prev, curr in zip(ordered, ordered[1:])
    )


def _round_half_up(value: float) -> int:
    # round() would give banker's rounding (28.5 -> 28)
    return math.floor(value + 0.5)


def compute_cycle_stats(
    periods: list[Period], config: CycleConfig | None = None
) -> CycleStats:
    """Compute cycle statistics for a period history.

    Args:
        periods: Logged periods in any order.
        config:  Heuristic config (defaults to the global singleton).

    Returns:
        CycleStats.  Empty input yields the default length, zero periods and
        no prediction.
    """
    cfg = config or get_cycle_config()
    default_length = cfg.cycle.default_days

    if not periods:
        return CycleStats(average_cycle_length=default_length, total_periods=0)

    samples = cycle_lengths(periods)
    if samples:
        average = _round_half_up(sum(samples) / len(samples))
    else:
        average = default_length

    latest = latest_period(periods)
    next_period = add_days(latest.start_date, average) if latest else None

    logger.debug(
        "Cycle stats: %d periods, %d samples, average=%d",
        len(periods), len(samples), average,
    )
    return CycleStats(
        average_cycle_length=average,
        total_periods=len(periods),
        next_predicted_period=next_period,
        cycle_lengths=samples,
    )
