"""Calendar-method ovulation and fertile window estimation.

Ovulation is placed a fixed luteal phase (14 days) before the next
predicted period, i.e. ``average_cycle_length - 14`` days after the most
recent period start.  The fertile window spans 5 days before ovulation to
1 day after it.

No clamping is applied.  When the average cycle is shorter than the luteal
phase the ovulation offset is negative and the predicted date precedes the
period start; callers receive that date unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from src.cycle.config_loader import CycleConfig, get_cycle_config
from src.cycle.dates import add_days, is_date_in_range
from src.cycle.records import Period
from src.cycle.stats import compute_cycle_stats, latest_period

logger = logging.getLogger("cycle_insights.cycle.fertility")


@dataclass(frozen=True)
class FertileWindow:
    """Predicted ovulation date and fertile window bounds (inclusive)."""

    ovulation_date: date
    start: date
    end: date

    def contains(self, day: date) -> bool:
        return is_date_in_range(day, self.start, self.end)


def calculate_ovulation_date(
    last_period_start: date,
    cycle_length: int,
    config: CycleConfig | None = None,
) -> date:
    cfg = config or get_cycle_config()
    ovulation_day = cycle_length - cfg.fertility.luteal_phase_days
    if ovulation_day < 0:
        logger.debug(
            "Cycle length %d shorter than luteal phase; ovulation precedes period start",
            cycle_length,
        )
    return add_days(last_period_start, ovulation_day)


def calculate_fertile_window(
    ovulation_date: date, config: CycleConfig | None = None
) -> tuple[date, date]:
    """Return ``(start, end)`` of the fertile window around ovulation."""
    cfg = config or get_cycle_config()
    start = add_days(ovulation_date, -cfg.fertility.fertile_days_before_ovulation)
    end = add_days(ovulation_date, cfg.fertility.fertile_days_after_ovulation)
    return start, end


def predicted_ovulation_date(
    periods: list[Period], config: CycleConfig | None = None
) -> date | None:
    """Ovulation date for the cycle following the most recent period."""
    latest = latest_period(periods)
    if latest is None:
        return None
    stats = compute_cycle_stats(periods, config)
    return calculate_ovulation_date(latest.start_date, stats.average_cycle_length, config)


def compute_fertile_window(
    periods: list[Period], config: CycleConfig | None = None
) -> FertileWindow | None:
    """Predict ovulation and the fertile window from a period history.

    Args:
        periods: Logged periods in any order.
        config:  Heuristic config (defaults to the global singleton).

    Returns:
        FertileWindow, or None when no periods are logged.
    """
    ovulation = predicted_ovulation_date(periods, config)
    if ovulation is None:
        return None
    start, end = calculate_fertile_window(ovulation, config)
    return FertileWindow(ovulation_date=ovulation, start=start, end=end)
