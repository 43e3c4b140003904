"""Project several upcoming cycles from the period history.

Each projected cycle starts ``average_cycle_length`` days after the
previous one, beginning from the most recent logged period.  Ovulation and
fertile window for each projected cycle use the same calendar offsets as
``compute_fertile_window``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from src.cycle.config_loader import CycleConfig, get_cycle_config
from src.cycle.dates import add_days
from src.cycle.fertility import calculate_fertile_window, calculate_ovulation_date
from src.cycle.records import Period
from src.cycle.stats import compute_cycle_stats, latest_period


@dataclass(frozen=True)
class CycleForecast:
    cycle_number: int  # 1 = the next cycle
    period_start: date
    ovulation_date: date
    fertile_start: date
    fertile_end: date


def forecast_cycles(
    periods: list[Period],
    count: int = 3,
    config: CycleConfig | None = None,
) -> list[CycleForecast]:
    """Forecast the next ``count`` cycles.

    Args:
        periods: Logged periods in any order.
        count:   Number of cycles to project (>= 1).
        config:  Heuristic config (defaults to the global singleton).

    Returns:
        Forecasts ordered by cycle number; empty when no periods are logged.

    Raises:
        ValueError: If ``count`` is less than 1.
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    cfg = config or get_cycle_config()
    latest = latest_period(periods)
    if latest is None:
        return []

    length = compute_cycle_stats(periods, cfg).average_cycle_length
    forecasts: list[CycleForecast] = []
    anchor = latest.start_date
    for n in range(1, count + 1):
        start = add_days(anchor, length)
        # Ovulation within the projected cycle, not the one before it
        ovulation = calculate_ovulation_date(start, length, cfg)
        fertile_start, fertile_end = calculate_fertile_window(ovulation, cfg)
        forecasts.append(
            CycleForecast(
                cycle_number=n,
                period_start=start,
                ovulation_date=ovulation,
                fertile_start=fertile_start,
                fertile_end=fertile_end,
            )
        )
        anchor = start
    return forecasts
