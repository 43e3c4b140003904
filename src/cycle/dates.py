"""Calendar-day arithmetic shared by every engine component.

All helpers normalize their inputs to date-only values first, so a
``datetime`` carrying a time-of-day (or a DST offset) can never shift a
result by a day.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta


def as_date(value: date | datetime) -> date:
    """Strip any time component, returning a plain ``date``."""
    if isinstance(value, datetime):
        return value.date()
    return value


def day_difference(a: date | datetime, b: date | datetime) -> int:
    """Return the absolute number of calendar days between two dates.

    Because both sides are normalized to whole days the difference is
    always an integer, which already satisfies round-up semantics.
    """
    return abs((as_date(b) - as_date(a)).days)


def is_date_in_range(
    value: date | datetime,
    start: date | datetime,
    end: date | datetime | None = None,
) -> bool:
    """Check whether ``value`` falls in ``[start, end]``.

    With no ``end`` the range is the single day ``start``.
    """
    day = as_date(value)
    if end is None:
        return day == as_date(start)
    return as_date(start) <= day <= as_date(end)


def add_days(value: date | datetime, days: int) -> date:
    return as_date(value) + timedelta(days=days)


def days_until(target: date | datetime, today: date | datetime) -> int:
    """Signed days from ``today`` to ``target``; negative once it has passed."""
    return (as_date(target) - as_date(today)).days
