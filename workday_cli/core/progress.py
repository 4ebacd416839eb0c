"""Work window progress and earnings: pure business logic.

No I/O: this module only transforms data. Money stays unrounded here;
rounding to cents is a presentation concern (see utils.formatting).
"""

from __future__ import annotations

from datetime import time
from decimal import Decimal
from typing import Union

from workday_cli.core.models import ProgressSnapshot, WorkWindow, seconds_of_day

_ZERO = Decimal(0)


def _to_decimal(value: Union[Decimal, float, int, str]) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def daily_salary(monthly_salary: Union[Decimal, float, int], work_days_per_month: int) -> Decimal:
    """Monthly salary spread over the working days of a month."""
    return _to_decimal(monthly_salary) / max(1, int(work_days_per_month))


def compute_progress(
    now: time,
    window: WorkWindow,
    daily_salary: Union[Decimal, float, int],
) -> ProgressSnapshot:
    """Compute how far ``now`` is through ``window`` and what has been earned.

    A window whose end is not after its start has no span and always reports
    zero progress.
    """
    salary = _to_decimal(daily_salary)
    start = seconds_of_day(window.start)
    end = seconds_of_day(window.end)
    current = seconds_of_day(now)

    if window.total_seconds <= 0 or current < start:
        return ProgressSnapshot(percent=0.0, earned_today=_ZERO, daily_salary=salary)
    if current >= end:
        return ProgressSnapshot(percent=100.0, earned_today=salary, daily_salary=salary)

    total_seconds = max(1, window.total_seconds)
    passed_seconds = min(max(current - start, 0), total_seconds)
    percent = min(max(100.0 * passed_seconds / total_seconds, 0.0), 100.0)
    earned = salary * passed_seconds / total_seconds

    remaining = None
    if 0.0 < percent < 100.0:
        remaining = (end - current) // 60

    return ProgressSnapshot(
        percent=percent,
        earned_today=earned,
        daily_salary=salary,
        remaining_minutes=remaining,
    )
