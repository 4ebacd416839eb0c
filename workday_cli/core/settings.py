"""Work settings: salary, days per month and the daily work window.

Values read from config are clamped and defaulted here, so everything
downstream can trust them. User edits go through ``update_settings``,
which rejects malformed times outright.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional, Union

from workday_cli.core.constants import (
    DEFAULT_END_TIME,
    DEFAULT_MONTHLY_SALARY,
    DEFAULT_START_TIME,
    DEFAULT_WORK_DAYS_PER_MONTH,
)
from workday_cli.core.models import WorkWindow

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class SettingsError(ValueError):
    """Raised when user-supplied settings cannot be accepted."""


def parse_time_safely(value: str, default: time) -> time:
    """Parse HH:MM (or HH:MM:SS), returning ``default`` when unparsable."""
    text = str(value).strip()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    return default


def _to_decimal(value: Any, default: Union[float, Decimal]) -> Decimal:
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return Decimal(str(default))
    if not result.is_finite():
        return Decimal(str(default))
    return result


def _to_int(value: Any, default: int) -> int:
    try:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return int(value)
        return int(str(value).strip())
    except (ValueError, OverflowError):
        return default


@dataclass(frozen=True)
class WorkSettings:
    """Snapshot of the user's work settings."""

    work_days_per_month: int = DEFAULT_WORK_DAYS_PER_MONTH
    start_time: str = DEFAULT_START_TIME
    end_time: str = DEFAULT_END_TIME
    monthly_salary: Decimal = Decimal(str(DEFAULT_MONTHLY_SALARY))

    @property
    def days(self) -> int:
        return min(max(self.work_days_per_month, 1), 31)

    @property
    def salary(self) -> Decimal:
        return max(self.monthly_salary, Decimal(0))

    @property
    def window(self) -> WorkWindow:
        return WorkWindow(
            start=parse_time_safely(self.start_time, time(9, 0)),
            end=parse_time_safely(self.end_time, time(18, 0)),
        )


def settings_from_config(config: Dict[str, Any]) -> WorkSettings:
    """Build a settings snapshot from the ``[work]`` config table."""
    work = config.get("work")
    if not isinstance(work, dict):
        work = {}
    return WorkSettings(
        work_days_per_month=_to_int(
            work.get("days_per_month", DEFAULT_WORK_DAYS_PER_MONTH),
            DEFAULT_WORK_DAYS_PER_MONTH,
        ),
        start_time=str(work.get("start_time", DEFAULT_START_TIME)).strip(),
        end_time=str(work.get("end_time", DEFAULT_END_TIME)).strip(),
        monthly_salary=_to_decimal(
            work.get("monthly_salary", DEFAULT_MONTHLY_SALARY),
            DEFAULT_MONTHLY_SALARY,
        ),
    )


def settings_to_config(config: Dict[str, Any], settings: WorkSettings) -> Dict[str, Any]:
    """Return a copy of ``config`` with the ``[work]`` table replaced."""
    updated = dict(config)
    updated["work"] = {
        "days_per_month": settings.days,
        "start_time": settings.start_time,
        "end_time": settings.end_time,
        "monthly_salary": float(settings.salary),
    }
    return updated


def validate_time_text(value: str) -> str:
    text = value.strip()
    if not _TIME_RE.match(text):
        raise SettingsError(f"Invalid time '{value}'. Expected format: HH:MM (e.g. 09:00)")
    return text


def update_settings(
    current: WorkSettings,
    days: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    salary: Optional[str] = None,
) -> WorkSettings:
    """Apply raw user edits to ``current``.

    Non-numeric day counts and salaries fall back to the defaults rather
    than failing; malformed times raise SettingsError.
    """
    changes: Dict[str, Any] = {}
    if start is not None:
        changes["start_time"] = validate_time_text(start)
    if end is not None:
        changes["end_time"] = validate_time_text(end)
    if days is not None:
        parsed_days = _to_int(days, DEFAULT_WORK_DAYS_PER_MONTH)
        changes["work_days_per_month"] = min(max(parsed_days, 1), 31)
    if salary is not None:
        parsed_salary = _to_decimal(salary, DEFAULT_MONTHLY_SALARY)
        changes["monthly_salary"] = max(parsed_salary, Decimal(0))
    return replace(current, **changes)
