"""Date and time-of-day parsing helpers."""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Generator, Optional

import typer

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^\d{1,2}:\d{2}(:\d{2})?$")


def validate_date(value: Optional[str]) -> Optional[str]:
    """Typer callback that validates YYYY-MM-DD format for date options."""
    if value is None:
        return value
    if not _DATE_RE.match(value):
        raise typer.BadParameter(
            f"Invalid date '{value}'. Expected format: YYYY-MM-DD (e.g. 2026-01-15)"
        )
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise typer.BadParameter(
            f"Invalid date '{value}'. Expected format: YYYY-MM-DD (e.g. 2026-01-15)"
        )
    return value


def validate_time(value: Optional[str]) -> Optional[str]:
    """Typer callback that validates HH:MM[:SS] format for time options."""
    if value is None:
        return value
    if not _TIME_RE.match(value):
        raise typer.BadParameter(f"Invalid time '{value}'. Expected format: HH:MM (e.g. 13:30)")
    try:
        parse_time(value)
    except ValueError:
        raise typer.BadParameter(f"Invalid time '{value}'. Expected format: HH:MM (e.g. 13:30)")
    return value


def parse_date(value: str) -> date:
    """Parse YYYY-MM-DD date string."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_time(value: str) -> time:
    """Parse HH:MM or HH:MM:SS time string."""
    fmt = "%H:%M:%S" if value.count(":") == 2 else "%H:%M"
    return datetime.strptime(value, fmt).time()


def iter_days(start: date, count: int) -> Generator[date, None, None]:
    """Yield ``count`` consecutive dates beginning at ``start``."""
    for offset in range(max(count, 0)):
        yield start + timedelta(days=offset)
