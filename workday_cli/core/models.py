"""Lightweight data models shared by the oracle, calculator and refresh loop."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class DayType(str, Enum):
    """Working/resting classification of a calendar date."""

    WORKING = "working"
    RESTING = "resting"


def seconds_of_day(value: time) -> int:
    """Whole seconds since midnight; microseconds are truncated."""
    return value.hour * 3600 + value.minute * 60 + value.second


@dataclass(frozen=True)
class WorkWindow:
    """Paid part of the day. ``end <= start`` is allowed and has no span."""

    start: time = time(9, 0)
    end: time = time(18, 0)

    @property
    def total_seconds(self) -> int:
        return seconds_of_day(self.end) - seconds_of_day(self.start)


@dataclass(frozen=True)
class WorkdayClassification:
    """Classification metadata for a date."""

    day: date
    day_type: DayType
    source: str = "remote"
    holiday_type: Optional[int] = None
    name: Optional[str] = None

    @property
    def is_working(self) -> bool:
        return self.day_type is DayType.WORKING


@dataclass(frozen=True)
class ProgressSnapshot:
    """Progress through the work window at one instant."""

    percent: float
    earned_today: Decimal
    daily_salary: Decimal
    remaining_minutes: Optional[int] = None


@dataclass(frozen=True)
class RestingState:
    day: date
    day_type: DayType = DayType.RESTING


@dataclass(frozen=True)
class WorkingState:
    day: date
    snapshot: ProgressSnapshot
    day_type: DayType = DayType.WORKING


RenderableState = Union[RestingState, WorkingState]
