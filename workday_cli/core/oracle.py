"""Workday classification backed by the holiday service.

The remote answer is trusted only when it is well formed. Anything else
(unreachable host, timeouts, error codes, odd payloads) degrades to the plain
weekday rule and is reported on the diagnostic logger.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Optional

from workday_cli.core.api import HolidayAPI, HolidayResponseError
from workday_cli.core.constants import WORKING_HOLIDAY_TYPES
from workday_cli.core.models import DayType, WorkdayClassification

logger = logging.getLogger(__name__)


def weekday_day_type(day: date) -> DayType:
    """Monday to Friday work, weekends rest."""
    return DayType.WORKING if day.weekday() < 5 else DayType.RESTING


def parse_day_info(day: date, payload: Dict[str, Any]) -> WorkdayClassification:
    """Turn a holiday service payload into a classification.

    Raises HolidayResponseError when the payload is not a successful answer.
    """
    code = payload.get("code")
    if code != 0:
        raise HolidayResponseError(f"Holiday service returned code {code!r}")

    type_info = payload.get("type")
    if not isinstance(type_info, dict):
        raise HolidayResponseError("Holiday service payload has no 'type' object")

    holiday_type = type_info.get("type")
    if isinstance(holiday_type, bool) or not isinstance(holiday_type, int):
        raise HolidayResponseError(f"Unexpected holiday type {holiday_type!r}")

    day_type = DayType.WORKING if holiday_type in WORKING_HOLIDAY_TYPES else DayType.RESTING
    name = type_info.get("name")
    return WorkdayClassification(
        day=day,
        day_type=day_type,
        source="remote",
        holiday_type=holiday_type,
        name=str(name) if name else None,
    )


class WorkdayOracle:
    """Classify dates as working or resting days."""

    def __init__(
        self,
        api: Optional[HolidayAPI] = None,
        diagnostics: Optional[logging.Logger] = None,
    ) -> None:
        self.api = api or HolidayAPI()
        self.diagnostics = diagnostics or logger

    def classify_with_metadata(self, day: date) -> WorkdayClassification:
        try:
            payload = self.api.get_day_info(day)
            return parse_day_info(day, payload)
        except Exception as exc:  # noqa: BLE001
            self.diagnostics.warning(
                "Holiday lookup failed for %s, using weekday rule: %s",
                day.isoformat(),
                exc,
            )
        return WorkdayClassification(day=day, day_type=weekday_day_type(day), source="fallback")

    def classify(self, day: date) -> DayType:
        return self.classify_with_metadata(day).day_type

    def is_workday(self, day: date) -> bool:
        return self.classify(day) is DayType.WORKING

    def is_workday_today(self) -> bool:
        return self.is_workday(date.today())
