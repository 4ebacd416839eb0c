"""Static constants for the workday CLI."""

from __future__ import annotations

HOLIDAY_API_BASE = "https://timor.tech/api/holiday"

# `type.type` codes returned by the holiday service.
HOLIDAY_TYPE_WORKDAY = 0
HOLIDAY_TYPE_WEEKEND = 1
HOLIDAY_TYPE_HOLIDAY = 2
HOLIDAY_TYPE_MAKEUP_WORKDAY = 3

WORKING_HOLIDAY_TYPES = frozenset({HOLIDAY_TYPE_WORKDAY, HOLIDAY_TYPE_MAKEUP_WORKDAY})

HOLIDAY_TYPE_LABELS = {
    HOLIDAY_TYPE_WORKDAY: "Workday",
    HOLIDAY_TYPE_WEEKEND: "Weekend",
    HOLIDAY_TYPE_HOLIDAY: "Holiday",
    HOLIDAY_TYPE_MAKEUP_WORKDAY: "Make-up workday",
}

DEFAULT_WORK_DAYS_PER_MONTH = 22
DEFAULT_START_TIME = "09:00"
DEFAULT_END_TIME = "18:00"
DEFAULT_MONTHLY_SALARY = 15000.0

DEFAULT_TIMEOUT_SECONDS = 5.0
DEFAULT_REFRESH_INTERVAL_SECONDS = 60.0
DEFAULT_CURRENCY = "¥"

# Progress bar color thresholds (percent).
COLOR_LOW_MAX = 30
COLOR_MID_MAX = 70
