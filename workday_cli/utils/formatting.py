"""Formatting helpers used by console and JSON output."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional, Union

from workday_cli.core.constants import COLOR_LOW_MAX, COLOR_MID_MAX, DEFAULT_CURRENCY, HOLIDAY_TYPE_LABELS
from workday_cli.core.models import RenderableState, WorkdayClassification, WorkingState

_CENTS = Decimal("0.01")


def round_money(value: Union[Decimal, float, int]) -> Decimal:
    """Round to cents, half up."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_money(value: Union[Decimal, float, int], currency: str = DEFAULT_CURRENCY) -> str:
    return f"{currency}{round_money(value)}"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def format_remaining(minutes: Optional[int]) -> str:
    """Format minutes as e.g. ``4h 30m``."""
    if minutes is None or minutes <= 0:
        return ""
    hours, mins = divmod(int(minutes), 60)
    return f"{hours}h {mins}m"


def progress_color(state: RenderableState) -> str:
    """Rich color for the progress bar."""
    if not isinstance(state, WorkingState):
        return "grey50"
    percent = state.snapshot.percent
    if percent < COLOR_LOW_MAX:
        return "dark_orange"
    if percent < COLOR_MID_MAX:
        return "green"
    return "dodger_blue1"


def status_text(state: RenderableState, currency: str = DEFAULT_CURRENCY) -> str:
    """Short label drawn on the progress bar."""
    if not isinstance(state, WorkingState):
        return f"Resting today, earned {format_money(0, currency)}"
    snapshot = state.snapshot
    return f"{format_percent(snapshot.percent)} {format_money(snapshot.earned_today, currency)}"


def tooltip_text(state: RenderableState, currency: str = DEFAULT_CURRENCY) -> str:
    """Longer description shown next to the bar."""
    if not isinstance(state, WorkingState):
        return (
            "Today is not a working day (weekend, public holiday or day off), "
            f"earned today: {format_money(0, currency)}"
        )

    snapshot = state.snapshot
    parts = [
        f"Workday progress: {format_percent(snapshot.percent)}",
        f"Earned today ≈ {format_money(snapshot.earned_today, currency)}",
    ]
    remaining = format_remaining(snapshot.remaining_minutes)
    if remaining:
        parts.append(f"About {remaining} left")
    parts.append(f"Daily salary ≈ {format_money(snapshot.daily_salary, currency)}")
    parts.append("Edit with `workday settings set`")
    return " | ".join(parts)


def state_to_payload(state: RenderableState) -> Dict[str, Any]:
    """JSON-friendly view of a renderable state."""
    payload: Dict[str, Any] = {
        "date": state.day.isoformat(),
        "day_type": state.day_type.value,
    }
    if isinstance(state, WorkingState):
        snapshot = state.snapshot
        payload["progress"] = {
            "percent": round(snapshot.percent, 2),
            "earned_today": float(round_money(snapshot.earned_today)),
            "daily_salary": float(round_money(snapshot.daily_salary)),
            "remaining_minutes": snapshot.remaining_minutes,
        }
    else:
        payload["progress"] = None
    return payload


def classification_to_payload(result: WorkdayClassification) -> Dict[str, Any]:
    return {
        "date": result.day.isoformat(),
        "weekday": result.day.strftime("%A"),
        "day_type": result.day_type.value,
        "source": result.source,
        "holiday_type": result.holiday_type,
        "label": HOLIDAY_TYPE_LABELS.get(result.holiday_type) if result.holiday_type is not None else None,
        "name": result.name,
    }
