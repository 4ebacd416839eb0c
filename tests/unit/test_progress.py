from __future__ import annotations

from datetime import time
from decimal import Decimal

import pytest

from workday_cli.core.models import WorkWindow
from workday_cli.core.progress import compute_progress, daily_salary

WINDOW = WorkWindow(start=time(9, 0), end=time(18, 0))


def test_before_start_is_zero() -> None:
    snapshot = compute_progress(time(8, 59, 59), WINDOW, Decimal("450"))
    assert snapshot.percent == 0.0
    assert snapshot.earned_today == Decimal(0)
    assert snapshot.daily_salary == Decimal("450")
    assert snapshot.remaining_minutes is None


def test_at_start_is_zero_without_remaining() -> None:
    snapshot = compute_progress(time(9, 0), WINDOW, Decimal("450"))
    assert snapshot.percent == 0.0
    assert snapshot.earned_today == Decimal(0)
    assert snapshot.remaining_minutes is None


@pytest.mark.parametrize("now", [time(18, 0), time(18, 0, 1), time(23, 59)])
def test_at_or_after_end_is_full_day(now: time) -> None:
    snapshot = compute_progress(now, WINDOW, Decimal("450"))
    assert snapshot.percent == 100.0
    assert snapshot.earned_today == Decimal("450")
    assert snapshot.remaining_minutes is None


def test_midpoint_is_half() -> None:
    snapshot = compute_progress(time(13, 30), WINDOW, Decimal("450"))
    assert snapshot.percent == pytest.approx(50.0)
    assert snapshot.earned_today == Decimal("225")
    assert snapshot.remaining_minutes == 270


def test_end_to_end_salary_scenario() -> None:
    salary = daily_salary(Decimal("9900"), 22)
    assert salary == Decimal("450")

    snapshot = compute_progress(time(13, 30), WINDOW, salary)
    assert f"{snapshot.percent:.2f}" == "50.00"
    assert snapshot.earned_today.quantize(Decimal("0.01")) == Decimal("225.00")
    assert snapshot.remaining_minutes == 270


def test_remaining_minutes_are_floor_truncated() -> None:
    snapshot = compute_progress(time(17, 58, 30), WINDOW, Decimal("450"))
    assert snapshot.remaining_minutes == 1

    snapshot = compute_progress(time(17, 59, 30), WINDOW, Decimal("450"))
    assert snapshot.remaining_minutes == 0
    assert 0 < snapshot.percent < 100


def test_microseconds_are_ignored() -> None:
    plain = compute_progress(time(10, 0, 0), WINDOW, Decimal("450"))
    fractional = compute_progress(time(10, 0, 0, 999999), WINDOW, Decimal("450"))
    assert plain == fractional


def test_earnings_are_not_rounded_during_computation() -> None:
    snapshot = compute_progress(time(9, 0, 1), WINDOW, Decimal("450"))
    assert snapshot.earned_today == Decimal("450") / 32400
    assert snapshot.earned_today != snapshot.earned_today.quantize(Decimal("0.01"))


def test_progress_is_monotonic_through_the_day() -> None:
    last_percent = -1.0
    last_earned = Decimal(-1)
    for minute in range(8 * 60, 19 * 60, 7):
        now = time(minute // 60, minute % 60)
        snapshot = compute_progress(now, WINDOW, Decimal("450"))
        assert snapshot.percent >= last_percent
        assert snapshot.earned_today >= last_earned
        assert 0.0 <= snapshot.percent <= 100.0
        last_percent = snapshot.percent
        last_earned = snapshot.earned_today


def test_remaining_only_inside_open_interval() -> None:
    for minute in range(0, 24 * 60, 13):
        now = time(minute // 60, minute % 60)
        snapshot = compute_progress(now, WINDOW, Decimal("450"))
        if 0 < snapshot.percent < 100:
            assert snapshot.remaining_minutes is not None
            assert snapshot.remaining_minutes >= 0
        else:
            assert snapshot.remaining_minutes is None


@pytest.mark.parametrize(
    "window",
    [
        WorkWindow(start=time(18, 0), end=time(9, 0)),
        WorkWindow(start=time(12, 0), end=time(12, 0)),
    ],
)
@pytest.mark.parametrize("now", [time(0, 0), time(9, 0), time(12, 0), time(13, 0), time(18, 0), time(23, 59)])
def test_degenerate_window_reports_no_progress(window: WorkWindow, now: time) -> None:
    snapshot = compute_progress(now, window, Decimal("450"))
    assert snapshot.percent == 0.0
    assert snapshot.earned_today == Decimal(0)
    assert snapshot.remaining_minutes is None


def test_accepts_float_salary() -> None:
    snapshot = compute_progress(time(18, 0), WINDOW, 450.5)
    assert snapshot.earned_today == Decimal("450.5")


def test_daily_salary_guards_zero_days() -> None:
    assert daily_salary(Decimal("1000"), 0) == Decimal("1000")
    assert daily_salary(15000.0, 20) == Decimal("750")
