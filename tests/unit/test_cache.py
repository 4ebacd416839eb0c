from __future__ import annotations

import threading
import time
from datetime import date, timedelta

from workday_cli.core.api import HolidayAPIError
from workday_cli.core.cache import DailyWorkdayCache
from workday_cli.core.models import DayType
from workday_cli.core.oracle import WorkdayOracle

DAY = date(2026, 10, 13)


def test_first_lookup_classifies_and_is_cached(fake_classifier) -> None:
    cache = DailyWorkdayCache(fake_classifier)
    assert cache.peek(DAY) is None
    assert DAY not in cache

    assert cache.get_or_classify(DAY) is DayType.WORKING
    assert cache.peek(DAY) is DayType.WORKING
    assert DAY in cache
    assert len(cache) == 1
    assert fake_classifier.calls == [DAY]


def test_cached_answer_survives_remote_change(classifier_factory) -> None:
    classifier = classifier_factory({DAY: DayType.WORKING})
    cache = DailyWorkdayCache(classifier)
    assert cache.get_or_classify(DAY) is DayType.WORKING

    classifier.answers[DAY] = DayType.RESTING
    for _ in range(5):
        assert cache.get_or_classify(DAY) is DayType.WORKING
    assert classifier.calls == [DAY]


def test_each_date_gets_its_own_entry(fake_classifier) -> None:
    cache = DailyWorkdayCache(fake_classifier)
    for offset in range(3):
        cache.get_or_classify(DAY + timedelta(days=offset))
    assert len(cache) == 3
    assert fake_classifier.calls == [DAY, DAY + timedelta(days=1), DAY + timedelta(days=2)]


def test_invalidate_forces_requery(classifier_factory) -> None:
    classifier = classifier_factory({DAY: DayType.WORKING})
    cache = DailyWorkdayCache(classifier)
    cache.get_or_classify(DAY)

    classifier.answers[DAY] = DayType.RESTING
    cache.invalidate()

    assert len(cache) == 0
    assert cache.get_or_classify(DAY) is DayType.RESTING
    assert classifier.calls == [DAY, DAY]


def test_max_days_evicts_oldest_dates(fake_classifier) -> None:
    cache = DailyWorkdayCache(fake_classifier, max_days=2)
    days = [DAY + timedelta(days=offset) for offset in range(4)]
    for day in days:
        cache.get_or_classify(day)

    assert len(cache) == 2
    assert days[0] not in cache
    assert days[1] not in cache
    assert days[2] in cache
    assert days[3] in cache


def test_zero_max_days_means_unbounded(fake_classifier) -> None:
    cache = DailyWorkdayCache(fake_classifier, max_days=0)
    for offset in range(40):
        cache.get_or_classify(DAY + timedelta(days=offset))
    assert len(cache) == 40


def test_fallback_result_is_cached_too() -> None:
    class FailingAPI:
        calls = 0

        def get_day_info(self, day: date):  # type: ignore[no-untyped-def]
            FailingAPI.calls += 1
            raise HolidayAPIError("offline")

    cache = DailyWorkdayCache(WorkdayOracle(api=FailingAPI()))
    assert cache.get_or_classify(DAY) is DayType.WORKING
    assert cache.get_or_classify(DAY) is DayType.WORKING
    assert FailingAPI.calls == 1


def test_concurrent_lookups_for_same_date_classify_once() -> None:
    class SlowClassifier:
        def __init__(self) -> None:
            self.calls = 0
            self._lock = threading.Lock()

        def classify(self, day: date) -> DayType:
            with self._lock:
                self.calls += 1
            time.sleep(0.05)
            return DayType.RESTING

    classifier = SlowClassifier()
    cache = DailyWorkdayCache(classifier)
    results = []
    results_lock = threading.Lock()

    def worker() -> None:
        value = cache.get_or_classify(DAY)
        with results_lock:
            results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=5)

    assert results == [DayType.RESTING] * 8
    assert classifier.calls == 1


def test_max_days_keeps_a_freshly_added_older_date(fake_classifier) -> None:
    cache = DailyWorkdayCache(fake_classifier, max_days=2)
    later = [DAY + timedelta(days=offset) for offset in (5, 6)]
    for day in later:
        cache.get_or_classify(day)

    cache.get_or_classify(DAY)

    assert DAY in cache
    assert later[0] not in cache
    assert later[1] in cache
    cache.get_or_classify(DAY)
    assert fake_classifier.calls == later + [DAY]
