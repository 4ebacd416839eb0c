"""Per-date memoization of workday classifications."""

from __future__ import annotations

import logging
import threading
from datetime import date
from typing import Dict, Optional, Protocol

from workday_cli.core.models import DayType

logger = logging.getLogger(__name__)


class Classifier(Protocol):
    def classify(self, day: date) -> DayType: ...


class DailyWorkdayCache:
    """Remember one classification per calendar date for the process lifetime.

    Lookups for the same missing date are serialized so the classifier runs
    once; lookups for different dates do not block each other. Entries are
    kept in memory only.
    """

    def __init__(self, classifier: Classifier, max_days: Optional[int] = None) -> None:
        self.classifier = classifier
        self.max_days = max_days if max_days and max_days > 0 else None
        self._entries: Dict[date, DayType] = {}
        self._lock = threading.Lock()
        self._pending: Dict[date, threading.Lock] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, day: object) -> bool:
        with self._lock:
            return day in self._entries

    def peek(self, day: date) -> Optional[DayType]:
        with self._lock:
            return self._entries.get(day)

    def get_or_classify(self, day: date) -> DayType:
        with self._lock:
            cached = self._entries.get(day)
            if cached is not None:
                return cached
            day_lock = self._pending.setdefault(day, threading.Lock())

        with day_lock:
            with self._lock:
                cached = self._entries.get(day)
            if cached is not None:
                return cached

            logger.debug("Classifying %s", day.isoformat())
            result = self.classifier.classify(day)

            with self._lock:
                self._entries[day] = result
                self._pending.pop(day, None)
                self._evict()
            return result

    def invalidate(self) -> None:
        with self._lock:
            self._entries.clear()

    def _evict(self) -> None:
        if self.max_days is None:
            return
        while len(self._entries) > self.max_days:
            del self._entries[next(iter(self._entries))]
