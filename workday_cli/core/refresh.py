"""Periodic recomputation of the workday state.

``RefreshLoop.tick`` is the whole decision: classify the date, then either
report a resting day or compute progress through the work window. The loop
around it owns a single worker thread, so blocking holiday lookups never run
on the thread that renders. Results leave the worker only through the
``on_state`` callback.
"""

from __future__ import annotations

import logging
import threading
import time as time_module
from datetime import date, datetime, time
from typing import Callable, Optional

from workday_cli.core.cache import DailyWorkdayCache
from workday_cli.core.constants import DEFAULT_REFRESH_INTERVAL_SECONDS
from workday_cli.core.models import DayType, RenderableState, RestingState, WorkingState
from workday_cli.core.progress import compute_progress, daily_salary
from workday_cli.core.settings import WorkSettings

logger = logging.getLogger(__name__)

SettingsProvider = Callable[[], WorkSettings]
StateCallback = Callable[[RenderableState], None]
ErrorCallback = Callable[[Exception], None]
Clock = Callable[[], datetime]


class RefreshLoop:
    def __init__(
        self,
        cache: DailyWorkdayCache,
        settings_provider: SettingsProvider,
        interval_seconds: float = DEFAULT_REFRESH_INTERVAL_SECONDS,
        on_state: Optional[StateCallback] = None,
        on_error: Optional[ErrorCallback] = None,
        clock: Clock = datetime.now,
    ) -> None:
        self.cache = cache
        self.settings_provider = settings_provider
        self.interval_seconds = max(1.0, float(interval_seconds))
        self.clock = clock
        self._on_state = on_state
        self._on_error = on_error
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self._wake_event = threading.Event()
        self._lock = threading.Lock()
        self._generation = 0

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def tick(self, today: date, now: time, settings: WorkSettings) -> RenderableState:
        """Compute the state for ``today`` at ``now``.

        Pure apart from filling the workday cache on the first call per date.
        """
        if self.cache.get_or_classify(today) is DayType.RESTING:
            return RestingState(day=today)

        salary = daily_salary(settings.salary, settings.days)
        snapshot = compute_progress(now, settings.window, salary)
        return WorkingState(day=today, snapshot=snapshot)

    def refresh(self) -> RenderableState:
        """Run one tick against the current clock and settings, then publish it."""
        with self._lock:
            generation = self._generation
        state = self._compute()
        self._publish(state, generation)
        return state

    def request_refresh(self) -> None:
        """Ask the worker for an immediate tick, e.g. after settings changed."""
        self._wake_event.set()

    def start(self) -> bool:
        with self._lock:
            if self.is_running:
                return False

            # Each worker owns its stop event; a restart must not revive an abandoned one.
            self._stop_event = threading.Event()
            self._wake_event.clear()
            self._thread = threading.Thread(
                target=self._run_loop,
                args=(self._generation, self._stop_event),
                name="workday-refresh",
                daemon=True,
            )
            self._thread.start()
            return True

    def stop(self, timeout_seconds: float = 5.0) -> None:
        with self._lock:
            thread = self._thread
            # Anything still in flight belongs to the old generation and is dropped.
            self._generation += 1
            if thread is None:
                return
            self._stop_event.set()
            self._wake_event.set()

        thread.join(timeout=timeout_seconds)
        if thread.is_alive():
            logger.debug("Refresh worker still busy after %.1fs, abandoning it", timeout_seconds)

        with self._lock:
            if self._thread is thread:
                self._thread = None

    def _compute(self) -> RenderableState:
        current = self.clock()
        settings = self.settings_provider()
        return self.tick(current.date(), current.time(), settings)

    def _publish(self, state: RenderableState, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding stale state for %s", state.day.isoformat())
                return
            callback = self._on_state
        if callback is not None:
            callback(state)

    def _run_loop(self, generation: int, stop_event: threading.Event) -> None:
        next_due = time_module.monotonic()

        while not stop_event.is_set() and generation == self._generation:
            now = time_module.monotonic()
            if now < next_due:
                self._wake_event.wait(next_due - now)
                self._wake_event.clear()
                if stop_event.is_set():
                    break

            try:
                self._publish(self._compute(), generation)
            except Exception as exc:  # noqa: BLE001
                logger.exception("Refresh tick failed")
                callback = self._on_error
                if callback is not None:
                    callback(exc)

            next_due = time_module.monotonic() + self.interval_seconds
