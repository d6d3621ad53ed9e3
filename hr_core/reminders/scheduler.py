# hr_core/reminders/scheduler.py
from __future__ import annotations

import logging
import threading

from django.db import close_old_connections

from hr_core.common.clock import Clock, SystemClock
from hr_core.reminders.dispatcher import DispatchReport, ReminderDispatcher

logger = logging.getLogger(__name__)


class ReminderScheduler:
    """
    Runs dispatcher ticks on interval boundaries (by default every minute,
    at second zero) until stopped. Single instance per deployment: ticks are
    not coordinated across processes.
    """

    def __init__(
        self,
        dispatcher: ReminderDispatcher,
        *,
        interval_seconds: int = 60,
        clock: Clock | None = None,
        stop_event: threading.Event | None = None,
    ):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.dispatcher = dispatcher
        self.interval_seconds = interval_seconds
        self.clock = clock or SystemClock()
        self._stop = stop_event or threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def seconds_until_next_tick(self) -> float:
        now = self.clock.now()
        elapsed = (now.minute * 60 + now.second + now.microsecond / 1_000_000) % self.interval_seconds
        return self.interval_seconds - elapsed

    def run_once(self) -> DispatchReport | None:
        try:
            return self.dispatcher.tick()
        except Exception:
            logger.exception("Reminder tick failed")
            return None
        finally:
            close_old_connections()

    def run_forever(self) -> None:
        logger.info("Medicine reminder scheduler started (every %ss)", self.interval_seconds)
        while not self._stop.wait(self.seconds_until_next_tick()):
            self.run_once()
        logger.info("Medicine reminder scheduler stopped")

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self.run_forever, name="reminder-dispatcher", daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
