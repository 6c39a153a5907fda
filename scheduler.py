"""Runs the daily reset check on a host event loop (Tk's ``after``)."""

import logging

from config import RESET_CHECK_MS

logger = logging.getLogger(__name__)


class ResetTicker:
    def __init__(self, schedule, cancel, store, interval_ms: int = RESET_CHECK_MS):
        """
        schedule: callable(ms, callback) -> job id, e.g. ``widget.after``
        cancel: callable(job id), e.g. ``widget.after_cancel``
        """
        self.schedule = schedule
        self.cancel = cancel
        self.store = store
        self.interval_ms = interval_ms
        self.running = False
        self._job = None

    def start(self):
        if self.running:
            return
        self.running = True
        logger.debug("Reset check every %d ms", self.interval_ms)
        self._job = self.schedule(self.interval_ms, self._tick)

    def stop(self):
        self.running = False
        if self._job is not None:
            self.cancel(self._job)
            self._job = None

    def _tick(self):
        self._job = None
        self.store.check_daily_reset()
        if self.running:
            self._job = self.schedule(self.interval_ms, self._tick)
